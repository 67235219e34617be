"""
Given a QMK keymap.c for the Keyball44 split keyboard, parse the layers of its keymaps array
and draw an SVG showing every layer with color-coded keys.
"""

import logging
import sys
from argparse import ArgumentParser, FileType, Namespace
from importlib.metadata import version
from pathlib import Path
from typing import Sequence

import yaml

from keyball_drawer import logger
from keyball_drawer.config import Config
from keyball_drawer.draw import KeymapDrawer
from keyball_drawer.keymap import Layer, dump_layers
from keyball_drawer.parse import ParseError, QmkKeymapParser


def print_stats(layers: Sequence[Layer]) -> None:
    """Print total, assigned and unassigned key counts for each layer to stdout."""
    for layer in layers:
        stats = layer.stats()
        print(
            f"Layer {layer.index}: Total Keys: {stats.total}, Assigned Keys: {stats.assigned}, "
            f"Unassigned Keys: {stats.unassigned}"
        )


def output_path(keymap_path: str) -> Path:
    """Derive the default SVG output path in the working directory from the keymap file name."""
    if keymap_path in ("-", "<stdin>") or not (stem := Path(keymap_path).stem):
        raise ValueError(f'Unable to derive an output file name from "{keymap_path}", please specify -o/--output')
    return Path(f"{stem}.svg")


def draw(args: Namespace, config: Config) -> None:
    """Parse the keymap and draw it in SVG format to the output file."""
    layers = QmkKeymapParser(config.parse_config).parse(args.keymap_c)
    if not layers:
        logger.warning("no layers found in %s", args.keymap_c.name)

    if args.show_stats:
        print_stats(layers)

    out_path = args.output if args.output is not None else output_path(args.keymap_c.name)
    logger.debug("writing SVG to %s", out_path)
    with open(out_path, "w", encoding="utf-8") as out:
        KeymapDrawer(config=config.draw_config, out=out, layers=layers, parse_config=config.parse_config).print_board()


def parse(args: Namespace, config: Config) -> None:
    """Call the parser for given args and dump YAML representation of the layers to stdout."""
    layers = QmkKeymapParser(config.parse_config).parse(args.keymap_c)
    yaml.safe_dump(
        dump_layers(layers), args.output, width=160, sort_keys=False, default_flow_style=None, allow_unicode=True
    )


def dump_config(args: Namespace, config: Config) -> None:
    """Dump the currently active config, either default or parsed from args."""

    def cfg_str_representer(dumper, in_str):
        if "\n" in in_str:  # use '|' style for multiline strings
            return dumper.represent_scalar("tag:yaml.org,2002:str", in_str, style="|")
        return dumper.represent_scalar("tag:yaml.org,2002:str", in_str)

    yaml.representer.SafeRepresenter.add_representer(str, cfg_str_representer)
    yaml.safe_dump(config.model_dump(), args.output, sort_keys=False, allow_unicode=True)


def main() -> None:
    """Parse the configuration and run the selected command."""
    parser = ArgumentParser(description=__doc__)
    parser.add_argument("-v", "--version", action="version", version=version("keyball-drawer"))
    parser.add_argument("-d", "--debug", action="store_true")
    parser.add_argument(
        "-c",
        "--config",
        help="A YAML file containing settings for parsing and drawing, "
        "default can be dumped using `dump-config` command and to be modified",
        type=FileType("rt", encoding="utf-8"),
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    draw_p = subparsers.add_parser("draw", help="draw an SVG representation of the keymap")
    draw_p.add_argument(
        "keymap_c",
        help='QMK keymap.c file (or stdin for "-", which needs -o/--output) containing the keymaps array',
        type=FileType("rt", encoding="utf-8"),
    )
    draw_p.add_argument(
        "-o",
        "--output",
        help="Output SVG path, defaults to the keymap file name with .svg extension in the working directory",
        type=Path,
    )
    draw_p.add_argument(
        "-s", "--show-stats", help="Print key counts for each layer to stdout", action="store_true"
    )

    parse_p = subparsers.add_parser("parse", help="parse a QMK keymap.c and dump its layers as YAML to stdout")
    parse_p.add_argument("keymap_c", help="QMK keymap.c file to parse", type=FileType("rt", encoding="utf-8"))
    parse_p.add_argument(
        "-o",
        "--output",
        help="Output to path instead of stdout",
        type=FileType("wt", encoding="utf-8"),
        default=sys.stdout,
    )

    dump_p = subparsers.add_parser(
        "dump-config", help="dump default draw and parse config to stdout that can be passed to -c/--config option"
    )
    dump_p.add_argument(
        "-o",
        "--output",
        help="Output to path instead of stdout",
        type=FileType("wt", encoding="utf-8"),
        default=sys.stdout,
    )

    args = parser.parse_args()

    if args.debug:
        logger.setLevel(logging.DEBUG)

    config = Config.model_validate(yaml.safe_load(args.config) or {}) if args.config else Config()

    try:
        match args.command:
            case "draw":
                draw(args, config)
            case "parse":
                parse(args, config)
            case "dump-config":
                dump_config(args, config)
    except (OSError, ValueError, ParseError) as err:
        parser.error(str(err))


if __name__ == "__main__":
    main()
