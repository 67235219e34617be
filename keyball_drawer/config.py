"""
Module containing configuration related to styling of produced SVG and other drawing options,
and the textual markers used while parsing keymaps.
"""

from textwrap import dedent

from pydantic import BaseModel
from pydantic_settings import BaseSettings


class Gradient(BaseModel, frozen=True):
    """Top-to-bottom linear gradient between two colors, used as a key fill."""

    light: str
    dark: str


class DrawConfig(BaseSettings, env_prefix="KEYBALL_", extra="ignore", frozen=True):
    """Configuration related to SVG drawing, including key sizes, spacing amounts and colors."""

    # key height, key width is derived from the longest legend but never below min_key_w
    key_h: float = 60
    min_key_w: float = 60

    # approximate width of a single legend character and padding on each side of a legend
    char_w: float = 7
    key_padding: float = 10

    # gap between neighboring keys, and between the two halves
    key_spacing: float = 5
    split_gap: float = 40

    # vertical padding after each layer
    layer_spacing: float = 120

    # outer padding of the whole drawing
    margin: float = 20

    # vertical advance after a layer title, before the first row of keys
    layer_header_h: float = 40

    # height reserved per layer for the title when sizing the canvas
    layer_block_extra_h: float = 50

    # font size of key legends, used to vertically center the legend baseline
    font_size: float = 11

    # curvature of rounded key rectangles
    key_rx: float = 5

    # canvas background color
    background: str = "#faf8f3"

    # default key fill (GMK WoB/BoW style light grey)
    key_gradient: Gradient = Gradient(light="#e8e8e8", dark="#d0d0d0")

    # fill for special/system keys (GMK accent teal)
    special_gradient: Gradient = Gradient(light="#7ec4a8", dark="#5ca888")

    # fills for layers 1, 2, ...; layer-switch keys on the base layer use the color of their target layer
    layer_gradients: list[Gradient] = [
        Gradient(light="#7cb0d9", dark="#5a8fb8"),  # GMK blue
        Gradient(light="#b888c4", dark="#9668a8"),  # GMK purple
        Gradient(light="#d97c7c", dark="#c25858"),  # GMK red
        Gradient(light="#e8a87c", dark="#d18a58"),  # GMK orange
        Gradient(light="#7ec4a8", dark="#5ca888"),  # GMK teal
        Gradient(light="#88c47c", dark="#68a858"),  # GMK green
        Gradient(light="#d4c47c", dark="#b8a858"),  # GMK yellow
        Gradient(light="#a8a8a8", dark="#888888"),  # GMK dark grey
    ]

    # style CSS to be output in the SVG, `.key-layerN` rules are generated from layer_gradients
    # if you do not need to remove existing definitions, consider using svg_extra_style instead
    svg_style: str = dedent(
        """\
        .key {
            fill: url(#keyGradient);
            stroke: #2c3e50;
            stroke-width: 2;
            filter: drop-shadow(2px 2px 3px rgba(0,0,0,0.2));
            transition: all 0.3s ease;
        }
        .key:hover {
            filter: drop-shadow(3px 3px 5px rgba(0,0,0,0.3));
            transform: translateY(-2px);
        }
        .key-special { fill: url(#specialGradient); }
        .key-empty { fill: #ecf0f1; opacity: 0.5; }

        .key-text {
            fill: #2c3e50;
            font-family: 'SF Mono', 'Monaco', 'Inconsolata', 'Fira Code', monospace;
            font-size: 11px;
            font-weight: 500;
            text-anchor: middle;
            pointer-events: none;
        }
        .layer-title {
            fill: #34495e;
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
            font-size: 20px;
            font-weight: 600;
            letter-spacing: -0.5px;
        }
        """
    )

    # extra CSS to be appended to svg_style
    svg_extra_style: str = ""


class ParseConfig(BaseSettings, env_prefix="KEYBALL_", extra="ignore", frozen=True):
    """Configuration settings related to parsing QMK keymap.c files and classifying keycodes."""

    # a line containing this starts the keymaps array
    keymap_marker: str = "const uint16_t PROGMEM keymaps"

    # layer blocks are invocations of this macro, optionally suffixed like LAYOUT_universal
    layout_macro: str = "LAYOUT"

    # layer functions taking the layer number as the only argument, e.g. MO(1)
    layer_fn_prefixes: list[str] = ["MO(", "TO(", "TG(", "TT(", "OSL(", "DF("]

    # layer functions taking the layer number as the first of two arguments, e.g. LT(2, KC_A)
    layer_tap_prefixes: list[str] = ["LT(", "LM("]

    # keycodes starting with these are drawn as special/system keys on the base layer
    special_prefixes: list[str] = ["RGB_", "BL_", "RESET", "QK_"]


class Config(BaseSettings, env_prefix="KEYBALL_"):
    """All configuration settings used for this module."""

    draw_config: DrawConfig = DrawConfig()
    parse_config: ParseConfig = ParseConfig()
