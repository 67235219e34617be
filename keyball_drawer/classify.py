"""
Module containing the pattern-based classification of QMK keycodes into the
visual categories used for coloring keys.
"""

import re
from dataclasses import dataclass
from typing import Literal, Sequence

from keyball_drawer.config import ParseConfig

CategoryKind = Literal["empty", "layer-ref", "special", "normal", "layer"]

_empty_re = re.compile(r"_+")


@dataclass(frozen=True, slots=True)
class KeyCategory:
    """
    Visual category of a key. `layer` is set for "layer-ref" (the layer a base layer key switches to)
    and "layer" (the non-base layer the key is on) kinds.
    """

    kind: CategoryKind
    layer: int | None = None

    @property
    def css_classes(self) -> list[str]:
        """CSS classes for the key rectangle, both layer kinds share the color of the layer."""
        match self.kind:
            case "empty":
                return ["key", "key-empty"]
            case "special":
                return ["key", "key-special"]
            case "layer-ref" | "layer":
                return ["key", f"key-layer{self.layer}"]
        return ["key"]

    def __str__(self) -> str:
        return f"{self.kind}({self.layer})" if self.layer is not None else self.kind


EMPTY = KeyCategory("empty")
SPECIAL = KeyCategory("special")
NORMAL = KeyCategory("normal")


def is_empty_key(key: str) -> bool:
    """A key is empty (unassigned) if it consists of one or more underscores only, like `_______`."""
    return _empty_re.fullmatch(key) is not None


def _parse_layer_arg(arg: str) -> int | None:
    return int(arg) if arg.isascii() and arg.isdigit() else None


def extract_layer_number(
    key: str,
    layer_fn_prefixes: Sequence[str] | None = None,
    layer_tap_prefixes: Sequence[str] | None = None,
) -> int | None:
    """
    Return the layer number that a layer switching keycode refers to, e.g. 1 for `MO(1)` or 2 for `LT(2, KC_A)`.
    Return None if the key is not a layer switch or its layer argument is not a plain number.
    Prefixes default to the ones in ParseConfig.
    """
    if layer_fn_prefixes is None or layer_tap_prefixes is None:
        cfg = ParseConfig()
        layer_fn_prefixes = cfg.layer_fn_prefixes if layer_fn_prefixes is None else layer_fn_prefixes
        layer_tap_prefixes = cfg.layer_tap_prefixes if layer_tap_prefixes is None else layer_tap_prefixes

    if key.startswith(tuple(layer_fn_prefixes)):
        start, end = key.find("(") + 1, key.find(")")
        if end < start:
            return None
        return _parse_layer_arg(key[start:end])
    if key.startswith(tuple(layer_tap_prefixes)):
        start, end = key.find("(") + 1, key.find(",")
        if end < start:
            return None
        # the layer argument of two-argument functions may be padded, e.g. LT( 1 , KC_A)
        return _parse_layer_arg(key[start:end].strip())
    return None


def classify_key(key: str, layer_index: int, config: ParseConfig | None = None) -> KeyCategory:
    """
    Classify a key token on the given layer. Layer switches and special keys are only detected
    on the base layer, keys on other layers take the category of the layer they are on.
    """
    if is_empty_key(key):
        return EMPTY

    if layer_index > 0:
        return KeyCategory("layer", layer_index)

    if config is None:
        config = ParseConfig()
    if (to_layer := extract_layer_number(key, config.layer_fn_prefixes, config.layer_tap_prefixes)) is not None:
        return KeyCategory("layer-ref", to_layer)
    if key.startswith(tuple(config.special_prefixes)):
        return SPECIAL
    return NORMAL
