"""
Module with classes that define the parsed keymap representation, an ordered sequence of layers
each holding rows of raw keycode strings.
"""

from itertools import chain
from typing import NamedTuple, Sequence

from pydantic import BaseModel, Field, field_validator

from keyball_drawer.classify import is_empty_key


class LayerStats(NamedTuple):
    """Key counts for a single layer."""

    total: int
    assigned: int
    unassigned: int


class Layer(BaseModel, frozen=True):
    """
    One layer of the keymap, with its position among the parsed layers (0 for the base layer)
    and its keys as rows of keycode strings in source order.
    """

    index: int = Field(ge=0)
    keys: list[list[str]]

    @field_validator("keys")
    @classmethod
    def check_rows(cls, val: list[list[str]]) -> list[list[str]]:
        """Layers are only ever built from at least one non-empty row."""
        assert val and all(val), "Layer needs at least one row and rows cannot be empty"
        return val

    def iter_keys(self):
        """Iterate over all keys of the layer, row by row."""
        return chain.from_iterable(self.keys)

    def stats(self) -> LayerStats:
        """Count total, assigned (non-empty) and unassigned keys on this layer."""
        total = assigned = 0
        for key in self.iter_keys():
            total += 1
            assigned += not is_empty_key(key)
        return LayerStats(total, assigned, total - assigned)


def max_label_length(layers: Sequence[Layer], default: int = 8) -> int:
    """Length of the longest keycode string over all layers, `default` if there are no keys."""
    return max((len(key) for layer in layers for key in layer.iter_keys()), default=default)


def dump_layers(layers: Sequence[Layer]) -> dict:
    """Returns a dict-valued dump of the layers, keyed by layer name and keeping rows."""
    return {"layers": {f"L{layer.index}": [list(row) for row in layer.keys] for layer in layers}}
