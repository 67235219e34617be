"""
Module containing the physical shape of the split keyboard and the layout engine, which places
every key of every parsed layer on the canvas in pixel coordinates.
"""

import logging
from dataclasses import dataclass
from typing import Literal, Sequence

from keyball_drawer.classify import KeyCategory, classify_key
from keyball_drawer.config import DrawConfig, ParseConfig
from keyball_drawer.keymap import Layer, max_label_length

logger = logging.getLogger(__name__)

Side = Literal["left", "right", "extra"]


@dataclass(frozen=True, slots=True)
class Point:
    """Simple class representing a 2d point."""

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)


@dataclass(frozen=True, slots=True)
class RowSpec:
    """
    Number of keys on each half for one physical row, with the horizontal stagger of each half
    in units of key cells (key width plus spacing).
    """

    left_count: int
    left_offset: float
    right_count: int
    right_offset: float


@dataclass(frozen=True, slots=True)
class SplitGeometry:
    """Shape of a split keyboard: its rows and the number of column slots reserved for each half."""

    rows: tuple[RowSpec, ...]
    left_slots: int
    right_slots: int


# left thumb row staggered right by 2 keys, right thumb row staggered left by 1
KEYBALL44 = SplitGeometry(
    rows=(
        RowSpec(6, 0.0, 6, 0.0),
        RowSpec(6, 0.0, 6, 0.0),
        RowSpec(6, 0.0, 6, 0.0),
        RowSpec(5, 2.0, 3, -1.0),
    ),
    left_slots=8,
    right_slots=6,
)


@dataclass(frozen=True, slots=True)
class PlacedKey:
    """
    A key box positioned on the canvas; `pos` is the top left corner. `visible` is False for keys
    that are laid out but not drawn.
    """

    pos: Point
    width: float
    height: float
    label: str
    category: KeyCategory
    layer: int
    row: int
    col: int
    side: Side
    visible: bool = True


@dataclass(frozen=True, slots=True)
class PlacedHeader:
    """Title of a layer, `pos` is the start of its baseline."""

    pos: Point
    text: str


@dataclass(frozen=True, slots=True)
class BoardLayout:
    """Result of laying out all layers: canvas dimensions plus placed keys and layer titles in drawing order."""

    width: float
    height: float
    key_width: float
    keys: tuple[PlacedKey, ...]
    headers: tuple[PlacedHeader, ...]


class LayoutEngine:
    """Computes pixel positions of the keys of all layers for a given split geometry and drawing config."""

    def __init__(
        self,
        config: DrawConfig | None = None,
        geometry: SplitGeometry = KEYBALL44,
        parse_config: ParseConfig | None = None,
    ) -> None:
        self.cfg = config if config is not None else DrawConfig()
        self.geometry = geometry
        self.parse_cfg = parse_config if parse_config is not None else ParseConfig()

    def key_width(self, layers: Sequence[Layer]) -> float:
        """Key width wide enough for the longest legend over all layers."""
        return max(
            self.cfg.min_key_w,
            max_label_length(layers) * self.cfg.char_w + 2 * self.cfg.key_padding,
        )

    def layer_height(self) -> float:
        """Height reserved for the title and key rows of a single layer, without the spacing after it."""
        return len(self.geometry.rows) * (self.cfg.key_h + self.cfg.key_spacing) + self.cfg.layer_block_extra_h

    def canvas_size(self, layers: Sequence[Layer], key_w: float) -> Point:
        """Width and height of the whole drawing."""
        cell = key_w + self.cfg.key_spacing
        width = (
            2 * self.cfg.margin
            + self.geometry.left_slots * cell
            + self.cfg.split_gap
            + self.geometry.right_slots * cell
        )
        height = self.cfg.margin + len(layers) * (self.layer_height() + self.cfg.layer_spacing)
        return Point(width, height)

    def _place_row(self, layer: Layer, row_ind: int, row: Sequence[str], y: float, key_w: float) -> list[PlacedKey]:
        spec = self.geometry.rows[row_ind]
        cell = key_w + self.cfg.key_spacing
        right_base_x = self.cfg.margin + self.geometry.left_slots * cell + self.cfg.split_gap
        is_bottom_row = row_ind == len(self.geometry.rows) - 1

        def place(x: float, col: int, key: str, side: Side) -> PlacedKey:
            category = classify_key(key, layer.index, self.parse_cfg)
            return PlacedKey(
                pos=Point(x, y),
                width=key_w,
                height=self.cfg.key_h,
                label=key,
                category=category,
                layer=layer.index,
                row=row_ind,
                col=col,
                side=side,
                # empty right thumb keys are left out of the drawing
                visible=not (side == "right" and is_bottom_row and category.kind == "empty"),
            )

        placed = []
        for col, key in enumerate(row[: spec.left_count]):
            placed.append(place(self.cfg.margin + (spec.left_offset + col) * cell, col, key, "left"))

        right_end = spec.left_count + spec.right_count
        for col, key in enumerate(row[spec.left_count : right_end]):
            placed.append(place(right_base_x + (spec.right_offset + col) * cell, col, key, "right"))

        # keys that do not fit the geometry row continue after the right half, ignoring its stagger
        for col, key in enumerate(row[right_end:], start=spec.right_count):
            placed.append(place(right_base_x + col * cell, col, key, "extra"))

        return placed

    def layout(self, layers: Sequence[Layer]) -> BoardLayout:
        """Place the title and keys of each layer, one layer below the other."""
        key_w = self.key_width(layers)
        size = self.canvas_size(layers, key_w)
        logger.debug("canvas %sx%s for %d layers with key width %s", size.x, size.y, len(layers), key_w)

        keys: list[PlacedKey] = []
        headers: list[PlacedHeader] = []
        y = self.cfg.margin
        for layer in layers:
            headers.append(PlacedHeader(Point(self.cfg.margin, y), f"Layer {layer.index}"))
            y += self.cfg.layer_header_h

            for row_ind, row in enumerate(layer.keys):
                if row_ind >= len(self.geometry.rows):
                    logger.debug("layer %d: row %d does not fit the physical layout, skipping", layer.index, row_ind)
                    continue
                row_y = y + row_ind * (self.cfg.key_h + self.cfg.key_spacing)
                keys += self._place_row(layer, row_ind, row, row_y, key_w)

            y += len(self.geometry.rows) * (self.cfg.key_h + self.cfg.key_spacing) + self.cfg.layer_spacing

        return BoardLayout(width=size.x, height=size.y, key_width=key_w, keys=tuple(keys), headers=tuple(headers))


def compute_layout(
    layers: Sequence[Layer],
    config: DrawConfig | None = None,
    geometry: SplitGeometry = KEYBALL44,
    parse_config: ParseConfig | None = None,
) -> BoardLayout:
    """Lay out all layers on the given split geometry, see LayoutEngine."""
    return LayoutEngine(config, geometry, parse_config).layout(layers)
