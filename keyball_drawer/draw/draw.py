"""
Module that contains the KeymapDrawer class which takes parsed keymap layers and
the physical split layout, then draws an SVG representation of all layers.
"""

import logging
from io import StringIO
from typing import Sequence, TextIO

from keyball_drawer.config import DrawConfig, ParseConfig
from keyball_drawer.draw.utils import UtilsMixin
from keyball_drawer.keymap import Layer
from keyball_drawer.physical_layout import KEYBALL44, LayoutEngine, PlacedKey, Point, SplitGeometry

logger = logging.getLogger(__name__)


class KeymapDrawer(UtilsMixin):
    """Class that draws a keyboard representation in SVG."""

    def __init__(  # pylint: disable=too-many-arguments
        self,
        config: DrawConfig,
        out: TextIO,
        layers: Sequence[Layer],
        geometry: SplitGeometry = KEYBALL44,
        parse_config: ParseConfig | None = None,
    ) -> None:
        self.cfg = config
        self.layers = layers
        self.engine = LayoutEngine(config, geometry, parse_config)
        self.output_stream = out
        self.out = StringIO()

    def print_layer_header(self, p: Point, header: str) -> None:
        """Print a layer title that precedes the keys of the layer."""
        self._draw_text(p, header, ["layer-title"])

    def print_key(self, key: PlacedKey) -> None:
        """Print a rectangle for the key colored by its category, with its keycode centered on it."""
        self._draw_rect(key.pos, Point(key.width, key.height), self.cfg.key_rx, key.category.css_classes)
        legend_pos = key.pos + Point(key.width / 2, key.height / 2 + self.cfg.font_size / 3)
        self._draw_text(legend_pos, key.label, ["key-text"])

    def print_board(self) -> None:
        """Print SVG code representing all layers of the keymap."""
        board = self.engine.layout(self.layers)

        keys_by_layer: dict[int, list[PlacedKey]] = {}
        for key in board.keys:
            keys_by_layer.setdefault(key.layer, []).append(key)

        # write to internal output stream self.out
        for layer, header in zip(self.layers, board.headers):
            self.print_layer_header(header.pos, header.text)
            for key in keys_by_layer.get(layer.index, []):
                if key.visible:
                    self.print_key(key)

        hidden = sum(not key.visible for key in board.keys)
        logger.debug("drew %d keys, left out %d empty thumb keys", len(board.keys) - hidden, hidden)

        # write to final output stream self.output_stream
        board_w, board_h = round(board.width), round(board.height)
        self.output_stream.write(
            f'<svg width="{board_w}" height="{board_h}" viewBox="0 0 {board_w} {board_h}" class="keymap" '
            'xmlns="http://www.w3.org/2000/svg">\n'
        )
        self.output_stream.write(self.get_gradient_defs())
        self.output_stream.write(self.get_style())
        self.output_stream.write(f'<rect width="100%" height="100%" fill="{self.cfg.background}"/>\n')
        self.output_stream.write(self.out.getvalue())
        self.output_stream.write("</svg>\n")


def render_svg(
    layers: Sequence[Layer],
    config: DrawConfig | None = None,
    geometry: SplitGeometry = KEYBALL44,
    parse_config: ParseConfig | None = None,
) -> str:
    """Draw the layers and return the SVG document as a string."""
    with StringIO() as out:
        KeymapDrawer(config if config is not None else DrawConfig(), out, layers, geometry, parse_config).print_board()
        return out.getvalue()
