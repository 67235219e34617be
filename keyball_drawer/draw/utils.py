"""Module containing lower-level SVG drawing utils, to be used as a mixin."""

from html import escape
from io import StringIO
from typing import Sequence

from keyball_drawer.config import DrawConfig, Gradient
from keyball_drawer.physical_layout import Point


class UtilsMixin:
    """Mixin that adds low-level SVG drawing methods for KeymapDrawer."""

    # initialized in KeymapDrawer
    cfg: DrawConfig
    out: StringIO

    @staticmethod
    def _to_class_str(classes: Sequence[str]) -> str:
        return (' class="' + " ".join(c for c in classes if c) + '"') if classes else ""

    def _draw_rect(self, p: Point, dims: Point, radius: float, classes: Sequence[str]) -> None:
        """Draw a rounded rectangle with `p` as its top left corner."""
        self.out.write(
            f'<rect rx="{round(radius)}" x="{round(p.x)}" y="{round(p.y)}" '
            f'width="{round(dims.x)}" height="{round(dims.y)}"{self._to_class_str(classes)}/>\n'
        )

    def _draw_text(self, p: Point, word: str, classes: Sequence[str]) -> None:
        self.out.write(f'<text x="{round(p.x)}" y="{round(p.y)}"{self._to_class_str(classes)}>{escape(word)}</text>\n')

    @staticmethod
    def _gradient_def(gradient_id: str, gradient: Gradient) -> str:
        return (
            f'<linearGradient id="{gradient_id}" x1="0%" y1="0%" x2="0%" y2="100%">'
            f'<stop offset="0%" stop-color="{escape(gradient.light)}"/>'
            f'<stop offset="100%" stop-color="{escape(gradient.dark)}"/>'
            "</linearGradient>\n"
        )

    def get_gradient_defs(self) -> str:
        """Return a defs block with the key fill gradients, layer gradients are numbered from 1."""
        defs = StringIO()
        defs.write("<defs>\n")
        for ind, gradient in enumerate(self.cfg.layer_gradients, start=1):
            defs.write(self._gradient_def(f"layer{ind}Gradient", gradient))
        defs.write(self._gradient_def("keyGradient", self.cfg.key_gradient))
        defs.write(self._gradient_def("specialGradient", self.cfg.special_gradient))
        defs.write("</defs>\n")
        return defs.getvalue()

    def get_style(self) -> str:
        """Return the style block, with one fill rule per layer gradient."""
        layer_rules = "".join(
            f".key-layer{ind} {{ fill: url(#layer{ind}Gradient); }}\n"
            for ind in range(1, len(self.cfg.layer_gradients) + 1)
        )
        extra_style = f"\n{self.cfg.svg_extra_style}" if self.cfg.svg_extra_style else ""
        return f"<style>\n{self.cfg.svg_style}{layer_rules}{extra_style}</style>\n"
