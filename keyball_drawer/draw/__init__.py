"""Submodule containing SVG drawing functionality, given parsed keymap layers."""

from .draw import KeymapDrawer, render_svg

__all__ = ["KeymapDrawer", "render_svg"]
