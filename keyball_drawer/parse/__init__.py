"""Submodule containing keymap parsing functionality, currently for QMK keymap.c sources."""

from .parse import KeymapParser, ParseError
from .qmk import ParserState, QmkKeymapParser, split_keys

__all__ = ["KeymapParser", "ParseError", "ParserState", "QmkKeymapParser", "split_keys"]
