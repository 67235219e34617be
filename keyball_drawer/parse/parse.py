"""
Module containing base parser class to parse keymap sources into a sequence of layers.
Do not use directly, use QmkKeymapParser instead.
"""

import logging
from abc import ABC, abstractmethod
from typing import TextIO

from keyball_drawer.config import ParseConfig
from keyball_drawer.keymap import Layer

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Error type for exceptions that happen during keymap parsing."""


class KeymapParser(ABC):
    """Abstract base class for parsing firmware keymap representations."""

    def __init__(self, config: ParseConfig | None = None):
        self.cfg = config if config is not None else ParseConfig()

    @abstractmethod
    def parse_str(self, in_str: str) -> list[Layer]:
        """Parse keymap source text into layers, in the order they appear in the source."""

    def parse(self, in_buf: TextIO) -> list[Layer]:
        """Wrapper to call parser on a file handle, turning decoding failures into ParseError."""
        name = getattr(in_buf, "name", "<stream>")
        try:
            in_str = in_buf.read()
        except UnicodeDecodeError as err:
            raise ParseError(f'Could not read keymap "{name}" as text: {err}') from err

        layers = self.parse_str(in_str)
        logger.debug("parsed %d layers from %s", len(layers), name)
        return layers
