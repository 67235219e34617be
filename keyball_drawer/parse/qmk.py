"""Module containing class to parse the keymaps array of QMK keymap.c sources."""

import logging
import re
from enum import Enum, auto

from keyball_drawer.config import ParseConfig
from keyball_drawer.keymap import Layer
from keyball_drawer.parse.parse import KeymapParser

logger = logging.getLogger(__name__)


class ParserState(Enum):
    """States of the line-oriented keymap.c scanner."""

    OUTSIDE = auto()  # before the keymaps array declaration
    IN_ARRAY = auto()  # inside the keymaps array, between layers
    IN_LAYER = auto()  # inside a LAYOUT(...) invocation, collecting rows
    DONE = auto()  # keymaps array closed


def split_keys(line: str) -> list[str]:
    """
    Split a line of comma-separated keycodes into keys, without splitting on commas inside parentheses
    so that keycodes like `LT(1, KC_A)` stay intact. Parentheses are not validated for balance.
    """
    keys = []
    current: list[str] = []
    depth = 0
    for char in line.strip().rstrip(","):
        if char == "," and depth == 0:
            if key := "".join(current).strip():
                keys.append(key)
            current = []
            continue
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        current.append(char)
    if key := "".join(current).strip():
        keys.append(key)
    return keys


class QmkKeymapParser(KeymapParser):
    """
    Parser for QMK keymap.c files, which scans lines for the keymaps array and the LAYOUT macro
    invocations inside it, rather than parsing C. Each source line inside a layer makes up a row.
    """

    def __init__(self, config: ParseConfig | None = None):
        super().__init__(config)
        self._layout_re = re.compile(re.escape(self.cfg.layout_macro) + r"(_\w+)?\s*\(")

    @staticmethod
    def _is_layer_end(line: str) -> bool:
        return line == ")" or line.startswith("),")

    def transition(self, state: ParserState, line: str, rows: list[list[str]], layers: list[Layer]) -> ParserState:
        """
        Process a single stripped line in the given state and return the next state.
        Rows of the current layer are collected into `rows`, finished layers are appended to `layers`.
        """
        if state is ParserState.DONE or not line or line.startswith("//"):
            return state

        if state is ParserState.OUTSIDE:
            if self.cfg.keymap_marker not in line:
                return state
            logger.debug("found keymaps array: %s", line)
            state = ParserState.IN_ARRAY

        if state is ParserState.IN_ARRAY and line.startswith("};"):
            return ParserState.DONE

        if self._layout_re.search(line):
            return ParserState.IN_LAYER

        if state is ParserState.IN_LAYER:
            if self._is_layer_end(line):
                if rows:
                    layer = Layer(index=len(layers), keys=list(rows))
                    logger.debug("layer %d: %s rows", layer.index, [len(row) for row in layer.keys])
                    layers.append(layer)
                else:
                    logger.debug("skipping layer without keys")
                rows.clear()
                return ParserState.IN_ARRAY
            if keys := split_keys(line):
                rows.append(keys)

        return state

    def parse_str(self, in_str: str) -> list[Layer]:
        """
        Parse keymap.c content and return the layers of its keymaps array in source order. Returns an empty list
        if there is no keymaps array; an unterminated array yields the layers that were closed before the end.
        """
        layers: list[Layer] = []
        rows: list[list[str]] = []
        state = ParserState.OUTSIDE
        for line in in_str.splitlines():
            state = self.transition(state, line.strip(), rows, layers)
            if state is ParserState.DONE:
                break
        else:
            if state is not ParserState.OUTSIDE:
                logger.debug("keymaps array not terminated, ended in state %s", state.name)
        return layers
