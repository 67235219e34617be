"""Draw the layers of a Keyball44 QMK keymap.c as a color-coded SVG."""

import logging

logger = logging.getLogger(__name__)
logger.addHandler(logging.StreamHandler())
