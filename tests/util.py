from pathlib import Path

DATA_PATH = Path(__file__).parent / "data"
KEYBALL44_KEYMAP = DATA_PATH / "keyball44.c"

HEADER = "const uint16_t PROGMEM keymaps[][MATRIX_ROWS][MATRIX_COLS] = {"


def keymap_source(*layers: list[list[str]], header: str = HEADER) -> str:
    """Build keymap.c text with one LAYOUT block per layer and one source line per row."""
    lines = [header]
    for ind, rows in enumerate(layers):
        lines.append(f"  [{ind}] = LAYOUT(")
        lines += ["    " + ", ".join(row) + "," for row in rows]
        lines.append("  ),")
    lines.append("};")
    return "\n".join(lines) + "\n"


def full_layer(key: str = "KC_A") -> list[list[str]]:
    """Rows that exactly fill the split geometry: 6+6, 6+6, 6+6, 5+3."""
    return [[key] * 12, [key] * 12, [key] * 12, [key] * 8]
