"""Column-aligned table output for terminal views."""

from __future__ import annotations

from collections.abc import Sequence

COLUMN_PADDING = 2
EMPTY_CELL = "-"


def write_entries(header: Sequence[str], *entries: Sequence[str]) -> str:
    """Render a header and rows as left-aligned text columns.

    Every entry must have exactly as many cells as the header. Empty cells
    are shown as ``-`` so columns stay readable.
    """
    if not header:
        raise ValueError("table header must not be empty")

    rows: list[list[str]] = [list(header)]
    for index, entry in enumerate(entries):
        if len(entry) != len(header):
            raise ValueError(
                f"entry {index} has {len(entry)} cells, expected {len(header)}"
            )
        rows.append([cell if cell else EMPTY_CELL for cell in entry])

    widths = [max(len(row[col]) for row in rows) for col in range(len(header))]
    lines: list[str] = []
    for row in rows:
        cells = [
            cell.ljust(width + COLUMN_PADDING) for cell, width in zip(row, widths)
        ]
        lines.append("".join(cells).rstrip())
    return "\n".join(lines) + "\n"
