from __future__ import annotations

import pytest

from spnctl.views.entrywriter import write_entries


def test_write_entries_aligns_columns() -> None:
    output = write_entries(
        ("Name", "Value"),
        ("a", "1"),
        ("longer-name", "2"),
    )

    assert output == (
        "Name         Value\n"
        "a            1\n"
        "longer-name  2\n"
    )


def test_write_entries_header_only() -> None:
    assert write_entries(("Genesis Account", "Coins")) == "Genesis Account  Coins\n"


def test_write_entries_marks_empty_cells() -> None:
    output = write_entries(("A", "B"), ("x", ""))
    assert output.splitlines()[1] == "x  -"


def test_write_entries_rejects_empty_header() -> None:
    with pytest.raises(ValueError, match="header"):
        write_entries(())


def test_write_entries_rejects_wrong_cell_count() -> None:
    with pytest.raises(ValueError, match="entry 1 has 1 cells, expected 2"):
        write_entries(("A", "B"), ("x", "y"), ("z",))
