from __future__ import annotations

import csv
from pathlib import Path

import pytest

from named_connectome.errors import CellNamesError, ConnectomeLoadError
from named_connectome.names import read_cell_names


def test_read_cell_names_skips_blank_first_fields(names_csv: Path) -> None:
    assert read_cell_names(names_csv) == ["L1", "L2", "Mi1", "Mi4", "T4a", "T4b"]


def test_read_cell_names_accepts_string_paths(names_csv: Path) -> None:
    assert read_cell_names(str(names_csv))[0] == "L1"


def test_read_cell_names_from_records_keeps_order_and_duplicates() -> None:
    records = [["b"], [], ["a", "extra"], ["", "ignored"], ["b"]]
    assert read_cell_names(records) == ["b", "a", "b"]


def test_read_cell_names_does_not_trim_or_fold_case() -> None:
    assert read_cell_names([[" Mi1 "], ["mi1"]]) == [" Mi1 ", "mi1"]


def test_missing_names_file_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(CellNamesError, match="Failed to open cell names csv file"):
        read_cell_names(tmp_path / "missing.csv")
    assert issubclass(CellNamesError, ConnectomeLoadError)


def test_names_file_with_undecodable_bytes_is_accepted(tmp_path: Path) -> None:
    path = tmp_path / "names.csv"
    path.write_bytes(b"Tm5\xe4\nL1\n")
    names = read_cell_names(path)
    assert names == ["Tm5\udce4", "L1"]
    assert names[0].encode("utf-8", "surrogateescape") == b"Tm5\xe4"


def test_names_tokenizer_error_is_fatal(tmp_path: Path) -> None:
    path = tmp_path / "names.csv"
    path.write_text("A\n123456789\n", encoding="utf-8")
    previous = csv.field_size_limit(5)
    try:
        with pytest.raises(CellNamesError, match="Error on reading cell list name file"):
            read_cell_names(path)
    finally:
        csv.field_size_limit(previous)
