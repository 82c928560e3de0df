from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

import pytest

from named_connectome.config import CONNECT_ENV_VAR, NAMES_ENV_VAR
from named_connectome.connectome import NamedConnectome
from named_connectome.loader import build_connectome

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(NAMES_ENV_VAR, raising=False)
    monkeypatch.delenv(CONNECT_ENV_VAR, raising=False)


@pytest.fixture()
def names_csv() -> Path:
    return DATA_DIR / "cell_names.csv"


@pytest.fixture()
def connectivity_csv() -> Path:
    return DATA_DIR / "connectivity.csv"


@pytest.fixture()
def write_csv(tmp_path: Path) -> Callable[[str, Sequence[Sequence[object]]], Path]:
    def _write(name: str, rows: Sequence[Sequence[object]]) -> Path:
        path = tmp_path / name
        lines = [",".join(str(value) for value in row) for row in rows]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def abc_connectome() -> NamedConnectome:
    rows = [["0", "5", "0"], ["2", "0", "0"], ["0", "0", "0"]]
    return build_connectome(["A", "B", "C"], rows)
