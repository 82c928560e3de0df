"""Loading of the cell name table that fixes the matrix column order."""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import List, Union

from .errors import CellNamesError

LOGGER = logging.getLogger(__name__)

# Position ``i`` names both row ``i`` and column ``i`` of the dense matrix.
CellNameTable = List[str]

NameSource = Union[Path, str, Iterable[Sequence[str]]]

# Undecodable bytes are kept as lone surrogates so no character set is enforced.
DECODE_ERRORS = "surrogateescape"


def _names_from_records(records: Iterable[Sequence[str]]) -> CellNameTable:
    names: CellNameTable = []
    for record in records:
        if not record or record[0] == "":
            continue
        names.append(record[0])
    return names


def read_cell_names(source: NameSource) -> CellNameTable:
    """Return cell names from the first field of each record in ``source``.

    ``source`` is either a CSV path or an iterable of already tokenized
    records. Records whose first field is blank are skipped. Order is kept
    and duplicates are not removed.

    Raises
    ------
    CellNamesError
        If the file cannot be opened or is not valid CSV.
    """

    if not isinstance(source, (str, Path)):
        return _names_from_records(source)

    path = Path(source)
    try:
        with path.open(newline="", encoding="utf-8", errors=DECODE_ERRORS) as handle:
            names = _names_from_records(csv.reader(handle))
    except OSError as exc:
        raise CellNamesError(f"Failed to open cell names csv file: {path} [{exc}]") from exc
    except csv.Error as exc:
        raise CellNamesError(f"Error on reading cell list name file ({path}): {exc}") from exc
    LOGGER.info("Read in %d cell names from %s.", len(names), path)
    return names
