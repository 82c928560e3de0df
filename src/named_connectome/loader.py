"""Construction of a :class:`NamedConnectome` from a dense connectivity matrix.

The matrix carries no row labels: row ``r`` belongs to the ``r``-th cell of the
name table, counted positionally as rows are consumed. Shape and parse
problems abort the load, while rows the CSV tokenizer cannot read are logged
and skipped.
"""

from __future__ import annotations

import csv
import logging
import re
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing import Union

from .connectome import NamedConnectome
from .errors import ConnectivityFileError, MatrixShapeError, StrengthParseError
from .names import DECODE_ERRORS

LOGGER = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")

# A row is either a tokenized record or the exception raised while reading it.
RowItem = Union[Sequence[str], Exception]


def parse_strength(field: str, record: Sequence[str]) -> int:
    """Parse ``field`` as a strict integer.

    Only an optional sign followed by ASCII digits is accepted; surrounding
    whitespace, decimals and digit separators are rejected.
    """

    if _INTEGER.fullmatch(field) is None:
        raise StrengthParseError(f"Could not parse CSV line: {list(record)!r} (field {field!r} is not an integer)")
    return int(field)


def build_connectome(names: Sequence[str], rows: Iterable[RowItem]) -> NamedConnectome:
    """Build a connectome from the name table and dense matrix ``rows``.

    Parameters
    ----------
    names:
        Cell names in matrix order; its length fixes the expected row width.
    rows:
        Matrix records in file order. An item that is an exception instance
        stands for a record that failed to read; it is logged, skipped, and
        still consumes a row position. A record with a blank first field is
        skipped without consuming a row position.

    Raises
    ------
    MatrixShapeError
        If a record's width differs from ``len(names)`` or there are more
        matrix rows than names.
    StrengthParseError
        If any field is not an integer.

    Notes
    -----
    Which records count as unreadable depends on the tokenizer. The standard
    :mod:`csv` reader accepts a bare quote inside an unquoted field (``1"2``),
    so such a row reaches this function and fails as a
    :class:`StrengthParseError` rather than being skipped. Undecodable bytes
    read by :func:`read_connections_csv` likewise end up as a parse error.
    """

    connectome = NamedConnectome()
    width = len(names)
    row_index = 0
    for item in rows:
        if isinstance(item, Exception):
            LOGGER.warning("Skipping unreadable connectivity row %d: %s", row_index, item)
            row_index += 1
            continue
        if not item or item[0] == "":
            continue
        if len(item) != width:
            raise MatrixShapeError(
                f"CSV has inconsistent # of columns ({len(item)}) vs cell names supplied ({width})!"
            )
        if row_index >= width:
            raise MatrixShapeError(f"CSV has more rows than the {width} cell names supplied!")
        pre = names[row_index]
        for column, field in enumerate(item):
            strength = parse_strength(field, item)
            if strength > 0:
                connectome.add_connection(pre, names[column], strength)
        row_index += 1
    return connectome


def _tolerant_rows(reader: Iterator[Sequence[str]]) -> Iterator[RowItem]:
    while True:
        try:
            record = next(reader)
        except StopIteration:
            return
        except csv.Error as exc:
            yield exc
            continue
        yield record


def read_connections_csv(names: Sequence[str], path: Path | str) -> NamedConnectome:
    """Read the dense connectivity CSV at ``path`` into a connectome.

    Raises
    ------
    ConnectivityFileError
        If the file cannot be opened.
    """

    path = Path(path)
    try:
        handle = path.open(newline="", encoding="utf-8", errors=DECODE_ERRORS)
    except OSError as exc:
        raise ConnectivityFileError(f"Failed to open connectome csv file: {path} [{exc}]") from exc
    with handle:
        connectome = build_connectome(names, _tolerant_rows(csv.reader(handle)))
    LOGGER.info(
        "Read %d connections among %d presynaptic cells from %s.",
        connectome.edge_count(),
        len(connectome),
        path,
    )
    return connectome
