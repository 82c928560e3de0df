"""Query synaptic connections between named cells of a dense connectome."""

from importlib import metadata

from .connectome import NamedConnectome
from .context import ConnectomeContext
from .errors import (
    CellNamesError,
    ConnectivityFileError,
    ConnectomeLoadError,
    MatrixShapeError,
    StrengthParseError,
)
from .loader import build_connectome, read_connections_csv
from .matching import matching_names
from .names import CellNameTable, read_cell_names
from .query import Connection, QueryResult, query_connections, split_patterns

__all__ = [
    "CellNameTable",
    "CellNamesError",
    "Connection",
    "ConnectivityFileError",
    "ConnectomeContext",
    "ConnectomeLoadError",
    "MatrixShapeError",
    "NamedConnectome",
    "QueryResult",
    "StrengthParseError",
    "__version__",
    "build_connectome",
    "matching_names",
    "query_connections",
    "read_cell_names",
    "read_connections_csv",
    "split_patterns",
]


def __getattr__(name: str):
    if name == "__version__":
        try:
            return metadata.version("named-connectome")
        except metadata.PackageNotFoundError:  # pragma: no cover - best effort
            return "0"
    raise AttributeError(name)
