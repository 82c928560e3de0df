"""Exceptions raised while loading a named connectome.

Every load failure is fatal: the process must not serve queries from a
partially built connectome. Query operations never raise.
"""

from __future__ import annotations


class ConnectomeLoadError(RuntimeError):
    """Base class for fatal errors raised during the load phase."""


class CellNamesError(ConnectomeLoadError):
    """Raised when the cell names source cannot be opened or tokenized."""


class ConnectivityFileError(ConnectomeLoadError):
    """Raised when the connectivity source cannot be opened."""


class MatrixShapeError(ConnectomeLoadError):
    """Raised when a matrix row does not line up with the cell name table."""


class StrengthParseError(ConnectomeLoadError):
    """Raised when a matrix field is not a strict integer."""
