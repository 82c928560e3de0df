"""Configuration helpers for the named connectome loader.

The module centralises defaults to keep them consistent between the CLI, tests,
and library callers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CELLS_FILENAME = "cell_names.csv"
DEFAULT_CONNECTIVITY_FILENAME = "connectivity_mat_379.csv"

NAMES_ENV_VAR = "CONNECTOME_NAMES"
CONNECT_ENV_VAR = "CONNECTOME_CONNECT"


@dataclass(frozen=True, slots=True)
class LoaderConfig:
    """Locations of the two CSV inputs.

    Parameters
    ----------
    names_path:
        CSV whose first column lists cell names in matrix order.
    connectivity_path:
        CSV holding the dense, unlabelled N x N synapse count matrix.
    """

    names_path: Path = Path(DEFAULT_CELLS_FILENAME)
    connectivity_path: Path = Path(DEFAULT_CONNECTIVITY_FILENAME)

    def describe(self) -> str:
        """Return a human readable description.

        >>> LoaderConfig(Path("n.csv"), Path("c.csv")).describe()
        'names=n.csv connectivity=c.csv'
        """

        return f"names={self.names_path} connectivity={self.connectivity_path}"

    @classmethod
    def from_env(
        cls,
        names_path: Path | str | None = None,
        connectivity_path: Path | str | None = None,
    ) -> "LoaderConfig":
        """Resolve paths from explicit arguments, then the environment, then defaults."""

        names = names_path or os.getenv(NAMES_ENV_VAR) or DEFAULT_CELLS_FILENAME
        connect = connectivity_path or os.getenv(CONNECT_ENV_VAR) or DEFAULT_CONNECTIVITY_FILENAME
        return cls(names_path=Path(names), connectivity_path=Path(connect))
