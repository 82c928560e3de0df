"""State owned by a process that answers connection queries."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import LoaderConfig
from .connectome import NamedConnectome
from .loader import read_connections_csv
from .names import CellNameTable, read_cell_names
from .query import QueryResult, query_connections

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ConnectomeContext:
    """Name table and connectome loaded once at startup.

    The context is immutable after :meth:`load`; a reload builds a new context
    and swaps the reference, so readers never see a partial structure.
    """

    names: CellNameTable
    connectome: NamedConnectome
    config: LoaderConfig | None = None

    @classmethod
    def load(cls, config: LoaderConfig) -> "ConnectomeContext":
        """Read both inputs described by ``config``.

        Any :class:`~named_connectome.errors.ConnectomeLoadError` propagates.
        """

        LOGGER.debug("Loading connectome with %s", config.describe())
        names = read_cell_names(config.names_path)
        connectome = read_connections_csv(names, config.connectivity_path)
        LOGGER.info("Ready to serve connections between %d neurons...", len(connectome))
        return cls(names=names, connectome=connectome, config=config)

    def query(self, raw_pre: str, raw_post: str) -> QueryResult:
        return query_connections(self.connectome, raw_pre, raw_post)
