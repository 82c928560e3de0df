"""Pattern-set to pattern-set connection queries ranked by strength."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

import pandas as pd

from .connectome import NamedConnectome

LOGGER = logging.getLogger(__name__)

PATTERN_SEPARATOR = ","
RESULT_COLUMNS = ["strength", "pre", "post"]


@dataclass(frozen=True, slots=True)
class Connection:
    """A ranked query hit: ``strength`` synapses from ``pre`` onto ``post``."""

    pre: str
    post: str
    strength: int


@dataclass(frozen=True, slots=True)
class QueryResult:
    """Connections found for a pair of raw search strings, strongest first."""

    pre_patterns: str
    post_patterns: str
    connections: Tuple[Connection, ...]

    @property
    def is_empty(self) -> bool:
        return not self.connections

    def __len__(self) -> int:
        return len(self.connections)

    def top(self, n: int) -> Tuple[Connection, ...]:
        return self.connections[:n]

    def to_frame(self) -> pd.DataFrame:
        """Return the ranked connections as a DataFrame."""

        frame = pd.DataFrame(
            {
                "strength": [c.strength for c in self.connections],
                "pre": [c.pre for c in self.connections],
                "post": [c.post for c in self.connections],
            },
            columns=RESULT_COLUMNS,
        )
        frame["strength"] = frame["strength"].astype("int64")
        return frame


def split_patterns(raw: str) -> List[str]:
    """Split a comma separated search string and strip each pattern.

    >>> split_patterns(" T4*, Mi1 ,L1")
    ['T4*', 'Mi1', 'L1']
    """

    return [pattern.strip() for pattern in raw.split(PATTERN_SEPARATOR)]


def _by_strength(connection: Connection) -> int:
    return connection.strength


def rank_by_strength(connections: List[Connection]) -> List[Connection]:
    """Order ``connections`` by descending strength.

    The relative order of equal strengths is not part of the contract.
    """

    return sorted(connections, key=_by_strength, reverse=True)


def query_connections(connectome: NamedConnectome, raw_pre: str, raw_post: str) -> QueryResult:
    """Find every connection from cells matching ``raw_pre`` to cells matching ``raw_post``.

    Both arguments are comma separated lists of exact names or ``prefix*``
    patterns. All matched pre/post pairs are looked up, including pairs
    repeated by overlapping patterns, and only existing connections are kept.
    No matches yields an empty result rather than an error.
    """

    pre_names = connectome.matching_names(split_patterns(raw_pre))
    post_names = connectome.matching_names(split_patterns(raw_post))
    LOGGER.debug(
        "Query %r -> %r expanded to %d x %d names",
        raw_pre,
        raw_post,
        len(pre_names),
        len(post_names),
    )
    found: List[Connection] = []
    for pre in pre_names:
        for post in post_names:
            strength, exists = connectome.connection_strength(pre, post)
            if exists:
                found.append(Connection(pre=pre, post=post, strength=strength))
    return QueryResult(
        pre_patterns=raw_pre,
        post_patterns=raw_post,
        connections=tuple(rank_by_strength(found)),
    )
