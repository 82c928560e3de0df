"""Sparse, name-keyed adjacency structure holding synapse counts."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Dict, List, Tuple

from .matching import matching_names


class NamedConnectome:
    """Strength of connections between cells identified by name.

    The structure maps a presynaptic name to a mapping of postsynaptic name to
    a positive synapse count. Zero strengths are never stored. It is filled
    once by :func:`named_connectome.loader.build_connectome` and only read
    afterwards, so concurrent queries need no locking.
    """

    __slots__ = ("_edges",)

    def __init__(self) -> None:
        self._edges: Dict[str, Dict[str, int]] = {}

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[str]:
        return iter(self._edges)

    def __contains__(self, name: object) -> bool:
        return name in self._edges

    def __repr__(self) -> str:
        return f"NamedConnectome(presynaptic={len(self)}, edges={self.edge_count()})"

    def add_connection(self, pre: str, post: str, strength: int) -> None:
        """Add ``strength`` to the (``pre``, ``post``) entry.

        Repeated additions accumulate. Non-positive strengths are ignored so a
        zero entry is never materialized.
        """

        if strength <= 0:
            return
        targets = self._edges.setdefault(pre, {})
        targets[post] = targets.get(post, 0) + strength

    def connection_strength(self, pre: str, post: str) -> Tuple[int, bool]:
        """Return ``(strength, found)`` for the (``pre``, ``post``) pair."""

        strength = self._edges.get(pre, {}).get(post, 0)
        if strength == 0:
            return 0, False
        return strength, True

    def presynaptic_names(self) -> List[str]:
        return list(self._edges)

    def edges(self) -> Iterator[Tuple[str, str, int]]:
        for pre, targets in self._edges.items():
            for post, strength in targets.items():
                yield pre, post, strength

    def edge_count(self) -> int:
        return sum(len(targets) for targets in self._edges.values())

    def matching_names(self, patterns: Iterable[str]) -> List[str]:
        """Resolve ``patterns`` against the presynaptic names of this connectome."""

        return matching_names(patterns, self._edges)
