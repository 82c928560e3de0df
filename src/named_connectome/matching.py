"""Exact and prefix-wildcard resolution of cell name patterns."""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable
from typing import List

LOGGER = logging.getLogger(__name__)

WILDCARD = "*"


def matching_names(patterns: Iterable[str], known_names: Collection[str]) -> List[str]:
    """Return the known names selected by ``patterns``.

    A pattern ending in ``*`` selects every known name starting with the text
    before the ``*``, so ``"*"`` alone selects everything. Any other pattern
    selects itself if it is a known name. Matching is case-sensitive and
    patterns are used verbatim. Results of all patterns are concatenated, so
    overlapping patterns produce duplicates.

    >>> matching_names(["T4*", "Mi1"], ["T4a", "Mi1", "T4b", "L1"])
    ['T4a', 'T4b', 'Mi1']
    >>> matching_names(["t4a"], ["T4a"])
    []
    """

    matches: List[str] = []
    for pattern in patterns:
        if pattern.endswith(WILDCARD):
            prefix = pattern[: -len(WILDCARD)]
            found = [name for name in known_names if name.startswith(prefix)]
        elif pattern in known_names:
            found = [pattern]
        else:
            found = []
        LOGGER.debug("Pattern %r matched %d names", pattern, len(found))
        matches.extend(found)
    return matches
