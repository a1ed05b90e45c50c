from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from .errors import MissingKeyError
from .scanner import Entry

logger = logging.getLogger(__name__)


def _index_by_country(entries: Sequence[Entry]) -> Dict[str, Entry]:
    index: Dict[str, Entry] = {}
    for entry in entries:
        if entry.country in index:
            logger.warning("Duplicate country %r in primary table; keeping the later row", entry.country)
        index[entry.country] = entry
    return index


def join_tables(primary: Sequence[Entry], secondary: Sequence[Entry]) -> List[Entry]:
    """Inner join on country.

    Output follows ``secondary``'s order, but each row carries the primary
    values first. A secondary country missing from ``primary`` raises
    :class:`MissingKeyError`; no partial result is returned.
    """
    index = _index_by_country(primary)
    joined: List[Entry] = []
    for entry in secondary:
        match = index.get(entry.country)
        if match is None:
            raise MissingKeyError(entry.country)
        joined.append(Entry(entry.country, match.values + entry.values))
    return joined
