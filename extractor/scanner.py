from __future__ import annotations

import dataclasses
import logging
import re
from typing import Iterable, List, Pattern, Tuple

from .countries import normalize_country
from .errors import ParseError

logger = logging.getLogger(__name__)

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


@dataclasses.dataclass(frozen=True)
class Entry:
    country: str
    values: Tuple[int, ...]

    def __post_init__(self):
        # Accept any sequence but always store a tuple
        object.__setattr__(self, "values", tuple(self.values))


_INT_TOKEN = re.compile(r"[+-]?[0-9]+")


def _parse_int32(token: str, line_number: int, line: str) -> int:
    # int() alone would also take "1_000" and surrounding whitespace
    if not _INT_TOKEN.fullmatch(token):
        raise ParseError(line_number, line, token)
    value = int(token)
    if not INT32_MIN <= value <= INT32_MAX:
        raise ParseError(line_number, line, token)
    return value


def scan_table(lines: Iterable[str], row_pattern: Pattern[str]) -> List[Entry]:
    """Extract ``(country, values)`` rows from report text.

    A line is a row when ``row_pattern`` matches somewhere in it; everything
    from the first match onwards is the numeric payload and everything before
    it is the country label. Lines without a match are page furniture and are
    skipped. A payload token that is not an integer aborts the whole table.
    """
    entries: List[Entry] = []
    skipped = 0
    for line_number, line in enumerate(lines, start=1):
        match = row_pattern.search(line)
        if match is None:
            skipped += 1
            continue
        start = match.start()
        values = [_parse_int32(tok, line_number, line) for tok in line[start:].split(" ")]
        entries.append(Entry(normalize_country(line[:start].strip()), values))

    logger.debug("Scanned %d rows, skipped %d non-table lines", len(entries), skipped)
    return entries
