from __future__ import annotations

import dataclasses
import re
from types import MappingProxyType
from typing import Optional, Pattern, Tuple

from .errors import SchemaMismatch

COLUMNS: Tuple[str, ...] = (
    "cantril",
    "enjoy",
    "smile",
    "well_rested",
    "pain",
    "sadness",
    "worry",
    "anger",
    "positive",
    "negative",
    "final",
)

HEADERS: Tuple[str, ...] = (
    "CANTRIL",
    "ENJOY",
    "SMILE",
    "WELL-RESTED",
    "PAIN",
    "SADNESS",
    "WORRY",
    "ANGER",
    "POSITIVE",
    "NEGATIVE",
    "FINAL",
)


@dataclasses.dataclass(frozen=True)
class Schema:
    name: str
    columns: Tuple[str, ...]  # record keys
    headers: Tuple[str, ...]  # delimited column headers

    @property
    def width(self) -> int:
        return len(self.columns)


AFFECT = Schema("affect", COLUMNS[:8], HEADERS[:8])
BALANCE = Schema("balance", COLUMNS[8:], HEADERS[8:])
COMBINED = Schema("combined", COLUMNS, HEADERS)

SCHEMAS_BY_WIDTH = MappingProxyType({s.width: s for s in (AFFECT, BALANCE, COMBINED)})


def schema_for_width(width: int, country: Optional[str] = None) -> Schema:
    try:
        return SCHEMAS_BY_WIDTH[width]
    except KeyError:
        raise SchemaMismatch(width, tuple(sorted(SCHEMAS_BY_WIDTH)), country) from None


def row_pattern(width: int) -> Pattern[str]:
    """Pattern matching a line that ends in exactly ``width`` space separated integers.

    The pattern is anchored to the end of the line so digits inside a country
    label never start a row on their own.
    """
    if width < 1:
        raise ValueError(f"row width must be positive, got {width}")
    return re.compile(r"\d+" + r" \d+" * (width - 1) + r"\Z", re.ASCII)
