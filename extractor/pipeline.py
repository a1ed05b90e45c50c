from __future__ import annotations

import dataclasses
import logging
from typing import List, Optional

from .merger import join_tables
from .pdf_utils import PageRange, read_page_lines
from .scanner import Entry, scan_table
from .schema import AFFECT, BALANCE, Schema, row_pattern

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "w30759.pdf"


@dataclasses.dataclass(frozen=True)
class TableSpec:
    name: str
    first_page: int
    last_page: int
    schema: Schema

    @property
    def pages(self) -> PageRange:
        return PageRange(self.first_page, self.last_page)


@dataclasses.dataclass(frozen=True)
class ReportLayout:
    """Where the two tables live in the report, and their shapes."""

    primary: TableSpec
    secondary: TableSpec


DEFAULT_LAYOUT = ReportLayout(
    primary=TableSpec("table5", 25, 30, AFFECT),
    secondary=TableSpec("table8", 35, 39, BALANCE),
)


def extract_table(
    file_path: str,
    spec: TableSpec,
    backend: str = "pymupdf",
    timeout: Optional[float] = None,
) -> List[Entry]:
    lines = read_page_lines(file_path, spec.pages, backend=backend, timeout=timeout)
    entries = scan_table(lines, row_pattern(spec.schema.width))
    logger.info("%s: %d rows from pages %s", spec.name, len(entries), spec.pages)
    return entries


def run_pipeline(
    file_path: str = DEFAULT_SOURCE,
    layout: ReportLayout = DEFAULT_LAYOUT,
    backend: str = "pymupdf",
    timeout: Optional[float] = None,
) -> List[Entry]:
    """Extract both tables of the report and join them on country."""
    primary = extract_table(file_path, layout.primary, backend, timeout)
    secondary = extract_table(file_path, layout.secondary, backend, timeout)
    joined = join_tables(primary, secondary)
    logger.info("Joined %d of %d %s rows", len(joined), len(primary), layout.primary.name)
    return joined
