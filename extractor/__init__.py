"""Extractor package for the wellbeing report tables."""

from .countries import normalize_country
from .errors import (
    EmptyInputError,
    ExtractionIOError,
    MissingKeyError,
    ParseError,
    RowLengthError,
    SchemaMismatch,
    TableExtractionError,
)
from .merger import join_tables
from .pdf_utils import BACKENDS, DocumentInfo, PageRange, load_document_info, iter_page_numbers, read_page_lines
from .pipeline import DEFAULT_LAYOUT, DEFAULT_SOURCE, ReportLayout, TableSpec, extract_table, run_pipeline
from .scanner import Entry, scan_table
from .schema import AFFECT, BALANCE, COMBINED, Schema, row_pattern, schema_for_width

__all__ = [
    "AFFECT",
    "BACKENDS",
    "BALANCE",
    "COMBINED",
    "DEFAULT_LAYOUT",
    "DEFAULT_SOURCE",
    "DocumentInfo",
    "EmptyInputError",
    "Entry",
    "ExtractionIOError",
    "MissingKeyError",
    "PageRange",
    "ParseError",
    "ReportLayout",
    "RowLengthError",
    "Schema",
    "SchemaMismatch",
    "TableExtractionError",
    "TableSpec",
    "extract_table",
    "iter_page_numbers",
    "join_tables",
    "load_document_info",
    "normalize_country",
    "read_page_lines",
    "row_pattern",
    "run_pipeline",
    "scan_table",
    "schema_for_width",
]
