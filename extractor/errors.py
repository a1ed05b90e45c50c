from __future__ import annotations

from typing import Optional, Tuple


class TableExtractionError(Exception):
    """Base class for every failure that aborts a run."""


class ExtractionIOError(TableExtractionError):
    def __init__(self, path: str, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"Failed to read text from {path}: {detail}")


class ParseError(TableExtractionError):
    """A matched numeric payload held a token that is not a 32-bit integer."""

    def __init__(self, line_number: int, line: str, token: str):
        self.line_number = line_number
        self.line = line
        self.token = token
        super().__init__(f"Line {line_number}: cannot parse {token!r} as an integer in {line!r}")


class MissingKeyError(TableExtractionError):
    def __init__(self, country: str):
        self.country = country
        super().__init__(f"missing key for {country!r}")


class SchemaMismatch(TableExtractionError):
    def __init__(self, actual: int, expected: Tuple[int, ...], country: Optional[str] = None):
        self.actual = actual
        self.expected = expected
        self.country = country
        where = f" for {country!r}" if country is not None else ""
        super().__init__(
            f"No table schema has {actual} columns{where} (known widths: {', '.join(map(str, expected))})"
        )


class RowLengthError(TableExtractionError):
    def __init__(self, index: int, country: str, expected: int, actual: int):
        self.index = index
        self.country = country
        self.expected = expected
        self.actual = actual
        super().__init__(f"Entry {index} ({country!r}) has {actual} values, expected {expected}")


class EmptyInputError(TableExtractionError):
    def __init__(self):
        super().__init__("empty data: no entries to serialize")
