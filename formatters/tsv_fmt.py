from __future__ import annotations

from typing import Sequence

import pandas as pd

from extractor.errors import EmptyInputError, RowLengthError
from extractor.scanner import Entry
from extractor.schema import Schema, schema_for_width

from .files import write_text_atomic


def resolve_schema(entries: Sequence[Entry]) -> Schema:
    """Pick the column layout from the first entry and check every row against it."""
    if not entries:
        raise EmptyInputError()
    first = entries[0]
    schema = schema_for_width(len(first.values), first.country)
    for i, entry in enumerate(entries):
        if len(entry.values) != schema.width:
            raise RowLengthError(i, entry.country, schema.width, len(entry.values))
    return schema


def to_dataframe(entries: Sequence[Entry]) -> pd.DataFrame:
    schema = resolve_schema(entries)
    rows = [[e.country, *e.values] for e in entries]
    return pd.DataFrame(rows, columns=["COUNTRY", *schema.headers])


def to_delimited(entries: Sequence[Entry]) -> str:
    df = to_dataframe(entries)
    # Plain tab joined fields; a CSV dialect would quote names holding '"'
    lines = ["\t".join(df.columns)]
    lines.extend("\t".join(str(v) for v in row) for row in df.itertuples(index=False, name=None))
    return "\n".join(lines) + "\n"


def to_tsv_file(output_path: str, entries: Sequence[Entry]) -> None:
    write_text_atomic(output_path, to_delimited(entries))
