from __future__ import annotations

from typing import List, Optional, Sequence

from tabulate import tabulate

from extractor.scanner import Entry

from .files import write_text_atomic
from .tsv_fmt import resolve_schema


def to_markdown(entries: Sequence[Entry], title: Optional[str] = None) -> str:
    schema = resolve_schema(entries)
    chunks: List[str] = []
    if title:
        chunks.append(f"# {title}\n\n")
    rows = [[e.country, *e.values] for e in entries]
    chunks.append(tabulate(rows, headers=["COUNTRY", *schema.headers], tablefmt="github"))
    chunks.append("\n")
    return "".join(chunks)


def to_markdown_file(output_path: str, entries: Sequence[Entry], title: Optional[str] = None) -> None:
    write_text_atomic(output_path, to_markdown(entries, title))
