from __future__ import annotations

import json
from typing import Dict, List, Sequence, Union

from extractor.scanner import Entry
from extractor.schema import schema_for_width

from .files import write_text_atomic

Record = Dict[str, Union[str, int]]


def to_record(entry: Entry) -> Record:
    schema = schema_for_width(len(entry.values), entry.country)
    record: Record = {"country": entry.country}
    record.update(zip(schema.columns, entry.values))
    return record


def to_records(entries: Sequence[Entry]) -> List[Record]:
    return [to_record(e) for e in entries]


def to_json_text(records: List[Record]) -> str:
    return json.dumps(records, ensure_ascii=False, indent=2)


def to_json_file(output_path: str, records: List[Record]) -> None:
    write_text_atomic(output_path, to_json_text(records))
