from .json_fmt import to_json_file, to_records
from .md_fmt import to_markdown, to_markdown_file
from .tsv_fmt import to_delimited, to_tsv_file

__all__ = [
    "to_delimited",
    "to_json_file",
    "to_markdown",
    "to_markdown_file",
    "to_records",
    "to_tsv_file",
]
