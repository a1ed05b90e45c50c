from __future__ import annotations

import logging
from typing import Optional

import click

from extractor import (
    BACKENDS,
    DEFAULT_LAYOUT,
    DEFAULT_SOURCE,
    ExtractionIOError,
    TableExtractionError,
    load_document_info,
    run_pipeline,
)
from formatters.files import write_text_atomic
from formatters.json_fmt import to_json_text, to_records
from formatters.md_fmt import to_markdown
from formatters.tsv_fmt import to_delimited


def _document_title(src: str) -> Optional[str]:
    # A missing title is not fatal, the preview just goes without a heading
    try:
        return load_document_info(src).title
    except (ExtractionIOError, ImportError):
        return None


@click.command(context_settings={"auto_envvar_prefix": "WELLBEING"})
@click.option('--src', default=DEFAULT_SOURCE, show_default=True, type=click.Path(dir_okay=False),
              help='Source PDF report')
@click.option('--json-output', default='data.json', show_default=True, type=click.Path(dir_okay=False),
              help='Where to write the JSON records')
@click.option('--tsv-output', default='data.tsv', show_default=True, type=click.Path(dir_okay=False),
              help='Where to write the tab separated table')
@click.option('--markdown-output', default=None, type=click.Path(dir_okay=False),
              help='Optional markdown preview of the joined table')
@click.option('--backend', default='pymupdf', show_default=True, type=click.Choice(BACKENDS),
              help='PDF to text converter')
@click.option('--timeout', default=None, type=float, help='Seconds to wait for pdftotext per page range')
@click.option('--log-level', default='WARNING', show_default=True,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR']), help='Logging level')
def main(src: str, json_output: str, tsv_output: str, markdown_output: Optional[str], backend: str,
         timeout: Optional[float], log_level: str):
    """Extract the wellbeing tables from the report and write them as JSON and TSV."""
    logging.basicConfig(level=getattr(logging, log_level), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        entries = run_pipeline(src, DEFAULT_LAYOUT, backend=backend, timeout=timeout)
        # Render everything before touching the filesystem
        json_text = to_json_text(to_records(entries))
        tsv_text = to_delimited(entries)
        md_text = None
        if markdown_output:
            md_text = to_markdown(entries, _document_title(src))
    except TableExtractionError as e:
        raise click.ClickException(str(e)) from e

    outputs = [(json_output, json_text), (tsv_output, tsv_text)]
    if md_text is not None:
        outputs.append((markdown_output, md_text))
    written = []
    for path, text in outputs:
        try:
            write_text_atomic(path, text)
        except OSError as e:
            raise click.ClickException(f"Failed to write {path}: {e}") from e
        written.append(path)

    click.echo(f"Done. Joined {len(entries)} countries; wrote {', '.join(written)}.")


if __name__ == '__main__':
    main()
