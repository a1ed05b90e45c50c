from __future__ import annotations

import dataclasses
import logging
import subprocess
from typing import Iterator, List, Optional

from .errors import ExtractionIOError

logger = logging.getLogger(__name__)

# Don't import fitz at module level so the pdftotext backend works without it

BACKENDS = ("pymupdf", "pdftotext")


@dataclasses.dataclass
class DocumentInfo:
    file_path: str
    page_count: int
    title: Optional[str]
    author: Optional[str]
    creator: Optional[str]
    producer: Optional[str]


@dataclasses.dataclass(frozen=True)
class PageRange:
    first: int  # 1-based, inclusive
    last: int

    def __post_init__(self):
        if self.first < 1 or self.last < self.first:
            raise ValueError(f"invalid page range {self.first}-{self.last}")

    def __str__(self) -> str:
        return f"{self.first}-{self.last}"


def _get_fitz():
    """Get the PyMuPDF fitz module with proper error handling."""
    try:
        import fitz
        return fitz
    except ImportError:
        raise ImportError("PyMuPDF is required. Install with: pip install PyMuPDF")


def _open_document(file_path: str):
    fitz = _get_fitz()
    try:
        return fitz.open(file_path)
    except Exception as e:
        raise ExtractionIOError(file_path, str(e)) from e


def load_document_info(file_path: str) -> DocumentInfo:
    doc = _open_document(file_path)
    try:
        metadata = doc.metadata or {}
        return DocumentInfo(
            file_path=file_path,
            page_count=doc.page_count,
            title=metadata.get("title") or None,
            author=metadata.get("author") or None,
            creator=metadata.get("creator") or None,
            producer=metadata.get("producer") or None,
        )
    finally:
        doc.close()


def iter_page_numbers(page_range: PageRange, total_pages: int) -> Iterator[int]:
    for p in range(page_range.first, page_range.last + 1):
        if 1 <= p <= total_pages:
            yield p


def split_report_lines(text: str) -> List[str]:
    """Split on newlines only; form feeds and other separators stay inside the line."""
    return [ln.rstrip("\r") for ln in text.split("\n")]


def _page_lines(page, tolerance: float = 2.0) -> List[str]:
    """Rebuild the report lines of a page from its words.

    Table cells are separate text spans, so ``get_text("text")`` puts each on
    its own line. Words sharing a baseline (within ``tolerance`` points) are
    joined left to right with single spaces instead.
    """
    words = sorted(page.get_text("words"), key=lambda w: (w[3], w[0]))
    rows: List[List[tuple]] = []
    baseline = None
    for w in words:
        if baseline is None or abs(w[3] - baseline) > tolerance:
            rows.append([])
            baseline = w[3]
        rows[-1].append(w)
    return [" ".join(w[4] for w in sorted(row, key=lambda w: w[0])) for row in rows]


def _read_lines_pymupdf(file_path: str, page_range: PageRange) -> List[str]:
    doc = _open_document(file_path)
    try:
        if page_range.last > doc.page_count:
            raise ExtractionIOError(
                file_path, f"page range {page_range} exceeds document length of {doc.page_count} pages"
            )
        lines: List[str] = []
        for p in iter_page_numbers(page_range, doc.page_count):
            lines.extend(_page_lines(doc.load_page(p - 1)))
        return lines
    finally:
        doc.close()


def _read_lines_pdftotext(file_path: str, page_range: PageRange, timeout: Optional[float]) -> List[str]:
    cmd = ["pdftotext", "-raw", "-f", str(page_range.first), "-l", str(page_range.last), file_path, "-"]
    try:
        proc = subprocess.run(cmd, capture_output=True, timeout=timeout, check=False)
    except FileNotFoundError:
        raise ExtractionIOError(file_path, "pdftotext executable not found") from None
    except subprocess.TimeoutExpired:
        raise ExtractionIOError(file_path, f"pdftotext timed out after {timeout}s") from None
    if proc.returncode != 0:
        stderr = proc.stderr.decode("utf-8", errors="replace").strip()
        raise ExtractionIOError(file_path, f"pdftotext exited with status {proc.returncode}: {stderr}")
    try:
        text = proc.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ExtractionIOError(file_path, f"pdftotext output is not UTF-8: {e}") from e
    return split_report_lines(text)


def read_page_lines(
    file_path: str,
    page_range: PageRange,
    backend: str = "pymupdf",
    timeout: Optional[float] = None,
) -> List[str]:
    """Return the text lines of an inclusive page range, one report line per item."""
    if backend == "pymupdf":
        lines = _read_lines_pymupdf(file_path, page_range)
    elif backend == "pdftotext":
        lines = _read_lines_pdftotext(file_path, page_range, timeout)
    else:
        raise ValueError(f"unknown text backend {backend!r}; expected one of {', '.join(BACKENDS)}")
    logger.debug("Read %d lines from %s pages %s (%s)", len(lines), file_path, page_range, backend)
    return lines
