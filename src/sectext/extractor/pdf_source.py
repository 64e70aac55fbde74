"""
PDF fragment sources backed by PyMuPDF.
"""
import asyncio
import threading
from pathlib import Path
from typing import List, Optional, Union

import pymupdf

from core.logger import debug, exception
from sectext.extractor.errors import SourceUnavailable
from sectext.extractor.fragment_source import AsyncFragmentSource, FragmentSource


TEXT_BLOCK_TYPE = 0


class PDFFragmentSource(FragmentSource):
    """
    Serves the text lines of a PDF document as fragments.

    Each fragment is one text line as PyMuPDF lays it out (the spans of the
    line joined together), in extraction order. Pages are decoded lazily,
    only when the engine asks for them.
    """

    def __init__(self, file_data: bytes, file_name: str = "document.pdf") -> None:
        self._file_name = file_name
        # PyMuPDF documents are not thread-safe; pages are decoded one at a time
        self._lock = threading.Lock()
        try:
            self._pdf_doc = pymupdf.open(stream=file_data, filetype="pdf")
        except (RuntimeError, ValueError) as error:
            raise SourceUnavailable(f"cannot open {file_name}: {error}") from error
        debug(f"Opened {file_name}, {self._pdf_doc.page_count=!r}")

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "PDFFragmentSource":
        path = Path(path)
        try:
            file_data = path.read_bytes()
        except OSError as error:
            raise SourceUnavailable(f"cannot read {path}: {error}") from error
        return cls(file_data, path.name)

    def __enter__(self) -> "PDFFragmentSource":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        with self._lock:
            if not self._pdf_doc.is_closed:
                self._pdf_doc.close()

    def page_count(self) -> int:
        return self._pdf_doc.page_count

    def page_fragments(self, page_n: int) -> List[str]:
        if not 1 <= page_n <= self._pdf_doc.page_count:
            raise SourceUnavailable(
                f"out of range, {self._file_name} has {self._pdf_doc.page_count} pages", page_n
            )

        try:
            with self._lock:
                page = self._pdf_doc.load_page(page_n - 1)
                page_dict = page.get_text("dict", flags=pymupdf.TEXTFLAGS_TEXT)
        except (RuntimeError, ValueError) as error:
            exception(f"Error decoding page {page_n} of {self._file_name}: {error}")
            raise SourceUnavailable(f"cannot decode {self._file_name}: {error}", page_n) from error

        fragments = []
        for block in page_dict["blocks"]:
            if block.get("type") != TEXT_BLOCK_TYPE:
                continue
            for line in block["lines"]:
                text = "".join(span["text"] for span in line["spans"])
                if text.strip():
                    fragments.append(text)

        debug(f"Extracted {len(fragments)} fragments from page {page_n}")
        return fragments


class AsyncPDFFragmentSource(AsyncFragmentSource):
    """
    Async wrapper around PDFFragmentSource.

    Page decoding is blocking, so each page is decoded in a worker thread.
    Pages are still decoded strictly one after another, on request. Several
    extractions may share one source; the wrapped source serializes decoding.
    """

    def __init__(self, source: PDFFragmentSource) -> None:
        self._source = source

    @classmethod
    def from_bytes(cls, file_data: bytes, file_name: Optional[str] = None) -> "AsyncPDFFragmentSource":
        return cls(PDFFragmentSource(file_data, file_name or "document.pdf"))

    @property
    def sync_source(self) -> PDFFragmentSource:
        return self._source

    def close(self) -> None:
        self._source.close()

    async def page_count(self) -> int:
        return self._source.page_count()

    async def page_fragments(self, page_n: int) -> List[str]:
        return await asyncio.to_thread(self._source.page_fragments, page_n)
