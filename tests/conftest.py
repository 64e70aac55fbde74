from typing import List, Sequence

import pymupdf
import pytest

from sectext.extractor.fragment_source import AsyncFragmentSource, FragmentSource, ListFragmentSource


ACT_PAGES = [
    ["8. Prior section text."],
    ["9. Levy and Collection", "Tax shall be levied...", "10. Next section text."],
]


class CountingSource(FragmentSource):
    """ListFragmentSource that records which pages were requested."""

    def __init__(self, pages: Sequence[Sequence[str]]) -> None:
        self._inner = ListFragmentSource(pages)
        self.requested: List[int] = []

    def page_count(self) -> int:
        return self._inner.page_count()

    def page_fragments(self, page_n: int) -> List[str]:
        self.requested.append(page_n)
        return self._inner.page_fragments(page_n)


class AsyncListSource(AsyncFragmentSource):
    def __init__(self, pages: Sequence[Sequence[str]]) -> None:
        self._inner = ListFragmentSource(pages)
        self.requested: List[int] = []

    async def page_count(self) -> int:
        return self._inner.page_count()

    async def page_fragments(self, page_n: int) -> List[str]:
        self.requested.append(page_n)
        return self._inner.page_fragments(page_n)


def build_pdf(pages: Sequence[Sequence[str]]) -> bytes:
    """Build a PDF with one text line per fragment."""
    doc = pymupdf.open()
    for lines in pages:
        page = doc.new_page()
        for i, line in enumerate(lines):
            page.insert_text((72, 72 + i * 24), line, fontsize=11)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def act_pages() -> List[List[str]]:
    return [list(page) for page in ACT_PAGES]


@pytest.fixture
def act_pdf_bytes() -> bytes:
    return build_pdf(ACT_PAGES)
