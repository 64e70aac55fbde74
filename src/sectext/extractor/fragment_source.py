"""
Fragment sources feed the extraction engine one page at a time.

A source exposes its page count and, for a 1-based page number, the ordered
text fragments of that page. Loading, caching and timeouts are the source's
business; the engine only asks for the next page once it is done with the
current one.
"""
from abc import ABC, abstractmethod
from typing import AsyncIterator, Iterator, List, Sequence, Tuple

from sectext.extractor.errors import SourceUnavailable


PageFragments = Tuple[int, List[str]]


class FragmentSource(ABC):
    """Synchronous, finite, ordered source of page fragments."""

    @abstractmethod
    def page_count(self) -> int:
        pass

    @abstractmethod
    def page_fragments(self, page_n: int) -> List[str]:
        """
        Return the fragments of page ``page_n`` (1..page_count) in
        extraction order. May raise SourceUnavailable.
        """
        pass

    def iter_pages(self) -> Iterator[PageFragments]:
        """Yield (page_n, fragments), fetching each page only when asked for."""
        for page_n in range(1, self.page_count() + 1):
            yield page_n, self.page_fragments(page_n)


class AsyncFragmentSource(ABC):
    """Asynchronous counterpart of FragmentSource for I/O bound loaders."""

    @abstractmethod
    async def page_count(self) -> int:
        pass

    @abstractmethod
    async def page_fragments(self, page_n: int) -> List[str]:
        pass

    async def iter_pages(self) -> AsyncIterator[PageFragments]:
        for page_n in range(1, await self.page_count() + 1):
            yield page_n, await self.page_fragments(page_n)


class ListFragmentSource(FragmentSource):
    """In-memory source, one list of fragments per page."""

    def __init__(self, pages: Sequence[Sequence[str]]) -> None:
        self._pages = tuple(tuple(page) for page in pages)

    def page_count(self) -> int:
        return len(self._pages)

    def page_fragments(self, page_n: int) -> List[str]:
        if not 1 <= page_n <= len(self._pages):
            raise SourceUnavailable(
                f"out of range, document has {len(self._pages)} pages", page_n
            )
        return list(self._pages[page_n - 1])
