"""
This module drives section boundary detection over a paginated fragment stream.

BoundaryScanner is a two-state machine: it searches for the start anchor of
the target section, then accumulates fragments until a boundary candidate
(the start of some next section) shows up, the buffer outgrows the safety
ceiling, or the document ends.

scan_pages / scan_pages_async feed a scanner from a fragment source, pulling
one page at a time and never requesting a page after the scanner has stopped.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

import sectext.extractor.const as c
from core.logger import debug, info, warn
from sectext.extractor.anchors import is_boundary_candidate, is_later_boundary, is_start_anchor
from sectext.extractor.fragment_source import AsyncFragmentSource, FragmentSource
from sectext.extractor.results import StopReason


class ScanState(Enum):
    SEARCHING = 0
    ACCUMULATING = 1


@dataclass
class ScanOutcome:
    """
    Raw outcome of one scan, before it is turned into an ExtractionResult.
    """
    found: bool
    text: str = ""
    stop_reason: Optional[StopReason] = None
    start_page: Optional[int] = None
    end_page: Optional[int] = None
    pages_scanned: int = 0


@dataclass
class BoundaryScanner:
    """
    Scan state and buffer of a single extraction call.

    Instances are not reused: create one scanner per extraction.
    """
    identifier: str
    safety_ceiling: int = c.SAFETY_CEILING
    separator: str = c.FRAGMENT_SEPARATOR
    strict_boundary: bool = False

    state: ScanState = field(default=ScanState.SEARCHING, init=False)
    stop_reason: Optional[StopReason] = field(default=None, init=False)
    start_page: Optional[int] = field(default=None, init=False)
    end_page: Optional[int] = field(default=None, init=False)
    pages_scanned: int = field(default=0, init=False)

    _buffer: List[str] = field(default_factory=list, init=False, repr=False)
    _buffer_len: int = field(default=0, init=False, repr=False)

    @property
    def stopped(self) -> bool:
        return self.stop_reason is not None

    def _is_boundary(self, fragment: str) -> bool:
        if self.strict_boundary:
            return is_later_boundary(fragment, self.identifier)
        return is_boundary_candidate(fragment)

    def _append(self, fragment: str) -> None:
        self._buffer.append(fragment)
        self._buffer.append(self.separator)
        self._buffer_len += len(fragment) + len(self.separator)

    def begin_page(self, page_n: int) -> None:
        self.pages_scanned = page_n

    def feed(self, fragment: str, page_n: int) -> bool:
        """
        Consume one fragment of page ``page_n``.

        Returns True once the scanner has stopped; further fragments must
        not be fed.
        """
        if self.stopped:
            raise RuntimeError("fragment fed to a stopped scanner")

        fragment = fragment.strip()
        if not fragment:
            return False

        if self.state == ScanState.SEARCHING:
            if is_start_anchor(fragment, self.identifier):
                info(f"Found section {self.identifier} start on page {page_n}")
                self.state = ScanState.ACCUMULATING
                self.start_page = page_n
                self.end_page = page_n
                self._append(fragment)

        elif is_start_anchor(fragment, self.identifier):
            # Repeated header of the same section, not a new start
            debug(f"Ignoring repeated start of section {self.identifier} on page {page_n}")

        elif self._is_boundary(fragment):
            info(f"Found potential next section start: {fragment[:40]!r} on page {page_n}")
            self.stop_reason = StopReason.BOUNDARY
            return True

        else:
            self._append(fragment)
            self.end_page = page_n

        if self.state == ScanState.ACCUMULATING and self._buffer_len > self.safety_ceiling:
            warn(
                f"Section {self.identifier} buffer exceeded safety limit of "
                f"{self.safety_ceiling} chars on page {page_n}; extraction truncated"
            )
            self.stop_reason = StopReason.SAFETY_CEILING
            return True

        return False

    def finish(self) -> ScanOutcome:
        """Close the scan, whether it stopped early or the stream ran out."""
        if self.state == ScanState.SEARCHING:
            return ScanOutcome(found=False, pages_scanned=self.pages_scanned)

        return ScanOutcome(
            found=True,
            text="".join(self._buffer),
            stop_reason=self.stop_reason or StopReason.END_OF_DOCUMENT,
            start_page=self.start_page,
            end_page=self.end_page,
            pages_scanned=self.pages_scanned,
        )


def scan_pages(scanner: BoundaryScanner, source: FragmentSource) -> ScanOutcome:
    """Feed ``scanner`` from ``source`` page by page until it stops."""
    for page_n, fragments in source.iter_pages():
        scanner.begin_page(page_n)
        for fragment in fragments:
            if scanner.feed(fragment, page_n):
                return scanner.finish()

    return scanner.finish()


async def scan_pages_async(scanner: BoundaryScanner, source: AsyncFragmentSource) -> ScanOutcome:
    """
    Async variant of scan_pages. Awaiting the next page is the only
    suspension point; the page generator is closed on an early stop so no
    further page is requested.
    """
    pages = source.iter_pages()
    try:
        async for page_n, fragments in pages:
            scanner.begin_page(page_n)
            for fragment in fragments:
                if scanner.feed(fragment, page_n):
                    return scanner.finish()
    finally:
        await pages.aclose()

    return scanner.finish()
