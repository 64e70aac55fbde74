"""
Exceptions raised by section extraction.

ExtractionError is the common base. Raised on its own it marks an internal
failure; its subclasses mark the two expected outcomes a caller handles.
"""
from typing import Optional


class ExtractionError(Exception):
    """
    Base class for extraction failures. A bare instance means an unexpected
    internal error, with the original exception chained as ``__cause__``.
    """
    pass


class SectionNotFound(ExtractionError):
    """
    Raised when the start anchor of the requested section never matched.

    Retrying against the same document yields the same outcome.
    """

    def __init__(self, identifier: str, page_count: Optional[int] = None):
        self.identifier = identifier
        self.page_count = page_count
        message = f"Section {identifier!r} not found"
        if page_count is not None:
            message += f" in {page_count} pages"
        super().__init__(message)


class SourceUnavailable(ExtractionError):
    """
    Raised by fragment sources when a page cannot be fetched or decoded.

    The engine propagates it untouched and never returns a partial buffer.
    """

    def __init__(self, message: str, page_n: Optional[int] = None):
        self.page_n = page_n
        if page_n is not None:
            message = f"page {page_n}: {message}"
        super().__init__(message)
