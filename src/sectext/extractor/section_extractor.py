"""
Entry points of section text extraction.

Every call builds its own scanner, so concurrent extractions against the
same or different documents share no state.
"""
from typing import Optional

from core.configs import ExtractorConfig
from core.logger import exception, info
from sectext.extractor.errors import ExtractionError
from sectext.extractor.fragment_source import AsyncFragmentSource, FragmentSource
from sectext.extractor.results import ExtractionResult, ResultBuilder
from sectext.extractor.scanner import BoundaryScanner, scan_pages, scan_pages_async


def _new_scanner(identifier: str, config: Optional[ExtractorConfig]) -> BoundaryScanner:
    config = config or ExtractorConfig()
    return BoundaryScanner(
        identifier=identifier,
        safety_ceiling=config.safety_ceiling,
        separator=config.separator,
        strict_boundary=config.strict_boundary,
    )


def extract_section(
        identifier: str,
        fragment_source: FragmentSource,
        config: Optional[ExtractorConfig] = None,
) -> ExtractionResult:
    """
    Extract the text of section ``identifier`` from a consolidated document.

    Returns:
        ExtractionResult tagged CONSOLIDATED / LOW.

    Raises:
        SectionNotFound: the section start never appeared in the document.
        SourceUnavailable: the fragment source failed to deliver a page.
        ExtractionError: any other, unexpected failure.
    """
    info(f"Attempting to extract section {identifier}")
    scanner = _new_scanner(identifier, config)

    try:
        outcome = scan_pages(scanner, fragment_source)
        return ResultBuilder.from_outcome(identifier, outcome)
    except ExtractionError:
        raise
    except Exception as e:
        exception(f"Section {identifier} extraction failed: {e}")
        raise ExtractionError(f"Section {identifier} extraction failed: {e}") from e


async def extract_section_async(
        identifier: str,
        fragment_source: AsyncFragmentSource,
        config: Optional[ExtractorConfig] = None,
) -> ExtractionResult:
    """Async variant of extract_section for sources that load pages lazily."""
    info(f"Attempting to extract section {identifier}")
    scanner = _new_scanner(identifier, config)

    try:
        outcome = await scan_pages_async(scanner, fragment_source)
        return ResultBuilder.from_outcome(identifier, outcome)
    except ExtractionError:
        raise
    except Exception as e:
        exception(f"Section {identifier} extraction failed: {e}")
        raise ExtractionError(f"Section {identifier} extraction failed: {e}") from e


def extract_scoped_section(
        identifier: str,
        fragment_source: FragmentSource,
        config: Optional[ExtractorConfig] = None,
) -> ExtractionResult:
    """
    Take the whole text of a source that already holds just one section,
    e.g. a per-section PDF. No boundary detection is involved, so the result
    is tagged SECTION_SPECIFIC / HIGH.
    """
    config = config or ExtractorConfig()

    try:
        fragments = [
            fragment
            for _, page in fragment_source.iter_pages()
            for fragment in page
        ]
        return ResultBuilder.from_section_document(
            identifier,
            fragments,
            page_count=fragment_source.page_count(),
            separator=config.separator,
        )
    except ExtractionError:
        raise
    except Exception as e:
        exception(f"Section {identifier} extraction failed: {e}")
        raise ExtractionError(f"Section {identifier} extraction failed: {e}") from e
