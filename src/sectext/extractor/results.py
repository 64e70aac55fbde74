"""
Public result contract of section extraction and the builder that produces it.
"""
from enum import Enum
from typing import Any, Dict, Iterable, Optional, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from sectext.extractor.errors import SectionNotFound

if TYPE_CHECKING:
    from sectext.extractor.scanner import ScanOutcome


class SourceClassification(Enum):
    SECTION_SPECIFIC = "SECTION_PDF"  # source already scoped to one section
    CONSOLIDATED = "CONSOLIDATED_PDF"  # section carved out of a larger document


class Confidence(Enum):
    HIGH = "HIGH"
    LOW = "LOW"


class StopReason(Enum):
    BOUNDARY = "boundary"
    SAFETY_CEILING = "safety_ceiling"
    END_OF_DOCUMENT = "end_of_document"
    SCOPED_SOURCE = "scoped_source"


class ExtractionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    identifier: str
    text: str
    source_classification: SourceClassification
    confidence: Confidence

    stop_reason: StopReason
    # Set when the safety ceiling cut accumulation short; the text may run
    # past the real end of the section.
    truncated: bool = False
    start_page: Optional[int] = None
    end_page: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the model to a dictionary."""
        return {
            "identifier": self.identifier,
            "text": self.text,
            "source_type": self.source_classification.value,
            "confidence": self.confidence.value,
            "stop_reason": self.stop_reason.value,
            "truncated": self.truncated,
            "start_page": self.start_page,
            "end_page": self.end_page,
        }


class ResultBuilder:
    """
    Turns raw scanner outcomes into ExtractionResult objects.

    Holds no state and does no matching; it only trims text, fixes the
    classification/confidence tags and raises SectionNotFound when nothing
    was accumulated.
    """

    @staticmethod
    def from_outcome(identifier: str, outcome: "ScanOutcome") -> ExtractionResult:
        text = outcome.text.strip()
        if not outcome.found or not text:
            raise SectionNotFound(identifier, outcome.pages_scanned)

        return ExtractionResult(
            identifier=identifier,
            text=text,
            source_classification=SourceClassification.CONSOLIDATED,
            confidence=Confidence.LOW,
            stop_reason=outcome.stop_reason,
            truncated=outcome.stop_reason == StopReason.SAFETY_CEILING,
            start_page=outcome.start_page,
            end_page=outcome.end_page,
        )

    @staticmethod
    def from_section_document(
            identifier: str,
            fragments: Iterable[str],
            page_count: Optional[int] = None,
            separator: str = " ",
    ) -> ExtractionResult:
        text = separator.join(
            f.strip() for f in fragments if f.strip()
        ).strip()
        if not text:
            raise SectionNotFound(identifier, page_count)

        return ExtractionResult(
            identifier=identifier,
            text=text,
            source_classification=SourceClassification.SECTION_SPECIFIC,
            confidence=Confidence.HIGH,
            stop_reason=StopReason.SCOPED_SOURCE,
            start_page=1 if page_count else None,
            end_page=page_count or None,
        )
