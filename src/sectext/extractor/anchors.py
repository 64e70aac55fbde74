"""
Anchor matching for section boundaries.

Sections in consolidated acts are rendered as "<number-or-code>. <text>",
so a section starts with a fragment that opens with its identifier followed
by a period and whitespace. The next section is not known in advance, so any
fragment opening with a generic section number is treated as a boundary
candidate.

All functions here are pure and safe to call from concurrent extractions.
"""
import re
from functools import lru_cache
from typing import Optional, Tuple

import sectext.extractor.const as c


SectionKey = Tuple[int, str]


@lru_cache(maxsize=256)
def start_anchor_pattern(identifier: str) -> re.Pattern:
    """
    Compile the start anchor for a section identifier.

    The identifier is escaped, so characters like "." or "(" in it are
    matched literally.
    """
    return re.compile(
        c.START_ANCHOR_TEMPLATE.format(identifier=re.escape(identifier)),
        re.IGNORECASE
    )


def is_start_anchor(fragment: str, identifier: str) -> bool:
    """True when the fragment opens the section named by ``identifier``."""
    return start_anchor_pattern(identifier).match(fragment) is not None


def is_boundary_candidate(fragment: str) -> bool:
    """True when the fragment looks like the first line of any section."""
    return c.BOUNDARY_CANDIDATE_PATTERN.match(fragment) is not None


def section_key(identifier: str) -> Optional[SectionKey]:
    """
    Ordering key of a section identifier: ("115BAC") -> (115, "BAC").

    Returns None for identifiers that are not "<digits><letters>" shaped.
    """
    match = c.IDENTIFIER_KEY_PATTERN.match(identifier)
    if match is None:
        return None
    return int(match.group(1)), match.group(2).upper()


def is_later_boundary(fragment: str, identifier: str) -> bool:
    """
    Stricter boundary test: the candidate's section number must sort after
    the target identifier (10 < 10A < 10B < 11).

    Falls back to ``is_boundary_candidate`` when the identifier has no
    numeric key to compare against.
    """
    match = c.BOUNDARY_CANDIDATE_PATTERN.match(fragment)
    if match is None:
        return False

    current = section_key(identifier)
    if current is None:
        return True

    candidate = (int(match.group(1)), match.group(2))
    return candidate > current
