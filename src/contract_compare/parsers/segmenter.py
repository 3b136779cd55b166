"""Heading-based text segmentation.

This module splits plain contract text into ordered sections by detecting
line-initial heading markers such as "1.", "1.1", "A.", "(a)" or "IV.".
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Tuple

from ..models.document import Section
from ..models.enums import MarkerStyle
from .exceptions import NoSectionsFoundError


logger = logging.getLogger(__name__)

UNTITLED_SECTION = "Untitled Section"
MAX_TITLE_LENGTH = 100


@dataclass(frozen=True)
class HeadingRule:
    """A heading marker pattern and the style it denotes."""
    style: MarkerStyle
    pattern: Pattern[str]


# A number without a dot is a heading only when the rest of the line is a
# short capitalised title, so wrapped body lines such as "30 (thirty) days"
# stay in the body.
BARE_NUMBER_HEADING = (
    r'^\d{1,3}(?=\s+[A-Z][\w-]*'
    r'(?:\s+(?:[A-Z][\w-]*|of|and|or|the|to|for|in|on))*\s*$)'
)

# Tested in order; the first rule that matches wins.
HEADING_RULES: Tuple[HeadingRule, ...] = (
    HeadingRule(
        MarkerStyle.DECIMAL,
        re.compile(r'^\d+(?:\.\d+)+\.?(?=\s|$)|^\d+\.(?=\s|$)|' + BARE_NUMBER_HEADING),
    ),
    HeadingRule(MarkerStyle.CAPITAL_LETTER, re.compile(r'^[A-Z]\.(?!\d)')),
    HeadingRule(MarkerStyle.LETTERED_SUBSECTION, re.compile(r'^[A-Z]\.\d+\.?')),
    HeadingRule(MarkerStyle.PAREN_LETTER, re.compile(r'^\([a-z]\)')),
    HeadingRule(MarkerStyle.PAREN_ROMAN, re.compile(r'^\([ivxlcdm]+\)', re.IGNORECASE)),
    HeadingRule(MarkerStyle.ROMAN, re.compile(r'^[IVXLCDM]+\.')),
)

# Generic casing patterns used when no line looks like a title.
TITLE_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r'^[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*'),  # Title Case
    re.compile(r'^[A-Z]+(?:\s+[A-Z]+)*'),  # ALL CAPS
    re.compile(r'^[A-Z][a-z]+(?:\s+[a-z]+)*'),  # Sentence case
)


@dataclass
class _SectionBuilder:
    """Section in progress while scanning lines."""
    number: str
    heading: str
    remainder: str
    marker_style: MarkerStyle
    order: int
    body: List[str]


class TextSegmenter:
    """
    Splits plain text into ordered sections.

    Scans line by line with a two-state accumulator: before the first
    heading nothing is collected; once a heading is seen, following lines
    accumulate into the current section until the next heading or the end
    of input flushes it.
    """

    def __init__(self, rules: Tuple[HeadingRule, ...] = HEADING_RULES):
        self._rules = rules

    def segment(self, text: str) -> List[Section]:
        """
        Segment text into sections.

        Args:
            text: Plain text extracted from a contract.

        Returns:
            Sections in document order.

        Raises:
            NoSectionsFoundError: If the text contains no heading line.
        """
        sections: List[Section] = []
        current: Optional[_SectionBuilder] = None

        for line in (text or "").splitlines():
            heading = self.match_heading(line)
            if heading is not None:
                if current is not None:
                    sections.append(self._flush(current))
                style, number = heading
                stripped = line.strip()
                current = _SectionBuilder(
                    number=number,
                    heading=stripped,
                    remainder=stripped[len(number):].strip(),
                    marker_style=style,
                    order=len(sections),
                    body=[],
                )
            elif current is not None:
                current.body.append(line)

        if current is not None:
            sections.append(self._flush(current))

        if not sections:
            raise NoSectionsFoundError(
                message=(
                    "No sections found in the document. Please ensure the "
                    "document contains numbered sections."
                )
            )

        logger.debug(f"Segmented text into {len(sections)} sections")
        return sections

    def match_heading(self, line: str) -> Optional[Tuple[MarkerStyle, str]]:
        """
        Check whether a line starts a new section.

        Returns:
            Tuple of (marker style, marker text) if the line is a heading,
            None otherwise.
        """
        candidate = line.lstrip()
        if not candidate:
            return None
        for rule in self._rules:
            match = rule.pattern.match(candidate)
            if match:
                return rule.style, match.group(0)
        return None

    def _flush(self, builder: _SectionBuilder) -> Section:
        content = "\n".join(builder.body).strip()
        lines = [builder.remainder] + builder.body
        return Section(
            number=builder.number,
            title=extract_title(lines),
            content=content,
            order=builder.order,
            heading=builder.heading,
            marker_style=builder.marker_style,
        )


def extract_title(lines: List[str]) -> str:
    """
    Pick a section title from the heading remainder and body lines.

    The first short line starting with an uppercase letter wins; failing
    that, the first generic casing match; failing that, the first
    non-empty line.
    """
    stripped = [line.strip() for line in lines if line and line.strip()]

    for line in stripped:
        if len(line) < MAX_TITLE_LENGTH and line[0].isupper():
            return line

    for line in stripped:
        for pattern in TITLE_PATTERNS:
            match = pattern.match(line)
            if match:
                return match.group(0)

    if stripped:
        return stripped[0]

    return UNTITLED_SECTION
