"""Document-related data models for the Contract Compare system."""

from dataclasses import dataclass, field
from typing import Tuple

from .enums import ClauseType, MarkerStyle


@dataclass(frozen=True)
class Section:
    """
    A heading-delimited block of contract text.
    
    Produced by the text segmenter. ``content`` holds the body lines below
    the heading line and may be empty when two headings are adjacent.
    """
    number: str
    title: str
    content: str
    order: int
    heading: str = ""
    marker_style: MarkerStyle = MarkerStyle.DECIMAL

    @property
    def text(self) -> str:
        """Heading line followed by the body."""
        if not self.content:
            return self.heading
        if not self.heading:
            return self.content
        return f"{self.heading}\n{self.content}"


@dataclass(frozen=True)
class Clause:
    """
    A classified section with its decomposed obligations.
    
    Clauses are immutable once classified and live only for the duration
    of a single comparison run.
    """
    section: Section
    clause_type: ClauseType
    obligations: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def title(self) -> str:
        return self.section.title

    @property
    def number(self) -> str:
        return self.section.number

    @property
    def order(self) -> int:
        return self.section.order

    @property
    def content(self) -> str:
        return self.section.content

    @property
    def text(self) -> str:
        return self.section.text
