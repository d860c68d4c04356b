"""
Line Normalizer

Splits raw LMWF text into numbered lines and tags each one with its kind.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

HEADING_PATTERN = re.compile(r'^(#{1,6})\s+(.+)$')  # "## Bench Press"
LIST_ITEM_PATTERN = re.compile(r'^[-*+]\s+(.+)$')    # "- 135 x 5"
METADATA_PATTERN = re.compile(r'^@([\w-]+):\s*(.*)$')  # "@units: lbs"


class LineKind(str, Enum):
    HEADING = "heading"
    LIST_ITEM = "list_item"
    METADATA = "metadata"
    BLANK = "blank"
    TEXT = "text"


@dataclass(frozen=True)
class SourceLine:
    """One normalized source line"""
    line_number: int
    text: str
    kind: LineKind
    heading_level: Optional[int] = None
    content: Optional[str] = None  # Heading text, list item content, or metadata value
    metadata_key: Optional[str] = None

    @property
    def stripped(self) -> str:
        return self.text.strip()


def _classify(line_number: int, text: str) -> SourceLine:
    stripped = text.strip()
    if not stripped:
        return SourceLine(line_number, text, LineKind.BLANK)

    match = HEADING_PATTERN.match(stripped)
    if match:
        return SourceLine(
            line_number,
            text,
            LineKind.HEADING,
            heading_level=len(match.group(1)),
            content=match.group(2).strip(),
        )

    match = LIST_ITEM_PATTERN.match(stripped)
    if match:
        return SourceLine(line_number, text, LineKind.LIST_ITEM, content=match.group(1).strip())

    match = METADATA_PATTERN.match(stripped)
    if match:
        return SourceLine(
            line_number,
            text,
            LineKind.METADATA,
            content=match.group(2).strip(),
            metadata_key=match.group(1).lower(),
        )

    return SourceLine(line_number, text, LineKind.TEXT)


def normalize_lines(text: str) -> List[SourceLine]:
    """
    Normalize line endings and trailing whitespace.

    Blank lines are kept so line numbers match the original text.

    Args:
        text: Raw LMWF text

    Returns:
        SourceLine per input line, numbered from 1
    """
    normalized = text.replace('\r\n', '\n').replace('\r', '\n')
    return [
        _classify(index + 1, raw.rstrip())
        for index, raw in enumerate(normalized.split('\n'))
    ]
