"""
Modifier Parser

Extracts `@key[: value]` modifiers trailing a set notation, e.g.
"@rpe: 8 @rest: 180s @tempo: 3-0-1-0 @dropset".

Range checks (RPE bounds, non-positive rest) are left to the validator so
that every value problem is reported in one place; this module only rejects
values it cannot read.
"""

import re
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .diagnostics import DiagnosticCollector
from .models import DiagnosticCategory
from ..utils import to_float, to_int, to_seconds

logger = logging.getLogger(__name__)

DROPSET_KEYS = frozenset({"dropset"})
PER_SIDE_KEYS = frozenset({"perside", "persideset", "per-side"})
VALUE_KEYS = frozenset({"rpe", "rest", "tempo"})
MODIFIER_KEYS = VALUE_KEYS | DROPSET_KEYS | PER_SIDE_KEYS

DURATION_UNITS = r'(?:seconds?|secs?|s|minutes?|mins?|m)'

MODIFIER_PATTERN = re.compile(r'^([\w-]+)(?:\s*:\s*(.*))?$', re.DOTALL)
KEY_ONLY_PATTERN = re.compile(r'^([\w-]+)\s+(.*)$', re.DOTALL)
RPE_VALUE_PATTERN = re.compile(r'^(-?\d+(?:\.\d+)?)(?:\s+(.*))?$', re.DOTALL)
REST_VALUE_PATTERN = re.compile(
    r'^(-?\d+)\s*(' + DURATION_UNITS + r')?(?:\s+(.*))?$',
    re.IGNORECASE | re.DOTALL,
)
TEMPO_VALUE_PATTERN = re.compile(r'^(\d+-\d+-\d+-\d+)(?:\s+(.*))?$', re.DOTALL)
FIRST_TOKEN_PATTERN = re.compile(r'^(\S*)(?:\s+(.*))?$', re.DOTALL)


@dataclass
class ModifierResult:
    """Modifiers found on one set line; values are not range checked yet"""
    rpe: Optional[float] = None
    rest_seconds: Optional[int] = None
    tempo: Optional[str] = None
    is_dropset: bool = False
    is_per_side: bool = False
    note_parts: List[str] = field(default_factory=list)


def _split_key(chunk: str):
    """Split "rpe: 8 heavy" into ("rpe", "8 heavy", True) and "dropset easy" into ("dropset", "easy", False)."""
    match = MODIFIER_PATTERN.match(chunk)
    if match:
        has_value = match.group(2) is not None
        return match.group(1).lower(), (match.group(2) or "").strip(), has_value
    match = KEY_ONLY_PATTERN.match(chunk)
    if match:
        return match.group(1).lower(), match.group(2).strip(), False
    return None, chunk, False


def parse_modifiers(text: str, line_number: int, diagnostics: DiagnosticCollector) -> ModifierResult:
    """
    Parse every modifier in text.

    Args:
        text: Set line content starting at the first "@"
        line_number: Source line, for diagnostics
        diagnostics: Collector for format errors and unknown-key warnings

    Returns:
        ModifierResult; repeated keys keep the last occurrence
    """
    result = ModifierResult()

    for raw_chunk in text.split('@'):
        chunk = raw_chunk.strip()
        if not chunk:
            continue

        key, remainder, has_value = _split_key(chunk)
        if key is None:
            result.note_parts.append(f"@{chunk}")
            continue

        if key in DROPSET_KEYS or key in PER_SIDE_KEYS:
            if key in DROPSET_KEYS:
                result.is_dropset = True
            else:
                result.is_per_side = True
            if has_value:
                # "@dropset: yes" - the value carries no meaning
                remainder = FIRST_TOKEN_PATTERN.match(remainder).group(2) or ""
            if remainder:
                result.note_parts.append(remainder)
            continue

        if key not in VALUE_KEYS:
            diagnostics.add_warning(line_number, f"unknown modifier '{key}' ignored", "UNKNOWN_MODIFIER")
            if has_value:
                remainder = FIRST_TOKEN_PATTERN.match(remainder).group(2) or ""
            if remainder:
                result.note_parts.append(remainder)
            continue

        trailing = _parse_value(key, remainder, result, line_number, diagnostics)
        if trailing:
            result.note_parts.append(trailing)

    return result


def _parse_value(
    key: str,
    value: str,
    result: ModifierResult,
    line_number: int,
    diagnostics: DiagnosticCollector,
) -> Optional[str]:
    """Apply one valued modifier to result. Returns text trailing the value."""
    if key == "rpe":
        match = RPE_VALUE_PATTERN.match(value)
        if not match:
            diagnostics.add_error(
                line_number,
                f'invalid RPE format: "{value}"',
                "INVALID_RPE_FORMAT",
                DiagnosticCategory.FORMAT,
            )
            return None
        result.rpe = to_float(match.group(1))
        return match.group(2)

    if key == "rest":
        match = REST_VALUE_PATTERN.match(value)
        if not match:
            diagnostics.add_error(
                line_number,
                f'invalid rest value: "{value}" (expected e.g. "180s" or "3m")',
                "INVALID_REST",
                DiagnosticCategory.FORMAT,
            )
            return None
        result.rest_seconds = to_seconds(to_int(match.group(1)), match.group(2))
        return match.group(3)

    match = TEMPO_VALUE_PATTERN.match(value)
    if not match:
        diagnostics.add_error(
            line_number,
            f'invalid tempo format: "{value}" (expected e.g. "3-0-1-0")',
            "INVALID_TEMPO",
            DiagnosticCategory.FORMAT,
        )
        return None
    result.tempo = match.group(1)
    return match.group(2)
