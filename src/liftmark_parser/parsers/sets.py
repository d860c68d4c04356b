"""
Set Line Parser

Matches the content of a set line against an ordered list of notations.
The first alternative that matches wins, so precedence is explicit:

    1. 225 lbs x 5          weight with unit, reps ("225 lbs for 5" too)
    2. 225 x 5              weight, reps (unit from @units)
    3. 135 x AMRAP / AMRAP  as many reps as possible
    4. 45 lbs for 60s       timed, weight optional
    5. 60s                  bodyweight, timed
    6. bw x 10 / x 10       bodyweight reps
    7. 10                   bare integer, bodyweight reps ("135 lbs" is rejected)

Anything after the notation and before the first "@" is kept as set notes.
"""

import re
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .diagnostics import DiagnosticCollector
from .metadata import UNIT_ALIASES
from .models import DiagnosticCategory, WeightUnit
from .modifiers import DURATION_UNITS, parse_modifiers
from ..utils import to_float, to_int, to_seconds

logger = logging.getLogger(__name__)

_WEIGHT = r'(?P<weight>-?\d+(?:\.\d+)?)'
_UNIT = r'(?P<unit>lbs?|kgs?)'
_TIMES = r'[x×]'
_SEPARATOR = r'(?:[x×]|for\b)'
# Reps never swallow a duration ("60 s" is time, not reps)
_REPS = r'(?P<reps>-?\d+)(?!\s*' + DURATION_UNITS + r'\b)(?:\s*reps?)?'
_DURATION = r'(?P<duration>-?\d+)\s*(?P<duration_unit>' + DURATION_UNITS + r')'
_TRAILING = r'(?:\s+(?P<trailing>.*))?$'


def _form(body: str) -> re.Pattern:
    return re.compile(r'^' + body + _TRAILING, re.IGNORECASE | re.DOTALL)


SET_FORMS: List[Tuple[str, re.Pattern]] = [
    ("weighted_unit_reps", _form(_WEIGHT + r'\s*' + _UNIT + r'\s*' + _SEPARATOR + r'\s*' + _REPS)),
    ("weighted_reps", _form(_WEIGHT + r'\s*' + _SEPARATOR + r'\s*' + _REPS)),
    ("amrap", _form(
        r'(?:(?:' + _WEIGHT + r'\s*(?:' + _UNIT + r'\s*)?|bw\s*)' + _TIMES + r'\s*)?amrap'
    )),
    ("timed", _form(
        r'(?:' + _WEIGHT + r'\s*(?:' + _UNIT + r'\s*)?|bw\s*)?(?:' + _TIMES + r'|for\b)\s*' + _DURATION
    )),
    ("duration_only", _form(_DURATION)),
    ("bodyweight_reps", _form(r'(?:bw\s*)?' + _TIMES + r'\s*' + _REPS)),
    # A number followed by a weight unit is a weight with the reps missing
    ("bare_reps", _form(_REPS + r'(?!\s*(?:lbs?|kgs?)\b)')),
]


@dataclass
class SetDraft:
    """A set as written, before range validation and id assignment"""
    line_number: int
    weight: Optional[float] = None
    weight_unit: Optional[WeightUnit] = None
    reps: Optional[int] = None
    is_amrap: bool = False
    time_seconds: Optional[int] = None
    rpe: Optional[float] = None
    rest_seconds: Optional[int] = None
    tempo: Optional[str] = None
    is_dropset: bool = False
    is_per_side: bool = False
    notes: Optional[str] = None


def match_set_notation(core: str) -> Optional[Tuple[str, re.Match]]:
    """Return (form name, match) for the first notation that matches core."""
    for name, pattern in SET_FORMS:
        match = pattern.match(core)
        if match:
            return name, match
    return None


def parse_set_line(
    content: str,
    line_number: int,
    default_unit: Optional[WeightUnit],
    diagnostics: DiagnosticCollector,
) -> Optional[SetDraft]:
    """
    Parse the content of one set line (list marker already stripped).

    Args:
        content: e.g. "185 x 8 @rpe: 9 @rest: 180s"
        line_number: Source line, for diagnostics
        default_unit: Workout @units, used when a weight has no unit
        diagnostics: Collector for format errors

    Returns:
        SetDraft, or None when the notation is not recognized
    """
    core, at, modifier_text = content.partition('@')
    core = core.strip()

    matched = match_set_notation(core)
    if matched is None:
        diagnostics.add_error(
            line_number,
            f'invalid set format: "{content}" (expected e.g. "225 lbs x 5", "60s" or "AMRAP")',
            "INVALID_SET_FORMAT",
            DiagnosticCategory.FORMAT,
        )
        return None

    form, match = matched
    groups = match.groupdict()
    draft = SetDraft(line_number=line_number)

    if groups.get("weight") is not None:
        draft.weight = to_float(groups["weight"])
        if groups.get("unit"):
            draft.weight_unit = UNIT_ALIASES[groups["unit"].lower()]
        else:
            draft.weight_unit = default_unit

    if form == "amrap":
        draft.is_amrap = True
    elif groups.get("duration") is not None:
        draft.time_seconds = to_seconds(to_int(groups["duration"]), groups["duration_unit"])
    else:
        draft.reps = to_int(groups["reps"])

    note_parts = []
    if groups.get("trailing"):
        note_parts.append(groups["trailing"].strip())

    if at:
        modifiers = parse_modifiers(modifier_text, line_number, diagnostics)
        draft.rpe = modifiers.rpe
        draft.rest_seconds = modifiers.rest_seconds
        draft.tempo = modifiers.tempo
        draft.is_dropset = modifiers.is_dropset
        draft.is_per_side = modifiers.is_per_side
        note_parts.extend(modifiers.note_parts)

    notes = " ".join(part for part in note_parts if part).strip()
    draft.notes = notes or None

    logger.debug(f"Line {line_number}: matched set form {form!r}")
    return draft
