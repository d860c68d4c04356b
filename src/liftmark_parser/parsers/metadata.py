"""
Metadata & Notes Extractor

Handles `@key: value` lines and freeform prose for the workout and exercise
scopes. Unknown keys are ignored silently so newer documents still parse.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .diagnostics import DiagnosticCollector
from .lines import LineKind, SourceLine
from .models import DiagnosticCategory, WeightUnit

logger = logging.getLogger(__name__)

WORKOUT_METADATA_KEYS = frozenset({"tags", "units"})
EXERCISE_METADATA_KEYS = frozenset({"type"})

UNIT_ALIASES = {
    "lbs": WeightUnit.LBS,
    "lb": WeightUnit.LBS,
    "kg": WeightUnit.KG,
    "kgs": WeightUnit.KG,
}


@dataclass
class WorkoutMetadata:
    tags: List[str] = field(default_factory=list)
    default_unit: Optional[WeightUnit] = None
    note_lines: List[str] = field(default_factory=list)


@dataclass
class ExerciseBody:
    equipment_type: Optional[str] = None
    note_lines: List[str] = field(default_factory=list)
    set_lines: List[SourceLine] = field(default_factory=list)


def join_notes(note_lines: List[str]) -> Optional[str]:
    return "\n".join(note_lines) if note_lines else None


def parse_tags(value: str, existing: Optional[List[str]] = None) -> List[str]:
    """
    Parse "@tags: push, Chest, push" into ["push", "Chest"].

    Duplicates are detected case-insensitively; the first spelling wins.
    """
    tags = list(existing or [])
    seen = {tag.lower() for tag in tags}
    for raw in value.split(","):
        tag = raw.strip()
        if tag and tag.lower() not in seen:
            seen.add(tag.lower())
            tags.append(tag)
    return tags


def parse_units(value: str, line_number: int, diagnostics: DiagnosticCollector) -> Optional[WeightUnit]:
    """Parse "@units: lbs|kg". Anything else is a metadata error."""
    unit = UNIT_ALIASES.get(value.strip().lower())
    if unit is None:
        diagnostics.add_error(
            line_number,
            f'invalid @units value "{value}": must be "lbs" or "kg"',
            "INVALID_UNITS",
            DiagnosticCategory.METADATA,
        )
    return unit


def find_inline_exercise_starts(body: List[SourceLine]) -> List[int]:
    """
    Find prose lines that name an inline exercise.

    A prose line names an exercise when a set line follows it directly.
    Exercise metadata (@type) may sit in between. Blank lines and workout
    keys (@tags, @units) may not: those belong to the workout scope.

    Returns:
        Indexes into body
    """
    starts = []
    for index, line in enumerate(body):
        if line.kind != LineKind.TEXT:
            continue
        probe = index + 1
        while (
            probe < len(body)
            and body[probe].kind == LineKind.METADATA
            and body[probe].metadata_key not in WORKOUT_METADATA_KEYS
        ):
            probe += 1
        if probe < len(body) and body[probe].kind == LineKind.LIST_ITEM:
            starts.append(index)
    return starts


def split_workout_body(
    body: List[SourceLine],
) -> Tuple[List[SourceLine], List[Tuple[SourceLine, List[SourceLine]]]]:
    """
    Split the workout header's own body into its preamble and inline exercises.

    Returns:
        (preamble lines, [(exercise name line, exercise body lines), ...])
    """
    starts = find_inline_exercise_starts(body)
    if not starts:
        return body, []

    preamble = body[:starts[0]]
    blocks = []
    for position, start in enumerate(starts):
        end = starts[position + 1] if position + 1 < len(starts) else len(body)
        blocks.append((body[start], body[start + 1:end]))
    return preamble, blocks


def extract_workout_metadata(lines: List[SourceLine], diagnostics: DiagnosticCollector) -> WorkoutMetadata:
    """Collect @tags, @units and description prose from the workout scope."""
    metadata = WorkoutMetadata()

    for line in lines:
        if line.kind == LineKind.METADATA:
            if line.metadata_key not in WORKOUT_METADATA_KEYS:
                logger.debug(f"Ignoring workout metadata @{line.metadata_key} (line {line.line_number})")
            elif line.metadata_key == "tags":
                metadata.tags = parse_tags(line.content, metadata.tags)
            else:
                unit = parse_units(line.content, line.line_number, diagnostics)
                if unit is not None:
                    metadata.default_unit = unit
        elif line.kind == LineKind.LIST_ITEM:
            diagnostics.add_warning(
                line.line_number,
                "set line outside of an exercise ignored",
                "ORPHAN_SET_LINE",
            )
        elif line.kind == LineKind.TEXT:
            metadata.note_lines.append(line.stripped)

    return metadata


def extract_exercise_body(lines: List[SourceLine]) -> ExerciseBody:
    """
    Collect @type, notes and set lines from an exercise scope.

    Metadata counts only before the first set line; prose anywhere is notes.
    """
    body = ExerciseBody()

    for line in lines:
        if line.kind == LineKind.LIST_ITEM:
            body.set_lines.append(line)
        elif line.kind == LineKind.METADATA:
            if body.set_lines:
                logger.debug(f"Ignoring metadata after sets (line {line.line_number})")
            elif line.metadata_key not in EXERCISE_METADATA_KEYS:
                logger.debug(f"Ignoring exercise metadata @{line.metadata_key} (line {line.line_number})")
            else:
                body.equipment_type = line.content or None
        elif line.kind == LineKind.TEXT:
            body.note_lines.append(line.stripped)

    return body


def prose_lines(lines: List[SourceLine]) -> List[str]:
    """Prose of a body that is absorbed as notes; metadata and set lines are dropped."""
    return [line.stripped for line in lines if line.kind == LineKind.TEXT]
