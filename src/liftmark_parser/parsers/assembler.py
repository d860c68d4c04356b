"""
Assembler

Builds the immutable ParsedWorkout from validated drafts: generated ids,
timestamps, and the verbatim source text for later reprocessing.
"""

import uuid
from datetime import datetime, timezone
from typing import List

from .grouping import ExerciseDraft
from .metadata import WorkoutMetadata, join_notes
from .models import ParsedExercise, ParsedSet, ParsedWorkout
from .sets import SetDraft


def generate_id() -> str:
    """Random UUID4 string; ids must not depend on position."""
    return str(uuid.uuid4())


def _assemble_set(set_draft: SetDraft, order_index: int) -> ParsedSet:
    return ParsedSet(
        id=generate_id(),
        order_index=order_index,
        weight=set_draft.weight,
        weight_unit=set_draft.weight_unit if set_draft.weight is not None else None,
        reps=set_draft.reps,
        is_amrap=set_draft.is_amrap,
        time_seconds=set_draft.time_seconds,
        rpe=set_draft.rpe,
        rest_seconds=set_draft.rest_seconds,
        tempo=set_draft.tempo,
        is_dropset=set_draft.is_dropset,
        is_per_side=set_draft.is_per_side,
        notes=set_draft.notes,
    )


def assemble(
    name: str,
    metadata: WorkoutMetadata,
    exercises: List[ExerciseDraft],
    source_text: str,
) -> ParsedWorkout:
    """
    Assemble the final workout tree.

    Args:
        name: Workout header text
        metadata: Workout-scope tags, units and description lines
        exercises: Flat document-ordered drafts, group headers included
        source_text: Original input, stored unchanged

    Returns:
        ParsedWorkout
    """
    exercise_ids = [generate_id() for _ in exercises]

    parsed_exercises = []
    for index, draft in enumerate(exercises):
        parsed_exercises.append(ParsedExercise(
            id=exercise_ids[index],
            name=draft.name,
            order_index=index,
            line_number=draft.line_number,
            notes=join_notes(draft.note_lines),
            equipment_type=draft.equipment_type,
            group_kind=draft.group_kind,
            group_label=draft.group_label,
            parent_id=exercise_ids[draft.parent_index] if draft.parent_index is not None else None,
            sets=[_assemble_set(set_draft, order) for order, set_draft in enumerate(draft.sets)],
        ))

    now = datetime.now(timezone.utc).isoformat()
    return ParsedWorkout(
        id=generate_id(),
        name=name,
        description=join_notes(metadata.note_lines),
        tags=metadata.tags,
        default_unit=metadata.default_unit,
        source_text=source_text,
        created_at=now,
        updated_at=now,
        exercises=parsed_exercises,
    )
