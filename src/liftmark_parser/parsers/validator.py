"""
Validator

Walks the drafted workout and records every structural and value problem.
Errors block persistence; warnings only flag likely typos for review.
"""

import logging
from typing import List, Optional

from .diagnostics import DiagnosticCollector
from .grouping import ExerciseDraft
from .models import DiagnosticCategory
from .sets import SetDraft
from ..config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

RPE_MIN = 1.0
RPE_MAX = 10.0


class WorkoutValidator:
    """Validates exercise drafts against value ranges and structure rules"""

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or default_settings

    def validate(
        self,
        exercises: List[ExerciseDraft],
        workout_line_number: int,
        diagnostics: DiagnosticCollector,
    ) -> None:
        """
        Validate all exercises and their sets.

        Args:
            exercises: Flat list from the grouping resolver, group headers included
            workout_line_number: Line of the workout header
            diagnostics: Collector that receives every finding
        """
        performable = [exercise for exercise in exercises if not exercise.is_group]
        if not performable:
            diagnostics.add_error(
                workout_line_number,
                "workout must contain at least one exercise",
                "NO_EXERCISES",
                DiagnosticCategory.STRUCTURAL,
            )

        for exercise in performable:
            if not exercise.sets:
                diagnostics.add_error(
                    exercise.line_number,
                    f'exercise "{exercise.name}" has no sets',
                    "NO_SETS",
                    DiagnosticCategory.STRUCTURAL,
                )
            for set_draft in exercise.sets:
                self.validate_set(set_draft, diagnostics)

    def validate_set(self, set_draft: SetDraft, diagnostics: DiagnosticCollector) -> None:
        """Range checks for one set."""
        line = set_draft.line_number

        if set_draft.weight is not None and set_draft.weight < 0:
            diagnostics.add_error(
                line,
                f"weight cannot be negative, got: {set_draft.weight:g}",
                "NEGATIVE_WEIGHT",
                DiagnosticCategory.RANGE,
            )

        if set_draft.reps is not None:
            if set_draft.reps <= 0:
                diagnostics.add_error(
                    line,
                    f"reps must be positive, got: {set_draft.reps}",
                    "INVALID_REPS",
                    DiagnosticCategory.RANGE,
                )
            elif set_draft.reps > self.config.HIGH_REPS_THRESHOLD:
                diagnostics.add_warning(
                    line,
                    f"very high rep count ({set_draft.reps}); double-check for typos",
                    "HIGH_REPS",
                )

        if set_draft.time_seconds is not None and set_draft.time_seconds <= 0:
            diagnostics.add_error(
                line,
                f"time must be positive, got: {set_draft.time_seconds}s",
                "INVALID_TIME",
                DiagnosticCategory.RANGE,
            )

        if set_draft.rpe is not None and not RPE_MIN <= set_draft.rpe <= RPE_MAX:
            diagnostics.add_error(
                line,
                f"RPE out of range: must be between 1 and 10, got: {set_draft.rpe:g}",
                "RPE_OUT_OF_RANGE",
                DiagnosticCategory.RANGE,
            )

        if set_draft.rest_seconds is not None:
            rest = set_draft.rest_seconds
            if rest <= 0:
                diagnostics.add_error(
                    line,
                    f"invalid rest value: rest must be positive, got: {rest}s",
                    "INVALID_REST",
                    DiagnosticCategory.RANGE,
                )
            elif rest < self.config.MIN_REST_SECONDS:
                diagnostics.add_warning(
                    line,
                    f"very short rest period ({rest}s); double-check for typos",
                    "SHORT_REST",
                )
            elif rest > self.config.MAX_REST_SECONDS:
                diagnostics.add_warning(
                    line,
                    f"very long rest period ({rest}s); double-check for typos",
                    "LONG_REST",
                )
