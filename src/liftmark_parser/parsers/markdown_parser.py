"""
Markdown Parser

Entry point for the LiftMark Workout Format (LMWF). Runs the pipeline:

    normalize lines -> heading tree -> workout header -> metadata & notes
    -> grouping -> set lines & modifiers -> validation -> assembly

Parsing is pure and synchronous. Bad input never raises; every problem is
reported as a Diagnostic on the returned ParseOutcome.
"""

import logging
from typing import Optional

from .assembler import assemble
from .diagnostics import DiagnosticCollector
from .grouping import GroupingResolver
from .headings import build_heading_tree, find_workout_header
from .lines import normalize_lines
from .metadata import extract_workout_metadata, split_workout_body
from .models import DiagnosticCategory, ParseOutcome, ParsedWorkout
from .sets import parse_set_line
from .validator import WorkoutValidator
from ..config import Settings

logger = logging.getLogger(__name__)


class MarkdownParser:
    """Parser for LMWF workout text"""

    def __init__(self, config: Optional[Settings] = None):
        self.validator = WorkoutValidator(config)

    def parse(self, text: str) -> ParseOutcome:
        """
        Parse LMWF text into a structured workout.

        Args:
            text: Raw workout text

        Returns:
            ParseOutcome; success is True iff there are no errors
        """
        diagnostics = DiagnosticCollector()

        try:
            workout = self._parse(text, diagnostics)
        except Exception as e:
            logger.exception(f"Failed to parse workout text: {e}")
            diagnostics.add_error(0, f"parse error: {e}", "PARSE_ERROR", DiagnosticCategory.STRUCTURAL)
            workout = None

        errors = diagnostics.errors()
        if errors:
            workout = None

        return ParseOutcome(
            success=not errors and workout is not None,
            workout=workout,
            errors=errors,
            warnings=diagnostics.warnings(),
        )

    def _parse(self, text: str, diagnostics: DiagnosticCollector) -> Optional[ParsedWorkout]:
        lines = normalize_lines(text)
        header = find_workout_header(build_heading_tree(lines))

        if header is None:
            diagnostics.add_error(
                1,
                "no workout header found: add a heading (e.g. \"# Push Day\") with exercises and sets below it",
                "NO_WORKOUT_HEADER",
                DiagnosticCategory.STRUCTURAL,
            )
            return None

        preamble, inline_blocks = split_workout_body(header.body)
        metadata = extract_workout_metadata(preamble, diagnostics)

        resolver = GroupingResolver()
        for name_line, block in inline_blocks:
            resolver.add_inline(name_line, block)
        resolver.resolve(header.children, None, metadata.note_lines)

        for exercise in resolver.exercises:
            for line in exercise.set_lines:
                set_draft = parse_set_line(line.content, line.line_number, metadata.default_unit, diagnostics)
                if set_draft is not None:
                    exercise.sets.append(set_draft)

        self.validator.validate(resolver.exercises, header.line_number, diagnostics)

        if diagnostics.has_errors:
            return None

        workout = assemble(header.text, metadata, resolver.exercises, text)
        logger.info(
            f"Parsed workout {workout.name!r}: {len(workout.exercises)} exercises, "
            f"{sum(len(e.sets) for e in workout.exercises)} sets"
        )
        return workout


def parse(text: str) -> ParseOutcome:
    """Parse LMWF text. See MarkdownParser.parse."""
    return MarkdownParser().parse(text)


def reprocess(workout: ParsedWorkout) -> ParseOutcome:
    """Re-run the parser on a stored workout's source text."""
    return parse(workout.source_text)
