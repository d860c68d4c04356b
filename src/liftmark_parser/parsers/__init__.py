"""LMWF (LiftMark Workout Format) parser pipeline."""
from .markdown_parser import MarkdownParser, parse, reprocess
from .models import (
    Diagnostic,
    DiagnosticCategory,
    GroupKind,
    ParseOutcome,
    ParsedExercise,
    ParsedSet,
    ParsedWorkout,
    Severity,
    WeightUnit,
)

__all__ = [
    "MarkdownParser",
    "parse",
    "reprocess",
    "Diagnostic",
    "DiagnosticCategory",
    "GroupKind",
    "ParseOutcome",
    "ParsedExercise",
    "ParsedSet",
    "ParsedWorkout",
    "Severity",
    "WeightUnit",
]
