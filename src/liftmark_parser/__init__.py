"""LiftMark workout markdown parser."""
from liftmark_parser.parsers import (
    Diagnostic,
    DiagnosticCategory,
    GroupKind,
    MarkdownParser,
    ParseOutcome,
    ParsedExercise,
    ParsedSet,
    ParsedWorkout,
    Severity,
    WeightUnit,
    parse,
    reprocess,
)

__all__ = [
    "parse",
    "reprocess",
    "MarkdownParser",
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
