"""
Diagnostics

Collects errors and warnings for a single parse. Nothing short-circuits:
every stage records what it finds and keeps going.
"""

import logging
from typing import List

from .models import Diagnostic, DiagnosticCategory, Severity

logger = logging.getLogger(__name__)


class DiagnosticCollector:
    """Accumulates diagnostics in emission order"""

    def __init__(self):
        self._errors: List[Diagnostic] = []
        self._warnings: List[Diagnostic] = []

    def add_error(
        self,
        line_number: int,
        message: str,
        code: str,
        category: DiagnosticCategory,
    ) -> None:
        """Add an error message"""
        self._errors.append(Diagnostic(
            line_number=line_number,
            severity=Severity.ERROR,
            message=message,
            code=code,
            category=category,
        ))
        logger.error(f"Parser error (line {line_number}): {message}")

    def add_warning(self, line_number: int, message: str, code: str) -> None:
        """Add a warning message"""
        self._warnings.append(Diagnostic(
            line_number=line_number,
            severity=Severity.WARNING,
            message=message,
            code=code,
            category=DiagnosticCategory.ADVISORY,
        ))
        logger.warning(f"Parser warning (line {line_number}): {message}")

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    def errors(self) -> List[Diagnostic]:
        """Errors ordered by line number; ties keep emission order."""
        return sorted(self._errors, key=lambda d: d.line_number)

    def warnings(self) -> List[Diagnostic]:
        """Warnings ordered by line number; ties keep emission order."""
        return sorted(self._warnings, key=lambda d: d.line_number)
