"""Unit tests for the workout validator."""
import pytest

from liftmark_parser.config import Settings
from liftmark_parser.parsers.diagnostics import DiagnosticCollector
from liftmark_parser.parsers.grouping import ExerciseDraft
from liftmark_parser.parsers.models import GroupKind
from liftmark_parser.parsers.sets import SetDraft
from liftmark_parser.parsers.validator import WorkoutValidator


def validate(exercises, config=None):
    diagnostics = DiagnosticCollector()
    WorkoutValidator(config).validate(exercises, 1, diagnostics)
    return diagnostics


def exercise_with(*sets):
    return ExerciseDraft(name="Bench", line_number=2, sets=list(sets))


class TestStructure:
    """Test cases for workout and exercise structure errors."""

    def test_no_exercises(self):
        """Test an empty workout is reported at the header line."""
        diagnostics = validate([])
        error = diagnostics.errors()[0]
        assert error.code == "NO_EXERCISES"
        assert error.category == "structural"
        assert error.line_number == 1

    def test_only_group_headers_counts_as_empty(self):
        """Test group headers alone do not make a workout."""
        group = ExerciseDraft(name="Warmup", line_number=2, group_kind=GroupKind.SECTION, group_label="Warmup")
        assert validate([group]).errors()[0].code == "NO_EXERCISES"

    def test_exercise_without_sets(self):
        """Test an exercise with no sets is reported at its heading line."""
        diagnostics = validate([exercise_with()])
        error = diagnostics.errors()[0]
        assert error.code == "NO_SETS"
        assert error.line_number == 2
        assert '"Bench"' in error.message

    def test_group_header_without_sets_is_fine(self):
        """Test group headers never need sets."""
        group = ExerciseDraft(name="Warmup", line_number=2, group_kind=GroupKind.SECTION, group_label="Warmup")
        member = ExerciseDraft(name="Jog", line_number=3, parent_index=0, sets=[SetDraft(4, time_seconds=300)])
        assert not validate([group, member]).has_errors


class TestSetRanges:
    """Test cases for blocking range checks on sets."""

    def test_negative_weight(self):
        """Test negative weight is a range error on the set line."""
        error = validate([exercise_with(SetDraft(3, weight=-5, reps=10))]).errors()[0]
        assert error.code == "NEGATIVE_WEIGHT"
        assert error.category == "range"
        assert error.line_number == 3

    def test_zero_weight_is_bodyweight(self):
        """Test zero weight is allowed."""
        assert not validate([exercise_with(SetDraft(3, weight=0, reps=10))]).has_errors

    @pytest.mark.parametrize("reps", [0, -3])
    def test_non_positive_reps(self, reps):
        """Test zero and negative reps are errors."""
        assert validate([exercise_with(SetDraft(3, reps=reps))]).errors()[0].code == "INVALID_REPS"

    def test_non_positive_time(self):
        """Test zero time is an error."""
        assert validate([exercise_with(SetDraft(3, time_seconds=0))]).errors()[0].code == "INVALID_TIME"

    @pytest.mark.parametrize("rpe", [1, 1.0, 7.5, 10])
    def test_rpe_bounds_accepted(self, rpe):
        """Test RPE 1 through 10 inclusive."""
        assert not validate([exercise_with(SetDraft(3, reps=5, rpe=rpe))]).has_errors

    @pytest.mark.parametrize("rpe", [0, 0.5, 10.5, 11])
    def test_rpe_out_of_range(self, rpe):
        """Test RPE outside 1 to 10 is an error."""
        error = validate([exercise_with(SetDraft(3, reps=5, rpe=rpe))]).errors()[0]
        assert error.code == "RPE_OUT_OF_RANGE"
        assert "RPE out of range" in error.message

    def test_non_positive_rest(self):
        """Test zero rest is an error."""
        error = validate([exercise_with(SetDraft(3, reps=5, rest_seconds=0))]).errors()[0]
        assert error.code == "INVALID_REST"
        assert "invalid rest value" in error.message

    def test_collects_every_error(self):
        """Test validation never stops at the first problem."""
        diagnostics = validate([exercise_with(
            SetDraft(3, weight=-5, reps=0, rpe=12),
            SetDraft(4, reps=5, rest_seconds=-1),
        )])
        assert [e.code for e in diagnostics.errors()] == [
            "NEGATIVE_WEIGHT", "INVALID_REPS", "RPE_OUT_OF_RANGE", "INVALID_REST",
        ]


class TestAdvisoryWarnings:
    """Test cases for non-blocking warnings."""

    def test_high_reps(self):
        """Test more than 100 reps warns."""
        diagnostics = validate([exercise_with(SetDraft(3, reps=101))])
        assert not diagnostics.has_errors
        assert diagnostics.warnings()[0].code == "HIGH_REPS"

    def test_hundred_reps_is_fine(self):
        """Test exactly 100 reps does not warn."""
        assert not validate([exercise_with(SetDraft(3, reps=100))]).warnings()

    @pytest.mark.parametrize("rest, code", [(5, "SHORT_REST"), (601, "LONG_REST")])
    def test_rest_bounds(self, rest, code):
        """Test very short and very long rest warn."""
        diagnostics = validate([exercise_with(SetDraft(3, reps=5, rest_seconds=rest))])
        assert not diagnostics.has_errors
        assert diagnostics.warnings()[0].code == code
        assert diagnostics.warnings()[0].category == "advisory"

    @pytest.mark.parametrize("rest", [10, 600])
    def test_rest_boundaries_no_warning(self, rest):
        """Test 10s and 600s rest do not warn."""
        assert not validate([exercise_with(SetDraft(3, reps=5, rest_seconds=rest))]).warnings()

    def test_thresholds_from_settings(self, monkeypatch):
        """Test thresholds follow the environment."""
        monkeypatch.setenv("LMWF_HIGH_REPS_THRESHOLD", "20")
        diagnostics = validate([exercise_with(SetDraft(3, reps=25))], config=Settings())
        assert diagnostics.warnings()[0].code == "HIGH_REPS"
