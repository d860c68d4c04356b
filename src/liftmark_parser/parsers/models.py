"""
Parser Models

Pydantic models for the structured workout tree produced by the LMWF parser.
Every model is frozen: a ParseOutcome is never mutated after it is returned.
"""

from typing import List, Optional
from pydantic import BaseModel, Field
from enum import Enum


class WeightUnit(str, Enum):
    """Weight units accepted by @units and set notation"""
    LBS = "lbs"
    KG = "kg"


class GroupKind(str, Enum):
    """How an exercise relates to a grouping header"""
    NONE = "none"
    SUPERSET = "superset"  # Performed back to back with shared rest
    SECTION = "section"    # Organizational grouping ("Warmup", "Cooldown")


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class DiagnosticCategory(str, Enum):
    """Error taxonomy"""
    STRUCTURAL = "structural"  # No workout header, empty workout, exercise without sets
    FORMAT = "format"          # Unparseable set line, tempo, rest, RPE
    RANGE = "range"            # RPE, negative weight, non-positive reps/time/rest
    METADATA = "metadata"      # Invalid @units
    ADVISORY = "advisory"      # Warnings only


class Diagnostic(BaseModel):
    """A single error or warning tied to a source line"""
    line_number: int = Field(..., ge=0, description="1-based source line (0 when not line specific)")
    severity: Severity
    message: str
    code: str = Field(..., description="Stable machine-readable code, e.g. 'INVALID_SET_FORMAT'")
    category: DiagnosticCategory

    class Config:
        use_enum_values = True
        frozen = True


class ParsedSet(BaseModel):
    """One planned set. Expresses reps, time, or AMRAP."""
    id: str
    order_index: int = Field(..., ge=0)
    weight: Optional[float] = Field(default=None, description="None or 0 means bodyweight")
    weight_unit: Optional[WeightUnit] = Field(default=None, description="Only set when weight is present")
    reps: Optional[int] = None
    is_amrap: bool = False
    time_seconds: Optional[int] = None
    rpe: Optional[float] = Field(default=None, ge=1, le=10)
    rest_seconds: Optional[int] = None
    tempo: Optional[str] = None  # e.g., "3-0-1-0"
    is_dropset: bool = False
    is_per_side: bool = False
    notes: Optional[str] = Field(default=None, description="Free text trailing the set notation")

    class Config:
        use_enum_values = True
        frozen = True

    @property
    def is_bodyweight(self) -> bool:
        return not self.weight


class ParsedExercise(BaseModel):
    """An exercise, or a group header pseudo-exercise when sets is empty"""
    id: str
    name: str
    order_index: int = Field(..., ge=0)
    line_number: int = Field(default=0, ge=0)
    notes: Optional[str] = None
    equipment_type: Optional[str] = None
    group_kind: GroupKind = GroupKind.NONE
    group_label: Optional[str] = Field(default=None, description="Only on group header pseudo-exercises")
    parent_id: Optional[str] = Field(default=None, description="Id of the enclosing group header")
    sets: List[ParsedSet] = Field(default_factory=list)

    class Config:
        use_enum_values = True
        frozen = True

    @property
    def is_group(self) -> bool:
        return self.group_label is not None


class ParsedWorkout(BaseModel):
    """Structured workout template built from LMWF text"""
    id: str
    name: str = Field(..., min_length=1, description="Text of the workout header")
    description: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    default_unit: Optional[WeightUnit] = None
    source_text: str = Field(..., description="Verbatim input, kept for reprocessing")
    created_at: str
    updated_at: str
    exercises: List[ParsedExercise] = Field(default_factory=list)

    class Config:
        use_enum_values = True
        frozen = True

    def performable_exercises(self) -> List[ParsedExercise]:
        """Exercises excluding group header pseudo-exercises."""
        return [exercise for exercise in self.exercises if not exercise.is_group]


class ParseOutcome(BaseModel):
    """Result of parsing one LMWF document"""
    success: bool
    workout: Optional[ParsedWorkout] = None
    errors: List[Diagnostic] = Field(default_factory=list)
    warnings: List[Diagnostic] = Field(default_factory=list)

    class Config:
        frozen = True
