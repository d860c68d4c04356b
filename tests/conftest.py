"""
Test fixtures for liftmark-parser.

Provides the FastAPI test client and sample LMWF documents shared by the
parser and endpoint tests.
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import liftmark_parser...`
src_str = str(SRC)
if src_str not in sys.path:
    sys.path.insert(0, src_str)

from liftmark_parser.main import app


# ---------------------------------------------------------------------------
# Core Test Client
# ---------------------------------------------------------------------------


@pytest.fixture
def client() -> TestClient:
    """Per-test FastAPI TestClient."""
    return TestClient(app)


# ---------------------------------------------------------------------------
# Sample Documents
# ---------------------------------------------------------------------------


PUSH_DAY_INLINE = """\
# Push Day A
@tags: push, chest
@units: lbs

Bench Press
- 135 x 10
- 185 x 8 @rpe: 9 @rest: 180s
"""

SIMPLE_WORKOUT = """\
# Push Day
@tags: push, strength
@units: lbs

Feeling strong today, going for PRs!

## Bench Press

Focus on bar path and leg drive.

- 135 x 5 @rest: 120s
- 185 x 5 @rest: 180s
- 225 x 5 @rpe: 8

## Overhead Press
- 95 x 8 @rest: 90s
- 115 x 8 @rest: 90s
- 135 x 6 @rpe: 8
"""

SUPERSET_WORKOUT = """\
# Chest & Triceps
@tags: bodybuilding, push, hypertrophy

## Barbell Bench Press
- 135 lbs x 12 reps @rest: 90s
- 185 lbs x 10 reps @rest: 90s

## Superset: Chest Finisher

### Cable Fly
- 30 lbs x 15 reps @rest: 30s
- 30 lbs x 12 reps @rest: 30s

### Dumbbell Pullover
- 50 lbs x 15 reps @rest: 90s

## Tricep Pushdown

Final set is a drop set.

- 60 lbs x 15 reps @rest: 60s
- 60 lbs x 15 reps @dropset
"""

BODYWEIGHT_WORKOUT = """\
# Calisthenics
@tags: bodyweight, calisthenics

## Pull-ups
- 10 @rest: 120s
- 8 @rest: 120s
- AMRAP

## Plank

Adding weight on last two sets.

- 60s @rest: 30s
- 45 lbs x 60s @rest: 30s
- 45 lbs for 45s
"""


@pytest.fixture
def push_day_inline() -> str:
    return PUSH_DAY_INLINE


@pytest.fixture
def simple_workout() -> str:
    return SIMPLE_WORKOUT


@pytest.fixture
def superset_workout() -> str:
    return SUPERSET_WORKOUT


@pytest.fixture
def bodyweight_workout() -> str:
    return BODYWEIGHT_WORKOUT
