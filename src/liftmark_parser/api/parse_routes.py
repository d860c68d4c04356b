"""
Parse endpoints

Provides POST /parse for turning LMWF text into a structured workout.
The response is always the full ParseOutcome: errors are blocking for the
caller, warnings are for a continue-or-cancel prompt.
"""

import logging
from pydantic import BaseModel, Field
from fastapi import APIRouter

from liftmark_parser.config import settings
from liftmark_parser.parsers import ParseOutcome, parse

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Request Models
# ---------------------------------------------------------------------------

class ParseRequest(BaseModel):
    """Request model for POST /parse"""
    text: str = Field(..., max_length=settings.MAX_INPUT_CHARS, description="LMWF workout text")


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@router.post("/parse", response_model=ParseOutcome)
def parse_workout_text(request: ParseRequest) -> ParseOutcome:
    """Parse workout text. Parse failures are reported in the body, not as HTTP errors."""
    outcome = parse(request.text)
    logger.info(
        f"POST /parse: success={outcome.success} "
        f"errors={len(outcome.errors)} warnings={len(outcome.warnings)}"
    )
    return outcome


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}
