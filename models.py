from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# --- Request / Response Schemas ---

class SubmitRequest(BaseModel):
    """
    Body of POST /submit as sent by the puzzle form.
    Fields are optional here so a missing one is reported as our own
    400 error instead of a framework 422.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    answer: Optional[str] = None

    # Numeric answers ("answer": 42) are accepted as their string form
    model_config = ConfigDict(extra='ignore', coerce_numbers_to_str=True)


class SubmitResponse(BaseModel):
    success: bool = True
    is_correct: bool = Field(alias="isCorrect")

    model_config = ConfigDict(populate_by_name=True)


class LeaderboardEntry(BaseModel):
    """One ranked participant, grouped by (email, name)."""
    name: str
    email: str
    total_attempts: int = Field(alias="totalAttempts", ge=0)
    problems_solved: int = Field(alias="problemsSolved", ge=0)

    model_config = ConfigDict(populate_by_name=True)


class ErrorResponse(BaseModel):
    error: str

# --- Stored Record ---

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Submission(BaseModel):
    """
    One attempt, written once and never updated.
    is_correct is decided at write time against the answer configured then.
    """
    name: str
    email: str
    week: str
    is_correct: bool = Field(alias="isCorrect")
    created_at: datetime = Field(default_factory=_utcnow, alias="createdAt")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_document(self) -> dict:
        """Store document using the collection's camelCase field names."""
        return self.model_dump(by_alias=True)
