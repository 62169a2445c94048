"""
Submission Validator
Checks required fields, enforces the weekly attempt cap, grades the answer
and records the attempt.
"""

from typing import Optional

from config import Settings
from errors import AttemptLimitError, ValidationError
from logger import puzzle_logger
from models import Submission


def normalize_field(value: Optional[str]) -> str:
    """Trimmed string, or '' for a missing value."""
    if value is None:
        return ""
    return str(value).strip()


def answers_match(answer: str, correct_answer: str, policy: str) -> bool:
    """
    Compare a submitted answer with the configured one.
    Both sides are trimmed; 'case_insensitive' also lowercases them with
    str.lower(), so 'ß' and 'SS' stay different.
    """
    submitted = answer.strip()
    expected = correct_answer.strip()
    if policy == "case_insensitive":
        return submitted.lower() == expected.lower()
    if policy == "exact":
        return submitted == expected
    raise ValueError(f"Unknown answer match policy: {policy}")


async def submit_answer(
    store,
    name: Optional[str],
    email: Optional[str],
    answer: Optional[str],
    settings: Settings
) -> bool:
    """
    Validate and record one attempt for the active week.
    Returns whether the answer was correct. Raises ValidationError for a
    missing field and AttemptLimitError once the cap is reached; in both
    cases nothing is written.
    """
    name = normalize_field(name)
    email = normalize_field(email)
    answer = normalize_field(answer)
    if not name or not email or not answer:
        raise ValidationError("missing field")

    week = settings.active_week

    # The count and the insert are separate operations; concurrent requests
    # from the same participant can both pass this check.
    attempts = await store.count_attempts(email, week)
    if attempts >= settings.max_attempts:
        puzzle_logger.warning(f"ATTEMPT LIMIT: {email} has {attempts} attempts for {week}")
        raise AttemptLimitError(email, week, attempts)

    is_correct = answers_match(answer, settings.correct_answer, settings.answer_match)

    await store.insert(Submission(name=name, email=email, week=week, is_correct=is_correct))
    puzzle_logger.info(
        f"SUBMISSION RECORDED: email={email}, week={week}, "
        f"attempt={attempts + 1}/{settings.max_attempts}, correct={is_correct}"
    )
    return is_correct
