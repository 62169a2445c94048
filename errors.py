"""
Failure taxonomy for the submission workflow.
Each error knows the message and HTTP status the API answers with.
"""

MISSING_FIELDS_MESSAGE = "Missing name, email, or answer."
MAX_ATTEMPTS_MESSAGE = "Max attempts reached for this puzzle/week."
SERVER_ERROR_MESSAGE = "Server error. Please try again later."


class SubmissionError(Exception):
    """Base class for every failure the API maps to a response."""

    status_code = 500
    public_message = SERVER_ERROR_MESSAGE


class ValidationError(SubmissionError):
    """A required field is missing or blank."""

    status_code = 400
    public_message = MISSING_FIELDS_MESSAGE

    def __init__(self, message: str = "missing field"):
        super().__init__(message)


class AttemptLimitError(SubmissionError):
    """The participant used every attempt for the active week."""

    status_code = 400
    public_message = MAX_ATTEMPTS_MESSAGE

    def __init__(self, email: str, week: str, attempts: int):
        super().__init__(f"{email} already has {attempts} attempts for {week}")
        self.email = email
        self.week = week
        self.attempts = attempts


class StoreError(SubmissionError):
    """The submission store is unreachable or rejected an operation."""
