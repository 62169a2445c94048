"""
Service configuration.
Everything that used to be a literal (store address, week, answer, port)
comes from the environment or a local .env file.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# --- 1. Load Environment Variables ---
load_dotenv()

ANSWER_MATCH_POLICIES = ("case_insensitive", "exact")
LEADERBOARD_SCOPES = ("all", "week")
STORE_BACKENDS = ("mongo", "memory")


def _choice(name: str, default: str, allowed) -> str:
    value = os.getenv(name, default).strip().lower()
    if value not in allowed:
        raise ValueError(f"{name} must be one of {', '.join(allowed)} (got '{value}')")
    return value


def _required(name: str, default: str) -> str:
    value = os.getenv(name, default).strip()
    if not value:
        raise ValueError(f"{name} must not be empty")
    return value


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer (got '{raw}')")
    if value < 1:
        raise ValueError(f"{name} must be positive (got {value})")
    return value


@dataclass(frozen=True)
class Settings:
    store_address: str = "mongodb://localhost:27017"
    database_name: str = "puzzlesDB"
    store_backend: str = "mongo"
    active_week: str = "week2"
    correct_answer: str = "42"
    answer_match: str = "case_insensitive"
    leaderboard_scope: str = "all"
    max_attempts: int = 3
    leaderboard_limit: int = 10
    port: int = 3000

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the environment, rejecting unknown option values."""
        return cls(
            store_address=os.getenv("MONGODB_URI", cls.store_address),
            database_name=os.getenv("MONGODB_DB", cls.database_name),
            store_backend=_choice("STORE_BACKEND", cls.store_backend, STORE_BACKENDS),
            active_week=_required("ACTIVE_WEEK", cls.active_week),
            correct_answer=_required("CORRECT_ANSWER", cls.correct_answer),
            answer_match=_choice("ANSWER_MATCH", cls.answer_match, ANSWER_MATCH_POLICIES),
            leaderboard_scope=_choice("LEADERBOARD_SCOPE", cls.leaderboard_scope, LEADERBOARD_SCOPES),
            max_attempts=_positive_int("MAX_ATTEMPTS", cls.max_attempts),
            leaderboard_limit=_positive_int("LEADERBOARD_LIMIT", cls.leaderboard_limit),
            port=_positive_int("PORT", cls.port),
        )

    @property
    def leaderboard_week(self) -> Optional[str]:
        """Week filter for the leaderboard, or None when it spans all weeks."""
        return self.active_week if self.leaderboard_scope == "week" else None


# Global settings instance
_settings = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
