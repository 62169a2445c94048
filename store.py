"""
Submission Store
Append-only persistence for attempts. The production backend is MongoDB via
the Motor async driver; every call is awaited so the event loop keeps
serving other requests while the database answers.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

# TODO: move to pymongo.AsyncMongoClient once Motor reaches end of life
import motor.motor_asyncio as motor_async
from pymongo import ASCENDING, errors as pymongo_errors

from config import Settings, get_settings
from errors import StoreError
from leaderboard import build_pipeline
from logger import puzzle_logger
from models import LeaderboardEntry, Submission

COLLECTION_NAME = "submissions"


class SubmissionStore(ABC):
    """Operations the submission workflow and leaderboard need."""

    @abstractmethod
    async def count_attempts(self, email: str, week: str) -> int:
        ...

    @abstractmethod
    async def insert(self, submission: Submission) -> None:
        ...

    @abstractmethod
    async def leaderboard(self, week: Optional[str], limit: int) -> List[LeaderboardEntry]:
        ...

    async def ensure_indexes(self) -> None:
        pass

    async def close(self) -> None:
        pass


class MongoSubmissionStore(SubmissionStore):
    def __init__(self, uri: str, db_name: str, collection: str = COLLECTION_NAME):
        # The client owns the connection pool; nothing connects until the first operation
        self.client = motor_async.AsyncIOMotorClient(uri)
        self.collection = self.client[db_name][collection]
        puzzle_logger.info(f"MongoDB store configured: db={db_name}, collection={collection}")

    async def count_attempts(self, email: str, week: str) -> int:
        try:
            return await self.collection.count_documents({"email": email, "week": week})
        except pymongo_errors.PyMongoError as e:
            raise StoreError(f"count_attempts failed: {e}") from e

    async def insert(self, submission: Submission) -> None:
        try:
            await self.collection.insert_one(submission.to_document())
        except pymongo_errors.PyMongoError as e:
            raise StoreError(f"insert failed: {e}") from e

    async def leaderboard(self, week: Optional[str], limit: int) -> List[LeaderboardEntry]:
        try:
            cursor = self.collection.aggregate(build_pipeline(week, limit))
            rows = await cursor.to_list(length=limit)
        except pymongo_errors.PyMongoError as e:
            raise StoreError(f"leaderboard aggregation failed: {e}") from e
        return [LeaderboardEntry.model_validate(row) for row in rows]

    async def ensure_indexes(self) -> None:
        """Compound (email, week) index backing the attempt count. Not unique."""
        try:
            await self.collection.create_index(
                [("email", ASCENDING), ("week", ASCENDING)],
                name="email_week"
            )
        except pymongo_errors.PyMongoError as e:
            raise StoreError(f"index creation failed: {e}") from e
        puzzle_logger.info("✅ Connected to MongoDB, (email, week) index ready")

    async def close(self) -> None:
        self.client.close()


def create_store(settings: Settings) -> SubmissionStore:
    """Build the backend selected by STORE_BACKEND."""
    if settings.store_backend == "memory":
        from store_memory import InMemorySubmissionStore
        puzzle_logger.warning("Using in-memory submission store (data is lost on restart)")
        return InMemorySubmissionStore()
    return MongoSubmissionStore(settings.store_address, settings.database_name)


# Global store instance
_store = None


def get_store() -> SubmissionStore:
    """Get or create global store instance."""
    global _store
    if _store is None:
        _store = create_store(get_settings())
    return _store


async def reset_store() -> None:
    """Close and forget the global store."""
    global _store
    if _store is not None:
        await _store.close()
    _store = None
