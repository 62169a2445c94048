"""
In-memory Submission Store for local runs and tests.
Behaves like the MongoDB store but keeps records in a list, so no database
is required.
"""
from typing import List, Optional

from leaderboard import rank_submissions
from models import LeaderboardEntry, Submission
from store import SubmissionStore


class InMemorySubmissionStore(SubmissionStore):
    def __init__(self, submissions: Optional[List[Submission]] = None):
        self.submissions: List[Submission] = list(submissions or [])

    async def count_attempts(self, email: str, week: str) -> int:
        return sum(1 for s in self.submissions if s.email == email and s.week == week)

    async def insert(self, submission: Submission) -> None:
        self.submissions.append(submission)

    async def leaderboard(self, week: Optional[str], limit: int) -> List[LeaderboardEntry]:
        return rank_submissions(self.submissions, week, limit)
