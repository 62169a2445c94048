"""
Leaderboard aggregation.

Participants are grouped by (email, name), so one email submitted under two
name spellings shows up as two rows. Ranking is problemsSolved descending,
then totalAttempts ascending, then email and name ascending so equal rows
always come back in the same order.
"""

from typing import Iterable, List, Optional

from config import Settings
from models import LeaderboardEntry, Submission


def build_pipeline(week: Optional[str], limit: int) -> List[dict]:
    """MongoDB aggregation pipeline producing ranked leaderboard rows."""
    pipeline = []
    if week is not None:
        pipeline.append({"$match": {"week": week}})
    pipeline.extend([
        {
            "$group": {
                "_id": {"email": "$email", "name": "$name"},
                "totalAttempts": {"$sum": 1},
                "problemsSolved": {"$sum": {"$cond": ["$isCorrect", 1, 0]}},
            }
        },
        {"$sort": {"problemsSolved": -1, "totalAttempts": 1, "_id.email": 1, "_id.name": 1}},
        {"$limit": limit},
        {
            "$project": {
                "_id": 0,
                "name": "$_id.name",
                "email": "$_id.email",
                "totalAttempts": 1,
                "problemsSolved": 1,
            }
        },
    ])
    return pipeline


def rank_submissions(
    submissions: Iterable[Submission],
    week: Optional[str],
    limit: int
) -> List[LeaderboardEntry]:
    """Same ranking as build_pipeline, computed in Python."""
    groups = {}
    for submission in submissions:
        if week is not None and submission.week != week:
            continue
        key = (submission.email, submission.name)
        attempts, solved = groups.get(key, (0, 0))
        groups[key] = (attempts + 1, solved + (1 if submission.is_correct else 0))

    ranked = sorted(
        groups.items(),
        key=lambda item: (-item[1][1], item[1][0], item[0][0], item[0][1])
    )
    return [
        LeaderboardEntry(name=name, email=email, total_attempts=attempts, problems_solved=solved)
        for (email, name), (attempts, solved) in ranked[:limit]
    ]


async def get_leaderboard(store, settings: Settings) -> List[LeaderboardEntry]:
    """Ranked leaderboard honouring the configured scope and length."""
    return await store.leaderboard(week=settings.leaderboard_week, limit=settings.leaderboard_limit)
