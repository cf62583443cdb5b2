from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session

from hardinfinity.models import Challenge, DayRecord


@dataclass(frozen=True)
class StreakSummary:
    current_streak: int
    longest_streak: int
    completed_days: int
    total_days: int
    completion_rate: float


def summarize_streaks(days: Iterable[Tuple[int, bool]], program_length: int) -> StreakSummary:
    """Fold ``(day_number, completed)`` pairs, ascending by day, into streak figures.

    The running streak grows on a completed day and resets on an incomplete one.
    ``current_streak`` is only captured where a run can end: at the last record,
    or just before a jump of more than one day number. It is captured only if that
    record is completed; otherwise the previously captured value stands. A missing
    day does not reset the running streak itself.
    """
    records: Sequence[Tuple[int, bool]] = list(days)
    streak = 0
    longest = 0
    current = 0
    completed_days = 0

    for i, (day_number, completed) in enumerate(records):
        if completed:
            completed_days += 1
            streak += 1
            longest = max(longest, streak)
        else:
            streak = 0

        at_boundary = i == len(records) - 1 or records[i + 1][0] > day_number + 1
        if at_boundary and completed and streak > 0:
            current = streak

    rate = (completed_days / program_length * 100) if program_length > 0 else 0.0
    return StreakSummary(
        current_streak=current,
        longest_streak=longest,
        completed_days=completed_days,
        total_days=program_length,
        completion_rate=rate,
    )


def get_challenge_progress(db: Session, challenge: Challenge) -> dict:
    rows = db.execute(
        select(DayRecord.day_number, DayRecord.completed)
        .where(DayRecord.challenge_id == challenge.id)
        .order_by(DayRecord.day_number.asc())
    ).all()

    summary = summarize_streaks(((day_number, completed) for day_number, completed in rows), challenge.program_length)
    return {
        "total_days": summary.total_days,
        "current_day": challenge.current_day,
        "completed_days": summary.completed_days,
        "current_streak": summary.current_streak,
        "longest_streak": summary.longest_streak,
        "status": challenge.status,
        "completion_rate": summary.completion_rate,
    }
