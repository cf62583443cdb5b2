"""Tests for the day ledger."""

import uuid

import pytest
from sqlalchemy import func, select

from hardinfinity.crud import (
    create_challenge,
    create_section,
    create_task,
    get_day_record,
    list_day_records,
    update_challenge,
    upsert_by_day,
    upsert_today,
)
from hardinfinity.errors import ConflictError, InvalidArgumentError, NotFoundError
from hardinfinity.models import Challenge, DayRecord, TaskRecord
from hardinfinity.schemas import ChallengeCreateIn, ChallengeUpdateIn, DayRecordIn, SectionCreateIn, TaskCreateIn


def _count(db, model) -> int:
    return db.scalar(select(func.count()).select_from(model))


class TestUpsertToday:
    """Tests for writing the entry of the challenge's current day."""

    def test_completed_first_write_advances_day(self, db, challenge):
        result = upsert_today(db, challenge, DayRecordIn(completed=True, notes="done"))

        assert result["day_number"] == 1
        assert result["day_advanced"] is True
        assert result["current_day"] == 2
        db.refresh(challenge)
        assert challenge.current_day == 2

    def test_incomplete_write_does_not_advance(self, db, challenge):
        result = upsert_today(db, challenge, DayRecordIn(completed=False))

        assert result["day_advanced"] is False
        assert result["current_day"] == 1

    def test_completing_existing_record_does_not_advance(self, db, challenge):
        upsert_today(db, challenge, DayRecordIn(completed=False))
        result = upsert_today(db, challenge, DayRecordIn(completed=True))

        assert result["day_advanced"] is False
        assert result["current_day"] == 1
        assert _count(db, DayRecord) == 1

    def test_repeated_write_for_same_day_updates_in_place(self, db, challenge):
        first = upsert_by_day(db, challenge, 1, DayRecordIn(completed=True, notes="first"))
        second = upsert_by_day(db, challenge, 1, DayRecordIn(completed=True, notes="second"))

        assert first["entry_id"] == second["entry_id"]
        assert second["day_advanced"] is False
        record, _ = get_day_record(db, challenge, 1)
        assert record.notes == "second"
        db.refresh(challenge)
        assert challenge.current_day == 2

    def test_task_records_are_written_with_the_day(self, db, challenge, tasks):
        payload = DayRecordIn(
            completed=True,
            task_records=[
                {"task_id": str(tasks["boolean"].id), "completed": True, "value": True},
                {"task_id": str(tasks["number"].id), "completed": True, "value": 3.5},
                {"task_id": str(tasks["text"].id), "completed": False, "value": "Atomic Habits"},
            ],
        )

        upsert_today(db, challenge, payload)

        _, task_records = get_day_record(db, challenge, 1)
        values = {tr.task_id: tr.value for tr in task_records}
        assert values == {
            tasks["boolean"].id: True,
            tasks["number"].id: 3.5,
            tasks["text"].id: "Atomic Habits",
        }

    def test_task_record_upsert_keeps_one_row_per_task(self, db, challenge, tasks):
        task_id = str(tasks["number"].id)
        upsert_today(db, challenge, DayRecordIn(task_records=[{"task_id": task_id, "value": 1}]))
        upsert_today(db, challenge, DayRecordIn(task_records=[{"task_id": task_id, "value": 2}]))

        _, task_records = get_day_record(db, challenge, 1)
        assert len(task_records) == 1
        assert task_records[0].value == 2

    def test_duplicate_task_in_one_payload_last_wins(self, db, challenge, tasks):
        task_id = str(tasks["number"].id)
        upsert_today(
            db,
            challenge,
            DayRecordIn(task_records=[{"task_id": task_id, "value": 1}, {"task_id": task_id, "value": 7}]),
        )

        _, task_records = get_day_record(db, challenge, 1)
        assert [tr.value for tr in task_records] == [7]

    def test_legacy_task_entries_key_is_accepted(self, db, challenge, tasks):
        payload = DayRecordIn.model_validate(
            {"completed": False, "task_entries": [{"task_id": str(tasks["boolean"].id), "completed": True}]}
        )

        upsert_today(db, challenge, payload)

        assert _count(db, TaskRecord) == 1


class TestLedgerValidation:
    """Failed writes leave nothing behind."""

    def test_missing_task_id_writes_nothing(self, db, challenge, tasks):
        payload = DayRecordIn(
            completed=True,
            task_records=[
                {"task_id": str(tasks["boolean"].id), "completed": True},
                {"completed": True},
            ],
        )

        with pytest.raises(InvalidArgumentError, match="Task ID is required"):
            upsert_today(db, challenge, payload)

        assert _count(db, DayRecord) == 0
        assert _count(db, TaskRecord) == 0
        db.refresh(challenge)
        assert challenge.current_day == 1

    def test_malformed_task_id_is_rejected(self, db, challenge):
        with pytest.raises(InvalidArgumentError, match="Invalid task ID format"):
            upsert_today(db, challenge, DayRecordIn(task_records=[{"task_id": "not-a-uuid"}]))

        assert _count(db, DayRecord) == 0

    def test_unknown_task_is_rejected(self, db, challenge, tasks):
        with pytest.raises(InvalidArgumentError):
            upsert_today(db, challenge, DayRecordIn(completed=True, task_records=[{"task_id": str(uuid.uuid4())}]))

        assert _count(db, DayRecord) == 0

    def test_task_from_another_challenge_is_rejected(self, db, user, challenge):
        other = create_challenge(db, user, ChallengeCreateIn(name="Other"))
        foreign_section = create_section(db, other, SectionCreateIn(name="Elsewhere"))
        foreign_task = create_task(db, foreign_section, TaskCreateIn(name="Foreign"))

        with pytest.raises(InvalidArgumentError):
            upsert_today(db, challenge, DayRecordIn(task_records=[{"task_id": str(foreign_task.id)}]))

        assert _count(db, DayRecord) == 0

    @pytest.mark.parametrize(
        "task_type,bad_value",
        [("boolean", "yes"), ("number", "3"), ("number", True), ("text", 42)],
    )
    def test_value_must_match_task_type(self, db, challenge, tasks, task_type, bad_value):
        payload = DayRecordIn(task_records=[{"task_id": str(tasks[task_type].id), "value": bad_value}])

        with pytest.raises(InvalidArgumentError, match="does not match task type"):
            upsert_today(db, challenge, payload)

        assert _count(db, TaskRecord) == 0

    def test_null_value_is_accepted_for_any_type(self, db, challenge, tasks):
        payload = DayRecordIn(
            task_records=[{"task_id": str(task.id), "completed": True, "value": None} for task in tasks.values()]
        )

        upsert_today(db, challenge, payload)

        assert _count(db, TaskRecord) == 3

    @pytest.mark.parametrize("status", ["completed", "failed"])
    def test_inactive_challenge_rejects_entries(self, db, challenge, status):
        update_challenge(db, challenge, ChallengeUpdateIn(status=status))

        with pytest.raises(ConflictError):
            upsert_today(db, challenge, DayRecordIn(completed=True))

        assert _count(db, DayRecord) == 0


class TestUpsertByDay:
    """Tests for writing a specific past or current day."""

    def test_future_day_is_rejected(self, db, challenge):
        with pytest.raises(InvalidArgumentError):
            upsert_by_day(db, challenge, 2, DayRecordIn(completed=True))

    def test_day_zero_is_rejected(self, db, challenge):
        with pytest.raises(InvalidArgumentError):
            upsert_by_day(db, challenge, 0, DayRecordIn())

    def test_past_day_can_be_rewritten_without_advancing(self, db, challenge):
        upsert_today(db, challenge, DayRecordIn(completed=True))
        upsert_today(db, challenge, DayRecordIn(completed=True))

        result = upsert_by_day(db, challenge, 1, DayRecordIn(completed=False, notes="actually missed"))

        assert result["day_advanced"] is False
        assert result["current_day"] == 3
        record, _ = get_day_record(db, challenge, 1)
        assert record.completed is False

    def test_current_day_advances_like_today(self, db, challenge):
        result = upsert_by_day(db, challenge, 1, DayRecordIn(completed=True))

        assert result["day_advanced"] is True
        assert result["current_day"] == 2


class TestReads:
    """Tests for reading the ledger back."""

    def test_list_is_ordered_by_day(self, db, challenge):
        for _ in range(3):
            upsert_today(db, challenge, DayRecordIn(completed=True))

        assert [r.day_number for r in list_day_records(db, challenge)] == [1, 2, 3]

    def test_missing_day_is_not_found(self, db, challenge):
        with pytest.raises(NotFoundError):
            get_day_record(db, challenge, 5)


class TestConcurrentWriters:
    """Two writers that both read ``current_day`` before either wrote."""

    def test_stale_writers_advance_the_day_once(self, db, session_factory, challenge):
        first_db = session_factory()
        second_db = session_factory()
        try:
            first = first_db.get(Challenge, challenge.id)
            second = second_db.get(Challenge, challenge.id)
            assert first.current_day == second.current_day == 1

            upsert_today(first_db, first, DayRecordIn(completed=True, notes="first"))
            result = upsert_today(second_db, second, DayRecordIn(completed=True, notes="second"))
        finally:
            first_db.close()
            second_db.close()

        assert result["day_number"] == 1
        assert result["day_advanced"] is False
        assert _count(db, DayRecord) == 1
        db.refresh(challenge)
        assert challenge.current_day == 2
