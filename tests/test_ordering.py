"""Tests for dense sibling ordering of sections and tasks."""

import pytest
from sqlalchemy import select

from hardinfinity.crud import (
    create_section,
    create_task,
    delete_section,
    delete_task,
    list_sections,
    list_tasks,
    reorder_section,
    reorder_task,
)
from hardinfinity.errors import InvalidArgumentError
from hardinfinity.models import Section, Task
from hardinfinity.schemas import SectionCreateIn, TaskCreateIn


def _section_layout(db, challenge) -> list[tuple[str, int]]:
    return [(s.name, s.order) for s in list_sections(db, challenge)]


def _task_layout(db, section) -> list[tuple[str, int]]:
    return [(t.name, t.order) for t in list_tasks(db, section)]


@pytest.fixture
def abcd(db, challenge) -> dict[str, Section]:
    return {name: create_section(db, challenge, SectionCreateIn(name=name)) for name in "ABCD"}


class TestInsert:
    """Tests for placing new siblings."""

    def test_appends_at_end_by_default(self, db, challenge, abcd):
        assert _section_layout(db, challenge) == [("A", 1), ("B", 2), ("C", 3), ("D", 4)]

    def test_explicit_position_pushes_later_siblings_back(self, db, challenge, abcd):
        create_section(db, challenge, SectionCreateIn(name="E", order=2))

        assert _section_layout(db, challenge) == [("A", 1), ("E", 2), ("B", 3), ("C", 4), ("D", 5)]

    def test_explicit_position_past_end_is_clamped(self, db, challenge, abcd):
        section = create_section(db, challenge, SectionCreateIn(name="E", order=40))

        assert section.order == 5

    def test_tasks_are_ordered_per_section(self, db, challenge):
        first = create_section(db, challenge, SectionCreateIn(name="Morning"))
        second = create_section(db, challenge, SectionCreateIn(name="Evening"))

        create_task(db, first, TaskCreateIn(name="Run"))
        create_task(db, second, TaskCreateIn(name="Read"))
        create_task(db, first, TaskCreateIn(name="Stretch"))

        assert _task_layout(db, first) == [("Run", 1), ("Stretch", 2)]
        assert _task_layout(db, second) == [("Read", 1)]


class TestMove:
    """Tests for moving a sibling to an absolute position."""

    def test_move_toward_front(self, db, challenge, abcd):
        assert reorder_section(db, abcd["D"], 2) is True

        assert _section_layout(db, challenge) == [("A", 1), ("D", 2), ("B", 3), ("C", 4)]

    def test_move_toward_back(self, db, challenge, abcd):
        assert reorder_section(db, abcd["A"], 3) is True

        assert _section_layout(db, challenge) == [("B", 1), ("C", 2), ("A", 3), ("D", 4)]

    def test_move_to_same_position_is_a_no_op(self, db, challenge, abcd):
        assert reorder_section(db, abcd["C"], 3) is False

        assert _section_layout(db, challenge) == [("A", 1), ("B", 2), ("C", 3), ("D", 4)]

    @pytest.mark.parametrize("bad_order", [0, -1])
    def test_non_positive_order_is_rejected(self, db, challenge, abcd, bad_order):
        with pytest.raises(InvalidArgumentError):
            reorder_section(db, abcd["B"], bad_order)

        assert _section_layout(db, challenge) == [("A", 1), ("B", 2), ("C", 3), ("D", 4)]

    def test_move_past_end_is_not_clamped(self, db, challenge, abcd):
        reorder_section(db, abcd["A"], 10)

        assert _section_layout(db, challenge) == [("B", 1), ("C", 2), ("D", 3), ("A", 10)]

    def test_move_does_not_touch_other_parents(self, db, challenge, abcd):
        other = create_section(db, challenge, SectionCreateIn(name="E"))
        run = create_task(db, abcd["A"], TaskCreateIn(name="Run"))
        create_task(db, abcd["A"], TaskCreateIn(name="Lift"))
        read = create_task(db, other, TaskCreateIn(name="Read"))

        reorder_task(db, run, 2)

        assert _task_layout(db, abcd["A"]) == [("Lift", 1), ("Run", 2)]
        db.refresh(read)
        assert read.order == 1


class TestRemove:
    """Tests for gap closing on delete."""

    def test_delete_section_compacts_siblings(self, db, challenge, abcd):
        delete_section(db, abcd["B"])

        assert _section_layout(db, challenge) == [("A", 1), ("C", 2), ("D", 3)]

    def test_delete_section_removes_its_tasks(self, db, challenge, abcd):
        create_task(db, abcd["B"], TaskCreateIn(name="Run"))
        create_task(db, abcd["B"], TaskCreateIn(name="Lift"))
        section_id = abcd["B"].id

        delete_section(db, abcd["B"])

        assert db.scalars(select(Task).where(Task.section_id == section_id)).all() == []

    def test_delete_task_compacts_siblings(self, db, section):
        tasks = [create_task(db, section, TaskCreateIn(name=name)) for name in ("Run", "Lift", "Read")]

        delete_task(db, tasks[0])

        assert _task_layout(db, section) == [("Lift", 1), ("Read", 2)]


class TestDensity:
    """The order values of a parent stay exactly 1..N across mixed operations."""

    def test_mixed_operations_keep_orders_dense(self, db, challenge):
        created = [create_section(db, challenge, SectionCreateIn(name=f"S{i}")) for i in range(1, 7)]

        reorder_section(db, created[5], 1)
        delete_section(db, created[2])
        create_section(db, challenge, SectionCreateIn(name="S7", order=3))
        reorder_section(db, created[0], 4)
        delete_section(db, created[5])

        orders = [order for _, order in _section_layout(db, challenge)]
        assert orders == list(range(1, len(orders) + 1))

    def test_mixed_task_operations_keep_orders_dense(self, db, section):
        created = [create_task(db, section, TaskCreateIn(name=f"T{i}")) for i in range(1, 6)]

        inserted = create_task(db, section, TaskCreateIn(name="T6", order=2))
        reorder_task(db, created[4], 1)
        delete_task(db, created[1])
        reorder_task(db, created[0], 4)

        assert inserted.order == 2
        assert _task_layout(db, section) == [("T5", 1), ("T6", 2), ("T3", 3), ("T1", 4), ("T4", 5)]
