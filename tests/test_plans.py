from __future__ import annotations

import pytest

from gym_app.models import PlanExercise
from gym_app.services import catalog, plans
from gym_app.services.errors import NotFoundError, ValidationError

from .conftest import make_exercise, make_plan, make_user


def _positions(plan) -> list:
    return [e.position for e in plans.sorted_entries(plan)]


def _names(plan) -> list:
    return [e.exercise.name for e in plans.sorted_entries(plan)]


@pytest.fixture
def exercises(user) -> list:
    return [make_exercise(user, name) for name in ("Squat", "Bench", "Row", "Press")]


def test_positions_stay_contiguous_through_edits(user, exercises) -> None:
    plan = make_plan(user, "Full", exercises)
    assert _positions(plan) == [1, 2, 3, 4]

    plans.remove_exercise(plan, plan.entries[1].id)
    assert _positions(plan) == [1, 2, 3]
    assert _names(plan) == ["Squat", "Row", "Press"]

    last = plans.sorted_entries(plan)[-1]
    plans.move_exercise(plan, last.id, "up")
    assert _names(plan) == ["Squat", "Press", "Row"]
    assert _positions(plan) == [1, 2, 3]

    plans.add_exercise(plan, exercises[1], sets=5, reps=5)
    assert _positions(plan) == [1, 2, 3, 4]
    assert _names(plan)[-1] == "Bench"


def test_moving_past_either_end_is_a_noop(user, exercises) -> None:
    plan = make_plan(user, "Full", exercises[:3])
    first, _, last = plans.sorted_entries(plan)

    plans.move_exercise(plan, first.id, "up")
    plans.move_exercise(plan, last.id, plans.MoveDirection.DOWN)

    assert _names(plan) == ["Squat", "Bench", "Row"]
    assert _positions(plan) == [1, 2, 3]


def test_move_down_swaps_with_next(user, exercises) -> None:
    plan = make_plan(user, "Full", exercises[:3])
    plans.move_exercise(plan, plans.sorted_entries(plan)[0].id, "down")
    assert _names(plan) == ["Bench", "Squat", "Row"]


def test_invalid_direction_is_rejected(user, exercises) -> None:
    plan = make_plan(user, "Full", exercises[:2])
    with pytest.raises(ValidationError):
        plans.move_exercise(plan, plan.entries[0].id, "sideways")


def test_unknown_entry_is_not_found(user, exercises) -> None:
    plan = make_plan(user, "Full", exercises[:2])
    with pytest.raises(NotFoundError):
        plans.move_exercise(plan, 9999, "up")
    with pytest.raises(NotFoundError):
        plans.remove_exercise(plan, 9999)


def test_add_exercise_defaults_to_exercise_targets(user) -> None:
    deadlift = make_exercise(user, "Deadlift", default_sets=5, default_reps=3)
    plan = make_plan(user, "Pull")
    entry = plans.add_exercise(plan, deadlift)
    assert (entry.sets, entry.reps) == (5, 3)


def test_targets_must_be_positive(user, exercises) -> None:
    plan = make_plan(user, "Full", exercises[:1])
    with pytest.raises(ValidationError):
        plans.update_targets(plan, plan.entries[0].id, sets=0)
    entry = plans.update_targets(plan, plan.entries[0].id, sets=4, reps=12)
    assert (entry.sets, entry.reps) == (4, 12)


def test_cannot_add_another_users_exercise(user) -> None:
    other = make_user("other@example.com")
    foreign = make_exercise(other, "Curl")
    plan = make_plan(user, "Arms")
    with pytest.raises(NotFoundError):
        plans.add_exercise(plan, foreign)


def test_deleting_an_exercise_closes_gaps(user, exercises) -> None:
    plan = make_plan(user, "Full", exercises)
    catalog.delete_exercise(exercises[1])
    assert _names(plan) == ["Squat", "Row", "Press"]
    assert _positions(plan) == [1, 2, 3]


def test_deleting_a_plan_removes_its_entries(user, exercises) -> None:
    plan = make_plan(user, "Full", exercises[:2])
    plans.delete_plan(plan)
    assert PlanExercise.query.count() == 0


def test_plan_name_is_required(user) -> None:
    with pytest.raises(ValidationError):
        plans.create_plan(user.id, "   ")
