from __future__ import annotations

import pytest

from gym_app.services.catalog import (
    create_exercise,
    search_exercises,
    standardize_equipment,
    standardize_muscle_group,
    update_exercise,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("chest", "Chest"),
        ("  QUADS ", "Quads"),
        ("pecs", "Chest"),
        ("Hammies", "Hamstrings"),
        ("forearm", "Forearms"),
        ("upper arm", "Upper Body"),
        ("legs", "Lower Body"),
        ("Stretching", "Stretching"),
    ],
)
def test_standardize_muscle_group(raw: str, expected: str) -> None:
    assert standardize_muscle_group(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("barbell", "Barbell"),
        ("DB", "Dumbbell"),
        ("body weight", "Bodyweight"),
        ("bands", "Resistance Band"),
        ("Yoga mat", "Yoga mat"),
    ],
)
def test_standardize_equipment(raw: str, expected: str) -> None:
    assert standardize_equipment(raw) == expected


def test_blank_values_stay_empty() -> None:
    assert standardize_muscle_group(None) is None
    assert standardize_equipment("   ") is None


def test_search_filters_by_name_and_group(user) -> None:
    create_exercise(user.id, {"name": "Bench Press", "muscle_group": "chest"})
    create_exercise(user.id, {"name": "Incline Press", "muscle_group": "pecs"})
    create_exercise(user.id, {"name": "Leg Press", "muscle_group": "quads"})

    assert [e.name for e in search_exercises(user.id, q="press", muscle_group="Chest")] == [
        "Bench Press",
        "Incline Press",
    ]
    assert [e.name for e in search_exercises(user.id, q="leg")] == ["Leg Press"]


def test_update_can_clear_image(user) -> None:
    exercise = create_exercise(user.id, {"name": "Row", "image_url": "/uploads/row.png"})
    update_exercise(exercise, {"image_url": None, "equipment": "cable"})
    assert exercise.image_url is None
    assert exercise.equipment == "Cable"
