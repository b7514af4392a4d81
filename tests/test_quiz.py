import pytest

from neighborfit.config import LIFESTYLE_FACTORS
from neighborfit.quiz import (
    QUIZ_QUESTIONS,
    build_preferences,
    get_question_by_id,
    get_question_by_preference,
    get_quiz_length,
    get_quiz_progress,
    validate_quiz_completeness,
)


def test_quiz_covers_every_factor():
    assert validate_quiz_completeness()
    assert get_quiz_length() == len(LIFESTYLE_FACTORS) == 13
    assert [q.factor for q in QUIZ_QUESTIONS] == LIFESTYLE_FACTORS


def test_every_question_has_five_options():
    for question in QUIZ_QUESTIONS:
        assert [o.value for o in question.options] == [1, 2, 3, 4, 5]
        assert question.options[0].label == "Not important"


def test_lookup_helpers():
    assert get_question_by_id("metro").preference == "metro_access_importance"
    assert get_question_by_preference("food_culture_importance").id == "food"
    assert get_question_by_id("parking") is None


def test_quiz_progress():
    assert get_quiz_progress(0) == 8
    assert get_quiz_progress(4) == 38
    assert get_quiz_progress(12) == 100


def test_build_preferences_defaults_to_three():
    prefs = build_preferences("u1", {"safety_importance": 5, "nightlife_importance": 1})

    assert prefs.user_id == "u1"
    assert prefs.importance.safety == 5
    assert prefs.importance.nightlife == 1
    assert prefs.importance.shopping == 3


def test_build_preferences_rejects_invalid_values():
    with pytest.raises(ValueError):
        build_preferences("u1", {"safety_importance": 7})


def test_build_preferences_rejects_unknown_answers():
    with pytest.raises(ValueError):
        build_preferences("u1", {"parking_importance": 4})


def test_build_preferences_rejects_zero():
    with pytest.raises(ValueError):
        build_preferences("u1", {"safety_importance": 0})
