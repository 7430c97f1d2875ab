"""Tests for the lookup helpers and per-dimension compatibility scores."""

import json
from pathlib import Path

import pytest

from mentormatch.compatibility import (
    CompatibilityEvaluator,
    convert_currency,
    get_continent,
    get_country,
    response_time_compatibility,
    time_slot_compatibility,
    timezone_compatibility,
)
from mentormatch.profiles import MenteeProfile, MentorProfile, ResponseTime, TimeOfDay
from mentormatch.profiles.schema import TimeSlot

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


@pytest.fixture
def evaluator():
    return CompatibilityEvaluator()


# =============================================================================
# Lookups
# =============================================================================

@pytest.mark.parametrize("tz_a, tz_b, expected", [
    ("UTC", "UTC", 1.0),
    ("UTC", "JST", 0.1),
    ("UTC", "CET", 0.9),
    ("EST", "UTC", 0.5),
    ("PST", "EST", 0.7),
    ("PST", "UTC", 0.3),
    ("Mars/Olympus", "GMT", 0.9),
    ("Mars/Olympus", "Mars/Olympus", 1.0),
])
def test_timezone_compatibility(tz_a, tz_b, expected):
    assert timezone_compatibility(tz_a, tz_b) == expected


def test_time_slot_compatibility():
    evening = [TimeSlot(day="Mon", start_time="18:00", end_time="19:00")]
    assert time_slot_compatibility(TimeOfDay.EVENING, evening) == 1.0
    assert time_slot_compatibility(TimeOfDay.MORNING, evening) == 0.5
    assert time_slot_compatibility(TimeOfDay.FLEXIBLE, evening) == 1.0
    assert time_slot_compatibility(TimeOfDay.UNKNOWN, evening) == 0.5
    assert time_slot_compatibility(TimeOfDay.EVENING, []) == 0.5


@pytest.mark.parametrize("expected, actual, score", [
    (ResponseTime.WITHIN_HOURS, 4, 1.0),
    (ResponseTime.WITHIN_HOURS, 8, 0.7),
    (ResponseTime.WITHIN_HOURS, 16, 0.4),
    (ResponseTime.WITHIN_HOURS, 17, 0.1),
    (ResponseTime.IMMEDIATE, 0.5, 1.0),
    (ResponseTime.UNKNOWN, 24, 1.0),
])
def test_response_time_compatibility(expected, actual, score):
    assert response_time_compatibility(expected, actual) == score


def test_convert_currency():
    assert convert_currency(100, "USD", "EUR") == pytest.approx(85.0)
    assert convert_currency(110, "JPY", "USD") == pytest.approx(1.0)
    assert convert_currency(50, "XYZ", "usd") == pytest.approx(50.0)


def test_country_and_continent():
    assert get_country("Austin, TX, USA") == "usa"
    assert get_country("Berlin") == "berlin"
    assert get_country("") == ""
    assert get_continent("germany") == "europe"
    assert get_continent("atlantis") == "unknown"


# =============================================================================
# Dimension scores
# =============================================================================

def test_skills_direct_match_ratio(evaluator, make_mentee, make_mentor):
    mentee = make_mentee(professional_info={"skills": ["React", "Node.js"]})
    mentor = make_mentor(professional_info={"skills": ["React", "Express"]})
    assert evaluator.skills_score(mentee, mentor) == 0.5


def test_skills_neutral_without_mentee_skills(evaluator, make_mentee, make_mentor, strong_mentor):
    mentee = make_mentee(professional_info={"goals": ["Backend"]})
    assert evaluator.skills_score(mentee, strong_mentor) == 0.5
    assert evaluator.skills_score(mentee, make_mentor()) == 0.5


def test_skills_weights_specializations_and_expertise(evaluator, make_mentee, make_mentor):
    mentee = make_mentee(professional_info={"skills": ["Python", "Go"], "goals": ["Leadership", "Design"]})
    mentor = make_mentor(
        professional_info={"skills": ["Python"], "specializations": ["Golang"]},
        mentoring_info={"areas_of_expertise": ["Leadership"]},
    )
    # (1 + 0.8 + 0.6) / (2 + 2)
    assert evaluator.skills_score(mentee, mentor) == pytest.approx(0.6)


def test_skills_score_is_capped(evaluator, make_mentee, make_mentor):
    mentee = make_mentee(professional_info={"skills": ["Python"]})
    mentor = make_mentor(professional_info={"skills": ["Python"], "specializations": ["Python"]})
    assert evaluator.skills_score(mentee, mentor) == 1.0


def test_availability_components(evaluator, make_mentee, make_mentor):
    mentee = make_mentee(
        personal_info={"timezone": "UTC"},
        learning_preferences={"time_of_day": "morning"},
        mentoring_needs={"time_commitment": 5},
    )
    mentor = make_mentor(
        personal_info={"timezone": "JST"},
        mentoring_info={"availability": {
            "time_slots": [{"start_time": "09:00"}],
            "max_sessions_per_week": 2,
            "session_duration": 60,
        }},
    )
    # capacity 2h < 5h -> 0.5; timezone 0.1; slot match 1.0
    assert evaluator.availability_score(mentee, mentor) == pytest.approx(0.5 * 0.4 + 0.1 * 0.3 + 1.0 * 0.3)


def test_communication_score(evaluator, make_mentee, make_mentor):
    mentee = make_mentee(communication_style={
        "preferred_methods": ["video", "phone"],
        "response_time": "within-hours",
    })
    mentor = make_mentor(
        mentoring_info={"communication_preferences": ["video"]},
        stats={"response_time": 8},
    )
    assert evaluator.communication_score(mentee, mentor) == pytest.approx(0.5 * 0.7 + 0.7 * 0.3)
    assert evaluator.communication_score(make_mentee(), mentor) == 0.5


@pytest.mark.parametrize("mentee_level, mentor_level, expected", [
    ("beginner", "advanced", 1.0),
    ("beginner", "intermediate", 1.0),
    ("intermediate", "intermediate", 0.8),
    ("beginner", "expert", 0.6),
    ("advanced", "beginner", 0.3),
    ("unknown", "expert", 0.5),
    ("beginner", "", 0.5),
])
def test_experience_score(evaluator, make_mentee, make_mentor, mentee_level, mentor_level, expected):
    mentee = make_mentee(professional_info={"experience_level": mentee_level})
    mentor = make_mentor(mentoring_info={"experience_level": mentor_level})
    assert evaluator.experience_score(mentee, mentor) == expected


def test_personality_score(evaluator, make_mentee, make_mentor):
    mentee = make_mentee(communication_style={"communication_frequency": "high"})
    assert evaluator.personality_score(mentee, make_mentor(preferences={"mentee_types": ["high"]})) == 1.0
    assert evaluator.personality_score(mentee, make_mentor(preferences={"mentee_types": ["low"]})) == 0.3
    assert evaluator.personality_score(mentee, make_mentor()) == 0.5


def test_learning_score(evaluator, make_mentee, make_mentor):
    text_learner = make_mentee(learning_preferences={"format": "text"})
    assert evaluator.learning_score(text_learner, make_mentor(preferences={"session_types": ["email"]})) == 1.0
    assert evaluator.learning_score(text_learner, make_mentor(preferences={"session_types": ["video"]})) == 0.5
    assert evaluator.learning_score(make_mentee(), make_mentor(preferences={"session_types": ["video"]})) == 0.5


@pytest.mark.parametrize("rate, currency, expected", [
    (80, "USD", 1.0),
    (110, "USD", 0.8),
    (140, "USD", 0.5),
    (200, "USD", 0.2),
    (11000, "JPY", 1.0),
])
def test_budget_score(evaluator, make_mentee, make_mentor, rate, currency, expected):
    mentee = make_mentee(mentoring_needs={"budget": {"min": 50, "max": 100, "currency": "USD"}})
    mentor = make_mentor(mentoring_info={"pricing": {"hourly_rate": rate, "currency": currency}})
    assert evaluator.budget_score(mentee, mentor) == expected


@pytest.mark.parametrize("mentee_location, mentor_location, expected", [
    ("Berlin, Germany", "Berlin, Germany", 1.0),
    ("berlin, germany", "Berlin, Germany", 1.0),
    ("Berlin, Germany", "Munich, Germany", 0.8),
    ("Berlin, Germany", "Paris, France", 0.6),
    ("Berlin, Germany", "Austin, USA", 0.3),
    ("Atlantis", "El Dorado", 0.6),
    ("", "", 1.0),
])
def test_location_score(evaluator, make_mentee, make_mentor, mentee_location, mentor_location, expected):
    mentee = make_mentee(personal_info={"location": mentee_location})
    mentor = make_mentor(personal_info={"location": mentor_location})
    assert evaluator.location_score(mentee, mentor) == expected


def test_strong_pair_breakdown(evaluator, strong_mentee, strong_mentor):
    breakdown = evaluator.evaluate(strong_mentee, strong_mentor)
    assert breakdown.skills == pytest.approx(2.6 / 3)
    for name in ("availability", "communication", "experience", "personality",
                 "learning", "budget", "location"):
        assert getattr(breakdown, name) == pytest.approx(1.0)


def test_scores_stay_in_unit_interval(evaluator, make_mentee, make_mentor):
    with open(DATA_DIR / "sample_mentors.json") as f:
        mentors = [MentorProfile.from_dict(d) for d in json.load(f)]
    with open(DATA_DIR / "sample_mentee.json") as f:
        mentees = [MenteeProfile.from_dict(json.load(f)), make_mentee()]
    mentors.append(make_mentor())

    for mentee in mentees:
        for mentor in mentors:
            for value in evaluator.evaluate(mentee, mentor).values():
                assert 0.0 <= value <= 1.0
