"""Shared profile factories for the test suite."""

from typing import Any, Dict

import pytest

from mentormatch.profiles import MenteeProfile, MentorProfile


def build_mentee(mentee_id: str = "mentee-1", **sections: Dict[str, Any]) -> MenteeProfile:
    """Build a mentee from partial section dicts; everything else defaults."""
    return MenteeProfile.from_dict({"id": mentee_id, **sections})


def build_mentor(mentor_id: str = "mentor-1", **sections: Dict[str, Any]) -> MentorProfile:
    """Build a mentor from partial section dicts; everything else defaults."""
    return MentorProfile.from_dict({"id": mentor_id, **sections})


@pytest.fixture
def make_mentee():
    return build_mentee


@pytest.fixture
def make_mentor():
    return build_mentor


@pytest.fixture
def strong_mentee() -> MenteeProfile:
    """Intermediate web developer with clear goals and an evening preference."""
    return build_mentee(
        "mentee-strong",
        personal_info={"location": "Berlin, Germany", "timezone": "CET"},
        professional_info={
            "experience_level": "intermediate",
            "skills": ["React", "JavaScript"],
            "goals": ["Backend"],
        },
        learning_preferences={"format": "hands-on", "time_of_day": "evening"},
        mentoring_needs={
            "frequency": "weekly",
            "budget": {"min": 50, "max": 100, "currency": "USD"},
            "time_commitment": 2,
        },
        communication_style={
            "preferred_methods": ["video"],
            "response_time": "within-hours",
            "communication_frequency": "medium",
        },
    )


@pytest.fixture
def strong_mentor() -> MentorProfile:
    """Mentor that fits strong_mentee on every dimension."""
    return build_mentor(
        "mentor-strong",
        personal_info={
            "first_name": "Anna",
            "last_name": "Keller",
            "location": "Berlin, Germany",
            "timezone": "CET",
        },
        professional_info={
            "years_of_experience": 12,
            "skills": ["React", "JavaScript"],
        },
        mentoring_info={
            "areas_of_expertise": ["Backend"],
            "experience_level": "advanced",
            "availability": {
                "time_slots": [{"day": "Tuesday", "start_time": "18:00", "end_time": "19:00"}],
                "max_sessions_per_week": 2,
                "session_duration": 60,
            },
            "pricing": {"hourly_rate": 80, "currency": "USD", "free_sessions": 2},
            "communication_preferences": ["video", "chat"],
        },
        stats={"average_rating": 4.8, "response_time": 2},
        preferences={"mentee_types": ["medium"], "session_types": ["video", "in-person"]},
    )
