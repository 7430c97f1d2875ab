"""Tests for match explanations and mentee analysis."""

import pytest

from mentormatch.compatibility import CompatibilityEvaluator
from mentormatch.explanation import ExplanationGenerator, analyze_mentee_profile
from mentormatch.profiles import CompatibilityBreakdown, Confidence


@pytest.fixture
def generator():
    return ExplanationGenerator()


def _breakdown(value, **overrides):
    scores = dict.fromkeys(
        ["skills", "availability", "communication", "experience",
         "personality", "learning", "budget", "location"], value)
    scores.update(overrides)
    return CompatibilityBreakdown(**scores)


# =============================================================================
# Match reasons
# =============================================================================

def test_reasons_in_priority_order_and_capped(generator, strong_mentee, strong_mentor):
    breakdown = CompatibilityEvaluator().evaluate(strong_mentee, strong_mentor)
    reasons = generator.generate_match_reasons(strong_mentee, strong_mentor, breakdown)

    assert reasons == [
        "Shares expertise in: React, JavaScript",
        "Perfect experience level match (advanced)",
        "Excellent availability alignment",
        "Compatible communication preferences",
        "Highly rated mentor (4.8/5)",
    ]


def test_reason_cap_is_configurable(strong_mentee, strong_mentor):
    breakdown = _breakdown(1.0)
    generator = ExplanationGenerator(max_reasons=7)
    reasons = generator.generate_match_reasons(strong_mentee, strong_mentor, breakdown)

    assert len(reasons) == 7
    assert reasons[-2:] == ["12+ years of experience", "2 free sessions available"]
    assert ExplanationGenerator(max_reasons=0).generate_match_reasons(
        strong_mentee, strong_mentor, breakdown) == []


def test_reasons_need_strictly_strong_scores(generator, make_mentee, make_mentor):
    reasons = generator.generate_match_reasons(make_mentee(), make_mentor(), _breakdown(0.8))
    assert reasons == []


def test_skill_reason_lists_at_most_three_skills(generator, make_mentee, make_mentor):
    skills = ["Python", "SQL", "Docker", "Kafka"]
    mentee = make_mentee(professional_info={"skills": skills})
    mentor = make_mentor(professional_info={"skills": skills})
    reasons = generator.generate_match_reasons(mentee, mentor, _breakdown(0.0, skills=1.0))
    assert reasons == ["Shares expertise in: Python, SQL, Docker"]


def test_negative_reason_cap_is_rejected():
    with pytest.raises(ValueError):
        ExplanationGenerator(max_reasons=-1)


# =============================================================================
# Potential challenges
# =============================================================================

def test_no_challenges_for_strong_pair(generator, strong_mentee, strong_mentor):
    assert generator.identify_potential_challenges(strong_mentee, strong_mentor) == []


def test_all_challenges(generator, make_mentee, make_mentor):
    mentee = make_mentee(
        personal_info={"timezone": "UTC"},
        learning_preferences={"format": "hands-on"},
        mentoring_needs={"budget": {"max": 50}},
        communication_style={"communication_frequency": "high"},
    )
    mentor = make_mentor(
        personal_info={"timezone": "JST"},
        mentoring_info={"pricing": {"hourly_rate": 120}},
        stats={"response_time": 48},
        preferences={"session_types": ["video"]},
    )

    assert generator.identify_potential_challenges(mentee, mentor) == [
        "Different time zones may require flexible scheduling",
        "Mentor rate exceeds your budget",
        "Mentor may not respond as quickly as you prefer",
        "Mentor may not offer in-person sessions",
    ]


def test_budget_challenge_compares_listed_rate(generator, make_mentee, make_mentor):
    mentee = make_mentee(mentoring_needs={"budget": {"max": 100, "currency": "USD"}})
    mentor = make_mentor(mentoring_info={"pricing": {"hourly_rate": 5000, "currency": "JPY"}})
    assert "Mentor rate exceeds your budget" in generator.identify_potential_challenges(mentee, mentor)


# =============================================================================
# Recommendations
# =============================================================================

def test_recommendations_for_strong_pair(generator, strong_mentee, strong_mentor):
    recommendations = generator.generate_recommendations(strong_mentee, strong_mentor)
    assert recommendations.to_dict() == {
        "session_frequency": "Weekly sessions recommended",
        "session_duration": "60+ minute sessions for deep discussions",
        "focus_areas": ["Backend"],
        "communication_strategy": "Use video calls for detailed discussions",
    }


@pytest.mark.parametrize("frequency, max_sessions, expected", [
    ("weekly", 1, "Weekly sessions recommended"),
    ("weekly", 0, "Flexible scheduling based on availability"),
    ("bi-weekly", 2, "Bi-weekly sessions recommended"),
    ("bi-weekly", 1, "Flexible scheduling based on availability"),
    ("monthly", 0, "Monthly sessions recommended"),
    ("as-needed", 5, "Flexible scheduling based on availability"),
])
def test_session_frequency(generator, make_mentee, make_mentor, frequency, max_sessions, expected):
    mentee = make_mentee(mentoring_needs={"frequency": frequency})
    mentor = make_mentor(mentoring_info={"availability": {"max_sessions_per_week": max_sessions}})
    assert generator.recommend_session_frequency(mentee, mentor) == expected


@pytest.mark.parametrize("duration, expected", [
    (90, "60+ minute sessions for deep discussions"),
    (30, "30-45 minute sessions for focused topics"),
    (15, "Short sessions for quick check-ins"),
])
def test_session_duration(generator, make_mentor, duration, expected):
    mentor = make_mentor(mentoring_info={"availability": {"session_duration": duration}})
    assert generator.recommend_session_duration(mentor) == expected


def test_focus_areas_limited_to_three(generator, make_mentee, make_mentor):
    mentee = make_mentee(professional_info={"goals": ["Python", "ML", "Data Science", "Analytics", "Cooking"]})
    mentor = make_mentor(mentoring_info={"areas_of_expertise": ["python", "AI", "data analysis"]})
    assert generator.recommend_focus_areas(mentee, mentor) == ["Python", "ML", "Data Science"]


@pytest.mark.parametrize("mentee_methods, mentor_methods, expected", [
    (["chat", "phone"], ["phone", "chat"], "Use phone calls for regular check-ins"),
    (["chat"], ["chat"], "Use chat for quick questions and updates"),
    (["email"], ["email"], "Mix of communication methods based on needs"),
    ([], ["video"], "Mix of communication methods based on needs"),
])
def test_communication_strategy(generator, make_mentee, make_mentor, mentee_methods, mentor_methods, expected):
    mentee = make_mentee(communication_style={"preferred_methods": mentee_methods})
    mentor = make_mentor(mentoring_info={"communication_preferences": mentor_methods})
    assert generator.recommend_communication_strategy(mentee, mentor) == expected


# =============================================================================
# Confidence
# =============================================================================

@pytest.mark.parametrize("overall, value, expected", [
    (0.9, 0.9, Confidence.HIGH),
    (0.8, 0.9, Confidence.HIGH),
    (0.9, 0.7, Confidence.MEDIUM),
    (0.7, 0.9, Confidence.MEDIUM),
    (0.6, 0.7, Confidence.MEDIUM),
    (0.59, 0.9, Confidence.LOW),
    (0.9, 0.5, Confidence.LOW),
])
def test_confidence(overall, value, expected):
    assert ExplanationGenerator.calculate_confidence(overall, _breakdown(value)) is expected


# =============================================================================
# Mentee analysis
# =============================================================================

def test_analysis_of_sparse_mentee(make_mentee):
    analysis = analyze_mentee_profile(make_mentee(professional_info={"experience_level": "beginner"}))
    assert analysis.strengths == []
    assert analysis.areas_for_improvement == [
        "Consider developing more technical skills",
        "Define more specific career goals",
    ]
    assert analysis.recommended_mentor_types == [
        "Patient and encouraging mentors",
        "Mentors with teaching experience",
    ]


def test_analysis_of_experienced_mentee(make_mentee):
    mentee = make_mentee(
        professional_info={
            "experience_level": "advanced",
            "skills": ["a", "b", "c", "d", "e"],
            "goals": ["x", "y", "z"],
        },
        learning_history={"completed_courses": 5, "learning_streak": 30},
    )
    analysis = analyze_mentee_profile(mentee)
    assert analysis.strengths == [
        "Strong technical foundation",
        "Clear career objectives",
        "Consistent learner",
        "Maintains learning momentum",
    ]
    assert analysis.areas_for_improvement == []
    assert analysis.recommended_mentor_types == ["Senior executives", "Mentors with strategic expertise"]


def test_analysis_of_intermediate_mentee(make_mentee):
    mentee = make_mentee(
        professional_info={"experience_level": "intermediate"},
        learning_history={"completed_courses": 4, "learning_streak": 29},
    )
    analysis = analyze_mentee_profile(mentee)
    assert analysis.strengths == []
    assert analysis.recommended_mentor_types == ["Industry experts", "Mentors with leadership experience"]
