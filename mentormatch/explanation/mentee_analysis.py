"""
Heuristic mentee profile analysis.

Produces a short report of a mentee's strengths, areas for improvement
and the kinds of mentors likely to suit them. Independent of any mentor
pool; used by UIs to frame the match list.
"""

import logging

from ..profiles.schema import ExperienceLevel, MenteeAnalysis, MenteeProfile

logger = logging.getLogger(__name__)

MIN_SKILLS_FOR_STRENGTH = 5
MIN_GOALS_FOR_STRENGTH = 3
MIN_COMPLETED_COURSES = 5
MIN_LEARNING_STREAK_DAYS = 30

RECOMMENDED_MENTOR_TYPES = {
    ExperienceLevel.BEGINNER: [
        "Patient and encouraging mentors",
        "Mentors with teaching experience",
    ],
    ExperienceLevel.INTERMEDIATE: [
        "Industry experts",
        "Mentors with leadership experience",
    ],
}
SENIOR_MENTOR_TYPES = [
    "Senior executives",
    "Mentors with strategic expertise",
]


def analyze_mentee_profile(mentee: MenteeProfile) -> MenteeAnalysis:
    """
    Analyze a mentee profile.

    Args:
        mentee: Mentee profile

    Returns:
        MenteeAnalysis with strengths, areas for improvement and
        recommended mentor types
    """
    analysis = MenteeAnalysis()
    professional = mentee.professional_info

    if len(professional.skills) >= MIN_SKILLS_FOR_STRENGTH:
        analysis.strengths.append("Strong technical foundation")
    else:
        analysis.areas_for_improvement.append("Consider developing more technical skills")

    if len(professional.goals) >= MIN_GOALS_FOR_STRENGTH:
        analysis.strengths.append("Clear career objectives")
    else:
        analysis.areas_for_improvement.append("Define more specific career goals")

    history = mentee.learning_history
    if history is not None:
        if history.completed_courses >= MIN_COMPLETED_COURSES:
            analysis.strengths.append("Consistent learner")
        if history.learning_streak >= MIN_LEARNING_STREAK_DAYS:
            analysis.strengths.append("Maintains learning momentum")

    # Advanced, expert and unknown levels all get senior mentor types
    analysis.recommended_mentor_types.extend(
        RECOMMENDED_MENTOR_TYPES.get(professional.experience_level, SENIOR_MENTOR_TYPES)
    )

    logger.debug(f"Analyzed mentee {mentee.id}: {len(analysis.strengths)} strengths, "
                 f"{len(analysis.areas_for_improvement)} areas for improvement")
    return analysis
