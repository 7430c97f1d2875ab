"""
Explanation generation for mentor matches.

Turns a compatibility breakdown and the raw profile fields into the
human-facing parts of a match result: match reasons, potential challenges,
session recommendations and a confidence label. All output is
deterministic and list order is stable for identical inputs.
"""

import logging
from typing import List, Optional

from ..compatibility.skill_matching import SkillMatcher, SynonymSkillMatcher, matching_items
from ..profiles.schema import (
    CommunicationFrequency,
    CompatibilityBreakdown,
    Confidence,
    LearningFormat,
    MatchRecommendations,
    MenteeProfile,
    MentorProfile,
    SessionFrequency,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_REASONS = 5
STRONG_DIMENSION_THRESHOLD = 0.8
HIGH_RATING = 4.5
SENIOR_YEARS = 10
SLOW_RESPONSE_HOURS = 24
MAX_FOCUS_AREAS = 3
MAX_LISTED_SKILLS = 3

# First common method wins
COMMUNICATION_STRATEGIES = [
    ("video", "Use video calls for detailed discussions"),
    ("phone", "Use phone calls for regular check-ins"),
    ("chat", "Use chat for quick questions and updates"),
]
DEFAULT_COMMUNICATION_STRATEGY = "Mix of communication methods based on needs"


class ExplanationGenerator:
    """
    Builds reasons, challenges, recommendations and confidence for a match.

    Attributes:
        skill_matcher: Skill equivalence strategy (shared with the evaluator)
        max_reasons: Maximum number of match reasons returned
    """

    def __init__(self, skill_matcher: Optional[SkillMatcher] = None,
                 max_reasons: int = DEFAULT_MAX_REASONS):
        if max_reasons < 0:
            raise ValueError(f"max_reasons must be non-negative, got {max_reasons}")
        self.skill_matcher = skill_matcher or SynonymSkillMatcher()
        self.max_reasons = max_reasons

    # ------------------------------
    # Match reasons
    # ------------------------------
    def generate_match_reasons(
        self,
        mentee: MenteeProfile,
        mentor: MentorProfile,
        compatibility: CompatibilityBreakdown
    ) -> List[str]:
        """
        Generate match reasons in priority order.

        Args:
            mentee: Mentee profile
            mentor: Mentor profile
            compatibility: Breakdown for this pair

        Returns:
            At most max_reasons reason strings
        """
        reasons = []

        if compatibility.skills > STRONG_DIMENSION_THRESHOLD:
            shared_skills = matching_items(
                mentee.professional_info.skills,
                mentor.professional_info.skills,
                self.skill_matcher
            )
            if shared_skills:
                reasons.append(f"Shares expertise in: {', '.join(shared_skills[:MAX_LISTED_SKILLS])}")

        if compatibility.experience > STRONG_DIMENSION_THRESHOLD:
            level = mentor.mentoring_info.experience_level.value
            reasons.append(f"Perfect experience level match ({level})")

        if compatibility.availability > STRONG_DIMENSION_THRESHOLD:
            reasons.append("Excellent availability alignment")

        if compatibility.communication > STRONG_DIMENSION_THRESHOLD:
            reasons.append("Compatible communication preferences")

        rating = mentor.stats.average_rating
        if rating >= HIGH_RATING:
            reasons.append(f"Highly rated mentor ({rating:.1f}/5)")

        years = mentor.professional_info.years_of_experience
        if years >= SENIOR_YEARS:
            reasons.append(f"{years}+ years of experience")

        free_sessions = mentor.mentoring_info.pricing.free_sessions
        if free_sessions > 0:
            reasons.append(f"{free_sessions} free sessions available")

        return reasons[:self.max_reasons]

    # ------------------------------
    # Potential challenges
    # ------------------------------
    def identify_potential_challenges(self, mentee: MenteeProfile, mentor: MentorProfile) -> List[str]:
        challenges = []

        if mentee.personal_info.timezone != mentor.personal_info.timezone:
            challenges.append("Different time zones may require flexible scheduling")

        # Compared as listed, without currency conversion
        if mentee.mentoring_needs.budget.max < mentor.mentoring_info.pricing.hourly_rate:
            challenges.append("Mentor rate exceeds your budget")

        if (mentee.communication_style.communication_frequency == CommunicationFrequency.HIGH
                and mentor.stats.response_time > SLOW_RESPONSE_HOURS):
            challenges.append("Mentor may not respond as quickly as you prefer")

        if (mentee.learning_preferences.format == LearningFormat.HANDS_ON
                and "in-person" not in mentor.preferences.session_types):
            challenges.append("Mentor may not offer in-person sessions")

        return challenges

    # ------------------------------
    # Recommendations
    # ------------------------------
    def generate_recommendations(self, mentee: MenteeProfile, mentor: MentorProfile) -> MatchRecommendations:
        return MatchRecommendations(
            session_frequency=self.recommend_session_frequency(mentee, mentor),
            session_duration=self.recommend_session_duration(mentor),
            focus_areas=self.recommend_focus_areas(mentee, mentor),
            communication_strategy=self.recommend_communication_strategy(mentee, mentor)
        )

    def recommend_session_frequency(self, mentee: MenteeProfile, mentor: MentorProfile) -> str:
        frequency = mentee.mentoring_needs.frequency
        max_sessions = mentor.mentoring_info.availability.max_sessions_per_week

        if frequency == SessionFrequency.WEEKLY and max_sessions >= 1:
            return "Weekly sessions recommended"
        if frequency == SessionFrequency.BI_WEEKLY and max_sessions >= 2:
            return "Bi-weekly sessions recommended"
        if frequency == SessionFrequency.MONTHLY:
            return "Monthly sessions recommended"
        return "Flexible scheduling based on availability"

    def recommend_session_duration(self, mentor: MentorProfile) -> str:
        duration = mentor.mentoring_info.availability.session_duration

        if duration >= 60:
            return "60+ minute sessions for deep discussions"
        if duration >= 30:
            return "30-45 minute sessions for focused topics"
        return "Short sessions for quick check-ins"

    def recommend_focus_areas(self, mentee: MenteeProfile, mentor: MentorProfile) -> List[str]:
        """Up to three mentee goals covered by the mentor's expertise areas."""
        covered_goals = matching_items(
            mentee.professional_info.goals,
            mentor.mentoring_info.areas_of_expertise,
            self.skill_matcher
        )
        return covered_goals[:MAX_FOCUS_AREAS]

    def recommend_communication_strategy(self, mentee: MenteeProfile, mentor: MentorProfile) -> str:
        mentor_methods = mentor.mentoring_info.communication_preferences
        common_methods = [
            method for method in mentee.communication_style.preferred_methods
            if method in mentor_methods
        ]

        for method, strategy in COMMUNICATION_STRATEGIES:
            if method in common_methods:
                return strategy
        return DEFAULT_COMMUNICATION_STRATEGY

    # ------------------------------
    # Confidence
    # ------------------------------
    @staticmethod
    def calculate_confidence(overall_score: float, compatibility: CompatibilityBreakdown) -> Confidence:
        """
        Label how strong a match is.

        Args:
            overall_score: Unscaled aggregate score in [0, 1]
            compatibility: Breakdown whose mean is the second criterion

        Returns:
            HIGH when both are >= 0.8, MEDIUM when both are >= 0.6, else LOW
        """
        average = compatibility.average()

        if overall_score >= 0.8 and average >= 0.8:
            return Confidence.HIGH
        if overall_score >= 0.6 and average >= 0.6:
            return Confidence.MEDIUM
        return Confidence.LOW
