"""
Per-dimension compatibility scoring for mentee/mentor pairs.

This module computes the eight independent compatibility scores that
describe how well one mentor fits one mentee:

- skills: fuzzy skill, specialization and expertise overlap
- availability: weekly capacity, timezone distance and time-slot overlap
- communication: shared methods and response-time expectations
- experience: mentor seniority relative to the mentee
- personality: accepted mentee types vs. communication frequency
- learning: session types compatible with the mentee's learning format
- budget: mentor rate (converted) relative to the mentee's budget
- location: same city, country or continent

Every score is in [0, 1] and each function falls back to a neutral value
when an input is empty or a lookup misses, so sparse profiles never fail.
"""

import logging
from typing import Optional

from ..profiles.schema import (
    CompatibilityBreakdown,
    MenteeProfile,
    MentorProfile,
)
from .lookups import (
    EXPERIENCE_ORDINALS,
    LEARNING_FORMAT_SESSION_TYPES,
    convert_currency,
    get_continent,
    get_country,
    response_time_compatibility,
    time_slot_compatibility,
    timezone_compatibility,
)
from .skill_matching import SkillMatcher, SynonymSkillMatcher, matching_items

logger = logging.getLogger(__name__)

# Partial-credit multipliers for non-direct skill matches
SPECIALIZATION_MATCH_WEIGHT = 0.8
EXPERTISE_MATCH_WEIGHT = 0.6

NEUTRAL_SCORE = 0.5


class CompatibilityEvaluator:
    """
    Computes the eight-dimension compatibility breakdown for a pair.

    Stateless apart from the injected skill matcher; safe to share across
    threads.

    Attributes:
        skill_matcher: Skill equivalence strategy
    """

    def __init__(self, skill_matcher: Optional[SkillMatcher] = None):
        self.skill_matcher = skill_matcher or SynonymSkillMatcher()

    def evaluate(self, mentee: MenteeProfile, mentor: MentorProfile) -> CompatibilityBreakdown:
        """
        Compute all compatibility scores for one mentee/mentor pair.

        Args:
            mentee: Mentee profile
            mentor: Mentor profile

        Returns:
            CompatibilityBreakdown with every score in [0, 1]
        """
        breakdown = CompatibilityBreakdown(
            skills=self.skills_score(mentee, mentor),
            availability=self.availability_score(mentee, mentor),
            communication=self.communication_score(mentee, mentor),
            experience=self.experience_score(mentee, mentor),
            personality=self.personality_score(mentee, mentor),
            learning=self.learning_score(mentee, mentor),
            budget=self.budget_score(mentee, mentor),
            location=self.location_score(mentee, mentor)
        )
        logger.debug(f"Compatibility {mentee.id} -> {mentor.id}: {breakdown.to_dict()}")
        return breakdown

    def skills_score(self, mentee: MenteeProfile, mentor: MentorProfile) -> float:
        """
        Score skill overlap.

        Direct matches against mentor skills count 1.0, matches against
        specializations count 0.8, and mentee goals matching mentor expertise
        areas count 0.6. The weighted count is divided by the number of
        mentee skills plus goals and capped at 1.
        """
        mentee_skills = mentee.professional_info.skills
        goals = mentee.professional_info.goals

        if not mentee_skills:
            return NEUTRAL_SCORE

        direct = matching_items(mentee_skills, mentor.professional_info.skills, self.skill_matcher)
        specialization = matching_items(
            mentee_skills, mentor.professional_info.specializations, self.skill_matcher
        )
        expertise = matching_items(
            goals, mentor.mentoring_info.areas_of_expertise, self.skill_matcher
        )

        total_matches = (
            len(direct)
            + len(specialization) * SPECIALIZATION_MATCH_WEIGHT
            + len(expertise) * EXPERTISE_MATCH_WEIGHT
        )
        max_possible = len(mentee_skills) + len(goals)

        return min(total_matches / max_possible, 1.0)

    def availability_score(self, mentee: MenteeProfile, mentor: MentorProfile) -> float:
        """0.4 x weekly capacity + 0.3 x timezone + 0.3 x time-slot overlap."""
        availability = mentor.mentoring_info.availability

        mentor_weekly_hours = availability.max_sessions_per_week * (availability.session_duration / 60)
        time_capacity = 1.0 if mentee.mentoring_needs.time_commitment <= mentor_weekly_hours else 0.5

        timezone = timezone_compatibility(
            mentee.personal_info.timezone, mentor.personal_info.timezone
        )
        time_slots = time_slot_compatibility(
            mentee.learning_preferences.time_of_day, availability.time_slots
        )

        return min(time_capacity * 0.4 + timezone * 0.3 + time_slots * 0.3, 1.0)

    def communication_score(self, mentee: MenteeProfile, mentor: MentorProfile) -> float:
        mentee_methods = mentee.communication_style.preferred_methods
        mentor_methods = mentor.mentoring_info.communication_preferences

        if not mentee_methods:
            return NEUTRAL_SCORE

        shared = [method for method in mentee_methods if method in mentor_methods]
        method_overlap = len(shared) / len(mentee_methods)

        response = response_time_compatibility(
            mentee.communication_style.response_time, mentor.stats.response_time
        )

        return min(method_overlap * 0.7 + response * 0.3, 1.0)

    def experience_score(self, mentee: MenteeProfile, mentor: MentorProfile) -> float:
        """
        Score mentor seniority relative to the mentee.

        A mentor one or two levels above is ideal (1.0), the same level is
        fine (0.8), three levels above is a stretch (0.6) and a less
        experienced mentor scores 0.3.
        """
        mentee_index = EXPERIENCE_ORDINALS.get(mentee.professional_info.experience_level)
        mentor_index = EXPERIENCE_ORDINALS.get(mentor.mentoring_info.experience_level)

        if mentee_index is None or mentor_index is None:
            return NEUTRAL_SCORE

        level_diff = mentor_index - mentee_index

        if 1 <= level_diff <= 2:
            return 1.0
        if level_diff == 0:
            return 0.8
        if level_diff == 3:
            return 0.6
        if level_diff < 0:
            return 0.3
        return NEUTRAL_SCORE

    def personality_score(self, mentee: MenteeProfile, mentor: MentorProfile) -> float:
        # Proxy: does the mentor accept mentees with this communication frequency
        mentee_types = mentor.preferences.mentee_types
        frequency = mentee.communication_style.communication_frequency.value

        if frequency in mentee_types:
            return 1.0
        if not mentee_types:
            return NEUTRAL_SCORE
        return 0.3

    def learning_score(self, mentee: MenteeProfile, mentor: MentorProfile) -> float:
        compatible_types = LEARNING_FORMAT_SESSION_TYPES.get(mentee.learning_preferences.format, [])
        session_types = mentor.preferences.session_types

        if any(session_type in session_types for session_type in compatible_types):
            return 1.0
        return NEUTRAL_SCORE

    def budget_score(self, mentee: MenteeProfile, mentor: MentorProfile) -> float:
        """Bucket the mentor's rate, in the mentee's currency, against the budget."""
        budget = mentee.mentoring_needs.budget
        pricing = mentor.mentoring_info.pricing

        rate = convert_currency(pricing.hourly_rate, pricing.currency, budget.currency)

        if budget.min <= rate <= budget.max:
            return 1.0
        if rate <= budget.max * 1.2:
            return 0.8
        if rate <= budget.max * 1.5:
            return 0.5
        return 0.2

    def location_score(self, mentee: MenteeProfile, mentor: MentorProfile) -> float:
        mentee_location = mentee.personal_info.location.lower()
        mentor_location = mentor.personal_info.location.lower()

        if mentee_location == mentor_location:
            return 1.0

        mentee_country = get_country(mentee_location)
        mentor_country = get_country(mentor_location)
        if mentee_country == mentor_country:
            return 0.8

        if get_continent(mentee_country) == get_continent(mentor_country):
            return 0.6

        return 0.3
