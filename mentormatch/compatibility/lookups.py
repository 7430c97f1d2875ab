"""
Fixed lookup tables and the pure helper functions built on them.

Every helper returns a documented neutral value on a lookup miss; none of
them raise on unknown timezones, currencies, countries or categories.
"""

from typing import Dict, List, Sequence

from ..profiles.schema import (
    ExperienceLevel,
    LearningFormat,
    ResponseTime,
    TimeOfDay,
    TimeSlot,
)

TIMEZONE_OFFSETS: Dict[str, int] = {
    "UTC": 0,
    "EST": -5,
    "PST": -8,
    "GMT": 0,
    "CET": 1,
    "JST": 9,
}

# Step function over absolute hour difference: (max_diff, score)
TIMEZONE_STEPS = [(2, 0.9), (4, 0.7), (6, 0.5), (8, 0.3)]
TIMEZONE_FALLBACK = 0.1

_MORNING = ["08:00", "09:00", "10:00", "11:00"]
_AFTERNOON = ["12:00", "13:00", "14:00", "15:00", "16:00"]
_EVENING = ["17:00", "18:00", "19:00", "20:00"]

TIME_OF_DAY_HOURS: Dict[TimeOfDay, List[str]] = {
    TimeOfDay.MORNING: _MORNING,
    TimeOfDay.AFTERNOON: _AFTERNOON,
    TimeOfDay.EVENING: _EVENING,
    TimeOfDay.FLEXIBLE: _MORNING + _AFTERNOON + _EVENING,
}

EXPECTED_RESPONSE_HOURS: Dict[ResponseTime, float] = {
    ResponseTime.IMMEDIATE: 0.5,
    ResponseTime.WITHIN_HOURS: 4.0,
    ResponseTime.WITHIN_DAYS: 24.0,
}
DEFAULT_EXPECTED_RESPONSE_HOURS = 24.0

# Units of each currency per USD
EXCHANGE_RATES: Dict[str, float] = {
    "USD": 1.0,
    "EUR": 0.85,
    "GBP": 0.73,
    "JPY": 110.0,
}

COUNTRY_CONTINENTS: Dict[str, str] = {
    "usa": "north-america",
    "canada": "north-america",
    "mexico": "north-america",
    "uk": "europe",
    "germany": "europe",
    "france": "europe",
    "spain": "europe",
    "italy": "europe",
    "china": "asia",
    "japan": "asia",
    "india": "asia",
    "australia": "oceania",
}
UNKNOWN_CONTINENT = "unknown"

EXPERIENCE_ORDINALS: Dict[ExperienceLevel, int] = {
    ExperienceLevel.BEGINNER: 0,
    ExperienceLevel.INTERMEDIATE: 1,
    ExperienceLevel.ADVANCED: 2,
    ExperienceLevel.EXPERT: 3,
}

LEARNING_FORMAT_SESSION_TYPES: Dict[LearningFormat, List[str]] = {
    LearningFormat.VISUAL: ["video", "in-person"],
    LearningFormat.TEXT: ["chat", "email"],
    LearningFormat.HANDS_ON: ["in-person", "video"],
    LearningFormat.MIXED: ["video", "phone", "chat", "in-person"],
}


def timezone_compatibility(timezone_a: str, timezone_b: str) -> float:
    """
    Score how well two timezones overlap.

    Identical strings score 1.0. Otherwise the absolute offset difference
    from TIMEZONE_OFFSETS (unknown zones count as UTC) is bucketed by
    TIMEZONE_STEPS.
    """
    if timezone_a == timezone_b:
        return 1.0

    offset_a = TIMEZONE_OFFSETS.get(timezone_a, 0)
    offset_b = TIMEZONE_OFFSETS.get(timezone_b, 0)
    hour_diff = abs(offset_a - offset_b)

    for max_diff, score in TIMEZONE_STEPS:
        if hour_diff <= max_diff:
            return score
    return TIMEZONE_FALLBACK


def time_slot_compatibility(time_of_day: TimeOfDay, slots: Sequence[TimeSlot]) -> float:
    """
    Score whether a mentor has a slot starting in the mentee's preferred hours.

    Returns 0.5 when the mentor has no slots or no slot matches, 1.0 when
    any slot's start time contains one of the preferred canonical hours.
    """
    if not slots:
        return 0.5

    preferred_hours = TIME_OF_DAY_HOURS.get(time_of_day, [])
    has_matching_slot = any(
        hour in (slot.start_time or "")
        for slot in slots
        for hour in preferred_hours
    )
    return 1.0 if has_matching_slot else 0.5


def response_time_compatibility(expected: ResponseTime, actual_hours: float) -> float:
    """Compare a mentee's expected response time with a mentor's average."""
    expected_hours = EXPECTED_RESPONSE_HOURS.get(expected, DEFAULT_EXPECTED_RESPONSE_HOURS)

    if actual_hours <= expected_hours:
        return 1.0
    if actual_hours <= expected_hours * 2:
        return 0.7
    if actual_hours <= expected_hours * 4:
        return 0.4
    return 0.1


def convert_currency(amount: float, from_currency: str, to_currency: str) -> float:
    """Convert an amount between currencies; unknown currencies count as USD."""
    from_rate = EXCHANGE_RATES.get((from_currency or "").upper(), 1.0)
    to_rate = EXCHANGE_RATES.get((to_currency or "").upper(), 1.0)
    return amount / from_rate * to_rate


def get_country(location: str) -> str:
    """Infer the country as the last comma-separated token of a location."""
    return (location or "").lower().split(",")[-1].strip()


def get_continent(country: str) -> str:
    return COUNTRY_CONTINENTS.get((country or "").lower(), UNKNOWN_CONTINENT)
