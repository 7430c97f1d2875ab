"""
Profile and result schema for mentor matching.

Defines the mentee and mentor profile structures consumed by the
compatibility evaluator, and the match result structures it produces.

Profiles are supplied by an external profile store as nested dictionaries;
every nested section accepts either a dataclass instance or a dict, and every
enumerated field accepts either an enum member or its string value.
Unrecognised enum values coerce to UNKNOWN so that sparse or malformed
profiles degrade to neutral scores instead of failing.
"""

from dataclasses import dataclass, field, fields
from typing import Optional, Dict, Any, List
from enum import Enum
import math


class _ProfileEnum(Enum):
    """Enum base that maps unrecognised values to UNKNOWN."""

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        return cls.UNKNOWN


class ExperienceLevel(_ProfileEnum):
    """Experience level (mentees use the first three)."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"
    UNKNOWN = "unknown"


class LearningPace(_ProfileEnum):
    SLOW = "slow"
    MODERATE = "moderate"
    FAST = "fast"
    UNKNOWN = "unknown"


class LearningFormat(_ProfileEnum):
    VISUAL = "visual"
    TEXT = "text"
    HANDS_ON = "hands-on"
    MIXED = "mixed"
    UNKNOWN = "unknown"


class TimeOfDay(_ProfileEnum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    FLEXIBLE = "flexible"
    UNKNOWN = "unknown"


class SessionLength(_ProfileEnum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"
    UNKNOWN = "unknown"


class SessionFrequency(_ProfileEnum):
    WEEKLY = "weekly"
    BI_WEEKLY = "bi-weekly"
    MONTHLY = "monthly"
    AS_NEEDED = "as-needed"
    UNKNOWN = "unknown"


class ResponseTime(_ProfileEnum):
    IMMEDIATE = "immediate"
    WITHIN_HOURS = "within-hours"
    WITHIN_DAYS = "within-days"
    UNKNOWN = "unknown"


class CommunicationFrequency(_ProfileEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    UNKNOWN = "unknown"


class Confidence(Enum):
    """Coarse strength label attached to a match."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def _as_list(value: Any) -> List[str]:
    """Coerce a missing or scalar field to a list of strings."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        return [str(value)]
    return [str(v) for v in value if v is not None]


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


def _as_number(value: Any, default: float = 0.0) -> float:
    """Coerce to a finite float; anything else yields the default."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def _as_int(value: Any, default: int = 0) -> int:
    return int(_as_number(value, default))


def _section(cls, value: Any):
    """Build a nested dataclass section from a dict, None or instance."""
    if value is None:
        return cls()
    if isinstance(value, dict):
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in value.items() if k in known})
    return value


def _to_plain(value: Any) -> Any:
    """Recursively convert dataclasses and enums to JSON-ready values."""
    if isinstance(value, Enum):
        return value.value
    if hasattr(value, "__dataclass_fields__"):
        return {f.name: _to_plain(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, list):
        return [_to_plain(v) for v in value]
    if isinstance(value, dict):
        return {k: _to_plain(v) for k, v in value.items()}
    return value


# =============================================================================
# MENTEE PROFILE
# =============================================================================

@dataclass
class MenteePersonalInfo:
    location: str = ""
    timezone: str = ""
    bio: str = ""
    age: str = ""

    def __post_init__(self):
        self.location = _as_text(self.location)
        self.timezone = _as_text(self.timezone)


@dataclass
class MenteeProfessionalInfo:
    """
    Professional background of a mentee.

    Attributes:
        current_role: Current job title, if any
        industry: Current industry, if any
        experience_level: beginner, intermediate or advanced
        skills: Skills the mentee already has (ordered)
        goals: Career goals, matched against mentor expertise areas
        interests: Free-form interests
    """
    current_role: Optional[str] = None
    industry: Optional[str] = None
    experience_level: ExperienceLevel = ExperienceLevel.UNKNOWN
    skills: List[str] = field(default_factory=list)
    goals: List[str] = field(default_factory=list)
    interests: List[str] = field(default_factory=list)

    def __post_init__(self):
        self.experience_level = ExperienceLevel(self.experience_level)
        self.skills = _as_list(self.skills)
        self.goals = _as_list(self.goals)
        self.interests = _as_list(self.interests)


@dataclass
class LearningPreferences:
    pace: LearningPace = LearningPace.UNKNOWN
    format: LearningFormat = LearningFormat.UNKNOWN
    time_of_day: TimeOfDay = TimeOfDay.UNKNOWN
    duration: SessionLength = SessionLength.UNKNOWN

    def __post_init__(self):
        self.pace = LearningPace(self.pace)
        self.format = LearningFormat(self.format)
        self.time_of_day = TimeOfDay(self.time_of_day)
        self.duration = SessionLength(self.duration)


@dataclass
class Budget:
    """Hourly budget range in the given currency."""
    min: float = 0.0
    max: float = 0.0
    currency: str = "USD"

    def __post_init__(self):
        self.min = _as_number(self.min)
        self.max = _as_number(self.max)
        self.currency = (_as_text(self.currency) or "USD").upper()


@dataclass
class MentoringNeeds:
    areas_of_focus: List[str] = field(default_factory=list)
    session_types: List[str] = field(default_factory=list)
    frequency: SessionFrequency = SessionFrequency.UNKNOWN
    budget: Budget = field(default_factory=Budget)
    time_commitment: float = 0.0  # hours per week

    def __post_init__(self):
        self.areas_of_focus = _as_list(self.areas_of_focus)
        self.session_types = _as_list(self.session_types)
        self.frequency = SessionFrequency(self.frequency)
        self.budget = _section(Budget, self.budget)
        self.time_commitment = _as_number(self.time_commitment)


@dataclass
class CommunicationStyle:
    preferred_methods: List[str] = field(default_factory=list)
    response_time: ResponseTime = ResponseTime.UNKNOWN
    communication_frequency: CommunicationFrequency = CommunicationFrequency.UNKNOWN

    def __post_init__(self):
        self.preferred_methods = _as_list(self.preferred_methods)
        self.response_time = ResponseTime(self.response_time)
        self.communication_frequency = CommunicationFrequency(self.communication_frequency)


@dataclass
class LearningHistory:
    completed_courses: int = 0
    projects_built: int = 0
    skills_mastered: int = 0
    learning_streak: int = 0  # days

    def __post_init__(self):
        self.completed_courses = _as_int(self.completed_courses)
        self.projects_built = _as_int(self.projects_built)
        self.skills_mastered = _as_int(self.skills_mastered)
        self.learning_streak = _as_int(self.learning_streak)


@dataclass
class ConversationEntry:
    """One past conversation turn. Carried with the profile, never scored."""
    content: str = ""
    sentiment: str = "neutral"
    topics: List[str] = field(default_factory=list)
    timestamp: str = ""


@dataclass
class MenteeProfile:
    """
    Complete mentee profile supplied per matching request.

    Attributes:
        id: Mentee identifier
        personal_info: Location, timezone and bio
        professional_info: Experience level, skills, goals and interests
        learning_preferences: Pace, format, preferred time of day, duration
        mentoring_needs: Focus areas, frequency, budget and weekly hours
        communication_style: Preferred methods and response expectations
        personality_traits: Optional self-reported traits
        learning_history: Optional learning counters
        conversation_history: Optional past conversations
    """
    id: str = ""
    personal_info: MenteePersonalInfo = field(default_factory=MenteePersonalInfo)
    professional_info: MenteeProfessionalInfo = field(default_factory=MenteeProfessionalInfo)
    learning_preferences: LearningPreferences = field(default_factory=LearningPreferences)
    mentoring_needs: MentoringNeeds = field(default_factory=MentoringNeeds)
    communication_style: CommunicationStyle = field(default_factory=CommunicationStyle)
    personality_traits: List[str] = field(default_factory=list)
    learning_history: Optional[LearningHistory] = None
    conversation_history: List[ConversationEntry] = field(default_factory=list)

    def __post_init__(self):
        """Validate nested objects."""
        self.personal_info = _section(MenteePersonalInfo, self.personal_info)
        self.professional_info = _section(MenteeProfessionalInfo, self.professional_info)
        self.learning_preferences = _section(LearningPreferences, self.learning_preferences)
        self.mentoring_needs = _section(MentoringNeeds, self.mentoring_needs)
        self.communication_style = _section(CommunicationStyle, self.communication_style)
        self.personality_traits = _as_list(self.personality_traits)
        if self.learning_history is not None:
            self.learning_history = _section(LearningHistory, self.learning_history)
        self.conversation_history = [
            _section(ConversationEntry, entry) for entry in (self.conversation_history or [])
        ]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return _to_plain(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MenteeProfile":
        """Create from dictionary."""
        return _section(cls, data)


# =============================================================================
# MENTOR PROFILE
# =============================================================================

@dataclass
class MentorPersonalInfo:
    first_name: str = ""
    last_name: str = ""
    location: str = ""
    timezone: str = ""
    bio: str = ""

    def __post_init__(self):
        self.location = _as_text(self.location)
        self.timezone = _as_text(self.timezone)


@dataclass
class MentorProfessionalInfo:
    current_role: str = ""
    company: str = ""
    industry: str = ""
    years_of_experience: int = 0
    skills: List[str] = field(default_factory=list)
    specializations: List[str] = field(default_factory=list)

    def __post_init__(self):
        self.years_of_experience = max(0, _as_int(self.years_of_experience))
        self.skills = _as_list(self.skills)
        self.specializations = _as_list(self.specializations)


@dataclass
class TimeSlot:
    """A weekly availability window, times as "HH:MM"."""
    day: str = ""
    start_time: str = ""
    end_time: str = ""
    timezone: str = ""

    def __post_init__(self):
        self.day = _as_text(self.day)
        self.start_time = _as_text(self.start_time)
        self.end_time = _as_text(self.end_time)
        self.timezone = _as_text(self.timezone)


@dataclass
class Availability:
    time_slots: List[TimeSlot] = field(default_factory=list)
    max_sessions_per_week: int = 0
    session_duration: int = 0  # minutes

    def __post_init__(self):
        self.time_slots = [_section(TimeSlot, slot) for slot in (self.time_slots or [])]
        self.max_sessions_per_week = _as_int(self.max_sessions_per_week)
        self.session_duration = _as_int(self.session_duration)


@dataclass
class Pricing:
    hourly_rate: float = 0.0
    currency: str = "USD"
    free_sessions: int = 0  # per month

    def __post_init__(self):
        self.hourly_rate = _as_number(self.hourly_rate)
        self.currency = (_as_text(self.currency) or "USD").upper()
        self.free_sessions = _as_int(self.free_sessions)


@dataclass
class MentoringInfo:
    """
    Mentoring offer of a mentor.

    Attributes:
        areas_of_expertise: Areas matched against mentee goals
        experience_level: beginner, intermediate, advanced or expert
        availability: Weekly slots and session capacity
        pricing: Hourly rate, currency and monthly free sessions
        languages: Supported languages
        communication_preferences: Offered communication methods
    """
    areas_of_expertise: List[str] = field(default_factory=list)
    experience_level: ExperienceLevel = ExperienceLevel.UNKNOWN
    availability: Availability = field(default_factory=Availability)
    pricing: Pricing = field(default_factory=Pricing)
    languages: List[str] = field(default_factory=list)
    communication_preferences: List[str] = field(default_factory=list)

    def __post_init__(self):
        self.areas_of_expertise = _as_list(self.areas_of_expertise)
        self.experience_level = ExperienceLevel(self.experience_level)
        self.availability = _section(Availability, self.availability)
        self.pricing = _section(Pricing, self.pricing)
        self.languages = _as_list(self.languages)
        self.communication_preferences = _as_list(self.communication_preferences)


@dataclass
class MentorStats:
    total_sessions: int = 0
    total_hours: float = 0.0
    average_rating: float = 0.0  # 0-5
    total_reviews: int = 0
    completion_rate: float = 0.0
    response_time: float = 24.0  # average hours

    def __post_init__(self):
        self.average_rating = _as_number(self.average_rating)
        self.response_time = _as_number(self.response_time, default=24.0)


@dataclass
class MentorPreferences:
    mentee_types: List[str] = field(default_factory=list)
    session_types: List[str] = field(default_factory=list)
    max_mentees: int = 0

    def __post_init__(self):
        self.mentee_types = _as_list(self.mentee_types)
        self.session_types = _as_list(self.session_types)


@dataclass
class MentorProfile:
    """Complete mentor profile as held by the profile store."""
    id: str = ""
    personal_info: MentorPersonalInfo = field(default_factory=MentorPersonalInfo)
    professional_info: MentorProfessionalInfo = field(default_factory=MentorProfessionalInfo)
    mentoring_info: MentoringInfo = field(default_factory=MentoringInfo)
    stats: MentorStats = field(default_factory=MentorStats)
    preferences: MentorPreferences = field(default_factory=MentorPreferences)

    def __post_init__(self):
        """Validate nested objects."""
        self.personal_info = _section(MentorPersonalInfo, self.personal_info)
        self.professional_info = _section(MentorProfessionalInfo, self.professional_info)
        self.mentoring_info = _section(MentoringInfo, self.mentoring_info)
        self.stats = _section(MentorStats, self.stats)
        self.preferences = _section(MentorPreferences, self.preferences)

    @property
    def display_name(self) -> str:
        name = f"{self.personal_info.first_name} {self.personal_info.last_name}".strip()
        return name or self.id

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return _to_plain(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MentorProfile":
        """Create from dictionary."""
        return _section(cls, data)


# =============================================================================
# MATCH RESULTS
# =============================================================================

DIMENSIONS = (
    "skills",
    "availability",
    "communication",
    "experience",
    "personality",
    "learning",
    "budget",
    "location",
)


@dataclass(frozen=True)
class CompatibilityBreakdown:
    """
    Per-dimension compatibility scores for one (mentee, mentor) pair.

    Every score is in [0, 1]. Field order matches DIMENSIONS.
    """
    skills: float
    availability: float
    communication: float
    experience: float
    personality: float
    learning: float
    budget: float
    location: float

    def values(self) -> List[float]:
        """Scores in DIMENSIONS order."""
        return [getattr(self, name) for name in DIMENSIONS]

    def average(self) -> float:
        scores = self.values()
        return sum(scores) / len(scores)

    def to_dict(self) -> Dict[str, float]:
        return {name: float(getattr(self, name)) for name in DIMENSIONS}


@dataclass
class MatchRecommendations:
    session_frequency: str
    session_duration: str
    focus_areas: List[str]
    communication_strategy: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "session_frequency": self.session_frequency,
            "session_duration": self.session_duration,
            "focus_areas": list(self.focus_areas),
            "communication_strategy": self.communication_strategy
        }


@dataclass
class MatchResult:
    """
    Result of matching one mentor against a mentee.

    Attributes:
        mentor: The mentor profile that was scored
        match_score: Overall score scaled to an integer in [0, 100]
        compatibility: Eight-dimension breakdown, each in [0, 1]
        match_reasons: Up to five human-readable reasons, in priority order
        potential_challenges: Independently triggered warnings
        recommendations: Suggested session setup
        confidence: low, medium or high
    """
    mentor: MentorProfile
    match_score: int
    compatibility: CompatibilityBreakdown
    match_reasons: List[str]
    potential_challenges: List[str]
    recommendations: MatchRecommendations
    confidence: Confidence

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "mentor": self.mentor.to_dict(),
            "match_score": self.match_score,
            "compatibility": self.compatibility.to_dict(),
            "match_reasons": list(self.match_reasons),
            "potential_challenges": list(self.potential_challenges),
            "recommendations": self.recommendations.to_dict(),
            "confidence": self.confidence.value
        }


@dataclass
class MenteeAnalysis:
    """Heuristic report on a mentee profile."""
    strengths: List[str] = field(default_factory=list)
    areas_for_improvement: List[str] = field(default_factory=list)
    recommended_mentor_types: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            "strengths": list(self.strengths),
            "areas_for_improvement": list(self.areas_for_improvement),
            "recommended_mentor_types": list(self.recommended_mentor_types)
        }
