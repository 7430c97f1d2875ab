"""
Skill equivalence strategies.

The compatibility evaluator and the explanation generator never compare
skill strings directly; they ask a SkillMatcher. The default matcher treats
two skills as equivalent when one contains the other (case-insensitive) or
when both belong to the same synonym group. Alternative matchers, e.g. an
embedding-based one, can be injected without touching the scoring code.
"""

import logging
from typing import Iterable, List, Optional, Sequence

logger = logging.getLogger(__name__)


DEFAULT_SKILL_GROUPS: List[List[str]] = [
    ["javascript", "js", "ecmascript"],
    ["react", "reactjs", "react.js"],
    ["node", "nodejs", "node.js"],
    ["python", "py"],
    ["machine learning", "ml", "ai"],
    ["data science", "data analysis", "analytics"],
    ["web development", "frontend", "backend", "full stack"],
    ["mobile development", "ios", "android", "react native", "flutter"],
]


class SkillMatcher:
    """Base class for skill equivalence strategies."""

    def matches(self, skill_a: str, skill_b: str) -> bool:
        """Return True if the two skills should count as the same skill."""
        raise NotImplementedError


class SynonymSkillMatcher(SkillMatcher):
    """
    Substring and synonym-group skill matcher.

    Attributes:
        skill_groups: Lower-cased synonym groups, in lookup order
    """

    def __init__(self, extra_groups: Optional[Iterable[Sequence[str]]] = None,
                 include_defaults: bool = True):
        """
        Initialize the matcher.

        Args:
            extra_groups: Additional synonym groups appended to the defaults
            include_defaults: Whether to start from DEFAULT_SKILL_GROUPS
        """
        groups = [list(g) for g in DEFAULT_SKILL_GROUPS] if include_defaults else []
        for group in extra_groups or []:
            groups.append(list(group))

        self.skill_groups = [
            frozenset(s.strip().lower() for s in group if s and s.strip())
            for group in groups
        ]
        self.skill_groups = [g for g in self.skill_groups if len(g) > 1]
        logger.debug(f"Initialized SynonymSkillMatcher with {len(self.skill_groups)} groups")

    def matches(self, skill_a: str, skill_b: str) -> bool:
        s1 = (skill_a or "").lower()
        s2 = (skill_b or "").lower()

        # Substring either way (an empty string is contained in everything)
        if s1 in s2 or s2 in s1:
            return True

        return self.are_synonyms(s1, s2)

    def are_synonyms(self, skill_a: str, skill_b: str) -> bool:
        """Check whether both lower-cased skills sit in one synonym group."""
        for group in self.skill_groups:
            if skill_a in group and skill_b in group:
                return True
        return False

    @classmethod
    def from_config(cls, config: dict) -> "SynonymSkillMatcher":
        """Create from main config dictionary."""
        skills_config = config.get("skills", {}) or {}
        return cls(
            extra_groups=skills_config.get("synonym_groups", []),
            include_defaults=skills_config.get("include_default_groups", True)
        )


def matching_items(items: Sequence[str], candidates: Sequence[str],
                   matcher: SkillMatcher) -> List[str]:
    """
    Select the items that match at least one candidate.

    Args:
        items: Strings to filter (order is preserved)
        candidates: Strings to match against
        matcher: Skill equivalence strategy

    Returns:
        The matching subset of items
    """
    return [
        item for item in items
        if any(matcher.matches(item, candidate) for candidate in candidates)
    ]
