"""Keyword catalogue used by the rule-based analyzer.

Every canned phrase the analyzer can emit is listed here together with the
substrings that trigger it, so each entry can be tested on its own. Matching is
plain substring search over lower-cased text.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

# A phrase must be detected in at least this many entries to be reported.
MIN_FREQUENCY: int = 2

# At most this many harvested resources are named in the resources insight.
MAX_RESOURCES: int = 3

# Resources of this length or shorter are treated as noise.
MIN_RESOURCE_LENGTH: int = 2

DEFAULT_DIFFICULTY: int = 2


@dataclass(frozen=True)
class Rule:
    """Map trigger substrings to a canned phrase.

    The rule fires when one of ``any_of`` is present (if given) and every
    group in ``all_of`` has at least one member present.
    """

    phrase: str
    any_of: Tuple[str, ...] = ()
    all_of: Tuple[Tuple[str, ...], ...] = ()

    def matches(self, text: str) -> bool:
        if self.any_of and not any(k in text for k in self.any_of):
            return False
        return all(any(k in text for k in group) for group in self.all_of)


def detect(rules: Iterable[Rule], text: str) -> list[str]:
    """Return the phrases of every rule in *rules* that fires for *text*."""
    return [rule.phrase for rule in rules if rule.matches(text)]


# Checked in order; the first label with a matching trigger wins.
ROUND_TYPE_RULES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Aptitude", ("aptitude", "quant")),
    ("Coding", ("coding", "programming")),
    ("Technical", ("technical", "tech")),
    ("HR", ("hr", "human resource")),
    ("Group Discussion", ("group", "gd")),
)

DIFFICULTY_LEVELS: Tuple[Tuple[int, Tuple[str, ...]], ...] = (
    (1, ("easy",)),
    (2, ("medium", "moderate")),
    (3, ("hard", "difficult")),
)

# Upper bounds (inclusive) of the averaged difficulty ordinal.
DIFFICULTY_TRENDS: Tuple[Tuple[float, str], ...] = (
    (1.5, "Easy to Moderate"),
    (2.5, "Moderate"),
)
HARDEST_TREND = "Moderate to Difficult"

# Inclusive lower bounds of the average rating, evaluated high to low.
SENTIMENT_THRESHOLDS: Tuple[Tuple[float, str], ...] = (
    (4, "predominantly positive"),
    (3, "moderately positive"),
    (2, "mixed"),
)
LOWEST_SENTIMENT = "challenging"
UNRATED_SENTIMENT = "mixed experiences"

# Scanned against ``overallExperience``.
POSITIVE_RULES: Tuple[Rule, ...] = (
    Rule("Well-organized interview process", all_of=(("well",), ("organized",))),
    Rule("Professional conduct maintained throughout", any_of=("professional", "formal")),
    Rule("Supportive and approachable interviewers", any_of=("friendly", "supportive")),
    Rule("Clear communication of expectations", any_of=("clear", "transparent")),
    Rule("Fair and unbiased evaluation process", any_of=("fair", "unbiased")),
)

# Scanned against ``overallExperience`` and ``tipsForJuniors`` combined.
CHALLENGE_RULES: Tuple[Rule, ...] = (
    Rule(
        "Time management during coding and technical rounds",
        all_of=(("time",), ("manage", "short")),
    ),
    Rule("Complexity of technical questions", any_of=("difficult", "tough", "hard")),
    Rule(
        "Adequate preparation required for problem-solving",
        any_of=("practice", "prepare"),
    ),
    Rule(
        "Managing pressure in high-stakes interview scenarios",
        any_of=("stress", "pressure", "nervous"),
    ),
)

# Scanned against each round's ``questions``; counted once per entry.
QUESTION_CHALLENGE_RULES: Tuple[Rule, ...] = (
    Rule(
        "Data structures and algorithms proficiency",
        any_of=("data structure", "algorithm"),
    ),
    Rule("System design and architecture knowledge", any_of=("system design",)),
)

# Scanned against ``tipsForJuniors``.
PREPARATION_RULES: Tuple[Rule, ...] = (
    Rule(
        "Regular practice of coding problems on competitive platforms",
        all_of=(("practice",), ("coding", "programming")),
    ),
    Rule(
        "Strong foundation in data structures and algorithms",
        any_of=("data structure", "algorithm", "dsa"),
    ),
    Rule("Thorough understanding of projects mentioned in resume", any_of=("project", "resume")),
    Rule("Preparation for aptitude and quantitative reasoning", any_of=("aptitude", "quant")),
    Rule(
        "Clear communication and explanation of technical concepts",
        any_of=("communication", "explain"),
    ),
    Rule("Time management strategies for coding assessments", all_of=(("time",), ("manage",))),
)

RESOURCES_PREFIX = "Recommended resources: "
