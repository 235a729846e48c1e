"""Rule-based feedback analysis.

Turns a batch of :class:`FeedbackEntry` objects for one company into an
:class:`Analysis` using rating statistics and the keyword catalogue. The
function is pure: it never mutates its input and never raises for entries
with missing fields (an absent field simply contributes nothing).
"""

from __future__ import annotations

import logging
from collections import Counter, defaultdict
from typing import Dict, Iterable, List, Optional, Sequence

from summarizer.analysis import catalogue
from summarizer.analysis.models import (
    Analysis,
    FeedbackEntry,
    InterviewProcess,
    ModeCounts,
    RoundFrequency,
)

logger = logging.getLogger(__name__)

__all__ = [
    "analyze",
    "sentiment_for",
    "normalize_round_type",
    "normalize_difficulty",
    "difficulty_trend",
]


def sentiment_for(average: Optional[float]) -> str:
    """Map an average rating to a sentiment label (``None`` means unrated)."""
    if average is None:
        return catalogue.UNRATED_SENTIMENT
    for lower_bound, label in catalogue.SENTIMENT_THRESHOLDS:
        if average >= lower_bound:
            return label
    return catalogue.LOWEST_SENTIMENT


def normalize_round_type(raw: str) -> str:
    """Collapse spelling variants of a round type onto a canonical label."""
    lowered = raw.lower().strip()
    for label, triggers in catalogue.ROUND_TYPE_RULES:
        if any(t in lowered for t in triggers):
            return label
    return raw


def normalize_difficulty(raw: str) -> int:
    lowered = raw.lower().strip()
    for ordinal, triggers in catalogue.DIFFICULTY_LEVELS:
        if any(t in lowered for t in triggers):
            return ordinal
    return catalogue.DEFAULT_DIFFICULTY


def difficulty_trend(ordinals: Sequence[int]) -> str:
    if not ordinals:
        return "Moderate"
    avg = sum(ordinals) / len(ordinals)
    for upper_bound, label in catalogue.DIFFICULTY_TRENDS:
        if avg <= upper_bound:
            return label
    return catalogue.HARDEST_TREND


def _overall_sentiment(entries: Iterable[FeedbackEntry]) -> str:
    # 0 means unrated
    ratings = [e.rating for e in entries if e.rating]
    if not ratings:
        return sentiment_for(None)
    return sentiment_for(sum(ratings) / len(ratings))


def _interview_process(entries: Iterable[FeedbackEntry]) -> InterviewProcess:
    round_counts: Counter[str] = Counter()
    difficulties: Dict[str, List[int]] = defaultdict(list)
    modes = ModeCounts()

    for entry in entries:
        for rnd in entry.rounds:
            if not rnd.type:
                continue
            round_type = normalize_round_type(rnd.type)
            round_counts[round_type] += 1

            if rnd.difficulty:
                difficulties[round_type].append(normalize_difficulty(rnd.difficulty))

            mode = rnd.mode.lower()
            if "online" in mode:
                modes.online += 1
            elif "offline" in mode:
                modes.offline += 1

    # most_common keeps first-seen order for equal counts
    rounds = [RoundFrequency(t, n) for t, n in round_counts.most_common()]
    trends = {t: difficulty_trend(values) for t, values in difficulties.items()}
    return InterviewProcess(rounds=rounds, difficulty_trends=trends, mode_trends=modes)


def _ranked(counts: Counter[str], min_frequency: int = catalogue.MIN_FREQUENCY) -> List[str]:
    return [phrase for phrase, n in counts.most_common() if n >= min_frequency]


def _positive_aspects(entries: Iterable[FeedbackEntry]) -> List[str]:
    counts: Counter[str] = Counter()
    for entry in entries:
        text = entry.overall_experience.lower()
        counts.update(catalogue.detect(catalogue.POSITIVE_RULES, text))
    return _ranked(counts)


def _challenges(entries: Iterable[FeedbackEntry]) -> List[str]:
    counts: Counter[str] = Counter()
    for entry in entries:
        combined = f"{entry.overall_experience.lower()} {entry.tips_for_juniors.lower()}"
        counts.update(catalogue.detect(catalogue.CHALLENGE_RULES, combined))
        # once per entry, however many rounds mention the topic
        from_questions: Dict[str, None] = {}
        for rnd in entry.rounds:
            for phrase in catalogue.detect(
                catalogue.QUESTION_CHALLENGE_RULES, rnd.questions.lower()
            ):
                from_questions.setdefault(phrase, None)
        counts.update(from_questions.keys())
    return _ranked(counts)


def _harvest_resources(entries: Iterable[FeedbackEntry]) -> List[str]:
    seen: Dict[str, None] = {}
    for entry in entries:
        for rnd in entry.rounds:
            if not rnd.resources:
                continue
            for item in rnd.resources.split(","):
                item = item.strip()
                if len(item) > catalogue.MIN_RESOURCE_LENGTH:
                    seen.setdefault(item, None)
    return list(seen)


def _preparation_insights(entries: Sequence[FeedbackEntry]) -> List[str]:
    counts: Counter[str] = Counter()
    for entry in entries:
        tips = entry.tips_for_juniors.lower()
        counts.update(catalogue.detect(catalogue.PREPARATION_RULES, tips))

    resources = _harvest_resources(entries)
    if resources:
        top = resources[: catalogue.MAX_RESOURCES]
        counts[catalogue.RESOURCES_PREFIX + ", ".join(top)] = len(top)

    return _ranked(counts)


def analyze(entries: Sequence[FeedbackEntry], company_name: str) -> Analysis:
    """Analyze *entries* for *company_name* and return an :class:`Analysis`.

    An empty batch yields :meth:`Analysis.empty`.
    """

    if not entries:
        return Analysis.empty(company_name)

    analysis = Analysis(
        company_name=company_name,
        total_feedback_count=len(entries),
        overall_sentiment=_overall_sentiment(entries),
        interview_process=_interview_process(entries),
        positive_aspects=_positive_aspects(entries),
        challenges=_challenges(entries),
        preparation_insights=_preparation_insights(entries),
    )
    logger.debug(
        "Rule-based analysis for %s: entries=%d sentiment=%s rounds=%d",
        company_name,
        analysis.total_feedback_count,
        analysis.overall_sentiment,
        len(analysis.interview_process.rounds),
    )
    return analysis
