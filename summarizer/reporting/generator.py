"""Render an :class:`Analysis` into the six-section formal report.

All prose here is templated; the AI generator reuses these helpers for its
fallback path so both routes produce the same wording when the model is
unavailable.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Dict, List, Optional

from summarizer.analysis.models import (
    Analysis,
    InterviewProcess,
    ModeCounts,
    Report,
    ReportSections,
    RoundFrequency,
)
from summarizer.reporting import config

logger = logging.getLogger(__name__)

__all__ = [
    "generate_report",
    "no_data_report",
    "build_sections",
    "report_title",
    "report_date",
]

NO_DATA_OVERVIEW = (
    "No student feedback has been submitted for this company to date. This report "
    "will be updated as feedback entries are recorded in the placement portal."
)
NO_DATA_INSIGHTS = "Data not available."
NO_DATA_CONCLUSION = (
    "The Placement Cell will continue to monitor feedback submissions and update "
    "this report accordingly."
)

FALLBACK_POSITIVE = "Students provided constructive feedback on the overall process."
FALLBACK_CHALLENGE = "No significant systemic challenges were reported."
FALLBACK_PROCESS = "Interview process details vary across feedback entries."

CODING_INSIGHT = (
    "Consistent practice on coding platforms to build problem-solving speed and accuracy"
)
APTITUDE_INSIGHT = (
    "Focused preparation for quantitative aptitude and logical reasoning assessments"
)
GENERIC_INSIGHTS = (
    "Thorough review of fundamental computer science concepts and data structures",
    "Preparation of articulate explanations for resume projects and technical decisions",
    "Mock interview practice to build confidence and communication skills",
)


def report_title(company_name: str) -> str:
    return f"{config.REPORT_TITLE_PREFIX}{company_name}"


def report_date(today: Optional[date] = None) -> str:
    """Long-form date such as ``19 October 2026``."""
    today = today or date.today()
    return today.strftime(config.REPORT_DATE_FORMAT.replace("{day}", str(today.day)))


def _capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def _rounds_list(rounds: List[RoundFrequency]) -> str:
    names = [r.type for r in rounds]
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        return f"{names[0]} and {names[1]} rounds"
    return f"{', '.join(names[:-1])}, and {names[-1]} rounds"


def _round_detail(r: RoundFrequency) -> str:
    if r.frequency is None:
        return r.type
    return f"{r.type} ({r.frequency} {_plural(r.frequency, 'instance', 'instances')})"


def _detailed_rounds(rounds: List[RoundFrequency]) -> str:
    return ", ".join(_round_detail(r) for r in rounds)


def _mode_summary(modes: ModeCounts) -> str:
    total = modes.total
    if total == 0:
        return "in various modes"
    if modes.offline == 0:
        return "primarily online"
    if modes.online == 0:
        return "primarily offline"

    # half rounds up; round() would round 12.5 down to 12
    online_pct = int(modes.online / total * 100 + 0.5)
    return f"in a hybrid format ({online_pct}% online, {100 - online_pct}% offline)"


def _difficulty_sentence(trends: Dict[str, str]) -> str:
    parts = ". ".join(f"{name} rounds were reported as {label}" for name, label in trends.items())
    return f"Difficulty Assessment: {parts}."


def _mode_sentence(modes: ModeCounts) -> str:
    return (
        f"Interview Mode: {modes.online} rounds conducted online and "
        f"{modes.offline} rounds conducted offline."
    )


def overview(analysis: Analysis) -> str:
    process = analysis.interview_process
    count = analysis.total_feedback_count
    round_summary = (
        f"typically consisting of {_rounds_list(process.rounds)}"
        if process.rounds
        else "with varying interview structures"
    )
    return (
        f"This report summarizes student experiences from {count} feedback "
        f"{_plural(count, 'entry', 'entries')} submitted following the "
        f"{analysis.company_name} campus placement drive. The overall student "
        f"experience was {analysis.overall_sentiment}. The recruitment process "
        f"{round_summary}, conducted {_mode_summary(process.mode_trends)}. Students "
        "reported diverse experiences across technical assessments, problem-solving "
        "exercises, and behavioral evaluations."
    )


def interview_process_insights(process: InterviewProcess) -> str:
    insights = ""
    if process.rounds:
        insights += (
            "The recruitment process commonly included the following rounds: "
            f"{_detailed_rounds(process.rounds)}. "
        )
    if process.difficulty_trends:
        insights += "\n\n" + _difficulty_sentence(process.difficulty_trends)
    if process.mode_trends.total > 0:
        insights += "\n\n" + _mode_sentence(process.mode_trends)
    return insights.strip() or FALLBACK_PROCESS


def positive_observations(analysis: Analysis) -> List[str]:
    if not analysis.positive_aspects:
        return [FALLBACK_POSITIVE]
    return [_capitalize(a) for a in analysis.positive_aspects]


def challenges_and_improvements(analysis: Analysis) -> List[str]:
    if not analysis.challenges:
        return [FALLBACK_CHALLENGE]
    return [_capitalize(c) for c in analysis.challenges]


def preparation_insights(analysis: Analysis) -> List[str]:
    insights = [_capitalize(i) for i in analysis.preparation_insights]
    process = analysis.interview_process
    if process.has_round("Coding"):
        insights.append(CODING_INSIGHT)
    if process.has_round("Aptitude"):
        insights.append(APTITUDE_INSIGHT)
    return insights or list(GENERIC_INSIGHTS)


def conclusion(analysis: Analysis) -> str:
    count = analysis.total_feedback_count
    return (
        f"The feedback collected from {count} {_plural(count, 'student', 'students')} "
        f"indicates a {analysis.overall_sentiment} experience with the "
        f"{analysis.company_name} placement drive. The insights gathered will assist "
        "future candidates in their preparation and enable the Placement Cell to "
        "maintain effective coordination with recruiting organizations. This report "
        "serves as an institutional record for faculty review and continuous "
        "improvement of placement support services."
    )


def build_sections(analysis: Analysis) -> ReportSections:
    """Templated prose for all six sections of a non-empty analysis."""
    return ReportSections(
        overview=overview(analysis),
        interview_process_insights=interview_process_insights(analysis.interview_process),
        positive_observations=positive_observations(analysis),
        challenges_and_improvements=challenges_and_improvements(analysis),
        preparation_insights=preparation_insights(analysis),
        conclusion=conclusion(analysis),
    )


def no_data_report(company_name: str) -> Report:
    return Report(
        title=report_title(company_name),
        generated_date=report_date(),
        sections=ReportSections(
            overview=NO_DATA_OVERVIEW,
            interview_process_insights=NO_DATA_INSIGHTS,
            conclusion=NO_DATA_CONCLUSION,
        ),
        ai_generated=False,
    )


def generate_report(analysis: Analysis) -> Report:
    """Convert *analysis* into a :class:`Report` (no-data boilerplate when empty)."""

    if analysis.total_feedback_count == 0:
        return no_data_report(analysis.company_name)

    logger.debug("Rendering templated report for %s", analysis.company_name)
    return Report(
        title=report_title(analysis.company_name),
        generated_date=report_date(),
        sections=build_sections(analysis),
        ai_generated=False,
    )
