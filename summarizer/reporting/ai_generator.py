"""Model-backed report prose.

Asks the language model to write the six report sections from an
:class:`Analysis`. When the call or its validation fails, the sections are
produced by the templated prose of :mod:`summarizer.reporting.generator`
from the same analysis fields.
"""
from __future__ import annotations

import json
import logging
from typing import Dict, List

from summarizer.analysis.models import Analysis, Report, ReportSections
from summarizer.llm_client import chat_completion, completion_text, parse_json_object
from summarizer.reporting import config
from summarizer.reporting.generator import (
    build_sections,
    no_data_report,
    report_date,
    report_title,
)
from summarizer.reporting.schema import ReportPayload, validate_payload

logger = logging.getLogger(__name__)

_SYSTEM_PROMPT = (
    "You are an internal documentation engine for an academic institution's "
    "Placement Cell. You generate formal, professional placement feedback "
    "reports suitable for faculty review and institutional records. You write "
    "in formal academic language, maintain objectivity, and never mention AI, "
    "automation, or artificial intelligence. Your reports are concise, "
    "well-structured, and appropriate for PDF export. Respond ONLY with a JSON "
    "object."
)

_REQUIREMENTS = """REPORT REQUIREMENTS:

Generate the following 6 sections in formal institutional language:

1. OVERVIEW (Single paragraph, 4-6 sentences):
   - Summarize overall student experience
   - Mention number of feedback entries
   - Describe interview process structure
   - Note interview modes
   - Maintain formal, objective tone

2. INTERVIEW PROCESS INSIGHTS (2-3 paragraphs):
   - Describe common interview rounds
   - Discuss difficulty trends
   - Explain online vs offline distribution
   - Use complete sentences and formal structure

3. POSITIVE OBSERVATIONS (Bullet points, 3-5 items):
   - List strengths and well-received aspects
   - Each point should be a complete, formal statement
   - Start each with capital letter, no ending punctuation

4. CHALLENGES AND AREAS FOR IMPROVEMENT (Bullet points, 3-5 items):
   - List commonly reported difficulties
   - Use constructive, professional language
   - Focus on systemic patterns, not individual complaints

5. PREPARATION INSIGHTS FOR FUTURE CANDIDATES (Bullet points, 4-6 items):
   - Provide actionable, specific guidance
   - Based on student experiences and tips
   - Professional, instructive tone

6. CONCLUSION (Single paragraph, 3-4 sentences):
   - Summary of feedback significance
   - Value for future candidates and placement cell
   - Formal institutional closing
   - Mention use for faculty review and records

CRITICAL FORMATTING RULES:
- Use formal academic language throughout
- NO informal expressions, slang, or casual tone
- NO emojis or conversational phrases
- NEVER mention AI, automation, or artificial intelligence
- Write as if authored by the Placement Cell
- Ensure bullet points are complete statements
- Maintain objectivity and professionalism

OUTPUT FORMAT (JSON):
{
  "overview": "paragraph text",
  "interviewProcessInsights": "paragraph(s) text",
  "positiveObservations": ["point1", "point2", ...],
  "challengesAndImprovements": ["point1", "point2", ...],
  "preparationInsights": ["point1", "point2", ...],
  "conclusion": "paragraph text"
}"""


def _build_user_prompt(analysis: Analysis) -> str:
    process = analysis.interview_process
    modes = process.mode_trends
    return (
        "Generate a formal placement feedback summary report for "
        f"{analysis.company_name} based on the following analyzed data.\n\n"
        "ANALYSIS DATA:\n"
        f"- Total Feedback Entries: {analysis.total_feedback_count}\n"
        f"- Overall Sentiment: {analysis.overall_sentiment}\n"
        f"- Common Interview Rounds: {', '.join(process.common_rounds)}\n"
        f"- Difficulty Trends: {json.dumps(process.difficulty_trends)}\n"
        f"- Interview Modes: {modes.online} online, {modes.offline} offline\n"
        f"- Positive Aspects: {json.dumps(analysis.positive_aspects)}\n"
        f"- Challenges: {json.dumps(analysis.challenges)}\n"
        f"- Preparation Insights: {json.dumps(analysis.preparation_insights)}\n\n"
        f"{_REQUIREMENTS}"
    )


def _clean(items: List[str]) -> List[str]:
    return [s.strip() for s in items if s.strip()]


def _to_sections(payload: ReportPayload, analysis: Analysis) -> ReportSections:
    # Empty bullet lists from the model are back-filled from the templates
    templated = build_sections(analysis)
    return ReportSections(
        overview=payload.overview,
        interview_process_insights=payload.interview_process_insights,
        positive_observations=_clean(payload.positive_observations)
        or templated.positive_observations,
        challenges_and_improvements=_clean(payload.challenges_and_improvements)
        or templated.challenges_and_improvements,
        preparation_insights=_clean(payload.preparation_insights)
        or templated.preparation_insights,
        conclusion=payload.conclusion,
    )


async def _request_sections(messages: List[Dict[str, str]]) -> ReportPayload:
    resp = await chat_completion(
        messages,
        temperature=config.REPORT_TEMPERATURE,
        response_format={"type": "json_object"},
    )
    payload = parse_json_object(completion_text(resp))
    return validate_payload(ReportPayload, payload)


def fallback_report(analysis: Analysis) -> Report:
    """Templated report over the given analysis, flagged as not model-written."""
    return Report(
        title=report_title(analysis.company_name),
        generated_date=report_date(),
        sections=build_sections(analysis),
        ai_generated=False,
    )


async def generate_report(analysis: Analysis) -> Report:
    """Produce a :class:`Report` with model-written prose, falling back on failure.

    An analysis with no feedback returns the no-data report without calling
    the model.
    """

    if analysis.total_feedback_count == 0:
        return no_data_report(analysis.company_name)

    messages = [
        {"role": "system", "content": _SYSTEM_PROMPT},
        {"role": "user", "content": _build_user_prompt(analysis)},
    ]

    attempts = 0
    while attempts < config.LLM_MAX_ATTEMPTS:
        attempts += 1
        try:
            payload = await _request_sections(messages)
            return Report(
                title=report_title(analysis.company_name),
                generated_date=report_date(),
                sections=_to_sections(payload, analysis),
                ai_generated=True,
            )
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "Report generation attempt %d for %s failed: %s",
                attempts,
                analysis.company_name,
                exc,
                exc_info=True,
            )

    logger.warning("Falling back to templated report for %s", analysis.company_name)
    return fallback_report(analysis)
