"""Model-backed feedback analysis.

The same job as :mod:`summarizer.analysis.analyzer`, delegated to a chat
completion constrained to a fixed JSON shape. Any failure (network, timeout,
bad JSON, schema mismatch) is logged and answered with a statistical fallback,
so callers always receive a well-formed :class:`Analysis`.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Sequence

from summarizer.analysis.analyzer import sentiment_for
from summarizer.analysis.anonymize import sanitize_entries
from summarizer.analysis.models import (
    Analysis,
    FeedbackEntry,
    InterviewProcess,
    ModeCounts,
    RoundFrequency,
)
from summarizer.llm_client import chat_completion, completion_text, parse_json_object
from summarizer.reporting import config
from summarizer.reporting.schema import AnalysisPayload, validate_payload

logger = logging.getLogger(__name__)

_PROMPT_SYSTEM = (
    "You are an internal reporting engine for an academic institution's "
    "Placement Cell. You analyze student placement feedback and extract "
    "structured insights. You never mention AI, automation, or artificial "
    "intelligence. You write in formal, institutional language suitable for "
    "faculty review. You maintain strict objectivity and present findings in "
    "a professional academic tone. Respond ONLY with a JSON object."
)

_OUTPUT_FORMAT = """{
  "overallSentiment": "string",
  "interviewProcess": {
    "commonRounds": ["round1", "round2"],
    "difficultyTrends": {
      "roundType": "difficulty level"
    },
    "modeDistribution": {
      "online": number,
      "offline": number
    }
  },
  "positiveAspects": ["aspect1", "aspect2", ...],
  "challenges": ["challenge1", "challenge2", ...],
  "preparationInsights": ["insight1", "insight2", ...]
}"""

FALLBACK_ROUNDS = ["Multiple rounds conducted"]
FALLBACK_POSITIVE = ["Students provided constructive feedback on the process"]
FALLBACK_CHALLENGES = ["Varied experiences reported across candidates"]
FALLBACK_PREPARATION = [
    "Thorough preparation recommended for technical assessments",
    "Review of fundamental concepts advised",
    "Practice coding and problem-solving exercises",
]


def _build_user_prompt(sanitized: List[Dict[str, Any]], company_name: str) -> str:
    feedback_block = json.dumps(sanitized, indent=2, ensure_ascii=False)
    return (
        f"Analyze the following placement interview feedback data for {company_name} "
        "and extract structured insights.\n\n"
        f"FEEDBACK DATA:\n{feedback_block}\n\n"
        "ANALYSIS REQUIREMENTS:\n\n"
        "1. Overall Sentiment: Determine the overall student experience sentiment "
        '(use one of: "predominantly positive", "moderately positive", "mixed", '
        '"challenging")\n\n'
        "2. Interview Process Analysis:\n"
        "   - Identify common interview round types (e.g., Aptitude, Coding, "
        "Technical, HR, Group Discussion)\n"
        "   - Determine difficulty trends for each round type (Easy, Moderate, "
        'Difficult, or ranges like "Easy to Moderate")\n'
        "   - Count online vs offline interview modes\n\n"
        "3. Positive Aspects: Extract 3-5 recurring positive observations from "
        "student experiences\n\n"
        "4. Challenges: Identify 3-5 common difficulties or challenges students faced\n\n"
        "5. Preparation Insights: Derive 4-6 actionable preparation recommendations "
        "for future candidates based on student experiences and tips\n\n"
        "CRITICAL INSTRUCTIONS:\n"
        "- Be concise and professional\n"
        "- Use institutional academic language\n"
        "- Do NOT mention individual students or quote verbatim\n"
        "- Do NOT mention AI, automation, or artificial intelligence\n"
        "- Focus on PATTERNS across multiple feedback entries\n"
        "- Ignore outliers (mentioned by only 1 student)\n"
        "- Extract insights that appear in at least 2 feedback entries\n\n"
        f"OUTPUT FORMAT (JSON):\n{_OUTPUT_FORMAT}"
    )


def _to_analysis(
    payload: AnalysisPayload, company_name: str, total: int
) -> Analysis:
    process = payload.interview_process
    modes = process.mode_distribution
    return Analysis(
        company_name=company_name,
        total_feedback_count=total,
        overall_sentiment=payload.overall_sentiment.strip(),
        interview_process=InterviewProcess(
            rounds=[RoundFrequency(name) for name in process.common_rounds if name.strip()],
            difficulty_trends=dict(process.difficulty_trends),
            mode_trends=ModeCounts(online=modes.online, offline=modes.offline),
        ),
        positive_aspects=[s for s in payload.positive_aspects if s.strip()],
        challenges=[s for s in payload.challenges if s.strip()],
        preparation_insights=[s for s in payload.preparation_insights if s.strip()],
        ai_generated=True,
    )


def fallback_analysis(entries: Sequence[FeedbackEntry], company_name: str) -> Analysis:
    """Statistical stand-in used when the model cannot be reached.

    Unrated entries count as zero in the average.
    """

    average = sum(e.rating or 0 for e in entries) / len(entries)
    return Analysis(
        company_name=company_name,
        total_feedback_count=len(entries),
        overall_sentiment=sentiment_for(average),
        interview_process=InterviewProcess(
            rounds=[RoundFrequency(name) for name in FALLBACK_ROUNDS],
        ),
        positive_aspects=list(FALLBACK_POSITIVE),
        challenges=list(FALLBACK_CHALLENGES),
        preparation_insights=list(FALLBACK_PREPARATION),
        ai_generated=False,
    )


async def _request_analysis(messages: List[Dict[str, str]]) -> AnalysisPayload:
    resp = await chat_completion(
        messages,
        temperature=config.ANALYSIS_TEMPERATURE,
        response_format={"type": "json_object"},
    )
    payload = parse_json_object(completion_text(resp))
    return validate_payload(AnalysisPayload, payload)


async def analyze(entries: Sequence[FeedbackEntry], company_name: str) -> Analysis:
    """Analyze *entries* with the language model, falling back on failure.

    Empty input short-circuits to :meth:`Analysis.empty` without a model call.
    """

    if not entries:
        return Analysis.empty(company_name)

    messages = [
        {"role": "system", "content": _PROMPT_SYSTEM},
        {"role": "user", "content": _build_user_prompt(sanitize_entries(entries), company_name)},
    ]

    attempts = 0
    while attempts < config.LLM_MAX_ATTEMPTS:
        attempts += 1
        try:
            payload = await _request_analysis(messages)
            return _to_analysis(payload, company_name, len(entries))
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "Feedback analysis attempt %d for %s failed: %s",
                attempts,
                company_name,
                exc,
                exc_info=True,
            )

    logger.warning("Falling back to statistical analysis for %s", company_name)
    return fallback_analysis(entries, company_name)
