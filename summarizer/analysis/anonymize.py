"""Strip personal identifiers from feedback before it is sent to the model."""
from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Sequence

from summarizer.analysis.models import FeedbackEntry, Round

# Module logger
logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"[\w.+-]+@[\w-]+(?:\.[\w-]+)+")
# Roll numbers, phone numbers and similar long digit runs
_DIGITS_RE = re.compile(r"\b(?:[A-Za-z]*\d){6,}[A-Za-z\d]*\b")


def scrub(text: str) -> str:
    """Replace e-mail addresses and long identifiers in *text* with placeholders."""
    if not text:
        return ""
    text = _EMAIL_RE.sub("[email]", text)
    return _DIGITS_RE.sub("[id]", text)


def _round_payload(rnd: Round) -> Dict[str, str]:
    return {key: scrub(value) for key, value in rnd.to_dict().items()}


def sanitize_entries(entries: Sequence[FeedbackEntry]) -> List[Dict[str, Any]]:
    """Return model-ready dicts for *entries* keyed by synthetic ids ``F1..Fn``.

    Only whitelisted fields are copied, so student name, roll number and
    e-mail never leave the service even if the store returned them.
    """

    sanitized: List[Dict[str, Any]] = []
    for index, entry in enumerate(entries, start=1):
        sanitized.append(
            {
                "feedbackId": f"F{index}",
                "role": scrub(entry.role) or "Not specified",
                "rounds": [_round_payload(r) for r in entry.rounds],
                "overallExperience": scrub(entry.overall_experience),
                "rating": entry.rating if entry.rating is not None else 0,
                "tipsForJuniors": scrub(entry.tips_for_juniors),
            }
        )
    logger.debug("Sanitized %d feedback entries for model input", len(sanitized))
    return sanitized
