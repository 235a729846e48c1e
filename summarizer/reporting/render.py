"""Render reports as plain text using Jinja2 templates.

The plain-text layout is the export format consumed by the PDF tooling, so the
section numbering, titles, bullet character and blank lines are fixed.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import NamedTuple

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from summarizer.analysis.models import Report

logger = logging.getLogger(__name__)

_TEMPLATE_DIR = Path(__file__).parent / "templates"

# Plain text must not be HTML-escaped – it breaks apostrophes etc.
_env = Environment(
    loader=FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=StrictUndefined,
)


class Section(NamedTuple):
    key: str
    title: str
    bullets: bool


SECTION_LAYOUT: tuple[Section, ...] = (
    Section("overview", "Overview", False),
    Section("interviewProcessInsights", "Interview Process Insights", False),
    Section("positiveObservations", "Positive Observations", True),
    Section("challengesAndImprovements", "Challenges and Areas for Improvement", True),
    Section("preparationInsights", "Preparation Insights for Future Candidates", True),
    Section("conclusion", "Conclusion", False),
)


def render_plain_text(report: Report) -> str:
    """Render *report* in the fixed six-section plain-text layout."""

    context = report.to_dict()
    template = _env.get_template("report.txt.j2")
    text = template.render(layout=SECTION_LAYOUT, **context)
    logger.debug("Plain-text report rendered for %r len=%d", report.title, len(text))
    return text
