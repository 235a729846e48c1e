"""Report orchestration: fetch feedback, analyze, generate.

``ReportService`` chooses between the model-backed and rule-based stages for
each request. Each request builds its own analysis and report; the service
holds no per-request state.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime as _dt
from datetime import timezone as _tz
from typing import Any, Callable, Dict, List, Optional

from summarizer import llm_client
from summarizer.analysis import ai_analyzer, analyzer
from summarizer.analysis.models import Report
from summarizer.exceptions import (
    FeedbackStoreError,
    InvalidCompanyNameError,
    ReportGenerationError,
)
from summarizer.reporting import ai_generator, generator
from summarizer.reporting.render import render_plain_text
from summarizer.store import FeedbackRepository

logger = logging.getLogger(__name__)

__all__ = ["ReportResult", "ReportService", "normalize_company_name"]


def normalize_company_name(company_name: Any) -> str:
    """Return the trimmed name or raise :class:`InvalidCompanyNameError`."""
    if not isinstance(company_name, str) or not company_name.strip():
        raise InvalidCompanyNameError()
    return company_name.strip()


@dataclass(slots=True)
class ReportResult:
    report: Report
    feedback_count: int
    generated_at: str
    ai_powered: bool

    @property
    def metadata(self) -> Dict[str, Any]:
        return {
            "feedbackCount": self.feedback_count,
            "generatedAt": self.generated_at,
            "aiPowered": self.ai_powered,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {"success": True, "data": self.report.to_dict(), "metadata": self.metadata}


class ReportService:
    """Generate placement feedback reports for one company at a time.

    Args:
        repository: Source of feedback entries.
        ai_available: Callable telling whether a model credential is
            configured; defaults to :func:`summarizer.llm_client.is_configured`.
    """

    def __init__(
        self,
        repository: FeedbackRepository,
        *,
        ai_available: Optional[Callable[[], bool]] = None,
    ) -> None:
        self._repository = repository
        self._ai_available = ai_available or llm_client.is_configured

    async def generate(self, company_name: Any, *, use_ai: bool = True) -> ReportResult:
        """Build the report for *company_name*.

        Raises
        ------
        InvalidCompanyNameError
            Before any store access, if the name is blank or not a string.
        ReportGenerationError
            For any other failure; the cause is logged, not returned.
        """

        name = normalize_company_name(company_name)

        try:
            entries = await asyncio.to_thread(self._repository.get_feedback_by_company, name)

            ai_path = bool(use_ai) and self._ai_available()
            if use_ai and not ai_path:
                logger.info("No model credential configured; using rule-based path for %s", name)

            if ai_path:
                analysis = await ai_analyzer.analyze(entries, name)
                report = await ai_generator.generate_report(analysis)
            else:
                analysis = analyzer.analyze(entries, name)
                report = generator.generate_report(analysis)
        except FeedbackStoreError as exc:
            logger.error("Feedback store unavailable while generating report for %s: %s", name, exc)
            raise ReportGenerationError() from exc
        except Exception as exc:
            logger.exception("Error generating report for %s", name)
            raise ReportGenerationError() from exc

        result = ReportResult(
            report=report,
            feedback_count=len(entries),
            generated_at=_dt.now(tz=_tz.utc).isoformat(),
            ai_powered=ai_path and report.ai_generated,
        )
        logger.info(
            "Report generated for %s: feedback=%d ai_powered=%s",
            name,
            result.feedback_count,
            result.ai_powered,
        )
        return result

    @staticmethod
    def render_text(result: ReportResult) -> str:
        return render_plain_text(result.report)

    async def list_companies(self) -> List[str]:
        return await asyncio.to_thread(self._repository.get_all_companies)

    async def get_feedback_count(self, company_name: Any) -> int:
        name = normalize_company_name(company_name)
        return await asyncio.to_thread(self._repository.get_feedback_count, name)
