"""Shapes the language model must return for each pipeline stage.

A completion that parses as JSON but does not match these models is treated
exactly like a failed call.
"""
from __future__ import annotations

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class ModeDistributionPayload(BaseModel):
    online: int = Field(default=0, ge=0)
    offline: int = Field(default=0, ge=0)


class InterviewProcessPayload(BaseModel):
    common_rounds: List[str] = Field(default_factory=list, alias="commonRounds")
    difficulty_trends: Dict[str, str] = Field(default_factory=dict, alias="difficultyTrends")
    mode_distribution: ModeDistributionPayload = Field(
        default_factory=ModeDistributionPayload, alias="modeDistribution"
    )

    model_config = ConfigDict(populate_by_name=True)


class AnalysisPayload(BaseModel):
    """Analysis stage output."""

    overall_sentiment: Literal[
        "predominantly positive", "moderately positive", "mixed", "challenging"
    ] = Field(alias="overallSentiment")
    interview_process: InterviewProcessPayload = Field(alias="interviewProcess")
    positive_aspects: List[str] = Field(alias="positiveAspects")
    challenges: List[str]
    preparation_insights: List[str] = Field(alias="preparationInsights")

    model_config = ConfigDict(populate_by_name=True)


class ReportPayload(BaseModel):
    """Report prose stage output."""

    overview: str = Field(min_length=1)
    interview_process_insights: str = Field(alias="interviewProcessInsights", min_length=1)
    positive_observations: List[str] = Field(alias="positiveObservations")
    challenges_and_improvements: List[str] = Field(alias="challengesAndImprovements")
    preparation_insights: List[str] = Field(alias="preparationInsights")
    conclusion: str = Field(min_length=1)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("overview", "interview_process_insights", "conclusion")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("section text must not be blank")
        return value.strip()


def validate_payload(model: type[BaseModel], payload: Dict[str, Any]) -> Any:
    """Validate *payload* against *model*, raising ``ValueError`` on mismatch."""
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise ValueError(f"Model response failed schema validation: {exc}") from exc
