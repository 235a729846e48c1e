"""Data structures shared by the analysis and reporting stages.

Feedback entries are read-only inputs. ``Analysis`` and ``Report`` are built
fresh for every request and handed straight to the next stage; nothing here is
persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

__all__ = [
    "Round",
    "FeedbackEntry",
    "RoundFrequency",
    "ModeCounts",
    "InterviewProcess",
    "Analysis",
    "ReportSections",
    "Report",
    "NO_DATA_SENTIMENT",
]

NO_DATA_SENTIMENT = "No feedback data available"


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _rating(value: Any) -> Optional[float]:
    # bool is an int subclass; a stray True must not count as a rating of 1
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


@dataclass(slots=True, frozen=True)
class Round:
    """One stage of a company's interview process."""

    type: str
    difficulty: str = ""
    mode: str = ""
    questions: str = ""
    resources: str = ""

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "Round":
        return cls(
            type=_text(doc.get("type")),
            difficulty=_text(doc.get("difficulty")),
            mode=_text(doc.get("mode")),
            questions=_text(doc.get("questions")),
            resources=_text(doc.get("resources")),
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "type": self.type,
            "difficulty": self.difficulty,
            "mode": self.mode,
            "questions": self.questions,
            "resources": self.resources,
        }


@dataclass(slots=True, frozen=True)
class FeedbackEntry:
    """A single student's account of a placement drive.

    ``rating`` is ``None`` when the student did not rate the drive.
    """

    company: str = ""
    role: str = ""
    rounds: tuple[Round, ...] = ()
    overall_experience: str = ""
    rating: Optional[float] = None
    tips_for_juniors: str = ""

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "FeedbackEntry":
        """Build an entry from a raw store document, tolerating missing fields."""
        raw_rounds = doc.get("rounds") or []
        rounds = tuple(
            Round.from_document(r) for r in raw_rounds if isinstance(r, Mapping)
        )
        return cls(
            company=_text(doc.get("company")),
            role=_text(doc.get("role")),
            rounds=rounds,
            overall_experience=_text(doc.get("overallExperience")),
            rating=_rating(doc.get("rating")),
            tips_for_juniors=_text(doc.get("tipsForJuniors")),
        )


@dataclass(slots=True)
class RoundFrequency:
    type: str
    # None when the count was not measured (model-reported rounds)
    frequency: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "frequency": self.frequency}


@dataclass(slots=True)
class ModeCounts:
    online: int = 0
    offline: int = 0

    @property
    def total(self) -> int:
        return self.online + self.offline

    def to_dict(self) -> Dict[str, int]:
        return {"online": self.online, "offline": self.offline}


@dataclass(slots=True)
class InterviewProcess:
    """Round frequencies (most frequent first), difficulty labels and modes."""

    rounds: List[RoundFrequency] = field(default_factory=list)
    difficulty_trends: Dict[str, str] = field(default_factory=dict)
    mode_trends: ModeCounts = field(default_factory=ModeCounts)

    @property
    def common_rounds(self) -> List[str]:
        return [r.type for r in self.rounds]

    def has_round(self, round_type: str) -> bool:
        return any(r.type == round_type for r in self.rounds)

    def to_dict(self) -> Dict[str, Any]:
        modes = self.mode_trends.to_dict()
        return {
            "rounds": [r.to_dict() for r in self.rounds],
            "commonRounds": self.common_rounds,
            "difficultyTrends": dict(self.difficulty_trends),
            "modeTrends": modes,
            "modeDistribution": dict(modes),
        }


@dataclass(slots=True)
class Analysis:
    """Structured findings for one company, consumed by a report generator."""

    company_name: str
    total_feedback_count: int
    overall_sentiment: str
    interview_process: InterviewProcess = field(default_factory=InterviewProcess)
    positive_aspects: List[str] = field(default_factory=list)
    challenges: List[str] = field(default_factory=list)
    preparation_insights: List[str] = field(default_factory=list)
    ai_generated: bool = False

    @classmethod
    def empty(cls, company_name: str) -> "Analysis":
        return cls(
            company_name=company_name,
            total_feedback_count=0,
            overall_sentiment=NO_DATA_SENTIMENT,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "companyName": self.company_name,
            "totalFeedbackCount": self.total_feedback_count,
            "overallSentiment": self.overall_sentiment,
            "interviewProcess": self.interview_process.to_dict(),
            "positiveAspects": list(self.positive_aspects),
            "challenges": list(self.challenges),
            "preparationInsights": list(self.preparation_insights),
            "aiGenerated": self.ai_generated,
        }


@dataclass(slots=True)
class ReportSections:
    overview: str
    interview_process_insights: str
    positive_observations: List[str] = field(default_factory=list)
    challenges_and_improvements: List[str] = field(default_factory=list)
    preparation_insights: List[str] = field(default_factory=list)
    conclusion: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overview": self.overview,
            "interviewProcessInsights": self.interview_process_insights,
            "positiveObservations": list(self.positive_observations),
            "challengesAndImprovements": list(self.challenges_and_improvements),
            "preparationInsights": list(self.preparation_insights),
            "conclusion": self.conclusion,
        }


@dataclass(slots=True)
class Report:
    """Six-section formal report returned to the caller."""

    title: str
    generated_date: str
    sections: ReportSections
    ai_generated: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "generatedDate": self.generated_date,
            "sections": self.sections.to_dict(),
            "aiGenerated": self.ai_generated,
        }
