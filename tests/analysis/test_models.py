"""Unit tests for the analysis data model."""
from __future__ import annotations

from summarizer.analysis.models import (
    Analysis,
    FeedbackEntry,
    InterviewProcess,
    ModeCounts,
    ReportSections,
    Report,
    RoundFrequency,
)


def test_from_document_reads_camel_case_fields():
    entry = FeedbackEntry.from_document(
        {
            "company": "TechCorp",
            "role": "SDE",
            "rounds": [{"type": "Coding", "difficulty": "Hard", "resources": "LeetCode"}],
            "overallExperience": "Good",
            "rating": 4,
            "tipsForJuniors": "Practice",
        }
    )
    assert entry.company == "TechCorp"
    assert entry.rounds[0].type == "Coding"
    assert entry.rounds[0].mode == ""
    assert entry.rating == 4
    assert entry.tips_for_juniors == "Practice"


def test_from_document_tolerates_bad_values():
    entry = FeedbackEntry.from_document({"rounds": None, "rating": True, "role": 12})
    assert entry.rounds == ()
    assert entry.rating is None
    assert entry.role == ""


def test_analysis_wire_form():
    analysis = Analysis(
        company_name="TechCorp",
        total_feedback_count=2,
        overall_sentiment="mixed",
        interview_process=InterviewProcess(
            rounds=[RoundFrequency("Coding", 2)],
            difficulty_trends={"Coding": "Moderate"},
            mode_trends=ModeCounts(online=1, offline=1),
        ),
    )
    data = analysis.to_dict()
    assert data["companyName"] == "TechCorp"
    assert data["interviewProcess"]["rounds"] == [{"type": "Coding", "frequency": 2}]
    assert data["interviewProcess"]["commonRounds"] == ["Coding"]
    assert data["interviewProcess"]["modeDistribution"] == {"online": 1, "offline": 1}
    assert data["aiGenerated"] is False


def test_empty_analysis():
    empty = Analysis.empty("X")
    assert empty.total_feedback_count == 0
    assert empty.interview_process.mode_trends.total == 0


def test_report_wire_form_has_six_sections():
    report = Report(
        title="T",
        generated_date="1 January 2026",
        sections=ReportSections(overview="o", interview_process_insights="i", conclusion="c"),
    )
    data = report.to_dict()
    assert list(data["sections"]) == [
        "overview",
        "interviewProcessInsights",
        "positiveObservations",
        "challengesAndImprovements",
        "preparationInsights",
        "conclusion",
    ]
    assert data["aiGenerated"] is False
