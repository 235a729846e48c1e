"""Unit tests for the templated report generator."""
from __future__ import annotations

from datetime import date

import pytest

from summarizer.analysis.models import (
    Analysis,
    InterviewProcess,
    ModeCounts,
    RoundFrequency,
)
from summarizer.reporting import generator


def _analysis(**overrides) -> Analysis:
    values = dict(
        company_name="TechCorp",
        total_feedback_count=3,
        overall_sentiment="moderately positive",
        interview_process=InterviewProcess(
            rounds=[
                RoundFrequency("Coding", 3),
                RoundFrequency("Aptitude", 2),
                RoundFrequency("HR", 1),
            ],
            difficulty_trends={"Coding": "Moderate to Difficult", "HR": "Easy to Moderate"},
            mode_trends=ModeCounts(online=3, offline=1),
        ),
        positive_aspects=["well-organized interview process"],
        challenges=["complexity of technical questions"],
        preparation_insights=["Strong foundation in data structures and algorithms"],
    )
    values.update(overrides)
    return Analysis(**values)


def test_no_data_report_is_fixed_boilerplate():
    report = generator.generate_report(Analysis.empty("TechCorp"))
    sections = report.sections.to_dict()

    assert report.title == "Placement Drive Feedback Summary Report – TechCorp"
    assert report.ai_generated is False
    assert sections == {
        "overview": generator.NO_DATA_OVERVIEW,
        "interviewProcessInsights": "Data not available.",
        "positiveObservations": [],
        "challengesAndImprovements": [],
        "preparationInsights": [],
        "conclusion": generator.NO_DATA_CONCLUSION,
    }
    # deterministic across calls
    again = generator.generate_report(Analysis.empty("TechCorp"))
    assert again.sections.to_dict() == sections


def test_overview_text():
    overview = generator.generate_report(_analysis()).sections.overview
    assert overview == (
        "This report summarizes student experiences from 3 feedback entries submitted "
        "following the TechCorp campus placement drive. The overall student experience "
        "was moderately positive. The recruitment process typically consisting of "
        "Coding, Aptitude, and HR rounds, conducted in a hybrid format (75% online, "
        "25% offline). Students reported diverse experiences across technical "
        "assessments, problem-solving exercises, and behavioral evaluations."
    )


@pytest.mark.parametrize(
    "rounds, expected",
    [
        ([RoundFrequency("HR", 1)], "typically consisting of HR,"),
        (
            [RoundFrequency("HR", 1), RoundFrequency("Coding", 1)],
            "typically consisting of HR and Coding rounds,",
        ),
        ([], "with varying interview structures,"),
    ],
)
def test_overview_round_grammar(rounds, expected):
    analysis = _analysis(interview_process=InterviewProcess(rounds=rounds))
    assert expected in generator.overview(analysis)


@pytest.mark.parametrize(
    "modes, expected",
    [
        (ModeCounts(0, 0), "conducted in various modes."),
        (ModeCounts(4, 0), "conducted primarily online."),
        (ModeCounts(0, 2), "conducted primarily offline."),
        (ModeCounts(1, 7), "hybrid format (13% online, 87% offline)"),
        (ModeCounts(1, 2), "hybrid format (33% online, 67% offline)"),
    ],
)
def test_overview_mode_summary(modes, expected):
    analysis = _analysis(interview_process=InterviewProcess(mode_trends=modes))
    assert expected in generator.overview(analysis)


def test_single_entry_grammar():
    analysis = _analysis(total_feedback_count=1)
    sections = generator.generate_report(analysis).sections
    assert "from 1 feedback entry submitted" in sections.overview
    assert sections.conclusion.startswith(
        "The feedback collected from 1 student indicates a moderately positive experience"
    )


def test_interview_process_insights_sections():
    insights = generator.generate_report(_analysis()).sections.interview_process_insights
    assert insights == (
        "The recruitment process commonly included the following rounds: Coding "
        "(3 instances), Aptitude (2 instances), HR (1 instance). \n\n"
        "Difficulty Assessment: Coding rounds were reported as Moderate to Difficult. "
        "HR rounds were reported as Easy to Moderate.\n\n"
        "Interview Mode: 3 rounds conducted online and 1 rounds conducted offline."
    )


def test_interview_process_insights_fallback():
    analysis = _analysis(interview_process=InterviewProcess())
    assert (
        generator.interview_process_insights(analysis.interview_process)
        == "Interview process details vary across feedback entries."
    )


def test_lists_are_capitalized():
    sections = generator.generate_report(_analysis()).sections
    assert sections.positive_observations == ["Well-organized interview process"]
    assert sections.challenges_and_improvements == ["Complexity of technical questions"]


def test_list_fallback_sentences():
    analysis = _analysis(positive_aspects=[], challenges=[])
    sections = generator.generate_report(analysis).sections
    assert sections.positive_observations == [
        "Students provided constructive feedback on the overall process."
    ]
    assert sections.challenges_and_improvements == [
        "No significant systemic challenges were reported."
    ]


def test_preparation_insights_add_round_specific_guidance():
    insights = generator.generate_report(_analysis()).sections.preparation_insights
    assert insights == [
        "Strong foundation in data structures and algorithms",
        generator.CODING_INSIGHT,
        generator.APTITUDE_INSIGHT,
    ]


def test_preparation_insights_generic_when_nothing_known():
    analysis = _analysis(
        preparation_insights=[],
        interview_process=InterviewProcess(rounds=[RoundFrequency("HR", 2)]),
    )
    assert generator.preparation_insights(analysis) == list(generator.GENERIC_INSIGHTS)


def test_report_date_format():
    assert generator.report_date(date(2026, 10, 9)) == "9 October 2026"


def test_unmeasured_round_counts_are_not_stated():
    process = InterviewProcess(rounds=[RoundFrequency("Coding"), RoundFrequency("HR")])
    insights = generator.interview_process_insights(process)
    assert insights.startswith(
        "The recruitment process commonly included the following rounds: Coding, HR."
    )
    assert "instance" not in insights
