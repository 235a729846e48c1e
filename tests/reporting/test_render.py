"""Unit tests for plain-text report rendering."""
from __future__ import annotations

import re

import pytest

from summarizer.analysis.models import Analysis, Report, ReportSections
from summarizer.reporting import generator
from summarizer.reporting.render import SECTION_LAYOUT, render_plain_text

_HEADER_RE = re.compile(r"^(\d+)\. (.+)$", re.MULTILINE)


def section_keys(text: str) -> list[str]:
    by_title = {s.title: s.key for s in SECTION_LAYOUT}
    return [by_title[t] for _, t in _HEADER_RE.findall(text) if t in by_title]


def _sample_report() -> Report:
    return Report(
        title="Placement Drive Feedback Summary Report – TechCorp",
        generated_date="19 October 2026",
        sections=ReportSections(
            overview="Overview text.",
            interview_process_insights="Rounds text.\n\nDifficulty text.",
            positive_observations=["Good", "Fair"],
            challenges_and_improvements=["Hard DSA"],
            preparation_insights=["Practice", "Revise", "Mock"],
            conclusion="Closing text.",
        ),
    )


@pytest.fixture()
def report() -> Report:
    return _sample_report()


def test_render_exact_layout(report: Report):
    title = report.title
    expected = (
        f"{title}\n"
        "Generated: 19 October 2026\n"
        f"{'=' * len(title)}\n\n"
        "1. Overview\n"
        "Overview text.\n\n"
        "2. Interview Process Insights\n"
        "Rounds text.\n\nDifficulty text.\n\n"
        "3. Positive Observations\n"
        "• Good\n"
        "• Fair\n"
        "\n"
        "4. Challenges and Areas for Improvement\n"
        "• Hard DSA\n"
        "\n"
        "5. Preparation Insights for Future Candidates\n"
        "• Practice\n"
        "• Revise\n"
        "• Mock\n"
        "\n"
        "6. Conclusion\n"
        "Closing text.\n"
    )
    assert render_plain_text(report) == expected


def test_render_empty_lists_keep_blank_separator():
    text = render_plain_text(generator.generate_report(Analysis.empty("TechCorp")))
    assert "3. Positive Observations\n\n4. Challenges and Areas for Improvement\n" in text
    assert "5. Preparation Insights for Future Candidates\n\n6. Conclusion\n" in text
    assert text.endswith(generator.NO_DATA_CONCLUSION + "\n")


def test_no_html_escaping():
    report = _sample_report()
    report.sections.overview = "Students' <b>feedback</b> & tips"
    assert "Students' <b>feedback</b> & tips" in render_plain_text(report)


@pytest.mark.parametrize(
    "report",
    [
        _sample_report(),
        generator.generate_report(Analysis.empty("Acme")),
    ],
)
def test_section_headers_round_trip(report: Report):
    keys = section_keys(render_plain_text(report))
    assert keys == list(report.sections.to_dict())
    assert keys == [s.key for s in SECTION_LAYOUT]


def test_generated_date_line():
    report = generator.generate_report(Analysis.empty("Acme"))
    lines = render_plain_text(report).splitlines()
    assert lines[1] == f"Generated: {report.generated_date}"
    assert report.generated_date
