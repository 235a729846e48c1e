"""Tests for sanitize_entries / scrub."""
from __future__ import annotations

from summarizer.analysis.anonymize import sanitize_entries, scrub
from summarizer.analysis.models import FeedbackEntry, Round


def test_scrub_email_and_roll_number():
    text = "Mail priya.k@college.edu or call 9876543210, roll 21CS104567."
    assert scrub(text) == "Mail [email] or call [id], roll [id]."


def test_scrub_keeps_ordinary_text():
    text = "Round 2 had 3 problems in 90 minutes on LeetCode."
    assert scrub(text) == text


def test_sanitize_assigns_synthetic_ids_and_defaults():
    doc = {
        "company": "TechCorp",
        "studentName": "Priya",
        "rollNumber": "21CS104567",
        "email": "priya.k@college.edu",
        "rounds": [{"type": "HR", "mode": "Offline"}],
        "overallExperience": "Smooth",
    }
    entries = [FeedbackEntry.from_document(doc), FeedbackEntry(role="Analyst", rating=5)]

    result = sanitize_entries(entries)

    assert [r["feedbackId"] for r in result] == ["F1", "F2"]
    assert result[0]["role"] == "Not specified"
    assert result[0]["rating"] == 0
    assert result[0]["rounds"][0]["type"] == "HR"
    assert result[1]["rating"] == 5
    assert set(result[0]) == {
        "feedbackId",
        "role",
        "rounds",
        "overallExperience",
        "rating",
        "tipsForJuniors",
    }
    flattened = repr(result)
    assert "Priya" not in flattened
    assert "priya.k@college.edu" not in flattened


def test_sanitize_empty():
    assert sanitize_entries([]) == []
