"""Tests for the MongoDB feedback repository (collection mocked)."""
from __future__ import annotations

import re
from unittest.mock import MagicMock

import pytest
from pymongo.errors import PyMongoError

from summarizer.exceptions import FeedbackStoreError
from summarizer.store import (
    PERSONAL_FIELDS_PROJECTION,
    FeedbackRepository,
    company_filter,
)


@pytest.fixture()
def collection() -> MagicMock:
    return MagicMock()


def test_company_filter_is_anchored_and_escaped():
    query = company_filter("A+B (India)")
    pattern = query["company"]["$regex"]
    assert query["company"]["$options"] == "i"
    assert re.fullmatch(pattern, "a+b (india)", re.IGNORECASE)
    assert not re.fullmatch(pattern, "A+B (India) Ltd", re.IGNORECASE)
    assert not re.fullmatch(pattern, "AAB (India)", re.IGNORECASE)


def test_get_feedback_by_company_excludes_personal_fields(collection):
    collection.find.return_value = [
        {"company": "TechCorp", "rating": 5, "rounds": [{"type": "HR"}]},
    ]
    repo = FeedbackRepository(collection)

    entries = repo.get_feedback_by_company("techcorp")

    args, _ = collection.find.call_args
    assert args[0] == company_filter("techcorp")
    assert args[1] == PERSONAL_FIELDS_PROJECTION
    assert set(PERSONAL_FIELDS_PROJECTION) >= {"studentName", "rollNumber", "email"}
    assert len(entries) == 1
    assert entries[0].rating == 5
    assert entries[0].rounds[0].type == "HR"


def test_get_all_companies_sorted(collection):
    collection.distinct.return_value = ["Zeta", "Acme", None, "Mu"]
    assert FeedbackRepository(collection).get_all_companies() == ["Acme", "Mu", "Zeta"]
    collection.distinct.assert_called_once_with("company")


def test_get_feedback_count(collection):
    collection.count_documents.return_value = 7
    assert FeedbackRepository(collection).get_feedback_count("Acme") == 7
    collection.count_documents.assert_called_once_with(company_filter("Acme"))


@pytest.mark.parametrize(
    "method, attr, args",
    [
        ("get_feedback_by_company", "find", ("Acme",)),
        ("get_all_companies", "distinct", ()),
        ("get_feedback_count", "count_documents", ("Acme",)),
    ],
)
def test_store_errors_are_wrapped(collection, method, attr, args):
    getattr(collection, attr).side_effect = PyMongoError("connection refused")
    repo = FeedbackRepository(collection)
    with pytest.raises(FeedbackStoreError) as exc_info:
        getattr(repo, method)(*args)
    assert "connection refused" not in str(exc_info.value)
