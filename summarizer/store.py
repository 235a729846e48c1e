"""MongoDB access to submitted placement feedback.

The summarizer only ever reads this collection. Documents are written by the
placement portal; personal identifiers are excluded by the projection before
anything reaches the analysis stage.
"""
from __future__ import annotations

import logging
import os
import re
from typing import Any, Dict, List, Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from summarizer.analysis.models import FeedbackEntry
from summarizer.exceptions import FeedbackStoreError

logger = logging.getLogger(__name__)

MONGODB_URI: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
DB_NAME: str = os.getenv("DB_NAME", "placement_portal")
FEEDBACK_COLLECTION: str = os.getenv("FEEDBACK_COLLECTION", "feedbacks")

# Fields that must never be loaded into the pipeline
PERSONAL_FIELDS_PROJECTION: Dict[str, int] = {
    "studentName": 0,
    "rollNumber": 0,
    "email": 0,
    "studentId": 0,
    "__v": 0,
}

# Global client (connection pooling handled internally by pymongo)
_client: Optional[MongoClient] = None


def get_mongo_client() -> MongoClient:
    """Get or create the MongoDB client (singleton)."""
    global _client
    if _client is None:
        _client = MongoClient(MONGODB_URI)
    return _client


def get_feedback_collection() -> Collection:
    return get_mongo_client()[DB_NAME][FEEDBACK_COLLECTION]


def company_filter(company_name: str) -> Dict[str, Any]:
    """Case-insensitive exact match on ``company``."""
    return {"company": {"$regex": f"^{re.escape(company_name)}$", "$options": "i"}}


class FeedbackRepository:
    """Read-only queries over the feedback collection."""

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    def get_feedback_by_company(self, company_name: str) -> List[FeedbackEntry]:
        try:
            docs = list(
                self._collection.find(company_filter(company_name), PERSONAL_FIELDS_PROJECTION)
            )
        except PyMongoError as exc:
            logger.error("Error fetching feedback for company %s: %s", company_name, exc)
            raise FeedbackStoreError(
                f"Error fetching feedback for company {company_name}"
            ) from exc
        return [FeedbackEntry.from_document(doc) for doc in docs]

    def get_all_companies(self) -> List[str]:
        """Distinct company names, alphabetically sorted."""
        try:
            companies = self._collection.distinct("company")
        except PyMongoError as exc:
            logger.error("Error fetching company list: %s", exc)
            raise FeedbackStoreError("Error fetching company list") from exc
        return sorted(c for c in companies if isinstance(c, str) and c)

    def get_feedback_count(self, company_name: str) -> int:
        try:
            return self._collection.count_documents(company_filter(company_name))
        except PyMongoError as exc:
            logger.error("Error counting feedback for %s: %s", company_name, exc)
            raise FeedbackStoreError("Error counting feedback") from exc
