# db.py
from typing import List, Dict, Optional, Any
from datetime import datetime, timezone

from bson import ObjectId
from pymongo import MongoClient, DESCENDING, errors

from .config import (
    MONGO_URI,
    DB_NAME,
    STUDENT_COLLECTION,
    INTERNSHIP_COLLECTION,
    RANKING_COLLECTION,
    LOG_COLLECTION,
    ACTIVE_INTERNSHIP_FETCH_LIMIT,
    STUDENT_FETCH_LIMIT,
)


def _id_filter(doc_id: str) -> Dict[str, Any]:
    return {"_id": ObjectId(doc_id) if ObjectId.is_valid(doc_id) else doc_id}


class MongoDBManager:
    def __init__(self, client: Optional[MongoClient] = None) -> None:
        try:
            self.client = client if client is not None else MongoClient(MONGO_URI)
            self.db = self.client[DB_NAME]

            self.students = self.db[STUDENT_COLLECTION]
            self.internships = self.db[INTERNSHIP_COLLECTION]
            self.rankings = self.db[RANKING_COLLECTION]
            self.logs = self.db[LOG_COLLECTION]

        except errors.PyMongoError as exc:
            raise RuntimeError(f"MongoDB connection failed: {exc}") from exc

    # ---------- Student ----------
    def get_student(self, student_id: str) -> Optional[Dict]:
        return self.students.find_one(_id_filter(student_id), {"password": 0})

    def get_complete_students(self, limit: int = STUDENT_FETCH_LIMIT) -> List[Dict]:
        cursor = self.students.find({"profileCompleted": True}, {"password": 0}).limit(limit)
        return list(cursor)

    # ---------- Internship ----------
    def get_internship(self, internship_id: str) -> Optional[Dict]:
        return self.internships.find_one(_id_filter(internship_id))

    def get_active_internships(self, limit: int = ACTIVE_INTERNSHIP_FETCH_LIMIT) -> List[Dict]:
        # newest first, so ranking ties fall back to recency
        cursor = (
            self.internships.find({"status": "active"})
            .sort("createdAt", DESCENDING)
            .limit(limit)
        )
        return list(cursor)

    # ---------- Ranking ----------
    def insert_ranking(self, ranking: Dict) -> None:
        ranking["generated_at"] = datetime.now(timezone.utc)
        self.rankings.insert_one(ranking)

    # ---------- Logs ----------
    def log(
        self,
        level: str,
        module: str,
        message: str,
        kind: Optional[str] = None,
        document_id: Optional[str] = None,
        meta: Optional[Dict] = None,
    ) -> None:
        """Record an event, optionally tied to a stored student or internship."""
        log_entry = {
            "level": level,
            "module": module,
            "message": message,
            "kind": kind,
            "document_id": document_id,
            "meta": meta or {},
            "timestamp": datetime.now(timezone.utc),
        }
        self.logs.insert_one(log_entry)
