"""Data access layer for fitspec."""

import json
import logging
from datetime import datetime
from pathlib import Path

import aiosqlite

from ..models.history import SavedAssessment
from .engine import get_db_path

logger = logging.getLogger(__name__)


class AssessmentRepository:
    """Repository for saved assessments."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def save(self, saved: SavedAssessment) -> int:
        """Store an assessment and return its id."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO assessments (member_id, measured_at, exercise_types, report)
                VALUES (?, ?, ?, ?)
                """,
                (
                    saved.member_id,
                    saved.measured_at.isoformat(),
                    json.dumps(saved.exercise_types),
                    json.dumps(saved.report, ensure_ascii=False),
                ),
            )
            await db.commit()
            saved.id = cursor.lastrowid
            logger.debug("Saved assessment %s for member %s", saved.id, saved.member_id)
            return cursor.lastrowid

    async def get(self, assessment_id: int) -> SavedAssessment | None:
        """Get an assessment by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM assessments WHERE id = ?", (assessment_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_assessment(row)

    async def list_by_member(self, member_id: str) -> list[SavedAssessment]:
        """All assessments of one member, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM assessments WHERE member_id = ?
                ORDER BY measured_at DESC, id DESC
                """,
                (member_id,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_assessment(row) for row in rows]

    async def list_all(self) -> list[SavedAssessment]:
        """All assessments, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM assessments ORDER BY measured_at DESC, id DESC"
            )
            rows = await cursor.fetchall()
            return [self._row_to_assessment(row) for row in rows]

    async def delete(self, assessment_id: int) -> bool:
        """Delete one assessment. Returns False if it didn't exist."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "DELETE FROM assessments WHERE id = ?", (assessment_id,)
            )
            await db.commit()
            return cursor.rowcount > 0

    async def delete_by_member(self, member_id: str) -> int:
        """Delete a member's whole history and return the number removed."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "DELETE FROM assessments WHERE member_id = ?", (member_id,)
            )
            await db.commit()
            return cursor.rowcount

    async def clear(self) -> int:
        """Delete every stored assessment."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("DELETE FROM assessments")
            await db.commit()
            return cursor.rowcount

    def _row_to_assessment(self, row: aiosqlite.Row) -> SavedAssessment:
        return SavedAssessment(
            id=row["id"],
            member_id=row["member_id"],
            measured_at=datetime.fromisoformat(row["measured_at"]),
            exercise_types=json.loads(row["exercise_types"] or "[]"),
            report=json.loads(row["report"]),
        )
