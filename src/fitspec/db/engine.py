"""Database engine setup and initialization."""

import logging
from pathlib import Path

import aiosqlite

from ..config import get_data_dir

logger = logging.getLogger(__name__)


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / "fitspec.db"


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # Scored assessments, one row per submitted batch
        await db.execute("""
            CREATE TABLE IF NOT EXISTS assessments (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                member_id TEXT NOT NULL,
                measured_at TIMESTAMP NOT NULL,
                exercise_types TEXT DEFAULT '[]',
                report TEXT NOT NULL
            )
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_assessments_member
            ON assessments (member_id, measured_at)
        """)
        await db.commit()

    logger.debug("Database ready at %s", db_path)
