"""Database layer for fitspec."""

from .engine import get_db_path, init_db
from .repositories import AssessmentRepository

__all__ = [
    "AssessmentRepository",
    "get_db_path",
    "init_db",
]
