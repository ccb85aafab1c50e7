"""Application services for fitspec."""

from .assessment import AssessmentService

__all__ = ["AssessmentService"]
