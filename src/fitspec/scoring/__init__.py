"""Fitness assessment scoring engine."""

from .aggregator import summarize
from .chart import project, region_labels
from .engine import Assessment, Rejection, assess, parse_request
from .evaluation import EvaluationReport, ExerciseEvaluation, build_report, evaluate_result
from .issues import collect_issues
from .scorer import ScoreAssignment, assign, assign_ordinal
from .standards import calculate_thresholds, level_standards

__all__ = [
    "Assessment",
    "EvaluationReport",
    "ExerciseEvaluation",
    "Rejection",
    "ScoreAssignment",
    "assess",
    "assign",
    "assign_ordinal",
    "build_report",
    "calculate_thresholds",
    "collect_issues",
    "evaluate_result",
    "level_standards",
    "parse_request",
    "project",
    "region_labels",
    "summarize",
]
