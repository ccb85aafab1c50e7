"""CLI commands for fitspec."""

from .assess import assess
from .categories import categories, standards
from .history import history
from .init import init
from .serve import serve

__all__ = [
    "assess",
    "categories",
    "history",
    "init",
    "serve",
    "standards",
]
