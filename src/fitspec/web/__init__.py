"""Web API for fitspec."""

from .app import create_app

__all__ = ["create_app"]
