"""fitspec: fitness assessment scoring for gym members."""

__version__ = "0.1.0"
