"""Internship Matcher package."""

__all__ = [
    "main",
    "config",
    "models",
    "normalizer",
    "scorer",
    "aggregator",
    "ranker",
    "insights",
    "documents",
    "db",
]
