"""
Error taxonomy for the cocktail recommendation pipeline.

Recipe generation errors are fatal for a request and are mapped to HTTP
responses by the routes layer. ImageStrategyFailed never leaves the image
service: the fallback loop catches it and moves on to the next strategy.
"""

from typing import Any, Dict, Optional


class RecommendationError(Exception):
    """
    Base exception for recommendation pipeline errors.

    Attributes:
        message: Human-readable error description
        details: Additional context (e.g., upstream status code)
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidUpstreamFormat(RecommendationError):
    """The language model response was not JSON or did not match the recipe schema."""


class InvalidCredentials(RecommendationError):
    """The upstream provider rejected the API key."""


class GenerationFailed(RecommendationError):
    """Any other recipe generation failure (network, rate limit, server error)."""


class ImageStrategyFailed(RecommendationError):
    """A single image strategy could not produce a usable image."""

    def __init__(self, strategy: str, message: str):
        self.strategy = strategy
        super().__init__(f"{strategy}: {message}", {"strategy": strategy})
