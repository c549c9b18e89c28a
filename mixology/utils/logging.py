"""
Logging utilities for the Mixology backend.

Provides standardized logger configuration.

SECURITY RULES:
- NEVER log OpenAI or Gemini API keys (they arrive in request headers)
- NEVER log generated image bytes or full data URLs
- Log prompts truncated, not in full

Acceptable logging:
- High-level pipeline events (e.g., "Gemini strategy succeeded for 'Mojito'")
- Strategy failures with the error message
- Counts and model names
"""

import logging
from typing import Optional


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to INFO)

    Returns:
        Configured logger instance

    Usage:
        >>> from mixology.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("High-level event occurred")
    """
    logger = logging.getLogger(name)

    if level is None:
        level = logging.INFO

    logger.setLevel(level)

    # Add handler if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
