"""
Pytest configuration for Mixology backend tests.

Sets up test environment and global fixtures.
"""
import os
from typing import Any, Callable, Dict, List

import pytest

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")
os.environ["DEBUG_LOGS_ENABLED"] = "false"

from mixology.auth.dependencies import ProviderCredentials  # noqa: E402
from mixology.schemas.cocktails import ImageResult  # noqa: E402
from mixology.services.image_service import ImageStrategy  # noqa: E402


@pytest.fixture
def credentials() -> ProviderCredentials:
    """Request-scoped credentials with both providers configured."""
    return ProviderCredentials(
        api_key="test-openai-key",
        model="gpt-4o",
        gemini_api_key="test-gemini-key",
    )


@pytest.fixture
def mojito_recipe() -> Dict[str, Any]:
    """A single valid recipe as the language model would return it."""
    return {
        "name": "Mojito",
        "ingredients": ["2 oz white rum", "1 oz lime juice", "6 mint leaves", "2 tsp sugar", "Soda water"],
        "instructions": "Muddle mint with sugar and lime, add rum and ice, top with soda.",
        "characteristics": ["Refreshing", "Sweet"],
        "serving_style": "In a highball glass over crushed ice",
        "prep_time": "5 minutes",
        "is_popular": True,
    }


@pytest.fixture
def make_recipe(mojito_recipe) -> Callable[[str], Dict[str, Any]]:
    """Factory for additional valid recipes with a given name."""
    def _make(name: str) -> Dict[str, Any]:
        recipe = dict(mojito_recipe)
        recipe["name"] = name
        return recipe
    return _make


@pytest.fixture
def succeeding_strategy() -> Callable[[str, str], ImageStrategy]:
    """Factory for strategies whose generate always returns the given URL."""
    def _make(name: str, url: str) -> ImageStrategy:
        async def _generate(cocktail_name, ingredients_text, credentials):
            return ImageResult(url=url, strategy=name)
        return ImageStrategy(name=name, generate=_generate)
    return _make


@pytest.fixture
def failing_strategy() -> Callable[[str, List[str]], ImageStrategy]:
    """Factory for strategies that always raise, recording the cocktail names they saw."""
    def _make(name: str, calls: List[str]) -> ImageStrategy:
        async def _generate(cocktail_name, ingredients_text, credentials):
            calls.append(cocktail_name)
            raise RuntimeError(f"{name} is down")
        return ImageStrategy(name=name, generate=_generate)
    return _make
