"""
Service layer for the Mixology backend.

Contains the recommendation pipeline orchestration that:
- Generates and validates recipe text with the chat model (recipe_service)
- Resolves one image per recipe through ordered strategies (image_service)
- Assembles cocktails for the routes layer (recommendation_service)

Services act as the glue between routes (HTTP layer) and the AI providers.
"""

from .errors import (
    GenerationFailed,
    ImageStrategyFailed,
    InvalidCredentials,
    InvalidUpstreamFormat,
    RecommendationError,
)
from .image_service import (
    FALLBACK_STRATEGY,
    ImageStrategy,
    generate_cocktail_image,
    resolve_strategies,
)
from .recipe_service import generate_cocktail_recipes, parse_recipes
from .recommendation_service import (
    RecommendationConfig,
    build_recommendation_config,
    recommend_cocktails,
)

__all__ = [
    "FALLBACK_STRATEGY",
    "GenerationFailed",
    "ImageStrategy",
    "ImageStrategyFailed",
    "InvalidCredentials",
    "InvalidUpstreamFormat",
    "RecommendationConfig",
    "RecommendationError",
    "build_recommendation_config",
    "generate_cocktail_image",
    "generate_cocktail_recipes",
    "parse_recipes",
    "recommend_cocktails",
    "resolve_strategies",
]
