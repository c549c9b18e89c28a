"""
Recommendation Service - cocktail recommendation fulfillment pipeline

Architecture:
- Step 1: recipe_service generates and validates up to 5 recipes (fatal on error)
- Step 2: image_service runs the strategy fallback chain once per recipe,
  concurrently, bounded by a semaphore and an overall time budget
- Step 3: each recipe is merged with its image into a CocktailResponse

Guarantees:
- Every returned cocktail has a non-empty image_url
- Output order equals the order of recipes returned by the language model
- Image failures (including the time budget running out) never fail the request
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from mixology.auth.dependencies import ProviderCredentials
from mixology.config import Settings, settings
from mixology.schemas.cocktails import (
    CocktailRecommendationRequest,
    CocktailResponse,
    ImageResult,
    RecipeSchema,
)
from mixology.services import image_service, recipe_service
from mixology.services.image_service import FALLBACK_STRATEGY, ImageStrategy

logger = logging.getLogger(__name__)


@dataclass
class RecommendationConfig:
    """Pipeline options, built once from settings and passed explicitly."""
    strategies: List[ImageStrategy] = field(default_factory=list)
    fallback_image_url: str = ""
    concurrency_limit: int = 5
    timeout_seconds: float = 20.0
    image_method_as_characteristic: bool = False


def build_recommendation_config(config: Settings = settings) -> RecommendationConfig:
    """
    Build pipeline options from application settings.

    Raises:
        ValueError: If IMAGE_STRATEGY_ORDER names an unknown strategy
    """
    return RecommendationConfig(
        strategies=image_service.resolve_strategies(config.IMAGE_STRATEGY_ORDER),
        fallback_image_url=config.FALLBACK_IMAGE_URL,
        concurrency_limit=max(1, config.IMAGE_CONCURRENCY_LIMIT),
        timeout_seconds=config.IMAGE_TIMEOUT_SECONDS,
        image_method_as_characteristic=config.IMAGE_METHOD_AS_CHARACTERISTIC,
    )


async def _resolve_images(
    recipes: List[RecipeSchema],
    credentials: ProviderCredentials,
    config: RecommendationConfig,
) -> List[ImageResult]:
    """Run one fallback chain per recipe and return images in recipe order."""
    semaphore = asyncio.Semaphore(config.concurrency_limit)
    fallback = ImageResult(url=config.fallback_image_url, strategy=FALLBACK_STRATEGY)

    async def _resolve(recipe: RecipeSchema) -> ImageResult:
        async with semaphore:
            return await image_service.generate_cocktail_image(
                cocktail_name=recipe.name,
                ingredients_text=", ".join(recipe.ingredients),
                credentials=credentials,
                strategies=config.strategies,
                fallback_url=config.fallback_image_url,
            )

    tasks = [asyncio.create_task(_resolve(recipe)) for recipe in recipes]
    _, pending = await asyncio.wait(tasks, timeout=config.timeout_seconds)

    if pending:
        logger.warning(
            f"Image budget of {config.timeout_seconds}s exhausted, "
            f"{len(pending)} recipe(s) will use the fallback image"
        )
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)

    images = []
    for recipe, task in zip(recipes, tasks):
        if task.cancelled():
            images.append(fallback)
        elif task.exception() is not None:
            logger.error(f"Error generating image for {recipe.name}: {task.exception()}")
            images.append(fallback)
        else:
            images.append(task.result())

    return images


def _assemble_cocktail(
    recipe: RecipeSchema,
    image: ImageResult,
    config: RecommendationConfig,
) -> CocktailResponse:
    characteristics = list(recipe.characteristics)
    if config.image_method_as_characteristic:
        characteristics.append(f"Image: {image.strategy}")

    return CocktailResponse(
        name=recipe.name,
        image_url=image.url,
        ingredients=list(recipe.ingredients),
        instructions=recipe.instructions,
        characteristics=characteristics,
        prep_time=recipe.prep_time,
        serving_style=recipe.serving_style,
        is_popular=recipe.is_popular,
        image_method=image.strategy,
    )


async def recommend_cocktails(
    request: CocktailRecommendationRequest,
    credentials: ProviderCredentials,
    config: Optional[RecommendationConfig] = None,
) -> List[CocktailResponse]:
    """
    Fulfill a cocktail recommendation request.

    This function:
    1. Generates validated recipes (errors here abort the request)
    2. Resolves one image per recipe through the strategy fallback chain
    3. Assembles the cocktails in recipe order

    Args:
        request: User preferences
        credentials: Request-scoped provider credentials
        config: Pipeline options (defaults to build_recommendation_config())

    Returns:
        0-5 CocktailResponse, each with a non-empty image_url

    Raises:
        InvalidUpstreamFormat, InvalidCredentials, GenerationFailed: from Step 1
    """
    if config is None:
        config = build_recommendation_config()

    recipes = await recipe_service.generate_cocktail_recipes(request, credentials)

    if not recipes:
        logger.info("No recipes matched the preferences, returning empty list")
        return []

    images = await _resolve_images(recipes, credentials, config)

    cocktails = [
        _assemble_cocktail(recipe, image, config)
        for recipe, image in zip(recipes, images)
    ]

    logger.info(
        f"Returning {len(cocktails)} cocktail(s), image methods: "
        f"{[cocktail.image_method for cocktail in cocktails]}"
    )
    return cocktails
