"""
Recipe Service - OpenAI JSON-mode recipe generation

Step 1 of the recommendation pipeline: turn user preferences into up to five
validated cocktail recipes (no images yet).

Architecture:
- Pattern: single LLM call, JSON object mode
- Model: per-request (header) or OPENAI_MODEL, default gpt-4o
- Temperature: 0.7 (variety across suggestions)
- Output: {"cocktails": [...]} validated with Pydantic

Failure policy (all fatal for the request):
- Response is not JSON or fails schema validation -> InvalidUpstreamFormat
- Upstream rejected the API key -> InvalidCredentials
- Anything else -> GenerationFailed
"""

import json
import logging
import re
from typing import List

from openai import APIStatusError, AuthenticationError
from pydantic import ValidationError

from mixology.agents.cocktail.prompts import (
    COCKTAIL_SYSTEM_PROMPT,
    MAX_RECIPES,
    build_cocktail_user_prompt,
)
from mixology.auth.dependencies import ProviderCredentials
from mixology.schemas.cocktails import (
    CocktailRecommendationRequest,
    RecipeListSchema,
    RecipeSchema,
)
from mixology.services import llm_client
from mixology.services.errors import (
    GenerationFailed,
    InvalidCredentials,
    InvalidUpstreamFormat,
)

logger = logging.getLogger(__name__)


def _extract_json_payload(content: str) -> str:
    """
    Clean common LLM formatting noise around a JSON object.

    JSON mode normally returns a bare object, but some models (and proxies)
    still wrap it in markdown fences or leave trailing commas.
    """
    json_content = content.strip()

    json_block_match = re.search(r'```(?:json)?\s*([\s\S]*?)```', json_content, re.IGNORECASE)
    if json_block_match:
        json_content = json_block_match.group(1).strip()
    else:
        json_start = json_content.find('{')
        if json_start > 0:
            json_content = json_content[json_start:]

    # Remove trailing commas before } or ]
    json_content = re.sub(r',(\s*[}\]])', r'\1', json_content)

    return json_content


def _format_validation_error(exc: ValidationError) -> str:
    """Render a Pydantic validation error as 'path: message; path: message'."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)


def parse_recipes(content: str) -> List[RecipeSchema]:
    """
    Parse and validate raw language model output.

    Args:
        content: Raw completion text

    Returns:
        Up to MAX_RECIPES validated recipes (may be empty)

    Raises:
        InvalidUpstreamFormat: If content is not JSON or fails validation
    """
    try:
        payload = json.loads(_extract_json_payload(content))
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse JSON response: {e}")
        logger.error(f"Raw content: {content[:500]}")
        raise InvalidUpstreamFormat(
            f"The AI returned an invalid response format: response is not valid JSON ({e.msg})"
        ) from e

    try:
        validated = RecipeListSchema.model_validate(payload)
    except ValidationError as e:
        readable = _format_validation_error(e)
        logger.error(f"Invalid response format from language model: {readable}")
        raise InvalidUpstreamFormat(
            f"The AI returned an invalid response format: {readable}",
            details={"errors": readable},
        ) from e

    recipes = validated.cocktails
    if len(recipes) > MAX_RECIPES:
        logger.warning(f"Model returned {len(recipes)} recipes, keeping the first {MAX_RECIPES}")
        recipes = recipes[:MAX_RECIPES]

    return recipes


async def generate_cocktail_recipes(
    request: CocktailRecommendationRequest,
    credentials: ProviderCredentials,
) -> List[RecipeSchema]:
    """
    Generate validated cocktail recipes for the user's preferences.

    This function:
    1. Builds the user prompt from the preferences
    2. Calls the chat model in JSON object mode
    3. Parses and validates the response against RecipeListSchema

    Args:
        request: User preferences
        credentials: Request-scoped provider credentials

    Returns:
        List of 0-5 RecipeSchema (empty means no matches)

    Raises:
        InvalidUpstreamFormat: Response not JSON / schema mismatch / empty
        InvalidCredentials: Upstream rejected the API key
        GenerationFailed: Any other upstream failure
    """
    user_prompt = build_cocktail_user_prompt(
        ingredients=request.ingredients,
        required_ingredients=request.required_ingredients,
        alcohol=request.alcohol,
        characteristics=request.characteristics,
    )

    logger.info(f"generate_cocktail_recipes called with model={credentials.model}")

    try:
        content = await llm_client.complete_json(
            system_prompt=COCKTAIL_SYSTEM_PROMPT,
            user_prompt=user_prompt,
            model=credentials.model,
            credentials=credentials,
        )
    except AuthenticationError as e:
        logger.warning("Language model rejected the API key")
        raise InvalidCredentials(
            "Invalid OpenAI API key. Please check your API key and try again.",
            details={"status_code": 401},
        ) from e
    except APIStatusError as e:
        if e.status_code == 401:
            logger.warning("Language model rejected the API key")
            raise InvalidCredentials(
                "Invalid OpenAI API key. Please check your API key and try again.",
                details={"status_code": 401},
            ) from e
        logger.error(f"Language model call failed with status {e.status_code}: {e}")
        raise GenerationFailed(
            f"Error generating cocktail recommendations: {e}",
            details={"status_code": e.status_code},
        ) from e
    except Exception as e:
        logger.error(f"Error generating cocktail recommendations: {e}")
        raise GenerationFailed(f"Error generating cocktail recommendations: {e}") from e

    if not content:
        logger.error("Empty content in language model response")
        raise InvalidUpstreamFormat("The AI returned an empty response")

    recipes = parse_recipes(content)
    logger.info(f"Language model returned {len(recipes)} valid recipe(s)")
    return recipes
