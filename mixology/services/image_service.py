"""
Image Service - ordered strategy fallback for cocktail photos

Step 2 of the recommendation pipeline. Each recipe gets exactly one image:
strategies are tried strictly in order and the first one that returns a
usable URL wins. If every strategy fails, the constant fallback image is used.
This service never raises for image failures.

Strategies (default order, configurable via IMAGE_STRATEGY_ORDER):
1. Gemini             - Gemini image model, inline bytes returned as a data URL
2. GPT4o-DALLE-Hybrid - GPT-4o writes a visual description, DALL-E 3 renders it
3. DALL-E-3           - DALL-E 3 from a fixed photography prompt
"""

import base64
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence

from google import genai
from google.genai import types

from mixology.agents.cocktail.prompts import (
    IMAGE_PHOTOGRAPHER_SYSTEM_PROMPT,
    build_gemini_image_prompt,
    build_image_prompt,
    build_visual_description_prompt,
)
from mixology.auth.dependencies import ProviderCredentials
from mixology.config import settings
from mixology.schemas.cocktails import ImageResult
from mixology.services import llm_client
from mixology.services.errors import ImageStrategyFailed
from mixology.utils.debug_log import analyze_response, save_debug_log

logger = logging.getLogger(__name__)

GEMINI = "Gemini"
GPT4O_DALLE_HYBRID = "GPT4o-DALLE-Hybrid"
DALLE_3 = "DALL-E-3"
FALLBACK_STRATEGY = "Fallback"

HYBRID_DESCRIPTION_MODEL = "gpt-4o"
DALLE_MODEL = "dall-e-3"
DALLE_SIZE = "1024x1024"
DALLE_QUALITY = "standard"


@dataclass(frozen=True)
class ImageStrategy:
    """A named image provider exposing a single async generate operation."""
    name: str
    generate: Callable[[str, str, ProviderCredentials], Awaitable[Optional[ImageResult]]]


# =============================================================================
# HELPERS
# =============================================================================

def _first_image_url(response: Any, strategy_name: str) -> str:
    """Extract the first image URL from an OpenAI images response."""
    data = getattr(response, "data", None) or []
    url = getattr(data[0], "url", None) if data else None

    if not url:
        raise ImageStrategyFailed(strategy_name, "No image URL found in DALL-E response")

    return url


async def _render_with_dalle(credentials: ProviderCredentials, prompt: str, label: str) -> Any:
    client = llm_client.get_openai_client(credentials)
    response = await client.images.generate(
        model=DALLE_MODEL,
        prompt=prompt,
        n=1,
        size=DALLE_SIZE,
        quality=DALLE_QUALITY,
    )
    save_debug_log(label, response)
    logger.debug(f"{label} response analysis: {analyze_response(response)}")
    return response


def _summarize_gemini_response(response: Any) -> Dict[str, Any]:
    """Debug-log friendly view of a Gemini response (no image bytes)."""
    parts_summary = []
    for candidate in getattr(response, "candidates", None) or []:
        content = getattr(candidate, "content", None)
        for part in getattr(content, "parts", None) or []:
            inline = getattr(part, "inline_data", None)
            if inline is not None:
                parts_summary.append({
                    "type": "inline_data",
                    "mime_type": getattr(inline, "mime_type", None),
                    "size": len(getattr(inline, "data", None) or b""),
                })
            elif getattr(part, "text", None):
                parts_summary.append({"type": "text", "text": part.text[:500]})
    return {"parts": parts_summary}


def _gemini_image_data_url(response: Any) -> Optional[str]:
    """Return the first inline image of a Gemini response as a data URL."""
    for candidate in getattr(response, "candidates", None) or []:
        content = getattr(candidate, "content", None)
        for part in getattr(content, "parts", None) or []:
            inline = getattr(part, "inline_data", None)
            if inline is None or not getattr(inline, "data", None):
                continue

            data = inline.data
            # inline_data.data is bytes in most SDK versions, or a base64 string
            encoded = data if isinstance(data, str) else base64.b64encode(data).decode("ascii")
            mime_type = getattr(inline, "mime_type", None) or "image/png"
            return f"data:{mime_type};base64,{encoded}"

    return None


# =============================================================================
# STRATEGIES
# =============================================================================

async def _generate_with_gemini(
    cocktail_name: str,
    ingredients_text: str,
    credentials: ProviderCredentials,
) -> ImageResult:
    if not credentials.gemini_api_key:
        raise ImageStrategyFailed(GEMINI, "Gemini API key not configured")

    logger.info(f"{GEMINI}: Generating image for {cocktail_name}")

    client = genai.Client(api_key=credentials.gemini_api_key)
    response = await client.aio.models.generate_content(
        model=settings.GEMINI_IMAGE_MODEL,
        contents=[build_gemini_image_prompt(cocktail_name, ingredients_text)],
        config=types.GenerateContentConfig(
            response_modalities=["IMAGE"],
        ),
    )
    save_debug_log(GEMINI, _summarize_gemini_response(response))

    data_url = _gemini_image_data_url(response)
    if not data_url:
        raise ImageStrategyFailed(GEMINI, "Gemini returned no image data")

    return ImageResult(url=data_url, strategy=GEMINI)


async def _generate_with_gpt4o_dalle_hybrid(
    cocktail_name: str,
    ingredients_text: str,
    credentials: ProviderCredentials,
) -> ImageResult:
    logger.info(f"{GPT4O_DALLE_HYBRID}: Creating detailed description with GPT-4o for {cocktail_name}")

    client = llm_client.get_openai_client(credentials)
    description_response = await client.chat.completions.create(
        model=HYBRID_DESCRIPTION_MODEL,
        messages=[
            {"role": "system", "content": IMAGE_PHOTOGRAPHER_SYSTEM_PROMPT},
            {"role": "user", "content": build_visual_description_prompt(cocktail_name, ingredients_text)},
        ],
        max_tokens=500,
    )
    save_debug_log(f"{GPT4O_DALLE_HYBRID}_Description", description_response)

    description = ""
    if description_response.choices:
        description = description_response.choices[0].message.content or ""
    logger.debug(f"{GPT4O_DALLE_HYBRID}: Generated description: {description[:200]}")

    image_response = await _render_with_dalle(
        credentials,
        build_image_prompt(cocktail_name, ingredients_text, description),
        f"{GPT4O_DALLE_HYBRID}_DALLE",
    )

    return ImageResult(url=_first_image_url(image_response, GPT4O_DALLE_HYBRID), strategy=GPT4O_DALLE_HYBRID)


async def _generate_with_dalle(
    cocktail_name: str,
    ingredients_text: str,
    credentials: ProviderCredentials,
) -> ImageResult:
    logger.info(f"{DALLE_3}: Generating image for {cocktail_name}")

    response = await _render_with_dalle(
        credentials,
        build_image_prompt(cocktail_name, ingredients_text),
        DALLE_3,
    )

    return ImageResult(url=_first_image_url(response, DALLE_3), strategy=DALLE_3)


GEMINI_STRATEGY = ImageStrategy(name=GEMINI, generate=_generate_with_gemini)
GPT4O_DALLE_HYBRID_STRATEGY = ImageStrategy(name=GPT4O_DALLE_HYBRID, generate=_generate_with_gpt4o_dalle_hybrid)
DALLE_3_STRATEGY = ImageStrategy(name=DALLE_3, generate=_generate_with_dalle)

AVAILABLE_STRATEGIES: Dict[str, ImageStrategy] = {
    strategy.name: strategy
    for strategy in (GEMINI_STRATEGY, GPT4O_DALLE_HYBRID_STRATEGY, DALLE_3_STRATEGY)
}


def resolve_strategies(names: Sequence[str]) -> List[ImageStrategy]:
    """
    Map configured strategy names to strategies, preserving order.

    Raises:
        ValueError: If a name is not a known strategy
    """
    unknown = [name for name in names if name not in AVAILABLE_STRATEGIES]
    if unknown:
        raise ValueError(
            f"Unknown image strategies: {', '.join(unknown)}. "
            f"Available: {', '.join(AVAILABLE_STRATEGIES)}"
        )
    return [AVAILABLE_STRATEGIES[name] for name in names]


# =============================================================================
# FALLBACK CHAIN
# =============================================================================

async def generate_cocktail_image(
    cocktail_name: str,
    ingredients_text: str,
    credentials: ProviderCredentials,
    strategies: Optional[Sequence[ImageStrategy]] = None,
    fallback_url: Optional[str] = None,
) -> ImageResult:
    """
    Produce exactly one image for a cocktail.

    Tries each strategy in order. The first non-empty URL is returned
    immediately and later strategies are never invoked. Strategy errors are
    logged and skipped. When every strategy fails, the fallback URL is
    returned with strategy "Fallback".

    Args:
        cocktail_name: Recipe name
        ingredients_text: Ingredients joined with ", "
        credentials: Request-scoped provider credentials
        strategies: Ordered strategies (defaults to IMAGE_STRATEGY_ORDER)
        fallback_url: Constant fallback image (defaults to FALLBACK_IMAGE_URL)

    Returns:
        ImageResult (never raises for provider failures)
    """
    if strategies is None:
        strategies = resolve_strategies(settings.IMAGE_STRATEGY_ORDER)
    if fallback_url is None:
        fallback_url = settings.FALLBACK_IMAGE_URL

    logger.info(f"Generating image for cocktail: {cocktail_name}")

    for strategy in strategies:
        logger.info(f"Attempting image generation using {strategy.name} strategy...")
        try:
            result = await strategy.generate(cocktail_name, ingredients_text, credentials)
        except Exception as e:
            logger.warning(f"{strategy.name} strategy failed for '{cocktail_name}': {e}")
            continue

        if result is None or not result.url:
            logger.warning(f"{strategy.name} strategy returned no usable URL for '{cocktail_name}'")
            continue

        logger.info(f"{strategy.name} strategy succeeded for '{cocktail_name}'")
        return ImageResult(url=result.url, strategy=strategy.name)

    logger.warning(f"All strategies failed for '{cocktail_name}', using fallback image")
    return ImageResult(url=fallback_url, strategy=FALLBACK_STRATEGY)
