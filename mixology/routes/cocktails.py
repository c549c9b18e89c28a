"""
FastAPI routes for cocktail recommendation endpoints.

Endpoints:
- POST /api/cocktails/recommendations: Generate cocktails with images

Credentials come from the X-OpenAI-API-Key / X-OpenAI-Model headers or the
environment defaults. No user session is required.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from mixology.auth.dependencies import ProviderCredentials, get_provider_credentials
from mixology.schemas.cocktails import (
    CocktailRecommendationRequest,
    CocktailRecommendationsResponse,
)
from mixology.services.errors import (
    GenerationFailed,
    InvalidCredentials,
    InvalidUpstreamFormat,
)
from mixology.services.recommendation_service import (
    RecommendationConfig,
    build_recommendation_config,
    recommend_cocktails,
)

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(
    prefix="/api/cocktails",
    tags=["cocktails"]
)


def get_recommendation_config() -> RecommendationConfig:
    """Pipeline options for the current request (overridable in tests)."""
    return build_recommendation_config()


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.post(
    "/recommendations",
    response_model=CocktailRecommendationsResponse,
    status_code=200,
    summary="Generate cocktail recommendations",
    description="""
    Generates up to 5 cocktail recipes matching the user's preferences, each
    with an illustrative image.

    **Credentials:** `X-OpenAI-API-Key` and `X-OpenAI-Model` headers, or the
    server's environment defaults.

    **Flow:**
    1. Recipe text is generated by the chat model and validated
    2. Each recipe gets one image from the first image strategy that succeeds
       (Gemini, GPT-4o + DALL-E hybrid, DALL-E 3), or the fallback image
    3. Cocktails are returned in recipe order

    **Errors:**
    - 400 missing_api_key: no key in headers or environment
    - 401 invalid_credentials: the provider rejected the key
    - 502 invalid_upstream_format: the model returned malformed recipes
    - 500 generation_failed: any other recipe generation failure

    Image failures never fail the request. An empty `cocktails` list means
    no matches.
    """
)
async def recommend_cocktails_endpoint(
    request: CocktailRecommendationRequest,
    credentials: ProviderCredentials = Depends(get_provider_credentials),
    config: RecommendationConfig = Depends(get_recommendation_config),
) -> CocktailRecommendationsResponse:
    """
    Cocktail recommendation endpoint.

    - Credentials: Handled by get_provider_credentials dependency
    - Parse/Validate: Handled by Pydantic CocktailRecommendationRequest
    - Pipeline: recommendation_service.recommend_cocktails
    - Map errors: domain errors become HTTP errors with {error, details}
    """
    logger.info(
        f"POST /api/cocktails/recommendations called, "
        f"ingredients='{request.ingredients[:50]}', alcohol={request.alcohol}"
    )

    try:
        cocktails = await recommend_cocktails(
            request=request,
            credentials=credentials,
            config=config,
        )
    except InvalidCredentials as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": "invalid_credentials", "details": e.message}
        )
    except InvalidUpstreamFormat as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"error": "invalid_upstream_format", "details": e.message}
        )
    except GenerationFailed as e:
        logger.error(f"Recipe generation failed: {e.message}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "generation_failed", "details": e.message}
        )

    logger.info(f"Returning {len(cocktails)} cocktail(s)")
    return CocktailRecommendationsResponse(cocktails=cocktails)
