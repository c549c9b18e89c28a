"""
FastAPI dependency functions for provider credentials.

The web client lets users bring their own OpenAI key and model. These are
sent as request headers and fall back to the environment defaults. The
resolved credentials are passed explicitly through the pipeline; nothing is
cached between requests.
"""

import logging
from dataclasses import dataclass
from typing import Annotated, Optional

from fastapi import Header, HTTPException, status

from mixology.config import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderCredentials:
    """
    Credentials for the upstream AI providers, scoped to one request.

    Attributes:
        api_key: OpenAI API key (recipe text and DALL-E strategies)
        model: OpenAI chat model used for recipe text
        gemini_api_key: Google Gemini API key (Gemini image strategy), may be empty
    """
    api_key: str
    model: str
    gemini_api_key: str = ""

    def __repr__(self) -> str:
        # Keys must never end up in logs
        return f"ProviderCredentials(model={self.model!r}, gemini={'yes' if self.gemini_api_key else 'no'})"


def resolve_credentials(
    api_key: Optional[str] = None,
    model: Optional[str] = None,
) -> ProviderCredentials:
    """
    Build credentials from explicit values, falling back to settings.

    Raises:
        ValueError: If no OpenAI API key is available from either source
    """
    resolved_key = (api_key or "").strip() or settings.OPENAI_API_KEY
    resolved_model = (model or "").strip() or settings.OPENAI_MODEL

    if not resolved_key:
        raise ValueError("OpenAI API key is required")

    return ProviderCredentials(
        api_key=resolved_key,
        model=resolved_model,
        gemini_api_key=settings.GEMINI_API_KEY,
    )


async def get_provider_credentials(
    x_openai_api_key: Annotated[str | None, Header()] = None,
    x_openai_model: Annotated[str | None, Header()] = None,
) -> ProviderCredentials:
    """
    Resolve provider credentials for the current request.

    Reads the `X-OpenAI-API-Key` and `X-OpenAI-Model` headers; missing
    values fall back to OPENAI_API_KEY / OPENAI_MODEL.

    Raises:
        HTTPException: 400 if no API key is available

    Usage:
        @router.post("/cocktails/recommendations")
        async def recommend(
            credentials: ProviderCredentials = Depends(get_provider_credentials)
        ):
            ...
    """
    try:
        credentials = resolve_credentials(x_openai_api_key, x_openai_model)
    except ValueError:
        logger.warning("No OpenAI API key in request headers or environment")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "missing_api_key",
                "details": "OpenAI API key is required. Please configure it in the app settings."
            }
        )

    source = "header" if x_openai_api_key else "environment"
    logger.debug(f"Using OpenAI credentials from {source}, model={credentials.model}")
    return credentials
