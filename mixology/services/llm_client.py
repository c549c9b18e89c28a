"""
Thin async wrappers around the OpenAI SDK.

Clients are created per call from the request's credentials, so a user's key
is never shared with another request.
"""

import logging
from typing import Optional

from openai import AsyncOpenAI

from mixology.auth.dependencies import ProviderCredentials

logger = logging.getLogger(__name__)


def get_openai_client(credentials: ProviderCredentials) -> AsyncOpenAI:
    """Create an async OpenAI client bound to the request's API key."""
    return AsyncOpenAI(api_key=credentials.api_key)


async def complete_json(
    system_prompt: str,
    user_prompt: str,
    model: str,
    credentials: ProviderCredentials,
    temperature: float = 0.7,
) -> Optional[str]:
    """
    Run a chat completion in JSON object mode and return the raw content.

    Returns None when the model produced no content. SDK exceptions
    (authentication, rate limit, connection) propagate to the caller.
    """
    client = get_openai_client(credentials)

    logger.info(f"Requesting JSON completion from model={model}, prompt='{user_prompt[:60]}...'")

    response = await client.chat.completions.create(
        model=model,
        messages=[
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ],
        response_format={"type": "json_object"},
        temperature=temperature,
    )

    if not response.choices:
        return None

    return response.choices[0].message.content
