"""
Cocktail Recommendation Prompts

This module contains the prompt templates for recipe text generation and
cocktail image generation.

The service layer is in:
- mixology/services/recipe_service.py
- mixology/services/image_service.py
- mixology/services/recommendation_service.py

Prompt templates are in:
- mixology/agents/cocktail/prompts.py
"""

from mixology.agents.cocktail.prompts import (
    COCKTAIL_SYSTEM_PROMPT,
    IMAGE_PHOTOGRAPHER_SYSTEM_PROMPT,
    MAX_RECIPES,
    build_cocktail_user_prompt,
    build_gemini_image_prompt,
    build_image_prompt,
    build_visual_description_prompt,
)

__all__ = [
    "COCKTAIL_SYSTEM_PROMPT",
    "IMAGE_PHOTOGRAPHER_SYSTEM_PROMPT",
    "MAX_RECIPES",
    "build_cocktail_user_prompt",
    "build_gemini_image_prompt",
    "build_image_prompt",
    "build_visual_description_prompt",
]
