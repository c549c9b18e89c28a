"""
Cocktail Prompt Templates

Contains the system prompt and user prompt builder for recipe generation,
plus the prompts used by the image generation strategies.

Architecture:
- Recipe text: OpenAI chat completion in JSON object mode (default gpt-4o)
- Images: ordered strategies (Gemini, GPT-4o + DALL-E hybrid, DALL-E 3)

Prompt Engineering Pattern:
- System prompt defines role and the JSON output shape
- User prompt contains the user's preferences only
- Image prompts always ask for photorealistic output with no text or watermarks
"""

from typing import List, Optional

# =============================================================================
# RECIPE SYSTEM PROMPT
# =============================================================================

MAX_RECIPES = 5

COCKTAIL_SYSTEM_PROMPT = f"""You are an expert bartender who provides cocktail recommendations based on user preferences.
You should provide unique, creative and detailed cocktail recommendations.

<recipe_fields>
For each cocktail, include the following:
- Name: A creative and descriptive name
- Ingredients: A detailed list of ingredients with measurements
- Instructions: Step-by-step preparation instructions
- Characteristics: Flavor profile descriptors (sweet, sour, bitter, spicy, etc.)
- Serving style: How the drink should be served (e.g., "On the rocks", "Served up", "In a highball glass")
- Prep time: How long it takes to prepare
- Whether the cocktail is popular or not (true/false)
</recipe_fields>

<output_format>
Respond with a JSON object containing an array of cocktail recommendations (up to {MAX_RECIPES} cocktails).
If nothing reasonable can be made, return an empty array.
The JSON must follow this format:
{{
  "cocktails": [
    {{
      "name": "Cocktail Name",
      "ingredients": ["2 oz Ingredient 1", "1 oz Ingredient 2"],
      "instructions": "Instructions for preparation...",
      "characteristics": ["Sweet", "Refreshing"],
      "serving_style": "Served in a martini glass",
      "prep_time": "5 minutes",
      "is_popular": true
    }}
  ]
}}
</output_format>"""


# =============================================================================
# RECIPE USER PROMPT BUILDER
# =============================================================================

def build_cocktail_user_prompt(
    ingredients: str,
    required_ingredients: Optional[List[str]] = None,
    alcohol: Optional[str] = None,
    characteristics: Optional[List[str]] = None,
) -> str:
    """
    Build the user prompt for recipe generation.

    Optional parts are omitted entirely when empty. An alcohol preference of
    "any" (case-insensitive) is treated as no preference.

    Args:
        ingredients: Comma-separated free text list of ingredients
        required_ingredients: Ingredients every recipe must include
        alcohol: Preferred spirit, or "any"
        characteristics: Flavor characteristics the user enjoys

    Returns:
        str: Prompt ready to be sent as the user message
    """
    prompt = "I would like some cocktail recommendations"

    if ingredients and ingredients.strip():
        prompt += f" using these ingredients: {ingredients.strip()}."
    else:
        prompt += "."

    if required_ingredients:
        prompt += (
            " The following ingredients MUST be included in all recipes: "
            f"{', '.join(required_ingredients)}."
        )

    if alcohol and alcohol.strip().lower() != "any":
        prompt += f" I prefer drinks with {alcohol.strip()}."

    if characteristics:
        prompt += f" I enjoy {', '.join(characteristics)} drinks."

    prompt += f" Please provide {MAX_RECIPES} cocktail suggestions that match my preferences."

    return prompt


# =============================================================================
# IMAGE PROMPTS
# =============================================================================

IMAGE_PHOTOGRAPHER_SYSTEM_PROMPT = (
    "You are an expert mixologist and professional cocktail photographer."
)


def build_visual_description_prompt(cocktail_name: str, ingredients_text: str) -> str:
    """First call of the hybrid strategy: ask for a short visual description."""
    return (
        f'Create a detailed visual description of a "{cocktail_name}" cocktail '
        f"containing {ingredients_text}. "
        "Describe the glass type, colors, garnishes, lighting, reflections, background, "
        "and overall composition. "
        "Your description will be used to generate a photorealistic image of this cocktail. "
        "Be specific and detailed, but keep it under 100 words."
    )


def build_image_prompt(
    cocktail_name: str,
    ingredients_text: str,
    visual_description: Optional[str] = None,
) -> str:
    """
    Build the DALL-E prompt for a cocktail photo.

    When a visual description is supplied (hybrid strategy) it is embedded
    between the subject line and the style requirements.
    """
    lines = [f'A professional, high-quality, appetizing photograph of a "{cocktail_name}" cocktail.']

    if visual_description and visual_description.strip():
        lines.append(visual_description.strip())

    lines.append(f"The cocktail contains {ingredients_text}.")
    lines.append(
        "The image should be well-lit, showing the cocktail in an appropriate glass "
        "with proper garnishes."
    )
    lines.append(
        "Make the image look realistic and appealing, as if taken by a professional "
        "food photographer."
    )
    lines.append("No text or watermarks. Clear background with soft focus. Photorealistic style.")

    return "\n".join(lines)


def build_gemini_image_prompt(cocktail_name: str, ingredients_text: str) -> str:
    """Single-call prompt for the Gemini image model."""
    return (
        f"{IMAGE_PHOTOGRAPHER_SYSTEM_PROMPT} "
        f'Create a detailed, photorealistic image of a "{cocktail_name}" cocktail '
        f"with these ingredients: {ingredients_text}. "
        "Make it look like a professional cocktail photography shot with perfect lighting, "
        "appropriate glassware, and garnishes. No text, no logos, no watermark."
    )
