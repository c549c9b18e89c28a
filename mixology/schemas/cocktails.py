"""
Pydantic schemas for cocktail recommendation endpoints.

These models define the request/response contracts for the recommendation
pipeline, plus the schema used to validate the language model output before
any image is generated.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

# ============================================================================
# REQUEST MODELS
# ============================================================================

class CocktailRecommendationRequest(BaseModel):
    """
    User taste preferences collected by the cocktail form.

    Field names mirror the JSON sent by the web client, so
    `requiredIngredients` is accepted by alias.
    """
    model_config = ConfigDict(populate_by_name=True)

    ingredients: str = Field(
        "",
        description="Comma-separated free text list of available ingredients",
        max_length=2000,
        examples=["rum, mint, lime, sugar, soda"]
    )
    required_ingredients: List[str] = Field(
        default_factory=list,
        alias="requiredIngredients",
        description="Subset of ingredients that every recipe must include",
        examples=[["rum"]]
    )
    alcohol: str = Field(
        "any",
        description="Preferred base spirit. The special value 'any' means unconstrained.",
        max_length=100,
        examples=["rum", "gin", "any"]
    )
    characteristics: List[str] = Field(
        default_factory=list,
        description="Flavor characteristic tags the user enjoys",
        examples=[["refreshing", "sweet"]]
    )


# ============================================================================
# LANGUAGE MODEL OUTPUT (validated before image generation)
# ============================================================================

class RecipeSchema(BaseModel):
    """Schema for a single recipe returned by the language model."""
    model_config = ConfigDict(frozen=True)

    name: str
    ingredients: List[str] = Field(..., min_length=1)
    instructions: str
    characteristics: List[str]
    serving_style: str
    prep_time: Optional[str] = None
    is_popular: Optional[bool] = None


class RecipeListSchema(BaseModel):
    """Schema for the complete language model response."""
    cocktails: List[RecipeSchema]


class ImageResult(BaseModel):
    """Image URL plus the name of the strategy that produced it."""
    model_config = ConfigDict(frozen=True)

    url: str = Field(..., min_length=1)
    strategy: str


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class CocktailResponse(BaseModel):
    """
    A recipe with its resolved image, ready for UI display.

    Matches the cocktail card rendered by the web client. `image_method`
    names the image strategy that produced `image_url` and is diagnostic
    metadata, not a flavor characteristic.
    """
    name: str = Field(..., description="Cocktail name", examples=["Mojito"])
    image_url: str = Field(
        ...,
        description="Image URL (http(s) or data URL). Never empty.",
        min_length=1,
        examples=["https://images.example.com/mojito.png"]
    )
    ingredients: List[str] = Field(
        ...,
        description="Ingredients with measurements",
        examples=[["2 oz white rum", "1 oz lime juice", "6 mint leaves"]]
    )
    instructions: str = Field(..., description="Step-by-step preparation")
    characteristics: List[str] = Field(
        ...,
        description="Flavor profile descriptors",
        examples=[["Refreshing", "Sweet"]]
    )
    prep_time: Optional[str] = Field(None, examples=["5 minutes"])
    serving_style: str = Field(..., examples=["In a highball glass over crushed ice"])
    is_popular: Optional[bool] = Field(None, examples=[True])
    image_method: str = Field(
        ...,
        description="Image strategy that produced image_url ('Fallback' when none succeeded)",
        examples=["Gemini", "DALL-E-3", "Fallback"]
    )


class CocktailRecommendationsResponse(BaseModel):
    """Response for POST /api/cocktails/recommendations."""
    cocktails: List[CocktailResponse] = Field(
        ...,
        description="Between 0 and 5 cocktails. An empty list means no matches.",
        max_length=5
    )
