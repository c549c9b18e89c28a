"""
Tests for the Recipe Service (step 1 of the recommendation pipeline).

These tests verify:
- Parsing and validation of the language model JSON output
- Cleanup of fenced / trailing-comma JSON
- Error mapping (format, credentials, generic failures)
- The prompt and model sent upstream

Note: These tests mock llm_client.complete_json to avoid actual API calls.
"""

import json
from unittest.mock import AsyncMock, patch

import httpx
import pytest
from openai import AuthenticationError, InternalServerError

from mixology.schemas.cocktails import CocktailRecommendationRequest, RecipeSchema
from mixology.services.errors import (
    GenerationFailed,
    InvalidCredentials,
    InvalidUpstreamFormat,
)
from mixology.services.recipe_service import (
    _extract_json_payload,
    generate_cocktail_recipes,
    parse_recipes,
)


def _openai_response(status_code: int) -> httpx.Response:
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    return httpx.Response(status_code, request=request)


@pytest.fixture
def mojito_request() -> CocktailRecommendationRequest:
    return CocktailRecommendationRequest(
        ingredients="rum, mint, lime, sugar, soda",
        required_ingredients=["rum"],
        alcohol="rum",
        characteristics=["refreshing", "sweet"],
    )


# =============================================================================
# UNIT TESTS: JSON cleanup
# =============================================================================

class TestExtractJsonPayload:
    """Tests for _extract_json_payload."""

    def test_plain_json_unchanged(self):
        assert _extract_json_payload('{"cocktails": []}') == '{"cocktails": []}'

    def test_json_code_fence_is_stripped(self):
        content = 'Here you go:\n```json\n{"cocktails": []}\n```'
        assert _extract_json_payload(content) == '{"cocktails": []}'

    def test_bare_code_fence_is_stripped(self):
        assert _extract_json_payload('```\n{"cocktails": []}\n```') == '{"cocktails": []}'

    def test_leading_prose_is_dropped(self):
        assert _extract_json_payload('Sure! {"cocktails": []}') == '{"cocktails": []}'

    def test_trailing_commas_removed(self):
        cleaned = _extract_json_payload('{"cocktails": [1, 2,],}')
        assert json.loads(cleaned) == {"cocktails": [1, 2]}


# =============================================================================
# UNIT TESTS: Parsing and validation
# =============================================================================

class TestParseRecipes:
    """Tests for parse_recipes."""

    def test_valid_recipe(self, mojito_recipe):
        recipes = parse_recipes(json.dumps({"cocktails": [mojito_recipe]}))

        assert len(recipes) == 1
        assert isinstance(recipes[0], RecipeSchema)
        assert recipes[0].name == "Mojito"
        assert recipes[0].prep_time == "5 minutes"
        assert recipes[0].is_popular is True

    def test_optional_fields_may_be_missing(self, mojito_recipe):
        del mojito_recipe["prep_time"]
        del mojito_recipe["is_popular"]

        recipes = parse_recipes(json.dumps({"cocktails": [mojito_recipe]}))

        assert recipes[0].prep_time is None
        assert recipes[0].is_popular is None

    def test_empty_list_is_valid(self):
        assert parse_recipes('{"cocktails": []}') == []

    def test_missing_instructions_raises_with_readable_path(self, mojito_recipe):
        del mojito_recipe["instructions"]

        with pytest.raises(InvalidUpstreamFormat) as exc_info:
            parse_recipes(json.dumps({"cocktails": [mojito_recipe]}))

        assert "cocktails.0.instructions" in exc_info.value.message

    def test_missing_cocktails_key_raises(self):
        with pytest.raises(InvalidUpstreamFormat) as exc_info:
            parse_recipes('{"recipes": []}')

        assert "cocktails" in exc_info.value.message

    def test_empty_ingredients_raises(self, mojito_recipe):
        mojito_recipe["ingredients"] = []

        with pytest.raises(InvalidUpstreamFormat) as exc_info:
            parse_recipes(json.dumps({"cocktails": [mojito_recipe]}))

        assert "ingredients" in exc_info.value.message

    def test_wrong_type_raises(self, mojito_recipe):
        mojito_recipe["is_popular"] = "very"

        with pytest.raises(InvalidUpstreamFormat):
            parse_recipes(json.dumps({"cocktails": [mojito_recipe]}))

    def test_not_json_raises(self):
        with pytest.raises(InvalidUpstreamFormat) as exc_info:
            parse_recipes("I'm sorry, I can't help with that.")

        assert "not valid JSON" in exc_info.value.message

    def test_more_than_five_recipes_truncated(self, make_recipe):
        payload = {"cocktails": [make_recipe(f"Drink {i}") for i in range(7)]}

        recipes = parse_recipes(json.dumps(payload))

        assert [r.name for r in recipes] == [f"Drink {i}" for i in range(5)]

    def test_fenced_response_is_parsed(self, mojito_recipe):
        content = "```json\n" + json.dumps({"cocktails": [mojito_recipe]}) + "\n```"

        assert parse_recipes(content)[0].name == "Mojito"


# =============================================================================
# INTEGRATION TESTS: Mocked language model
# =============================================================================

class TestGenerateCocktailRecipes:
    """Tests for generate_cocktail_recipes with a mocked completion call."""

    @pytest.mark.asyncio
    async def test_returns_validated_recipes(self, mojito_request, credentials, mojito_recipe):
        with patch(
            "mixology.services.llm_client.complete_json",
            new=AsyncMock(return_value=json.dumps({"cocktails": [mojito_recipe]})),
        ):
            recipes = await generate_cocktail_recipes(mojito_request, credentials)

        assert [r.name for r in recipes] == ["Mojito"]

    @pytest.mark.asyncio
    async def test_sends_preferences_and_model(self, mojito_request, credentials):
        mock_complete = AsyncMock(return_value='{"cocktails": []}')

        with patch("mixology.services.llm_client.complete_json", new=mock_complete):
            await generate_cocktail_recipes(mojito_request, credentials)

        kwargs = mock_complete.call_args.kwargs
        assert kwargs["model"] == "gpt-4o"
        assert kwargs["credentials"] is credentials
        assert "rum, mint, lime, sugar, soda" in kwargs["user_prompt"]
        assert "MUST be included in all recipes: rum" in kwargs["user_prompt"]
        assert "I prefer drinks with rum" in kwargs["user_prompt"]
        assert "refreshing, sweet" in kwargs["user_prompt"]
        assert '"cocktails"' in kwargs["system_prompt"]

    @pytest.mark.asyncio
    async def test_empty_recipe_list_is_not_an_error(self, mojito_request, credentials):
        with patch(
            "mixology.services.llm_client.complete_json",
            new=AsyncMock(return_value='{"cocktails": []}'),
        ):
            assert await generate_cocktail_recipes(mojito_request, credentials) == []

    @pytest.mark.asyncio
    async def test_empty_content_raises_invalid_format(self, mojito_request, credentials):
        with patch("mixology.services.llm_client.complete_json", new=AsyncMock(return_value=None)):
            with pytest.raises(InvalidUpstreamFormat):
                await generate_cocktail_recipes(mojito_request, credentials)

    @pytest.mark.asyncio
    async def test_schema_mismatch_raises_invalid_format(self, mojito_request, credentials, mojito_recipe):
        del mojito_recipe["instructions"]

        with patch(
            "mixology.services.llm_client.complete_json",
            new=AsyncMock(return_value=json.dumps({"cocktails": [mojito_recipe]})),
        ):
            with pytest.raises(InvalidUpstreamFormat):
                await generate_cocktail_recipes(mojito_request, credentials)

    @pytest.mark.asyncio
    async def test_authentication_error_raises_invalid_credentials(self, mojito_request, credentials):
        error = AuthenticationError(
            "Incorrect API key provided",
            response=_openai_response(401),
            body=None,
        )

        with patch("mixology.services.llm_client.complete_json", new=AsyncMock(side_effect=error)):
            with pytest.raises(InvalidCredentials) as exc_info:
                await generate_cocktail_recipes(mojito_request, credentials)

        assert exc_info.value.details["status_code"] == 401

    @pytest.mark.asyncio
    async def test_server_error_raises_generation_failed(self, mojito_request, credentials):
        error = InternalServerError("upstream exploded", response=_openai_response(500), body=None)

        with patch("mixology.services.llm_client.complete_json", new=AsyncMock(side_effect=error)):
            with pytest.raises(GenerationFailed) as exc_info:
                await generate_cocktail_recipes(mojito_request, credentials)

        assert exc_info.value.details["status_code"] == 500

    @pytest.mark.asyncio
    async def test_unexpected_error_raises_generation_failed(self, mojito_request, credentials):
        with patch(
            "mixology.services.llm_client.complete_json",
            new=AsyncMock(side_effect=ConnectionError("network unreachable")),
        ):
            with pytest.raises(GenerationFailed) as exc_info:
                await generate_cocktail_recipes(mojito_request, credentials)

        assert "network unreachable" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, ConnectionError)
