"""
Tests for the cocktail prompt builders.
"""

from mixology.agents.cocktail import (
    COCKTAIL_SYSTEM_PROMPT,
    MAX_RECIPES,
    build_cocktail_user_prompt,
    build_gemini_image_prompt,
    build_image_prompt,
    build_visual_description_prompt,
)


class TestBuildCocktailUserPrompt:

    def test_full_preferences(self):
        prompt = build_cocktail_user_prompt(
            ingredients="rum, mint, lime, sugar, soda",
            required_ingredients=["rum", "mint"],
            alcohol="rum",
            characteristics=["refreshing", "sweet"],
        )

        assert prompt == (
            "I would like some cocktail recommendations using these ingredients: "
            "rum, mint, lime, sugar, soda."
            " The following ingredients MUST be included in all recipes: rum, mint."
            " I prefer drinks with rum."
            " I enjoy refreshing, sweet drinks."
            " Please provide 5 cocktail suggestions that match my preferences."
        )

    def test_any_alcohol_is_omitted(self):
        for alcohol in ("any", "Any", "ANY"):
            prompt = build_cocktail_user_prompt("gin, tonic", alcohol=alcohol)
            assert "I prefer drinks with" not in prompt

    def test_empty_optional_parts_are_omitted(self):
        prompt = build_cocktail_user_prompt("gin, tonic", required_ingredients=[], characteristics=[])

        assert "MUST be included" not in prompt
        assert "I enjoy" not in prompt
        assert prompt.endswith("Please provide 5 cocktail suggestions that match my preferences.")

    def test_blank_ingredients(self):
        prompt = build_cocktail_user_prompt("   ")

        assert prompt.startswith("I would like some cocktail recommendations.")


class TestSystemPrompt:

    def test_describes_json_shape(self):
        for field in ("cocktails", "ingredients", "instructions", "serving_style", "prep_time", "is_popular"):
            assert f'"{field}"' in COCKTAIL_SYSTEM_PROMPT

    def test_mentions_recipe_limit(self):
        assert f"up to {MAX_RECIPES} cocktails" in COCKTAIL_SYSTEM_PROMPT


class TestImagePrompts:

    def test_image_prompt_without_description(self):
        prompt = build_image_prompt("Mojito", "rum, mint")

        assert '"Mojito"' in prompt
        assert "The cocktail contains rum, mint." in prompt
        assert "No text or watermarks" in prompt

    def test_image_prompt_embeds_description_after_subject(self):
        prompt = build_image_prompt("Mojito", "rum, mint", "Tall glass, crushed ice.")
        lines = prompt.split("\n")

        assert lines[1] == "Tall glass, crushed ice."

    def test_visual_description_prompt_limits_length(self):
        prompt = build_visual_description_prompt("Negroni", "gin, campari, vermouth")

        assert '"Negroni"' in prompt
        assert "under 100 words" in prompt

    def test_gemini_prompt(self):
        prompt = build_gemini_image_prompt("Negroni", "gin, campari, vermouth")

        assert "gin, campari, vermouth" in prompt
        assert "no watermark" in prompt
