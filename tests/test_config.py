"""
Tests for settings validation and credential resolution.
"""

from unittest.mock import patch

import pytest

from mixology.auth.dependencies import ProviderCredentials, resolve_credentials
from mixology.config import Settings, settings


class TestSettingsValidate:

    def test_defaults_are_valid(self):
        Settings.validate()

    @pytest.mark.parametrize(
        "name, value, message",
        [
            ("IMAGE_CONCURRENCY_LIMIT", 0, "IMAGE_CONCURRENCY_LIMIT"),
            ("IMAGE_TIMEOUT_SECONDS", 0, "IMAGE_TIMEOUT_SECONDS"),
            ("FALLBACK_IMAGE_URL", "", "FALLBACK_IMAGE_URL"),
        ],
    )
    def test_out_of_range_values_raise(self, name, value, message):
        with patch.object(Settings, name, value):
            with pytest.raises(ValueError) as exc_info:
                Settings.validate()

        assert message in str(exc_info.value)

    def test_default_strategy_order(self):
        assert settings.IMAGE_STRATEGY_ORDER == ["Gemini", "GPT4o-DALLE-Hybrid", "DALL-E-3"]


class TestResolveCredentials:

    def test_explicit_values_win(self):
        with patch.object(settings, "OPENAI_API_KEY", "sk-env"), \
                patch.object(settings, "OPENAI_MODEL", "gpt-4o"):
            credentials = resolve_credentials("sk-header", "gpt-4o-mini")

        assert credentials.api_key == "sk-header"
        assert credentials.model == "gpt-4o-mini"

    def test_blank_values_fall_back_to_settings(self):
        with patch.object(settings, "OPENAI_API_KEY", "sk-env"), \
                patch.object(settings, "OPENAI_MODEL", "gpt-4o"), \
                patch.object(settings, "GEMINI_API_KEY", "gm-env"):
            credentials = resolve_credentials("  ", None)

        assert credentials == ProviderCredentials(api_key="sk-env", model="gpt-4o", gemini_api_key="gm-env")

    def test_missing_key_raises(self):
        with patch.object(settings, "OPENAI_API_KEY", ""):
            with pytest.raises(ValueError):
                resolve_credentials()

    def test_repr_hides_keys(self):
        credentials = ProviderCredentials(api_key="sk-secret", model="gpt-4o", gemini_api_key="gm-secret")

        assert "secret" not in repr(credentials)
