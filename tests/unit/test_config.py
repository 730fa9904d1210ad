"""Tests for ClassifierConfig validation."""

import dataclasses

import pytest

from oauth_message_classifier.config import ClassifierConfig
from oauth_message_classifier.exceptions import ConfigurationError


class TestClassifierConfig:
    def test_defaults_use_wire_names(self):
        config = ClassifierConfig()
        assert config.consumer_key_field == "oauth_consumer_key"
        assert config.token_field == "oauth_token"
        assert config.token_secret_field == "oauth_token_secret"
        assert config.metrics_enabled is True
        assert config.log_oracle_lookups is False

    @pytest.mark.parametrize(
        "overrides",
        [
            {"consumer_key_field": ""},
            {"token_field": ""},
            {"token_secret_field": ""},
        ],
    )
    def test_empty_field_name_rejected(self, overrides):
        with pytest.raises(ConfigurationError, match="non-empty"):
            ClassifierConfig(**overrides)

    def test_duplicate_field_names_rejected(self):
        with pytest.raises(ConfigurationError, match="distinct"):
            ClassifierConfig(token_field="oauth_token_secret")

    def test_is_frozen(self):
        config = ClassifierConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.token_field = "other"  # type: ignore[misc]
