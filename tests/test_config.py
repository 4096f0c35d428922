"""
Unit Tests for RegistryConfig and logging setup
"""

import logging

import pytest

from academics.cli import configure_logging
from academics.config import MAX_CREDITS_ENV_VAR, MAX_CREDITS_PER_TERM, RegistryConfig


class TestRegistryConfig:

    def test_init_when_default_then_eighteen(self):
        assert RegistryConfig().max_credits_per_term == MAX_CREDITS_PER_TERM == 18

    @pytest.mark.parametrize("value", [0, -3, "18", True, 2.5])
    def test_init_when_invalid_then_raises(self, value):
        with pytest.raises(ValueError, match="max_credits_per_term"):
            RegistryConfig(max_credits_per_term=value)

    def test_init_when_assigned_then_frozen(self):
        config = RegistryConfig()
        with pytest.raises(AttributeError):
            config.max_credits_per_term = 30

    def test_from_env_when_unset_then_default(self):
        assert RegistryConfig.from_env({}).max_credits_per_term == 18

    def test_from_env_when_set_then_overrides(self):
        assert RegistryConfig.from_env({MAX_CREDITS_ENV_VAR: "21"}).max_credits_per_term == 21

    def test_from_env_when_blank_then_default(self):
        assert RegistryConfig.from_env({MAX_CREDITS_ENV_VAR: "  "}).max_credits_per_term == 18

    def test_from_env_when_not_a_number_then_raises(self):
        with pytest.raises(ValueError, match=MAX_CREDITS_ENV_VAR):
            RegistryConfig.from_env({MAX_CREDITS_ENV_VAR: "lots"})


class TestConfigureLogging:

    def test_configure_logging_when_level_set_then_returned(self):
        assert configure_logging({"ACADEMICS_LOG_LEVEL": "debug"}) == logging.DEBUG

    def test_configure_logging_when_unknown_level_then_warning(self):
        assert configure_logging({"ACADEMICS_LOG_LEVEL": "chatty"}) == logging.WARNING
