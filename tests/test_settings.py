"""
Tests for configuration and logging helpers
"""

import logging

import pytest

from storefront.config import Settings
from storefront.logging import configure_logging, get_logger, sanitize_string_for_logging


class TestSettings:
    """Tests for Settings.from_env."""

    def test_defaults(self, monkeypatch):
        for name in (
            "STOREFRONT_API_URL",
            "ADMIN_PASSWORD",
            "ADMIN_API_KEY",
            "CHECKOUT_DELAY_SECONDS",
            "SEED_CATALOG",
            "CORS_ORIGINS",
            "UPSTASH_REDIS_REST_URL",
            "UPSTASH_REDIS_REST_TOKEN",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = Settings.from_env()
        assert settings.api_url == "http://localhost:5000"
        assert settings.admin_password == "admin123"
        assert settings.admin_api_key is None
        assert settings.checkout_delay_seconds == 2.0
        assert settings.seed_catalog is True
        assert settings.cors_origins == ["*"]
        assert not settings.redis_configured

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("STOREFRONT_API_URL", "https://shop.example.ng")
        monkeypatch.setenv("ADMIN_API_KEY", "secret")
        monkeypatch.setenv("CHECKOUT_DELAY_SECONDS", "0.5")
        monkeypatch.setenv("SEED_CATALOG", "false")
        monkeypatch.setenv("CORS_ORIGINS", "https://a.ng, https://b.ng")
        monkeypatch.setenv("UPSTASH_REDIS_REST_URL", "https://x.upstash.io")
        monkeypatch.setenv("UPSTASH_REDIS_REST_TOKEN", "tok")

        settings = Settings.from_env()
        assert settings.api_url == "https://shop.example.ng"
        assert settings.admin_api_key == "secret"
        assert settings.checkout_delay_seconds == 0.5
        assert settings.seed_catalog is False
        assert settings.cors_origins == ["https://a.ng", "https://b.ng"]
        assert settings.redis_configured

    def test_bad_delay_falls_back(self, monkeypatch):
        monkeypatch.setenv("CHECKOUT_DELAY_SECONDS", "soon")
        assert Settings.from_env().checkout_delay_seconds == 2.0


class TestLogging:
    def test_get_logger_is_cached(self):
        assert get_logger("storefront.test") is get_logger("storefront.test")

    @pytest.mark.parametrize("value,expected", [
        ("ankara\nFAKE LOG LINE", "ankara\\nFAKE LOG LINE"),
        (None, "N/A"),
        ("", "N/A"),
    ])
    def test_sanitize(self, value, expected):
        assert sanitize_string_for_logging(value) == expected

    def test_sanitize_truncates(self):
        assert sanitize_string_for_logging("x" * 80, max_length=10) == "x" * 10 + "..."

    def test_loggers_live_under_package(self):
        assert get_logger("storefront.cart.service").name == "storefront.cart.service"
        assert get_logger("tests.helper").name == "storefront.tests.helper"

    def test_configure_logging_is_idempotent(self):
        first = configure_logging("debug")
        second = configure_logging("warning")
        assert first is second
        assert len(second.handlers) == 1
        assert second.level == logging.WARNING
        configure_logging("info")
