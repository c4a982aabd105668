"""Shared fixtures for the localekit test suite."""

import pytest

from localekit.logging import configure_logging
from localekit.services import providers


@pytest.fixture(scope="session", autouse=True)
def _silence_logging():
    """Configure structlog once so library log events are suppressed."""
    configure_logging()


@pytest.fixture(autouse=True)
def _clear_provider_caches():
    """Reset lru_cache singletons between tests."""
    yield
    providers.get_settings.cache_clear()
    providers.get_locale_negotiator.cache_clear()
    providers.get_translator.cache_clear()
