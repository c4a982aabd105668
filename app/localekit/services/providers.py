"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for i18n services.
"""

from functools import lru_cache

from localekit.configuration import Settings
from localekit.i18n.factory import create_locale_negotiator, create_translator
from localekit.i18n.resolvers import LocaleNegotiator
from localekit.i18n.translator import GettextTranslator


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_locale_negotiator() -> LocaleNegotiator:
    """
    Get application-scoped LocaleNegotiator singleton.

    The negotiator only holds its default locale, so one instance is shared
    by all requests.
    """
    return create_locale_negotiator(get_settings().i18n)


@lru_cache
def get_translator() -> GettextTranslator:
    """
    Get application-scoped GettextTranslator singleton.

    Returns:
        GettextTranslator: Translator bound to the configured directories.
    """
    return create_translator(get_settings().i18n)
