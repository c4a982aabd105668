"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from localekit.services.dependencies import (
    LocaleNegotiatorDep,
    PreferredLocaleDep,
    SettingsDep,
    TranslatorDep,
    get_preferred_locale,
)
from localekit.services.providers import (
    get_locale_negotiator,
    get_settings,
    get_translator,
)

__all__ = [
    "SettingsDep",
    "LocaleNegotiatorDep",
    "TranslatorDep",
    "PreferredLocaleDep",
    "get_preferred_locale",
    "get_settings",
    "get_locale_negotiator",
    "get_translator",
]
