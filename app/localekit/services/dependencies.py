"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for i18n dependencies.
"""

from typing import Annotated

from fastapi import Depends, Request

from localekit.configuration import Settings
from localekit.i18n.resolvers import LocaleNegotiator, LocaleResolver
from localekit.i18n.translator import GettextTranslator
from localekit.services.providers import (
    get_locale_negotiator,
    get_settings,
    get_translator,
)

SettingsDep = Annotated[Settings, Depends(get_settings)]

LocaleNegotiatorDep = Annotated[LocaleNegotiator, Depends(get_locale_negotiator)]

TranslatorDep = Annotated[GettextTranslator, Depends(get_translator)]


def get_preferred_locale(
    request: Request,
    negotiator: LocaleNegotiatorDep,
    settings: SettingsDep,
) -> str:
    """Negotiate the request's locale against the configured available locales.

    Usage:
        @router.get("/greeting")
        def greeting(locale: PreferredLocaleDep, translator: TranslatorDep):
            return {"message": translator.translate("Hello", locale=locale)}
    """
    resolver = LocaleResolver(negotiator, settings.i18n.AVAILABLE_LOCALES)
    return resolver.resolve_from_request(request)


PreferredLocaleDep = Annotated[str, Depends(get_preferred_locale)]

__all__ = [
    "SettingsDep",
    "LocaleNegotiatorDep",
    "TranslatorDep",
    "PreferredLocaleDep",
    "get_preferred_locale",
]
