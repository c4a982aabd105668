"""i18n system - message translation and locale negotiation.

Main components:
- models: SplitLocale, WeightedTag, LocaleCode
- resolvers: parse_accept_language, LocaleNegotiator, LocaleResolver
- translator: Translator protocol, GettextTranslator, NoopTranslator
- static: StaticTranslator, t(), tp(), TranslationMixin
- factory: create_translator, create_locale_negotiator
"""

from localekit.i18n.factory import create_locale_negotiator, create_translator
from localekit.i18n.models import LocaleCode, SplitLocale, WeightedTag
from localekit.i18n.resolvers import (
    LocaleNegotiator,
    LocaleResolver,
    parse_accept_language,
    requested_locales,
)
from localekit.i18n.static import StaticTranslator, TranslationMixin, t, tp
from localekit.i18n.translator import (
    GettextTranslator,
    NoopTranslator,
    TranslationLoadError,
    Translator,
)

__all__ = [
    "LocaleCode",
    "SplitLocale",
    "WeightedTag",
    "LocaleNegotiator",
    "LocaleResolver",
    "parse_accept_language",
    "requested_locales",
    "Translator",
    "GettextTranslator",
    "NoopTranslator",
    "TranslationLoadError",
    "StaticTranslator",
    "TranslationMixin",
    "t",
    "tp",
    "create_translator",
    "create_locale_negotiator",
]
