"""Factory functions for creating i18n components.

Provides convenience functions for initializing translators and negotiators
from I18nSettings.
"""

from typing import Optional

from localekit.configuration import I18nSettings
from localekit.i18n.resolvers import LocaleNegotiator
from localekit.i18n.translator import CatalogFactory, GettextTranslator
from localekit.logging import get_module_logger

logger = get_module_logger()


def create_translator(
    settings: Optional[I18nSettings] = None,
    catalog_factory: Optional[CatalogFactory] = None,
) -> GettextTranslator:
    """Create and configure a GettextTranslator.

    Registers every configured translation directory and, when there is at
    least one, makes the default locale current and loads every available
    locale so per-call lookups can target them.

    Args:
        settings: I18n settings (default: loaded from the environment)
        catalog_factory: Optional catalog loader override

    Returns:
        GettextTranslator: Configured translator instance

    Raises:
        TranslationLoadError: If a configured directory does not exist

    Usage:
        translator = create_translator()
        translator.translate("user")
    """
    settings = settings or I18nSettings()

    translator = GettextTranslator(
        default_domain=settings.DEFAULT_DOMAIN,
        default_locale=settings.DEFAULT_LOCALE,
        catalog_factory=catalog_factory,
    )
    for domain, directory in settings.TRANSLATION_DIRECTORIES.items():
        translator.add_translation_directory(directory, domain)

    if settings.TRANSLATION_DIRECTORIES:
        translator.set_locale(settings.DEFAULT_LOCALE)
        for locale in settings.AVAILABLE_LOCALES:
            translator.load_translation(locale)

    logger.info(
        "translator_created",
        default_domain=settings.DEFAULT_DOMAIN,
        default_locale=settings.DEFAULT_LOCALE,
        domain_count=len(settings.TRANSLATION_DIRECTORIES),
        available_count=len(settings.AVAILABLE_LOCALES),
    )
    return translator


def create_locale_negotiator(
    settings: Optional[I18nSettings] = None,
) -> LocaleNegotiator:
    """Create a LocaleNegotiator falling back to the configured default locale."""
    settings = settings or I18nSettings()
    return LocaleNegotiator(default_locale=settings.DEFAULT_LOCALE)
