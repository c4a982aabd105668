"""Translation services backed by gettext catalogs.

Defines the Translator protocol, a no-op implementation, and
GettextTranslator which looks messages up in per-locale, per-domain
``gettext`` catalogs.
"""

import gettext
from pathlib import Path
from typing import Callable, Dict, Optional, Protocol, runtime_checkable

from localekit.i18n.models import DEFAULT_LOCALE
from localekit.logging import get_module_logger

logger = get_module_logger()

DEFAULT_DOMAIN = "default"

# Separator between context and message in compiled catalogs (gettext >= 0.15)
CONTEXT_GLUE = "\x04"

CatalogFactory = Callable[[str, str, str], gettext.NullTranslations]


class TranslationLoadError(ValueError):
    """Raised when a translation directory cannot be bound."""


@runtime_checkable
class Translator(Protocol):
    """Interface shared by all translators."""

    def translate(self, message: str, context: Optional[str] = None) -> str: ...

    def translate_in_domain(
        self, domain: str, message: str, context: Optional[str] = None
    ) -> str: ...

    def translate_plural(
        self,
        singular: str,
        plural: str,
        number: int,
        context: Optional[str] = None,
    ) -> str: ...

    def translate_plural_in_domain(
        self,
        domain: str,
        singular: str,
        plural: str,
        number: int,
        context: Optional[str] = None,
    ) -> str: ...


class NoopTranslator:
    """Translator that returns the original messages."""

    def translate(self, message: str, context: Optional[str] = None) -> str:
        return message

    def translate_in_domain(
        self, domain: str, message: str, context: Optional[str] = None
    ) -> str:
        return message

    def translate_plural(
        self,
        singular: str,
        plural: str,
        number: int,
        context: Optional[str] = None,
    ) -> str:
        return singular if number == 1 else plural

    def translate_plural_in_domain(
        self,
        domain: str,
        singular: str,
        plural: str,
        number: int,
        context: Optional[str] = None,
    ) -> str:
        return singular if number == 1 else plural


def load_gettext_catalog(
    domain: str, directory: str, locale: str
) -> gettext.NullTranslations:
    """Load ``<directory>/<locale>/LC_MESSAGES/<domain>.mo``.

    A missing catalog yields an empty NullTranslations, so lookups return
    their input.
    """
    return gettext.translation(
        domain, localedir=directory, languages=[locale], fallback=True
    )


class GettextTranslator:
    """Translator looking messages up in gettext catalogs.

    Catalog directories are registered per domain and loaded per locale.
    Lookups go to the current locale unless a locale is passed explicitly,
    and a message without translation is returned as is.

    Attributes:
        default_domain: Domain for plain lookups and domain fallback.
        default_locale: Default locale code.
        locale: Current locale, None until set_locale() is called.
    """

    def __init__(
        self,
        default_domain: str = DEFAULT_DOMAIN,
        default_locale: str = DEFAULT_LOCALE,
        catalog_factory: Optional[CatalogFactory] = None,
    ):
        """Initialize GettextTranslator.

        Args:
            default_domain: Domain used by translate() and translate_plural().
            default_locale: Default locale code.
            catalog_factory: Callable (domain, directory, locale) returning a
                gettext translations object. Defaults to load_gettext_catalog.
        """
        self.default_domain = default_domain
        self.default_locale = default_locale
        self.locale: Optional[str] = None
        self._catalog_factory = catalog_factory or load_gettext_catalog
        self._translation_directories: Dict[str, str] = {}
        self._loaded_translations: Dict[str, Dict[str, str]] = {}
        self._catalogs: Dict[str, Dict[str, gettext.NullTranslations]] = {}

    def set_default_domain(self, default_domain: str) -> "GettextTranslator":
        self.default_domain = default_domain
        return self

    def set_default_locale(self, default_locale: str) -> "GettextTranslator":
        self.default_locale = default_locale
        return self

    @property
    def translation_directories(self) -> Dict[str, str]:
        """Registered directories as {domain: directory}."""
        return dict(self._translation_directories)

    @property
    def loaded_translations(self) -> Dict[str, Dict[str, str]]:
        """Loaded catalogs as {locale: {domain: directory}}."""
        return {
            locale: dict(domains)
            for locale, domains in self._loaded_translations.items()
        }

    def add_translation_directory(
        self, directory: str, domain: Optional[str] = None
    ) -> "GettextTranslator":
        """Register a catalog directory for domain (default domain if omitted)."""
        self._translation_directories[domain or self.default_domain] = str(directory)
        return self

    def load_translation(self, locale: str) -> "GettextTranslator":
        """Load the catalogs of every registered domain for locale.

        Domains already loaded from the same directory are skipped.

        Raises:
            TranslationLoadError: If a registered directory does not exist.
        """
        loaded = self._loaded_translations.setdefault(locale, {})
        catalogs = self._catalogs.setdefault(locale, {})

        for domain, directory in self._translation_directories.items():
            if loaded.get(domain) == directory:
                continue

            if not Path(directory).is_dir():
                logger.error(
                    "translation_directory_not_found",
                    domain=domain,
                    directory=directory,
                )
                raise TranslationLoadError(
                    f"Can't register domain '{domain}' with path '{directory}'"
                )

            catalogs[domain] = self._catalog_factory(domain, directory, locale)
            loaded[domain] = directory
            logger.info(
                "loaded_translation", locale=locale, domain=domain, directory=directory
            )

        return self

    def set_locale(self, locale: str) -> "GettextTranslator":
        """Load locale and make it the current locale."""
        self.load_translation(locale)
        self.locale = locale
        return self

    def encode_message_with_context(self, message: str, context: str) -> str:
        """Encode a message with context the way compiled catalogs store it."""
        return f"{context}{CONTEXT_GLUE}{message}"

    def translate(
        self,
        message: str,
        context: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> str:
        message_for_gettext = self._with_context(message, context)
        translation = self._gettext(
            self.default_domain, message_for_gettext, locale
        )

        if translation == message_for_gettext:
            return message

        return translation

    def translate_in_domain(
        self,
        domain: str,
        message: str,
        context: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> str:
        """Translate message in domain, falling back to the default domain."""
        message_for_gettext = self._with_context(message, context)
        translation = self._gettext(domain, message_for_gettext, locale)

        if translation == message_for_gettext:
            translation = self._gettext(
                self.default_domain, message_for_gettext, locale
            )

        if translation == message_for_gettext:
            return message

        return translation

    def translate_plural(
        self,
        singular: str,
        plural: str,
        number: int,
        context: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> str:
        """Translate a plural message; untranslated, number picks the form."""
        singular_for_gettext = self._with_context(singular, context)
        translation = self._ngettext(
            self.default_domain, singular_for_gettext, plural, number, locale
        )

        if translation == singular_for_gettext:
            return singular if number == 1 else plural

        return translation

    def translate_plural_in_domain(
        self,
        domain: str,
        singular: str,
        plural: str,
        number: int,
        context: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> str:
        """Translate a plural message in domain, falling back to the default domain."""
        singular_for_gettext = self._with_context(singular, context)
        translation = self._ngettext(
            domain, singular_for_gettext, plural, number, locale
        )

        is_singular = number == 1
        if translation == (singular_for_gettext if is_singular else plural):
            translation = self._ngettext(
                self.default_domain, singular_for_gettext, plural, number, locale
            )

        if translation == singular_for_gettext:
            return singular if is_singular else plural

        return translation

    def _with_context(self, message: str, context: Optional[str]) -> str:
        if context is None:
            return message
        return self.encode_message_with_context(message, context)

    def _catalog(
        self, domain: str, locale: Optional[str]
    ) -> Optional[gettext.NullTranslations]:
        return self._catalogs.get(locale or self.locale or "", {}).get(domain)

    def _gettext(self, domain: str, message: str, locale: Optional[str]) -> str:
        catalog = self._catalog(domain, locale)
        if catalog is None:
            return message
        return catalog.gettext(message)

    def _ngettext(
        self,
        domain: str,
        singular: str,
        plural: str,
        number: int,
        locale: Optional[str],
    ) -> str:
        catalog = self._catalog(domain, locale)
        if catalog is None:
            return singular if number == 1 else plural
        return catalog.ngettext(singular, plural, number)
