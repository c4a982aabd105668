"""Process-wide translator and shorthand helpers.

Usage:
    from localekit.i18n import StaticTranslator, t, tp

    StaticTranslator.instance = create_translator()

    t("user")
    tp("%d user", "%d users", count) % count
"""

from typing import Optional

from localekit.i18n.translator import NoopTranslator, Translator


class StaticTranslator:
    """Holder of the translator used by t(), tp() and TranslationMixin."""

    instance: Translator = NoopTranslator()


def t(message: str, context: Optional[str] = None) -> str:
    """Translate a message.

    Returns:
        Translated message or the original message if no translation is found.
    """
    return StaticTranslator.instance.translate(message, context)


def tp(
    singular: str,
    plural: str,
    number: Optional[int] = None,
    context: Optional[str] = None,
) -> str:
    """Translate a plural message.

    number decides between the singular and plural forms, also when no
    translation is found. None counts as 0.
    """
    return StaticTranslator.instance.translate_plural(
        singular, plural, number if number is not None else 0, context
    )


class TranslationMixin:
    """Adds translate methods delegating to StaticTranslator.instance."""

    def translate(self, message: str, context: Optional[str] = None) -> str:
        return StaticTranslator.instance.translate(message, context)

    def translate_in_domain(
        self, domain: str, message: str, context: Optional[str] = None
    ) -> str:
        """Translate in domain; the default domain is searched as well."""
        return StaticTranslator.instance.translate_in_domain(domain, message, context)

    def translate_plural(
        self,
        singular: str,
        plural: str,
        number: int,
        context: Optional[str] = None,
    ) -> str:
        return StaticTranslator.instance.translate_plural(
            singular, plural, number, context
        )

    def translate_plural_in_domain(
        self,
        domain: str,
        singular: str,
        plural: str,
        number: int,
        context: Optional[str] = None,
    ) -> str:
        return StaticTranslator.instance.translate_plural_in_domain(
            domain, singular, plural, number, context
        )
