"""Locale models for the i18n system.

Defines the values produced while parsing locale tags and Accept-Language
headers, and the LocaleCode parser that splits a tag into language and
country for comparison.
"""

import re
from dataclasses import dataclass
from typing import Optional

DEFAULT_LOCALE = "en_US"

# POSIX "no locale" sentinel
C_LOCALE = "C"

_LANGUAGE_COUNTRY_PATTERN = re.compile(r"([a-zA-Z]{2})[_-]([a-zA-Z]{2})")
_SEPARATOR_PATTERN = re.compile(r"[_-]")


@dataclass(frozen=True)
class SplitLocale:
    """Language and country parts of a locale tag.

    Attributes:
        language: Language part (e.g., "en"), in the case it was captured.
        country: Country part (e.g., "US"), or None for language-only tags.
    """

    language: str
    country: Optional[str] = None

    def is_same_language(self, other: "SplitLocale") -> bool:
        """Return True when both locales carry the same language part."""
        return self.language == other.language


@dataclass(frozen=True)
class WeightedTag:
    """A single entry of an Accept-Language header.

    Attributes:
        raw_tag: The entry as it appeared in the header, weight suffix included.
        q_value: Client weight, 1.0 when the entry carries none.
        index: Position in the header, used to keep equal weights in order.
    """

    raw_tag: str
    q_value: float = 1.0
    index: int = 0

    @property
    def tag(self) -> str:
        """Tag without its weight suffix."""
        if self.raw_tag.find(";") > 0:
            return self.raw_tag.split(";", 1)[0]
        return self.raw_tag


class LocaleCode:
    """Splits locale tags into language and country parts.

    The result is only meant as a comparison key, never for catalog lookup.

    Attributes:
        default_locale: Locale used to expand the POSIX "C" locale.
    """

    def __init__(self, default_locale: str = DEFAULT_LOCALE):
        self.default_locale = default_locale

    def split(
        self,
        locale: Optional[str] = None,
        current_locale: Optional[str] = None,
    ) -> SplitLocale:
        """Split a locale tag into language and country.

        The first ``xx_YY`` or ``xx-YY`` pair found anywhere in the tag wins.
        The "C" locale is expanded to the default locale. Anything else is
        taken as a bare language.

        Args:
            locale: Tag to split (e.g., "en_US", "de-DE", "C", "de").
            current_locale: Tag to split when locale is None. There is no
                lookup of the process locale; callers pass it explicitly.

        Returns:
            SplitLocale for the tag. Never raises.
        """
        if locale is None:
            locale = current_locale if current_locale is not None else ""

        match = _LANGUAGE_COUNTRY_PATTERN.search(locale)
        if match:
            return SplitLocale(language=match.group(1), country=match.group(2))

        if locale == C_LOCALE:
            parts = _SEPARATOR_PATTERN.split(self.default_locale, maxsplit=1)
            return SplitLocale(
                language=parts[0],
                country=parts[1] if len(parts) > 1 else None,
            )

        return SplitLocale(language=locale)
