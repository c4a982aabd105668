"""Locale resolution logic for determining a client's preferred language.

Parses Accept-Language headers and negotiates the best match among the
locales a deployment has translations for.
"""

import re
from typing import Any, Dict, Iterable, List, Optional

from localekit.i18n.models import DEFAULT_LOCALE, LocaleCode, WeightedTag
from localekit.logging import get_module_logger

logger = get_module_logger()

# Leading numeric prefix, the way a lenient string-to-float cast reads it
_FLOAT_PREFIX_PATTERN = re.compile(
    r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)"
)


def _coerce_q_value(text: str) -> float:
    """Read the numeric prefix of text as a float, 0.0 if there is none."""
    match = _FLOAT_PREFIX_PATTERN.match(text)
    if not match:
        return 0.0
    return float(match.group(1))


def parse_accept_language(header: str) -> List[WeightedTag]:
    """Parse an Accept-Language header into weighted tags, most preferred first.

    The weight is whatever follows the first ``;`` with its two leading
    characters (``q=``) dropped. Entries without a ``;`` weigh 1.0 and
    unparsable weights count as 0.0. Equal weights keep header order.

    Args:
        header: Header value (e.g., "de-DE,de;q=0.9,en;q=0.5").

    Returns:
        WeightedTag list sorted by descending weight.
    """
    tags = []
    for index, part in enumerate(header.split(",")):
        entry = part
        q_value = 1.0
        if entry.find(";") > 0:
            q_value = _coerce_q_value(entry.split(";", 1)[1][2:])
        tags.append(WeightedTag(raw_tag=entry, q_value=q_value, index=index))

    return sorted(tags, key=lambda tag: (-tag.q_value, tag.index))


def requested_locales(header: str) -> List[str]:
    """Return the header's locale tags by preference, with ``-`` replaced by ``_``."""
    return [tag.tag.replace("-", "_") for tag in parse_accept_language(header)]


def _lowercase_lookup(locales: Iterable[str]) -> Dict[str, str]:
    """Map each lower-cased locale to the last original casing seen for it."""
    lookup: Dict[str, str] = {}
    for locale in locales:
        lookup[locale.lower()] = locale
    return lookup


class LocaleNegotiator:
    """Matches a client's weighted locale preferences against available locales.

    An available locale equal to a requested one (case-insensitively) is an
    exact match. One sharing only the language is a similar match, e.g. a
    request for "en-GB" when only "en_US" is available. Exact matches win
    immediately unless a similar match for another language was already
    recorded from a more preferred tag.

    Attributes:
        default_locale: Returned when nothing matches.
    """

    def __init__(self, default_locale: str = DEFAULT_LOCALE):
        self.default_locale = default_locale

    def get_preferred_locale(self, header: str, available: Iterable[str]) -> str:
        """Return the preferred available locale for header, or the default."""
        return self.negotiate(header, available)

    def negotiate(
        self,
        header: str,
        available: Iterable[str],
        default_locale: Optional[str] = None,
    ) -> str:
        """Negotiate the best available locale for an Accept-Language header.

        Args:
            header: Accept-Language header value.
            available: Locales translations exist for. Order matters when
                several share a language: the first one is the similar match.
            default_locale: Overrides the configured default for this call.

        Returns:
            An available locale in its original casing, or the default
            verbatim. Never raises.
        """
        default = self.default_locale if default_locale is None else default_locale
        locale_code = LocaleCode(default)

        requested = _lowercase_lookup(requested_locales(header))
        available_locales = _lowercase_lookup(available)

        similar_match: Optional[str] = None

        for requested_lowered in requested:
            requested_locale = locale_code.split(requested_lowered)

            if requested_lowered in available_locales and (
                similar_match is None
                or locale_code.split(similar_match).is_same_language(requested_locale)
            ):
                result = available_locales[requested_lowered]
                logger.debug(
                    "negotiated_exact_locale", accept_language=header, locale=result
                )
                return result

            if similar_match is None:
                for available_lowered in available_locales:
                    if locale_code.split(available_lowered).is_same_language(
                        requested_locale
                    ):
                        similar_match = available_lowered
                        break

        if similar_match is not None:
            result = available_locales[similar_match]
            logger.debug(
                "negotiated_similar_locale", accept_language=header, locale=result
            )
            return result

        logger.debug(
            "negotiated_default_locale", accept_language=header, locale=default
        )
        return default


class LocaleResolver:
    """Resolves a request's locale from its Accept-Language header.

    Binds a LocaleNegotiator to the locales a deployment offers.
    """

    def __init__(
        self,
        negotiator: Optional[LocaleNegotiator] = None,
        available_locales: Optional[Iterable[str]] = None,
    ):
        """Initialize locale resolver.

        Args:
            negotiator: Negotiator to delegate to (default: en_US fallback).
            available_locales: Locales offered when a call does not pass its own.
        """
        self.negotiator = negotiator or LocaleNegotiator()
        self.available_locales = list(available_locales or [])

    @property
    def default_locale(self) -> str:
        """Locale returned when the request carries no Accept-Language."""
        return self.negotiator.default_locale

    def resolve_from_header(
        self,
        accept_language: Optional[str],
        available_locales: Optional[Iterable[str]] = None,
    ) -> str:
        """Resolve locale from an HTTP Accept-Language header.

        Args:
            accept_language: Header value, None when the header is absent.
            available_locales: Overrides the bound available locales.

        Returns:
            Negotiated locale, or the default when the header is missing.
        """
        if not accept_language:
            return self.default_locale

        available = (
            self.available_locales
            if available_locales is None
            else list(available_locales)
        )
        return self.negotiator.get_preferred_locale(accept_language, available)

    def resolve_from_request(self, request: Any) -> str:
        """Resolve locale from any request object exposing ``headers``."""
        headers = getattr(request, "headers", None)
        accept_language = None
        if headers is not None:
            accept_language = headers.get("accept-language")
        return self.resolve_from_header(accept_language)
