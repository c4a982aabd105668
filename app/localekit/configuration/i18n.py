"""Internationalization settings."""

import json
from typing import Annotated, Any, Dict, List

from pydantic import Field, field_validator
from pydantic_settings import NoDecode

from localekit.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Translation and locale negotiation configuration.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale returned when negotiation finds no match
            and used to expand the POSIX "C" locale (default: en_US)
        I18N_DEFAULT_DOMAIN: Gettext domain used for plain lookups (default: default)
        I18N_AVAILABLE_LOCALES: Locales offered to clients, as a JSON list or a
            comma-separated string
        I18N_TRANSLATION_DIRECTORIES: JSON object mapping domain to catalog directory

    Example:
        ```python
        from localekit.services import get_settings

        settings = get_settings()
        default_locale = settings.i18n.DEFAULT_LOCALE
        available = settings.i18n.AVAILABLE_LOCALES
        ```
    """

    DEFAULT_LOCALE: str = Field(default="en_US", alias="I18N_DEFAULT_LOCALE")
    DEFAULT_DOMAIN: str = Field(default="default", alias="I18N_DEFAULT_DOMAIN")
    AVAILABLE_LOCALES: Annotated[List[str], NoDecode] = Field(
        default_factory=list, alias="I18N_AVAILABLE_LOCALES"
    )
    TRANSLATION_DIRECTORIES: Dict[str, str] = Field(
        default_factory=dict, alias="I18N_TRANSLATION_DIRECTORIES"
    )

    @field_validator("AVAILABLE_LOCALES", mode="before")
    @classmethod
    def _parse_available_locales(cls, value: Any) -> Any:
        """Accept a JSON list or a comma-separated string."""
        if isinstance(value, str):
            if value.strip().startswith("["):
                return json.loads(value)
            return [part.strip() for part in value.split(",") if part.strip()]
        return value
