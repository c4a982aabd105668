"""Configuration module - public API.

Exports:
    Settings: Main settings class
    I18nSettings: Translation and negotiation settings

Example:
    ```python
    from localekit.services import get_settings

    settings = get_settings()
    default_locale = settings.i18n.DEFAULT_LOCALE
    ```
"""

from localekit.configuration.i18n import I18nSettings
from localekit.configuration.settings import Settings

__all__ = ["Settings", "I18nSettings"]
