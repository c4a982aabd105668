"""localekit - gettext-backed message translation and locale negotiation.

Main components:
- configuration: I18nSettings and the Settings aggregator
- logging: structlog setup and module loggers
- i18n: LocaleCode, LocaleNegotiator, GettextTranslator and static helpers
- services: FastAPI dependency providers
"""

__version__ = "0.1.0"
