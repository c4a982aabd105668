"""Feature-level fixtures for i18n tests.

Provides in-memory gettext catalogs standing in for compiled .mo files.
"""

import gettext

import pytest

from localekit.i18n import GettextTranslator


class DictTranslations(gettext.NullTranslations):
    """gettext catalog backed by a dict.

    Plain entries map msgid to a string; plural entries map the singular
    msgid to a (singular, plural) tuple selected with the n != 1 rule.
    """

    def __init__(self, messages):
        super().__init__()
        self._messages = messages

    def gettext(self, message):
        translation = self._messages.get(message)
        if isinstance(translation, str):
            return translation
        return message

    def ngettext(self, msgid1, msgid2, n):
        forms = self._messages.get(msgid1)
        if isinstance(forms, tuple):
            return forms[0 if n == 1 else 1]
        return msgid1 if n == 1 else msgid2


CATALOGS = {
    "de_DE": {
        "default": {
            "user": "Benutzer",
            "group": "Gruppe",
            "context\x04request": "Anfrage",
            "%d user": ("ein Benutzer", "%d Benutzer"),
            "%d group": ("eine Gruppe", "%d Gruppen"),
            "context\x04%d request": ("eine Anfrage", "%d Anfragen"),
        },
        "special": {
            "user": "Benutzer (special)",
            "context\x04request": "Anfrage (special)",
            "%d user": ("ein Benutzer (special)", "%d Benutzer (special)"),
            "context\x04%d request": (
                "eine Anfrage (special)",
                "%d Anfragen (special)",
            ),
        },
    },
    "it_IT": {
        "default": {
            "user": "utente",
            "context\x04request": "richiesta",
            "%d user": ("un utente", "%d utenti"),
            "context\x04%d request": ("una richiesta", "%d richieste"),
        },
        "special": {
            "user": "utente (special)",
            "context\x04request": "richiesta (special)",
            "%d user": ("un utente (special)", "%d utenti (special)"),
            "context\x04%d request": (
                "una richiesta (special)",
                "%d richieste (special)",
            ),
        },
    },
}


@pytest.fixture
def catalog_factory():
    """Catalog factory serving CATALOGS and recording each load."""
    calls = []

    def factory(domain, directory, locale):
        calls.append((domain, directory, locale))
        return DictTranslations(CATALOGS.get(locale, {}).get(domain, {}))

    factory.calls = calls
    return factory


@pytest.fixture
def translations_dir(tmp_path):
    """Existing directory to register as a catalog location."""
    directory = tmp_path / "locale"
    directory.mkdir()
    return str(directory)


@pytest.fixture
def translator(catalog_factory, translations_dir):
    """GettextTranslator with default and special domains, de_DE current."""
    return (
        GettextTranslator(catalog_factory=catalog_factory)
        .add_translation_directory(translations_dir)
        .add_translation_directory(translations_dir, "special")
        .set_locale("de_DE")
        .load_translation("it_IT")
    )


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_de": "de",
        "specific_de_de": "de-DE",
        "with_quality": "de-DE,de;q=0.9,en;q=0.8",
        "multiple": "fr-FR,fr;q=0.9,it-IT;q=0.8,de;q=0.7",
        "invalid_quality": "de_DE;q=invalid,it_IT;q=0.1",
    }
