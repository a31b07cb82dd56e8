"""Language Strings tests — pure data functions for sync report text.

Tests cover:
    - All locales have entries for headline, skip and failure messages
    - Placeholders format correctly
"""

from holocron.core.domain_types import Locale
from holocron.core.language_strings import (
    format_item_failed,
    format_skipped_modified,
    get_sync_completed,
)


def test_every_locale_has_all_messages():
    for locale in Locale:
        assert get_sync_completed(locale)
        assert "Jedi" in format_skipped_modified(locale, "Return of the Jedi")
        assert "6" in format_item_failed(locale, "6", "boom")


def test_english_messages():
    assert get_sync_completed(Locale.EN) == "Sync completed"
    assert format_item_failed(Locale.EN, "3", "disk full") == "Error with film 3: disk full"


def test_spanish_messages():
    assert get_sync_completed(Locale.ES) == "Sincronización completada"
    assert format_skipped_modified(Locale.ES, "A New Hope") == (
        'Película "A New Hope" omitida: ha sido modificada localmente'
    )
    assert format_item_failed(Locale.ES, "1", "x") == "Error con película 1: x"
