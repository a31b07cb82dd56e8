"""Language Strings — centralized locale-specific text for sync reports.

Invariants:
    - All strings are pure data (no IO, no computation beyond formatting)
    - Covers every locale in the Locale enum
    - Skip messages always contain the film title; failure messages always contain the uid

Design Decisions:
    - Report text localized, error envelopes not: the report is read by catalog
      editors, error codes are read by clients
    - Spanish kept alongside English: several catalog editors work in it
"""

from holocron.core.domain_types import Locale


_SYNC_COMPLETED: dict[Locale, str] = {
    Locale.EN: "Sync completed",
    Locale.ES: "Sincronización completada",
}

_SKIPPED_MODIFIED: dict[Locale, str] = {
    Locale.EN: 'Film "{title}" skipped: it has been modified locally',
    Locale.ES: 'Película "{title}" omitida: ha sido modificada localmente',
}

_ITEM_FAILED: dict[Locale, str] = {
    Locale.EN: "Error with film {uid}: {cause}",
    Locale.ES: "Error con película {uid}: {cause}",
}


def get_sync_completed(locale: Locale) -> str:
    """Headline message of a finished sync report."""
    return _SYNC_COMPLETED[locale]


def format_skipped_modified(locale: Locale, title: str) -> str:
    """Reason attached to a SKIP decision."""
    return _SKIPPED_MODIFIED[locale].format(title=title)


def format_item_failed(locale: Locale, uid: str, cause: str) -> str:
    """Error entry for an item whose write failed."""
    return _ITEM_FAILED[locale].format(uid=uid, cause=cause)
