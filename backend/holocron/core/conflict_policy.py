"""Conflict Resolution Policy — decides whether an external film may overwrite the local copy.

Invariants:
    - decide() is PURE and TOTAL over three cases: absent -> CREATE,
      unmodified -> UPDATE, modified -> SKIP (with reason)
    - Content differences are never inspected — is_modified alone gates overwrite
    - Only SKIP carries a reason; it names the film by its feed title

Design Decisions:
    - All-or-nothing over field-level merge: one local edit protects the whole
      record from every future feed update (ADR: kept until product asks for merge)
    - existing typed as a structural Protocol: works with ORM rows and test doubles alike
"""

from dataclasses import dataclass
from typing import Protocol

from holocron.core.domain_types import Locale, SyncAction
from holocron.core.external_film import ExternalFilm
from holocron.core.language_strings import format_skipped_modified


class FilmLike(Protocol):
    """The only attribute the policy reads from a stored film."""
    is_modified: bool


@dataclass(frozen=True)
class SyncDecision:
    action: SyncAction
    reason: str | None = None


def decide(
    existing: FilmLike | None,
    incoming: ExternalFilm,
    locale: Locale = Locale.ES,
) -> SyncDecision:
    """Decide CREATE / UPDATE / SKIP for one external film."""
    if existing is None:
        return SyncDecision(SyncAction.CREATE)
    if not existing.is_modified:
        return SyncDecision(SyncAction.UPDATE)
    return SyncDecision(
        SyncAction.SKIP,
        reason=format_skipped_modified(locale, incoming.properties.title),
    )
