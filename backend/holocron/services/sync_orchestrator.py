"""Sync Orchestrator — one synchronization pass from the feed into the catalog.

Invariants:
    - Feed fetch failure aborts the pass with SyncAbortedError; no report is produced
    - Films are processed in feed order; one failing film never stops the next
    - A feed entry that could not be decoded is a per-item failure, like a failed write
    - Any store error on one film (lookup or write) is a per-item failure
    - CREATE writes source=external, is_modified=False, last_sync_date=now
    - UPDATE writes content fields + last_sync_date only — never source or is_modified
    - SKIP (locally modified) writes nothing and is reported, not counted as failed
    - Sync never deletes
    - report.total == success + failed + skipped on return

Design Decisions:
    - Impureim sandwich: fetch (IO) -> decide (pure, core/conflict_policy) -> write (IO)
    - Created films pass through validate_film_fields: a feed entry the catalog
      could not have accepted locally is a per-item failure, not a corrupt row
    - Clock injected: last_sync_date is deterministic in tests
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from holocron.core.conflict_policy import decide
from holocron.core.domain_types import Locale, Source, SyncAction
from holocron.core.errors import (
    HolocronError, ResourceNotFoundError, SourceUnavailableError, SyncAbortedError,
    ValidationFailedError,
)
from holocron.core.external_film import ExternalFilm, UndecodableFilm
from holocron.core.language_strings import format_item_failed, get_sync_completed
from holocron.core.repository_protocols import ExternalSource, FilmRecord, FilmStore
from holocron.core.sync_report import SyncReport
from holocron.core.validate_film import validate_film_fields

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SyncOrchestrator:
    """Drives run_sync(): feed -> conflict policy -> store."""

    def __init__(
        self,
        source: ExternalSource,
        store: FilmStore,
        locale: Locale = Locale.ES,
        now: Callable[[], datetime] = _utcnow,
    ):
        self._source = source
        self._store = store
        self._locale = locale
        self._now = now

    async def run_sync(self) -> SyncReport:
        """Run one full pass. Raises SyncAbortedError if the feed is unreachable."""
        logger.info("Sync pass started")
        try:
            films = await self._source.fetch_collection()
        except SourceUnavailableError as e:
            logger.error(
                f"Sync aborted: {e.message}",
                extra={"error_code": "SYNC_ABORTED", "url": e.url},
            )
            raise SyncAbortedError(e) from e

        report = SyncReport(message=get_sync_completed(self._locale), total=len(films))
        for incoming in films:
            await self._sync_one(incoming, report)

        logger.info(
            "Sync pass finished",
            extra={
                "total": report.total, "success": report.success,
                "failed": report.failed, "skipped": report.skipped,
            },
        )
        return report

    async def _sync_one(
        self, incoming: ExternalFilm | UndecodableFilm, report: SyncReport,
    ) -> None:
        if isinstance(incoming, UndecodableFilm):
            self._record_failure(report, incoming.uid, incoming.reason, "UNDECODABLE_FILM")
            return
        try:
            existing = await self._store.find_by_external_id(incoming.uid)
            decision = decide(existing, incoming, self._locale)
            if decision.action == SyncAction.SKIP:
                report.record_skip(decision.reason or "")
                logger.info(
                    f"Skipped locally modified film '{incoming.properties.title}'",
                    extra={"uid": incoming.uid},
                )
                return
            if decision.action == SyncAction.CREATE:
                await self._create(incoming)
            else:
                await self._update(existing, incoming)
            report.record_success()
        except HolocronError as e:
            self._record_failure(report, incoming.uid, e.message, e.code)

    def _record_failure(
        self, report: SyncReport, uid: str, cause: str, error_code: str,
    ) -> None:
        logger.warning(
            f"Sync failed for film {uid}: {cause}",
            extra={"uid": uid, "error_code": error_code},
        )
        report.record_failure(format_item_failed(self._locale, uid, cause))

    async def _create(self, incoming: ExternalFilm) -> None:
        fields = {**incoming.to_content_fields(), "uid": incoming.uid}
        violations = validate_film_fields(fields)
        if violations:
            raise ValidationFailedError(violations)
        await self._store.create({
            **fields,
            "source": Source.EXTERNAL.value,
            "is_modified": False,
            "last_sync_date": self._now(),
        })

    async def _update(self, existing: FilmRecord, incoming: ExternalFilm) -> None:
        film_id = existing.id
        updated = await self._store.update(film_id, {
            **incoming.to_content_fields(),
            "last_sync_date": self._now(),
        })
        if updated is None:
            # Deleted between lookup and write
            raise ResourceNotFoundError("Film", str(film_id))
