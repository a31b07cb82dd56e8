"""Sync Report — mutable accumulator for the outcome of one sync pass.

Invariants:
    - total = success + failed + skipped once every fetched film is recorded
    - errors keeps insertion order: one entry per failure AND per skip
    - A skip is not an error: it never touches success or failed

Design Decisions:
    - Dataclass with record_* methods over ad-hoc dict mutation in the orchestrator:
      the arithmetic invariant is testable without IO
    - skipped counted explicitly (not derived from errors): errors mixes two kinds
"""

from dataclasses import dataclass, field


@dataclass
class SyncReport:
    message: str
    total: int = 0
    success: int = 0
    failed: int = 0
    skipped: int = 0
    errors: list[str] = field(default_factory=list)

    def record_success(self) -> None:
        self.success += 1

    def record_failure(self, entry: str) -> None:
        self.failed += 1
        self.errors.append(entry)

    def record_skip(self, reason: str) -> None:
        self.skipped += 1
        self.errors.append(reason)

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            "total": self.total,
            "success": self.success,
            "failed": self.failed,
            "skipped": self.skipped,
            "errors": list(self.errors),
        }
