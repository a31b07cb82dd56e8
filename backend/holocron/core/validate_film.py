"""Film Validation — explicit field checks for direct catalog writes.

Invariants:
    - validate_film_fields is PURE: returns every violation, never raises
    - Empty list means the payload may be written as-is
    - partial=True (update) checks only supplied fields; partial=False (create)
      also reports absent required fields
    - Provenance fields (source, is_modified, last_sync_date) and timestamps are
      not writable through this path
    - uid may be given on create but never changed by an update

Design Decisions:
    - Collect-all over fail-fast: the caller gets one 400 listing every bad field
    - Runs behind the Pydantic request schemas: schemas check shape at the HTTP
      boundary, this checks catalog rules for any caller of the service
"""

import re

from holocron.core.domain_types import (
    OPTIONAL_TEXT_FIELDS, REFERENCE_LIST_FIELDS, REQUIRED_TEXT_FIELDS,
)
from holocron.core.errors import FieldViolation

_RELEASE_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

REQUIRED_FIELDS = (
    "title", "episode_id", "opening_crawl", "director", "producer", "release_date",
)
WRITABLE_FIELDS = frozenset(
    (*REQUIRED_FIELDS, *REFERENCE_LIST_FIELDS, *OPTIONAL_TEXT_FIELDS),
)
# Set on create only: a film whose uid changes loses its link to the feed
IMMUTABLE_FIELDS = frozenset(("uid",))


def validate_film_fields(fields: dict, partial: bool = False) -> list[FieldViolation]:
    """Check a create (partial=False) or update (partial=True) payload."""
    violations: list[FieldViolation] = []

    for name in sorted(set(fields) - WRITABLE_FIELDS):
        violations.append(FieldViolation(name, "field cannot be written"))
    if partial:
        for name in sorted(IMMUTABLE_FIELDS & set(fields)):
            violations.append(FieldViolation(name, "field cannot be changed"))

    for name in REQUIRED_FIELDS:
        if name not in fields:
            if not partial:
                violations.append(FieldViolation(name, "field is required"))
            continue
        if _is_blank(fields[name]):
            violations.append(FieldViolation(name, "field cannot be empty"))

    for name in REQUIRED_TEXT_FIELDS:
        value = fields.get(name)
        if not _is_blank(value) and not isinstance(value, str):
            violations.append(FieldViolation(name, "must be a string"))

    violations.extend(_check_episode_id(fields))
    violations.extend(_check_release_date(fields))

    for name in REFERENCE_LIST_FIELDS:
        if name in fields and not _is_str_list(fields[name]):
            violations.append(FieldViolation(name, "must be a list of strings"))

    for name in OPTIONAL_TEXT_FIELDS:
        if partial and name in IMMUTABLE_FIELDS:
            continue
        value = fields.get(name)
        if value is not None and not isinstance(value, str):
            violations.append(FieldViolation(name, "must be a string"))

    return violations


def _is_blank(value: object) -> bool:
    return value is None or value == ""


def _is_str_list(value: object) -> bool:
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


def _check_episode_id(fields: dict) -> list[FieldViolation]:
    value = fields.get("episode_id")
    if _is_blank(value):
        return []
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        return [FieldViolation("episode_id", "must be an integer")]
    if value < 1:
        return [FieldViolation("episode_id", "must be >= 1")]
    return []


def _check_release_date(fields: dict) -> list[FieldViolation]:
    value = fields.get("release_date")
    if isinstance(value, str) and value and not _RELEASE_DATE.match(value):
        return [FieldViolation("release_date", "must use the YYYY-MM-DD format")]
    return []
