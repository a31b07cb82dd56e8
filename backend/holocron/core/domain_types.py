"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - FilmId wraps UUID — never use bare UUID in domain logic
    - ExternalUid is the feed's own identifier (SWAPI uid, a numeric string)
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and to String columns without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

FilmId = NewType("FilmId", UUID)
ExternalUid = NewType("ExternalUid", str)


# ─── Enums ───────────────────────────────────────────────────────

class Source(str, Enum):
    """Film provenance — maps to DB `source` column. Set once, at creation."""
    EXTERNAL = "external"
    LOCAL = "local"


class SyncAction(str, Enum):
    """Outcome of the conflict resolution policy for one external film."""
    CREATE = "create"
    UPDATE = "update"
    SKIP = "skip"


class Role(str, Enum):
    """Principal roles carried in the bearer token."""
    ADMIN = "admin"
    USER = "user"


class Locale(str, Enum):
    """Languages available for sync report messages."""
    EN = "en"
    ES = "es"


# ─── Field groups ────────────────────────────────────────────────

REQUIRED_TEXT_FIELDS = (
    "title", "opening_crawl", "director", "producer", "release_date",
)
REFERENCE_LIST_FIELDS = (
    "characters", "planets", "starships", "vehicles", "species",
)
OPTIONAL_TEXT_FIELDS = ("url", "description", "uid")

# Fields sync copies wholesale from the feed (uid excluded: it is identity)
CONTENT_FIELDS = (
    "title", "episode_id", "opening_crawl", "director", "producer",
    "release_date", *REFERENCE_LIST_FIELDS, "url", "description",
)
