"""External Film — canonical shape of a film as returned by the read-only feed.

Invariants:
    - decode_external_film is PURE: dict in, ExternalFilm out, ValueError on malformed input
    - decode_external_collection never drops an entry: malformed ones come back
      as UndecodableFilm at their feed position
    - uid is always a non-empty string (SWAPI sometimes sends numbers)
    - Reference lists default to [] when the feed omits them
    - to_content_fields() returns exactly CONTENT_FIELDS — sync copies them wholesale

Design Decisions:
    - Frozen dataclasses over Pydantic: the core stays framework-free and the
      client maps ValueError on the envelope or a single fetch to
      SourceUnavailableError in one place
    - summarize_external lives here (not in routes): the passthrough endpoint's
      shape is a pure projection of this type
"""

from dataclasses import dataclass, field

from holocron.core.domain_types import REFERENCE_LIST_FIELDS, ExternalUid


@dataclass(frozen=True)
class ExternalFilmProperties:
    """Nested property bag of an external film (mirrors the local content fields)."""
    title: str
    episode_id: int
    opening_crawl: str = ""
    director: str = ""
    producer: str = ""
    release_date: str = ""
    characters: list[str] = field(default_factory=list)
    planets: list[str] = field(default_factory=list)
    starships: list[str] = field(default_factory=list)
    vehicles: list[str] = field(default_factory=list)
    species: list[str] = field(default_factory=list)
    url: str | None = None
    created: str | None = None
    edited: str | None = None


@dataclass(frozen=True)
class ExternalFilm:
    """A film as the feed describes it, identified by uid."""
    uid: ExternalUid
    properties: ExternalFilmProperties
    description: str | None = None
    external_key: str | None = None

    def to_content_fields(self) -> dict:
        """Content fields ready to be written to the store."""
        p = self.properties
        return {
            "title": p.title,
            "episode_id": p.episode_id,
            "opening_crawl": p.opening_crawl,
            "director": p.director,
            "producer": p.producer,
            "release_date": p.release_date,
            "characters": list(p.characters),
            "planets": list(p.planets),
            "starships": list(p.starships),
            "vehicles": list(p.vehicles),
            "species": list(p.species),
            "url": p.url,
            "description": self.description,
        }


@dataclass(frozen=True)
class UndecodableFilm:
    """A feed entry that could not be decoded; uid is "#<position>" when absent."""
    uid: ExternalUid
    reason: str


def decode_external_film(payload: object) -> ExternalFilm:
    """Decode one SWAPI film object. Raises ValueError on malformed input."""
    if not isinstance(payload, dict):
        raise ValueError(f"film entry must be an object, got {type(payload).__name__}")
    uid = payload.get("uid")
    if isinstance(uid, int) and not isinstance(uid, bool):
        uid = str(uid)
    if not isinstance(uid, str) or not uid:
        raise ValueError("film entry has no uid")
    props = payload.get("properties")
    if not isinstance(props, dict):
        raise ValueError(f"film {uid} has no properties")
    return ExternalFilm(
        uid=ExternalUid(uid),
        properties=_decode_properties(uid, props),
        description=_optional_str(payload.get("description")),
        external_key=_optional_str(payload.get("_id")),
    )


def decode_external_collection(payload: object) -> list[ExternalFilm | UndecodableFilm]:
    """Decode a list of SWAPI film objects, preserving feed order.

    Only the envelope is strict: a malformed entry becomes an UndecodableFilm
    in its place, so one bad film cannot hide the rest of the feed.
    """
    if not isinstance(payload, list):
        raise ValueError(f"film collection must be a list, got {type(payload).__name__}")
    films: list[ExternalFilm | UndecodableFilm] = []
    for position, item in enumerate(payload):
        try:
            films.append(decode_external_film(item))
        except ValueError as e:
            films.append(UndecodableFilm(uid=_best_effort_uid(item, position), reason=str(e)))
    return films


def _best_effort_uid(item: object, position: int) -> ExternalUid:
    uid = item.get("uid") if isinstance(item, dict) else None
    if isinstance(uid, (str, int)) and not isinstance(uid, bool) and str(uid):
        return ExternalUid(str(uid))
    return ExternalUid(f"#{position + 1}")


def _decode_properties(uid: str, props: dict) -> ExternalFilmProperties:
    title = props.get("title")
    if not isinstance(title, str) or not title:
        raise ValueError(f"film {uid} has no title")
    episode_id = props.get("episode_id")
    if isinstance(episode_id, bool) or not isinstance(episode_id, int):
        raise ValueError(f"film {uid} has a non-integer episode_id")
    lists = {name: _str_list(uid, name, props.get(name)) for name in REFERENCE_LIST_FIELDS}
    return ExternalFilmProperties(
        title=title,
        episode_id=episode_id,
        opening_crawl=_optional_str(props.get("opening_crawl")) or "",
        director=_optional_str(props.get("director")) or "",
        producer=_optional_str(props.get("producer")) or "",
        release_date=_optional_str(props.get("release_date")) or "",
        url=_optional_str(props.get("url")),
        created=_optional_str(props.get("created")),
        edited=_optional_str(props.get("edited")),
        **lists,
    )


def _optional_str(value: object) -> str | None:
    return value if isinstance(value, str) else None


def _str_list(uid: str, name: str, value: object) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"film {uid} field '{name}' must be a list of strings")
    return list(value)


# --- Passthrough projection -------------------------------------------------

_SUMMARY_FIELDS = (
    "title", "director", "producer", "opening_crawl", "episode_id", "release_date",
)


def summarize_external(
    films: list[ExternalFilm | UndecodableFilm], full_info: bool = False,
) -> list[dict]:
    """Project feed films for the passthrough endpoint.

    full_info=False keeps the listing fields only; full_info=True returns every
    property plus description, uid and the feed's own id. Undecodable entries
    have nothing to show and are left out.
    """
    return [summarize_one(f, full_info) for f in films if isinstance(f, ExternalFilm)]


def summarize_one(film: ExternalFilm, full_info: bool = False) -> dict:
    p = film.properties
    if full_info:
        return {
            **{name: getattr(p, name) for name in p.__dataclass_fields__},
            "description": film.description,
            "uid": film.uid,
            "id": film.external_key,
        }
    return {
        "id": film.external_key,
        "uid": film.uid,
        **{name: getattr(p, name) for name in _SUMMARY_FIELDS},
    }
