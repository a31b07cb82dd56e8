"""SWAPI Client — reads films from the external Star Wars API.

Invariants:
    - Read-only: only GET {base}/films and GET {base}/films/{uid}
    - Every transport, HTTP-status or envelope failure -> SourceUnavailableError (core/errors.py)
    - A malformed entry inside a good collection is returned as UndecodableFilm
      and logged; fetch_one has a single entry, so there it is a SourceUnavailableError
    - One attempt per call: no retry, no caching
    - Responses use the {"message": ..., "result": ...} envelope; only result is decoded

Design Decisions:
    - httpx.AsyncClient over a sync client: routes are async and the call must not
      block the event loop
    - timeout=None by default: a fetch blocks until the feed answers; operators can
      bound it with EXTERNAL_TIMEOUT_SECONDS
    - transport injectable: tests use httpx.MockTransport instead of patching
"""

import logging

import httpx

from holocron.core.errors import SourceUnavailableError
from holocron.core.domain_types import ExternalUid
from holocron.core.external_film import (
    ExternalFilm, UndecodableFilm, decode_external_collection, decode_external_film,
)

logger = logging.getLogger(__name__)


class SwapiClient:
    """Async client for the SWAPI films resource."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            timeout=timeout_seconds, transport=transport,
        )

    async def __aenter__(self) -> "SwapiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch_collection(self) -> list[ExternalFilm | UndecodableFilm]:
        """Fetch every film the feed knows, in feed order."""
        url = f"{self.base_url}/films"
        result = await self._get_result(url)
        try:
            films = decode_external_collection(result)
        except ValueError as e:
            raise self._unavailable(url, f"malformed film collection: {e}") from e
        for film in films:
            if isinstance(film, UndecodableFilm):
                logger.warning(
                    f"Undecodable feed entry: {film.reason}",
                    extra={"uid": film.uid, "url": url},
                )
        return films

    async def fetch_one(self, external_id: ExternalUid) -> ExternalFilm:
        """Fetch a single film by its feed uid."""
        url = f"{self.base_url}/films/{external_id}"
        result = await self._get_result(url)
        try:
            return decode_external_film(result)
        except ValueError as e:
            raise self._unavailable(url, f"malformed film: {e}") from e

    async def _get_result(self, url: str) -> object:
        try:
            response = await self._client.get(url)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as e:
            raise self._unavailable(
                url, f"feed answered HTTP {e.response.status_code}",
            ) from e
        except httpx.HTTPError as e:
            raise self._unavailable(url, f"{type(e).__name__}: {e}") from e
        except ValueError as e:
            raise self._unavailable(url, "response body is not JSON") from e
        if not isinstance(body, dict) or "result" not in body:
            raise self._unavailable(url, "response has no result field")
        return body["result"]

    def _unavailable(self, url: str, reason: str) -> SourceUnavailableError:
        logger.error(
            f"SWAPI request failed: {reason}",
            extra={"url": url, "error_code": "SOURCE_UNAVAILABLE"},
        )
        return SourceUnavailableError(reason, url=url)
