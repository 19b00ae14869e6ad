"""Branding API client.

Fetches branding data for a hash prefix and selects the curated title for
an exact video ID out of the returned mapping.
"""

import json
import logging
from typing import Any, Protocol

import httpx
from pydantic import ValidationError

from debait.config import BrandingConfig
from debait.exceptions import BrandingFetchError, BrandingParseError
from debait.models.branding import BrandingRecord
from debait.models.outcome import FetchFailure, FetchOutcome, FetchSuccess

logger = logging.getLogger(__name__)


class BrandingFetcher(Protocol):
    """Protocol for branding API transports.

    This protocol enables dependency injection and testing.
    Implementations must never raise for transport problems; they
    report them as FetchFailure.
    """

    async def fetch(self, url: str) -> FetchOutcome:
        """Issue a single GET request."""
        ...

    async def aclose(self) -> None:
        """Release transport resources."""
        ...


class BrandingClient:
    """Production branding API client built on httpx.

    Implements BrandingFetcher. One instance can serve any number of
    concurrent requests; it holds no per-request state.
    """

    def __init__(
        self,
        config: BrandingConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Branding configuration. Uses defaults if not provided.
            http_client: Optional AsyncClient. Creates one if not provided;
                an injected client is not closed by aclose().
        """
        self._config = config or BrandingConfig()
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=self._config.timeout,
            headers={"User-Agent": self._config.user_agent},
        )

    async def fetch(self, url: str) -> FetchOutcome:
        """Fetch a branding URL.

        No retries are attempted.

        Args:
            url: Routed branding URL.

        Returns:
            FetchSuccess with status and body, or FetchFailure if no
            response was received.
        """
        try:
            response = await self._http.get(url)
        except (httpx.HTTPError, httpx.InvalidURL, OSError) as e:
            logger.warning("Branding request to %s failed: %s", url, e)
            return FetchFailure(BrandingFetchError(f"{type(e).__name__}: {e}"))

        logger.debug(
            "Branding response from %s: %d (%d bytes)",
            url,
            response.status_code,
            len(response.content),
        )
        return FetchSuccess(status_code=response.status_code, body=response.content)

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> "BrandingClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def decode_branding(body: bytes, video_id: str) -> BrandingRecord | None:
    """Decode a branding body and pick the record for an exact video ID.

    Records for other IDs sharing the prefix are not validated, so a
    malformed neighbour cannot hide a valid record.

    Args:
        body: Raw response body.
        video_id: Video ID the request was made for.

    Returns:
        The matching record, or None if the ID is not in the mapping.

    Raises:
        BrandingParseError: If the body is not a JSON object or the
            matching record does not have the expected shape.
    """
    try:
        data: Any = json.loads(body)
    except (ValueError, RecursionError) as e:
        raise BrandingParseError(f"Branding response is not JSON: {e}") from e

    if not isinstance(data, dict):
        raise BrandingParseError(
            f"Branding response is not an object: {type(data).__name__}"
        )

    raw = data.get(video_id)
    if raw is None:
        return None

    try:
        return BrandingRecord.model_validate(raw)
    except ValidationError as e:
        raise BrandingParseError(f"Invalid branding record for {video_id}: {e}") from e


def parse_branding_response(outcome: FetchSuccess, video_id: str) -> str | None:
    """Select the curated title for a video from a branding response.

    Non-200 statuses, missing IDs, empty title lists, and malformed bodies
    all mean "no curated title".

    Args:
        outcome: Successful fetch outcome.
        video_id: Video ID the request was made for.

    Returns:
        The server's preferred title, or None.
    """
    if outcome.status_code != httpx.codes.OK:
        logger.debug("No branding for %s (status %d)", video_id, outcome.status_code)
        return None

    try:
        record = decode_branding(outcome.body, video_id)
    except BrandingParseError as e:
        logger.warning("Ignoring branding response for %s: %s", video_id, e)
        return None

    if record is None:
        logger.debug("No branding record for %s in prefix response", video_id)
        return None

    return record.preferred_title
