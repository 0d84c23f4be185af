"""HTTP client for the Senate floor activity log."""

from __future__ import annotations

from typing import Callable, Dict, Optional
import logging
import time

import httpx

LOGGER = logging.getLogger(__name__)

DEFAULT_URL = "https://www.senate.gov/galleries/pdcl/"


class FloorLogClientError(RuntimeError):
    """Raised when the floor log cannot be retrieved."""


class FloorLogClient:
    """Fetches the live floor log as a single HTML document."""

    def __init__(
        self,
        url: str = DEFAULT_URL,
        *,
        timeout: float = 30.0,
        break_cache: bool = True,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._url = url
        self._break_cache = break_cache
        self._clock = clock
        headers = {"Accept": "text/html"}
        if user_agent:
            headers["User-Agent"] = user_agent
        self._client = httpx.Client(timeout=timeout, headers=headers, transport=transport, follow_redirects=True)

    # --- public API -----------------------------------------------------
    def fetch(self) -> str:
        """Download the floor log. No retries; the next scheduled run tries again."""

        params: Dict[str, str] = {}
        if self._break_cache:
            params["break_cache"] = str(int(self._clock()))
        try:
            response = self._client.get(self._url, params=params)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            LOGGER.warning("Timed out fetching %s: %s", self._url, exc)
            raise FloorLogClientError(f"Timed out fetching the floor log from {self._url}") from exc
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            LOGGER.warning("Floor log returned status %s for %s", status, self._url)
            raise FloorLogClientError(f"The floor log responded with status {status}") from exc
        except httpx.HTTPError as exc:
            LOGGER.warning("HTTP error while fetching %s: %s", self._url, exc)
            raise FloorLogClientError(f"Network error on fetching the floor log from {self._url}") from exc
        return response.text

    def close(self) -> None:
        """Close the underlying HTTP client."""

        self._client.close()

    def __enter__(self) -> "FloorLogClient":  # pragma: no cover - trivial
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # pragma: no cover - trivial
        self.close()


__all__ = ["DEFAULT_URL", "FloorLogClient", "FloorLogClientError"]
