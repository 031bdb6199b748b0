from __future__ import annotations

import json
import logging

import httpx

from bpedit.domain.errors import BlueprintImportError
from bpedit.domain.interfaces import IBlueprintFetcher
from bpedit.utils.constants import DEFAULT_IMPORT_TIMEOUT

_LOGGER = logging.getLogger(__name__)


def format_blueprint(value: object) -> str:
    """Serialize parsed JSON with a stable two-space indent."""
    return json.dumps(value, indent=2, ensure_ascii=False)


class BlueprintFetcher(IBlueprintFetcher):
    """
    Fetch a blueprint with a single GET and normalise it to indented JSON.

    Every failure (transport, HTTP status, JSON decoding, an empty ``null`` body)
    surfaces as a single ``BlueprintImportError``.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_IMPORT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    def fetch(self, url: str) -> str:
        _LOGGER.info("Importing blueprint from %s", url)
        try:
            with httpx.Client(
                timeout=self._timeout, follow_redirects=True, transport=self._transport
            ) as client:
                response = client.get(url)
                response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise BlueprintImportError(url, f"timed out after {self._timeout:g}s") from exc
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            reason = exc.response.reason_phrase or "error"
            raise BlueprintImportError(url, f"server responded with {status} {reason}") from exc
        except httpx.HTTPError as exc:
            raise BlueprintImportError(url, str(exc) or type(exc).__name__) from exc

        try:
            value = response.json()
        except ValueError as exc:
            raise BlueprintImportError(url, f"response is not valid JSON ({exc})") from exc

        if value is None:
            raise BlueprintImportError(url, "no blueprint found")

        return format_blueprint(value)
