"""Client for the external content provider that generates random strings."""

from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional, Protocol
from urllib.parse import urlsplit

import requests

from ..common.config import DEFAULT_PROVIDER_TIMEOUT
from ..common.constants import QUERY_ARG_LIMIT

__all__ = ["ContentProvider", "HttpContentProvider", "resolve_content_uri"]

LOGGER = logging.getLogger(__name__)

Row = Mapping[str, Optional[str]]


class ContentProvider(Protocol):
    def query(self, uri: str, query_args: Mapping[str, int]) -> Optional[Row]:  # pragma: no cover - protocol
        """Return the first row of the result, or ``None`` when there is none."""
        ...


def resolve_content_uri(base_url: str, uri: str) -> str:
    """Map ``content://<authority>/<path>`` onto the provider's HTTP base URL."""

    parts = urlsplit(uri)
    if parts.scheme != "content" or not parts.netloc:
        raise ValueError(f"Not a content URI: {uri!r}")
    return f"{base_url.rstrip('/')}/{parts.netloc}{parts.path}"


class HttpContentProvider:
    """Queries the provider over HTTP.

    Query arguments are sent as URL parameters and the response body is a JSON
    array of rows, each row mapping column names to text values.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_PROVIDER_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def query(self, uri: str, query_args: Mapping[str, int]) -> Optional[Row]:
        url = resolve_content_uri(self.base_url, uri)
        params: Dict[str, int] = dict(query_args)
        LOGGER.info("Querying content provider %s (%s=%s)", url, QUERY_ARG_LIMIT, params.get(QUERY_ARG_LIMIT))
        response = self.session.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()
        if not response.content:
            return None

        rows = response.json()
        if isinstance(rows, dict):
            rows = [rows]
        if not rows:
            return None
        return rows[0]

    def close(self) -> None:
        self.session.close()
