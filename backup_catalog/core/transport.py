"""Request transport shared by every call to the platform API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx

from .config import Settings, get_settings


@dataclass
class TransportResponse:
    """Decoded API response."""

    data: Any
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)


class RequestTransport:
    """Issue authenticated requests against the platform API.

    Errors are not retried or wrapped: `httpx.HTTPError` (including
    `HTTPStatusError` for non-2xx responses) reaches the caller unchanged.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        self._logger = logging.getLogger(__name__)

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.settings.session_token:
            headers["Authorization"] = f"Bearer {self.settings.session_token}"
        return headers

    def url_for(self, path: str) -> str:
        return self.settings.base_url + path.lstrip("/")

    async def request(
        self,
        path: str,
        *,
        method: str = "GET",
        form_params: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> TransportResponse:
        """Send a request and decode its JSON body.

        `form_params` are sent as a JSON document, the format the platform
        accepts for every write. A body that is not JSON decodes to `None`.
        """
        url = self.url_for(path)
        method = method.upper()

        self._logger.debug("transport_request | method=%s path=%s", method, path)

        async with httpx.AsyncClient(
            timeout=self.settings.timeout,
            verify=self.settings.verify_host_cert,
            follow_redirects=True,
        ) as client:
            try:
                resp = await client.request(
                    method,
                    url,
                    headers=self._headers(),
                    json=form_params,
                    params=params,
                )
                resp.raise_for_status()
            except httpx.HTTPError as exc:
                self._logger.error(
                    "transport_http_error | method=%s path=%s error=%s",
                    method,
                    path,
                    exc,
                )
                raise

        try:
            data: Any = resp.json()
        except ValueError:
            data = None

        self._logger.debug(
            "transport_response | method=%s path=%s status=%s",
            method,
            path,
            resp.status_code,
        )
        return TransportResponse(
            data=data,
            status_code=resp.status_code,
            headers=dict(resp.headers),
        )
