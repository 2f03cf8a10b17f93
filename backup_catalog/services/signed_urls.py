from __future__ import annotations

import logging
from typing import Optional

from backup_catalog.core.transport import RequestTransport
from backup_catalog.models.environment import EnvironmentRef


class SignedUrlResolver:
    """Issues short-lived download URLs for archives in the backup catalog.

    The `s3token` endpoint only answers POST requests; the GET semantics we
    want are requested through a `method=get` form parameter.
    """

    def __init__(self, transport: RequestTransport) -> None:
        self.transport = transport
        self._logger = logging.getLogger(__name__)

    async def resolve(
        self,
        environment: EnvironmentRef,
        folder: Optional[str],
        backup_type: str,
    ) -> str:
        path = f"{environment.api_path}/backups/catalog/{folder or ''}/{backup_type}/s3token"
        self._logger.info(
            "signed_url_request | site_id=%s env_id=%s folder=%s type=%s",
            environment.site_id,
            environment.environment_id,
            folder,
            backup_type,
        )
        response = await self.transport.request(
            path,
            method="POST",
            form_params={"method": "get"},
        )
        data = response.data or {}
        if "url" not in data:
            raise KeyError("signed_url_missing")
        return data["url"]
