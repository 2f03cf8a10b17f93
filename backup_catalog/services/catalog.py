from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from backup_catalog.core.config import Settings, get_settings
from backup_catalog.core.transport import RequestTransport
from backup_catalog.domain.enums import BackupType
from backup_catalog.models.backup import Backup, Completed
from backup_catalog.models.environment import EnvironmentRef

from .signed_urls import SignedUrlResolver
from .workflows import WorkflowDispatcher


class BackupCatalogService:
    """The backups the platform has cataloged for one environment."""

    def __init__(
        self,
        environment: EnvironmentRef,
        transport: Optional[RequestTransport] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.environment = environment
        self.settings = settings or get_settings()
        self.transport = transport or RequestTransport(self.settings)
        self.url_resolver = SignedUrlResolver(self.transport)
        self.workflows = WorkflowDispatcher(self.transport)
        self._backups: Optional[List[Backup]] = None
        self._logger = logging.getLogger(__name__)

    def build(self, attributes: Dict[str, Any]) -> Backup:
        """Create a record wired to this catalog's resolver and dispatcher."""
        return Backup(
            attributes,
            environment=self.environment,
            url_resolver=self.url_resolver,
            workflows=self.workflows,
            settings=self.settings,
        )

    async def fetch(self) -> List[Backup]:
        """Load the catalog from the platform, replacing any earlier fetch.

        The platform keys the catalog by backup id; a plain list of attribute
        sets is accepted too. A malformed id aborts the fetch.
        """
        response = await self.transport.request(f"{self.environment.api_path}/backups/catalog")
        raw = response.data or {}
        if isinstance(raw, dict):
            items = []
            for backup_id, attrs in raw.items():
                if not isinstance(attrs, dict):
                    raise TypeError(f"Catalog entry {backup_id!r} is not an attribute mapping")
                items.append({**attrs, "id": attrs.get("id", backup_id)})
        else:
            items = list(raw)
        self._backups = [self.build(item) for item in items]
        self._logger.info(
            "backup_catalog_fetched | site_id=%s env_id=%s count=%s",
            self.environment.site_id,
            self.environment.environment_id,
            len(self._backups),
        )
        return self._backups

    async def all(self) -> List[Backup]:
        if self._backups is None:
            await self.fetch()
        assert self._backups is not None
        return self._backups

    async def get(self, reference: str) -> Backup:
        """Find a backup by id or archive file name."""
        for backup in await self.all():
            if reference in backup.get_references():
                return backup
        raise KeyError("backup_not_found")

    async def get_finished(self, element: Optional[BackupType] = None) -> List[Backup]:
        """Finished backups, newest first, optionally of a single type."""
        backups = [
            backup
            for backup in await self.all()
            if backup.is_finished() and (element is None or backup.type == element)
        ]

        def _completed_at(backup: Backup) -> float:
            date = backup.get_date()
            return date.timestamp if isinstance(date, Completed) else 0

        return sorted(backups, key=_completed_at, reverse=True)
