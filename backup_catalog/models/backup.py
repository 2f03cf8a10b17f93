"""The backup catalog entry and the facts derived from its attributes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Union

from backup_catalog.core.config import Settings, get_settings
from backup_catalog.domain.enums import RESTORE_WORKFLOWS, BackupType, Initiator
from backup_catalog.domain.errors import UnsupportedBackupTypeError
from backup_catalog.domain.parsing import parse_backup_id, parse_initiator
from backup_catalog.models.environment import EnvironmentRef
from backup_catalog.schemas.backups import BackupAttributes, BackupSummary, Number
from backup_catalog.schemas.workflows import Workflow

if TYPE_CHECKING:
    from backup_catalog.services.signed_urls import SignedUrlResolver
    from backup_catalog.services.workflows import WorkflowDispatcher

BYTES_PER_MB = 1048576
BUCKET = "pantheon-backups"
PENDING_LABEL = "Pending"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Pending:
    """The backup has not finished yet."""

    def __str__(self) -> str:
        return PENDING_LABEL


@dataclass(frozen=True)
class Completed:
    """The backup finished at `timestamp` (epoch seconds)."""

    timestamp: Number


BackupDate = Union[Pending, Completed]

PENDING = Pending()


class Backup:
    """One snapshot (code, files or database) of a hosted environment.

    Built from the attribute set the platform returns in an environment's
    backup catalog. Everything except `archive_url` is fixed at construction;
    `archive_url` is filled at most once, by `get_archive_url`.

    The URL cache is a plain check-then-set. Callers sharing one record across
    tasks must not run `get_archive_url` concurrently on it.
    """

    def __init__(
        self,
        attributes: Mapping[str, Any],
        *,
        environment: EnvironmentRef,
        url_resolver: Optional[SignedUrlResolver] = None,
        workflows: Optional[WorkflowDispatcher] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        # Parse the id first so a malformed id fails as such, not as a schema error
        self.identifier = parse_backup_id(attributes.get("id"))
        self.attributes = BackupAttributes.model_validate(dict(attributes))
        self.environment = environment
        self.url_resolver = url_resolver
        self.workflows = workflows
        self._settings = settings

    def __repr__(self) -> str:
        return f"Backup(id={self.id!r}, filename={self.filename!r})"

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    @property
    def id(self) -> str:
        return self.attributes.id

    @property
    def scheduled_for(self) -> str:
        return self.identifier.scheduled_for

    @property
    def archive_type(self) -> str:
        return self.identifier.archive_type

    @property
    def type(self) -> BackupType:
        return self.identifier.type

    @property
    def base_id(self) -> str:
        return self.identifier.base_id

    @property
    def folder(self) -> Optional[str]:
        return self.attributes.folder

    @property
    def filename(self) -> Optional[str]:
        return self.attributes.filename

    @property
    def size(self) -> Optional[Number]:
        return self.attributes.size

    @property
    def ttl(self) -> Number:
        return self.attributes.ttl

    @property
    def archive_url(self) -> Optional[str]:
        return self.attributes.archive_url

    def is_finished(self) -> bool:
        """True once the archive exists and the platform reported a time for it."""
        return bool(self.size) and (
            self.attributes.finish_time is not None or self.attributes.timestamp is not None
        )

    def get_date(self) -> BackupDate:
        """Completion time, preferring `finish_time` over `timestamp`."""
        if not self.is_finished():
            return PENDING
        if self.attributes.finish_time is not None:
            return Completed(self.attributes.finish_time)
        return Completed(self.attributes.timestamp)

    def get_expiry(self) -> Optional[Number]:
        date = self.get_date()
        if isinstance(date, Completed):
            return date.timestamp + self.ttl
        return None

    def get_initiator(self) -> Initiator:
        return parse_initiator(self.folder)

    def get_references(self) -> List[str]:
        """Values a user may give to pick this backup out of a catalog."""
        return [ref for ref in (self.id, self.filename) if ref]

    def get_size_in_mb(self) -> str:
        """Human-readable size.

        Non-zero archives never display as 0.0MB: anything up to 0.1MB shows
        as "0.1MB". Missing or empty archives show a bare "0".
        """
        if not self.size or self.size <= 0:
            return "0"
        size = self.size / BYTES_PER_MB
        if size > 0.1:
            return f"{size:.1f}MB"
        return "0.1MB"

    def get_bucket(self, is_onebox_host: Optional[bool] = None) -> str:
        """Storage bucket holding the archive.

        When `is_onebox_host` is omitted it is read from the configured host.
        """
        if is_onebox_host is None:
            is_onebox_host = self.settings.is_onebox
        if is_onebox_host:
            return f"onebox-{BUCKET}"
        return BUCKET

    async def get_archive_url(self) -> str:
        """Return the download URL, resolving and caching it on first use.

        Transport errors from the resolver propagate; nothing is retried.
        """
        if self.attributes.archive_url is None:
            if self.url_resolver is None:
                raise RuntimeError("Backup has no signed URL resolver")
            self.attributes.archive_url = await self.url_resolver.resolve(
                self.environment,
                self.folder or "",
                self.identifier.type_segment,
            )
            logger.debug("archive_url_cached | backup_id=%s", self.id)
        return self.attributes.archive_url

    async def restore(self) -> Workflow:
        """Start the restore workflow for this archive.

        Raises:
            UnsupportedBackupTypeError: If the backup type has no restore
                workflow. Nothing is sent to the platform in that case.
        """
        workflow_name = RESTORE_WORKFLOWS.get(self.type)
        if workflow_name is None:
            raise UnsupportedBackupTypeError()
        if self.workflows is None:
            raise RuntimeError("Backup has no workflow dispatcher")

        env = self.environment
        params = {
            "key": f"{env.site_id}/{env.environment_id}/{self.base_id}/{self.filename or ''}",
            "bucket": self.get_bucket(),
        }
        logger.info(
            "backup_restore | backup_id=%s workflow=%s bucket=%s",
            self.id,
            workflow_name.value,
            params["bucket"],
        )
        return await self.workflows.create(env, workflow_name.value, params)

    def serialize(self) -> Dict[str, Any]:
        """Display-ready mapping. Reads the cached URL only; never resolves one."""
        date = self.get_date()
        summary = BackupSummary(
            file=self.filename,
            size=self.get_size_in_mb(),
            date=date.timestamp if isinstance(date, Completed) else str(date),
            expiry=self.get_expiry(),
            initiator=self.get_initiator(),
            url=self.archive_url,
            type=self.type,
        )
        return summary.model_dump(mode="json")
