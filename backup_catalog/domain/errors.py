"""Errors raised by the backup catalog."""

from __future__ import annotations


class BackupCatalogError(Exception):
    """Base class for backup catalog failures."""


class MalformedIdentifierError(BackupCatalogError, ValueError):
    """A backup id is not `<scheduled_for>_<archive_type>_<type>`."""

    def __init__(self, backup_id: object) -> None:
        self.backup_id = backup_id
        super().__init__(
            f"Malformed backup id {backup_id!r}: expected <scheduled_for>_<archive_type>_<type>"
        )


class UnsupportedBackupTypeError(BackupCatalogError, ValueError):
    """The backup has no restorable archive."""

    def __init__(self, message: str = "This backup has no archive to restore.") -> None:
        super().__init__(message)
