"""Parsers for the naming conventions the platform encodes in backup fields."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .enums import BackupType, Initiator
from .errors import MalformedIdentifierError

# Greedy prefix: the capture is whatever follows the last underscore
_INITIATOR_PATTERN = re.compile(r".*_(.*)")


@dataclass(frozen=True)
class BackupIdentifier:
    """The three segments of a backup id."""

    scheduled_for: str
    archive_type: str
    type_segment: str

    @property
    def type(self) -> BackupType:
        try:
            return BackupType(self.type_segment)
        except ValueError:
            return BackupType.OTHER

    @property
    def base_id(self) -> str:
        """The snapshot id shared by the code, files and database archives."""
        return f"{self.scheduled_for}_{self.archive_type}"

    def __str__(self) -> str:
        return f"{self.base_id}_{self.type_segment}"


def parse_backup_id(backup_id: object) -> BackupIdentifier:
    """Split `<scheduled_for>_<archive_type>_<type>`.

    Raises:
        MalformedIdentifierError: If the id is not a string of exactly three
            underscore-separated segments.
    """
    if not isinstance(backup_id, str):
        raise MalformedIdentifierError(backup_id)
    segments = backup_id.split("_")
    if len(segments) != 3:
        raise MalformedIdentifierError(backup_id)
    scheduled_for, archive_type, type_segment = segments
    return BackupIdentifier(
        scheduled_for=scheduled_for,
        archive_type=archive_type,
        type_segment=type_segment,
    )


def parse_initiator(folder: Optional[str]) -> Initiator:
    """Classify who started a backup from its storage folder name.

    Folders ending in `_automated` belong to scheduled backups; anything else,
    including a missing folder, is treated as manual.
    """
    if not folder:
        return Initiator.MANUAL
    match = _INITIATOR_PATTERN.match(folder)
    if match is not None and match.group(1) == Initiator.AUTOMATED.value:
        return Initiator.AUTOMATED
    return Initiator.MANUAL
