from __future__ import annotations

from enum import Enum


class BackupType(str, Enum):
    CODE = "code"
    FILES = "files"
    DATABASE = "database"
    OTHER = "other"


class Initiator(str, Enum):
    MANUAL = "manual"
    AUTOMATED = "automated"


class RestoreWorkflow(str, Enum):
    RESTORE_CODE = "restore_code"
    RESTORE_FILES = "restore_files"
    RESTORE_DATABASE = "restore_database"


RESTORE_WORKFLOWS = {
    BackupType.CODE: RestoreWorkflow.RESTORE_CODE,
    BackupType.FILES: RestoreWorkflow.RESTORE_FILES,
    BackupType.DATABASE: RestoreWorkflow.RESTORE_DATABASE,
}
