from .environment import EnvironmentRef
from .backup import PENDING, Backup, BackupDate, Completed, Pending

__all__ = [
    "EnvironmentRef",
    "Backup",
    "BackupDate",
    "Completed",
    "Pending",
    "PENDING",
]
