"""Pydantic schemas for catalog input and output."""

from .backups import (
    DEFAULT_TTL,
    BackupAttributes,
    BackupSummary,
)  # noqa: F401
from .workflows import Workflow  # noqa: F401

__all__ = [
    "DEFAULT_TTL",
    "BackupAttributes",
    "BackupSummary",
    "Workflow",
]
