"""Service layer for talking to the platform.

Exposes:
- SignedUrlResolver
- WorkflowDispatcher
- BackupCatalogService
"""

from .signed_urls import SignedUrlResolver
from .workflows import WorkflowDispatcher
from .catalog import BackupCatalogService

__all__ = [
    "SignedUrlResolver",
    "WorkflowDispatcher",
    "BackupCatalogService",
]
