"""
Catalog module.

Read-only resources scoped to the authenticated user (services) or
global (latest extension version).
"""

from .interfaces import ICatalogService, ICatalogRepository
from .models import ExtensionVersion, ServiceRecord

__all__ = [
    "ICatalogService",
    "ICatalogRepository",
    "ExtensionVersion",
    "ServiceRecord",
]
