"""
Catalog module data models.

Service and version rows are passed through to clients with all of
their columns; only the fields this service reads are declared.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ServiceRecord(BaseModel):
    """A row of ``user_services``."""

    model_config = ConfigDict(extra="allow")

    id: str
    user_id: str
    is_active: bool = True
    created_at: Optional[datetime] = None


class ExtensionVersion(BaseModel):
    """A row of ``extension_versions``."""

    model_config = ConfigDict(extra="allow")

    id: str
    is_latest: bool = False


class ServicesResponse(BaseModel):
    """Body returned by GET /api/services."""

    success: bool = True
    services: list[ServiceRecord] = Field(default_factory=list)


class VersionResponse(BaseModel):
    """Body returned by GET /api/version."""

    success: bool = True
    version: Optional[ExtensionVersion] = None
