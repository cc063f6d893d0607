"""
Catalog API endpoints.

Read-only listings: the caller's services and the latest extension version.
"""

from fastapi import APIRouter, Depends, Request

from api.dependencies import get_catalog_service
from api.middleware.auth import authenticate_request, get_current_user
from shared.models import AuthenticatedUser

from .interfaces import ICatalogService
from .models import ServicesResponse, VersionResponse

router = APIRouter()


@router.get("/services", response_model=ServicesResponse)
async def list_services(
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICatalogService = Depends(get_catalog_service),
) -> ServicesResponse:
    """
    List the current user's active services, most recent first.

    Requires authentication. An empty list is a normal response.
    """
    services = await service.list_services(user.id)
    return ServicesResponse(services=services)


@router.get("/version", response_model=VersionResponse)
async def get_latest_version(
    request: Request,
    service: ICatalogService = Depends(get_catalog_service),
) -> VersionResponse:
    """
    Get the latest published extension version.

    Public unless VERSION_REQUIRES_AUTH is set. ``version`` is null when
    no version is flagged as latest.
    """
    if request.app.state.settings.version_requires_auth:
        await authenticate_request(request)
    version = await service.latest_version()
    return VersionResponse(version=version)
