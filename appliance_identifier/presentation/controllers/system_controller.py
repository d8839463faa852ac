"""System endpoints exposing health and info."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Request

from appliance_identifier.application.dtos.health_dto import (
    ApplicationInfoDTO,
    SystemHealthDTO,
)
from appliance_identifier.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from appliance_identifier.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get("/health", response_model=SystemHealthDTO)
@inject
async def health(
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide["get_health_status_use_case"]
    ),
) -> SystemHealthDTO:
    """Return the health status of the application dependencies."""
    health_status = await get_health_status_use_case.execute()
    logger.debug("health.check", status=health_status.status.value)
    return health_status


@router.get("/info", response_model=ApplicationInfoDTO)
@inject
async def info(
    request: Request,
    get_application_info_use_case: GetApplicationInfoUseCase = Depends(
        Provide["get_application_info_use_case"]
    ),
) -> ApplicationInfoDTO:
    """Return build, uptime and classifier information."""
    started_at = getattr(request.app.state, "started_at", None)
    info_response = await get_application_info_use_case.execute(started_at)
    logger.debug("info.retrieved", status=info_response.status.value)
    return info_response
