"""
Appliances Router - Presentation Layer

HTTP endpoints for identifying, listing and deleting appliances.
Domain errors are mapped to status codes here and nowhere else.
"""

import asyncio
from typing import List

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Response, UploadFile, status

from appliance_identifier.application.dtos.appliance_dto import (
    ApplianceDraftDTO,
    ApplianceResponseDTO,
    EnergyProfileDTO,
)
from appliance_identifier.application.use_cases.appliance_use_cases import (
    ClassifyAndSaveApplianceUseCase,
    ClassifyApplianceUseCase,
    DeleteApplianceUseCase,
    GetApplianceImageUseCase,
    GetAppliancesUseCase,
    GetReferenceProfilesUseCase,
)
from appliance_identifier.domain.entities.appliance import StorageHandle
from appliance_identifier.domain.entities.errors import (
    ApplianceNotFoundError,
    ApplianceValidationError,
    ClassifierBackendError,
    ClassifierNoResultError,
    DomainError,
    InvalidImageError,
    StorageFailureError,
)
from appliance_identifier.infrastructure.imaging import decode_image

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/appliances", tags=["Appliances"])
reference_router = APIRouter(prefix="/reference-profiles", tags=["Reference"])

_ERROR_STATUS = (
    (ApplianceNotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidImageError, status.HTTP_400_BAD_REQUEST),
    (ApplianceValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (ClassifierNoResultError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (ClassifierBackendError, status.HTTP_502_BAD_GATEWAY),
    (StorageFailureError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def _to_http_error(error: DomainError) -> HTTPException:
    for error_type, status_code in _ERROR_STATUS:
        if isinstance(error, error_type):
            return HTTPException(
                status_code=status_code,
                detail={"error": type(error).__name__, "message": error.message},
            )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )


async def _read_image(file: UploadFile):
    data = await file.read()
    return await asyncio.to_thread(decode_image, data)


@router.get("/", response_model=List[ApplianceResponseDTO])
@inject
async def list_appliances(
    get_appliances_use_case: GetAppliancesUseCase = Depends(
        Provide["get_appliances_use_case"]
    ),
) -> List[ApplianceResponseDTO]:
    """List saved appliances, most recent first."""
    try:
        records = await get_appliances_use_case.execute()
    except DomainError as e:
        logger.error("appliances.list_failed", error=str(e))
        raise _to_http_error(e) from e
    return [ApplianceResponseDTO.from_domain(record) for record in records]


@router.post(
    "/",
    response_model=ApplianceResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def identify_appliance(
    file: UploadFile,
    classify_and_save_use_case: ClassifyAndSaveApplianceUseCase = Depends(
        Provide["classify_and_save_appliance_use_case"]
    ),
) -> ApplianceResponseDTO:
    """Identify the appliance in an uploaded photo and save the result."""
    try:
        image = await _read_image(file)
        record = await classify_and_save_use_case.execute(image)
    except DomainError as e:
        logger.warning(
            "appliances.identify_failed",
            filename=file.filename,
            error_type=type(e).__name__,
            error=str(e),
        )
        raise _to_http_error(e) from e
    return ApplianceResponseDTO.from_domain(record)


@router.post("/classify", response_model=ApplianceDraftDTO)
@inject
async def classify_appliance(
    file: UploadFile,
    classify_use_case: ClassifyApplianceUseCase = Depends(
        Provide["classify_appliance_use_case"]
    ),
) -> ApplianceDraftDTO:
    """Identify the appliance in an uploaded photo without saving it."""
    try:
        image = await _read_image(file)
        draft = await classify_use_case.execute(image)
    except DomainError as e:
        logger.warning(
            "appliances.classify_failed",
            filename=file.filename,
            error_type=type(e).__name__,
            error=str(e),
        )
        raise _to_http_error(e) from e
    return ApplianceDraftDTO.from_domain(draft)


@router.delete("/{handle}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def delete_appliance(
    handle: str,
    delete_use_case: DeleteApplianceUseCase = Depends(
        Provide["delete_appliance_use_case"]
    ),
) -> Response:
    """Delete a saved appliance by its handle."""
    try:
        await delete_use_case.execute(StorageHandle.from_token(handle))
    except DomainError as e:
        raise _to_http_error(e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{handle}/image",
    response_class=Response,
    responses={200: {"content": {"image/jpeg": {}}}},
)
@inject
async def get_appliance_image(
    handle: str,
    get_image_use_case: GetApplianceImageUseCase = Depends(
        Provide["get_appliance_image_use_case"]
    ),
) -> Response:
    """Return the photo stored with an appliance."""
    try:
        image_bytes = await get_image_use_case.execute(StorageHandle.from_token(handle))
    except DomainError as e:
        raise _to_http_error(e) from e
    if image_bytes is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No image stored for this appliance",
        )
    return Response(content=image_bytes, media_type="image/jpeg")


@reference_router.get("/", response_model=List[EnergyProfileDTO])
@inject
async def list_reference_profiles(
    get_reference_profiles_use_case: GetReferenceProfilesUseCase = Depends(
        Provide["get_reference_profiles_use_case"]
    ),
) -> List[EnergyProfileDTO]:
    """Return the reference energy table in lookup order."""
    profiles = await get_reference_profiles_use_case.execute()
    return [EnergyProfileDTO.from_domain(name, profile) for name, profile in profiles]
