"""
Areas API endpoints
"""
from typing import List

from fastapi import APIRouter, Depends, Query

from constants import HTTPStatus, Messages
from dependencies import get_area_service
from dtos.request.area_request import AreaRequest
from dtos.response.area_response import AreaResponse, AreaWithCountResponse
from dtos.response.envelope import DataResponse, DeletedRecord, ErrorResponse, MessageResponse
from services.interfaces import IAreaService
from utils.error_handlers import handle_api_errors, parse_id

router = APIRouter(responses={
    HTTPStatus.BAD_REQUEST: {"model": ErrorResponse},
    HTTPStatus.NOT_FOUND: {"model": ErrorResponse},
    HTTPStatus.INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
})


@router.post("/areas", response_model=MessageResponse[AreaResponse], status_code=HTTPStatus.CREATED)
@handle_api_errors(Messages.AREA_CREATE_FAILED)
def create_area(payload: AreaRequest, service: IAreaService = Depends(get_area_service)):
    """Create an area. Duplicate names are rejected with 400."""
    area = service.create(payload.to_entity())
    return MessageResponse[AreaResponse](
        message=Messages.AREA_CREATED,
        data=AreaResponse.model_validate(area)
    )


@router.get("/areas", response_model=DataResponse[List[AreaResponse]])
@handle_api_errors(Messages.AREA_LIST_FAILED)
def list_areas(
    include_deleted: bool = Query(False, description="Also return soft-deleted areas"),
    service: IAreaService = Depends(get_area_service)
):
    """List areas (active only by default)."""
    areas = service.get_all(include_deleted=include_deleted)
    return DataResponse[List[AreaResponse]](data=[AreaResponse.model_validate(a) for a in areas])


# Registered before /areas/{area_id} so "conteo" is not parsed as an id
@router.get("/areas/conteo", response_model=DataResponse[List[AreaWithCountResponse]])
@handle_api_errors(Messages.AREA_COUNT_FAILED)
def list_areas_with_count(service: IAreaService = Depends(get_area_service)):
    """List active areas with the number of active personas in each."""
    rows = service.get_areas_with_count()
    return DataResponse[List[AreaWithCountResponse]](
        data=[AreaWithCountResponse.model_validate(r) for r in rows]
    )


@router.get("/areas/{area_id}", response_model=DataResponse[AreaResponse])
@handle_api_errors(Messages.AREA_GET_FAILED, not_found_message=Messages.AREA_NOT_FOUND)
def get_area(area_id: str, service: IAreaService = Depends(get_area_service)):
    """Get an area by ID."""
    area = service.get_by_id(parse_id(area_id))
    return DataResponse[AreaResponse](data=AreaResponse.model_validate(area))


@router.put("/areas/{area_id}", response_model=MessageResponse[AreaResponse])
@handle_api_errors(Messages.AREA_UPDATE_FAILED, not_found_status=HTTPStatus.BAD_REQUEST)
def update_area(area_id: str, payload: AreaRequest, service: IAreaService = Depends(get_area_service)):
    """
    Replace an area's name and description.

    A missing area is reported as 400, like every other update failure.
    """
    area = service.update(parse_id(area_id), payload.to_entity())
    return MessageResponse[AreaResponse](
        message=Messages.AREA_UPDATED,
        data=AreaResponse.model_validate(area)
    )


@router.delete(
    "/areas/{area_id}",
    response_model=MessageResponse[DeletedRecord],
    responses={HTTPStatus.CONFLICT: {"model": ErrorResponse}}
)
@handle_api_errors(Messages.AREA_DELETE_FAILED)
def delete_area(area_id: str, service: IAreaService = Depends(get_area_service)):
    """
    Soft-delete an area.

    Returns 404 if the area does not exist (or was already deleted) and 409
    while active personas still reference it.
    """
    record_id = parse_id(area_id)
    service.delete(record_id)
    return MessageResponse[DeletedRecord](message=Messages.AREA_DELETED, data=DeletedRecord(id=record_id))
