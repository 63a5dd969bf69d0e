"""
Personas API endpoints
"""
from typing import List

from fastapi import APIRouter, Depends, Query

from constants import HTTPStatus, Messages
from dependencies import get_person_service
from dtos.request.person_request import PersonRequest
from dtos.response.envelope import DataResponse, DeletedRecord, ErrorResponse, MessageResponse
from dtos.response.person_response import PersonResponse
from services.interfaces import IPersonService
from utils.error_handlers import handle_api_errors, parse_id

router = APIRouter(responses={
    HTTPStatus.BAD_REQUEST: {"model": ErrorResponse},
    HTTPStatus.NOT_FOUND: {"model": ErrorResponse},
    HTTPStatus.INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
})


@router.post("/personas", response_model=MessageResponse[PersonResponse], status_code=HTTPStatus.CREATED)
@handle_api_errors(Messages.PERSON_CREATE_FAILED)
def create_person(payload: PersonRequest, service: IPersonService = Depends(get_person_service)):
    """
    Register a persona.

    Fails with 400 when the email is already registered or the area does not exist.
    """
    person = service.create(payload.to_entity())
    return MessageResponse[PersonResponse](
        message=Messages.PERSON_CREATED,
        data=PersonResponse.model_validate(person)
    )


@router.get("/personas", response_model=DataResponse[List[PersonResponse]])
@handle_api_errors(Messages.PERSON_LIST_FAILED)
def list_personas(
    include_deleted: bool = Query(False, description="Also return soft-deleted personas"),
    service: IPersonService = Depends(get_person_service)
):
    """List personas with their area attached."""
    personas = service.get_all(include_deleted=include_deleted)
    return DataResponse[List[PersonResponse]](data=[PersonResponse.model_validate(p) for p in personas])


@router.get("/personas/email/{email}", response_model=DataResponse[PersonResponse])
@handle_api_errors(Messages.PERSON_GET_FAILED, not_found_message=Messages.PERSON_NOT_FOUND)
def get_person_by_email(email: str, service: IPersonService = Depends(get_person_service)):
    """Get an active persona by email."""
    person = service.get_by_email(email)
    return DataResponse[PersonResponse](data=PersonResponse.model_validate(person))


@router.get("/personas/{person_id}", response_model=DataResponse[PersonResponse])
@handle_api_errors(Messages.PERSON_GET_FAILED, not_found_message=Messages.PERSON_NOT_FOUND)
def get_person(person_id: str, service: IPersonService = Depends(get_person_service)):
    """Get a persona by ID."""
    person = service.get_by_id(parse_id(person_id))
    return DataResponse[PersonResponse](data=PersonResponse.model_validate(person))


@router.put("/personas/{person_id}", response_model=MessageResponse[PersonResponse])
@handle_api_errors(Messages.PERSON_UPDATE_FAILED, not_found_status=HTTPStatus.BAD_REQUEST)
def update_person(person_id: str, payload: PersonRequest, service: IPersonService = Depends(get_person_service)):
    """
    Replace a persona's name, email and area.

    Every failure, including a missing persona, is reported as 400.
    """
    person = service.update(parse_id(person_id), payload.to_entity())
    return MessageResponse[PersonResponse](
        message=Messages.PERSON_UPDATED,
        data=PersonResponse.model_validate(person)
    )


@router.delete("/personas/{person_id}", response_model=MessageResponse[DeletedRecord])
@handle_api_errors(Messages.PERSON_DELETE_FAILED)
def delete_person(person_id: str, service: IPersonService = Depends(get_person_service)):
    """Soft-delete a persona. Deleting twice reports 404 the second time."""
    record_id = parse_id(person_id)
    service.delete(record_id)
    return MessageResponse[DeletedRecord](message=Messages.PERSON_DELETED, data=DeletedRecord(id=record_id))
