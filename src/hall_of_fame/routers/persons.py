"""Person API endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Path, Request, Response, status
from fastapi.responses import JSONResponse

from ..dependencies import get_person_service
from ..models.person import PersonDto
from ..services.person_service import PersonService
from ..services.results import NotFound
from ..validation import ValidationErrors, validate_person

router = APIRouter(prefix="/persons", tags=["Persons"])

# Ids are 64-bit integers in the store
PersonId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


def _bad_request(errors: ValidationErrors) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=errors)


def _not_found() -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.get("", response_model=list[PersonDto])
async def list_persons(
    service: PersonService = Depends(get_person_service),
) -> list[PersonDto]:
    """List all persons with their skills."""
    return await service.list_persons()


@router.get(
    "/{person_id}",
    response_model=PersonDto,
    responses={404: {"description": "Person not found"}},
)
async def get_person(
    person_id: PersonId,
    service: PersonService = Depends(get_person_service),
) -> Any:
    """Get a person by ID."""
    result = await service.get_person(person_id)
    if isinstance(result, NotFound):
        return _not_found()
    return result.value


@router.post(
    "",
    response_model=PersonDto,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Validation failed"}},
)
async def create_person(
    request: Request,
    response: Response,
    payload: Any = Body(None),
    service: PersonService = Depends(get_person_service),
) -> Any:
    """Create a new person with the given skills. Any supplied id is ignored."""
    dto, errors = validate_person(payload)
    if errors:
        return _bad_request(errors)

    created = await service.create_person(dto)
    response.headers["Location"] = str(
        request.url_for("get_person", person_id=created.id)
    )
    return created


@router.put(
    "/{person_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={400: {"description": "Validation failed"}, 404: {"description": "Person not found"}},
)
async def update_person(
    person_id: PersonId,
    payload: Any = Body(None),
    service: PersonService = Depends(get_person_service),
) -> Response:
    """Update a person and reconcile its skills with the payload."""
    dto, errors = validate_person(payload)
    if errors:
        return _bad_request(errors)

    result = await service.update_person(person_id, dto)
    if isinstance(result, NotFound):
        return _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{person_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Person not found"}},
)
async def delete_person(
    person_id: PersonId,
    service: PersonService = Depends(get_person_service),
) -> Response:
    """Delete a person together with its skills."""
    result = await service.delete_person(person_id)
    if isinstance(result, NotFound):
        return _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
