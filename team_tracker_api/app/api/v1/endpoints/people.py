"""
People endpoints for API v1.

CRUD routes over the people store.  Creating a person requires a
name, an e‑mail and a role; updating only ever touches the role.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, status

from team_tracker_api.app.core.deps import body_schema, get_people_service, read_body
from team_tracker_api.app.core.errors import NOT_FOUND_MESSAGES, NotFoundError
from team_tracker_api.app.schemas.common import CreatedResponse, MessageResponse
from team_tracker_api.app.schemas.person import Person, PersonCreate, PersonUpdate
from team_tracker_api.app.services.people_service import PeopleService

router = APIRouter()

NOT_FOUND = NOT_FOUND_MESSAGES["people"]


@router.get("", response_model=List[Person])
@router.get("/", response_model=List[Person], include_in_schema=False)
async def list_people(service: PeopleService = Depends(get_people_service)) -> List[Person]:
    """Return every person in insertion order."""
    return service.list_people()


@router.get("/{person_id}", response_model=Person)
async def get_person(
    person_id: int,
    service: PeopleService = Depends(get_people_service),
) -> Person:
    """Retrieve a single person.  Returns HTTP 404 if the id is unknown."""
    person = service.get_person(person_id)
    if person is None:
        raise NotFoundError(NOT_FOUND)
    return person


@router.post(
    "",
    response_model=CreatedResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
@router.post(
    "/",
    response_model=CreatedResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_person(
    person_in: PersonCreate,
    service: PeopleService = Depends(get_people_service),
) -> CreatedResponse:
    """Create a person.  Missing or empty fields yield HTTP 400."""
    person = service.create_person(person_in)
    return CreatedResponse(message="Person created", id=person.id)


@router.put(
    "/{person_id}",
    response_model=MessageResponse,
    openapi_extra=body_schema(PersonUpdate),
)
async def update_person(
    person_id: int,
    request: Request,
    service: PeopleService = Depends(get_people_service),
) -> MessageResponse:
    """Change the role of a person; other body fields are ignored."""
    # An unknown id is reported before the body is looked at.
    if service.get_person(person_id) is None:
        raise NotFoundError(NOT_FOUND)
    person_in = await read_body(request, PersonUpdate)
    if service.update_person(person_id, person_in) is None:
        raise NotFoundError(NOT_FOUND)
    return MessageResponse(message="Person updated")


@router.delete("/{person_id}", response_model=MessageResponse)
async def delete_person(
    person_id: int,
    service: PeopleService = Depends(get_people_service),
) -> MessageResponse:
    if not service.delete_person(person_id):
        raise NotFoundError(NOT_FOUND)
    return MessageResponse(message="Person deleted")
