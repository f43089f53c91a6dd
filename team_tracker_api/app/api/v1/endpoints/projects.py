"""
Project endpoints for API v1.

A project has a name and a description; only the name can be changed
once the project exists.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, status

from team_tracker_api.app.core.deps import body_schema, get_project_service, read_body
from team_tracker_api.app.core.errors import NOT_FOUND_MESSAGES, NotFoundError
from team_tracker_api.app.schemas.common import CreatedResponse, MessageResponse
from team_tracker_api.app.schemas.project import Project, ProjectCreate, ProjectUpdate
from team_tracker_api.app.services.project_service import ProjectService

router = APIRouter()

NOT_FOUND = NOT_FOUND_MESSAGES["projects"]


@router.get("", response_model=List[Project])
@router.get("/", response_model=List[Project], include_in_schema=False)
async def list_projects(service: ProjectService = Depends(get_project_service)) -> List[Project]:
    return service.list_projects()


@router.get("/{project_id}", response_model=Project)
async def get_project(
    project_id: int,
    service: ProjectService = Depends(get_project_service),
) -> Project:
    project = service.get_project(project_id)
    if project is None:
        raise NotFoundError(NOT_FOUND)
    return project


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
async def create_project(
    project_in: ProjectCreate,
    service: ProjectService = Depends(get_project_service),
) -> CreatedResponse:
    project = service.create_project(project_in)
    return CreatedResponse(message="Project created", id=project.id)


@router.put(
    "/{project_id}",
    response_model=MessageResponse,
    openapi_extra=body_schema(ProjectUpdate),
)
async def update_project(
    project_id: int,
    request: Request,
    service: ProjectService = Depends(get_project_service),
) -> MessageResponse:
    """Rename a project.  A body without ``name`` leaves it unchanged."""
    # An unknown id is reported before the body is looked at.
    if service.get_project(project_id) is None:
        raise NotFoundError(NOT_FOUND)
    project_in = await read_body(request, ProjectUpdate)
    if service.update_project(project_id, project_in) is None:
        raise NotFoundError(NOT_FOUND)
    return MessageResponse(message="Project updated")


@router.delete("/{project_id}", response_model=MessageResponse)
async def delete_project(
    project_id: int,
    service: ProjectService = Depends(get_project_service),
) -> MessageResponse:
    if not service.delete_project(project_id):
        raise NotFoundError(NOT_FOUND)
    return MessageResponse(message="Project deleted")
