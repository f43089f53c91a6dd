"""
Task endpoints for API v1.

Tasks carry a ``projectId`` and an optional ``assignedTo`` person id.
Neither is checked against the other collections.  New tasks always
start in the ``todo`` status, and the status is the only field the
update endpoint changes.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, status

from team_tracker_api.app.core.deps import body_schema, get_task_service, read_body
from team_tracker_api.app.core.errors import NOT_FOUND_MESSAGES, NotFoundError
from team_tracker_api.app.schemas.common import CreatedResponse, MessageResponse
from team_tracker_api.app.schemas.task import Task, TaskCreate, TaskUpdate
from team_tracker_api.app.services.task_service import TaskService

router = APIRouter()

NOT_FOUND = NOT_FOUND_MESSAGES["tasks"]


@router.get("", response_model=List[Task])
@router.get("/", response_model=List[Task], include_in_schema=False)
async def list_tasks(service: TaskService = Depends(get_task_service)) -> List[Task]:
    """Return every task in insertion order."""
    return service.list_tasks()


@router.get("/{task_id}", response_model=Task)
async def get_task(
    task_id: int,
    service: TaskService = Depends(get_task_service),
) -> Task:
    task = service.get_task(task_id)
    if task is None:
        raise NotFoundError(NOT_FOUND)
    return task


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
async def create_task(
    task_in: TaskCreate,
    service: TaskService = Depends(get_task_service),
) -> CreatedResponse:
    """Create a task.

    ``title``, ``description`` and ``projectId`` are required; any
    ``status`` sent by the client is discarded.
    """
    task = service.create_task(task_in)
    return CreatedResponse(message="Task created", id=task.id)


@router.put(
    "/{task_id}",
    response_model=MessageResponse,
    openapi_extra=body_schema(TaskUpdate),
)
async def update_task(
    task_id: int,
    request: Request,
    service: TaskService = Depends(get_task_service),
) -> MessageResponse:
    """Set the status of a task.  Any string is accepted."""
    # An unknown id is reported before the body is looked at.
    if service.get_task(task_id) is None:
        raise NotFoundError(NOT_FOUND)
    task_in = await read_body(request, TaskUpdate)
    if service.update_task(task_id, task_in) is None:
        raise NotFoundError(NOT_FOUND)
    return MessageResponse(message="Task updated")


@router.delete("/{task_id}", response_model=MessageResponse)
async def delete_task(
    task_id: int,
    service: TaskService = Depends(get_task_service),
) -> MessageResponse:
    if not service.delete_task(task_id):
        raise NotFoundError(NOT_FOUND)
    return MessageResponse(message="Task deleted")
