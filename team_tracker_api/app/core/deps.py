"""
FastAPI dependencies and request helpers shared by the endpoints.

The stores are created by ``create_app`` and kept on ``app.state``;
handlers never import a module‑level collection.  ``read_body``
parses a JSON body into a schema inside the handler, which lets the
update endpoints answer 404 for an unknown id before looking at the
body at all.
"""

import json
from typing import Any, Dict, Type, TypeVar

import pydantic
from fastapi import Request

from team_tracker_api.app.core.errors import ValidationError
from team_tracker_api.app.services.people_service import PeopleService
from team_tracker_api.app.services.project_service import ProjectService
from team_tracker_api.app.services.task_service import TaskService

SchemaT = TypeVar("SchemaT", bound=pydantic.BaseModel)


def get_people_service(request: Request) -> PeopleService:
    return request.app.state.people


def get_project_service(request: Request) -> ProjectService:
    return request.app.state.projects


def get_task_service(request: Request) -> TaskService:
    return request.app.state.tasks


async def read_body(request: Request, schema: Type[SchemaT]) -> SchemaT:
    """Parse the JSON request body into ``schema``.

    An empty body yields ``schema()``.  Bodies that are not a JSON
    object, or that fail validation, raise :class:`ValidationError`.
    """
    raw = await request.body()
    if not raw.strip():
        return schema()
    try:
        data = json.loads(raw)
    except ValueError:
        raise ValidationError("Malformed request body")
    if not isinstance(data, dict):
        raise ValidationError("Malformed request body")
    try:
        return schema.model_validate(data)
    except pydantic.ValidationError as exc:
        raise ValidationError.from_errors(exc.errors())


def body_schema(schema: Type[pydantic.BaseModel]) -> Dict[str, Any]:
    """``openapi_extra`` documenting a body read through :func:`read_body`."""
    return {
        "requestBody": {
            "required": False,
            "content": {"application/json": {"schema": schema.model_json_schema()}},
        }
    }
