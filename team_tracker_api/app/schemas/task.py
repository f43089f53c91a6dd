"""
Pydantic models for tasks.

A task belongs to a project (``projectId``) and may be assigned to a
person (``assignedTo``).  Neither reference is checked against the
other collections.  JSON bodies use camelCase keys; the models expose
snake_case attributes and accept either spelling on input.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_STATUS = "todo"


class TaskCreate(BaseModel):
    """Schema for creating a task.

    ``title``, ``description`` and ``projectId`` are required and must
    be non‑empty (a ``projectId`` of ``0`` counts as missing).
    ``assignedTo`` is optional.  A ``status`` key in the body is
    ignored: new tasks always start as ``"todo"``.
    """

    title: str = Field(..., min_length=1, examples=["Diseñar UI"])
    description: str = Field(..., min_length=1, examples=["Pantalla principal"])
    project_id: int = Field(..., alias="projectId", examples=[1])
    assigned_to: Optional[int] = Field(None, alias="assignedTo", examples=[1])

    model_config = {"populate_by_name": True}

    @field_validator("project_id")
    @classmethod
    def project_id_present(cls, value: int) -> int:
        if not value:
            raise ValueError("projectId is required")
        return value


class TaskUpdate(BaseModel):
    """Schema for updating a task.

    ``status`` is a free‑form string; there is no fixed set of values
    and no enforced order of transitions.
    """

    status: Optional[str] = Field(None, examples=["in-progress"])


class Task(BaseModel):
    """A stored task as returned by the API."""

    id: int
    title: str
    description: str
    status: str = DEFAULT_STATUS
    project_id: int = Field(..., alias="projectId")
    assigned_to: Optional[int] = Field(None, alias="assignedTo")

    model_config = {"populate_by_name": True}
