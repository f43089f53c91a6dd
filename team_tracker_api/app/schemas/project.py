"""Pydantic models for projects."""

from typing import Optional

from pydantic import BaseModel, Field


class ProjectCreate(BaseModel):
    """Schema for creating a project; ``name`` and ``description`` are required."""

    name: str = Field(..., min_length=1, examples=["Plataforma Educativa"])
    description: str = Field(..., min_length=1, examples=["Sistema de cursos online"])


class ProjectUpdate(BaseModel):
    # Only the name can be renamed; description is fixed at creation.
    name: Optional[str] = Field(None, examples=["Learning Platform"])


class Project(BaseModel):
    id: int
    name: str
    description: str
