"""
Pydantic models for people.

A person is a team member with a name, an e‑mail address and a role.
Only the role can be changed after creation.
"""

from typing import Optional

from pydantic import BaseModel, Field


class PersonCreate(BaseModel):
    """Schema for creating a person.  All fields are required and non‑empty."""

    name: str = Field(..., min_length=1, examples=["Ann"])
    email: str = Field(..., min_length=1, examples=["a@x.com"])
    role: str = Field(..., min_length=1, examples=["Dev"])


class PersonUpdate(BaseModel):
    """Schema for updating a person.

    ``role`` is the only mutable field.  Any other key in the body is
    ignored, and an empty or missing ``role`` leaves the record as is.
    """

    role: Optional[str] = Field(None, examples=["QA"])


class Person(BaseModel):
    """A stored person as returned by the API."""

    id: int
    name: str
    email: str
    role: str
