"""Response bodies shared by the people, projects and tasks endpoints."""

from typing import Optional

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Acknowledgement returned by update and delete endpoints."""

    message: str = Field(..., examples=["Person updated"])


class CreatedResponse(MessageResponse):
    """Acknowledgement returned by create endpoints.

    ``id`` is the identifier assigned to the new record, so clients do
    not have to re‑list the collection to find it.
    """

    id: Optional[int] = Field(None, examples=[3])
