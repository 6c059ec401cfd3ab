"""
Update request and result models.
"""
from typing import Optional
from pydantic import BaseModel, Field


class UpdateRequest(BaseModel):
    """Body of a file update request."""

    content: str = Field(..., min_length=1, description="New file content")


class UpdateResult(BaseModel):
    """Outcome of a successful write."""

    message: str = "Update triggered"
    commit: Optional[str] = Field(None, description="SHA of the new commit")
