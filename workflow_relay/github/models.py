"""
GitHub contents API models.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class FileLocation(BaseModel):
    """Where the managed file lives."""

    model_config = ConfigDict(frozen=True)

    owner: str = Field(..., description="Repository owner")
    repo: str = Field(..., description="Repository name")
    path: str = Field(..., description="File path inside the repository")
    branch: str = Field(..., description="Branch to read from and commit to")

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


class RemoteFile(BaseModel):
    """File metadata as returned by a contents read."""

    model_config = ConfigDict(extra="ignore")

    sha: str = Field(..., description="Current version token")
    path: Optional[str] = Field(None, description="Path reported by GitHub")
