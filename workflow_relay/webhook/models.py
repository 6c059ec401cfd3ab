"""
Webhook event models.
"""
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class WorkflowRun(BaseModel):
    """The ``workflow_run`` record of a GitHub Actions event."""

    model_config = ConfigDict(extra="ignore")

    # Opaque pass-through values, copied without validation
    name: Any = None
    status: Any = None
    conclusion: Any = None
    head_sha: Any = None


class WebhookEvent(BaseModel):
    """Inbound workflow run event."""

    model_config = ConfigDict(extra="ignore")

    action: Any = None
    workflow_run: Optional[WorkflowRun] = None

    @property
    def is_completed_run(self) -> bool:
        """Check if this event reports a finished workflow run."""
        return self.action == "completed" and self.workflow_run is not None


class WorkflowSummary(BaseModel):
    """Status summary relayed for a completed workflow run."""

    workflow: Any = Field(None, description="Workflow name")
    status: Any = Field(None, description="Run status")
    conclusion: Any = Field(None, description="Run conclusion")
    commit: Any = Field(None, description="Head commit SHA")


class IgnoredEvent(BaseModel):
    """Marker returned for events that are not relayed."""

    message: str = "Ignored event"
