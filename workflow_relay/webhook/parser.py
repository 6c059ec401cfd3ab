"""
Workflow run payload classification.
"""
from typing import Optional, Dict, Any

from .models import WebhookEvent, WorkflowSummary


class WorkflowRunParser:
    """Turns GitHub ``workflow_run`` payloads into status summaries."""

    # Summary field -> workflow_run field
    SUMMARY_FIELDS = {
        "workflow": "name",
        "status": "status",
        "conclusion": "conclusion",
        "commit": "head_sha",
    }

    def parse(self, payload: Any) -> Optional[WorkflowSummary]:
        """
        Parse a webhook payload into a summary.

        Returns None for anything other than a completed workflow run.
        Fields absent from the run are left unset on the summary.
        """
        if not isinstance(payload, dict):
            return None

        if not isinstance(payload.get("workflow_run"), dict):
            return None

        event = WebhookEvent.model_validate(payload)
        if not event.is_completed_run:
            return None

        run = event.workflow_run
        values: Dict[str, Any] = {
            summary_field: getattr(run, run_field)
            for summary_field, run_field in self.SUMMARY_FIELDS.items()
            if run_field in run.model_fields_set
        }
        return WorkflowSummary(**values)
