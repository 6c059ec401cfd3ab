"""
Webhook handling module.
"""
from .models import WebhookEvent, WorkflowRun, WorkflowSummary, IgnoredEvent
from .parser import WorkflowRunParser
from .signature import compute_signature, verify_signature
from .handler import WebhookHandler

__all__ = [
    "WebhookEvent",
    "WorkflowRun",
    "WorkflowSummary",
    "IgnoredEvent",
    "WorkflowRunParser",
    "compute_signature",
    "verify_signature",
    "WebhookHandler",
]
