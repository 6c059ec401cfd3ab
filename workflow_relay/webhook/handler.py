"""
Webhook request handler.
"""
import json
from typing import Union

from fastapi import Request
from fastapi.responses import PlainTextResponse

from ..config import Settings
from ..errors import MalformedPayload, Unauthorized
from ..logger import logger
from .models import IgnoredEvent, WorkflowSummary
from .parser import WorkflowRunParser
from .signature import verify_signature


SIGNATURE_HEADER = "X-Hub-Signature-256"


class WebhookHandler:
    """Handles incoming GitHub workflow run webhooks."""

    def __init__(self, settings: Settings):
        self._secret = settings.webhook_secret
        self.parser = WorkflowRunParser()

    async def handle_webhook(
        self,
        request: Request,
    ) -> Union[WorkflowSummary, IgnoredEvent, PlainTextResponse]:
        """
        Handle incoming webhook request.

        Args:
            request: FastAPI request object

        Returns:
            Summary for a completed workflow run, the ignored marker for
            any other event, or a plain "OK" for non-POST probes

        Raises:
            Unauthorized: If the signature does not verify
            MalformedPayload: If a verified body is not JSON
        """
        if request.method != "POST":
            return PlainTextResponse("OK")

        # Raw body for signature verification, never re-serialized
        body = await request.body()
        signature = request.headers.get(SIGNATURE_HEADER)

        if not verify_signature(body, signature, self._secret.get_secret_value()):
            raise Unauthorized()

        try:
            payload = json.loads(body)
        except ValueError:
            raise MalformedPayload()

        event_name = request.headers.get("X-GitHub-Event")
        delivery = request.headers.get("X-GitHub-Delivery")

        summary = self.parser.parse(payload)
        if summary is None:
            logger.info(f"Ignored webhook event {event_name} (delivery {delivery})")
            return IgnoredEvent()

        logger.info(f"Workflow {summary.workflow} {summary.conclusion} @ {summary.commit} (delivery {delivery})")
        return summary
