"""
File update request handler.
"""
import base64
import json
from typing import Any, Optional

import httpx
from fastapi import Request
from pydantic import ValidationError

from ..config import Settings
from ..errors import InvalidInput, MethodNotAllowed, PreconditionFailed
from ..github import FileLocation, GitHubContentClient, RemoteFile
from ..logger import logger
from .models import UpdateRequest, UpdateResult


def encode_content(text: str) -> str:
    """Base64-encode text as UTF-8, as the contents API expects."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def parse_update_request(raw_body: bytes) -> UpdateRequest:
    """
    Parse and validate an update request body.

    Raises:
        InvalidInput: If the body is not JSON or has no non-empty content
    """
    try:
        data = json.loads(raw_body)
    except ValueError:
        raise InvalidInput("Invalid JSON body")

    if not isinstance(data, dict):
        raise InvalidInput("Missing content")

    try:
        return UpdateRequest.model_validate(data)
    except ValidationError:
        raise InvalidInput("Missing content")


def extract_commit_sha(write_response: Any) -> Optional[str]:
    """Pull ``commit.sha`` out of a write response, if it is there."""
    if not isinstance(write_response, dict):
        return None
    commit = write_response.get("commit")
    if not isinstance(commit, dict):
        return None
    return commit.get("sha")


class UpdateHandler:
    """Replaces the configured file with the content of a request."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self.location = FileLocation(
            owner=settings.github_owner,
            repo=settings.github_repo,
            path=settings.file_path,
            branch=settings.branch,
        )
        self._transport = transport

    def _client(self) -> GitHubContentClient:
        return GitHubContentClient(
            token=self.settings.gh_token.get_secret_value(),
            api_base_url=self.settings.github_api_url,
            user_agent=self.settings.user_agent,
            transport=self._transport,
        )

    async def handle_update(self, request: Request) -> UpdateResult:
        """
        Handle an incoming update request.

        Args:
            request: FastAPI request object

        Returns:
            Result carrying the new commit SHA

        Raises:
            MethodNotAllowed: If the request is not a POST
            InvalidInput: If the body is not valid
            RelayError: If any GitHub call fails
        """
        if request.method != "POST":
            raise MethodNotAllowed(request.method)

        update = parse_update_request(await request.body())
        return await self.update_file(update)

    async def update_file(self, update: UpdateRequest) -> UpdateResult:
        """
        Read the current version token, then write conditionally on it.

        A concurrent write between the two calls makes GitHub reject the
        stale token; that surfaces as RemoteAPIError and is not retried.
        """
        location = self.location

        async with self._client() as client:
            file_data = await client.get_file(location)
            current = self._current_version(file_data)
            logger.info(f"Updating {location.full_name}:{current.path or location.path}@{location.branch} from {current.sha[:7]}")

            write_response = await client.put_file(
                location,
                content_b64=encode_content(update.content),
                sha=current.sha,
                message=self.settings.commit_message,
            )

        commit = extract_commit_sha(write_response)
        logger.info(f"Update committed: {commit or 'no commit sha in response'}")
        return UpdateResult(commit=commit)

    @staticmethod
    def _current_version(file_data: Any) -> RemoteFile:
        if not isinstance(file_data, dict) or not file_data.get("sha"):
            raise PreconditionFailed()
        try:
            return RemoteFile.model_validate(file_data)
        except ValidationError:
            raise PreconditionFailed()
