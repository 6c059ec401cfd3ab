"""
GitHub contents API client.

One attempt per call: no retries and no timeout beyond the httpx default.
"""
import json
from typing import Any, Dict, Optional

import httpx

from ..errors import NonJSONResponse, RemoteAPIError, RemoteUnavailable
from ..logger import logger
from .models import FileLocation


GITHUB_MEDIA_TYPE = "application/vnd.github+json"


class GitHubContentClient:
    """
    Authenticated wrapper around the GitHub REST contents endpoints.

    Meant to be used as an async context manager, one instance per request.
    """

    def __init__(
        self,
        token: str,
        api_base_url: str = "https://api.github.com",
        user_agent: str = "workflow-relay",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            token: GitHub token sent as a bearer credential
            api_base_url: Root of the GitHub REST API
            user_agent: User-Agent header value (GitHub requires one)
            transport: Optional httpx transport, used by tests
        """
        self.api_base_url = api_base_url.rstrip("/")
        self._token = token
        self._user_agent = user_agent
        self._client = httpx.AsyncClient(transport=transport)

    async def close(self):
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "GitHubContentClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    def _default_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._token}",
            "Accept": GITHUB_MEDIA_TYPE,
            "Content-Type": "application/json",
            "User-Agent": self._user_agent,
        }

    async def call(
        self,
        url: str,
        method: str = "GET",
        headers: Optional[Dict[str, str]] = None,
        body: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        Make an authenticated request and return the parsed JSON body.

        Args:
            url: Absolute request URL
            method: HTTP method
            headers: Extra headers, overriding the defaults
            body: JSON request body
            params: Query parameters

        Returns:
            Parsed JSON response

        Raises:
            NonJSONResponse: If the response body is not JSON
            RemoteAPIError: If the response status is not a success
            RemoteUnavailable: If the request could not be sent
        """
        request_headers = {**self._default_headers(), **(headers or {})}
        content = json.dumps(body) if body is not None else None

        logger.debug(f"GitHub request: {method} {url}")

        try:
            response = await self._client.request(
                method,
                url,
                headers=request_headers,
                params=params,
                content=content,
            )
        except httpx.RequestError as e:
            logger.error(f"GitHub request {method} {url} failed: {e}")
            raise RemoteUnavailable(str(e) or type(e).__name__) from e

        text = response.text
        logger.debug(f"GitHub response: {response.status_code} from {method} {url}")

        # The body is parsed before the status is checked, so a non-JSON
        # error page is reported as such
        try:
            data = json.loads(text)
        except ValueError:
            raise NonJSONResponse(text, remote_status=response.status_code)

        if not response.is_success:
            logger.warning(f"GitHub API error {response.status_code} for {method} {url}")
            raise RemoteAPIError(response.status_code, data)

        return data

    def contents_url(self, location: FileLocation) -> str:
        """Build the contents endpoint URL for a file."""
        return (
            f"{self.api_base_url}/repos/{location.owner}/{location.repo}"
            f"/contents/{location.path}"
        )

    async def get_file(self, location: FileLocation) -> Any:
        """Read file metadata and content at the location's branch."""
        return await self.call(
            self.contents_url(location),
            params={"ref": location.branch},
        )

    async def put_file(
        self,
        location: FileLocation,
        content_b64: str,
        sha: str,
        message: str,
    ) -> Any:
        """
        Write new file content, conditional on the current version token.

        GitHub rejects the write if ``sha`` no longer matches the file.
        """
        return await self.call(
            self.contents_url(location),
            method="PUT",
            body={
                "message": message,
                "content": content_b64,
                "sha": sha,
                "branch": location.branch,
            },
        )
