"""
Shared fixtures: settings and a fake GitHub contents API.
"""
import json
from typing import Any, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from workflow_relay.config import Settings
from workflow_relay.main import create_app


WEBHOOK_SECRET = "It's a Secret to Everybody"


class FakeGitHub:
    """Records outbound requests and answers them with canned responses."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._responses: Dict[str, httpx.Response] = {}
        self._error: Optional[Exception] = None

    def respond(
        self,
        method: str,
        status_code: int = 200,
        json_body: Any = None,
        text: Optional[str] = None,
    ):
        if text is not None:
            response = httpx.Response(status_code, text=text)
        else:
            response = httpx.Response(status_code, json=json_body)
        self._responses[method] = response

    def fail_with(self, error: Exception):
        self._error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        return self._responses[request.method]

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def requests_for(self, method: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method]

    def json_body(self, request: httpx.Request) -> Dict[str, Any]:
        return json.loads(request.content)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        github_owner="octo",
        github_repo="images",
        file_path="data/images.txt",
        branch="main",
        gh_token="ghp_test_token",
        webhook_secret=WEBHOOK_SECRET,
    )


@pytest.fixture
def github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def client(settings, github):
    app = create_app(settings, transport=github.transport)
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
