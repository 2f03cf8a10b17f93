"""Root conftest for tests directory."""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, Generator, List, Optional

import httpx
import pytest

from backup_catalog.core.config import Settings, reset_settings
from backup_catalog.core.transport import RequestTransport
from backup_catalog.models.backup import Backup
from backup_catalog.models.environment import EnvironmentRef

SITE_ID = "11111111-2222-3333-4444-555555555555"


class RecordingAPI:
    """Route table for `httpx.MockTransport` that remembers every request."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._routes: Dict[tuple[str, str], tuple[int, Any]] = {}

    def add(self, method: str, path_suffix: str, *, status_code: int = 200, json_body: Any = None) -> None:
        self._routes[(method.upper(), path_suffix)] = (status_code, json_body)

    def calls(self, path_suffix: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith(path_suffix)]

    @staticmethod
    def body(request: httpx.Request) -> Any:
        return json.loads(request.content or b"null")

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        for (method, suffix), (status_code, json_body) in self._routes.items():
            if request.method == method and request.url.path.endswith(suffix):
                return httpx.Response(status_code, json=json_body)
        return httpx.Response(404, json={"error": "not found"})


@pytest.fixture(autouse=True)
def _fresh_settings() -> Generator[None, None, None]:
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings() -> Settings:
    return Settings(host="terminus.example.test", session_token="session-token")


@pytest.fixture
def environment() -> EnvironmentRef:
    return EnvironmentRef(site_id=SITE_ID, environment_id="live")


@pytest.fixture
def api(monkeypatch: pytest.MonkeyPatch) -> RecordingAPI:
    """Send every `httpx.AsyncClient` request to an in-memory route table."""
    recorder = RecordingAPI()
    transport = httpx.MockTransport(recorder.handler)
    orig_client = httpx.AsyncClient

    def _client(*args: Any, **kwargs: Any) -> httpx.AsyncClient:
        kwargs["transport"] = transport
        return orig_client(*args, **kwargs)

    monkeypatch.setattr(httpx, "AsyncClient", _client)
    return recorder


@pytest.fixture
def transport(settings: Settings) -> RequestTransport:
    return RequestTransport(settings)


@pytest.fixture
def make_backup(environment: EnvironmentRef, settings: Settings) -> Callable[..., Backup]:
    """Build a finished code backup, overriding any attribute by keyword."""

    def _make(
        url_resolver: Optional[Any] = None,
        workflows: Optional[Any] = None,
        **overrides: Any,
    ) -> Backup:
        attributes: Dict[str, Any] = {
            "id": "1610000000_backup_code",
            "folder": "1610000000_backup_manual",
            "filename": "site_live_2021-01-07T06-13-20_UTC_code.tar.gz",
            "size": 13000000,
            "timestamp": 1610000000,
            "finish_time": 1610000100,
        }
        attributes.update(overrides)
        return Backup(
            attributes,
            environment=environment,
            url_resolver=url_resolver,
            workflows=workflows,
            settings=settings,
        )

    return _make
