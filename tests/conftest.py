import sys
from pathlib import Path
from typing import Any

import pytest

# Add project root to sys.path
# This ensures that 'cfworkers' and 'tests.common' import without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from cfworkers.core.container import WorkersAPI  # noqa: E402
from cfworkers.modules.common.exceptions import APIRequestError  # noqa: E402


class FakeTransport:
    """Records every request and answers from a (method, path) table."""

    def __init__(self) -> None:
        self.responses: dict[tuple[str, str], Any] = {}
        self.calls: list[dict[str, Any]] = []

    def respond(self, method: str, path: str, body: Any) -> None:
        self.responses[(method, path)] = body

    def _answer(self, method: str, path: str) -> bytes:
        try:
            answer = self.responses[(method, path)]
        except KeyError:
            raise APIRequestError(404, [{"code": 10007, "message": f"no route {method} {path}"}])
        if isinstance(answer, Exception):
            raise answer
        if isinstance(answer, str):
            return answer.encode("utf-8")
        return answer

    def make_request(self, method: str, path: str, payload: Any = None) -> bytes:
        self.calls.append({"method": method, "path": path, "payload": payload})
        return self._answer(method, path)

    def make_request_with_headers(self, method, path, body, headers) -> bytes:
        self.calls.append({"method": method, "path": path, "body": body, "headers": dict(headers)})
        return self._answer(method, path)


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def api(transport) -> WorkersAPI:
    return WorkersAPI(transport)


@pytest.fixture
def account_api(transport) -> WorkersAPI:
    return WorkersAPI(transport, account_id="foo")
