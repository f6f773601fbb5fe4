import json
from typing import Callable, List

import httpx
import pytest


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)

    def requests_to(self, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    @staticmethod
    def json(request: httpx.Request):
        """Decode the JSON body of a captured request."""
        return json.loads(request.content) if request.content else None


@pytest.fixture
def recording_transport():
    """Factory building a RecordingTransport around a request handler."""
    return RecordingTransport
