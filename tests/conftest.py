"""
Pytest configuration and shared fixtures.

Upstream traffic is served by `httpx.MockTransport`; no test touches the
network or waits on real polling delays.
"""

import json

import httpx
import pytest
from fastapi.testclient import TestClient


class UpstreamStub:
    """Scripted stand-in for the banana service and image hosts.

    `generate_statuses` are consumed one per generate call; `task_states`
    one per status poll (the last entry repeats).
    """

    def __init__(self, generate_statuses=(200,), task_states=("completed",),
                 image_url="https://cdn.example/out.png", task_error=None):
        self.generate_statuses = list(generate_statuses)
        self.task_states = list(task_states)
        self.image_url = image_url
        self.task_error = task_error
        self.poll_status = 200
        self.requests = []
        self.generate_bodies = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path == "/api/images/generate":
            self.generate_bodies.append(json.loads(request.content))
            status = self.generate_statuses.pop(0) if len(self.generate_statuses) > 1 else self.generate_statuses[0]
            if status != 200:
                return httpx.Response(status, text="upstream says no")
            return httpx.Response(200, json={"taskId": "task-123"})

        if path.startswith("/api/images/"):
            if self.poll_status != 200:
                return httpx.Response(self.poll_status, text="gone")
            state = self.task_states.pop(0) if len(self.task_states) > 1 else self.task_states[0]
            task = {"state": state}
            if state == "completed":
                task["result"] = {"imageUrl": self.image_url}
            if state == "failed" and self.task_error:
                task["error"] = self.task_error
            return httpx.Response(200, json={"task": task})

        # Any other host/path is an input image fetch.
        return httpx.Response(200, content=b"\x89PNG fake", headers={"content-type": "image/jpeg"})

    @property
    def generate_requests(self):
        return [r for r in self.requests if r.url.path == "/api/images/generate"]

    @property
    def poll_requests(self):
        return [
            r for r in self.requests
            if r.url.path.startswith("/api/images/") and r.url.path != "/api/images/generate"
        ]


class RecordingSleep:
    """Async sleep replacement that records requested delays."""

    def __init__(self):
        self.calls = []

    async def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def upstream():
    return UpstreamStub()


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture(scope="module")
def client():
    """Create test client with app."""
    from banana_adapter.api.http_api import app
    with TestClient(app) as c:
        yield c
