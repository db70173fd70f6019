"""Pytest fixtures for fetch client tests."""

import httpx
import pytest

from service_fetch.integrations.clients.real_http.fetch import FetchClient


class RecordingSink:
    """Error sink that keeps every payload it was handed."""

    def __init__(self):
        self.errors = []

    def error(self, payload):
        self.errors.append(payload)


class FakeService:
    """Answers every request with a canned httpx.Response and remembers the requests."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = {}
        self.text = None
        self.content = None
        self.exc = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def service():
    return FakeService()


@pytest.fixture
def client(sink, service):
    return FetchClient(sink, transport=httpx.MockTransport(service))
