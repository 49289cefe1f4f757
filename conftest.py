"""Shared test configuration; must be loaded before jira_rest modules."""

import os

# Override Jira settings before any jira_rest modules are imported.
os.environ["JIRA_BASE_URL"] = "https://jira.example.com/rest/api/2/"
os.environ["JIRA_USER"] = "bot"
os.environ["JIRA_PASSWORD"] = "s3cret"
os.environ["JIRA_DIAL_TIMEOUT"] = "2.5"

import httpx
import pytest

from jira_rest.clients.jira_client import JiraClient

BASE_URL = "https://jira.example.com/rest/api/2/"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it was handed."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            request.read()
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def make_client():
    """Build a JiraClient whose HTTP traffic is answered by ``handler``."""
    clients: list[JiraClient] = []

    def _make(handler, base_url: str = BASE_URL) -> tuple[JiraClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        client = JiraClient(base_url, "bot", "s3cret", 2.5, transport=transport)
        clients.append(client)
        return client, transport

    yield _make
    for client in clients:
        client.close()
