"""Jira REST API client (Basic auth)."""

from __future__ import annotations

import base64
import json
import logging
from typing import Any, Sequence

import httpx

from jira_rest.config import Settings, settings as default_settings
from jira_rest.errors import (
    DecodeError,
    InvalidURLError,
    JiraTransportError,
    NotFoundError,
    StatusError,
)
from jira_rest.schemas.issue import Issue, require_object, require_str

logger = logging.getLogger(__name__)

MAX_REDIRECTS = 10


class JiraClient:
    """Read issues and project titles and post comments via the Jira REST API.

    Request paths are appended verbatim to ``service_url``, so it normally
    ends with ``/``, e.g. ``https://yourco.atlassian.net/rest/api/2/``.
    """

    def __init__(
        self,
        service_url: str,
        user: str,
        password: str,
        dial_timeout: float,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        try:
            base_url = httpx.URL(service_url)
        except httpx.InvalidURL as exc:
            raise InvalidURLError(service_url, str(exc)) from exc
        if not base_url.is_absolute_url:
            raise InvalidURLError(service_url)

        credentials = base64.b64encode(f"{user}:{password}".encode()).decode()
        self._base_url = base_url
        self._user = user
        self._password = password
        self._headers = {
            "Authorization": f"Basic {credentials}",
            "Content-Type": "application/json; charset=utf-8",
        }
        # Only connection establishment is bounded; reads may take as long as Jira needs.
        self._client = httpx.Client(
            timeout=httpx.Timeout(None, connect=dial_timeout),
            follow_redirects=True,
            max_redirects=MAX_REDIRECTS,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, config: Settings | None = None) -> JiraClient:
        config = config or default_settings
        if not config.base_url or not config.user or not config.password:
            raise RuntimeError(
                "missing Jira connection settings (JIRA_BASE_URL, JIRA_USER, JIRA_PASSWORD)"
            )
        return cls(config.base_url, config.user, config.password, config.dial_timeout)

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    @property
    def user(self) -> str:
        return self._user

    def request(self, method: str, path: str, body: bytes = b"") -> bytes:
        """Send one request and return the raw response body.

        404 raises NotFoundError, any other status >= 400 raises StatusError
        carrying the response body. Redirects are followed. Network, redirect-loop
        and body-decoding failures raise JiraTransportError; a path that makes
        the URL unparseable raises InvalidURLError.
        """
        url = str(self._base_url) + path
        logger.debug("%s %s", method, url)
        try:
            resp = self._client.request(method, url, content=body, headers=self._headers)
        except httpx.InvalidURL as exc:
            raise InvalidURLError(url, str(exc)) from exc
        except httpx.RequestError as exc:
            raise JiraTransportError(f"{method} {url}: {exc}") from exc

        status = f"{resp.status_code} {resp.reason_phrase}"
        logger.debug("%s %s -> %s", method, url, status)
        if resp.status_code == 404:
            raise NotFoundError(status)
        if resp.status_code >= 400:
            raise StatusError(resp.status_code, status, resp.text)
        return resp.content

    def _request_json(self, method: str, path: str) -> Any:
        data = self.request(method, path)
        try:
            return json.loads(data)
        except ValueError as exc:
            raise DecodeError(f"{method} {path}: invalid JSON response: {exc}") from exc

    def get_issue(self, key: str, fields: Sequence[str]) -> Issue:
        """Fetch an issue, asking Jira only for ``fields``."""
        payload = self._request_json("GET", f"issue/{key}/?fields={','.join(fields)}")
        return Issue.from_payload(payload)

    def get_project_title(self, key: str) -> str:
        """Return the display name of a project."""
        payload = self._request_json("GET", f"project/{key}")
        return require_str(require_object(payload, "project"), "name", "project")

    def comment(self, issue_key: str, message: str) -> None:
        """Add a plain-text comment to an existing Jira issue."""
        body = json.dumps({"body": message}, ensure_ascii=False, separators=(",", ":"))
        self.request("POST", f"issue/{issue_key}/comment", body.encode("utf-8"))
        logger.info("Jira comment added to %s", issue_key)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> JiraClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
