"""Pydantic models for Jira REST payloads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from jira_rest.errors import ShapeError


def project_from_key(key: str) -> str:
    """Return the lower-cased project prefix of an issue key.

    ``ABC-42`` gives ``abc``. A key without ``-`` is treated as a bare
    project code, so ``ABC`` also gives ``abc``.
    """
    return key.split("-", 1)[0].lower()


def _require(payload: dict, name: str, kind: type, where: str) -> Any:
    value = payload.get(name)
    if not isinstance(value, kind):
        if name not in payload:
            raise ShapeError(f"{where}: missing {name!r}")
        raise ShapeError(
            f"{where}: {name!r} must be {kind.__name__}, got {type(value).__name__}"
        )
    return value


def require_object(payload: Any, where: str) -> dict:
    if not isinstance(payload, dict):
        raise ShapeError(f"{where}: expected a JSON object, got {type(payload).__name__}")
    return payload


def require_str(payload: dict, name: str, where: str) -> str:
    return _require(payload, name, str, where)


class Issue(BaseModel):
    """A Jira issue with ``id``, ``key`` and ``summary`` promoted out of ``fields``."""

    id: str
    key: str
    project: str
    summary: str = ""
    data: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Any) -> Issue:
        """Project a decoded ``GET issue/<key>`` response into an Issue.

        Raises ShapeError when ``id``, ``key`` or ``fields`` is missing or
        mistyped. A missing or non-string ``summary`` leaves it empty.
        """
        raw = require_object(payload, "issue")
        key = require_str(raw, "key", "issue")
        issue_id = require_str(raw, "id", "issue")
        fields = _require(raw, "fields", dict, "issue")

        summary = fields.get("summary")
        return cls(
            id=issue_id,
            key=key,
            project=project_from_key(key),
            summary=summary if isinstance(summary, str) else "",
            data=fields,
        )
