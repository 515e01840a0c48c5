"""Core helpers: client caching, tool registry, _call dispatcher, response envelopes."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from testrail_mcp.client import TestRailClient
from testrail_mcp.exceptions import ApiError, GatewayError, ValidationError
from testrail_mcp.models import Schema

_client: TestRailClient | None = None


def _get_client() -> TestRailClient:
    """Return a cached TestRailClient, creating one on first use."""
    global _client
    if _client is None:
        _client = TestRailClient()
    return _client


# ---------------------------------------------------------------------------
# Response envelopes
# ---------------------------------------------------------------------------


def success(message: str, data: dict | None = None) -> dict:
    """Build a success envelope. ``data`` is omitted when there is none."""
    out: dict[str, Any] = {"success": True, "message": message}
    if data is not None:
        out["data"] = data
    return out


def error_details(exc: BaseException) -> dict:
    """Classify an exception into the envelope's ``error`` member."""
    if isinstance(exc, GatewayError):
        details: dict[str, Any] = {"type": exc.error_type, "message": str(exc)}
    else:
        details = {"type": "unknown", "message": f"Unexpected error: {exc}"}
    if isinstance(exc, ApiError):
        if exc.status is not None:
            details["status"] = exc.status
        if exc.body is not None:
            details["body"] = exc.body
    if isinstance(exc, ValidationError) and exc.field:
        details["field"] = exc.field
    return details


def failure(message: str, exc: BaseException) -> dict:
    """Build an error envelope for *exc* under an operation-specific message."""
    return {"success": False, "message": message, "error": error_details(exc)}


@dataclass(frozen=True)
class ToolResponse:
    envelope: dict
    is_error: bool

    def text(self) -> str:
        return json.dumps(self.envelope, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

Handler = Callable[[TestRailClient, dict], dict]


@dataclass(frozen=True)
class Tool:
    """One named operation.

    ``error`` is a str.format template rendered with the validated arguments
    when the handler fails. ``check`` runs after schema validation and before
    the client is created; it raises ValidationError for cross-field rules.
    """

    name: str
    handler: Handler
    schema: Schema
    error: str
    check: Callable[[dict], None] | None = None

    @property
    def description(self) -> str:
        return self.schema.description


class ToolRegistry:
    def __init__(self):
        self._tools: dict[str, Tool] = {}

    def add(self, name, handler, schema, error, check=None):
        if name in self._tools:
            raise ValueError(f"Tool already registered: {name}")
        self._tools[name] = Tool(name, handler, schema, error, check)

    def get(self, name) -> Tool | None:
        return self._tools.get(name)

    def names(self) -> list[str]:
        return list(self._tools)

    def __contains__(self, name) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[Tool]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)


REGISTRY = ToolRegistry()


class _Blank(dict):
    def __missing__(self, key):
        return ""


def _render(template: str, args: dict) -> str:
    return template.format_map(_Blank(args))


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


def _call(name: str, arguments: dict | None = None) -> ToolResponse:
    """Validate *arguments*, run the tool handler, and wrap the outcome.

    Never raises: every failure becomes an error envelope.
    """
    tool = REGISTRY.get(name)
    if tool is None:
        message = f"Unknown tool: {name}"
        return ToolResponse(failure(message, GatewayError(message)), True)
    try:
        args = tool.schema.validate(arguments)
        if tool.check is not None:
            tool.check(args)
    except ValidationError as e:
        return ToolResponse(failure(f"Invalid arguments for {name}: {e}", e), True)
    try:
        client = _get_client()
        return ToolResponse(tool.handler(client, dict(args)), False)
    except Exception as e:
        return ToolResponse(failure(_render(tool.error, args), e), True)


_CASE_LIST_COLUMNS = (
    "id",
    "title",
    "section_id",
    "template_id",
    "type_id",
    "priority_id",
    "milestone_id",
    "refs",
    "estimate",
    "suite_id",
    "display_order",
    "is_deleted",
    "status_id",
    "updated_on",
    "created_on",
    "created_by",
    "updated_by",
)


def _slim_case(case: dict) -> dict:
    """Keep only the compact list columns of a case; custom fields never pass."""
    return {k: case[k] for k in _CASE_LIST_COLUMNS if k in case}


def _unpack_page(page, key: str) -> tuple[list, int, bool]:
    """Split a paginated upstream body into (items, total, has_more).

    A bare list is treated as one complete page.
    """
    if isinstance(page, list):
        return page, len(page), False
    if not isinstance(page, dict):
        return [], 0, False
    items = page.get(key)
    if items is None:
        items = page.get("items") or []
    links = page.get("_links") or page.get("links") or {}
    total = page.get("size", len(items))
    return items, total, links.get("next") is not None
