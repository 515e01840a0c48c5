"""MCP server exposing the TestRail API v2 as schema-validated tools.

Package structure:
  __init__.py            — Server init, register() calls, list/call handlers, main()
  __main__.py            — ``python -m testrail_mcp.mcp_server`` entry point
  _core.py               — Client caching, tool registry, _call dispatcher, envelopes
  _tools_projects.py     — 16 project/suite/section tools
  _tools_cases.py        — 12 case tools
  _tools_runs.py         — 15 run/test/result tools
  _tools_plans.py        — 13 plan/milestone tools
  _tools_shared_steps.py — 5 shared step tools

Run: python -m testrail_mcp.mcp_server
"""

from __future__ import annotations

import asyncio

from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from testrail_mcp.config import VERSION
from testrail_mcp.mcp_server import (
    _core,
    _tools_cases,
    _tools_plans,
    _tools_projects,
    _tools_runs,
    _tools_shared_steps,
)

server = Server(
    "testrail",
    version=VERSION,
    instructions=(
        "TestRail test management tools (API v2). "
        "Arguments are camelCase; responses carry TestRail's snake_case records. "
        "Every response is a JSON envelope: success=true with message and data, "
        "or success=false with message and error{type,message,status?,body?,field?}.\n"
        "Efficiency: getCases omits steps/expected/prerequisites and is paginated "
        "(limit/offset, pagination.hasMore); use getCase for the full record.\n"
        "Deletes cannot be undone."
    ),
)

for _mod in [_tools_projects, _tools_cases, _tools_runs, _tools_plans, _tools_shared_steps]:
    _mod.register(_core.REGISTRY)


@server.list_tools()
async def list_tools() -> list[types.Tool]:
    return [
        types.Tool(
            name=tool.name,
            description=tool.description,
            inputSchema=tool.schema.json_schema(),
        )
        for tool in _core.REGISTRY
    ]


# The registry validates arguments itself so schema failures come back as envelopes.
@server.call_tool(validate_input=False)
async def call_tool(name: str, arguments: dict | None) -> types.CallToolResult:
    response = await asyncio.to_thread(_core._call, name, arguments)
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=response.text())],
        isError=response.is_error,
    )


# ---------------------------------------------------------------------------
# Re-exports (tests import via mcp_mod.xxx)
# ---------------------------------------------------------------------------

from testrail_mcp.mcp_server._core import (  # noqa: E402, F401
    REGISTRY,
    ToolResponse,
    _call,
    _get_client,
    _slim_case,
    failure,
    success,
)


async def _serve():
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main():
    """Run the MCP server (stdio transport)."""
    asyncio.run(_serve())
