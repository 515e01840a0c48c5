"""testrail-mcp: MCP server exposing the TestRail API v2 as schema-validated tools."""

from testrail_mcp.client import TestRailClient
from testrail_mcp.config import VERSION
from testrail_mcp.exceptions import ApiError, GatewayError, SetupError, ValidationError
from testrail_mcp.types import (
    Case,
    CasePage,
    Milestone,
    Plan,
    PlanEntry,
    Project,
    Result,
    Run,
    Section,
    SharedStep,
    Suite,
)

__all__ = [
    "VERSION",
    "TestRailClient",
    "ApiError",
    "GatewayError",
    "SetupError",
    "ValidationError",
    "Case",
    "CasePage",
    "Milestone",
    "Plan",
    "PlanEntry",
    "Project",
    "Result",
    "Run",
    "Section",
    "SharedStep",
    "Suite",
]
