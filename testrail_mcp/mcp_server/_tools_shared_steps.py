"""Shared step tools (5 tools)."""

from __future__ import annotations

from testrail_mcp import schemas
from testrail_mcp.mcp_server._core import success


def _step_payload(args):
    # TestRail stores shared steps in the same field as separated case steps.
    payload = {}
    if "title" in args:
        payload["title"] = args["title"]
    if "steps" in args:
        payload["customStepsSeparated"] = args["steps"]
    return payload


def get_shared_step(client, args):
    shared_step = client.shared_steps.get_shared_step(args["sharedStepId"])
    return success("Shared step retrieved successfully", {"sharedStep": shared_step})


def get_shared_steps(client, args):
    project_id = args.pop("projectId")
    shared_steps = client.shared_steps.get_shared_steps(project_id, args)
    return success("Shared steps retrieved successfully", {"sharedSteps": shared_steps})


def add_shared_step(client, args):
    shared_step = client.shared_steps.add_shared_step(args["projectId"], _step_payload(args))
    return success("Shared step added successfully", {"sharedStep": shared_step})


def update_shared_step(client, args):
    shared_step = client.shared_steps.update_shared_step(
        args["sharedStepId"], _step_payload(args)
    )
    return success("Shared step updated successfully", {"sharedStep": shared_step})


def delete_shared_step(client, args):
    client.shared_steps.delete_shared_step(args["sharedStepId"], args["keepInCases"])
    return success(f"Shared step {args['sharedStepId']} deleted successfully")


def register(registry):
    """Register all shared step tools."""
    registry.add(
        "getSharedStep",
        get_shared_step,
        schemas.GET_SHARED_STEP,
        "Error fetching shared step {sharedStepId}",
    )
    registry.add(
        "getSharedSteps",
        get_shared_steps,
        schemas.GET_SHARED_STEPS,
        "Error fetching shared steps for project {projectId}",
    )
    registry.add(
        "addSharedStep",
        add_shared_step,
        schemas.ADD_SHARED_STEP,
        "Error adding shared step to project {projectId}",
    )
    registry.add(
        "updateSharedStep",
        update_shared_step,
        schemas.UPDATE_SHARED_STEP,
        "Error updating shared step {sharedStepId}",
    )
    registry.add(
        "deleteSharedStep",
        delete_shared_step,
        schemas.DELETE_SHARED_STEP,
        "Error deleting shared step {sharedStepId}",
    )
