"""Planning tools: test plans and milestones (13 tools)."""

from __future__ import annotations

from testrail_mcp import schemas
from testrail_mcp.mcp_server._core import success

# ---------------------------------------------------------------------------
# Plans
# ---------------------------------------------------------------------------


def get_plans(client, args):
    project_id = args.pop("projectId")
    plans = client.plans.get_plans(project_id, args)
    return success("Test plans retrieved successfully", {"plans": plans})


def get_plan(client, args):
    plan = client.plans.get_plan(args["planId"])
    return success("Test plan retrieved successfully", {"plan": plan})


def add_plan(client, args):
    project_id = args.pop("projectId")
    plan = client.plans.add_plan(project_id, args)
    return success("Test plan created successfully", {"plan": plan})


def add_plan_entry(client, args):
    plan_id = args.pop("planId")
    entry = client.plans.add_plan_entry(plan_id, args)
    return success("Plan entry added successfully", {"entry": entry})


def add_run_to_plan_entry(client, args):
    plan_id = args.pop("planId")
    entry_id = args.pop("entryId")
    run = client.plans.add_run_to_plan_entry(plan_id, entry_id, args)
    return success("Test run added to plan entry successfully", {"run": run})


def update_plan(client, args):
    plan_id = args.pop("planId")
    plan = client.plans.update_plan(plan_id, args)
    return success("Test plan updated successfully", {"plan": plan})


def close_plan(client, args):
    plan = client.plans.close_plan(args["planId"])
    return success("Test plan closed successfully", {"plan": plan})


def delete_plan(client, args):
    client.plans.delete_plan(args["planId"])
    return success(f"Test plan {args['planId']} deleted successfully")


# ---------------------------------------------------------------------------
# Milestones
# ---------------------------------------------------------------------------


def get_milestone(client, args):
    milestone = client.milestones.get_milestone(args["milestoneId"])
    return success("Milestone retrieved successfully", {"milestone": milestone})


def get_milestones(client, args):
    project_id = args.pop("projectId")
    milestones = client.milestones.get_milestones(project_id, args)
    return success("Milestones retrieved successfully", {"milestones": milestones})


def add_milestone(client, args):
    project_id = args.pop("projectId")
    milestone = client.milestones.add_milestone(project_id, args)
    return success("Milestone created successfully", {"milestone": milestone})


def update_milestone(client, args):
    milestone_id = args.pop("milestoneId")
    milestone = client.milestones.update_milestone(milestone_id, args)
    return success("Milestone updated successfully", {"milestone": milestone})


def delete_milestone(client, args):
    client.milestones.delete_milestone(args["milestoneId"])
    return success(f"Milestone {args['milestoneId']} deleted successfully")


def register(registry):
    """Register all plan and milestone tools."""
    registry.add(
        "getPlans",
        get_plans,
        schemas.GET_PLANS,
        "Error fetching test plans for project {projectId}",
    )
    registry.add("getPlan", get_plan, schemas.GET_PLAN, "Error fetching test plan {planId}")
    registry.add(
        "addPlan", add_plan, schemas.ADD_PLAN, "Error creating test plan in project {projectId}"
    )
    registry.add(
        "addPlanEntry",
        add_plan_entry,
        schemas.ADD_PLAN_ENTRY,
        "Error adding plan entry to plan {planId}",
    )
    registry.add(
        "addRunToPlanEntry",
        add_run_to_plan_entry,
        schemas.ADD_RUN_TO_PLAN_ENTRY,
        "Error adding run to plan entry {entryId} in plan {planId}",
    )
    registry.add(
        "updatePlan", update_plan, schemas.UPDATE_PLAN, "Error updating test plan {planId}"
    )
    registry.add("closePlan", close_plan, schemas.CLOSE_PLAN, "Error closing test plan {planId}")
    registry.add(
        "deletePlan", delete_plan, schemas.DELETE_PLAN, "Error deleting test plan {planId}"
    )

    registry.add(
        "getMilestone",
        get_milestone,
        schemas.GET_MILESTONE,
        "Error fetching milestone {milestoneId}",
    )
    registry.add(
        "getMilestones",
        get_milestones,
        schemas.GET_MILESTONES,
        "Error fetching milestones for project {projectId}",
    )
    registry.add(
        "addMilestone",
        add_milestone,
        schemas.ADD_MILESTONE,
        "Error creating milestone in project {projectId}",
    )
    registry.add(
        "updateMilestone",
        update_milestone,
        schemas.UPDATE_MILESTONE,
        "Error updating milestone {milestoneId}",
    )
    registry.add(
        "deleteMilestone",
        delete_milestone,
        schemas.DELETE_MILESTONE,
        "Error deleting milestone {milestoneId}",
    )
