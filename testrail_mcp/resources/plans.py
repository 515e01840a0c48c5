"""Test plans: ordered plan entries, each owning an ordered list of runs."""

from testrail_mcp._utils import to_wire
from testrail_mcp.api import api_errors


class PlansResource:
    def __init__(self, transport):
        self._transport = transport

    def get_plan(self, plan_id):
        with api_errors(f"Failed to get test plan {plan_id}"):
            return self._transport.get(f"get_plan/{plan_id}")

    def get_plans(self, project_id, filters=None):
        with api_errors(f"Failed to get test plans for project {project_id}"):
            return self._transport.get(f"get_plans/{project_id}", params=to_wire(filters or {}))

    def add_plan(self, project_id, data):
        with api_errors(f"Failed to add test plan to project {project_id}"):
            return self._transport.post(f"add_plan/{project_id}", to_wire(data))

    def add_plan_entry(self, plan_id, data):
        with api_errors(f"Failed to add plan entry to plan {plan_id}"):
            return self._transport.post(f"add_plan_entry/{plan_id}", to_wire(data))

    def add_run_to_plan_entry(self, plan_id, entry_id, data):
        with api_errors(f"Failed to add run to plan entry {entry_id} in plan {plan_id}"):
            return self._transport.post(
                f"add_run_to_plan_entry/{plan_id}/{entry_id}", to_wire(data)
            )

    def update_plan(self, plan_id, data):
        with api_errors(f"Failed to update test plan {plan_id}"):
            return self._transport.post(f"update_plan/{plan_id}", to_wire(data))

    def close_plan(self, plan_id):
        with api_errors(f"Failed to close test plan {plan_id}"):
            return self._transport.post(f"close_plan/{plan_id}")

    def delete_plan(self, plan_id):
        with api_errors(f"Failed to delete test plan {plan_id}"):
            return self._transport.post(f"delete_plan/{plan_id}")
