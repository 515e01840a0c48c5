"""Shared steps: reusable step lists referenced from many cases."""

from testrail_mcp._utils import to_wire
from testrail_mcp.api import api_errors


class SharedStepsResource:
    def __init__(self, transport):
        self._transport = transport

    def get_shared_step(self, shared_step_id):
        with api_errors(f"Failed to get shared step {shared_step_id}"):
            return self._transport.get(f"get_shared_step/{shared_step_id}")

    def get_shared_steps(self, project_id, filters=None):
        with api_errors(f"Failed to get shared steps for project {project_id}"):
            return self._transport.get(
                f"get_shared_steps/{project_id}", params=to_wire(filters or {})
            )

    def add_shared_step(self, project_id, data):
        with api_errors(f"Failed to add shared step to project {project_id}"):
            return self._transport.post(f"add_shared_step/{project_id}", to_wire(data))

    def update_shared_step(self, shared_step_id, data):
        with api_errors(f"Failed to update shared step {shared_step_id}"):
            return self._transport.post(f"update_shared_step/{shared_step_id}", to_wire(data))

    def delete_shared_step(self, shared_step_id, keep_in_cases=True):
        """Delete a shared step; with keep_in_cases the steps are inlined into referencing cases."""
        with api_errors(f"Failed to delete shared step {shared_step_id}"):
            return self._transport.post(
                f"delete_shared_step/{shared_step_id}",
                {"keep_in_cases": 1 if keep_in_cases else 0},
            )
