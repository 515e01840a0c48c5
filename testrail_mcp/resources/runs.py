"""Test runs: a suite's cases (all, or an explicit case_ids list) scheduled for execution."""

from testrail_mcp._utils import to_wire
from testrail_mcp.api import api_errors


class RunsResource:
    def __init__(self, transport):
        self._transport = transport

    def get_run(self, run_id):
        with api_errors(f"Failed to get test run {run_id}"):
            return self._transport.get(f"get_run/{run_id}")

    def get_runs(self, project_id, filters=None):
        with api_errors(f"Failed to get test runs for project {project_id}"):
            return self._transport.get(f"get_runs/{project_id}", params=to_wire(filters or {}))

    def add_run(self, project_id, data):
        with api_errors(f"Failed to add test run to project {project_id}"):
            return self._transport.post(f"add_run/{project_id}", to_wire(data))

    def update_run(self, run_id, data):
        with api_errors(f"Failed to update test run {run_id}"):
            return self._transport.post(f"update_run/{run_id}", to_wire(data))

    def close_run(self, run_id):
        with api_errors(f"Failed to close test run {run_id}"):
            return self._transport.post(f"close_run/{run_id}")

    def delete_run(self, run_id):
        with api_errors(f"Failed to delete test run {run_id}"):
            return self._transport.post(f"delete_run/{run_id}")
