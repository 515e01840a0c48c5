"""Test suites within a project."""

from testrail_mcp._utils import to_wire
from testrail_mcp.api import api_errors


class SuitesResource:
    def __init__(self, transport):
        self._transport = transport

    def get_suite(self, suite_id):
        with api_errors(f"Failed to get test suite {suite_id}"):
            return self._transport.get(f"get_suite/{suite_id}")

    def get_suites(self, project_id):
        with api_errors(f"Failed to get test suites for project {project_id}"):
            return self._transport.get(f"get_suites/{project_id}")

    def add_suite(self, project_id, data):
        with api_errors(f"Failed to add test suite to project {project_id}"):
            return self._transport.post(f"add_suite/{project_id}", to_wire(data))

    def update_suite(self, suite_id, data):
        with api_errors(f"Failed to update test suite {suite_id}"):
            return self._transport.post(f"update_suite/{suite_id}", to_wire(data))

    def delete_suite(self, suite_id):
        with api_errors(f"Failed to delete test suite {suite_id}"):
            return self._transport.post(f"delete_suite/{suite_id}")
