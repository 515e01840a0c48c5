"""Tests: one case instantiated inside a run, carrying its current status."""

from testrail_mcp._utils import to_wire
from testrail_mcp.api import api_errors


class TestsResource:
    __test__ = False  # not a pytest test class

    def __init__(self, transport):
        self._transport = transport

    def get_test(self, test_id):
        with api_errors(f"Failed to get test {test_id}"):
            return self._transport.get(f"get_test/{test_id}")

    def get_tests(self, run_id, filters=None):
        with api_errors(f"Failed to get tests for run {run_id}"):
            return self._transport.get(f"get_tests/{run_id}", params=to_wire(filters or {}))
