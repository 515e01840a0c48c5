"""Results: status/comment/elapsed records posted against tests or run+case pairs."""

from testrail_mcp._utils import to_wire
from testrail_mcp.api import api_errors


class ResultsResource:
    def __init__(self, transport):
        self._transport = transport

    def get_results(self, test_id, filters=None):
        with api_errors(f"Failed to get results for test {test_id}"):
            return self._transport.get(f"get_results/{test_id}", params=to_wire(filters or {}))

    def get_results_for_case(self, run_id, case_id, filters=None):
        with api_errors(f"Failed to get results for case {case_id} in run {run_id}"):
            return self._transport.get(
                f"get_results_for_case/{run_id}/{case_id}", params=to_wire(filters or {})
            )

    def get_results_for_run(self, run_id, filters=None):
        with api_errors(f"Failed to get results for run {run_id}"):
            return self._transport.get(
                f"get_results_for_run/{run_id}", params=to_wire(filters or {})
            )

    def add_result(self, test_id, data):
        with api_errors(f"Failed to add result for test {test_id}"):
            return self._transport.post(f"add_result/{test_id}", to_wire(data))

    def add_result_for_case(self, run_id, case_id, data):
        with api_errors(f"Failed to add result for case {case_id} in run {run_id}"):
            return self._transport.post(f"add_result_for_case/{run_id}/{case_id}", to_wire(data))

    def add_results(self, run_id, results):
        """Submit many results (each keyed by testId) in one request."""
        payload = {"results": [to_wire(r) for r in results]}
        with api_errors(f"Failed to add results for run {run_id}"):
            return self._transport.post(f"add_results/{run_id}", payload)

    def add_results_for_cases(self, run_id, results):
        """Submit many results (each keyed by caseId) in one request."""
        payload = {"results": [to_wire(r) for r in results]}
        with api_errors(f"Failed to add results for cases in run {run_id}"):
            return self._transport.post(f"add_results_for_cases/{run_id}", payload)
