"""Test cases, including bulk update/delete and section copy/move."""

from testrail_mcp._utils import to_wire
from testrail_mcp.api import api_errors


class CasesResource:
    def __init__(self, transport):
        self._transport = transport

    def get_case(self, case_id):
        with api_errors(f"Failed to get test case {case_id}"):
            return self._transport.get(f"get_case/{case_id}")

    def get_cases(self, project_id, suite_id, filters=None):
        """Return one page of cases. The upstream pagination envelope
        ({offset, limit, size, _links, cases}) is returned verbatim."""
        params = {"suite_id": suite_id, **to_wire(filters or {})}
        with api_errors(f"Failed to get test cases for project {project_id}"):
            return self._transport.get(f"get_cases/{project_id}", params=params)

    def add_case(self, section_id, data):
        with api_errors(f"Failed to add test case to section {section_id}"):
            return self._transport.post(f"add_case/{section_id}", to_wire(data))

    def update_case(self, case_id, data):
        with api_errors(f"Failed to update test case {case_id}"):
            return self._transport.post(f"update_case/{case_id}", to_wire(data))

    def delete_case(self, case_id):
        with api_errors(f"Failed to delete test case {case_id}"):
            return self._transport.post(f"delete_case/{case_id}")

    def get_case_history(self, case_id):
        with api_errors(f"Failed to get history for test case {case_id}"):
            return self._transport.get(f"get_history_for_case/{case_id}")

    def get_case_types(self):
        with api_errors("Failed to get case types"):
            return self._transport.get("get_case_types")

    def get_case_fields(self):
        with api_errors("Failed to get case fields"):
            return self._transport.get("get_case_fields")

    def copy_to_section(self, case_ids, section_id):
        with api_errors(f"Failed to copy test cases to section {section_id}"):
            return self._transport.post(
                f"copy_cases_to_section/{section_id}", {"case_ids": list(case_ids)}
            )

    def move_to_section(self, case_ids, section_id, suite_id=None):
        payload = to_wire({"suiteId": suite_id, "caseIds": list(case_ids)})
        with api_errors(f"Failed to move test cases to section {section_id}"):
            return self._transport.post(f"move_cases_to_section/{section_id}", payload)

    def update_cases(self, project_id, suite_id, data, case_ids):
        """Apply the same field values to many cases.

        Without a suite the whole project is targeted.
        """
        payload = {**to_wire(data), "case_ids": list(case_ids)}
        with api_errors(f"Failed to update test cases for project {project_id}"):
            return self._transport.post(
                f"update_cases/{project_id}", payload, params={"suite_id": suite_id}
            )

    def delete_cases(self, project_id, suite_id, case_ids):
        with api_errors(f"Failed to delete test cases for project {project_id}"):
            return self._transport.post(
                f"delete_cases/{project_id}",
                {"case_ids": list(case_ids)},
                params={"suite_id": suite_id},
            )
