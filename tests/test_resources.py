"""Tests for the resource clients — endpoint routing and wire translation.

Each client gets a MagicMock transport; the assertions check which endpoint,
query params and body the client hands to it.
"""

from unittest.mock import MagicMock

import pytest

from testrail_mcp.api import Transport
from testrail_mcp.exceptions import ApiError, HTTPError
from testrail_mcp.resources import (
    CasesResource,
    MilestonesResource,
    PlansResource,
    ProjectsResource,
    ResultsResource,
    RunsResource,
    SectionsResource,
    SharedStepsResource,
    SuitesResource,
    TestsResource,
)


@pytest.fixture
def transport():
    return MagicMock()


class TestProjectsResource:
    def test_get_project(self, transport):
        transport.get.return_value = {"id": 1}
        assert ProjectsResource(transport).get_project(1) == {"id": 1}
        transport.get.assert_called_once_with("get_project/1")

    def test_get_projects_filters(self, transport):
        ProjectsResource(transport).get_projects({"isCompleted": False, "limit": None})
        transport.get.assert_called_once_with("get_projects", params={"is_completed": False})

    def test_add_project(self, transport):
        ProjectsResource(transport).add_project(
            {"name": "P", "showAnnouncement": True, "suiteMode": 3}
        )
        transport.post.assert_called_once_with(
            "add_project", {"name": "P", "show_announcement": True, "suite_mode": 3}
        )

    def test_update_and_delete(self, transport):
        resource = ProjectsResource(transport)
        resource.update_project(4, {"isCompleted": True})
        resource.delete_project(4)
        assert transport.post.call_args_list[0].args == ("update_project/4", {"is_completed": True})
        assert transport.post.call_args_list[1].args == ("delete_project/4",)


class TestSuitesAndSections:
    def test_suites(self, transport):
        resource = SuitesResource(transport)
        resource.get_suites(1)
        resource.get_suite(2)
        resource.add_suite(1, {"name": "S", "description": ""})
        resource.update_suite(2, {"name": "S2"})
        resource.delete_suite(2)
        assert [c.args for c in transport.get.call_args_list] == [
            ("get_suites/1",),
            ("get_suite/2",),
        ]
        assert [c.args for c in transport.post.call_args_list] == [
            ("add_suite/1", {"name": "S"}),
            ("update_suite/2", {"name": "S2"}),
            ("delete_suite/2",),
        ]

    def test_get_sections_with_suite(self, transport):
        SectionsResource(transport).get_sections(1, 2, {"limit": 10})
        transport.get.assert_called_once_with(
            "get_sections/1", params={"suite_id": 2, "limit": 10}
        )

    def test_add_section(self, transport):
        SectionsResource(transport).add_section(1, {"name": "N", "suiteId": 2, "parentId": 5})
        transport.post.assert_called_once_with(
            "add_section/1", {"name": "N", "suite_id": 2, "parent_id": 5}
        )

    def test_move_section(self, transport):
        SectionsResource(transport).move_section(7, {"parentId": 3, "afterId": 4})
        transport.post.assert_called_once_with("move_section/7", {"parent_id": 3, "after_id": 4})

    def test_move_section_to_root_sends_null_parent(self, transport):
        SectionsResource(transport).move_section(7, {"parentId": None})
        transport.post.assert_called_once_with("move_section/7", {"parent_id": None})


class TestCasesResource:
    def test_get_case(self, transport):
        CasesResource(transport).get_case(5)
        transport.get.assert_called_once_with("get_case/5")

    def test_get_cases_passes_page_verbatim(self, transport):
        page = {"offset": 0, "limit": 50, "size": 1, "_links": {"next": None}, "cases": [{}]}
        transport.get.return_value = page
        out = CasesResource(transport).get_cases(1, 2, {"sectionId": 3, "limit": 50, "offset": 0})
        assert out is page
        transport.get.assert_called_once_with(
            "get_cases/1",
            params={"suite_id": 2, "section_id": 3, "limit": 50, "offset": 0},
        )

    def test_add_case_renames_custom_fields(self, transport):
        CasesResource(transport).add_case(
            9,
            {
                "title": "Login",
                "typeId": 1,
                "customPrerequisites": "user exists",
                "customSteps": "1. open",
                "refs": "",
            },
        )
        transport.post.assert_called_once_with(
            "add_case/9",
            {
                "title": "Login",
                "type_id": 1,
                "custom_preconds": "user exists",
                "custom_steps": "1. open",
            },
        )

    def test_update_and_delete_case(self, transport):
        resource = CasesResource(transport)
        resource.update_case(5, {"priorityId": 2})
        resource.delete_case(5)
        assert transport.post.call_args_list[0].args == ("update_case/5", {"priority_id": 2})
        assert transport.post.call_args_list[1].args == ("delete_case/5",)

    def test_metadata_endpoints(self, transport):
        resource = CasesResource(transport)
        resource.get_case_types()
        resource.get_case_fields()
        resource.get_case_history(5)
        assert [c.args for c in transport.get.call_args_list] == [
            ("get_case_types",),
            ("get_case_fields",),
            ("get_history_for_case/5",),
        ]

    def test_copy_to_section(self, transport):
        CasesResource(transport).copy_to_section([1, 2], 8)
        transport.post.assert_called_once_with("copy_cases_to_section/8", {"case_ids": [1, 2]})

    def test_move_to_section(self, transport):
        CasesResource(transport).move_to_section([1, 2], 8, 3)
        transport.post.assert_called_once_with(
            "move_cases_to_section/8", {"suite_id": 3, "case_ids": [1, 2]}
        )

    def test_move_to_section_without_suite(self, transport):
        CasesResource(transport).move_to_section([1], 8)
        transport.post.assert_called_once_with("move_cases_to_section/8", {"case_ids": [1]})

    def test_update_cases(self, transport):
        CasesResource(transport).update_cases(1, 1, {"title": "X"}, [1, 2, 3])
        transport.post.assert_called_once_with(
            "update_cases/1", {"title": "X", "case_ids": [1, 2, 3]}, params={"suite_id": 1}
        )

    def test_delete_cases_without_suite(self, transport):
        CasesResource(transport).delete_cases(1, None, [4])
        transport.post.assert_called_once_with(
            "delete_cases/1", {"case_ids": [4]}, params={"suite_id": None}
        )

    def test_http_error_normalized_with_operation(self, transport):
        transport.get.side_effect = HTTPError(404, "Not Found", '{"error": "no case"}')
        with pytest.raises(ApiError) as exc_info:
            CasesResource(transport).get_case(999)
        assert exc_info.value.status == 404
        assert "Failed to get test case 999" in str(exc_info.value)
        assert "no case" in str(exc_info.value)


class TestRunsAndTests:
    def test_runs(self, transport):
        resource = RunsResource(transport)
        resource.get_runs(1, {"createdBy": [1, 2], "isCompleted": True})
        resource.get_run(4)
        resource.add_run(1, {"name": "R", "includeAll": False, "caseIds": [1]})
        resource.update_run(4, {"name": "R2"})
        resource.close_run(4)
        resource.delete_run(4)
        assert transport.get.call_args_list[0].args == ("get_runs/1",)
        assert transport.get.call_args_list[0].kwargs == {
            "params": {"created_by": [1, 2], "is_completed": True}
        }
        assert [c.args for c in transport.post.call_args_list] == [
            ("add_run/1", {"name": "R", "include_all": False, "case_ids": [1]}),
            ("update_run/4", {"name": "R2"}),
            ("close_run/4",),
            ("delete_run/4",),
        ]

    def test_tests(self, transport):
        resource = TestsResource(transport)
        resource.get_tests(3, {"statusId": [5]})
        resource.get_test(11)
        transport.get.assert_any_call("get_tests/3", params={"status_id": [5]})
        transport.get.assert_any_call("get_test/11")


class TestResultsResource:
    def test_get_results_variants(self, transport):
        resource = ResultsResource(transport)
        resource.get_results(11, {"limit": 5})
        resource.get_results_for_case(1, 2)
        resource.get_results_for_run(1, {"createdAfter": 100})
        transport.get.assert_any_call("get_results/11", params={"limit": 5})
        transport.get.assert_any_call("get_results_for_case/1/2", params={})
        transport.get.assert_any_call("get_results_for_run/1", params={"created_after": 100})

    def test_add_result_for_case(self, transport):
        transport.post.return_value = {"id": 77, "status_id": 1}
        out = ResultsResource(transport).add_result_for_case(1, 2, {"statusId": 1})
        assert out == {"id": 77, "status_id": 1}
        transport.post.assert_called_once_with("add_result_for_case/1/2", {"status_id": 1})

    def test_add_results_batched(self, transport):
        ResultsResource(transport).add_results(
            1, [{"testId": 10, "statusId": 1}, {"testId": 11, "comment": "flaky"}]
        )
        transport.post.assert_called_once_with(
            "add_results/1",
            {"results": [{"test_id": 10, "status_id": 1}, {"test_id": 11, "comment": "flaky"}]},
        )

    def test_add_results_for_cases_batched(self, transport):
        ResultsResource(transport).add_results_for_cases(1, [{"caseId": 2, "statusId": 5}])
        transport.post.assert_called_once_with(
            "add_results_for_cases/1", {"results": [{"case_id": 2, "status_id": 5}]}
        )


class TestPlansResource:
    def test_add_plan_nested_entries(self, transport):
        PlansResource(transport).add_plan(
            1,
            {
                "name": "Release",
                "entries": [
                    {"suiteId": 2, "includeAll": True, "runs": [{"configIds": [1, 2]}]},
                ],
            },
        )
        transport.post.assert_called_once_with(
            "add_plan/1",
            {
                "name": "Release",
                "entries": [{"suite_id": 2, "include_all": True, "runs": [{"config_ids": [1, 2]}]}],
            },
        )

    def test_add_run_to_plan_entry(self, transport):
        PlansResource(transport).add_run_to_plan_entry(5, "abc-1", {"configIds": [3]})
        transport.post.assert_called_once_with(
            "add_run_to_plan_entry/5/abc-1", {"config_ids": [3]}
        )

    def test_other_plan_endpoints(self, transport):
        resource = PlansResource(transport)
        resource.get_plans(1, {"milestoneId": 4})
        resource.get_plan(5)
        resource.add_plan_entry(5, {"suiteId": 2})
        resource.update_plan(5, {"name": "N"})
        resource.close_plan(5)
        resource.delete_plan(5)
        transport.get.assert_any_call("get_plans/1", params={"milestone_id": 4})
        transport.get.assert_any_call("get_plan/5")
        assert [c.args[0] for c in transport.post.call_args_list] == [
            "add_plan_entry/5",
            "update_plan/5",
            "close_plan/5",
            "delete_plan/5",
        ]


class TestMilestonesAndSharedSteps:
    def test_milestones(self, transport):
        resource = MilestonesResource(transport)
        resource.get_milestones(1, {"isStarted": True})
        resource.get_milestone(3)
        resource.add_milestone(1, {"name": "M", "dueOn": 1700000000, "parentId": 2})
        resource.update_milestone(3, {"isCompleted": True})
        resource.delete_milestone(3)
        transport.get.assert_any_call("get_milestones/1", params={"is_started": True})
        assert [c.args for c in transport.post.call_args_list] == [
            ("add_milestone/1", {"name": "M", "due_on": 1700000000, "parent_id": 2}),
            ("update_milestone/3", {"is_completed": True}),
            ("delete_milestone/3",),
        ]

    def test_shared_steps(self, transport):
        resource = SharedStepsResource(transport)
        resource.get_shared_steps(1, {"updatedAfter": 5})
        resource.get_shared_step(9)
        resource.add_shared_step(
            1,
            {
                "title": "Login",
                "customStepsSeparated": [{"content": "open", "additionalInfo": "x"}],
            },
        )
        transport.get.assert_any_call("get_shared_steps/1", params={"updated_after": 5})
        transport.get.assert_any_call("get_shared_step/9")
        transport.post.assert_called_once_with(
            "add_shared_step/1",
            {
                "title": "Login",
                "custom_steps_separated": [{"content": "open", "additional_info": "x"}],
            },
        )

    def test_delete_shared_step_keep_in_cases(self, transport):
        resource = SharedStepsResource(transport)
        resource.delete_shared_step(9)
        resource.delete_shared_step(9, keep_in_cases=False)
        assert [c.args for c in transport.post.call_args_list] == [
            ("delete_shared_step/9", {"keep_in_cases": 1}),
            ("delete_shared_step/9", {"keep_in_cases": 0}),
        ]


class TestTransportFailures:
    def test_url_without_scheme_raises_api_error(self):
        cases = CasesResource(Transport("example.testrail.io", "u", "k"))
        with pytest.raises(ApiError) as exc_info:
            cases.get_case(1)
        assert str(exc_info.value).startswith("Failed to get test case 1: Invalid TestRail URL")
        assert exc_info.value.status is None
        assert isinstance(exc_info.value.__cause__, ApiError)

    def test_url_without_scheme_on_mutation(self):
        sections = SectionsResource(Transport("testrail.local", "u", "k"))
        with pytest.raises(ApiError):
            sections.move_section(7, {"parentId": None})
