"""Execution tools: runs, tests, and results (15 tools)."""

from __future__ import annotations

from testrail_mcp import schemas
from testrail_mcp.mcp_server._core import success

# ---------------------------------------------------------------------------
# Runs
# ---------------------------------------------------------------------------


def get_runs(client, args):
    project_id = args.pop("projectId")
    runs = client.runs.get_runs(project_id, args)
    return success("Test runs retrieved successfully", {"runs": runs})


def get_run(client, args):
    run = client.runs.get_run(args["runId"])
    return success("Test run retrieved successfully", {"run": run})


def add_run(client, args):
    project_id = args.pop("projectId")
    run = client.runs.add_run(project_id, args)
    return success("Test run created successfully", {"run": run})


def update_run(client, args):
    run_id = args.pop("runId")
    run = client.runs.update_run(run_id, args)
    return success("Test run updated successfully", {"run": run})


def close_run(client, args):
    run = client.runs.close_run(args["runId"])
    return success("Test run closed successfully", {"run": run})


def delete_run(client, args):
    client.runs.delete_run(args["runId"])
    return success(f"Test run {args['runId']} deleted successfully")


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


def get_tests(client, args):
    run_id = args.pop("runId")
    tests = client.tests.get_tests(run_id, args)
    return success("Tests retrieved successfully", {"tests": tests})


def get_test(client, args):
    test = client.tests.get_test(args["testId"])
    return success("Test retrieved successfully", {"test": test})


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


def get_results(client, args):
    test_id = args.pop("testId")
    results = client.results.get_results(test_id, args)
    return success("Results retrieved successfully", {"results": results})


def get_results_for_case(client, args):
    run_id = args.pop("runId")
    case_id = args.pop("caseId")
    results = client.results.get_results_for_case(run_id, case_id, args)
    return success("Results retrieved successfully", {"results": results})


def get_results_for_run(client, args):
    run_id = args.pop("runId")
    results = client.results.get_results_for_run(run_id, args)
    return success("Results retrieved successfully", {"results": results})


def add_result(client, args):
    test_id = args.pop("testId")
    result = client.results.add_result(test_id, args)
    return success("Result added successfully", {"result": result})


def add_result_for_case(client, args):
    run_id = args.pop("runId")
    case_id = args.pop("caseId")
    result = client.results.add_result_for_case(run_id, case_id, args)
    return success("Result added successfully", {"result": result})


def add_results(client, args):
    results = client.results.add_results(args["runId"], args["results"])
    return success("Results added successfully", {"results": results})


def add_results_for_cases(client, args):
    results = client.results.add_results_for_cases(args["runId"], args["results"])
    return success("Results added successfully", {"results": results})


def register(registry):
    """Register all run, test and result tools."""
    registry.add(
        "getRuns", get_runs, schemas.GET_RUNS, "Error fetching test runs for project {projectId}"
    )
    registry.add("getRun", get_run, schemas.GET_RUN, "Error fetching test run {runId}")
    registry.add(
        "addRun", add_run, schemas.ADD_RUN, "Error creating test run for project {projectId}"
    )
    registry.add("updateRun", update_run, schemas.UPDATE_RUN, "Error updating test run {runId}")
    registry.add("closeRun", close_run, schemas.CLOSE_RUN, "Error closing test run {runId}")
    registry.add("deleteRun", delete_run, schemas.DELETE_RUN, "Error deleting test run {runId}")

    registry.add("getTests", get_tests, schemas.GET_TESTS, "Error fetching tests for run {runId}")
    registry.add("getTest", get_test, schemas.GET_TEST, "Error fetching test {testId}")

    registry.add(
        "getResults", get_results, schemas.GET_RESULTS, "Error fetching results for test {testId}"
    )
    registry.add(
        "getResultsForCase",
        get_results_for_case,
        schemas.GET_RESULTS_FOR_CASE,
        "Error fetching results for run {runId} and case {caseId}",
    )
    registry.add(
        "getResultsForRun",
        get_results_for_run,
        schemas.GET_RESULTS_FOR_RUN,
        "Error fetching results for run {runId}",
    )
    registry.add(
        "addResult", add_result, schemas.ADD_RESULT, "Error adding result for test {testId}"
    )
    registry.add(
        "addResultForCase",
        add_result_for_case,
        schemas.ADD_RESULT_FOR_CASE,
        "Error adding result for run {runId} and case {caseId}",
    )
    registry.add(
        "addResults", add_results, schemas.ADD_RESULTS, "Error adding results for run {runId}"
    )
    registry.add(
        "addResultsForCases",
        add_results_for_cases,
        schemas.ADD_RESULTS_FOR_CASES,
        "Error adding results for run {runId}",
    )
