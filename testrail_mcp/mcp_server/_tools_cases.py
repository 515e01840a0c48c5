"""Case tools: single and bulk case CRUD, metadata, history (12 tools)."""

from __future__ import annotations

from testrail_mcp import schemas
from testrail_mcp.mcp_server._core import _slim_case, _unpack_page, success


def get_case(client, args):
    # Full record: steps, expected results and prerequisites included.
    case = client.cases.get_case(args["caseId"])
    return success("Test case retrieved successfully", {"case": case})


def get_cases(client, args):
    """One page of cases with the large text fields stripped."""
    project_id = args.pop("projectId")
    suite_id = args.pop("suiteId")
    page = client.cases.get_cases(project_id, suite_id, args)
    cases, total, has_more = _unpack_page(page, "cases")
    return success(
        "Test cases retrieved successfully",
        {
            "cases": [_slim_case(c) for c in cases],
            "pagination": {
                "limit": args["limit"],
                "offset": args["offset"],
                "total": total,
                "hasMore": has_more,
            },
        },
    )


def add_case(client, args):
    section_id = args.pop("sectionId")
    case = client.cases.add_case(section_id, args)
    return success("Test case created successfully", {"case": case})


def update_case(client, args):
    case_id = args.pop("caseId")
    case = client.cases.update_case(case_id, args)
    return success("Test case updated successfully", {"case": case})


def delete_case(client, args):
    client.cases.delete_case(args["caseId"])
    return success(f"Test case {args['caseId']} deleted successfully")


def get_case_types(client, args):
    case_types = client.cases.get_case_types()
    return success("Test case types retrieved successfully", {"caseTypes": case_types})


def get_case_fields(client, args):
    case_fields = client.cases.get_case_fields()
    return success("Test case fields retrieved successfully", {"caseFields": case_fields})


def copy_to_section(client, args):
    result = client.cases.copy_to_section(args["caseIds"], args["sectionId"])
    return success("Test cases copied successfully", {"result": result})


def move_to_section(client, args):
    result = client.cases.move_to_section(
        args["caseIds"], args["sectionId"], args.get("suiteId")
    )
    return success("Test cases moved successfully", {"result": result})


def get_case_history(client, args):
    history = client.cases.get_case_history(args["caseId"])
    return success("Test case history retrieved successfully", {"history": history})


def update_cases(client, args):
    project_id = args.pop("projectId")
    case_ids = args.pop("caseIds")
    suite_id = args.pop("suiteId", None)
    client.cases.update_cases(project_id, suite_id, args, case_ids)
    return success("Test cases updated successfully")


def delete_cases(client, args):
    client.cases.delete_cases(args["projectId"], args.get("suiteId"), args["caseIds"])
    return success("Test cases deleted successfully")


def register(registry):
    """Register all case tools."""
    registry.add("getCase", get_case, schemas.GET_CASE, "Error fetching test case {caseId}")
    registry.add(
        "getCases",
        get_cases,
        schemas.GET_CASES,
        "Error fetching test cases for project {projectId}",
    )
    registry.add(
        "addCase", add_case, schemas.ADD_CASE, "Error creating test case in section {sectionId}"
    )
    registry.add(
        "updateCase", update_case, schemas.UPDATE_CASE, "Error updating test case {caseId}"
    )
    registry.add(
        "deleteCase", delete_case, schemas.DELETE_CASE, "Error deleting test case {caseId}"
    )
    registry.add(
        "getCaseTypes", get_case_types, schemas.GET_CASE_TYPES, "Error fetching test case types"
    )
    registry.add(
        "getCaseFields",
        get_case_fields,
        schemas.GET_CASE_FIELDS,
        "Error fetching test case fields",
    )
    registry.add(
        "copyToSection",
        copy_to_section,
        schemas.COPY_TO_SECTION,
        "Error copying test cases to section {sectionId}",
    )
    registry.add(
        "moveToSection",
        move_to_section,
        schemas.MOVE_TO_SECTION,
        "Error moving test cases to section {sectionId}",
    )
    registry.add(
        "getCaseHistory",
        get_case_history,
        schemas.GET_CASE_HISTORY,
        "Error fetching history for test case {caseId}",
    )
    registry.add(
        "updateCases",
        update_cases,
        schemas.UPDATE_CASES,
        "Error updating test cases for project {projectId}",
    )
    registry.add(
        "deleteCases",
        delete_cases,
        schemas.DELETE_CASES,
        "Error deleting test cases for project {projectId}",
    )
