"""
Argument schemas for every tool, keyed by the camelCase names callers use.

Field names here are the tool vocabulary; the resource clients translate them
to TestRail's snake_case wire names.
"""

from testrail_mcp.config import DEFAULT_PAGE_LIMIT
from testrail_mcp.models import Field, Schema

# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------


def _id(description, required=True):
    return Field("integer", description, required=required)


def _text(description, required=False):
    return Field("string", description, required=required)


def _flag(description, default=None):
    return Field("boolean", description, default=default)


def _ids(description, required=False):
    return Field("array", description, required=required, items=Field("integer"))


def _timestamp(description):
    return Field("integer", description + " (UNIX timestamp)")


def _page():
    return {
        "limit": Field("integer", "Maximum number of records to return", minimum=1),
        "offset": Field("integer", "Number of records to skip", minimum=0),
    }


PROJECT_ID = _id("TestRail Project ID")
SUITE_ID = _id("TestRail Suite ID")
SECTION_ID = _id("TestRail Section ID")
CASE_ID = _id("TestRail Case ID")
RUN_ID = _id("TestRail Run ID")
TEST_ID = _id("TestRail Test ID")
PLAN_ID = _id("TestRail Plan ID")
MILESTONE_ID = _id("TestRail Milestone ID")
SHARED_STEP_ID = _id("TestRail Shared Step ID")

# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------

GET_PROJECTS = Schema(
    "Lists all projects, optionally filtered by completion.",
    {"isCompleted": _flag("Only completed (true) or active (false) projects"), **_page()},
)
GET_PROJECT = Schema("Retrieves a single project.", {"projectId": PROJECT_ID})
ADD_PROJECT = Schema(
    "Creates a new project.",
    {
        "name": _text("Project name", required=True),
        "announcement": _text("Project announcement"),
        "showAnnouncement": _flag("Show the announcement on the project overview"),
        "suiteMode": Field(
            "integer",
            "1: single suite, 2: single suite + baselines, 3: multiple suites",
            enum=(1, 2, 3),
        ),
    },
)
UPDATE_PROJECT = Schema(
    "Updates an existing project. Only the supplied fields change.",
    {
        "projectId": PROJECT_ID,
        "name": _text("Project name"),
        "announcement": _text("Project announcement"),
        "showAnnouncement": _flag("Show the announcement on the project overview"),
        "isCompleted": _flag("Mark the project as completed"),
    },
)
DELETE_PROJECT = Schema(
    "Deletes a project and everything in it. Cannot be undone.",
    {"projectId": PROJECT_ID},
)

# ---------------------------------------------------------------------------
# Suites
# ---------------------------------------------------------------------------

GET_SUITES = Schema("Lists the test suites of a project.", {"projectId": PROJECT_ID})
GET_SUITE = Schema("Retrieves a single test suite.", {"suiteId": SUITE_ID})
ADD_SUITE = Schema(
    "Creates a new test suite in a project.",
    {
        "projectId": PROJECT_ID,
        "name": _text("Suite name", required=True),
        "description": _text("Suite description"),
    },
)
UPDATE_SUITE = Schema(
    "Updates an existing test suite.",
    {"suiteId": SUITE_ID, "name": _text("Suite name"), "description": _text("Suite description")},
)
DELETE_SUITE = Schema(
    "Deletes a test suite with all its sections and cases. Cannot be undone.",
    {"suiteId": SUITE_ID},
)

# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

GET_SECTION = Schema("Retrieves a single section.", {"sectionId": SECTION_ID})
GET_SECTIONS = Schema(
    "Lists the sections of a project (and suite, for multi-suite projects).",
    {
        "projectId": PROJECT_ID,
        "suiteId": _id("TestRail Suite ID (required for multi-suite projects)", required=False),
        **_page(),
    },
)
ADD_SECTION = Schema(
    "Creates a new section.",
    {
        "projectId": PROJECT_ID,
        "name": _text("Section name", required=True),
        "suiteId": _id("TestRail Suite ID (required for multi-suite projects)", required=False),
        "parentId": _id("Parent section ID, for a nested section", required=False),
        "description": _text("Section description"),
    },
)
UPDATE_SECTION = Schema(
    "Updates an existing section.",
    {
        "sectionId": SECTION_ID,
        "name": _text("Section name"),
        "description": _text("Section description"),
    },
)
MOVE_SECTION = Schema(
    "Moves a section under another parent and/or after a sibling.",
    {
        "sectionId": SECTION_ID,
        "parentId": Field(
            "integer", "New parent section ID (null for the root level)", nullable=True
        ),
        "afterId": Field(
            "integer", "Sibling section to place this one after (null for first)", nullable=True
        ),
    },
)
DELETE_SECTION = Schema(
    "Deletes a section with all its subsections and cases. Cannot be undone.",
    {"sectionId": SECTION_ID},
)

# ---------------------------------------------------------------------------
# Cases
# ---------------------------------------------------------------------------


def _case_fields():
    return {
        "templateId": _id("Template (field layout) ID", required=False),
        "typeId": _id("Test case type ID", required=False),
        "priorityId": _id("Test case priority ID", required=False),
        "estimate": _text("Estimated time, e.g. '30s' or '1m 45s'"),
        "milestoneId": _id("TestRail Milestone ID", required=False),
        "refs": _text("Comma-separated references or requirements"),
        "customPrerequisites": _text("Prerequisites"),
        "customSteps": _text("Test case steps"),
        "customExpected": _text("Expected results"),
    }


GET_CASE = Schema(
    "Retrieves complete details for a single test case, including all fields "
    "such as steps, expected results, and prerequisites.",
    {"caseId": CASE_ID},
)
GET_CASES = Schema(
    "Retrieves test cases for a project with limited fields to reduce response "
    "size. Large text fields (steps, expected results, etc.) are excluded. For "
    "complete case details, use getCase with a specific case ID.",
    {
        "projectId": PROJECT_ID,
        "suiteId": SUITE_ID,
        "sectionId": _id("Only cases in this section", required=False),
        "limit": Field(
            "integer",
            "Number of cases to return per page. If you cannot get all cases, "
            "split the request into multiple calls",
            default=DEFAULT_PAGE_LIMIT,
            minimum=1,
        ),
        "offset": Field("integer", "Offset for pagination", default=0, minimum=0),
    },
)
ADD_CASE = Schema(
    "Creates a new test case in a section.",
    {"sectionId": SECTION_ID, "title": _text("Test case title", required=True), **_case_fields()},
)
UPDATE_CASE = Schema(
    "Updates an existing test case. Only the supplied fields change.",
    {"caseId": CASE_ID, "title": _text("Test case title"), **_case_fields()},
)
DELETE_CASE = Schema("Deletes a test case. Cannot be undone.", {"caseId": CASE_ID})
GET_CASE_TYPES = Schema("Lists the available test case types.", {})
GET_CASE_FIELDS = Schema("Lists the available test case fields, custom fields included.", {})
COPY_TO_SECTION = Schema(
    "Copies test cases into another section.",
    {
        "caseIds": _ids("Array of TestRail Case IDs", required=True),
        "sectionId": _id("Target TestRail Section ID"),
    },
)
MOVE_TO_SECTION = Schema(
    "Moves test cases into another section (and suite).",
    {
        "caseIds": _ids("Array of TestRail Case IDs", required=True),
        "sectionId": _id("Target TestRail Section ID"),
        "suiteId": _id("Target TestRail Suite ID", required=False),
    },
)
GET_CASE_HISTORY = Schema("Retrieves the change history of a test case.", {"caseId": CASE_ID})
UPDATE_CASES = Schema(
    "Applies the same field values to many test cases at once. Without a suite "
    "ID the whole project is targeted.",
    {
        "projectId": PROJECT_ID,
        "caseIds": _ids("Array of TestRail Case IDs", required=True),
        "suiteId": _id("TestRail Suite ID", required=False),
        "title": _text("Test case title"),
        **_case_fields(),
    },
)
DELETE_CASES = Schema(
    "Deletes many test cases at once. Without a suite ID the whole project is "
    "targeted. Cannot be undone.",
    {
        "projectId": PROJECT_ID,
        "caseIds": _ids("Array of TestRail Case IDs", required=True),
        "suiteId": _id("TestRail Suite ID", required=False),
    },
)

# ---------------------------------------------------------------------------
# Runs and tests
# ---------------------------------------------------------------------------

GET_RUNS = Schema(
    "Lists the test runs of a project.",
    {
        "projectId": PROJECT_ID,
        "createdAfter": _timestamp("Only runs created after this date"),
        "createdBefore": _timestamp("Only runs created before this date"),
        "createdBy": _ids("Only runs created by these user IDs"),
        "isCompleted": _flag("Only completed (true) or active (false) runs"),
        "milestoneId": _id("Only runs of this milestone", required=False),
        "suiteId": _id("Only runs of this suite", required=False),
        "refsFilter": _text("Only runs with these references"),
        **_page(),
    },
)
GET_RUN = Schema("Retrieves a single test run.", {"runId": RUN_ID})


def _run_fields():
    return {
        "description": _text("Test run description"),
        "milestoneId": _id("TestRail Milestone ID", required=False),
        "assignedtoId": _id("User ID to assign the run to", required=False),
        "includeAll": _flag("Include all cases of the suite (default true upstream)"),
        "caseIds": _ids("Cases to include when includeAll is false"),
        "refs": _text("Comma-separated references"),
    }


ADD_RUN = Schema(
    "Creates a new test run.",
    {
        "projectId": PROJECT_ID,
        "name": _text("Test run name", required=True),
        "suiteId": _id("TestRail Suite ID (required for multi-suite projects)", required=False),
        **_run_fields(),
        "configIds": _ids("Configuration IDs"),
    },
)
UPDATE_RUN = Schema(
    "Updates an existing test run. Only the supplied fields change.",
    {"runId": RUN_ID, "name": _text("Test run name"), **_run_fields()},
)
CLOSE_RUN = Schema("Closes a test run and archives its tests and results.", {"runId": RUN_ID})
DELETE_RUN = Schema("Deletes a test run. Cannot be undone.", {"runId": RUN_ID})

GET_TESTS = Schema(
    "Lists the tests of a test run.",
    {"runId": RUN_ID, "statusId": _ids("Only tests with these status IDs")},
)
GET_TEST = Schema("Retrieves a single test.", {"testId": TEST_ID})

# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


def _result_fields():
    return {
        "statusId": _id("Status ID (1 passed, 2 blocked, 4 retest, 5 failed)", required=False),
        "comment": _text("Comment or description of the result"),
        "version": _text("Version or build tested against"),
        "elapsed": _text("Time spent, e.g. '30s' or '1m 45s'"),
        "defects": _text("Comma-separated defect IDs"),
        "assignedtoId": _id("User ID to assign the test to", required=False),
    }


def _result_filters():
    return {
        "defectsFilter": _text("Only results with this defect ID"),
        "statusId": _ids("Only results with these status IDs"),
        **_page(),
    }


GET_RESULTS = Schema(
    "Lists the results of a test.",
    {"testId": TEST_ID, **_result_filters()},
)
GET_RESULTS_FOR_CASE = Schema(
    "Lists the results of a case within a test run.",
    {"runId": RUN_ID, "caseId": CASE_ID, **_result_filters()},
)
GET_RESULTS_FOR_RUN = Schema(
    "Lists the results of a whole test run.",
    {
        "runId": RUN_ID,
        "createdAfter": _timestamp("Only results created after this date"),
        "createdBefore": _timestamp("Only results created before this date"),
        "createdBy": _ids("Only results created by these user IDs"),
        **_result_filters(),
    },
)
ADD_RESULT = Schema(
    "Adds a result to a test.",
    {"testId": TEST_ID, **_result_fields()},
)
ADD_RESULT_FOR_CASE = Schema(
    "Adds a result for a case within a test run.",
    {"runId": RUN_ID, "caseId": CASE_ID, **_result_fields()},
)
ADD_RESULTS = Schema(
    "Adds several results to a test run in one request, keyed by test ID.",
    {
        "runId": RUN_ID,
        "results": Field(
            "array",
            "Results to add",
            required=True,
            items=Field("object", fields={"testId": TEST_ID, **_result_fields()}),
        ),
    },
)
ADD_RESULTS_FOR_CASES = Schema(
    "Adds several results to a test run in one request, keyed by case ID.",
    {
        "runId": RUN_ID,
        "results": Field(
            "array",
            "Results to add",
            required=True,
            items=Field("object", fields={"caseId": CASE_ID, **_result_fields()}),
        ),
    },
)

# ---------------------------------------------------------------------------
# Plans
# ---------------------------------------------------------------------------

_PLAN_RUN = Field(
    "object",
    fields={
        "configIds": _ids("Configuration IDs of this run"),
        "description": _text("Run description"),
        "assignedtoId": _id("User ID to assign the run to", required=False),
        "includeAll": _flag("Include all cases of the suite"),
        "caseIds": _ids("Cases to include when includeAll is false"),
        "refs": _text("Comma-separated references"),
    },
)


def _entry_fields():
    return {
        "name": _text("Plan entry name"),
        "description": _text("Plan entry description"),
        "assignedtoId": _id("User ID to assign to", required=False),
        "includeAll": _flag("Include all test cases"),
        "caseIds": _ids("Specific case IDs to include"),
        "configIds": _ids("Configuration IDs"),
        "refs": _text("References"),
        "runs": Field("array", "Test run configurations", items=_PLAN_RUN),
    }


GET_PLANS = Schema(
    "Lists the test plans of a project.",
    {
        "projectId": PROJECT_ID,
        "isCompleted": _flag("Only completed (true) or active (false) plans"),
        "milestoneId": _id("Only plans of this milestone", required=False),
        **_page(),
    },
)
GET_PLAN = Schema("Retrieves a test plan with its entries and runs.", {"planId": PLAN_ID})
ADD_PLAN = Schema(
    "Creates a new test plan.",
    {
        "projectId": PROJECT_ID,
        "name": _text("Test plan name", required=True),
        "description": _text("Test plan description"),
        "milestoneId": _id("Milestone ID", required=False),
        "entries": Field(
            "array",
            "Test runs to include in the plan",
            items=Field("object", fields={"suiteId": SUITE_ID, **_entry_fields()}),
        ),
    },
)
ADD_PLAN_ENTRY = Schema(
    "Adds a plan entry (one or more runs of a suite) to a test plan.",
    {"planId": PLAN_ID, "suiteId": _id("Test suite ID"), **_entry_fields()},
)
ADD_RUN_TO_PLAN_ENTRY = Schema(
    "Adds a test run for a configuration to an existing plan entry.",
    {
        "planId": PLAN_ID,
        "entryId": _text("Plan Entry ID", required=True),
        "configIds": _ids("Configuration IDs for the test run", required=True),
        "description": _text("Test run description"),
        "assignedtoId": _id("User ID to assign to", required=False),
        "includeAll": _flag("Include all test cases"),
        "caseIds": _ids("Specific case IDs to include"),
        "refs": _text("References"),
    },
)
UPDATE_PLAN = Schema(
    "Updates an existing test plan.",
    {
        "planId": PLAN_ID,
        "name": _text("Test plan name"),
        "description": _text("Test plan description"),
        "milestoneId": _id("Milestone ID", required=False),
    },
)
CLOSE_PLAN = Schema("Closes a test plan and archives its runs.", {"planId": PLAN_ID})
DELETE_PLAN = Schema("Deletes a test plan. Cannot be undone.", {"planId": PLAN_ID})

# ---------------------------------------------------------------------------
# Milestones
# ---------------------------------------------------------------------------


def _milestone_fields():
    return {
        "description": _text("Milestone description"),
        "dueOn": _timestamp("Due date"),
        "startOn": _timestamp("Scheduled start date"),
        "parentId": _id("Parent milestone ID, for a sub-milestone", required=False),
        "refs": _text("Comma-separated references"),
    }


GET_MILESTONE = Schema("Retrieves a single milestone.", {"milestoneId": MILESTONE_ID})
GET_MILESTONES = Schema(
    "Lists the milestones of a project.",
    {
        "projectId": PROJECT_ID,
        "isCompleted": _flag("Only completed (true) or open (false) milestones"),
        "isStarted": _flag("Only started (true) or upcoming (false) milestones"),
    },
)
ADD_MILESTONE = Schema(
    "Creates a new milestone.",
    {
        "projectId": PROJECT_ID,
        "name": _text("Milestone name", required=True),
        **_milestone_fields(),
    },
)
UPDATE_MILESTONE = Schema(
    "Updates an existing milestone.",
    {
        "milestoneId": MILESTONE_ID,
        "name": _text("Milestone name"),
        **_milestone_fields(),
        "isCompleted": _flag("Mark the milestone as completed"),
        "isStarted": _flag("Mark the milestone as started"),
    },
)
DELETE_MILESTONE = Schema("Deletes a milestone. Cannot be undone.", {"milestoneId": MILESTONE_ID})

# ---------------------------------------------------------------------------
# Shared steps
# ---------------------------------------------------------------------------

_STEP = Field(
    "object",
    fields={
        "content": _text("Step description", required=True),
        "expected": _text("Expected result"),
        "additionalInfo": _text("Additional information"),
        "refs": _text("References"),
    },
)

GET_SHARED_STEP = Schema(
    "Retrieves a single set of shared steps.", {"sharedStepId": SHARED_STEP_ID}
)
GET_SHARED_STEPS = Schema(
    "Lists the shared steps of a project.",
    {
        "projectId": PROJECT_ID,
        "createdAfter": _timestamp("Only shared steps created after this date"),
        "createdBefore": _timestamp("Only shared steps created before this date"),
        "createdBy": _ids("Only shared steps created by these user IDs"),
        "updatedAfter": _timestamp("Only shared steps updated after this date"),
        "updatedBefore": _timestamp("Only shared steps updated before this date"),
        "refs": _text("Only shared steps with these references"),
        **_page(),
    },
)
ADD_SHARED_STEP = Schema(
    "Creates a new set of shared steps.",
    {
        "projectId": PROJECT_ID,
        "title": _text("Shared steps title", required=True),
        "steps": Field("array", "Steps, in order", required=True, items=_STEP),
    },
)
UPDATE_SHARED_STEP = Schema(
    "Updates a set of shared steps. Supplied steps replace the existing ones.",
    {
        "sharedStepId": SHARED_STEP_ID,
        "title": _text("Shared steps title"),
        "steps": Field("array", "Steps, in order", items=_STEP),
    },
)
DELETE_SHARED_STEP = Schema(
    "Deletes a set of shared steps.",
    {
        "sharedStepId": SHARED_STEP_ID,
        "keepInCases": _flag(
            "Keep the steps in the cases that use them (as regular steps)", default=True
        ),
    },
)
