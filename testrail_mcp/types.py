"""Typed shapes of the TestRail records the gateway passes through.

These TypedDicts document the dicts returned by the resource clients and the
envelopes produced by the tool layer. They are optional: runtime values are
plain dicts straight from the upstream JSON.
"""

from __future__ import annotations

from typing import Any, TypedDict

# ---------------------------------------------------------------------------
# Projects, suites, sections
# ---------------------------------------------------------------------------


class Project(TypedDict, total=False):
    id: int
    name: str
    announcement: str | None
    show_announcement: bool
    is_completed: bool
    completed_on: int | None
    suite_mode: int
    url: str


class Suite(TypedDict, total=False):
    id: int
    name: str
    description: str | None
    project_id: int
    is_master: bool
    is_baseline: bool
    is_completed: bool
    completed_on: int | None
    url: str


class Section(TypedDict, total=False):
    id: int
    name: str
    description: str | None
    suite_id: int
    parent_id: int | None
    depth: int
    display_order: int


# ---------------------------------------------------------------------------
# Cases
# ---------------------------------------------------------------------------


class Case(TypedDict, total=False):
    """A test case. Custom fields appear as ``custom_*`` keys."""

    id: int
    title: str
    section_id: int
    template_id: int
    type_id: int
    priority_id: int
    milestone_id: int | None
    refs: str | None
    created_by: int
    created_on: int
    updated_by: int
    updated_on: int
    estimate: str | None
    estimate_forecast: str | None
    suite_id: int
    custom_preconds: str | None
    custom_steps: str | None
    custom_expected: str | None
    custom_steps_separated: list[dict[str, Any]] | None


class CaseType(TypedDict):
    id: int
    name: str
    is_default: bool


class CaseField(TypedDict, total=False):
    id: int
    type_id: int
    name: str
    system_name: str
    label: str
    description: str | None
    configs: list[dict[str, Any]]
    display_order: int
    include_all: bool
    template_ids: list[int]


class CaseHistory(TypedDict, total=False):
    id: int
    type_id: int
    created_on: int
    user_id: int
    changes: list[dict[str, Any]]


class Pagination(TypedDict):
    limit: int
    offset: int
    total: int
    hasMore: bool


class CasePage(TypedDict):
    """Data of a getCases response."""

    cases: list[Case]
    pagination: Pagination


# ---------------------------------------------------------------------------
# Runs, tests, results
# ---------------------------------------------------------------------------


class Run(TypedDict, total=False):
    id: int
    suite_id: int
    name: str
    description: str | None
    milestone_id: int | None
    assignedto_id: int | None
    include_all: bool
    is_completed: bool
    completed_on: int | None
    config: str | None
    config_ids: list[int]
    passed_count: int
    blocked_count: int
    untested_count: int
    retest_count: int
    failed_count: int
    project_id: int
    plan_id: int | None
    created_on: int
    created_by: int
    refs: str | None
    url: str


class Test(TypedDict, total=False):
    id: int
    case_id: int
    status_id: int
    assignedto_id: int | None
    run_id: int
    title: str
    template_id: int
    type_id: int
    priority_id: int
    estimate: str | None
    estimate_forecast: str | None
    refs: str | None
    milestone_id: int | None


class Result(TypedDict, total=False):
    id: int
    test_id: int
    status_id: int | None
    created_on: int
    created_by: int
    assignedto_id: int | None
    comment: str | None
    version: str | None
    elapsed: str | None
    defects: str | None


# ---------------------------------------------------------------------------
# Plans, milestones, shared steps
# ---------------------------------------------------------------------------


class PlanEntry(TypedDict, total=False):
    id: str
    suite_id: int
    name: str
    description: str | None
    include_all: bool
    refs: str | None
    runs: list[Run]


class Plan(TypedDict, total=False):
    id: int
    name: str
    description: str | None
    milestone_id: int | None
    assignedto_id: int | None
    is_completed: bool
    completed_on: int | None
    project_id: int
    created_on: int
    created_by: int
    url: str
    entries: list[PlanEntry]


class Milestone(TypedDict, total=False):
    id: int
    name: str
    description: str | None
    project_id: int
    parent_id: int | None
    due_on: int | None
    start_on: int | None
    started_on: int | None
    is_completed: bool
    is_started: bool
    completed_on: int | None
    refs: str | None
    url: str
    milestones: list[Milestone]


class SharedStep(TypedDict, total=False):
    id: int
    title: str
    project_id: int
    created_by: int
    created_on: int
    updated_by: int
    updated_on: int
    custom_steps_separated: list[dict[str, Any]]
    case_ids: list[int]


# ---------------------------------------------------------------------------
# Envelopes
# ---------------------------------------------------------------------------


class ErrorDetail(TypedDict, total=False):
    type: str
    message: str
    status: int
    body: Any
    field: str


class SuccessEnvelope(TypedDict, total=False):
    success: bool
    message: str
    data: dict[str, Any]


class ErrorEnvelope(TypedDict):
    success: bool
    message: str
    error: ErrorDetail
