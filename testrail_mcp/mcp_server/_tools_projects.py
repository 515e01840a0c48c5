"""Project tools: projects, suites, and the section tree (16 tools)."""

from __future__ import annotations

from testrail_mcp import schemas
from testrail_mcp.exceptions import ValidationError
from testrail_mcp.mcp_server._core import success

# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------


def get_projects(client, args):
    projects = client.projects.get_projects(args)
    return success("Projects retrieved successfully", {"projects": projects})


def get_project(client, args):
    project = client.projects.get_project(args["projectId"])
    return success("Project retrieved successfully", {"project": project})


def add_project(client, args):
    project = client.projects.add_project(args)
    return success("Project created successfully", {"project": project})


def update_project(client, args):
    project_id = args.pop("projectId")
    project = client.projects.update_project(project_id, args)
    return success("Project updated successfully", {"project": project})


def delete_project(client, args):
    client.projects.delete_project(args["projectId"])
    return success(f"Project {args['projectId']} deleted successfully")


# ---------------------------------------------------------------------------
# Suites
# ---------------------------------------------------------------------------


def get_suites(client, args):
    suites = client.suites.get_suites(args["projectId"])
    return success("Test suites retrieved successfully", {"suites": suites})


def get_suite(client, args):
    suite = client.suites.get_suite(args["suiteId"])
    return success("Test suite retrieved successfully", {"suite": suite})


def add_suite(client, args):
    project_id = args.pop("projectId")
    suite = client.suites.add_suite(project_id, args)
    return success("Test suite created successfully", {"suite": suite})


def update_suite(client, args):
    suite_id = args.pop("suiteId")
    suite = client.suites.update_suite(suite_id, args)
    return success("Test suite updated successfully", {"suite": suite})


def delete_suite(client, args):
    client.suites.delete_suite(args["suiteId"])
    return success(f"Test suite {args['suiteId']} deleted successfully")


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


def get_section(client, args):
    section = client.sections.get_section(args["sectionId"])
    return success("Section retrieved successfully", {"section": section})


def get_sections(client, args):
    project_id = args.pop("projectId")
    suite_id = args.pop("suiteId", None)
    sections = client.sections.get_sections(project_id, suite_id, args)
    return success("Sections retrieved successfully", {"sections": sections})


def add_section(client, args):
    project_id = args.pop("projectId")
    section = client.sections.add_section(project_id, args)
    return success("Section created successfully", {"section": section})


def update_section(client, args):
    section_id = args.pop("sectionId")
    section = client.sections.update_section(section_id, args)
    return success("Section updated successfully", {"section": section})


def _check_move_section(args):
    if args.get("parentId") is not None and args["parentId"] == args["sectionId"]:
        raise ValidationError("A section cannot be its own parent.", field="parentId")


def move_section(client, args):
    section_id = args.pop("sectionId")
    section = client.sections.move_section(section_id, args)
    return success("Section moved successfully", {"section": section})


def delete_section(client, args):
    client.sections.delete_section(args["sectionId"])
    return success(f"Section {args['sectionId']} deleted successfully")


def register(registry):
    """Register all project, suite and section tools."""
    registry.add("getProjects", get_projects, schemas.GET_PROJECTS, "Error fetching projects")
    registry.add(
        "getProject", get_project, schemas.GET_PROJECT, "Error fetching project {projectId}"
    )
    registry.add("addProject", add_project, schemas.ADD_PROJECT, "Error creating project {name}")
    registry.add(
        "updateProject",
        update_project,
        schemas.UPDATE_PROJECT,
        "Error updating project {projectId}",
    )
    registry.add(
        "deleteProject",
        delete_project,
        schemas.DELETE_PROJECT,
        "Error deleting project {projectId}",
    )

    registry.add(
        "getSuites",
        get_suites,
        schemas.GET_SUITES,
        "Error fetching test suites for project {projectId}",
    )
    registry.add("getSuite", get_suite, schemas.GET_SUITE, "Error fetching test suite {suiteId}")
    registry.add(
        "addSuite",
        add_suite,
        schemas.ADD_SUITE,
        "Error creating test suite in project {projectId}",
    )
    registry.add(
        "updateSuite", update_suite, schemas.UPDATE_SUITE, "Error updating test suite {suiteId}"
    )
    registry.add(
        "deleteSuite", delete_suite, schemas.DELETE_SUITE, "Error deleting test suite {suiteId}"
    )

    registry.add(
        "getSection", get_section, schemas.GET_SECTION, "Error fetching section {sectionId}"
    )
    registry.add(
        "getSections",
        get_sections,
        schemas.GET_SECTIONS,
        "Error fetching sections for project {projectId}",
    )
    registry.add(
        "addSection",
        add_section,
        schemas.ADD_SECTION,
        "Error creating section in project {projectId}",
    )
    registry.add(
        "updateSection",
        update_section,
        schemas.UPDATE_SECTION,
        "Error updating section {sectionId}",
    )
    registry.add(
        "moveSection",
        move_section,
        schemas.MOVE_SECTION,
        "Error moving section {sectionId}",
        check=_check_move_section,
    )
    registry.add(
        "deleteSection",
        delete_section,
        schemas.DELETE_SECTION,
        "Error deleting section {sectionId}",
    )
