"""Projects: get_project, get_projects, add/update/delete_project."""

from testrail_mcp._utils import to_wire
from testrail_mcp.api import api_errors


class ProjectsResource:
    def __init__(self, transport):
        self._transport = transport

    def get_project(self, project_id):
        with api_errors(f"Failed to get project {project_id}"):
            return self._transport.get(f"get_project/{project_id}")

    def get_projects(self, filters=None):
        with api_errors("Failed to get projects"):
            return self._transport.get("get_projects", params=to_wire(filters or {}))

    def add_project(self, data):
        with api_errors("Failed to create project"):
            return self._transport.post("add_project", to_wire(data))

    def update_project(self, project_id, data):
        with api_errors(f"Failed to update project {project_id}"):
            return self._transport.post(f"update_project/{project_id}", to_wire(data))

    def delete_project(self, project_id):
        with api_errors(f"Failed to delete project {project_id}"):
            return self._transport.post(f"delete_project/{project_id}")
