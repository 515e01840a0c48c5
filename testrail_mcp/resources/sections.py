"""Sections: the folder tree (via parent_id) that holds test cases."""

from testrail_mcp._utils import camel_to_snake, to_wire
from testrail_mcp.api import api_errors


class SectionsResource:
    def __init__(self, transport):
        self._transport = transport

    def get_section(self, section_id):
        with api_errors(f"Failed to get section {section_id}"):
            return self._transport.get(f"get_section/{section_id}")

    def get_sections(self, project_id, suite_id=None, filters=None):
        params = {"suite_id": suite_id, **to_wire(filters or {})}
        with api_errors(f"Failed to get sections for project {project_id}"):
            return self._transport.get(f"get_sections/{project_id}", params=params)

    def add_section(self, project_id, data):
        with api_errors(f"Failed to add section to project {project_id}"):
            return self._transport.post(f"add_section/{project_id}", to_wire(data))

    def update_section(self, section_id, data):
        with api_errors(f"Failed to update section {section_id}"):
            return self._transport.post(f"update_section/{section_id}", to_wire(data))

    def move_section(self, section_id, data):
        """Re-parent and/or reorder a section (parent_id, after_id).

        A None parent_id moves the section to the root level, so explicit
        nulls are sent as given.
        """
        payload = {camel_to_snake(k): v for k, v in data.items()}
        with api_errors(f"Failed to move section {section_id}"):
            return self._transport.post(f"move_section/{section_id}", payload)

    def delete_section(self, section_id):
        with api_errors(f"Failed to delete section {section_id}"):
            return self._transport.post(f"delete_section/{section_id}")
