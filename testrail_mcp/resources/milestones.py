"""Milestones, optionally nested under a parent milestone."""

from testrail_mcp._utils import to_wire
from testrail_mcp.api import api_errors


class MilestonesResource:
    def __init__(self, transport):
        self._transport = transport

    def get_milestone(self, milestone_id):
        with api_errors(f"Failed to get milestone {milestone_id}"):
            return self._transport.get(f"get_milestone/{milestone_id}")

    def get_milestones(self, project_id, filters=None):
        with api_errors(f"Failed to get milestones for project {project_id}"):
            return self._transport.get(
                f"get_milestones/{project_id}", params=to_wire(filters or {})
            )

    def add_milestone(self, project_id, data):
        with api_errors(f"Failed to add milestone to project {project_id}"):
            return self._transport.post(f"add_milestone/{project_id}", to_wire(data))

    def update_milestone(self, milestone_id, data):
        with api_errors(f"Failed to update milestone {milestone_id}"):
            return self._transport.post(f"update_milestone/{milestone_id}", to_wire(data))

    def delete_milestone(self, milestone_id):
        with api_errors(f"Failed to delete milestone {milestone_id}"):
            return self._transport.post(f"delete_milestone/{milestone_id}")
