"""Resource clients — one class per TestRail entity family, each wrapping a shared Transport."""

from testrail_mcp.resources.cases import CasesResource
from testrail_mcp.resources.milestones import MilestonesResource
from testrail_mcp.resources.plans import PlansResource
from testrail_mcp.resources.projects import ProjectsResource
from testrail_mcp.resources.results import ResultsResource
from testrail_mcp.resources.runs import RunsResource
from testrail_mcp.resources.sections import SectionsResource
from testrail_mcp.resources.shared_steps import SharedStepsResource
from testrail_mcp.resources.suites import SuitesResource
from testrail_mcp.resources.tests import TestsResource

__all__ = [
    "CasesResource",
    "MilestonesResource",
    "PlansResource",
    "ProjectsResource",
    "ResultsResource",
    "RunsResource",
    "SectionsResource",
    "SharedStepsResource",
    "SuitesResource",
    "TestsResource",
]
