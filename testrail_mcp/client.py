"""
TestRailClient: the single entry point composing every resource client.

All resource clients share one Transport, so configuration (base URL,
credentials, headers, timeout) is defined exactly once.
"""

from __future__ import annotations

from testrail_mcp import config
from testrail_mcp.api import Transport
from testrail_mcp.exceptions import SetupError
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

_SETUP_KEYS = (
    ("base_url", "TESTRAIL_URL"),
    ("username", "TESTRAIL_USERNAME"),
    ("api_key", "TESTRAIL_API_KEY"),
)


class TestRailClient:
    """Aggregate client for the TestRail API v2.

    Arguments left as None fall back to the values loaded by ``config``.
    Raises SetupError when the URL, username or API key is missing.
    """

    __test__ = False  # not a pytest test class

    def __init__(self, base_url=None, username=None, api_key=None, timeout=None):
        settings = {
            "base_url": base_url or config.BASE_URL,
            "username": username or config.USERNAME,
            "api_key": api_key or config.API_KEY,
        }
        missing = [env_key for name, env_key in _SETUP_KEYS if not settings[name]]
        if missing:
            raise SetupError(
                "[SETUP_NEEDED] TestRail connection is not configured. "
                f"Set {', '.join(missing)} in the environment or in .env."
            )
        self.transport = Transport(
            settings["base_url"],
            settings["username"],
            settings["api_key"],
            timeout=timeout or config.HTTP_TIMEOUT_SECONDS,
        )
        self.projects = ProjectsResource(self.transport)
        self.suites = SuitesResource(self.transport)
        self.sections = SectionsResource(self.transport)
        self.cases = CasesResource(self.transport)
        self.runs = RunsResource(self.transport)
        self.tests = TestsResource(self.transport)
        self.results = ResultsResource(self.transport)
        self.plans = PlansResource(self.transport)
        self.milestones = MilestonesResource(self.transport)
        self.shared_steps = SharedStepsResource(self.transport)

    @property
    def base_url(self) -> str:
        return self.transport.base_url

    def set_header(self, name: str, value: str) -> None:
        """Override a default header for every subsequent request."""
        self.transport.set_header(name, value)
