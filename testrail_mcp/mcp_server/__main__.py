"""Allow ``python -m testrail_mcp.mcp_server``."""

from testrail_mcp.mcp_server import main

main()
