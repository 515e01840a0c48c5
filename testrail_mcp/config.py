"""
testrail-mcp shared configuration, constants, and module-level state.
Standalone module — no imports from other project files.
"""

import os

# ---------------------------------------------------------------------------
# .env path and helpers
# ---------------------------------------------------------------------------

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_PROJECT_ROOT = os.path.dirname(_PACKAGE_DIR)

ENV_PATH = os.path.join(_PROJECT_ROOT, ".env")

_ENV_PREFIX = "TESTRAIL_"


def load_env(path=None):
    """Read KEY=VALUE pairs from the .env file, then overlay TESTRAIL_* process env."""
    path = path or ENV_PATH
    env = {}
    if os.path.exists(path):
        with open(path) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, val = line.split("=", 1)
                    env[key.strip()] = val.strip().strip('"').strip("'")
    for key, val in os.environ.items():
        if key.startswith(_ENV_PREFIX):
            env[key] = val
    return env


def _env_bool(key, default=False):
    """Parse common boolean env formats."""
    raw = env.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(key, default):
    """Parse integer env values with fallback."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(key, default):
    """Parse float env values with fallback."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "0.1.0"

API_PREFIX = "/api/v2/"
DEFAULT_PAGE_LIMIT = 50

# ---------------------------------------------------------------------------
# Module-level state (loaded from .env and the process environment)
# ---------------------------------------------------------------------------

env = load_env()

BASE_URL = env.get("TESTRAIL_URL", "")
USERNAME = env.get("TESTRAIL_USERNAME", "")
API_KEY = env.get("TESTRAIL_API_KEY", "")
HTTP_TIMEOUT_SECONDS = _env_int("TESTRAIL_HTTP_TIMEOUT_SECONDS", 30)
HTTP_MAX_RESPONSE_BYTES = _env_int("TESTRAIL_HTTP_MAX_RESPONSE_BYTES", 10_000_000)
HTTP_LOG_ENABLED = _env_bool("TESTRAIL_HTTP_LOG", False)
HTTP_LOG_SAMPLE_RATE = min(1.0, max(0.0, _env_float("TESTRAIL_HTTP_LOG_SAMPLE_RATE", 1.0)))
