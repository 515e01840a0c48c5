"""
Shared pure-utility functions for testrail-mcp.

These helpers have no business logic and no side effects.
They are used by models.py, api.py and the resource clients.
"""

import re

# Tool argument names whose wire name does not follow the mechanical rule.
_WIRE_NAMES = {
    "customPrerequisites": "custom_preconds",
}

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def is_absent(value):
    """None and the empty string both mean 'not supplied'."""
    return value is None or (isinstance(value, str) and value == "")


def camel_to_snake(name):
    """Translate a camelCase argument name to TestRail's snake_case vocabulary."""
    if name in _WIRE_NAMES:
        return _WIRE_NAMES[name]
    return _CAMEL_BOUNDARY.sub(r"_\1", name).lower()


def to_wire(value):
    """Rename dict keys to wire names and drop absent values, recursively.

    List order is preserved. Scalars are returned unchanged.
    """
    if isinstance(value, dict):
        return {camel_to_snake(k): to_wire(v) for k, v in value.items() if not is_absent(v)}
    if isinstance(value, list):
        return [to_wire(v) for v in value]
    return value
