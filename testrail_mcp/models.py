"""
Declarative argument schemas: field definitions, sanitizing, and validation.

A Schema is pure data. ``sanitize`` is the transform applied before anything
is forwarded upstream (absent optional values dropped, defaults filled);
``Schema.validate`` layers type checking on top of it.
"""

from __future__ import annotations

from dataclasses import dataclass

from testrail_mcp._utils import is_absent
from testrail_mcp.exceptions import ValidationError

FIELD_TYPES = frozenset({"string", "integer", "number", "boolean", "array", "object"})


@dataclass(frozen=True)
class Field:
    """One argument or record member."""

    type: str
    description: str = ""
    required: bool = False
    default: object = None
    nullable: bool = False
    items: Field | None = None
    fields: dict[str, Field] | None = None
    minimum: float | None = None
    enum: tuple | None = None

    def __post_init__(self):
        if self.type not in FIELD_TYPES:
            raise ValueError(f"Unsupported field type: {self.type!r}")

    def json_schema(self) -> dict:
        out: dict = {"type": [self.type, "null"] if self.nullable else self.type}
        if self.description:
            out["description"] = self.description
        if self.default is not None:
            out["default"] = self.default
        if self.minimum is not None:
            out["minimum"] = self.minimum
        if self.enum is not None:
            out["enum"] = list(self.enum)
        if self.type == "array" and self.items is not None:
            out["items"] = self.items.json_schema()
        if self.type == "object" and self.fields is not None:
            out.update(_object_schema(self.fields))
        return out


@dataclass(frozen=True)
class Schema:
    """Argument shape of one tool."""

    description: str
    fields: dict[str, Field]

    def validate(self, arguments) -> dict:
        """Return sanitized, type-checked arguments. Raises ValidationError."""
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, dict):
            raise ValidationError(
                f"Arguments must be an object, got {type(arguments).__name__}."
            )
        return _validate_fields(self.fields, arguments)

    def json_schema(self) -> dict:
        return _object_schema(self.fields)


def _object_schema(fields: dict[str, Field]) -> dict:
    out: dict = {
        "type": "object",
        "properties": {name: f.json_schema() for name, f in fields.items()},
    }
    required = [name for name, f in fields.items() if f.required]
    if required:
        out["required"] = required
    return out


def _explicit_null(f: Field, record: dict, name: str) -> bool:
    return f.nullable and name in record and record[name] is None


def sanitize(fields: dict[str, Field], record: dict) -> dict:
    """Drop absent values and undeclared keys, fill declared defaults.

    An explicit None on a nullable field is kept. No type checking and no
    renaming: keys and value order are preserved.
    """
    out = {}
    for name, f in fields.items():
        value = record.get(name)
        if _explicit_null(f, record, name):
            out[name] = None
            continue
        if is_absent(value):
            if f.default is not None:
                out[name] = f.default
            continue
        out[name] = value
    return out


def _validate_fields(fields: dict[str, Field], record: dict, prefix: str = "") -> dict:
    for name, f in fields.items():
        absent = is_absent(record.get(name)) and not _explicit_null(f, record, name)
        if f.required and f.default is None and absent:
            raise ValidationError(f"{prefix}{name} is required.", field=prefix + name)
    clean = sanitize(fields, record)
    return {name: _check_value(prefix + name, fields[name], value) for name, value in clean.items()}


def _mismatch(path, f, value):
    return ValidationError(
        f"{path} must be {f.type}, got {type(value).__name__}.",
        field=path,
    )


def _check_value(path: str, f: Field, value):
    if value is None and f.nullable:
        return None
    if f.type == "string":
        if not isinstance(value, str):
            raise _mismatch(path, f, value)
    elif f.type == "boolean":
        if not isinstance(value, bool):
            raise _mismatch(path, f, value)
    elif f.type in ("integer", "number"):
        # bool is an int subclass; never accept it as a number
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise _mismatch(path, f, value)
        if f.type == "integer" and isinstance(value, float):
            if not value.is_integer():
                raise _mismatch(path, f, value)
            value = int(value)
    elif f.type == "array":
        if not isinstance(value, list):
            raise _mismatch(path, f, value)
        if f.items is not None:
            value = [_check_value(f"{path}[{i}]", f.items, item) for i, item in enumerate(value)]
        else:
            value = list(value)
    elif f.type == "object":
        if not isinstance(value, dict):
            raise _mismatch(path, f, value)
        if f.fields is not None:
            value = _validate_fields(f.fields, value, prefix=f"{path}.")
        else:
            value = dict(value)

    if f.enum is not None and value not in f.enum:
        allowed = ", ".join(str(v) for v in f.enum)
        raise ValidationError(f"{path} must be one of: {allowed}.", field=path)
    if f.minimum is not None and value < f.minimum:
        raise ValidationError(f"{path} must be >= {f.minimum:g}.", field=path)
    return value
