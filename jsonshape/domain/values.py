"""Accessors over parsed JSON values (dict, list, str, int, float, bool, None)."""

from __future__ import annotations

from typing import Any, Final


class _Missing:
    """Marker for a field that is absent from its parent object."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final[Any] = _Missing()


def is_null(value: object) -> bool:
    """True for JSON null and for absent fields."""

    return value is None or value is MISSING


def is_object(value: object) -> bool:
    return isinstance(value, dict)


def is_array(value: object) -> bool:
    return isinstance(value, list)


def is_scalar(value: object) -> bool:
    return isinstance(value, (str, int, float, bool))


def kind_of(value: object) -> str:
    if is_null(value):
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def value_text(value: object) -> str | None:
    """Return the textual form of a scalar value as it appears in JSON.

    Null and absent values have no text; objects and arrays are rejected.
    """

    if is_null(value):
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return repr(value)
    raise TypeError(f"no text form for JSON {kind_of(value)}")


def field_value(parent: dict[str, Any], name: str) -> Any:
    return parent.get(name, MISSING)
