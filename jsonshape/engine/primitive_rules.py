"""Built-in checks for primitive schema nodes (String, Number, Boolean, Any).

Every check works on the textual form of the value (`value_text`), so a
Number field accepts both `12` and `"12"`. Null and absent values are only
an error when the node is required.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Callable, Final

from jsonshape.domain import messages
from jsonshape.domain.errors import (
    FormatViolationError,
    MissingRequiredFieldError,
    RangeViolationError,
    TypeMismatchError,
    UnsupportedSchemaError,
)
from jsonshape.domain.values import is_array, is_object, value_text

if TYPE_CHECKING:
    from jsonshape.domain.schema_nodes import SchemaNode

BOOLEAN_LITERALS: Final[frozenset[str]] = frozenset({"true", "false", "1", "0"})

_INTEGER_LITERAL = re.compile(r"^[+-]?[0-9]+$")
_FLOAT_LITERAL = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")


def is_float_literal(text: str) -> bool:
    """Float mode is selected by the literal's shape: a decimal point or an exponent."""

    return "." in text or "e" in text or "E" in text


def parse_number_literal(text: str) -> int | float:
    """Parse a JSON-ish numeric literal, raising ValueError when it is malformed."""

    if is_float_literal(text):
        if not _FLOAT_LITERAL.match(text):
            raise ValueError(f"not a decimal literal: {text!r}")
        return float(text)
    if not _INTEGER_LITERAL.match(text):
        raise ValueError(f"not an integer literal: {text!r}")
    return int(text)


def _present(schema: "SchemaNode", text: str | None) -> bool:
    if text is not None:
        return True
    if schema.is_required:
        raise MissingRequiredFieldError(messages.param_missing(schema.path), schema.path)
    return False


def _check_length(schema: "SchemaNode", text: str) -> None:
    size = len(text)
    if (schema.min is not None and schema.min > size) or (schema.max is not None and schema.max < size):
        raise RangeViolationError(schema.tip_message(), schema.path)  # type: ignore[attr-defined]


def check_string(schema: "SchemaNode", text: str | None) -> None:
    if not _present(schema, text):
        return
    _check_length(schema, text)  # type: ignore[arg-type]


def check_number(schema: "SchemaNode", text: str | None) -> None:
    if not _present(schema, text):
        return
    path = schema.path
    try:
        number = parse_number_literal(text)  # type: ignore[arg-type]
    except ValueError as exc:
        if not schema.has_bounds():  # type: ignore[attr-defined]
            raise FormatViolationError(messages.param_error(path), path) from exc
        parent = schema.parent
        shown = path + "[]" if parent is not None and parent.is_array() else path
        raise FormatViolationError(schema.tip_message(shown), path) from exc  # type: ignore[attr-defined]
    if (schema.min is not None and schema.min > number) or (schema.max is not None and schema.max < number):
        raise RangeViolationError(schema.tip_message(), path)  # type: ignore[attr-defined]


def check_boolean(schema: "SchemaNode", text: str | None) -> None:
    if not _present(schema, text):
        return
    if text not in BOOLEAN_LITERALS:
        raise FormatViolationError(messages.param_error(schema.path), schema.path)


def check_any(schema: "SchemaNode", value: Any) -> None:
    """Any accepts every JSON kind; length bounds, when set, apply to strings only."""

    if isinstance(value, str):
        _check_length(schema, value)


_PRIMITIVE_CHECKS: Final[dict[str, Callable[["SchemaNode", str | None], None]]] = {
    "String": check_string,
    "Number": check_number,
    "Boolean": check_boolean,
}


def check_primitive(schema: "SchemaNode", value: Any) -> None:
    """Run the built-in checks of a primitive node against a scalar value."""

    if is_object(value) or is_array(value):
        raise TypeMismatchError(messages.param_error(schema.path), schema.path)
    check = _PRIMITIVE_CHECKS.get(schema.data_type)
    if check is None:
        raise UnsupportedSchemaError(f"Unsupported type: {schema.data_type}", schema.path)
    check(schema, value_text(value))
