"""Custom validation rule hooks attached to individual schema nodes.

A rule is any callable `rule(schema, value) -> bool`. It runs after the
built-in checks of its node; returning False rejects the value with a
`CustomRuleViolationError` tagged with the node's path. Rules may also raise a
`ValidationError` themselves to report a more specific message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Protocol

from jsonshape.domain import messages
from jsonshape.domain.errors import CustomRuleViolationError
from jsonshape.domain.values import is_null, is_scalar, value_text

if TYPE_CHECKING:
    from jsonshape.domain.schema_nodes import SchemaNode


class CustomValidationRule(Protocol):
    def __call__(self, schema: "SchemaNode", value: Any) -> bool: ...


def literal_text(value: object) -> str:
    """Text used to compare rule literals against input values."""

    text = value_text(value)
    return "null" if text is None else text


def _input_text(value: Any) -> str | None:
    if is_null(value) or not is_scalar(value):
        return None
    return value_text(value)


class EnumRule:
    """Accept only values whose text equals one of a fixed literal set (case-exact)."""

    def __init__(self, values: Iterable[object]):
        self.values: tuple[str, ...] = tuple(literal_text(value) for value in values)

    def __call__(self, schema: "SchemaNode", value: Any) -> bool:
        text = _input_text(value)
        if text is None:
            return True
        return text in self.values

    def __repr__(self) -> str:
        return f"EnumRule({list(self.values)!r})"


class ValueRangeRule:
    """Inclusion and exclusion value sets; an empty set imposes nothing."""

    def __init__(self, within: Iterable[object] = (), exclude: Iterable[object] = ()):
        self.within_values: set[str] = set()
        self.exclude_values: set[str] = set()
        self.add_within_values(*within)
        self.add_exclude_values(*exclude)

    @classmethod
    def from_within_values(cls, *values: object) -> "ValueRangeRule":
        return cls(within=values)

    @classmethod
    def from_exclude_values(cls, *values: object) -> "ValueRangeRule":
        return cls(exclude=values)

    def add_within_values(self, *values: object) -> "ValueRangeRule":
        self.within_values.update(literal_text(value) for value in values)
        return self

    def add_exclude_values(self, *values: object) -> "ValueRangeRule":
        self.exclude_values.update(literal_text(value) for value in values)
        return self

    def __call__(self, schema: "SchemaNode", value: Any) -> bool:
        text = _input_text(value)
        if text is None:
            return True
        path = schema.path
        if self.within_values and text not in self.within_values:
            raise CustomRuleViolationError(messages.not_in_scope(path), path)
        if self.exclude_values and text in self.exclude_values:
            raise CustomRuleViolationError(messages.out_of_range(path), path)
        return True

    def __repr__(self) -> str:
        return f"ValueRangeRule(within={sorted(self.within_values)!r}, exclude={sorted(self.exclude_values)!r})"


def apply_custom_rule(schema: "SchemaNode", value: Any) -> None:
    """Run the node's rule, if any; a False verdict raises with the node path."""

    rule = schema.rule
    if rule is None:
        return
    if not rule(schema, value):
        path = schema.path
        raise CustomRuleViolationError(messages.custom_rule_failed(path), path)
