"""Example JSON documents built from the example values of a schema tree."""

from __future__ import annotations

from typing import Any

from jsonshape.domain.errors import UnsupportedSchemaError
from jsonshape.domain.schema_nodes import SchemaNode
from jsonshape.engine.primitive_rules import parse_number_literal
from jsonshape.infrastructure.json_codec import stringify_json


def _primitive_example(node: SchemaNode) -> Any:
    example = node.example_value
    if example is None:
        return None
    if node.data_type == "Number":
        try:
            return parse_number_literal(example)
        except ValueError:
            return example
    if node.data_type == "Boolean":
        if example in ("true", "1"):
            return True
        if example in ("false", "0"):
            return False
    return example


def example_value(node: SchemaNode) -> Any:
    """Return the example as a JSON value: one element per array, null where no example is set."""

    if node.is_object():
        return {child.name: example_value(child) for child in node.children}
    if node.is_array():
        return [example_value(child) for child in node.children[:1]]
    if node.is_primitive():
        return _primitive_example(node)
    if node.is_any():
        return None
    raise UnsupportedSchemaError(f"Unsupported type: {node!r}", node.path)


def to_json_example(node: SchemaNode) -> str:
    return stringify_json(example_value(node))
