"""Persisted schema definitions.

A definition is a JSON object mirroring the node fields:

    {"name": "...", "required": true, "dataType": "Object", "description": "...",
     "children": [...], "min": 0, "max": 10, "exampleValue": "..."}

Loading produces generic `SchemaDefinition` nodes, normalizes them into the
concrete variants and binds parent links, so the result is ready to validate.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from jsonshape.domain.canonical_json import canonical_json_hash
from jsonshape.domain.errors import SchemaConstructionError
from jsonshape.domain.schema_nodes import SchemaDefinition, SchemaNode, normalize_schema
from jsonshape.domain.schema_paths import bind_parents
from jsonshape.domain.values import is_scalar, value_text
from jsonshape.infrastructure.json_codec import parse_json, stringify_json

logger = logging.getLogger(__name__)

_KNOWN_KEYS = frozenset({"name", "required", "dataType", "description", "children", "min", "max", "exampleValue"})


def _optional_text(payload: Mapping[str, Any], key: str) -> str | None:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise SchemaConstructionError(f"schema definition field `{key}` must be a string")
    return value


def definition_from_dict(payload: Mapping[str, Any]) -> SchemaDefinition:
    """Build a generic definition tree from its persisted mapping form."""

    if not isinstance(payload, Mapping):
        raise SchemaConstructionError(f"schema definition must be an object, got {type(payload).__name__}")
    unknown = sorted(set(payload) - _KNOWN_KEYS)
    if unknown:
        logger.debug("ignoring unknown schema definition keys: %s", ", ".join(unknown))
    raw_children = payload.get("children")
    if raw_children is None:
        raw_children = []
    if not isinstance(raw_children, list):
        raise SchemaConstructionError("schema definition field `children` must be an array")
    required = payload.get("required", False)
    if not isinstance(required, bool):
        raise SchemaConstructionError("schema definition field `required` must be a boolean")
    example = payload.get("exampleValue")
    if example is not None and not is_scalar(example):
        raise SchemaConstructionError("schema definition field `exampleValue` must be a scalar")
    return SchemaDefinition(
        name=_optional_text(payload, "name"),
        required=required,
        data_type=payload.get("dataType"),  # type: ignore[arg-type]
        description=_optional_text(payload, "description"),
        children=[definition_from_dict(child) for child in raw_children],
        min_value=payload.get("min"),
        max_value=payload.get("max"),
        example_value=value_text(example),
    )


def schema_from_dict(payload: Mapping[str, Any]) -> SchemaNode:
    node = normalize_schema(definition_from_dict(payload))
    bind_parents(node)
    return node


def dump_schema(node: SchemaNode, *, compact: bool = True) -> str:
    return stringify_json(node.to_dict(), compact=compact)


def load_schema(text: str | bytes) -> SchemaNode:
    """Parse a persisted definition into a concrete, parent-bound schema tree."""

    return schema_from_dict(parse_json(text))


def schema_fingerprint(node: SchemaNode) -> str:
    """sha256 over the canonical definition JSON; rules and parent links are ignored."""

    return canonical_json_hash(node.to_dict())
