"""Schema inference from a sample JSON document."""

from __future__ import annotations

import logging
from typing import Any, Callable, Literal, Union

from jsonshape.domain.data_types import DataType
from jsonshape.domain.errors import SchemaInferenceError
from jsonshape.domain.schema_nodes import (
    AnySchema,
    ArraySchema,
    BooleanSchema,
    NumberSchema,
    ObjectSchema,
    PrimitiveSchema,
    SchemaNode,
    StringSchema,
)
from jsonshape.domain.schema_paths import bind_parents
from jsonshape.infrastructure.json_codec import parse_json

logger = logging.getLogger(__name__)

RequirednessPredicate = Callable[[str, DataType, Union[SchemaNode, tuple[SchemaNode, ...], None]], bool]
RequirednessPolicy = Union[Literal["OPTIONAL", "REQUIRED"], RequirednessPredicate]

_BOOLEAN_TEXT = ("true", "false")


def _predicate(policy: RequirednessPolicy) -> RequirednessPredicate:
    if callable(policy):
        return policy
    if policy == "REQUIRED":
        return lambda name, data_type, partial: True
    if policy == "OPTIONAL":
        return lambda name, data_type, partial: False
    raise SchemaInferenceError(f"unknown requiredness policy: {policy!r}")


class _Inferrer:
    def __init__(self, is_required: RequirednessPredicate):
        self.is_required = is_required

    def infer(self, name: str, value: Any) -> SchemaNode:
        if isinstance(value, dict):
            return self._object(name, value)
        if isinstance(value, list):
            return self._array(name, value)
        if value is None:
            return AnySchema.optional(name)
        return self._primitive(name, value)

    def _object(self, name: str, value: dict[str, Any]) -> ObjectSchema:
        children = tuple(self.infer(key, item) for key, item in value.items())
        return ObjectSchema(name, self.is_required(name, "Object", children), None, children)

    def _array(self, name: str, value: list[Any]) -> ArraySchema:
        if not value:
            return ArraySchema(name, self.is_required(name, "Array", None))
        first = value[0]
        if isinstance(first, dict):
            element: SchemaNode = self._object("", first)
        elif isinstance(first, list):
            raise SchemaInferenceError(f"nested arrays are not supported: `{name}`")
        elif first is None:
            raise SchemaInferenceError(f"cannot infer an element schema from null: `{name}`")
        else:
            element = self._primitive("", first)
        if len(value) > 1:
            logger.debug("array `%s`: element schema inferred from the first of %d elements", name, len(value))
        return ArraySchema(name, self.is_required(name, "Array", element), None, element)

    def _primitive(self, name: str, value: Any) -> PrimitiveSchema:
        kind: type[PrimitiveSchema]
        if isinstance(value, bool) or value in _BOOLEAN_TEXT:
            kind = BooleanSchema
        elif isinstance(value, (int, float)):
            kind = NumberSchema
        elif isinstance(value, str):
            kind = StringSchema
        else:
            raise SchemaInferenceError(f"unsupported value for `{name}`: {value!r}")
        node = kind(name, self.is_required(name, kind.DATA_TYPE, None))  # type: ignore[arg-type]
        return node.set_example_value(value)


def infer_schema(document: Any, policy: RequirednessPolicy = "OPTIONAL") -> SchemaNode:
    """Infer a parent-bound schema tree whose shape mirrors `document`.

    `document` is a parsed JSON value or JSON text. `policy` decides
    requiredness: "OPTIONAL", "REQUIRED", or a predicate
    `(name, data_type, partial_schema) -> bool`, where `partial_schema` is the
    already inferred children of an object, the element schema of an array,
    or None. Null samples always become optional Any fields.
    """

    if isinstance(document, (str, bytes)):
        document = parse_json(document)
    root = _Inferrer(_predicate(policy)).infer("", document)
    bind_parents(root)
    return root
