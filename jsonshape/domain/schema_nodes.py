"""Schema node model.

A schema tree is made of four node variants:

- `ObjectSchema`: named fields, kept in declaration order.
- `ArraySchema`: at most one child, the element schema shared by every element.
- `PrimitiveSchema`: a String, Number or Boolean leaf (`StringSchema`,
  `NumberSchema` and `BooleanSchema` fix the tag and provide the factories).
- `AnySchema`: a leaf that accepts any JSON value.

`SchemaDefinition` is the generic node produced when a persisted definition is
loaded; `normalize_schema` converts it back into the concrete variants.

Nodes validate their arguments when constructed. Shape (children, name,
requiredness, kind) must not change once `bind_parents` has run; bounds,
descriptions, examples and rules may still be tuned between validation runs.
"""

from __future__ import annotations

import weakref
from typing import Any, ClassVar, Iterable, TypeVar

from jsonshape.domain import messages
from jsonshape.domain.canonical_json import canonical_json_text
from jsonshape.domain.data_types import DataType, is_primitive_type, parse_data_type
from jsonshape.domain.errors import SchemaConstructionError, SchemaTypeMismatchError
from jsonshape.domain.rules import CustomValidationRule, EnumRule, ValueRangeRule
from jsonshape.domain.schema_paths import is_root_node, resolve_path
from jsonshape.domain.values import value_text

_N = TypeVar("_N", bound="SchemaNode")


def _is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


def _coerce_bound(value: object, *, label: str) -> int | float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SchemaConstructionError(f"{label} bound must be a number, got {value!r}")
    return value


class SchemaNode:
    """One declarative unit of a schema tree."""

    def __init__(
        self,
        name: str | None,
        required: bool,
        data_type: DataType,
        description: str | None = None,
    ):
        self.name = name or ""
        self.is_required = bool(required)
        self.data_type: DataType = data_type
        self.description = description
        self.children: list[SchemaNode] = []
        self.min: int | float | None = None
        self.max: int | float | None = None
        self.example_value: str | None = None
        self.rule: CustomValidationRule | None = None
        self._parent_ref: weakref.ref[SchemaNode] | None = None

    @property
    def parent(self) -> SchemaNode | None:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def path(self) -> str:
        return resolve_path(self)

    def is_root_node(self) -> bool:
        return is_root_node(self)

    def is_primitive(self) -> bool:
        return is_primitive_type(self.data_type)

    def is_array(self) -> bool:
        return self.data_type == "Array"

    def is_object(self) -> bool:
        return self.data_type == "Object"

    def is_any(self) -> bool:
        return self.data_type == "Any"

    def is_object_value(self) -> bool:
        """True for an unnamed object, e.g. the element schema of an array of objects."""

        return self.is_object() and _is_blank(self.name)

    def _mismatch(self, target: str) -> SchemaTypeMismatchError:
        return SchemaTypeMismatchError(
            f"{type(self).__name__}({self.data_type}) cannot be converted to {target}", self.path
        )

    def as_object(self) -> ObjectSchema:
        raise self._mismatch("ObjectSchema")

    def as_array(self) -> ArraySchema:
        raise self._mismatch("ArraySchema")

    def as_primitive(self) -> PrimitiveSchema:
        raise self._mismatch("PrimitiveSchema")

    def as_any(self) -> AnySchema:
        raise self._mismatch("AnySchema")

    def set_description(self: _N, description: str | None) -> _N:
        self.description = description
        return self

    def set_example_value(self: _N, example: object) -> _N:
        self.example_value = value_text(example)
        return self

    def with_validator(self: _N, rule: CustomValidationRule | None) -> _N:
        self.rule = rule
        return self

    def in_enum(self: _N, *values: object) -> _N:
        self.rule = EnumRule(values)
        return self

    def within_values(self: _N, *values: object) -> _N:
        rule = self.rule if isinstance(self.rule, ValueRangeRule) else ValueRangeRule()
        self.rule = rule.add_within_values(*values)
        return self

    def exclude_values(self: _N, *values: object) -> _N:
        rule = self.rule if isinstance(self.rule, ValueRangeRule) else ValueRangeRule()
        self.rule = rule.add_exclude_values(*values)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Return the persisted definition; rules and parent links are not part of it."""

        payload: dict[str, Any] = {
            "name": self.name,
            "required": self.is_required,
            "dataType": self.data_type,
        }
        if self.description is not None:
            payload["description"] = self.description
        payload["children"] = [child.to_dict() for child in self.children]
        if self.min is not None:
            payload["min"] = self.min
        if self.max is not None:
            payload["max"] = self.max
        if self.example_value is not None:
            payload["exampleValue"] = self.example_value
        return payload

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SchemaNode):
            return NotImplemented
        return canonical_json_text(self.to_dict()) == canonical_json_text(other.to_dict())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, required={self.is_required}, "
            f"data_type={self.data_type!r}, children={len(self.children)})"
        )


class ObjectSchema(SchemaNode):
    def __init__(
        self,
        name: str | None,
        required: bool,
        description: str | None = None,
        children: Iterable[SchemaNode] = (),
    ):
        super().__init__(name, required, "Object", description)
        for child in children:
            if not isinstance(child, SchemaNode):
                raise SchemaTypeMismatchError(f"field of `{self.name}` is not a schema node: {child!r}")
            if child.is_object_value():
                raise SchemaConstructionError(f"anonymous object cannot be a field of `{self.name}`")
            self.children.append(child)

    @classmethod
    def required(cls, name: str, *children: SchemaNode, description: str | None = None) -> ObjectSchema:
        return cls(name, True, description, children)

    @classmethod
    def optional(cls, name: str, *children: SchemaNode, description: str | None = None) -> ObjectSchema:
        return cls(name, False, description, children)

    @classmethod
    def anonymous(
        cls, *children: SchemaNode, required: bool = True, description: str | None = None
    ) -> ObjectSchema:
        """Unnamed object: a root schema or the element schema of an array."""

        return cls("", required, description, children)

    def as_object(self) -> ObjectSchema:
        return self

    def has_children(self) -> bool:
        return len(self.children) > 0

    def field_names(self) -> tuple[str, ...]:
        return tuple(child.name for child in self.children)

    def child(self, name: str) -> SchemaNode | None:
        for candidate in self.children:
            if candidate.name == name:
                return candidate
        return None


class ArraySchema(SchemaNode):
    def __init__(
        self,
        name: str | None,
        required: bool,
        description: str | None = None,
        element: SchemaNode | None = None,
    ):
        super().__init__(name, required, "Array", description)
        if element is not None:
            if not isinstance(element, SchemaNode):
                raise SchemaTypeMismatchError(f"element of `{self.name}` is not a schema node: {element!r}")
            if element.is_array():
                raise SchemaConstructionError(f"`{self.name}` illegal parameter: nested array element", element.path)
            if not _is_blank(element.name) and not element.is_object():
                raise SchemaConstructionError(
                    f"`{self.name}` parameter error: array element `{element.name}` must be unnamed", element.path
                )
            self.children.append(element)

    @classmethod
    def required(
        cls, name: str, element: SchemaNode | None = None, *, description: str | None = None
    ) -> ArraySchema:
        return cls(name, True, description, element)

    @classmethod
    def optional(
        cls, name: str, element: SchemaNode | None = None, *, description: str | None = None
    ) -> ArraySchema:
        return cls(name, False, description, element)

    def as_array(self) -> ArraySchema:
        return self

    def has_children(self) -> bool:
        return len(self.children) > 0

    @property
    def element(self) -> SchemaNode | None:
        return self.children[0] if self.children else None


class _BoundedNode(SchemaNode):
    """Leaf node with optional min/max bounds (value bounds or length bounds)."""

    def _check_bounds(self) -> None:
        if self.min is not None and self.max is not None and self.min > self.max:
            raise SchemaConstructionError(messages.inverted_bounds(self.min, self.max), self.path)

    def set_min(self: _N, min_value: int | float | None) -> _N:
        self.min = _coerce_bound(min_value, label="min")
        self._check_bounds()  # type: ignore[attr-defined]
        return self

    def set_max(self: _N, max_value: int | float | None) -> _N:
        self.max = _coerce_bound(max_value, label="max")
        self._check_bounds()  # type: ignore[attr-defined]
        return self

    def between(self: _N, min_value: int | float | None, max_value: int | float | None) -> _N:
        self.min = _coerce_bound(min_value, label="min")
        self.max = _coerce_bound(max_value, label="max")
        self._check_bounds()  # type: ignore[attr-defined]
        return self

    def has_bounds(self) -> bool:
        return self.min is not None or self.max is not None

    def tip_message(self, path: str | None = None) -> str:
        """Message describing the rule this node enforces, for the given path."""

        target = self.path if path is None else path
        if self.data_type == "Number":
            if self.min is not None and self.max is not None:
                return messages.between(target, self.min, self.max)
            if self.min is not None:
                return messages.greater_or_equal(target, self.min)
            if self.max is not None:
                return messages.less_or_equal(target, self.max)
            return messages.must_be_number(target)
        if self.data_type in ("String", "Any"):
            if self.min is not None and self.max is not None:
                return messages.between_length(target, self.min, self.max)
            if self.min is not None:
                return messages.greater_or_equal_length(target, self.min)
            if self.max is not None:
                return messages.less_or_equal_length(target, self.max)
        return messages.param_error(target)


class PrimitiveSchema(_BoundedNode):
    DATA_TYPE: ClassVar[str | None] = None

    def __init__(
        self,
        name: str | None,
        required: bool,
        description: str | None = None,
        *,
        data_type: str | None = None,
        min_value: int | float | None = None,
        max_value: int | float | None = None,
    ):
        resolved = data_type or self.DATA_TYPE
        if not is_primitive_type(resolved):
            raise SchemaConstructionError(f"Unsupported dataType: {resolved}")
        if self.DATA_TYPE is not None and resolved != self.DATA_TYPE:
            raise SchemaConstructionError(f"{type(self).__name__} cannot hold dataType {resolved}")
        super().__init__(name, required, parse_data_type(resolved), description)
        self.min = _coerce_bound(min_value, label="min")
        self.max = _coerce_bound(max_value, label="max")
        self._check_bounds()

    @classmethod
    def required(cls, name: str, description: str | None = None) -> PrimitiveSchema:
        return cls(name, True, description)

    @classmethod
    def optional(cls, name: str, description: str | None = None) -> PrimitiveSchema:
        return cls(name, False, description)

    @classmethod
    def element(cls, *, required: bool = True) -> PrimitiveSchema:
        """Unnamed primitive, used as the element schema of an array."""

        return cls("", required)

    def as_primitive(self) -> PrimitiveSchema:
        return self


class StringSchema(PrimitiveSchema):
    DATA_TYPE = "String"


class NumberSchema(PrimitiveSchema):
    DATA_TYPE = "Number"


class BooleanSchema(PrimitiveSchema):
    DATA_TYPE = "Boolean"


PRIMITIVE_CLASSES: dict[str, type[PrimitiveSchema]] = {
    "String": StringSchema,
    "Number": NumberSchema,
    "Boolean": BooleanSchema,
}


class AnySchema(_BoundedNode):
    """Leaf accepting any JSON value; bounds apply to string length."""

    def __init__(self, name: str | None, required: bool, description: str | None = None):
        super().__init__(name, required, "Any", description)

    @classmethod
    def required(cls, name: str, description: str | None = None) -> AnySchema:
        return cls(name, True, description)

    @classmethod
    def optional(cls, name: str, description: str | None = None) -> AnySchema:
        return cls(name, False, description)

    def as_any(self) -> AnySchema:
        return self


class SchemaDefinition(SchemaNode):
    """Generic node loaded from a persisted definition, before normalization."""

    def __init__(
        self,
        name: str | None,
        required: bool,
        data_type: DataType,
        description: str | None = None,
        children: Iterable[SchemaNode] = (),
        min_value: int | float | None = None,
        max_value: int | float | None = None,
        example_value: str | None = None,
    ):
        super().__init__(name, required, parse_data_type(data_type), description)
        self.children = list(children)
        self.min = _coerce_bound(min_value, label="min")
        self.max = _coerce_bound(max_value, label="max")
        self.example_value = example_value

    def as_object(self) -> ObjectSchema:
        if not self.is_object():
            raise self._mismatch("ObjectSchema")
        node = ObjectSchema(
            self.name, self.is_required, self.description, [normalize_schema(child) for child in self.children]
        )
        return node.with_validator(self.rule)

    def as_array(self) -> ArraySchema:
        if not self.is_array():
            raise self._mismatch("ArraySchema")
        if len(self.children) > 1:
            raise SchemaConstructionError(f"array `{self.name}` declares more than one element schema")
        element = normalize_schema(self.children[0]) if self.children else None
        node = ArraySchema(self.name, self.is_required, self.description, element)
        return node.with_validator(self.rule)

    def as_primitive(self) -> PrimitiveSchema:
        if not self.is_primitive():
            raise self._mismatch("PrimitiveSchema")
        node = PRIMITIVE_CLASSES[self.data_type](
            self.name, self.is_required, self.description, min_value=self.min, max_value=self.max
        )
        node.example_value = self.example_value
        return node.with_validator(self.rule)

    def as_any(self) -> AnySchema:
        if not self.is_any():
            raise self._mismatch("AnySchema")
        node = AnySchema(self.name, self.is_required, self.description)
        node.between(self.min, self.max)
        node.example_value = self.example_value
        return node.with_validator(self.rule)

    def concrete(self) -> SchemaNode:
        if self.is_object():
            return self.as_object()
        if self.is_array():
            return self.as_array()
        if self.is_primitive():
            return self.as_primitive()
        return self.as_any()


def normalize_schema(node: SchemaNode) -> SchemaNode:
    """Replace generic definitions in a tree with their concrete variants."""

    if isinstance(node, SchemaDefinition):
        return node.concrete()
    if isinstance(node, (ObjectSchema, ArraySchema)):
        node.children = [normalize_schema(child) for child in node.children]
    return node
