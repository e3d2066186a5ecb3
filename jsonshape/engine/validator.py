"""Validation and extraction engine.

`Validator` walks a value against a schema tree, fail-fast: the first
violation raises a `ValidationError` carrying the dotted path of the
offending node, and nothing else is reported.

Two input modes are supported:

- tree mode (`validate` / `extract`): one JSON value checked against the
  first root schema;
- flat-key mode (`validate_params` / `extract_params`): every root schema is a
  top-level parameter fetched by name from a supplier (a callable or a
  mapping). Object and array parameters arrive as embedded JSON text.

`extract` returns a deep copy pruned to the declared structure; undeclared
object fields are handed to the unknown-node policy. The caller's value is
never mutated.
"""

from __future__ import annotations

import contextlib
import copy
import logging
from typing import Any, Callable, Iterator, Mapping, Union

from jsonshape.domain import messages
from jsonshape.domain.errors import (
    FormatViolationError,
    JsonCodecError,
    MissingRequiredFieldError,
    RangeViolationError,
    SchemaConstructionError,
    TypeMismatchError,
    UnsupportedSchemaError,
    ValidationError,
)
from jsonshape.domain.rules import apply_custom_rule
from jsonshape.domain.schema_nodes import SchemaNode, normalize_schema
from jsonshape.domain.schema_paths import bind_parents
from jsonshape.domain.values import field_value, is_array, is_null, is_object
from jsonshape.engine.primitive_rules import check_any, check_primitive
from jsonshape.engine.unknown_nodes import UnknownNodePolicy, drop_unknown_field
from jsonshape.infrastructure.json_codec import parse_json

logger = logging.getLogger(__name__)

ParamSupplier = Union[Callable[[str], Union[str, None]], Mapping[str, Any]]


@contextlib.contextmanager
def _rejections_logged(mode: str) -> Iterator[None]:
    try:
        yield
    except ValidationError as exc:
        logger.debug("%s rejected input at %r (%s): %s", mode, exc.path, exc.reason_code, exc.message)
        raise


def _fetch(supplier: ParamSupplier, name: str) -> str | None:
    if isinstance(supplier, Mapping):
        return supplier.get(name)
    return supplier(name)


class Validator:
    def __init__(self, *schemas: SchemaNode, unknown_node_filter: UnknownNodePolicy | None = None):
        if not schemas:
            raise SchemaConstructionError("a validator needs at least one root schema")
        self.schemas: tuple[SchemaNode, ...] = tuple(normalize_schema(schema) for schema in schemas)
        bind_parents(*self.schemas)
        self.unknown_node_filter: UnknownNodePolicy = unknown_node_filter or drop_unknown_field

    @classmethod
    def from_schema(cls, *schemas: SchemaNode) -> Validator:
        return cls(*schemas)

    @property
    def root(self) -> SchemaNode:
        return self.schemas[0]

    def set_unknown_node_filter(self, policy: UnknownNodePolicy | None) -> Validator:
        self.unknown_node_filter = policy or drop_unknown_field
        return self

    # -- tree mode -------------------------------------------------------

    def _document(self, value: Any) -> Any:
        if isinstance(value, (str, bytes)) and (self.root.is_object() or self.root.is_array()):
            return parse_json(value)
        return value

    def validate(self, value: Any) -> Validator:
        """Check `value` (or JSON text) against the first root schema."""

        document = self._document(value)
        with _rejections_logged("validate"):
            self._check_node(self.root, document, prune=False)
        return self

    def extract(self, value: Any) -> Any:
        """Validate, then return a copy holding only the declared structure."""

        document = copy.deepcopy(self._document(value))
        with _rejections_logged("extract"):
            self._check_node(self.root, document, prune=True)
        return document

    # -- flat-key mode ---------------------------------------------------

    def validate_params(self, supplier: ParamSupplier) -> Validator:
        with _rejections_logged("validate_params"):
            self._walk_params(supplier)
        return self

    def extract_params(self, supplier: ParamSupplier) -> dict[str, Any]:
        with _rejections_logged("extract_params"):
            return self._walk_params(supplier)

    def _walk_params(self, supplier: ParamSupplier) -> dict[str, Any]:
        if supplier is None:
            raise TypeError("a parameter supplier is required")
        extracted: dict[str, Any] = {}
        for schema in self.schemas:
            raw = _fetch(supplier, schema.name)
            if raw is None:
                if schema.is_required:
                    raise MissingRequiredFieldError(messages.param_missing(schema.path), schema.path)
                continue
            if schema.is_primitive() or schema.is_any():
                self._check_node(schema, raw, prune=True)
                extracted[schema.name] = raw
                continue
            if not (schema.is_object() or schema.is_array()):
                raise UnsupportedSchemaError(f"Unsupported type: {schema!r}", schema.path)
            try:
                document = parse_json(raw)
            except JsonCodecError as exc:
                raise FormatViolationError(messages.param_error(schema.path), schema.path) from exc
            self._check_node(schema, document, prune=True)
            extracted[schema.name] = document
        return extracted

    # -- walk ------------------------------------------------------------

    def _check_node(self, schema: SchemaNode, value: Any, *, prune: bool) -> None:
        if is_null(value):
            if schema.is_required:
                raise MissingRequiredFieldError(messages.param_missing(schema.path), schema.path)
            apply_custom_rule(schema, None)
            return
        self._dispatch(schema, value, prune=prune)

    def _dispatch(self, schema: SchemaNode, value: Any, *, prune: bool) -> None:
        if schema.is_object():
            self._check_object(schema, value, prune=prune)
        elif schema.is_array():
            self._check_array(schema, value, prune=prune)
        elif schema.is_primitive():
            check_primitive(schema, value)
            apply_custom_rule(schema, value)
        elif schema.is_any():
            check_any(schema, value)
            apply_custom_rule(schema, value)
        else:
            raise UnsupportedSchemaError(f"Unsupported type: {schema!r}", schema.path)

    def _prune_unknown(self, schema: SchemaNode, value: dict[str, Any]) -> None:
        declared = {child.name for child in schema.children}
        for name in [name for name in value if name not in declared]:
            self.unknown_node_filter(name, value)

    def _check_object(self, schema: SchemaNode, value: Any, *, prune: bool) -> None:
        path = schema.path
        if not schema.is_object() or not is_object(value):
            raise TypeMismatchError(messages.param_error(path), path)
        apply_custom_rule(schema, value)
        if not schema.children:
            return
        if prune:
            self._prune_unknown(schema, value)
        for child in schema.children:
            field = field_value(value, child.name)
            if is_null(field):
                if child.is_required:
                    raise MissingRequiredFieldError(messages.param_missing(child.path), child.path)
                apply_custom_rule(child, None)
                continue
            self._dispatch(child, field, prune=prune)

    def _check_array(self, schema: SchemaNode, value: Any, *, prune: bool) -> None:
        path = schema.path
        if not schema.is_array() or not is_array(value):
            raise TypeMismatchError(messages.param_error(path), path)
        if not schema.children:
            apply_custom_rule(schema, value)
            return
        element = schema.children[0]
        if schema.is_required and not value:
            raise RangeViolationError(messages.param_error(path), path)
        apply_custom_rule(schema, value)
        for item in value:
            if element.is_object_value():
                self._check_object(element, item, prune=prune)
            elif element.is_primitive():
                check_primitive(element, item)
                apply_custom_rule(element, item)
            else:
                raise UnsupportedSchemaError(f"Unsupported type: {element!r}", element.path)
