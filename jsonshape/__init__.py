"""Declarative JSON schemas with fail-fast validation and field extraction."""

from jsonshape.application.code_generation import GenerateOptions, generate_schema_code
from jsonshape.application.example_data import to_json_example
from jsonshape.application.inference import infer_schema
from jsonshape.application.schema_walker import iter_schema_nodes, schema_paths
from jsonshape.config import Settings, load_settings
from jsonshape.domain.errors import (
    CustomRuleViolationError,
    FormatViolationError,
    JsonCodecError,
    JsonShapeError,
    MissingRequiredFieldError,
    RangeViolationError,
    SchemaConstructionError,
    SchemaInferenceError,
    SchemaTypeMismatchError,
    SettingsError,
    TypeMismatchError,
    UnsupportedSchemaError,
    ValidationError,
)
from jsonshape.domain.rules import EnumRule, ValueRangeRule
from jsonshape.domain.schema_nodes import (
    AnySchema,
    ArraySchema,
    BooleanSchema,
    NumberSchema,
    ObjectSchema,
    PrimitiveSchema,
    SchemaDefinition,
    SchemaNode,
    StringSchema,
)
from jsonshape.domain.schema_paths import bind_parents
from jsonshape.domain.values import MISSING
from jsonshape.engine.unknown_nodes import ExtensionEnvelope, ExtensionEnvelopePolicy, drop_unknown_field
from jsonshape.engine.validator import Validator
from jsonshape.infrastructure.json_codec import parse_json, stringify_json
from jsonshape.infrastructure.schema_codec import dump_schema, load_schema, schema_fingerprint

__all__ = [
    "AnySchema",
    "ArraySchema",
    "BooleanSchema",
    "CustomRuleViolationError",
    "EnumRule",
    "ExtensionEnvelope",
    "ExtensionEnvelopePolicy",
    "FormatViolationError",
    "GenerateOptions",
    "JsonCodecError",
    "JsonShapeError",
    "MISSING",
    "MissingRequiredFieldError",
    "NumberSchema",
    "ObjectSchema",
    "PrimitiveSchema",
    "RangeViolationError",
    "SchemaConstructionError",
    "SchemaDefinition",
    "SchemaInferenceError",
    "SchemaNode",
    "SchemaTypeMismatchError",
    "Settings",
    "SettingsError",
    "StringSchema",
    "TypeMismatchError",
    "UnsupportedSchemaError",
    "ValidationError",
    "Validator",
    "ValueRangeRule",
    "bind_parents",
    "drop_unknown_field",
    "dump_schema",
    "generate_schema_code",
    "infer_schema",
    "iter_schema_nodes",
    "load_schema",
    "load_settings",
    "parse_json",
    "schema_fingerprint",
    "schema_paths",
    "stringify_json",
    "to_json_example",
]
