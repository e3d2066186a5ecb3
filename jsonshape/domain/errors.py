"""Error taxonomy shared by schema construction and the validation engine."""

from __future__ import annotations

from jsonshape.domain import reason_codes


class JsonShapeError(Exception):
    pass


class SchemaConstructionError(JsonShapeError):
    """Raised while building a schema tree, never during validation."""

    reason_code = reason_codes.SCHEMA_CONSTRUCTION

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


class SchemaTypeMismatchError(SchemaConstructionError, TypeError):
    """A schema node was converted to a variant it does not hold."""

    reason_code = reason_codes.SCHEMA_TYPE_MISMATCH


class SchemaInferenceError(JsonShapeError):
    pass


class JsonCodecError(JsonShapeError, ValueError):
    pass


class SettingsError(JsonShapeError):
    pass


class ValidationError(JsonShapeError, ValueError):
    """Input rejected by a schema; carries the dotted path of the offending node."""

    reason_code = reason_codes.FORMAT_VIOLATION

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.message = message
        self.path = path

    def to_dict(self) -> dict[str, str]:
        return {"reason_code": self.reason_code, "path": self.path, "message": self.message}


class MissingRequiredFieldError(ValidationError):
    reason_code = reason_codes.MISSING_REQUIRED_FIELD


class TypeMismatchError(ValidationError):
    reason_code = reason_codes.TYPE_MISMATCH


class RangeViolationError(ValidationError):
    reason_code = reason_codes.RANGE_VIOLATION


class FormatViolationError(ValidationError):
    reason_code = reason_codes.FORMAT_VIOLATION


class CustomRuleViolationError(ValidationError):
    reason_code = reason_codes.CUSTOM_RULE_VIOLATION


class UnsupportedSchemaError(ValidationError):
    reason_code = reason_codes.UNSUPPORTED_SCHEMA
