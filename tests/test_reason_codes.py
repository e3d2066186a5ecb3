from __future__ import annotations

import pytest

from jsonshape.domain import reason_codes
from jsonshape.domain.errors import (
    CustomRuleViolationError,
    FormatViolationError,
    JsonCodecError,
    JsonShapeError,
    MissingRequiredFieldError,
    RangeViolationError,
    SchemaConstructionError,
    SchemaTypeMismatchError,
    TypeMismatchError,
    UnsupportedSchemaError,
    ValidationError,
)


@pytest.mark.schema
def test_every_error_class_carries_a_registered_code():
    for error_class in (
        MissingRequiredFieldError,
        TypeMismatchError,
        RangeViolationError,
        FormatViolationError,
        CustomRuleViolationError,
        UnsupportedSchemaError,
        SchemaConstructionError,
        SchemaTypeMismatchError,
    ):
        assert reason_codes.is_registered_reason_code(error_class.reason_code, allow_none=False)


@pytest.mark.schema
def test_none_sentinel_is_only_accepted_when_allowed():
    assert reason_codes.is_registered_reason_code(" none ")
    assert not reason_codes.is_registered_reason_code("none", allow_none=False)
    assert not reason_codes.is_registered_reason_code("SOMETHING-ELSE")


@pytest.mark.schema
def test_canonical_codes_are_unique():
    assert len(set(reason_codes.CANONICAL_REASON_CODES)) == len(reason_codes.CANONICAL_REASON_CODES)


@pytest.mark.schema
def test_runtime_codes_have_hints():
    for code in (
        reason_codes.MISSING_REQUIRED_FIELD,
        reason_codes.TYPE_MISMATCH,
        reason_codes.RANGE_VIOLATION,
        reason_codes.FORMAT_VIOLATION,
        reason_codes.CUSTOM_RULE_VIOLATION,
    ):
        assert reason_codes.REASON_CODE_HINTS[code]


@pytest.mark.schema
def test_validation_error_exposes_message_path_and_code():
    error = RangeViolationError("`age` between [0 ~ 120]", "objParam.age")
    assert isinstance(error, ValidationError)
    assert isinstance(error, ValueError)
    assert isinstance(error, JsonShapeError)
    assert str(error) == "`age` between [0 ~ 120]"
    assert error.to_dict() == {
        "reason_code": "RANGE-VIOLATION",
        "path": "objParam.age",
        "message": "`age` between [0 ~ 120]",
    }


@pytest.mark.schema
def test_codec_errors_are_value_errors():
    assert issubclass(JsonCodecError, ValueError)
    assert issubclass(JsonCodecError, JsonShapeError)
