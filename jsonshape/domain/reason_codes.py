"""Canonical reason-code registry for schema validation failures.

Every `ValidationError` carries exactly one of these codes so callers can map
failures to user-facing responses without parsing messages.
"""

from __future__ import annotations

from typing import Final

# Sentinel used when an outcome carries no failure.
REASON_CODE_NONE: Final[str] = "none"

# Runtime validation reason codes.
MISSING_REQUIRED_FIELD: Final[str] = "MISSING-REQUIRED-FIELD"
TYPE_MISMATCH: Final[str] = "TYPE-MISMATCH"
RANGE_VIOLATION: Final[str] = "RANGE-VIOLATION"
FORMAT_VIOLATION: Final[str] = "FORMAT-VIOLATION"
CUSTOM_RULE_VIOLATION: Final[str] = "CUSTOM-RULE-VIOLATION"
UNSUPPORTED_SCHEMA: Final[str] = "UNSUPPORTED-SCHEMA"

# Schema build-time reason codes.
SCHEMA_CONSTRUCTION: Final[str] = "SCHEMA-CONSTRUCTION"
SCHEMA_TYPE_MISMATCH: Final[str] = "SCHEMA-TYPE-MISMATCH"

CANONICAL_REASON_CODES: Final[tuple[str, ...]] = (
    MISSING_REQUIRED_FIELD,
    TYPE_MISMATCH,
    RANGE_VIOLATION,
    FORMAT_VIOLATION,
    CUSTOM_RULE_VIOLATION,
    UNSUPPORTED_SCHEMA,
    SCHEMA_CONSTRUCTION,
    SCHEMA_TYPE_MISMATCH,
)


def is_registered_reason_code(reason_code: str, *, allow_none: bool = True) -> bool:
    """Return True if the reason code is in the canonical registry."""

    normalized = reason_code.strip()
    if allow_none and normalized == REASON_CODE_NONE:
        return True
    return normalized in CANONICAL_REASON_CODES


# Hints for operator-facing error responses.
REASON_CODE_HINTS: Final[dict[str, str]] = {
    MISSING_REQUIRED_FIELD: "Supply a non-null value for the reported field.",
    TYPE_MISMATCH: "Send the JSON kind (object, array or scalar) the schema declares for the field.",
    RANGE_VIOLATION: "Keep the value (or its character length) inside the declared bounds.",
    FORMAT_VIOLATION: "Numbers must be plain numeric literals; booleans one of true, false, 1 or 0.",
    CUSTOM_RULE_VIOLATION: "The value was rejected by a rule attached to the field.",
}
