"""Deterministic JSON canonicalization for schema definitions.

Schema equality and fingerprints are computed over this form, so two trees
built in different ways compare equal when their persisted definitions match.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any


def _normalize_string_newlines(value: str) -> str:
    return value.replace("\r\n", "\n").replace("\r", "\n")


def _normalize_definition(payload: Any) -> Any:
    if isinstance(payload, str):
        return _normalize_string_newlines(payload)
    if isinstance(payload, (list, tuple)):
        return [_normalize_definition(item) for item in payload]
    if isinstance(payload, dict):
        # Absent and null attributes are the same definition.
        return {str(key): _normalize_definition(value) for key, value in payload.items() if value is not None}
    return payload


def canonical_json_text(payload: Any) -> str:
    """Return canonical JSON text with stable key ordering and separators."""

    normalized = _normalize_definition(payload)
    return json.dumps(normalized, sort_keys=True, ensure_ascii=True, separators=(",", ":"))


def canonical_json_hash(payload: Any) -> str:
    """Return sha256 over the UTF-8 canonical JSON text."""

    return hashlib.sha256(canonical_json_text(payload).encode("utf-8")).hexdigest()
