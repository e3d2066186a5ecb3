"""JSON text codec used by the engine, the schema store and the tooling."""

from __future__ import annotations

import json
from typing import Any

from jsonshape.domain.errors import JsonCodecError
from jsonshape.domain.values import MISSING, is_null, value_text

__all__ = ["MISSING", "is_null", "parse_json", "stringify_json", "value_text"]


def _reject_constant(token: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {token}")


def parse_json(text: str | bytes) -> Any:
    """Parse strict JSON text; NaN and Infinity are not JSON and are rejected."""

    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise JsonCodecError(f"invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}") from exc
    except (TypeError, ValueError) as exc:
        raise JsonCodecError(f"invalid JSON: {exc}") from exc


def stringify_json(value: Any, *, compact: bool = True) -> str:
    if compact:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(value, ensure_ascii=False, indent=2)
