"""Environment-driven settings.

| Variable                      | Default   | Meaning                                     |
|-------------------------------|-----------|---------------------------------------------|
| JSONSHAPE_LOG_LEVEL           | WARNING   | level used by the command-line tool         |
| JSONSHAPE_REMARK_MAX_LENGTH   | 500       | longest `remark` kept by the envelope policy |
| JSONSHAPE_INFERENCE_DEFAULT   | OPTIONAL  | requiredness of inferred fields             |
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Final, Literal, Mapping

from jsonshape.domain.errors import SettingsError

InferenceDefault = Literal["OPTIONAL", "REQUIRED"]

DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_REMARK_MAX_LENGTH: Final[int] = 500
DEFAULT_INFERENCE: Final[InferenceDefault] = "OPTIONAL"

_LOG_LEVELS: Final[tuple[str, ...]] = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    remark_max_length: int = DEFAULT_REMARK_MAX_LENGTH
    inference_default: InferenceDefault = DEFAULT_INFERENCE

    @property
    def numeric_log_level(self) -> int:
        return logging.getLevelName(self.log_level)


def _read(env: Mapping[str, str], key: str) -> str:
    return str(env.get(key, "")).strip()


def _log_level(env: Mapping[str, str]) -> str:
    raw = _read(env, "JSONSHAPE_LOG_LEVEL").upper()
    if not raw:
        return DEFAULT_LOG_LEVEL
    if raw not in _LOG_LEVELS:
        raise SettingsError(f"JSONSHAPE_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {raw!r}")
    return raw


def _remark_max_length(env: Mapping[str, str]) -> int:
    raw = _read(env, "JSONSHAPE_REMARK_MAX_LENGTH")
    if not raw:
        return DEFAULT_REMARK_MAX_LENGTH
    try:
        value = int(raw)
    except ValueError as exc:
        raise SettingsError(f"JSONSHAPE_REMARK_MAX_LENGTH must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise SettingsError(f"JSONSHAPE_REMARK_MAX_LENGTH must be positive, got {value}")
    return value


def _inference_default(env: Mapping[str, str]) -> InferenceDefault:
    raw = _read(env, "JSONSHAPE_INFERENCE_DEFAULT").upper()
    if not raw:
        return DEFAULT_INFERENCE
    if raw == "OPTIONAL":
        return "OPTIONAL"
    if raw == "REQUIRED":
        return "REQUIRED"
    raise SettingsError(f"JSONSHAPE_INFERENCE_DEFAULT must be OPTIONAL or REQUIRED, got {raw!r}")


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = environ if environ is not None else os.environ
    return Settings(
        log_level=_log_level(env),
        remark_max_length=_remark_max_length(env),
        inference_default=_inference_default(env),
    )
