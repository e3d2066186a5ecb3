"""Policies for input fields an object schema does not declare.

A policy is a callable `policy(field_name, parent_object) -> None`. It runs
once per undeclared field, before the engine descends into the declared
children, and decides the field's fate by mutating `parent_object` in place.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Protocol

from jsonshape.config import load_settings

logger = logging.getLogger(__name__)


class UnknownNodePolicy(Protocol):
    def __call__(self, name: str, parent: dict[str, Any]) -> None: ...


def drop_unknown_field(name: str, parent: dict[str, Any]) -> None:
    """Default policy: delete the field unconditionally."""

    parent.pop(name, None)


@dataclass(frozen=True)
class ExtensionEnvelope:
    """A field the caller may send alongside the declared ones, matched by name and shape."""

    name: str
    matches: Callable[[Any], bool]


def remark_envelope(max_length: int | None = None) -> ExtensionEnvelope:
    limit = load_settings().remark_max_length if max_length is None else max_length
    return ExtensionEnvelope("remark", lambda value: isinstance(value, str) and len(value) <= limit)


def extend_props_envelope() -> ExtensionEnvelope:
    return ExtensionEnvelope("extendProps", lambda value: isinstance(value, dict))


def default_envelopes(remark_max_length: int | None = None) -> tuple[ExtensionEnvelope, ...]:
    return (remark_envelope(remark_max_length), extend_props_envelope())


class ExtensionEnvelopePolicy:
    """Keep undeclared fields that match a recognized envelope; drop the rest."""

    def __init__(self, envelopes: Iterable[ExtensionEnvelope] | None = None):
        chosen = default_envelopes() if envelopes is None else tuple(envelopes)
        self.envelopes: dict[str, ExtensionEnvelope] = {envelope.name: envelope for envelope in chosen}

    def __call__(self, name: str, parent: dict[str, Any]) -> None:
        envelope = self.envelopes.get(name)
        if envelope is not None and envelope.matches(parent.get(name)):
            return
        if envelope is not None:
            logger.debug("dropping extension field %r: value does not match its envelope", name)
        parent.pop(name, None)

    def __repr__(self) -> str:
        return f"ExtensionEnvelopePolicy({sorted(self.envelopes)!r})"
