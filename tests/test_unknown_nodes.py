from __future__ import annotations

import pytest

from jsonshape.engine.unknown_nodes import (
    ExtensionEnvelope,
    ExtensionEnvelopePolicy,
    default_envelopes,
    drop_unknown_field,
    extend_props_envelope,
    remark_envelope,
)


@pytest.mark.engine
def test_default_policy_drops_the_field():
    parent = {"name": "x", "extra": "y"}
    drop_unknown_field("extra", parent)
    assert parent == {"name": "x"}


@pytest.mark.engine
def test_envelope_policy_keeps_matching_extension_fields():
    policy = ExtensionEnvelopePolicy()
    parent = {"remark": "note", "extendProps": {"abc": 12.2423}, "error": True}
    for name in ["remark", "extendProps", "error"]:
        policy(name, parent)
    assert parent == {"remark": "note", "extendProps": {"abc": 12.2423}}


@pytest.mark.engine
def test_envelope_policy_drops_extension_fields_of_the_wrong_shape():
    policy = ExtensionEnvelopePolicy()
    parent = {"remark": True, "extendProps": ["not", "an", "object"]}
    policy("remark", parent)
    policy("extendProps", parent)
    assert parent == {}


@pytest.mark.engine
def test_remark_length_limit_comes_from_settings(monkeypatch):
    monkeypatch.setenv("JSONSHAPE_REMARK_MAX_LENGTH", "4")
    envelope = remark_envelope()
    assert envelope.matches("four")
    assert not envelope.matches("fives")


@pytest.mark.engine
def test_remark_default_limit_is_500(monkeypatch):
    monkeypatch.delenv("JSONSHAPE_REMARK_MAX_LENGTH", raising=False)
    envelope = remark_envelope()
    assert envelope.matches("x" * 500)
    assert not envelope.matches("x" * 501)


@pytest.mark.engine
def test_custom_envelopes_replace_the_defaults():
    policy = ExtensionEnvelopePolicy([ExtensionEnvelope("trace", lambda value: isinstance(value, str))])
    parent = {"trace": "abc", "remark": "dropped"}
    policy("trace", parent)
    policy("remark", parent)
    assert parent == {"trace": "abc"}


@pytest.mark.engine
def test_default_envelope_names():
    assert [envelope.name for envelope in default_envelopes(10)] == ["remark", "extendProps"]
    assert extend_props_envelope().matches({})
    assert not extend_props_envelope().matches(None)
