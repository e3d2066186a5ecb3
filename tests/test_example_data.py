from __future__ import annotations

import pytest

from jsonshape.application.example_data import example_value, to_json_example
from jsonshape.application.inference import infer_schema
from jsonshape.domain.schema_nodes import AnySchema, ArraySchema, BooleanSchema, NumberSchema, ObjectSchema, StringSchema
from jsonshape.infrastructure.schema_codec import dump_schema, load_schema

from conftest import PRODUCT_EXAMPLE


@pytest.mark.schema
def test_product_example(product):
    assert to_json_example(product) == PRODUCT_EXAMPLE


@pytest.mark.schema
def test_example_round_trips_through_inference():
    assert to_json_example(infer_schema(PRODUCT_EXAMPLE)) == PRODUCT_EXAMPLE


@pytest.mark.schema
def test_example_survives_schema_persistence(product):
    assert to_json_example(load_schema(dump_schema(product))) == PRODUCT_EXAMPLE


@pytest.mark.schema
def test_missing_examples_render_as_null():
    schema = ObjectSchema.anonymous(
        StringSchema.required("s"),
        AnySchema.optional("free"),
        ArraySchema.optional("opaque"),
        ArraySchema.optional("ids", NumberSchema.element()),
    )
    assert example_value(schema) == {"s": None, "free": None, "opaque": [], "ids": [None]}


@pytest.mark.schema
def test_typed_examples():
    schema = ObjectSchema.anonymous(
        BooleanSchema.required("on").set_example_value("1"),
        BooleanSchema.required("off").set_example_value(False),
        NumberSchema.required("ratio").set_example_value("0.5"),
        NumberSchema.required("odd").set_example_value("n/a"),
    )
    assert to_json_example(schema) == '{"on":true,"off":false,"ratio":0.5,"odd":"n/a"}'
