"""Shared schema fixtures for the jsonshape tests."""
from __future__ import annotations

import pytest

from jsonshape.domain.schema_nodes import ArraySchema, NumberSchema, ObjectSchema, StringSchema


def build_obj_param() -> ObjectSchema:
    return ObjectSchema.required(
        "objParam",
        StringSchema.required("name", "full name").set_max(5),
        NumberSchema.required("age", "age").set_min(0).set_max(120),
        ArraySchema.required(
            "items",
            ObjectSchema.anonymous(
                NumberSchema.required("id", "item id").set_min(1).set_max(10),
                StringSchema.required("name", "item name").set_max(50),
            ),
            description="items",
        ),
        ArraySchema.required("ids", NumberSchema.element().set_max(100), description="id list"),
        ObjectSchema.optional("extendMap", description="free-form map"),
        ArraySchema.optional("array_any", description="free-form array"),
        ArraySchema.optional("array_any_simple", description="free-form array"),
        description="object parameter",
    )


def build_product() -> ObjectSchema:
    return ObjectSchema.required(
        "product",
        StringSchema.required("name", "product name").set_example_value("IPhone7"),
        NumberSchema.required("price", "product price").set_example_value(99.98),
        ArraySchema.required(
            "skus",
            ObjectSchema.anonymous(
                NumberSchema.required("id", "sku id").set_example_value(100),
                StringSchema.required("name", "sku name").set_example_value("移动版"),
                ArraySchema.required(
                    "code",
                    ObjectSchema.anonymous(
                        NumberSchema.optional("id", "id").set_example_value(12345),
                        StringSchema.optional("title", "title").set_example_value("土黄金色"),
                        required=False,
                    ),
                ),
            ),
        ),
        description="product",
    )


PRODUCT_EXAMPLE = (
    '{"name":"IPhone7","price":99.98,"skus":[{"id":100,"name":"移动版",'
    '"code":[{"id":12345,"title":"土黄金色"}]}]}'
)


@pytest.fixture
def obj_param() -> ObjectSchema:
    return build_obj_param()


@pytest.fixture
def product() -> ObjectSchema:
    return build_product()


@pytest.fixture
def obj_param_input() -> dict:
    extend_map = {"a": 10, "obj": {}}
    return {
        "name": "张三丰",
        "C_": "2024-01-01",
        "age": "100.11",
        "items": [{"id": "2", "name": "手机", "D_": "2024-01-01"}],
        "ids": ["100"],
        "EE__": {},
        "extendMap": extend_map,
        "array_any": [extend_map],
        "array_any_simple": [1, 2, 3, 4, 5],
    }
