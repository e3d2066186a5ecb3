from __future__ import annotations

import pytest

from jsonshape.domain.errors import SchemaConstructionError, SchemaTypeMismatchError
from jsonshape.domain.rules import EnumRule, ValueRangeRule
from jsonshape.domain.schema_nodes import (
    AnySchema,
    ArraySchema,
    BooleanSchema,
    NumberSchema,
    ObjectSchema,
    PrimitiveSchema,
    SchemaDefinition,
    StringSchema,
    normalize_schema,
)


@pytest.mark.schema
def test_factories_set_name_requiredness_and_kind():
    field = StringSchema.required("name", "full name")
    assert field.name == "name"
    assert field.is_required is True
    assert field.data_type == "String"
    assert field.description == "full name"
    assert NumberSchema.optional("age").is_required is False
    assert BooleanSchema.element().name == ""
    assert BooleanSchema.element(required=False).is_required is False


@pytest.mark.schema
def test_primitive_rejects_non_primitive_kind():
    with pytest.raises(SchemaConstructionError, match="Unsupported dataType: Object"):
        PrimitiveSchema("x", True, data_type="Object")
    with pytest.raises(SchemaConstructionError, match="Unsupported dataType"):
        PrimitiveSchema.required("x")


@pytest.mark.schema
def test_concrete_primitive_rejects_other_tag():
    with pytest.raises(SchemaConstructionError, match="cannot hold dataType Number"):
        StringSchema("x", True, data_type="Number")


@pytest.mark.schema
def test_object_rejects_anonymous_object_field():
    with pytest.raises(SchemaConstructionError, match="anonymous object"):
        ObjectSchema.required("outer", ObjectSchema.anonymous(StringSchema.required("x")))


@pytest.mark.schema
def test_object_rejects_non_schema_children():
    with pytest.raises(SchemaTypeMismatchError):
        ObjectSchema.required("outer", "not-a-node")  # type: ignore[arg-type]


@pytest.mark.schema
def test_array_rejects_named_primitive_element():
    with pytest.raises(SchemaConstructionError, match="must be unnamed"):
        ArraySchema.required("ids", NumberSchema.required("id"))


@pytest.mark.schema
def test_array_rejects_array_element():
    with pytest.raises(SchemaConstructionError, match="nested array"):
        ArraySchema.required("matrix", ArraySchema.required(""))


@pytest.mark.schema
def test_array_exposes_its_element_schema():
    element = NumberSchema.element()
    array = ArraySchema.required("ids", element)
    assert array.element is element
    assert array.has_children()
    assert ArraySchema.optional("free").element is None


@pytest.mark.schema
def test_inverted_bounds_raise_at_construction():
    with pytest.raises(SchemaConstructionError, match="`5` must gt `10`"):
        NumberSchema.required("n").between(10, 5)
    with pytest.raises(SchemaConstructionError):
        NumberSchema.required("n").set_max(3).set_min(4)
    with pytest.raises(SchemaConstructionError):
        NumberSchema("n", True, min_value=2.5, max_value=1)


@pytest.mark.schema
def test_bounds_must_be_numbers():
    with pytest.raises(SchemaConstructionError, match="must be a number"):
        StringSchema.required("s").set_max("5")  # type: ignore[arg-type]
    with pytest.raises(SchemaConstructionError, match="must be a number"):
        StringSchema.required("s").set_min(True)  # type: ignore[arg-type]


@pytest.mark.schema
def test_example_value_is_stored_as_text():
    assert NumberSchema.required("price").set_example_value(99.98).example_value == "99.98"
    assert NumberSchema.required("id").set_example_value(100).example_value == "100"
    assert BooleanSchema.required("ok").set_example_value(True).example_value == "true"


@pytest.mark.schema
def test_tip_messages_follow_kind_and_bounds():
    assert NumberSchema.required("age").between(0, 120).tip_message() == "`age` between [0 ~ 120]"
    assert NumberSchema.required("age").set_min(7.18).tip_message() == "`age` greater than or equal to 7.18"
    assert NumberSchema.required("age").set_max(3).tip_message() == "`age` less than or equal to 3"
    assert NumberSchema.required("age").tip_message() == "`age` It has to be a number"
    assert StringSchema.required("s").between(1, 5).tip_message() == "`s` between character size [ 1~5 ]"
    assert StringSchema.required("s").set_min(2).tip_message() == "`s` greater than or equal to character size 2"
    assert StringSchema.required("s").set_max(5).tip_message() == "`s` less than or equal to character size 5"
    assert StringSchema.required("s").tip_message() == "`s` parameter error"
    assert BooleanSchema.required("b").tip_message("other") == "`other` parameter error"


@pytest.mark.schema
def test_conversions_fail_on_wrong_kind():
    node = StringSchema.required("s")
    assert node.as_primitive() is node
    with pytest.raises(SchemaTypeMismatchError, match="cannot be converted to ObjectSchema"):
        node.as_object()
    with pytest.raises(SchemaTypeMismatchError):
        ObjectSchema.required("o").as_array()
    with pytest.raises(SchemaTypeMismatchError):
        ArraySchema.required("a").as_any()
    assert AnySchema.optional("free").as_any().is_any()


@pytest.mark.schema
def test_schema_type_mismatch_is_also_a_type_error():
    with pytest.raises(TypeError):
        StringSchema.required("s").as_array()


@pytest.mark.schema
def test_in_enum_replaces_the_rule_slot():
    node = StringSchema.required("color").with_validator(lambda schema, value: True).in_enum("red", "blue")
    assert isinstance(node.rule, EnumRule)
    assert node.rule.values == ("red", "blue")


@pytest.mark.schema
def test_within_and_exclude_values_share_one_range_rule():
    node = NumberSchema.required("n").within_values(1, 2).exclude_values(3).within_values(4)
    assert isinstance(node.rule, ValueRangeRule)
    assert node.rule.within_values == {"1", "2", "4"}
    assert node.rule.exclude_values == {"3"}


@pytest.mark.schema
def test_to_dict_uses_persisted_field_names(product):
    payload = product.to_dict()
    assert payload["name"] == "product"
    assert payload["required"] is True
    assert payload["dataType"] == "Object"
    assert payload["description"] == "product"
    price = payload["children"][1]
    assert price == {
        "name": "price",
        "required": True,
        "dataType": "Number",
        "description": "product price",
        "children": [],
        "exampleValue": "99.98",
    }


@pytest.mark.schema
def test_equality_is_structural_and_ignores_rules():
    left = ObjectSchema.required("o", StringSchema.required("s").set_max(3))
    right = ObjectSchema.required("o", StringSchema.required("s").set_max(3).in_enum("a"))
    assert left == right
    assert left != ObjectSchema.required("o", StringSchema.optional("s").set_max(3))
    assert left != "o"


@pytest.mark.schema
def test_schema_definition_converts_to_concrete_variants():
    definition = SchemaDefinition(
        "root",
        True,
        "Object",
        children=[
            SchemaDefinition("price", True, "Number", min_value=0, max_value=10, example_value="3"),
            SchemaDefinition("tags", False, "Array", children=[SchemaDefinition("", True, "String")]),
            SchemaDefinition("extra", False, "Any"),
        ],
    )
    node = normalize_schema(definition)
    assert isinstance(node, ObjectSchema)
    price, tags, extra = node.children
    assert isinstance(price, NumberSchema)
    assert (price.min, price.max, price.example_value) == (0, 10, "3")
    assert isinstance(tags, ArraySchema)
    assert isinstance(tags.element, StringSchema)
    assert isinstance(extra, AnySchema)
    assert node == definition


@pytest.mark.schema
def test_schema_definition_array_with_two_elements_is_rejected():
    definition = SchemaDefinition(
        "a", True, "Array", children=[SchemaDefinition("", True, "String"), SchemaDefinition("", True, "Number")]
    )
    with pytest.raises(SchemaConstructionError, match="more than one element"):
        definition.as_array()


@pytest.mark.schema
def test_schema_definition_rejects_unknown_type():
    with pytest.raises(SchemaConstructionError, match="Invalid type: Date"):
        SchemaDefinition("d", True, "Date")  # type: ignore[arg-type]
