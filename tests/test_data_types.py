from __future__ import annotations

import pytest

from jsonshape.domain.data_types import ALL_DATA_TYPES, is_primitive_type, parse_data_type
from jsonshape.domain.errors import SchemaConstructionError


@pytest.mark.schema
def test_primitive_types():
    assert [name for name in ALL_DATA_TYPES if is_primitive_type(name)] == ["String", "Number", "Boolean"]
    assert not is_primitive_type("Any")


@pytest.mark.schema
def test_parse_data_type_is_exact():
    assert parse_data_type("Array") == "Array"
    with pytest.raises(SchemaConstructionError, match="Invalid type: array"):
        parse_data_type("array")
    with pytest.raises(SchemaConstructionError):
        parse_data_type(None)
