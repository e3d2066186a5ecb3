"""Data type tags carried by schema nodes."""

from __future__ import annotations

from typing import Final, Literal, cast

from jsonshape.domain.errors import SchemaConstructionError

DataType = Literal["String", "Number", "Boolean", "Array", "Object", "Any"]

PRIMITIVE_DATA_TYPES: Final[tuple[str, ...]] = ("String", "Number", "Boolean")
ALL_DATA_TYPES: Final[tuple[str, ...]] = (*PRIMITIVE_DATA_TYPES, "Array", "Object", "Any")


def is_primitive_type(data_type: object) -> bool:
    return data_type in PRIMITIVE_DATA_TYPES


def parse_data_type(value: object) -> DataType:
    """Return the tag named by `value`; names are exact and case-sensitive."""

    if isinstance(value, str) and value in ALL_DATA_TYPES:
        return cast(DataType, value)
    raise SchemaConstructionError(f"Invalid type: {value}")
