"""User-facing message formats for validation failures."""

from __future__ import annotations


def format_bound(value: int | float) -> str:
    """Render a bound without a trailing `.0` for integral floats."""

    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def param_error(path: str) -> str:
    if not path.strip():
        return "Parameter error"
    return f"`{path}` parameter error"


def param_missing(path: str) -> str:
    if not path.strip():
        return "Missing parameter"
    return f"Missing `{path}` parameter"


def between(path: str, min_value: int | float, max_value: int | float) -> str:
    return f"`{path}` between [{format_bound(min_value)} ~ {format_bound(max_value)}]"


def greater_or_equal(path: str, min_value: int | float) -> str:
    return f"`{path}` greater than or equal to {format_bound(min_value)}"


def less_or_equal(path: str, max_value: int | float) -> str:
    return f"`{path}` less than or equal to {format_bound(max_value)}"


def must_be_number(path: str) -> str:
    return f"`{path}` It has to be a number"


def between_length(path: str, min_value: int | float, max_value: int | float) -> str:
    return f"`{path}` between character size [ {format_bound(min_value)}~{format_bound(max_value)} ]"


def greater_or_equal_length(path: str, min_value: int | float) -> str:
    return f"`{path}` greater than or equal to character size {format_bound(min_value)}"


def less_or_equal_length(path: str, max_value: int | float) -> str:
    return f"`{path}` less than or equal to character size {format_bound(max_value)}"


def custom_rule_failed(path: str) -> str:
    if not path.strip():
        return "Parameter validation failure"
    return f"Invalid parameter `{path}`"


def not_in_scope(path: str) -> str:
    if not path.strip():
        return "The parameter is not in the definition scope"
    return f"The parameter field:'{path}' is not in the definition scope"


def out_of_range(path: str) -> str:
    if not path.strip():
        return "The parameter is out of the legal range"
    return f"The parameter field:'{path}' is out of the legal range"


def inverted_bounds(min_value: int | float, max_value: int | float) -> str:
    return f"Validation parameters error. `{format_bound(max_value)}` must gt `{format_bound(min_value)}`"
