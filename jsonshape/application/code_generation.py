"""Python source generation for schema trees.

`generate_schema_code` renders an expression that rebuilds the tree with the
factories of `jsonshape.domain.schema_nodes`, e.g.

    ObjectSchema.anonymous(
        StringSchema.required("name"),
        ArraySchema.optional(
            "skus",
            ObjectSchema.anonymous(
                NumberSchema.required("id"),
            ),
        ),
    )
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final

from jsonshape.application.inference import RequirednessPolicy, infer_schema
from jsonshape.domain.errors import UnsupportedSchemaError
from jsonshape.domain.schema_nodes import SchemaNode
from jsonshape.domain.values import is_array, is_object

INDENT: Final[str] = "    "

_FACTORY_CLASSES: Final[dict[str, str]] = {
    "Object": "ObjectSchema",
    "Array": "ArraySchema",
    "String": "StringSchema",
    "Number": "NumberSchema",
    "Boolean": "BooleanSchema",
    "Any": "AnySchema",
}


@dataclass(frozen=True)
class GenerateOptions:
    generate_example: bool = False
    generate_description: bool = False
    force_required: bool = False


def _format_bound(value: int | float) -> str:
    return repr(value)


def _example_literal(node: SchemaNode) -> str | None:
    example = node.example_value
    if example is None or not example.strip():
        return None
    if node.data_type == "Number":
        return example
    if node.data_type == "Boolean":
        return "True" if example in ("true", "1") else "False"
    return repr(example)


class _CodeWriter:
    def __init__(self, options: GenerateOptions):
        self.options = options

    def _factory(self, node: SchemaNode) -> str:
        required = node.is_required or self.options.force_required
        return "required" if required else "optional"

    def _description(self, node: SchemaNode) -> str | None:
        if self.options.generate_description and node.description:
            return f"description={node.description!r}"
        return None

    def _suffix(self, node: SchemaNode) -> str:
        suffix = ""
        if node.min is not None and node.max is not None:
            suffix += f".between({_format_bound(node.min)}, {_format_bound(node.max)})"
        elif node.min is not None:
            suffix += f".set_min({_format_bound(node.min)})"
        elif node.max is not None:
            suffix += f".set_max({_format_bound(node.max)})"
        if self.options.generate_example:
            example = _example_literal(node)
            if example is not None:
                suffix += f".set_example_value({example})"
        return suffix

    def _call(self, head: str, args: list[str], depth: int) -> str:
        if not args:
            return f"{head}()"
        inner = INDENT * (depth + 1)
        body = "".join(f"{inner}{arg},\n" for arg in args)
        return f"{head}(\n{body}{INDENT * depth})"

    def render(self, node: SchemaNode, depth: int = 0) -> str:
        if node.is_object():
            return self._object(node, depth)
        if node.is_array():
            return self._array(node, depth)
        if node.is_primitive() or node.is_any():
            return self._leaf(node)
        raise UnsupportedSchemaError(f"Unsupported type: {node!r}", node.path)

    def _object(self, node: SchemaNode, depth: int) -> str:
        children = [self.render(child, depth + 1) for child in node.children]
        description = self._description(node)
        if not node.name:
            args = children
            if not (node.is_required or self.options.force_required):
                args = [*args, "required=False"]
            if description:
                args = [*args, description]
            return self._call("ObjectSchema.anonymous", args, depth)
        args = [repr(node.name), *children]
        if description:
            args.append(description)
        return self._call(f"ObjectSchema.{self._factory(node)}", args, depth)

    def _array(self, node: SchemaNode, depth: int) -> str:
        args = [repr(node.name)]
        if node.children:
            element = node.children[0]
            if not (element.is_object() or element.is_primitive()):
                raise UnsupportedSchemaError(f"Unsupported type: {element!r}", element.path)
            args.append(self.render(element, depth + 1))
        description = self._description(node)
        if description:
            args.append(description)
        return self._call(f"ArraySchema.{self._factory(node)}", args, depth)

    def _leaf(self, node: SchemaNode) -> str:
        cls = _FACTORY_CLASSES[node.data_type]
        if not node.name and node.is_primitive():
            required = node.is_required or self.options.force_required
            head = f"{cls}.element()" if required else f"{cls}.element(required=False)"
            return head + self._suffix(node)
        args = [repr(node.name)]
        description = self._description(node)
        if description:
            args.append(description)
        return f"{cls}.{self._factory(node)}({', '.join(args)})" + self._suffix(node)


def generate_schema_code(
    source: SchemaNode | Any,
    options: GenerateOptions | None = None,
    *,
    policy: RequirednessPolicy = "OPTIONAL",
) -> str:
    """Render Python source rebuilding `source`.

    `source` is a schema node, or a JSON document (parsed or text) whose
    schema is inferred first with `policy`.
    """

    if isinstance(source, SchemaNode):
        node = source
    elif isinstance(source, (str, bytes)) or is_object(source) or is_array(source):
        node = infer_schema(source, policy)
    else:
        raise TypeError(f"cannot generate code for {type(source).__name__}")
    return _CodeWriter(options or GenerateOptions()).render(node)
