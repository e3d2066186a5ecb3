"""Depth-first traversal of schema trees."""

from __future__ import annotations

from typing import Iterator

from jsonshape.domain.schema_nodes import SchemaNode


def iter_schema_nodes(*roots: SchemaNode) -> Iterator[SchemaNode]:
    """Yield every node, parents before children, in declared order."""

    for root in roots:
        stack = [root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


def schema_paths(*roots: SchemaNode) -> list[str]:
    """Dotted path of every named node; unnamed wrappers have no path of their own."""

    return [node.path for node in iter_schema_nodes(*roots) if node.name.strip()]
