"""Parent wiring and dotted-path resolution for schema trees.

Schemas are built bottom-up (or loaded flat from a persisted definition), so
children cannot know their parent at construction time. `bind_parents` walks a
finished tree once and records a weak, non-owning back-reference on every
descendant. Paths are never stored: they are recomputed from the parent chain,
joining named segments with `.` and skipping unnamed wrapper nodes such as
array element schemas and anonymous object values.

Re-run `bind_parents` after any structural edit; stale links produce stale paths.
"""

from __future__ import annotations

import logging
import weakref
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jsonshape.domain.schema_nodes import SchemaNode

logger = logging.getLogger(__name__)


def _set_parent(node: "SchemaNode", parent: "SchemaNode | None") -> None:
    node._parent_ref = weakref.ref(parent) if parent is not None else None


def _bind_array(array: "SchemaNode", parent: "SchemaNode | None") -> None:
    _set_parent(array, parent)
    if not array.children:
        return
    element = array.children[0]
    if element.data_type == "Object":
        _bind_object(element, array)
    elif element.data_type == "Array":
        _bind_array(element, array)
    elif element.is_primitive():
        _set_parent(element, array)
    else:
        logger.warning("no parent reference for element schema %r", element)


def _bind_object(obj: "SchemaNode", parent: "SchemaNode | None") -> None:
    _set_parent(obj, parent)
    for child in obj.children:
        if child.data_type == "Object":
            _bind_object(child, obj)
        elif child.data_type == "Array":
            _bind_array(child, obj)
        elif child.is_primitive() or child.data_type == "Any":
            _set_parent(child, obj)
        else:
            logger.warning("no parent reference for field schema %r", child)


def bind_parents(*roots: "SchemaNode") -> None:
    """Assign parent links on every descendant of each root; roots get none."""

    for root in roots:
        if root.data_type == "Array":
            _bind_array(root, None)
        elif root.data_type == "Object":
            _bind_object(root, None)
        else:
            _set_parent(root, None)


def is_root_node(node: "SchemaNode") -> bool:
    return node.parent is None


def resolve_path(node: "SchemaNode") -> str:
    """Return the dotted path from the root to `node`.

    The root's own name seeds the path; a root node's path is its name.
    """

    if is_root_node(node):
        return node.name
    segments: list[str] = []
    current: "SchemaNode | None" = node
    while current is not None:
        parent = current.parent
        if parent is None:
            if current.name.strip() or not segments:
                segments.append(current.name)
            break
        if current.name.strip():
            segments.append(current.name)
        current = parent
    return ".".join(reversed(segments))


def root_name(node: "SchemaNode") -> str:
    current = node
    while current.parent is not None:
        current = current.parent
    return current.name
