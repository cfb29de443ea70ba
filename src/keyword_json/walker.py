"""Post-order traversal over generic JSON trees."""

from typing import Any, Callable, Optional
from .types import NodeKind, SerializationError
from .models.keyword import Keyword


LeafVisitor = Callable[[Any, NodeKind], Any]
CycleHandler = Callable[[Any], Exception]


def classify(value: Any) -> NodeKind:
    """
    Classify a node of a generic tree.
    
    Args:
        value: Node to classify
    
    Returns:
        NodeKind tag for the node
    """
    if value is None:
        return NodeKind.NULL
    if isinstance(value, Keyword):
        return NodeKind.KEYWORD
    if isinstance(value, str):
        return NodeKind.STRING
    # bool is a subclass of int
    if isinstance(value, bool):
        return NodeKind.BOOLEAN
    if isinstance(value, int):
        return NodeKind.INTEGER
    if isinstance(value, float):
        return NodeKind.FLOAT
    if isinstance(value, dict):
        return NodeKind.MAPPING
    if isinstance(value, (list, tuple)):
        return NodeKind.SEQUENCE
    return NodeKind.OPAQUE


def postwalk(tree: Any, visit: LeafVisitor,
             visit_key: Optional[LeafVisitor] = None,
             on_cycle: Optional[CycleHandler] = None) -> Any:
    """
    Rebuild a tree bottom-up, applying ``visit`` to every leaf.
    
    Mapping keys are passed to ``visit_key`` (``visit`` when not given).
    The input is never modified; mappings come back as new dicts and
    sequences (tuples included) as new lists. Nesting depth is bounded
    only by memory.
    
    Args:
        tree: Generic tree to walk
        visit: Callable receiving ``(leaf, kind)`` and returning the replacement
        visit_key: Optional callable for mapping keys, same signature
        on_cycle: Optional callable building the exception raised for a
            container that contains itself
    
    Returns:
        The rebuilt tree
    
    Raises:
        SerializationError: If the tree contains a circular reference
    """
    visit_key = visit_key or visit
    on_cycle = on_cycle or _circular_reference

    kind = classify(tree)
    if not _is_container(kind):
        return visit(tree, kind)

    root = _Frame(tree, kind)
    stack = [root]
    active = {root.node_id}

    while stack:
        frame = stack[-1]
        entry = next(frame.entries, None)
        if entry is None:
            stack.pop()
            active.discard(frame.node_id)
            continue

        key, child = entry
        if frame.kind is NodeKind.MAPPING:
            key = visit_key(key, classify(key))

        child_kind = classify(child)
        if not _is_container(child_kind):
            frame.attach(key, visit(child, child_kind))
            continue

        if id(child) in active:
            raise on_cycle(child)
        child_frame = _Frame(child, child_kind)
        frame.attach(key, child_frame.result)
        active.add(child_frame.node_id)
        stack.append(child_frame)

    return root.result


class _Frame:
    """A container being rebuilt, with its remaining entries."""

    def __init__(self, node: Any, kind: NodeKind):
        self.node_id = id(node)
        self.kind = kind
        if kind is NodeKind.MAPPING:
            self.result = {}
            self.entries = iter(node.items())
        else:
            self.result = []
            self.entries = ((None, item) for item in node)

    def attach(self, key: Any, value: Any) -> None:
        if self.kind is NodeKind.MAPPING:
            self.result[key] = value
        else:
            self.result.append(value)


def _is_container(kind: NodeKind) -> bool:
    return kind is NodeKind.MAPPING or kind is NodeKind.SEQUENCE


def _circular_reference(node: Any) -> SerializationError:
    return SerializationError(
        f"Circular reference detected in {type(node).__name__}",
        context={"value": type(node).__name__}
    )
