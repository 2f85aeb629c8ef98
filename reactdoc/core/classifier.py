"""Stateless component classification.

Decides, without executing anything, whether a function-like node can return
a UI element: a JSX literal or a React element factory call. Three procedures
recurse into each other:

- `is_stateless_component` filters candidates and excludes members of
  component classes;
- `returns_ui_element` collects the return statements owned by one function;
- `resolves_to_ui_element` follows branches, bindings and calls from an
  expression to something recognizable.

The scanner and resolver pass an immutable set of entered node ids along
their recursion, so cyclic bindings and mutually recursive functions end in
`False` instead of looping. One top-level call also shares a memo of function
results, so a function reached along several call paths is scanned once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterator, Optional

from .. import config
from .models import CANDIDATE_KINDS, FUNCTION_KINDS, NodeKind
from .path import NodePath
from .recognizers import (
    is_react_children_element_call,
    is_react_clone_element_call,
    is_react_component_class,
    is_react_create_class_call,
    is_react_create_element_call,
)
from .resolve import get_property_value_path, lookup_binding, member_chain, resolve_to_value

logger = logging.getLogger(__name__)

_Seen = FrozenSet[int]


@dataclass
class _Memo:
    """Function results computed during one top-level classification.

    `cuts` counts the times a cycle guard answered `False`. A negative result
    is stored only when no cut happened while computing it, since it may
    depend on the call chain that led there.
    """

    results: Dict[int, bool] = field(default_factory=dict)
    cuts: int = 0


def is_ui_element(path: NodePath) -> bool:
    """JSX literal, or a createElement / cloneElement / Children.map call."""
    kind = path.kind
    if kind is NodeKind.ELEMENT:
        return True
    if kind is not NodeKind.CALL:
        return False
    return (
        is_react_create_element_call(path)
        or is_react_clone_element_call(path)
        or is_react_children_element_call(path)
    )


# =============================================================================
# Value Resolver
# =============================================================================


def resolves_to_ui_element(
    path: Optional[NodePath], _seen: _Seen = frozenset(), _memo: Optional[_Memo] = None
) -> bool:
    """Check whether an expression, on any path through it, evaluates to a UI element."""
    if path is None:
        return False
    memo = _memo if _memo is not None else _Memo()
    path = path.unwrap()
    if is_ui_element(path):
        return True

    resolved = resolve_to_value(path)
    if resolved.node.id in _seen:
        memo.cuts += 1
        return False
    seen = _seen | {resolved.node.id}
    kind = resolved.kind

    if kind is NodeKind.CONDITIONAL:
        return resolves_to_ui_element(resolved.get("consequence"), seen, memo) or resolves_to_ui_element(
            resolved.get("alternative"), seen, memo
        )

    if kind is NodeKind.LOGICAL:
        return resolves_to_ui_element(resolved.get("left"), seen, memo) or resolves_to_ui_element(
            resolved.get("right"), seen, memo
        )

    if resolved != path and is_ui_element(resolved):
        return True

    if kind is NodeKind.CALL:
        return _call_returns_ui_element(resolved, seen, memo)

    return False


def _call_returns_ui_element(call: NodePath, seen: _Seen, memo: _Memo) -> bool:
    callee_value = resolve_to_value(call.require("function"))
    if _returns_ui_element(callee_value, seen, memo):
        return True

    if callee_value.type != "member_expression":
        return False

    # ns.a.b(): look the names up in an object literal used as a namespace
    root, names = member_chain(callee_value)
    target: Optional[NodePath] = resolve_to_value(root)
    if target.kind is not NodeKind.OBJECT:
        return False

    for name in names:
        if name is None:
            continue
        target = get_property_value_path(target, name)
        if target is None:
            break
        if target.kind is NodeKind.IDENTIFIER:
            target = resolve_to_value(target)

    # an entry that cannot be found could still be a component
    if target is None:
        return True
    return _returns_ui_element(target, seen, memo)


# =============================================================================
# Return-Flow Scanner
# =============================================================================


def returns_ui_element(path: NodePath) -> bool:
    """Check whether any return statement owned by a function yields a UI element."""
    return _returns_ui_element(path, frozenset(), _Memo())


def _returns_ui_element(path: NodePath, seen: _Seen, memo: _Memo) -> bool:
    fn = _function_of(path)
    if fn is None:
        return False
    key = fn.node.id
    cached = memo.results.get(key)
    if cached is not None:
        return cached
    if key in seen:
        memo.cuts += 1
        return False

    cuts = memo.cuts
    result = _scan_returns(fn, seen | {key}, memo)
    if result or memo.cuts == cuts:
        memo.results[key] = result
    return result


def _scan_returns(fn: NodePath, seen: _Seen, memo: _Memo) -> bool:
    if fn.kind is NodeKind.ARROW_FUNCTION:
        body = fn.require("body")
        if body.type != "statement_block":
            return resolves_to_ui_element(body, seen, memo)

    scope = fn.scope
    stack = [fn]
    while stack:
        current = stack.pop()
        if current.kind is NodeKind.RETURN:
            if current.scope != scope:
                continue
            if resolves_to_ui_element(current.first_named_child(), seen, memo):
                return True
        stack.extend(reversed(current.named_children))
    return False


def _function_of(path: NodePath) -> Optional[NodePath]:
    """The function node whose returns decide `path` (the value side of a property)."""
    path = path.unwrap()
    kind = path.kind
    if kind in FUNCTION_KINDS:
        return path
    if kind is NodeKind.PROPERTY:
        # shorthand methods are functions themselves
        if path.type == "method_definition":
            return path
        value = path.get("value")
        if value is not None and value.unwrap().kind in FUNCTION_KINDS:
            return value.unwrap()
    return None


# =============================================================================
# Entry Classifier
# =============================================================================


def is_stateless_component(path: NodePath) -> bool:
    """Returns True if the path represents a function which returns a UI element."""
    if path.kind not in CANDIDATE_KINDS:
        return False

    try:
        if path.kind is NodeKind.PROPERTY:
            for container in _containers_of(path):
                if is_react_create_class_call(container) or is_react_component_class(container):
                    return False
        return returns_ui_element(path)
    except Exception:
        logger.debug("Classification of %r failed; treating as not a component", path, exc_info=True)
        return False


classify = is_stateless_component


def _containers_of(prop: NodePath) -> Iterator[NodePath]:
    """The object literal or class a property entry belongs to.

    An object literal passed straight to a call is represented by that call,
    so `createClass({...})` specs are recognized. An object literal held in a
    variable is also represented by each call the variable is passed to.
    """
    parent = prop.parent
    if parent is None:
        return
    if parent.type == "class_body":
        if parent.parent is not None:
            yield parent.parent
        return
    if parent.kind is not NodeKind.OBJECT:
        return

    holder = parent.parent
    if holder is not None and holder.type == "arguments" and holder.parent is not None:
        yield holder.parent
        return
    yield parent
    if holder is not None and holder.type == "variable_declarator" and holder.get("value") == parent:
        yield from _calls_passing(holder)


def _calls_passing(declarator: NodePath) -> Iterator[NodePath]:
    """Calls that take the variable bound by `declarator` as an argument."""
    name = declarator.get("name")
    if name is None or name.type != "identifier":
        return
    block = next((a for a in declarator.ancestors() if a.type in config.BLOCK_TYPES), None)
    if block is None:
        return

    stack = [block]
    while stack:
        current = stack.pop()
        parent = current.parent
        if (
            current.type == "identifier"
            and current.text == name.text
            and parent is not None
            and parent.type == "arguments"
            and parent.parent is not None
            and lookup_binding(current) == declarator
        ):
            yield parent.parent
        stack.extend(current.named_children)


__all__ = [
    "classify",
    "is_stateless_component",
    "is_ui_element",
    "resolves_to_ui_element",
    "returns_ui_element",
]
