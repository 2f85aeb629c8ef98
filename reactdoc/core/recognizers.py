"""Shape recognizers for well-known React call and class patterns.

Each predicate matches structure (callee identity plus argument shape) and
uses binding resolution only to confirm the React module behind a name.
"""

from __future__ import annotations

from .. import config
from .models import NodeKind
from .path import NodePath
from .resolve import imported_name, resolve_to_module, resolve_to_value


def is_react_module_name(name: str | None) -> bool:
    return config.is_react_module_name(name)


def _call_parts(path: NodePath) -> tuple[NodePath | None, NodePath | None]:
    """(callee, arguments) of a call expression, unwrapping expression statements."""
    path = path.unwrap()
    if path.type == "expression_statement":
        inner = path.first_named_child()
        if inner is None:
            return None, None
        path = inner.unwrap()
    if path.kind is not NodeKind.CALL:
        return None, None
    callee = path.get("function")
    return (callee.unwrap() if callee is not None else None), path.get("arguments")


def is_react_builtin_call(path: NodePath, name: str) -> bool:
    """Check for `React.<name>(...)` or a call to `<name>` imported from React."""
    callee, _ = _call_parts(path)
    if callee is None:
        return False

    if callee.type == "member_expression":
        prop = callee.get("property")
        obj = callee.get("object")
        if prop is None or obj is None or prop.text != name:
            return False
        return is_react_module_name(resolve_to_module(obj))

    if callee.type == "identifier":
        return imported_name(callee) == name and is_react_module_name(resolve_to_module(callee))

    return False


def is_react_create_element_call(path: NodePath) -> bool:
    """`React.createElement(...)`, or a factory from the automatic JSX runtime."""
    if is_react_builtin_call(path, config.CREATE_ELEMENT):
        return True

    callee, _ = _call_parts(path)
    if callee is None or callee.type != "identifier":
        return False
    return (
        imported_name(callee) in config.JSX_RUNTIME_FACTORIES
        and resolve_to_module(callee) in config.JSX_RUNTIME_MODULES
    )


def is_react_clone_element_call(path: NodePath) -> bool:
    return is_react_builtin_call(path, config.CLONE_ELEMENT)


def is_react_children_element_call(path: NodePath) -> bool:
    """`React.Children.map(...)` or `Children.map(...)` with `Children` from React."""
    callee, _ = _call_parts(path)
    if callee is None or callee.type != "member_expression":
        return False

    prop = callee.get("property")
    if prop is None or prop.text not in config.CHILDREN_ITERATORS:
        return False

    obj = callee.get("object")
    if obj is None:
        return False
    obj = obj.unwrap()
    if obj.type == "member_expression":
        children = obj.get("property")
        if children is None or children.text != config.CHILDREN:
            return False
    elif obj.type == "identifier":
        if imported_name(obj) != config.CHILDREN:
            return False
    else:
        return False
    return is_react_module_name(resolve_to_module(obj))


def is_react_create_class_call(path: NodePath) -> bool:
    """`React.createClass({...})` or `createReactClass({...})` from create-react-class."""
    if is_react_builtin_call(path, config.CREATE_CLASS):
        return True

    callee, _ = _call_parts(path)
    if callee is None or callee.type != "identifier":
        return False
    return resolve_to_module(callee) in config.CREATE_CLASS_MODULES


def is_react_component_class(path: NodePath) -> bool:
    """A class extending `React.Component` / `PureComponent` (or an imported alias)."""
    path = path.unwrap()
    if path.kind is not NodeKind.CLASS:
        return False

    superclass = _superclass(path)
    if superclass is None:
        return False

    value = resolve_to_value(superclass)
    if value.type == "member_expression":
        prop = value.get("property")
        if prop is None or prop.text not in config.COMPONENT_BASE_CLASSES:
            return False
        return is_react_module_name(resolve_to_module(value))

    if superclass.type == "identifier":
        return imported_name(superclass) in config.COMPONENT_BASE_CLASSES and is_react_module_name(
            resolve_to_module(superclass)
        )

    return False


def _superclass(cls: NodePath) -> NodePath | None:
    heritage = next((c for c in cls.named_children if c.type == "class_heritage"), None)
    if heritage is None:
        return None
    expr = heritage.first_named_child()
    # TypeScript wraps the superclass in an extends clause
    if expr is not None and expr.type == "extends_clause":
        expr = expr.get("value") or expr.first_named_child()
    return expr.unwrap() if expr is not None else None


__all__ = [
    "is_react_builtin_call",
    "is_react_children_element_call",
    "is_react_clone_element_call",
    "is_react_component_class",
    "is_react_create_class_call",
    "is_react_create_element_call",
    "is_react_module_name",
]
