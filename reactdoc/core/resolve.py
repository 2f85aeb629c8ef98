"""Symbolic binding resolution within a single module.

Maps identifiers and member expressions back to the node that defines their
value, and identifiers to the module they were imported or required from.
Resolution never leaves the parsed file and never re-enters a node it has
already visited within one chain.
"""

from __future__ import annotations

from typing import FrozenSet, List, Optional, Tuple

from .. import config
from .models import NodeKind
from .path import NodePath, string_value

_PATTERN_TYPES = frozenset(
    {
        "object_pattern",
        "array_pattern",
        "pair_pattern",
        "shorthand_property_identifier_pattern",
        "object_assignment_pattern",
        "assignment_pattern",
        "rest_pattern",
    }
)
_IMPORT_PARTS = frozenset({"import_clause", "named_imports", "import_specifier", "namespace_import"})


# =============================================================================
# Value resolution
# =============================================================================


def resolve_to_value(path: NodePath, _seen: FrozenSet[int] = frozenset()) -> NodePath:
    """Resolve `path` to the node that defines its value.

    Returns the (unwrapped) path itself when nothing more specific is found.
    """
    path = path.unwrap()
    if path.node.id in _seen:
        return path
    seen = _seen | {path.node.id}
    t = path.type

    if t == "variable_declarator":
        value = path.get("value")
        if value is not None:
            return resolve_to_value(value, seen)
        name = path.get("name")
        if name is not None and name.type == "identifier":
            assigned = _last_assignment(path, name.text)
            if assigned is not None:
                return resolve_to_value(assigned, seen)
        return path

    if t == "assignment_expression":
        right = path.get("right")
        return resolve_to_value(right, seen) if right is not None else path

    if path.kind is NodeKind.IDENTIFIER:
        binding = lookup_binding(path)
        if binding is None or binding == path:
            return path
        return resolve_to_value(binding, seen)

    if t == "member_expression":
        obj = path.get("object")
        prop = path.get("property")
        if obj is not None and prop is not None:
            obj_value = resolve_to_value(obj, seen)
            if obj_value.kind is NodeKind.OBJECT:
                value = get_property_value_path(obj_value, prop.text)
                if value is not None:
                    return resolve_to_value(value, seen)
        return path

    return path


def get_property_value_path(obj: NodePath, name: str) -> Optional[NodePath]:
    """Value bound to `name` inside an object literal, or None if absent.

    Shorthand methods resolve to the method itself; `{name}` shorthand
    entries resolve to the identifier.
    """
    found: Optional[NodePath] = None
    for child in obj.named_children:
        if child.type == "pair":
            if _property_key(child.get("key")) == name:
                found = child.get("value")
        elif child.type == "method_definition":
            if _property_key(child.get("name")) == name:
                found = child
        elif child.type == "shorthand_property_identifier" and child.text == name:
            found = child
    return found


def _property_key(key: Optional[NodePath]) -> Optional[str]:
    if key is None:
        return None
    if key.type == "string":
        return string_value(key)
    if key.type in {"property_identifier", "identifier", "number", "private_property_identifier"}:
        return key.text
    return None


def member_chain(path: NodePath) -> Tuple[NodePath, List[Optional[str]]]:
    """Split `a.b.c` into its root object and the property names outward."""
    names: List[Optional[str]] = []
    current = path.unwrap()
    while current.type == "member_expression":
        prop = current.get("property")
        names.insert(0, prop.text if prop is not None else None)
        obj = current.get("object")
        if obj is None:
            break
        current = obj.unwrap()
    return current, names


def _last_assignment(declarator: NodePath, name: str) -> Optional[NodePath]:
    """Right-hand side of the last `name = value` statement in the declaring block."""
    declaration = declarator.parent
    block = declaration.parent if declaration is not None else None
    if block is None:
        return None

    found: Optional[NodePath] = None
    for stmt in block.named_children:
        if stmt.type != "expression_statement":
            continue
        expr = stmt.first_named_child()
        if expr is None or expr.type != "assignment_expression":
            continue
        left = expr.get("left")
        if left is not None and left.type == "identifier" and left.text == name:
            found = expr.get("right")
    return found


# =============================================================================
# Binding lookup
# =============================================================================


def lookup_binding(path: NodePath) -> Optional[NodePath]:
    """Find the binding site of an identifier in its enclosing lexical scopes."""
    name = path.text
    for ancestor in path.ancestors():
        t = ancestor.type
        if t in config.BLOCK_TYPES:
            found = _find_in_block(ancestor, name)
            if found is None and _is_function_body(ancestor):
                found = _find_hoisted_var(ancestor, name)
        elif t in config.SCOPE_TYPES:
            found = _find_in_params(ancestor, name)
            if found is None and ancestor.kind is NodeKind.FUNCTION_EXPRESSION:
                fn_name = ancestor.get("name")
                if fn_name is not None and fn_name.text == name:
                    found = ancestor
        else:
            continue
        if found is not None:
            return found
    return None


def _find_in_block(block: NodePath, name: str) -> Optional[NodePath]:
    for stmt in block.named_children:
        if stmt.type == "export_statement":
            decl = stmt.get("declaration")
            if decl is None:
                continue
            stmt = decl

        t = stmt.type
        if t in config.DECLARATION_TYPES:
            found = _find_in_declaration(stmt, name)
            if found is not None:
                return found
        elif t in config.FUNCTION_DECLARATION_TYPES or t in config.CLASS_TYPES:
            decl_name = stmt.get("name")
            if decl_name is not None and decl_name.text == name:
                return stmt
        elif t == "import_statement":
            found = _find_in_import(stmt, name)
            if found is not None:
                return found
    return None


def _find_in_declaration(decl: NodePath, name: str) -> Optional[NodePath]:
    for declarator in decl.named_children:
        if declarator.type != "variable_declarator":
            continue
        target = declarator.get("name")
        if target is None:
            continue
        if target.type == "identifier":
            if target.text == name:
                return declarator
        else:
            found = _find_in_pattern(target, name)
            if found is not None:
                return found
    return None


def _is_function_body(block: NodePath) -> bool:
    if block.type == "program":
        return True
    parent = block.parent
    return block.type == "statement_block" and parent is not None and parent.type in config.SCOPE_TYPES


def _find_hoisted_var(body: NodePath, name: str) -> Optional[NodePath]:
    for decl in body.tree.var_declarations(body.node):
        found = _find_in_declaration(decl, name)
        if found is not None:
            return found
    return None


def _find_in_params(fn: NodePath, name: str) -> Optional[NodePath]:
    single = fn.get("parameter")
    if single is not None:
        return single if single.text == name else None

    params = fn.get("parameters")
    if params is None:
        return None
    for param in params.named_children:
        t = param.type
        if t == "identifier":
            if param.text == name:
                return param
        elif t == "assignment_pattern":
            left = param.get("left")
            if left is not None and left.type == "identifier" and left.text == name:
                return param.get("right") or left
            if left is not None:
                found = _find_in_pattern(left, name)
                if found is not None:
                    return found
        elif t in {"required_parameter", "optional_parameter"}:
            pattern = param.get("pattern")
            if pattern is None:
                continue
            if pattern.type == "identifier":
                if pattern.text == name:
                    return param.get("value") or pattern
            else:
                found = _find_in_pattern(pattern, name)
                if found is not None:
                    return found
        else:
            found = _find_in_pattern(param, name)
            if found is not None:
                return found
    return None


def _find_in_pattern(pattern: NodePath, name: str) -> Optional[NodePath]:
    t = pattern.type
    if t == "identifier":
        return pattern if pattern.text == name else None
    if t == "shorthand_property_identifier_pattern":
        return pattern if pattern.text == name else None
    if t == "pair_pattern":
        value = pattern.get("value")
        if value is None:
            return None
        if value.type == "identifier":
            return pattern if value.text == name else None
        return _find_in_pattern(value, name)
    if t in {"assignment_pattern", "object_assignment_pattern"}:
        left = pattern.get("left")
        return _find_in_pattern(left, name) if left is not None else None
    if t in {"object_pattern", "array_pattern", "rest_pattern"}:
        for child in pattern.named_children:
            found = _find_in_pattern(child, name)
            if found is not None:
                return found
    return None


def _find_in_import(stmt: NodePath, name: str) -> Optional[NodePath]:
    clause = next((c for c in stmt.named_children if c.type == "import_clause"), None)
    if clause is None:
        return None
    for part in clause.named_children:
        if part.type == "identifier":
            if part.text == name:
                return stmt
        elif part.type == "namespace_import":
            ident = part.first_named_child()
            if ident is not None and ident.text == name:
                return stmt
        elif part.type == "named_imports":
            for spec in part.named_children:
                if spec.type != "import_specifier":
                    continue
                local = spec.get("alias") or spec.get("name")
                if local is not None and local.text == name:
                    return spec
    return None


# =============================================================================
# Module resolution
# =============================================================================


def resolve_to_module(path: NodePath, _seen: FrozenSet[int] = frozenset()) -> Optional[str]:
    """Name of the module a value was imported or required from, if any."""
    path = path.unwrap()
    if path.node.id in _seen:
        return None
    seen = _seen | {path.node.id}
    t = path.type

    if t == "variable_declarator":
        value = path.get("value")
        return resolve_to_module(value, seen) if value is not None else None

    if t == "call_expression":
        fn = path.get("function")
        if fn is None:
            return None
        if fn.type == "identifier" and fn.text == "require":
            args = path.get("arguments")
            return string_value(args.first_named_child()) if args is not None else None
        return resolve_to_module(fn, seen)

    if t == "import_statement":
        return string_value(path.get("source"))

    if t in _IMPORT_PARTS or t in _PATTERN_TYPES:
        for ancestor in path.ancestors():
            if ancestor.type in {"import_statement", "variable_declarator"}:
                return resolve_to_module(ancestor, seen)
            # parameter destructuring has no module behind it
            if ancestor.type in config.SCOPE_TYPES or ancestor.type == "formal_parameters":
                return None
        return None

    if t == "identifier" and path.parent is not None and path.parent.type in _PATTERN_TYPES:
        return resolve_to_module(path.parent, seen)

    if path.kind is NodeKind.IDENTIFIER:
        value = resolve_to_value(path)
        if value != path:
            return resolve_to_module(value, seen)
        return None

    if t == "member_expression":
        root, _ = member_chain(path)
        return resolve_to_module(root, seen)

    return None


def imported_name(path: NodePath) -> Optional[str]:
    """Exported name an identifier was bound to by a named import or destructuring.

    `import {createElement as h} from 'react'` gives "createElement" for `h`.
    """
    path = path.unwrap()
    if path.kind is not NodeKind.IDENTIFIER:
        return None
    binding = lookup_binding(path)
    if binding is None:
        return None
    if binding.type == "import_specifier":
        name = binding.get("name")
        return name.text if name is not None else None
    if binding.type == "shorthand_property_identifier_pattern":
        return binding.text
    if binding.type == "pair_pattern":
        return _property_key(binding.get("key"))
    return None


__all__ = [
    "get_property_value_path",
    "imported_name",
    "lookup_binding",
    "member_chain",
    "resolve_to_module",
    "resolve_to_value",
]
