"""Find every component definition in a source file.

Visits function-like nodes (stateless components), classes extending a React
base class, and `createClass` calls. Class members and `createClass` object
entries are not reported as stateless components.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from .core.classifier import is_stateless_component
from .core.models import FUNCTION_KINDS, ComponentDefinition, ComponentKind, NodeKind
from .core.path import NodePath, SourceTree
from .core.recognizers import is_react_component_class, is_react_create_class_call
from .core.resolve import resolve_to_value
from .parser import parse_file

logger = logging.getLogger(__name__)


def find_component_definitions(tree: SourceTree) -> List[ComponentDefinition]:
    """Extract component definitions from a parsed source tree, in source order."""
    out: List[ComponentDefinition] = []

    for path in tree.iter_paths():
        kind = path.kind

        if kind in FUNCTION_KINDS:
            candidate = _candidate_for(path)
            if candidate is not None and is_stateless_component(candidate):
                out.append(_definition(ComponentKind.STATELESS, candidate, path))

        elif kind is NodeKind.PROPERTY and path.type == "method_definition":
            if path.parent is not None and path.parent.kind is NodeKind.OBJECT and is_stateless_component(path):
                out.append(_definition(ComponentKind.STATELESS, path, path))

        elif kind is NodeKind.CLASS:
            if is_react_component_class(path):
                out.append(_definition(ComponentKind.CLASS, path, path))

        elif kind is NodeKind.CALL:
            if is_react_create_class_call(path):
                spec = _create_class_spec(path)
                out.append(_definition(ComponentKind.CREATE_CLASS, path, spec or path))

    logger.debug("Found %d component(s) in %s source", len(out), tree.language)
    return out


def find_components_in_file(file_path: Path | str) -> List[ComponentDefinition]:
    """Parse a file and extract its component definitions.

    Returns an empty list for unsupported file types. Raises OSError if the
    file cannot be read.
    """
    tree = parse_file(file_path)
    if tree is None:
        logger.debug("Skipping unsupported file %s", file_path)
        return []
    return find_component_definitions(tree)


def _candidate_for(fn: NodePath) -> Optional[NodePath]:
    """The node to classify for a function: its property entry if it is the value of one."""
    parent = fn.parent
    if parent is None or parent.kind is not NodeKind.PROPERTY:
        return fn
    if parent.parent is not None and parent.parent.type == "class_body":
        return None
    return parent


def _create_class_spec(call: NodePath) -> Optional[NodePath]:
    args = call.get("arguments")
    first = args.first_named_child() if args is not None else None
    if first is None:
        return None
    spec = resolve_to_value(first)
    return spec if spec.kind is NodeKind.OBJECT else None


def _definition(kind: ComponentKind, named: NodePath, located: NodePath) -> ComponentDefinition:
    return ComponentDefinition(kind=kind, name=_name_of(named), range=located.range)


def _name_of(path: NodePath) -> Optional[str]:
    """Best-effort name for a definition: its own name or the binding it is assigned to."""
    if path.type != "call_expression":
        own = path.get("name") or path.get("key") or path.get("property")
        if own is not None and own.type not in {"computed_property_name"}:
            return own.text.strip("\"'")

    for ancestor in path.ancestors():
        t = ancestor.type
        if t == "variable_declarator":
            name = ancestor.get("name")
            return name.text if name is not None and name.type == "identifier" else None
        if t == "assignment_expression":
            left = ancestor.get("left")
            return left.text if left is not None else None
        if t == "pair":
            key = ancestor.get("key")
            return key.text.strip("\"'") if key is not None else None
        if t == "export_statement":
            return "default"
        if t in {"parenthesized_expression", "call_expression", "arguments", "as_expression"}:
            continue
        break
    return None


__all__ = ["find_component_definitions", "find_components_in_file"]
