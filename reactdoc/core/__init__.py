"""Core domain types and algorithms."""

from .classifier import (
    classify,
    is_stateless_component,
    is_ui_element,
    resolves_to_ui_element,
    returns_ui_element,
)
from .models import (
    ComponentDefinition,
    ComponentKind,
    MalformedTreeError,
    NodeKind,
    SourceRange,
)
from .path import NodePath, SourceTree
from .resolve import get_property_value_path, resolve_to_module, resolve_to_value

__all__ = [
    # models
    "ComponentDefinition",
    "ComponentKind",
    "MalformedTreeError",
    "NodeKind",
    "SourceRange",
    # path
    "NodePath",
    "SourceTree",
    # resolve
    "get_property_value_path",
    "resolve_to_module",
    "resolve_to_value",
    # classifier
    "classify",
    "is_stateless_component",
    "is_ui_element",
    "resolves_to_ui_element",
    "returns_ui_element",
]
