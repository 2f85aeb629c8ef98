"""Shared configuration for reactdoc.

Centralizes file extension mappings, React module names, and the
tree-sitter node-type tables used by the classifier and resolver.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Optional

# File extension to tree-sitter language name
EXTENSION_TO_LANGUAGE: Dict[str, str] = {
    # JavaScript (JSX is part of the javascript grammar)
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    # TypeScript
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}

# Modules whose exports are treated as the React API
REACT_MODULE_NAMES: FrozenSet[str] = frozenset(
    {
        "react",
        "react/addons",
        "react-native",
        "preact",
        "preact/compat",
    }
)

# Automatic JSX runtime modules and the element factories they export
JSX_RUNTIME_MODULES: FrozenSet[str] = frozenset({"react/jsx-runtime", "react/jsx-dev-runtime"})
JSX_RUNTIME_FACTORIES: FrozenSet[str] = frozenset({"jsx", "jsxs", "jsxDEV"})

CREATE_CLASS_MODULES: FrozenSet[str] = frozenset({"create-react-class"})

CREATE_ELEMENT = "createElement"
CLONE_ELEMENT = "cloneElement"
CREATE_CLASS = "createClass"
CHILDREN = "Children"
CHILDREN_ITERATORS: FrozenSet[str] = frozenset({"map"})
COMPONENT_BASE_CLASSES: FrozenSet[str] = frozenset({"Component", "PureComponent"})

# =============================================================================
# Node-type tables (tree-sitter javascript / typescript / tsx grammars)
# =============================================================================

FUNCTION_DECLARATION_TYPES: FrozenSet[str] = frozenset(
    {"function_declaration", "generator_function_declaration"}
)
# Older grammar releases call function expressions "function"
FUNCTION_EXPRESSION_TYPES: FrozenSet[str] = frozenset(
    {"function_expression", "function", "generator_function"}
)
ARROW_FUNCTION_TYPES: FrozenSet[str] = frozenset({"arrow_function"})
FIELD_DEFINITION_TYPES: FrozenSet[str] = frozenset({"field_definition", "public_field_definition"})
PROPERTY_TYPES: FrozenSet[str] = frozenset({"pair", "method_definition"}) | FIELD_DEFINITION_TYPES

# Nodes that establish their own function scope
SCOPE_TYPES: FrozenSet[str] = (
    FUNCTION_DECLARATION_TYPES | FUNCTION_EXPRESSION_TYPES | ARROW_FUNCTION_TYPES | {"method_definition"}
)

ELEMENT_TYPES: FrozenSet[str] = frozenset({"jsx_element", "jsx_self_closing_element", "jsx_fragment"})
CLASS_TYPES: FrozenSet[str] = frozenset({"class_declaration", "class", "abstract_class_declaration"})
IDENTIFIER_TYPES: FrozenSet[str] = frozenset({"identifier", "shorthand_property_identifier"})
LOGICAL_OPERATORS: FrozenSet[str] = frozenset({"&&", "||", "??"})

# Wrappers that do not change the value of the wrapped expression
TRANSPARENT_TYPES: FrozenSet[str] = frozenset(
    {
        "parenthesized_expression",
        "as_expression",
        "satisfies_expression",
        "non_null_expression",
        "instantiation_expression",
    }
)

# Block-like nodes whose direct children may declare bindings
BLOCK_TYPES: FrozenSet[str] = frozenset({"program", "statement_block", "switch_case", "switch_default"})
DECLARATION_TYPES: FrozenSet[str] = frozenset({"lexical_declaration", "variable_declaration"})


def detect_language(path: str) -> Optional[str]:
    """Detect the tree-sitter language name from a file path.

    Args:
        path: File path (e.g., "/path/to/Button.jsx")

    Returns:
        Language name (e.g., "javascript") or None if the extension is unknown
    """
    if "." not in path:
        return None
    ext = "." + path.rsplit(".", 1)[-1].lower()
    return EXTENSION_TO_LANGUAGE.get(ext)


def is_react_module_name(name: Optional[str]) -> bool:
    """Check if a module specifier refers to the React API."""
    return name is not None and name.lower() in REACT_MODULE_NAMES
