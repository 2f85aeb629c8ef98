from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tree_sitter import Node

from .. import config


class NodeKind(str, Enum):
    """Node kinds inspected by the classifier."""

    FUNCTION_DECLARATION = "function_declaration"
    FUNCTION_EXPRESSION = "function_expression"
    ARROW_FUNCTION = "arrow_function"
    PROPERTY = "property"  # object entry or class member
    RETURN = "return"
    CONDITIONAL = "conditional"
    LOGICAL = "logical"
    CALL = "call"
    MEMBER = "member"
    IDENTIFIER = "identifier"
    OBJECT = "object"
    ELEMENT = "element"  # JSX
    CLASS = "class"
    IMPORT = "import"
    DECLARATOR = "declarator"
    OTHER = "other"

    @classmethod
    def of(cls, node: Node) -> "NodeKind":
        # Keyword tokens share type names with nodes ("function", "class")
        if not node.is_named:
            return cls.OTHER
        t = node.type
        if t in config.FUNCTION_DECLARATION_TYPES:
            return cls.FUNCTION_DECLARATION
        if t in config.FUNCTION_EXPRESSION_TYPES:
            return cls.FUNCTION_EXPRESSION
        if t in config.ARROW_FUNCTION_TYPES:
            return cls.ARROW_FUNCTION
        if t in config.PROPERTY_TYPES:
            return cls.PROPERTY
        if t == "return_statement":
            return cls.RETURN
        if t == "ternary_expression":
            return cls.CONDITIONAL
        if t == "binary_expression":
            op = node.child_by_field_name("operator")
            if op is not None and op.type in config.LOGICAL_OPERATORS:
                return cls.LOGICAL
            return cls.OTHER
        if t == "call_expression":
            return cls.CALL
        if t == "member_expression":
            return cls.MEMBER
        if t in config.IDENTIFIER_TYPES:
            return cls.IDENTIFIER
        if t == "object":
            return cls.OBJECT
        if t in config.ELEMENT_TYPES:
            return cls.ELEMENT
        if t in config.CLASS_TYPES:
            return cls.CLASS
        if t == "import_statement":
            return cls.IMPORT
        if t == "variable_declarator":
            return cls.DECLARATOR
        return cls.OTHER


FUNCTION_KINDS = frozenset({NodeKind.FUNCTION_DECLARATION, NodeKind.FUNCTION_EXPRESSION, NodeKind.ARROW_FUNCTION})
CANDIDATE_KINDS = FUNCTION_KINDS | {NodeKind.PROPERTY}


class ComponentKind(str, Enum):
    """How a component is defined."""

    STATELESS = "stateless"
    CLASS = "class"
    CREATE_CLASS = "create_class"


@dataclass(frozen=True)
class SourceRange:
    """Source code range (0-indexed lines and characters)."""

    start_line: int
    start_char: int
    end_line: int
    end_char: int

    @classmethod
    def of(cls, node: Node) -> "SourceRange":
        (sl, sc) = node.start_point
        (el, ec) = node.end_point
        return cls(start_line=sl, start_char=sc, end_line=el, end_char=ec)


@dataclass(frozen=True)
class ComponentDefinition:
    """A component found in a source file."""

    kind: ComponentKind
    name: Optional[str]
    range: SourceRange

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "name": self.name,
            "line": self.range.start_line + 1,
            "char": self.range.start_char,
        }


class MalformedTreeError(ValueError):
    """A node lacks a child the classifier needs."""

    def __init__(self, node_type: str, field: str):
        super().__init__(f"{node_type} node has no {field!r} child")
        self.node_type = node_type
        self.field = field
