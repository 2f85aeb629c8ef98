"""Navigable paths over a parsed source tree.

A `NodePath` is a read-only handle onto one tree-sitter node. It carries the
`SourceTree` it belongs to, which holds the source bytes and an owner index
mapping every named node to the innermost function that lexically encloses
it. Scope comparison is a lookup in that index.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from tree_sitter import Node

from .. import config
from .models import MalformedTreeError, NodeKind, SourceRange


@dataclass
class SourceTree:
    """Parsed source code with its owner-function index."""

    language: str
    src: bytes
    tree: Any
    _owners: Dict[int, int] = field(default_factory=dict, init=False, repr=False)
    _var_declarations: Dict[int, List["NodePath"]] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self._owners = _index_owners(self.root)

    @property
    def root(self) -> Node:
        return self.tree.root_node

    @property
    def root_path(self) -> "NodePath":
        return NodePath(self.root, self)

    def owner_of(self, node: Node) -> int:
        """Id of the innermost function owning `node` (the root id at module level)."""
        current: Optional[Node] = node
        while current is not None:
            owner = self._owners.get(current.id)
            if owner is not None:
                return owner
            current = current.parent
        return self.root.id

    def var_declarations(self, body: Node) -> List["NodePath"]:
        """`var` declarations in a function body or program, outside nested functions."""
        found = self._var_declarations.get(body.id)
        if found is None:
            found = []
            stack = list(reversed(body.named_children))
            while stack:
                node = stack.pop()
                if node.type in config.SCOPE_TYPES:
                    continue
                if node.type == "variable_declaration":
                    found.append(NodePath(node, self))
                stack.extend(reversed(node.named_children))
            self._var_declarations[body.id] = found
        return found

    def iter_paths(self) -> Iterator["NodePath"]:
        """Iterate over all named nodes in source order."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield NodePath(node, self)
            for child in reversed(node.named_children):
                stack.append(child)


def _index_owners(root: Node) -> Dict[int, int]:
    owners: Dict[int, int] = {}
    stack = [(root, root.id)]
    while stack:
        node, owner = stack.pop()
        if node.type in config.SCOPE_TYPES:
            owner = node.id
        owners[node.id] = owner
        for child in node.named_children:
            stack.append((child, owner))
    return owners


@dataclass(frozen=True, eq=False)
class NodePath:
    """Read-only handle onto a syntax-tree node."""

    node: Node
    tree: SourceTree

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodePath):
            return NotImplemented
        return self.tree is other.tree and self.node.id == other.node.id

    def __hash__(self) -> int:
        return hash((id(self.tree), self.node.id))

    def __repr__(self) -> str:
        (line, char) = self.node.start_point
        return f"NodePath({self.node.type} @ {line}:{char})"

    @property
    def type(self) -> str:
        return self.node.type

    @property
    def kind(self) -> NodeKind:
        return NodeKind.of(self.node)

    @property
    def text(self) -> str:
        return self.tree.src[self.node.start_byte : self.node.end_byte].decode("utf-8", errors="replace")

    @property
    def range(self) -> SourceRange:
        return SourceRange.of(self.node)

    @property
    def parent(self) -> Optional["NodePath"]:
        parent = self.node.parent
        return NodePath(parent, self.tree) if parent is not None else None

    @property
    def scope(self) -> int:
        """Id of the function (or program) that lexically owns this node."""
        return self.tree.owner_of(self.node)

    @property
    def named_children(self) -> List["NodePath"]:
        return [NodePath(c, self.tree) for c in self.node.named_children if c.type != "comment"]

    def first_named_child(self) -> Optional["NodePath"]:
        children = self.named_children
        return children[0] if children else None

    def get(self, field_name: str) -> Optional["NodePath"]:
        """Child stored under a grammar field, or None."""
        child = self.node.child_by_field_name(field_name)
        return NodePath(child, self.tree) if child is not None else None

    def require(self, field_name: str) -> "NodePath":
        """Child stored under a grammar field. Raises MalformedTreeError if missing."""
        child = self.get(field_name)
        if child is None:
            raise MalformedTreeError(self.type, field_name)
        return child

    def ancestors(self) -> Iterator["NodePath"]:
        current = self.parent
        while current is not None:
            yield current
            current = current.parent

    def unwrap(self) -> "NodePath":
        """Strip parentheses and type-only wrappers around an expression."""
        path = self
        while path.type in config.TRANSPARENT_TYPES:
            inner = path.first_named_child()
            if inner is None:
                break
            path = inner
        return path


def string_value(path: Optional[NodePath]) -> Optional[str]:
    """Value of a string literal node, or None for anything else."""
    if path is None or path.type != "string":
        return None
    return path.text[1:-1]
