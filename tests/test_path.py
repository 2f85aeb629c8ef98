"""Parser and NodePath tests."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from reactdoc.config import detect_language
from reactdoc.core.models import MalformedTreeError, NodeKind
from reactdoc.core.path import string_value
from reactdoc.parser import parse_file, parse_source


def _parse(text: str, *, file_path: str = "x.jsx"):
    tree = parse_source(dedent(text).lstrip("\n"), file_path=Path(file_path))
    assert tree is not None
    return tree


def test_detect_language():
    assert detect_language("src/App.jsx") == "javascript"
    assert detect_language("src/index.js") == "javascript"
    assert detect_language("src/App.TSX") == "tsx"
    assert detect_language("src/types.ts") == "typescript"
    assert detect_language("main.py") is None
    assert detect_language("Makefile") is None


def test_parse_source_rejects_unsupported_files():
    assert parse_source("x = 1\n", file_path=Path("x.py")) is None


def test_parse_file(tmp_path: Path):
    f = tmp_path / "Button.jsx"
    f.write_text("const Button = () => <button />;\n", encoding="utf-8")

    tree = parse_file(f)
    assert tree is not None
    assert tree.language == "javascript"
    assert tree.root.type == "program"

    with pytest.raises(OSError):
        parse_file(tmp_path / "missing.jsx")


def test_return_scopes_follow_owning_function():
    tree = _parse(
        """
        function outer() {
          const inner = () => {
            return 1;
          };
          return 2;
        }
        """
    )
    outer = next(p for p in tree.iter_paths() if p.type == "function_declaration")
    inner = next(p for p in tree.iter_paths() if p.type == "arrow_function")
    returns = [p for p in tree.iter_paths() if p.kind is NodeKind.RETURN]

    assert len(returns) == 2
    assert returns[0].scope == inner.scope
    assert returns[1].scope == outer.scope
    assert inner.scope != outer.scope
    # module-level nodes belong to the program
    assert tree.root_path.scope == tree.root.id


def test_node_kinds():
    tree = _parse(
        """
        import React from 'react';
        const obj = { key: 1, method() {} };
        const f = function () {};
        const g = () => a && b;
        const h = a + b;
        const t = a ? <A /> : null;
        class K {}
        """
    )
    kinds = {p.kind for p in tree.iter_paths()}
    assert {
        NodeKind.IMPORT,
        NodeKind.OBJECT,
        NodeKind.PROPERTY,
        NodeKind.FUNCTION_EXPRESSION,
        NodeKind.ARROW_FUNCTION,
        NodeKind.LOGICAL,
        NodeKind.CONDITIONAL,
        NodeKind.ELEMENT,
        NodeKind.CLASS,
        NodeKind.DECLARATOR,
        NodeKind.IDENTIFIER,
    } <= kinds

    plus = next(p for p in tree.iter_paths() if p.type == "binary_expression" and "+" in p.text)
    assert plus.kind is NodeKind.OTHER


def test_get_and_require():
    tree = _parse("const t = a ? b : c;\n")
    ternary = next(p for p in tree.iter_paths() if p.type == "ternary_expression")

    assert ternary.get("consequence").text == "b"
    assert ternary.require("alternative").text == "c"
    assert ternary.get("nope") is None
    with pytest.raises(MalformedTreeError) as exc:
        ternary.require("nope")
    assert exc.value.node_type == "ternary_expression"
    assert exc.value.field == "nope"


def test_paths_compare_by_node():
    tree = _parse("use(x);\n")
    first = next(p for p in tree.iter_paths() if p.type == "identifier" and p.text == "x")
    again = next(p for p in tree.iter_paths() if p.type == "identifier" and p.text == "x")

    assert first == again
    assert hash(first) == hash(again)
    assert first.parent.type == "arguments"
    assert first != first.parent


def test_unwrap_and_comments():
    tree = _parse(
        """
        const v = (
          // comment
          (<div />)
        );
        """
    )
    paren = next(p for p in tree.iter_paths() if p.type == "parenthesized_expression")
    assert paren.unwrap().type == "jsx_self_closing_element"
    assert all(c.type != "comment" for c in paren.named_children)


def test_string_value():
    tree = _parse("use('single', \"double\", 3);\n")
    args = next(p for p in tree.iter_paths() if p.type == "arguments").named_children
    assert [string_value(a) for a in args] == ["single", "double", None]
    assert string_value(None) is None
