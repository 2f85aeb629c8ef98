"""Component finder tests."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from reactdoc.core.models import ComponentKind
from reactdoc.finder import find_component_definitions, find_components_in_file
from reactdoc.parser import parse_source

SOURCE = """
import React, { Component } from 'react';
import createReactClass from 'create-react-class';

export default function Page() {
  return <main />;
}

const Header = () => <header />;

function helper() {
  return 42;
}

class Panel extends Component {
  render() {
    return <div />;
  }
}

class Store {
  get() {
    return 1;
  }
}

const Legacy = createReactClass({
  render() {
    return <div />;
  },
  renderRow: function () {
    return <tr />;
  },
});
"""


def _find(text: str, *, file_path: str = "x.jsx"):
    tree = parse_source(dedent(text).lstrip("\n"), file_path=Path(file_path))
    assert tree is not None
    return find_component_definitions(tree)


def test_finds_all_component_kinds_in_source_order():
    defs = _find(SOURCE)
    assert [(d.kind, d.name) for d in defs] == [
        (ComponentKind.STATELESS, "Page"),
        (ComponentKind.STATELESS, "Header"),
        (ComponentKind.CLASS, "Panel"),
        (ComponentKind.CREATE_CLASS, "Legacy"),
    ]


def test_ranges_point_at_definitions():
    text = dedent(SOURCE).lstrip("\n")
    defs = {d.name: d for d in _find(SOURCE)}
    lines = text.splitlines()

    assert "function Page" in lines[defs["Page"].range.start_line]
    assert "() => <header />" in lines[defs["Header"].range.start_line]
    assert "class Panel" in lines[defs["Panel"].range.start_line]
    # createClass components point at their spec object
    assert "createReactClass({" in lines[defs["Legacy"].range.start_line]


def test_object_methods_and_anonymous_exports():
    defs = _find(
        """
        export const icons = {
          renderStar() {
            return <svg />;
          },
          'render-moon': () => <svg />,
          size: 12,
        };

        export default () => <div />;
        """
    )
    assert [(d.kind, d.name) for d in defs] == [
        (ComponentKind.STATELESS, "renderStar"),
        (ComponentKind.STATELESS, "render-moon"),
        (ComponentKind.STATELESS, "default"),
    ]


def test_create_class_spec_held_in_a_variable():
    defs = _find(
        """
        import React from 'react';

        const spec = {
          render() {
            return <div />;
          },
        };
        export const Legacy = React.createClass(spec);
        """
    )
    assert [(d.kind, d.name) for d in defs] == [(ComponentKind.CREATE_CLASS, "Legacy")]


def test_class_members_are_skipped():
    defs = _find(
        """
        class Toolbar {
          render() {
            return <nav />;
          }
          renderItem = () => <li />;
        }
        """
    )
    assert defs == []


def test_to_dict():
    (d,) = _find("const Header = () => <header />;\n")
    assert d.to_dict() == {"kind": "stateless", "name": "Header", "line": 1, "char": 15}


def test_find_components_in_file(tmp_path: Path):
    jsx = tmp_path / "App.jsx"
    jsx.write_text(dedent(SOURCE).lstrip("\n"), encoding="utf-8")
    assert [d.name for d in find_components_in_file(jsx)] == ["Page", "Header", "Panel", "Legacy"]

    py = tmp_path / "app.py"
    py.write_text("x = 1\n", encoding="utf-8")
    assert find_components_in_file(py) == []

    with pytest.raises(OSError):
        find_components_in_file(tmp_path / "missing.jsx")
