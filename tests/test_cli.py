"""CLI tests."""

from __future__ import annotations

import json
from pathlib import Path

from reactdoc.cli import main

SOURCE = """import React from 'react';

export function Card({ title }) {
  return <article>{title}</article>;
}

export const format = (value) => value.toFixed(2);
"""


def _write(tmp_path: Path) -> Path:
    f = tmp_path / "Card.jsx"
    f.write_text(SOURCE, encoding="utf-8")
    return f


def test_components_lists_definitions(tmp_path: Path, capsys):
    f = _write(tmp_path)

    assert main(["components", str(f)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [f"{f}:3 stateless Card"]


def test_components_json(tmp_path: Path, capsys):
    f = _write(tmp_path)

    assert main(["components", "--json", str(f)]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {str(f): [{"kind": "stateless", "name": "Card", "line": 3, "char": 7}]}


def test_components_missing_file(tmp_path: Path, capsys):
    f = _write(tmp_path)

    assert main(["components", str(tmp_path / "missing.jsx"), str(f)]) == 1
    captured = capsys.readouterr()
    assert "Error reading" in captured.err
    assert "Card" in captured.out


def test_check(tmp_path: Path, capsys):
    f = _write(tmp_path)

    assert main(["check", str(f), "Card"]) == 0
    assert main(["check", str(f), "format"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Card: component",
        "format: not a component",
    ]

    assert main(["check", str(f), "Nope"]) == 1
    assert "Not found" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "components" in capsys.readouterr().out
