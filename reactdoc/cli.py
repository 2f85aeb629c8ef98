#!/usr/bin/env python3
"""
reactdoc CLI - Static React component discovery

Usage:
    reactdoc components <file>...      List component definitions in files
    reactdoc check <file> <name>       Tell whether a named function is a component
"""

import argparse
import json
import logging
import sys

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="reactdoc",
        description="reactdoc: find React components by static inspection",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    reactdoc components src/Button.jsx src/Card.tsx
    reactdoc components --json src/Button.jsx
    reactdoc check src/Button.jsx renderIcon
        """
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug output to stderr")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # components command
    components_parser = subparsers.add_parser("components", help="List component definitions")
    components_parser.add_argument("files", nargs="+", help="Source files to inspect")
    components_parser.add_argument("--json", "-j", action="store_true", help="Output as JSON")

    # check command
    check_parser = subparsers.add_parser("check", help="Classify one named function")
    check_parser.add_argument("file", help="Source file")
    check_parser.add_argument("name", help="Function, variable or property name")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "components":
        return cmd_components(args)
    elif args.command == "check":
        return cmd_check(args)

    return 0


def cmd_components(args):
    """Handle components command."""
    from .finder import find_components_in_file

    status = 0
    results = {}
    for file_path in args.files:
        try:
            results[file_path] = find_components_in_file(file_path)
        except OSError as e:
            print(f"Error reading {file_path}: {e}", file=sys.stderr)
            status = 1

    if args.json:
        payload = {path: [d.to_dict() for d in defs] for path, defs in results.items()}
        print(json.dumps(payload, indent=2))
        return status

    for file_path, defs in results.items():
        for d in defs:
            print(f"{file_path}:{d.range.start_line + 1} {d.kind.value} {d.name or '<anonymous>'}")

    return status


def cmd_check(args):
    """Handle check command."""
    from .core.classifier import is_stateless_component
    from .parser import parse_file

    try:
        tree = parse_file(args.file)
    except OSError as e:
        print(f"Error reading {args.file}: {e}", file=sys.stderr)
        return 1
    if tree is None:
        print(f"Unsupported file type: {args.file}", file=sys.stderr)
        return 1

    candidate = _find_named(tree, args.name)
    if candidate is None:
        print(f"Not found: {args.name}", file=sys.stderr)
        return 1

    verdict = is_stateless_component(candidate)
    logger.debug("Classified %r as %s", candidate, verdict)
    print(f"{args.name}: {'component' if verdict else 'not a component'}")
    return 0


def _find_named(tree, name):
    """First declaration, declarator value or property entry called `name`."""
    for path in tree.iter_paths():
        t = path.type
        if t in {"function_declaration", "generator_function_declaration", "method_definition"}:
            ident = path.get("name")
            if ident is not None and ident.text == name:
                return path
        elif t == "variable_declarator":
            ident = path.get("name")
            value = path.get("value")
            if ident is not None and value is not None and ident.text == name:
                return value.unwrap()
        elif t == "pair":
            key = path.get("key")
            if key is not None and key.text.strip("\"'") == name:
                return path
    return None


if __name__ == "__main__":
    sys.exit(main())
