"""
reactdoc: Static React component discovery for documentation tooling.

Main interface: find_component_definitions(), is_stateless_component()
"""

__version__ = "0.1.0"

from .core import classify, is_stateless_component
from .finder import find_component_definitions, find_components_in_file
from .parser import parse_file, parse_source

__all__ = [
    "classify",
    "find_component_definitions",
    "find_components_in_file",
    "is_stateless_component",
    "parse_file",
    "parse_source",
]
