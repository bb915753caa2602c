"""Cellbook: a notebook tree (Notebook > Page > Cell) with pluggable exporters.

Nodes dispatch to a NodeExporter, so new output formats are added by
writing an exporter, never by touching the node classes.
"""

__all__ = [
    "Node",
    "TypedNode",
    "NodeExporter",
    "Notebook",
    "Page",
    "Cell",
    "TextCell",
    "SourceCodeCell",
    "ImageCell",
    "HtmlExporter",
    "XmlExporter",
    "exporter_for",
    "export_text",
    "parse_text",
    "parse_file",
]

__version__ = "0.1.0"

from .tree import Node, TypedNode  # noqa: E402
from .model import (  # noqa: E402
    Cell,
    ImageCell,
    NodeExporter,
    Notebook,
    Page,
    SourceCodeCell,
    TextCell,
)
from .export import HtmlExporter, XmlExporter, export_text, exporter_for  # noqa: E402
from .parse import parse_file, parse_text  # noqa: E402
