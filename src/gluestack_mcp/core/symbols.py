"""
Export symbol extraction for component entry files.

A component's entry file re-exports the parts it is composed of::

    export { Button, ButtonText, ButtonGroup as Group };

The extractor parses the file with tree-sitter and walks the whole tree in
depth-first pre-order, classifying each node as a named export, a default
export assignment, or anything else. Every node's children are visited
regardless of its kind, so exports nested in ambient or conditional blocks
are still found.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import Enum
from functools import lru_cache
from pathlib import Path

from tree_sitter import Language, Node, Parser

from .errors import ParseFailure

logger = logging.getLogger(__name__)

DEFAULT_EXPORT = "default"

# `export default function () {}` and friends are declarations, not assignments
_DECLARATION_VALUES = {"function", "function_expression", "generator_function", "class"}


class ExportKind(str, Enum):
    NAMED = "named_export"
    DEFAULT_ASSIGNMENT = "default_export_assignment"
    OTHER = "other"


@lru_cache(maxsize=None)
def _language(suffix: str) -> Language:
    """Grammar for a file suffix: TSX for .tsx, TypeScript for .ts, else JavaScript."""
    if suffix in (".ts", ".mts", ".cts"):
        import tree_sitter_typescript as tsts

        return Language(tsts.language_typescript())
    if suffix == ".tsx":
        import tree_sitter_typescript as tsts

        return Language(tsts.language_tsx())

    import tree_sitter_javascript as tsjs

    return Language(tsjs.language())


def classify(node: Node) -> ExportKind:
    """Tag a syntax node with the export kind it represents."""
    if node.type != "export_statement":
        return ExportKind.OTHER

    if any(child.type == "export_clause" for child in node.children):
        return ExportKind.NAMED

    value = node.child_by_field_name("value")
    if value is not None and value.type not in _DECLARATION_VALUES:
        return ExportKind.DEFAULT_ASSIGNMENT
    # TypeScript `export = Foo;`
    if any(child.type == "=" for child in node.children):
        return ExportKind.DEFAULT_ASSIGNMENT

    return ExportKind.OTHER


def _specifier_name(specifier: Node) -> str:
    """The bound name of an export specifier: the alias when present."""
    bound = specifier.child_by_field_name("alias") or specifier.child_by_field_name("name")
    text = bound.text.decode("utf-8") if bound is not None and bound.text else ""
    if bound is not None and bound.type == "string":
        text = text.strip("'\"")
    return text


def _named_exports(node: Node) -> Iterator[str]:
    for clause in node.children:
        if clause.type != "export_clause":
            continue
        for specifier in clause.children:
            if specifier.type == "export_specifier":
                yield _specifier_name(specifier)


def _walk(root: Node) -> Iterator[Node]:
    """Depth-first pre-order traversal without recursion."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def collect_exports(root: Node) -> list[str]:
    """Collect exported names under ``root`` in traversal order."""
    names: list[str] = []
    for node in _walk(root):
        kind = classify(node)
        if kind is ExportKind.NAMED:
            names.extend(_named_exports(node))
        elif kind is ExportKind.DEFAULT_ASSIGNMENT:
            names.append(DEFAULT_EXPORT)
    return names


def extract_exports(source: str, suffix: str = ".tsx", path: Path | None = None) -> list[str]:
    """Parse source text and return every exported name it binds.

    Raises:
        ParseFailure: If the source contains syntax errors
    """
    parser = Parser(_language(suffix))
    tree = parser.parse(source.encode("utf-8"))
    if tree.root_node.has_error:
        raise ParseFailure(path or Path(f"<source{suffix}>"), "syntax errors in source")
    return collect_exports(tree.root_node)


def child_symbols(canonical: str, entry_file: Path) -> list[str]:
    """Return the child symbols a component's entry file exports.

    The component's own canonical name is left out.

    Raises:
        ParseFailure: If the file cannot be read or parsed
    """
    try:
        source = entry_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ParseFailure(entry_file, str(e)) from e

    exports = extract_exports(source, entry_file.suffix, entry_file)
    symbols = [name for name in exports if name != canonical]
    logger.debug("%s exports %d child symbols", canonical, len(symbols))
    return symbols
