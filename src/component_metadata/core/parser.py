from functools import cache
from pathlib import Path
from typing import cast

from tree_sitter import Node, Query, Tree
from tree_sitter_language_pack import SupportedLanguage, get_language, get_parser

from component_metadata.errors import ParseFailure


@cache
def load_query(language: str, query_type: str) -> Query:
    queries_dir = Path(__file__).parent.parent / "queries"
    query_path = queries_dir / f"{language}_{query_type}.scm"
    if not query_path.exists():
        raise FileNotFoundError(f"Query file not found: {query_path}")
    query_text = query_path.read_text(encoding="utf-8")
    return Query(get_language(cast(SupportedLanguage, language)), query_text)


def parse_source(source_bytes: bytes, language: str) -> Tree:
    """Parse ``source_bytes`` and reject trees containing syntax errors."""
    parser = get_parser(cast(SupportedLanguage, language))
    tree = parser.parse(source_bytes)

    root = tree.root_node
    if root.has_error:
        bad = _first_error_node(root)
        row, column = bad.start_point if bad is not None else root.start_point
        raise ParseFailure(f"Could not parse {language} source", row=row, column=column)

    return tree


def _first_error_node(node: Node) -> Node | None:
    if node.is_error or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error_node(child)
            if found is not None:
                return found
    return None
