"""Shared fixtures and helpers for tests."""

import shutil
from pathlib import Path

import pytest
from tree_sitter import Language, Node, Parser, Query
from tree_sitter_language_pack import get_language, get_parser

from component_metadata.hosts.memory import InMemoryHost

_REPO_ROOT = Path(__file__).parent.parent
_FIXTURES = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def queries_dir() -> Path:
    """Return the path to the queries directory."""
    return _REPO_ROOT / "src" / "component_metadata" / "queries"


@pytest.fixture
def javascript_parser() -> Parser:
    """Return a tree-sitter parser for JavaScript."""
    return get_parser("javascript")


@pytest.fixture
def javascript_language() -> Language:
    """Return the tree-sitter JavaScript language."""
    return get_language("javascript")


@pytest.fixture
def javascript_classes_query(queries_dir: Path, javascript_language: Language) -> Query:
    """Load the JavaScript class query."""
    query_text = (queries_dir / "javascript_classes.scm").read_text()
    return Query(javascript_language, query_text)


@pytest.fixture
def context_dir(tmp_path: Path) -> Path:
    """A build context containing ``sample.png`` and ``assets/button.png``."""
    shutil.copy(_FIXTURES / "sample.png", tmp_path / "sample.png")
    (tmp_path / "assets").mkdir()
    shutil.copy(_FIXTURES / "sample.png", tmp_path / "assets" / "button.png")
    return tmp_path


@pytest.fixture
def sample_source() -> str:
    return (_FIXTURES / "sample.js").read_text(encoding="utf-8")


@pytest.fixture
def host() -> InMemoryHost:
    return InMemoryHost()


def parse_expression(parser: Parser, expression: str) -> Node:
    """Parse ``x = <expression>;`` and return the right-hand side node."""
    tree = parser.parse(f"x = {expression};".encode())
    statement = tree.root_node.named_children[0]
    assignment = statement.named_children[0]
    right = assignment.child_by_field_name("right")
    assert right is not None
    return right
