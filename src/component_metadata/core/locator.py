import logging
from dataclasses import dataclass

from tree_sitter import Node, QueryCursor, Tree

from component_metadata.core.parser import load_query
from component_metadata.models import AnnotationMatch, Position

logger = logging.getLogger(__name__)

ANNOTATION_NAME = "Metadata"


@dataclass(frozen=True)
class LocatedAnnotation:
    """A matched decorator together with the argument node the extractor reads."""

    match: AnnotationMatch
    argument: Node


def find_class_nodes(tree: Tree, language: str) -> list[tuple[Node, str]]:
    """Return ``(class_node, class_name)`` pairs in source order."""
    cursor = QueryCursor(load_query(language, "classes"))
    found: dict[int, tuple[Node, str]] = {}
    for _, captures in cursor.matches(tree.root_node):
        class_nodes = captures.get("class", [])
        name_nodes = captures.get("class.name", [])
        if not class_nodes or not name_nodes:
            continue
        node = class_nodes[0]
        found[node.start_byte] = (node, _text(name_nodes[0]))
    return [found[key] for key in sorted(found)]


def class_decorators(class_node: Node) -> list[Node]:
    """Decorators attached to ``class_node`` in source order.

    ``@dec export class X {}`` attaches ``@dec`` to the export statement, so
    those come before the ones on the class itself.
    """
    decorators: list[Node] = []
    parent = class_node.parent
    if parent is not None and parent.type == "export_statement":
        declaration = parent.child_by_field_name("declaration")
        value = parent.child_by_field_name("value")
        if class_node in (declaration, value):
            decorators.extend(parent.children_by_field_name("decorator"))
    decorators.extend(class_node.children_by_field_name("decorator"))
    return decorators


def find_annotation(decorators: list[Node]) -> tuple[Node, Node] | None:
    """Return the first ``Metadata(...)`` decorator and its first argument.

    Only a call whose callee is the bare identifier ``Metadata`` qualifies;
    any later qualifying decorators are left alone. When that first call has
    no argument the class counts as unannotated.
    """
    for decorator in decorators:
        call = _decorator_call(decorator)
        if call is None:
            continue
        callee = call.child_by_field_name("function")
        if callee is None or callee.type != "identifier" or _text(callee) != ANNOTATION_NAME:
            continue
        argument = _first_argument(call.child_by_field_name("arguments"))
        if argument is None:
            return None
        return decorator, argument
    return None


def locate_annotations(tree: Tree, language: str) -> list[LocatedAnnotation]:
    """Read-only pass: one entry per class carrying a ``Metadata`` decorator.

    Entries are ordered by decorator position, so an annotation always comes
    before any annotation nested inside its argument.
    """
    located: list[LocatedAnnotation] = []
    for class_node, class_name in find_class_nodes(tree, language):
        result = find_annotation(class_decorators(class_node))
        if result is None:
            logger.debug("Class %s has no %s annotation", class_name, ANNOTATION_NAME)
            continue
        decorator, argument = result
        match = AnnotationMatch(
            class_name=class_name,
            start_byte=decorator.start_byte,
            end_byte=decorator.end_byte,
            start_point=Position(row=decorator.start_point[0], column=decorator.start_point[1]),
        )
        located.append(LocatedAnnotation(match=match, argument=argument))
    return sorted(located, key=lambda item: item.match.start_byte)


def _decorator_call(decorator: Node) -> Node | None:
    for child in decorator.named_children:
        if child.type == "call_expression":
            return child
    return None


def _first_argument(arguments: Node | None) -> Node | None:
    if arguments is None:
        return None
    for child in arguments.named_children:
        if child.type != "comment":
            return child
    return None


def _text(node: Node) -> str:
    return (node.text or b"").decode("utf-8")
