"""Unit tests for locating Metadata decorators on class definitions."""

from tree_sitter import Query, QueryCursor

from component_metadata.core.locator import locate_annotations
from component_metadata.core.parser import parse_source


def _locate(source: str, language: str = "javascript"):
    source_bytes = source.encode("utf-8")
    tree = parse_source(source_bytes, language)
    return source_bytes, locate_annotations(tree, language)


def _decorator_text(source_bytes: bytes, start: int, end: int) -> str:
    return source_bytes[start:end].decode("utf-8")


class TestClassesQuery:
    def test_captures_class_declarations_and_names(self, javascript_classes_query: Query, javascript_parser) -> None:
        source = b"class First {}\nconst Second = class Named {};\n"
        tree = javascript_parser.parse(source)
        names: list[str] = []
        for _, captures in QueryCursor(javascript_classes_query).matches(tree.root_node):
            names.extend(node.text.decode() for node in captures.get("class.name", []))
        assert sorted(names) == ["First", "Named"]

    def test_skips_anonymous_class_expressions(self, javascript_classes_query: Query, javascript_parser) -> None:
        tree = javascript_parser.parse(b"const Anonymous = class {};\n")
        matches = QueryCursor(javascript_classes_query).matches(tree.root_node)
        assert matches == []


class TestLocateAnnotations:
    def test_no_decorators(self) -> None:
        _, located = _locate("class Plain {}\n")
        assert located == []

    def test_single_annotation(self) -> None:
        source_bytes, located = _locate("@Metadata({ thumbnail: './a.png' })\nclass Button {}\n")
        assert len(located) == 1
        match = located[0].match
        assert match.class_name == "Button"
        assert match.start_point.row == 0
        assert match.start_point.column == 0
        assert _decorator_text(source_bytes, match.start_byte, match.end_byte) == "@Metadata({ thumbnail: './a.png' })"
        assert located[0].argument is not None
        assert located[0].argument.type == "object"

    def test_only_annotated_classes_are_returned(self) -> None:
        source = "class A {}\n@Metadata({ x: 1 })\nclass B {}\nclass C {}\n"
        _, located = _locate(source)
        assert [item.match.class_name for item in located] == ["B"]

    def test_matches_in_source_order(self) -> None:
        source = "@Metadata({})\nclass First {}\n@Metadata({})\nclass Second {}\n"
        _, located = _locate(source)
        assert [item.match.class_name for item in located] == ["First", "Second"]

    def test_first_matching_decorator_wins(self) -> None:
        source = "@Other()\n@Metadata({ order: 1 })\n@Metadata({ order: 2 })\nclass Twice {}\n"
        source_bytes, located = _locate(source)
        assert len(located) == 1
        match = located[0].match
        assert _decorator_text(source_bytes, match.start_byte, match.end_byte) == "@Metadata({ order: 1 })"

    def test_other_decorators_do_not_match(self) -> None:
        source = "@Component({ thumbnail: './a.png' })\n@ns.Metadata({})\n@Metadata\nclass Nope {}\n"
        _, located = _locate(source)
        assert located == []

    def test_call_without_argument_is_not_a_match(self) -> None:
        _, located = _locate("@Metadata()\nclass Empty {}\n")
        assert located == []

    def test_empty_first_call_hides_later_annotations(self) -> None:
        _, located = _locate("@Metadata()\n@Metadata({ x: 1 })\nclass Empty {}\n")
        assert located == []

    def test_nested_annotation_is_ordered_after_enclosing_one(self) -> None:
        source = "@Metadata({ inner: @Metadata({ x: 1 }) class Inner {} })\nclass Outer {}\n"
        _, located = _locate(source)
        assert [item.match.class_name for item in located] == ["Outer", "Inner"]

    def test_decorator_after_export(self) -> None:
        source_bytes, located = _locate("export @Metadata({ x: 1 }) class Exported {}\n")
        assert [item.match.class_name for item in located] == ["Exported"]
        match = located[0].match
        assert _decorator_text(source_bytes, match.start_byte, match.end_byte) == "@Metadata({ x: 1 })"

    def test_decorator_before_export(self) -> None:
        _, located = _locate("@Metadata({ x: 1 })\nexport class Exported {}\n")
        assert [item.match.class_name for item in located] == ["Exported"]

    def test_class_expression_with_name(self) -> None:
        _, located = _locate("const Widget = @Metadata({ x: 1 }) class Widget {};\n")
        assert [item.match.class_name for item in located] == ["Widget"]

    def test_class_with_jsx_body(self) -> None:
        source = (
            "@Metadata({ thumbnail: './a.png' })\n"
            "class Card {\n"
            "  render() {\n"
            "    return <div className=\"card\">{this.props.title}</div>;\n"
            "  }\n"
            "}\n"
        )
        _, located = _locate(source)
        assert [item.match.class_name for item in located] == ["Card"]


class TestTypeScript:
    def test_typescript_class(self) -> None:
        source = "@Metadata({ thumbnail: './a.png' })\nclass Typed {\n  title: string = '';\n}\n"
        _, located = _locate(source, "typescript")
        assert [item.match.class_name for item in located] == ["Typed"]

    def test_abstract_class(self) -> None:
        source = "@Metadata({ thumbnail: './a.png' })\nabstract class Base {}\n"
        _, located = _locate(source, "typescript")
        assert [item.match.class_name for item in located] == ["Base"]

    def test_tsx_class(self) -> None:
        source = (
            "@Metadata({ thumbnail: './a.png' })\n"
            "export class Panel {\n"
            "  render(): JSX.Element {\n"
            "    return <section />;\n"
            "  }\n"
            "}\n"
        )
        _, located = _locate(source, "tsx")
        assert [item.match.class_name for item in located] == ["Panel"]
