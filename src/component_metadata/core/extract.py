"""Static evaluation of decorator arguments.

Only literal syntax is destructured: strings, numbers, booleans, ``null``,
arrays and object literals. Every other node shape (identifiers, calls,
template strings, spreads, arithmetic) becomes ``None``. Nothing here ever
executes or resolves code, and nothing here raises on unexpected input.
"""

import logging
import re

from tree_sitter import Node

from component_metadata.models import ExtractedValue

logger = logging.getLogger(__name__)

_SIMPLE_ESCAPES = {
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "0": "\0",
}

_LINE_CONTINUATIONS = ("\r\n", "\n", "\r", "\u2028", "\u2029")

_LEGACY_OCTAL = re.compile(r"0[0-7]+")


def extract_value(node: Node | None) -> ExtractedValue:
    if node is None:
        return None

    kind = node.type
    if kind == "string":
        return _string_value(node)
    if kind == "number":
        return _number_value(_text(node))
    if kind == "true":
        return True
    if kind == "false":
        return False
    if kind in ("null", "undefined"):
        return None
    if kind == "object":
        return _object_value(node)
    if kind == "array":
        return [extract_value(child) for child in _significant_children(node)]

    logger.debug("Unsupported %s node at %s resolves to null", kind, node.start_point)
    return None


def _object_value(node: Node) -> dict[str, ExtractedValue]:
    result: dict[str, ExtractedValue] = {}
    for prop in _significant_children(node):
        if prop.type != "pair":
            logger.debug("Skipping %s in object literal at %s", prop.type, prop.start_point)
            continue
        key = _property_key(prop.child_by_field_name("key"))
        if key is None:
            continue
        result[key] = extract_value(prop.child_by_field_name("value"))
    return result


def _property_key(node: Node | None) -> str | None:
    if node is None:
        return None
    if node.type in ("property_identifier", "number"):
        return _text(node)
    if node.type == "string":
        return _string_value(node)
    logger.debug("Skipping non-static %s key at %s", node.type, node.start_point)
    return None


def _string_value(node: Node) -> str:
    parts: list[str] = []
    for child in node.named_children:
        if child.type == "escape_sequence":
            parts.append(_decode_escape(_text(child)))
        else:
            parts.append(_text(child))
    return "".join(parts)


def _decode_escape(sequence: str) -> str:
    body = sequence[1:]
    if body in _LINE_CONTINUATIONS:
        return ""
    if body in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[body]
    try:
        if body.startswith("u{"):
            return chr(int(body[2:-1], 16))
        if body.startswith(("u", "x")) and len(body) > 1:
            return chr(int(body[1:], 16))
        if body.isdigit():
            return chr(int(body, 8))
    except ValueError:
        return sequence
    # Any other escaped character stands for itself (\' \" \\ \/ ...).
    return body


def _number_value(literal: str) -> int | float | None:
    text = literal.replace("_", "")
    if text.endswith("n"):
        text = text[:-1]
    try:
        lowered = text.lower()
        if lowered.startswith("0x"):
            return int(text[2:], 16)
        if lowered.startswith("0o"):
            return int(text[2:], 8)
        if lowered.startswith("0b"):
            return int(text[2:], 2)
        if _LEGACY_OCTAL.fullmatch(text):
            return int(text, 8)
        if text.isdigit():
            return int(text)
        return float(text)
    except ValueError:
        logger.debug("Unparseable number literal %r resolves to null", literal)
        return None


def _significant_children(node: Node) -> list[Node]:
    return [child for child in node.named_children if child.type != "comment"]


def _text(node: Node) -> str:
    return (node.text or b"").decode("utf-8")
