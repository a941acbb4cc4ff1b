"""Decorator removal and source regeneration.

The tree itself is never mutated. The rewriter turns each located
annotation into a byte-range edit and ``generate_source`` applies every
edit in a single pass over the original bytes.
"""

from collections.abc import Iterable

from component_metadata.models import AnnotationMatch, SourceEdit

_TRAILING_WHITESPACE = b" \t\r\n\f\v"


def removal_edit(source_bytes: bytes, match: AnnotationMatch) -> SourceEdit:
    """Edit removing the matched decorator and the whitespace that follows it.

    The next token (another decorator, ``export`` or ``class``) then starts
    where the removed decorator did, so no empty decorator line is left.
    """
    end = match.end_byte
    while end < len(source_bytes) and source_bytes[end] in _TRAILING_WHITESPACE:
        end += 1
    return SourceEdit(start_byte=match.start_byte, end_byte=end)


def generate_source(source_bytes: bytes, edits: Iterable[SourceEdit]) -> str:
    ordered = sorted(edits, key=lambda edit: edit.start_byte)
    chunks: list[bytes] = []
    cursor = 0
    for edit in ordered:
        if edit.start_byte < cursor:
            raise ValueError(f"Overlapping edit at byte {edit.start_byte}")
        chunks.append(source_bytes[cursor : edit.start_byte])
        cursor = edit.end_byte
    chunks.append(source_bytes[cursor:])
    return b"".join(chunks).decode("utf-8")
