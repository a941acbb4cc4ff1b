"""Exception hierarchy for metadata extraction."""

from pathlib import Path


class ComponentMetadataError(Exception):
    """Base class for all errors raised by component_metadata."""


class ParseFailure(ComponentMetadataError):
    """The source text could not be parsed by the configured grammar."""

    def __init__(self, message: str, row: int | None = None, column: int | None = None) -> None:
        self.row = row
        self.column = column
        if row is not None and column is not None:
            message = f"{message} (line {row + 1}, column {column + 1})"
        super().__init__(message)


class ValidationFailure(ComponentMetadataError):
    """Metadata for a single class was rejected.

    Never escapes ``transform``: the pipeline reports it through the host's
    ``emit_error`` and moves on to the next class.
    """

    field: str = ""

    def __init__(self, message: str, class_name: str) -> None:
        self.class_name = class_name
        super().__init__(message)


class MissingName(ValidationFailure):
    field = "name"

    def __init__(self, class_name: str) -> None:
        super().__init__(f"Metadata for class '{class_name}' requires a non-empty 'name'.", class_name)


class MissingThumbnail(ValidationFailure):
    field = "thumbnail"

    def __init__(self, class_name: str) -> None:
        super().__init__(f"Metadata for class '{class_name}' requires a 'thumbnail'.", class_name)


class ThumbnailNotFound(ValidationFailure):
    field = "thumbnail"

    def __init__(self, class_name: str, path: Path) -> None:
        self.path = path
        super().__init__(f"Thumbnail for class '{class_name}' not found: {path}", class_name)
