from component_metadata.core.transform import extract_metadata, transform, transform_file
from component_metadata.errors import (
    ComponentMetadataError,
    MissingName,
    MissingThumbnail,
    ParseFailure,
    ThumbnailNotFound,
    ValidationFailure,
)
from component_metadata.hosts.filesystem import DirectoryHost
from component_metadata.hosts.memory import InMemoryHost
from component_metadata.models import Artifact, MetadataRecord, TransformResult

__all__ = [
    "Artifact",
    "ComponentMetadataError",
    "DirectoryHost",
    "InMemoryHost",
    "MetadataRecord",
    "MissingName",
    "MissingThumbnail",
    "ParseFailure",
    "ThumbnailNotFound",
    "TransformResult",
    "ValidationFailure",
    "extract_metadata",
    "transform",
    "transform_file",
]
