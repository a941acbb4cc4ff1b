from collections.abc import Mapping
from pathlib import Path

from component_metadata.errors import MissingName, MissingThumbnail, ThumbnailNotFound
from component_metadata.models import EnvInfo, ExtractedValue, MetadataRecord

# Keys set by the pipeline itself; ``env`` always reflects the invocation.
_RESERVED_KEYS = frozenset({"name", "env"})


def build_record(class_name: str, extracted: ExtractedValue, context: Path) -> MetadataRecord:
    """Combine the class name, extracted fields and context into a record.

    An explicit ``name`` field overrides the class identifier. Non-mapping
    arguments contribute no fields.
    """
    fields: Mapping[str, ExtractedValue] = extracted if isinstance(extracted, Mapping) else {}
    return MetadataRecord(
        name=fields.get("name", class_name),
        attributes={key: value for key, value in fields.items() if key not in _RESERVED_KEYS},
        env=EnvInfo(context=str(context)),
    )


def validate_record(record: MetadataRecord, class_name: str) -> None:
    """Raise a ``ValidationFailure`` subclass for the first rule ``record`` breaks."""
    if not isinstance(record.name, str) or not record.name:
        raise MissingName(class_name)

    thumbnail = record.thumbnail
    if not isinstance(thumbnail, str) or not thumbnail:
        raise MissingThumbnail(class_name)

    thumbnail_path = (Path(record.env.context) / thumbnail).resolve()
    if not thumbnail_path.is_file():
        raise ThumbnailNotFound(class_name, thumbnail_path)
