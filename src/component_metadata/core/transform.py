import logging
from pathlib import Path

from component_metadata.core.emit import emit_artifact
from component_metadata.core.extract import extract_value
from component_metadata.core.languages import normalize_language, resolve_language
from component_metadata.core.locator import locate_annotations
from component_metadata.core.parser import parse_source
from component_metadata.core.ports.host import EmissionHost
from component_metadata.core.rewrite import generate_source, removal_edit
from component_metadata.core.validate import build_record, validate_record
from component_metadata.errors import ParseFailure, ValidationFailure
from component_metadata.hosts.memory import InMemoryHost
from component_metadata.models import SourceEdit, TransformResult

logger = logging.getLogger(__name__)


def transform(
    source: str,
    context: str | Path,
    host: EmissionHost,
    language: str = "javascript",
) -> str:
    """Strip ``Metadata`` decorators from ``source`` and emit their artifacts.

    Each valid annotation is emitted through ``host.emit_file``; invalid ones
    are reported through ``host.emit_error`` and do not stop the remaining
    classes. Returns the rewritten source. Raises ``ParseFailure`` when the
    source does not parse.
    """
    resolved_language = normalize_language(language)
    base_dir = Path(context).resolve()
    try:
        source_bytes = source.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ParseFailure(f"Source is not encodable as UTF-8: {exc.reason}") from exc

    tree = parse_source(source_bytes, resolved_language)
    located = locate_annotations(tree, resolved_language)
    if not located:
        return source

    edits: list[SourceEdit] = []
    emitted = 0
    processed = 0
    for annotation in located:
        class_name = annotation.match.class_name
        if edits and annotation.match.start_byte < edits[-1].end_byte:
            # Nested inside the previous annotation's argument, removed with it.
            logger.debug("Skipping %s annotation nested in an enclosing one", class_name)
            continue
        processed += 1
        edits.append(removal_edit(source_bytes, annotation.match))

        record = build_record(class_name, extract_value(annotation.argument), base_dir)
        try:
            validate_record(record, class_name)
        except ValidationFailure as exc:
            logger.warning("Rejected metadata for %s: %s", class_name, exc)
            host.emit_error(str(exc))
            continue

        artifact = emit_artifact(host, class_name, record)
        emitted += 1
        logger.debug("Emitted %s", artifact.name)

    logger.info(
        "Processed %d annotated class(es): %d artifact(s), %d rejected",
        processed,
        emitted,
        processed - emitted,
    )
    return generate_source(source_bytes, edits)


def transform_file(
    path: str | Path,
    context: str | Path,
    host: EmissionHost,
    language: str | None = None,
) -> str:
    file_path = Path(path)
    resolved_language = resolve_language(language, file_path)

    try:
        source = file_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FileNotFoundError(f"File not found: {path}") from None
    except UnicodeDecodeError as exc:
        raise ParseFailure(f"{path} is not valid UTF-8: {exc.reason}") from exc

    return transform(source, context, host, resolved_language)


def extract_metadata(source: str, context: str | Path, language: str = "javascript") -> TransformResult:
    """Run ``transform`` against an in-memory host and collect everything it produced."""
    host = InMemoryHost()
    rewritten = transform(source, context, host, language)
    return TransformResult(source=rewritten, artifacts=host.artifact_list(), errors=list(host.errors))
