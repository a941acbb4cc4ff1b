import json

from component_metadata.core.ports.host import EmissionHost
from component_metadata.models import Artifact, MetadataRecord

ARTIFACT_SUFFIX = ".component.json"


def artifact_name(class_name: str) -> str:
    return f"{class_name}{ARTIFACT_SUFFIX}"


def render_artifact(class_name: str, record: MetadataRecord) -> Artifact:
    content = json.dumps(record.to_document(), indent=2, ensure_ascii=False) + "\n"
    return Artifact(name=artifact_name(class_name), content=content)


def emit_artifact(host: EmissionHost, class_name: str, record: MetadataRecord) -> Artifact:
    artifact = render_artifact(class_name, record)
    host.emit_file(artifact.name, artifact.content)
    return artifact
