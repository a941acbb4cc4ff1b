from component_metadata.models import Artifact


class InMemoryHost:
    """Collects emitted artifacts and diagnostics without touching disk."""

    def __init__(self) -> None:
        self.artifacts: dict[str, str] = {}
        self.errors: list[str] = []

    def emit_file(self, name: str, content: str) -> None:
        self.artifacts[name] = content

    def emit_error(self, message: str) -> None:
        self.errors.append(message)

    def artifact_list(self) -> list[Artifact]:
        return [Artifact(name=name, content=content) for name, content in self.artifacts.items()]
