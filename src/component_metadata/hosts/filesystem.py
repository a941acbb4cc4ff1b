import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class DirectoryHost:
    """Writes artifacts under ``artifact_dir`` and records diagnostics.

    Implements the ``EmissionHost`` protocol.
    """

    def __init__(self, artifact_dir: str | Path) -> None:
        self._artifact_dir = Path(artifact_dir)
        self.written: list[Path] = []
        self.errors: list[str] = []

    def emit_file(self, name: str, content: str) -> None:
        target = self._artifact_dir / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        self.written.append(target)
        logger.info("Wrote artifact %s", target)

    def emit_error(self, message: str) -> None:
        self.errors.append(message)
        logger.error(message)
