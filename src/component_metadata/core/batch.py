import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, Field

from component_metadata.core.languages import is_supported_file
from component_metadata.core.transform import transform_file
from component_metadata.errors import ParseFailure
from component_metadata.hosts.filesystem import DirectoryHost

logger = logging.getLogger(__name__)

SKIPPED_DIRS = frozenset({"node_modules", ".git", "__pycache__"})


class FileReport(BaseModel):
    path: Path
    artifacts: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
    failure: str | None = None

    @property
    def matched(self) -> int:
        return len(self.artifacts) + len(self.errors)


def collect_source_files(paths: Iterable[Path], exclude: Iterable[Path] = ()) -> list[tuple[Path, Path]]:
    """Expand ``paths`` into ``(file, root)`` pairs, ``root`` being the directory given.

    Files under any ``exclude`` directory (e.g. the rewritten-source output)
    are left out of directory walks.
    """
    excluded = [p.resolve() for p in exclude]
    collected: list[tuple[Path, Path]] = []
    for path in paths:
        if path.is_dir():
            for candidate in sorted(path.rglob("*")):
                if (
                    candidate.is_file()
                    and is_supported_file(candidate)
                    and not _in_skipped_dir(candidate, path)
                    and not _is_under(candidate, excluded)
                ):
                    collected.append((candidate, path))
        else:
            collected.append((path, path.parent))
    return collected


def process_file(
    path: Path,
    root: Path,
    context: Path,
    artifact_dir: Path,
    out_dir: Path | None = None,
    language: str | None = None,
) -> FileReport:
    """Transform one file, writing artifacts and optionally the rewritten source."""
    host = DirectoryHost(artifact_dir)
    try:
        rewritten = transform_file(path, context, host, language)
    except (ParseFailure, ValueError, FileNotFoundError) as exc:
        logger.error("Failed to process %s: %s", path, exc)
        return FileReport(path=path, failure=str(exc))

    if out_dir is not None:
        target = out_dir / path.relative_to(root)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(rewritten, encoding="utf-8")
        logger.debug("Wrote rewritten source %s", target)

    return FileReport(path=path, artifacts=[p.name for p in host.written], errors=list(host.errors))


def _in_skipped_dir(candidate: Path, root: Path) -> bool:
    return any(part in SKIPPED_DIRS for part in candidate.relative_to(root).parts[:-1])


def _is_under(candidate: Path, directories: list[Path]) -> bool:
    resolved = candidate.resolve()
    return any(resolved.is_relative_to(directory) for directory in directories)
