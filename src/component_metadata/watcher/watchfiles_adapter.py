from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable, Coroutine, Iterable
from pathlib import Path
from typing import Any

from watchfiles import Change, DefaultFilter, awatch

from component_metadata.core.batch import SKIPPED_DIRS
from component_metadata.core.languages import is_supported_file

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[set[Path]], Coroutine[Any, Any, None]]


class SourceFileFilter(DefaultFilter):
    """Accept added or modified scripts outside dependency and output directories.

    Rewritten sources and artifacts are excluded through ``ignore_paths`` so
    writing them never feeds back into another extraction.
    """

    ignore_dirs = (*DefaultFilter.ignore_dirs, *sorted(SKIPPED_DIRS - set(DefaultFilter.ignore_dirs)))

    def __init__(self, ignore_paths: Iterable[Path] = ()) -> None:
        super().__init__(ignore_paths=[path.resolve() for path in ignore_paths])

    def __call__(self, change: Change, path: str) -> bool:
        if change == Change.deleted or not is_supported_file(Path(path)):
            return False
        return super().__call__(change, path)


class WatchfilesWatcher:
    """Re-run extraction for source files changed under ``directory``.

    Implements the ``FileWatcherPort`` protocol; filtering happens inside
    ``awatch`` via ``SourceFileFilter``.
    """

    def __init__(
        self,
        directory: str | Path,
        on_change: ChangeCallback,
        ignore_paths: Iterable[Path] = (),
    ) -> None:
        self._directory = Path(directory)
        self._on_change = on_change
        self._filter = SourceFileFilter(ignore_paths)
        self._task: asyncio.Task[None] | None = None

    async def start(self) -> None:
        if self._task is None:
            self._task = asyncio.create_task(self._watch())
            logger.info("Watching %s for annotated sources", self._directory)

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.info("Stopped watching %s", self._directory)

    async def wait(self) -> None:
        if self._task is not None:
            await self._task

    async def _watch(self) -> None:
        async for changes in awatch(self._directory, watch_filter=self._filter):
            paths = {Path(p) for _, p in changes}
            if not paths:
                continue
            logger.info("Re-extracting %d changed file(s)", len(paths))
            try:
                await self._on_change(paths)
            except Exception:
                logger.exception("Extraction after change failed")
