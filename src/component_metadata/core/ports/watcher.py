from typing import Protocol


class FileWatcherPort(Protocol):
    """Something that re-runs extraction while it is started."""

    async def start(self) -> None: ...

    async def stop(self) -> None: ...
