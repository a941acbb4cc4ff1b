from typing import Protocol


class EmissionHost(Protocol):
    """Capabilities the build host lends to a single ``transform`` call."""

    def emit_file(self, name: str, content: str) -> None: ...

    def emit_error(self, message: str) -> None: ...
