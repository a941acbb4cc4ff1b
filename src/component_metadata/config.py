import logging
import os
from pathlib import Path

from pydantic import BaseModel
from rich.logging import RichHandler

_ENV_PREFIX = "COMPONENT_METADATA_"


class Settings(BaseModel):
    context: Path
    artifact_dir: Path
    log_level: str = "WARNING"


def load_settings() -> Settings:
    return Settings(
        context=Path(os.getenv(f"{_ENV_PREFIX}CONTEXT", os.getcwd())),
        artifact_dir=Path(os.getenv(f"{_ENV_PREFIX}ARTIFACT_DIR", "build/components")),
        log_level=os.getenv(f"{_ENV_PREFIX}LOG_LEVEL", "WARNING").upper(),
    )


def configure_logging(level: str) -> None:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level '{level}'")
    logging.basicConfig(
        level=numeric,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
