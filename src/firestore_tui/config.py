"""Session configuration and logging setup.

Everything comes from the command line; the program reads no config files
or environment variables of its own.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from textual.logging import TextualHandler


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

DEFAULT_DATABASE = "(default)"


class LogLevel(str, Enum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"


@dataclass(frozen=True)
class BrowserConfig:
    project_id: str
    database: str = DEFAULT_DATABASE
    snapshot: Optional[Path] = None
    log_file: Optional[Path] = None
    log_level: LogLevel = LogLevel.info


def configure_logging(config: BrowserConfig) -> None:
    """Send log records to a file, or to the Textual devtools console.

    The terminal belongs to the UI, so records never go to stderr.
    """
    if config.log_file is not None:
        logging.basicConfig(
            filename=config.log_file,
            level=config.log_level.value,
            format=LOG_FORMAT,
        )
    else:
        logging.basicConfig(
            level=config.log_level.value,
            format=LOG_FORMAT,
            handlers=[TextualHandler()],
        )
