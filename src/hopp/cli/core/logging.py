# hopp/cli/core/logging.py
from __future__ import annotations

import logging
import sys
from typing import TextIO

from pythonjsonlogger import jsonlogger

from hopp.cli.core.config import settings


def configure_logging(level: str | None = None, stream: TextIO | None = None) -> None:
    """Route all records through one JSON handler (stdout by default)."""
    root = logging.getLogger()
    root.setLevel((level or settings.log_level).upper())

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        jsonlogger.JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    )

    # Repeated calls replace rather than stack handlers
    root.handlers = [handler]
