# hopp/cli/core/format.py
"""
Terminal formatting helpers for run reports.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from functools import partial
from typing import Callable

import click

from hopp.cli.core.config import settings


def color_status_code(status: int | str, status_text: str) -> str:
    """Render ``"<status> : <text>"`` coloured by status family.

    A status of ``0`` means no response was received and is shown as
    ``Error``. 2xx is green, 3xx yellow, anything else red.
    """
    label = "Error" if str(status) == "0" else status
    status_code = f"{label} : {status_text}"

    if str(status).startswith("2"):
        return click.style(status_code, fg="bright_green")
    elif str(status).startswith("3"):
        return click.style(status_code, fg="bright_yellow")

    return click.style(status_code, fg="bright_red")


exception_colors: dict[str, Callable[[str], str]] = {
    "WARN": partial(click.style, fg="yellow"),
    "INFO": partial(click.style, fg="blue"),
    "FAIL": partial(click.style, fg="red"),
    "SUCCESS": partial(click.style, fg="green"),
    "INFO_BRIGHT": partial(click.style, fg="bright_blue"),
    "BG_WARN": partial(click.style, bg="yellow"),
    "BG_FAIL": partial(click.style, bg="red"),
    "BG_INFO": partial(click.style, bg="blue"),
    "BG_SUCCESS": partial(click.style, bg="green"),
}


def round_duration(duration: float, precision: int | None = None) -> float:
    if precision is None:
        precision = settings.duration_precision
    quantum = Decimal(1).scaleb(-precision)
    return float(Decimal(str(duration)).quantize(quantum, rounding=ROUND_HALF_UP))


def duration_in_seconds(end: tuple[int, int], precision: int | None = None) -> float:
    """Convert a ``(seconds, nanoseconds)`` pair into rounded seconds."""
    seconds, nanoseconds = end
    return round_duration((seconds * 1e9 + nanoseconds) / 1e9, precision)
