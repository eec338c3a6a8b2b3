"""Logging configuration for the AKS deployer.

Modules log through loguru with ``logger.bind(component=...)``. Output is
disabled until flags are applied: :func:`setup_logging` installs a console
sink filtered to ``kubetest_aks`` and an optional rotating file sink, and
:func:`teardown_logging` removes them again.

Example:
    from kubetest_aks.observability.logging import LogConfig, setup_logging

    ids = setup_logging(LogConfig(level="DEBUG", file="aks.log"))
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, TypeAlias

from loguru import logger

LogLevel: TypeAlias = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"]

LOG_LEVELS: tuple[LogLevel, ...] = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR")

_CONTEXT_KEYS = ("component", "deployer", "cluster", "resource_group")


def _format_context(record: Any) -> str:
    extra = record.get("extra", {})
    parts = [f"{k}={extra[k]}" for k in _CONTEXT_KEYS if k in extra]
    return f" [{' '.join(parts)}]" if parts else ""


CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>"
    "<dim>{extra[_ctx]}</dim> - "
    "<level>{message}</level>"
)

FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | "
    "{name}:{function}:{line}{extra[_ctx]} - {message}"
)


@dataclass(frozen=True, slots=True)
class LogConfig:
    """Logging configuration.

    Attributes:
        level: Minimum level for the console sink.
        file: Path to a log file. None disables file output.
        console: Whether to log to stderr.
        rotation: File rotation policy (e.g. "50 MB").
        retention: Number of rotated files to keep.
    """

    level: LogLevel = "INFO"
    file: str | None = None
    console: bool = True
    rotation: str = "50 MB"
    retention: int = 10


def level_from_verbosity(v: int) -> LogLevel:
    """Map a klog-style ``--v`` verbosity to a log level."""
    if v >= 4:
        return "TRACE"
    if v >= 2:
        return "DEBUG"
    return "INFO"


def setup_logging(config: LogConfig) -> list[int]:
    """Install the sinks described by ``config`` and return their ids."""
    # Drop loguru's default stderr sink (and any sinks from an earlier setup)
    logger.remove()
    logger.enable("kubetest_aks")
    logger.configure(patcher=lambda r: r["extra"].update(_ctx=_format_context(r)))

    handler_ids: list[int] = []

    if config.console:
        handler_ids.append(logger.add(
            sys.stderr,
            level=config.level,
            format=CONSOLE_FORMAT,
            colorize=True,
            filter="kubetest_aks",
        ))

    if config.file:
        Path(config.file).parent.mkdir(parents=True, exist_ok=True)
        handler_ids.append(logger.add(
            config.file,
            level="TRACE" if config.level == "TRACE" else "DEBUG",
            format=FILE_FORMAT,
            rotation=config.rotation,
            retention=config.retention,
            compression="zip",
            diagnose=False,
            enqueue=False,
        ))

    return handler_ids


def teardown_logging(handler_ids: list[int]) -> None:
    for hid in handler_ids:
        logger.remove(hid)
    logger.disable("kubetest_aks")
