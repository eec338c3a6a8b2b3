"""Run external commands with separately captured output streams."""

from __future__ import annotations

import subprocess
from collections.abc import Callable, Sequence
from typing import TypeAlias

from loguru import logger

from kubetest_aks.errors import ExecError

log = logger.bind(component="exec")

Runner: TypeAlias = Callable[[Sequence[str]], bytes]


def run_with_error_output(argv: Sequence[str]) -> bytes:
    """Run ``argv`` to completion and return its standard output.

    Both streams are buffered in full and stdin is closed. There is no
    timeout: the harness bounds the run.

    Raises:
        ExecError: The process could not be spawned or exited nonzero. The
            message carries the captured standard error verbatim.
    """
    cmd = list(argv)
    log.debug("Running {cmd}", cmd=" ".join(cmd))
    try:
        result = subprocess.run(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as e:
        raise ExecError(cmd, "", e) from e

    if result.returncode != 0:
        stderr = result.stderr.decode(errors="replace")
        raise ExecError(cmd, stderr, f"exit status {result.returncode}")
    return result.stdout
