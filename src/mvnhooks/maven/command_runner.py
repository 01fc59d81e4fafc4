"""Run short-lived external commands to check that they work."""

from __future__ import annotations

import logging
import subprocess
import time
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from mvnhooks.errors import LAUNCH_FAILURE_EXIT_CODE, CommandRunFailure

__all__ = ["CommandRunner", "SubprocessCommandRunner"]


class CommandRunner(Protocol):
    def run(
        self,
        working_dir: Path,
        environment: Mapping[str, str] | None,
        *command: str,
    ) -> str:
        """Run ``command`` to completion and return its standard output.

        Raises:
            CommandRunFailure: If the command cannot be launched or exits non-zero.
        """
        ...


class SubprocessCommandRunner:
    """``CommandRunner`` backed by :func:`subprocess.run`.

    There is no timeout: commands are expected to be quick version queries.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        if logger is None:
            logger = logging.getLogger("mvnhooks.maven.command_runner")
        self._logger = logger

    def run(
        self,
        working_dir: Path,
        environment: Mapping[str, str] | None,
        *command: str,
    ) -> str:
        self._logger.debug("Running %s in %s", list(command), working_dir)
        start_time = time.time()
        try:
            result = subprocess.run(
                list(command),
                cwd=working_dir,
                env=dict(environment) if environment is not None else None,
                capture_output=True,
                text=True,
                errors="replace",
                check=False,
            )
        except OSError as exc:
            self._logger.debug("Could not launch %s: %s", command[0], exc)
            raise CommandRunFailure(LAUNCH_FAILURE_EXIT_CODE, str(exc)) from exc

        duration_ms = (time.time() - start_time) * 1000
        if result.returncode != 0:
            self._logger.debug(
                "%s exited with %d after %.2fms",
                command[0],
                result.returncode,
                duration_ms,
            )
            raise CommandRunFailure(result.returncode, result.stdout + result.stderr)

        self._logger.debug("%s succeeded in %.2fms", command[0], duration_ms)
        return result.stdout
