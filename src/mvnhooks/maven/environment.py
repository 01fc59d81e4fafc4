"""Resolve the maven launcher that generated hooks should call."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

from mvnhooks.errors import CommandRunFailure, ExecutableNotFound
from mvnhooks.logging import get_logger
from mvnhooks.maven.command_runner import CommandRunner, SubprocessCommandRunner

Lookup: TypeAlias = Callable[[str], str | None]

__all__ = [
    "MAVEN_HOME_ENV_VARS",
    "MAVEN_HOME_PROPERTY",
    "Lookup",
    "MavenEnvironment",
]

MAVEN_HOME_PROPERTY = "maven.home"
MAVEN_HOME_ENV_VARS = ("MAVEN_HOME", "M2_HOME")

_MAVEN = "mvn"
_MAVEN_DEBUG = "mvnDebug"


def _no_value(_key: str) -> str | None:
    return None


class MavenEnvironment:
    """Picks the maven executable, preferring the configured maven home.

    A maven home candidate is only used when it actually runs; otherwise the
    bare executable name is tried through ``PATH``.
    """

    def __init__(
        self,
        get_property: Lookup,
        command_runner: CommandRunner | None = None,
        *,
        get_env: Lookup = _no_value,
        working_dir: Path | None = None,
    ) -> None:
        self._get_property = get_property
        self._get_env = get_env
        self._command_runner = command_runner or SubprocessCommandRunner()
        self._working_dir = working_dir or Path.cwd()
        self._logger = get_logger("maven.environment")

    def maven_home(self) -> Path | None:
        """Return the configured maven installation root, if any."""
        home = self._get_property(MAVEN_HOME_PROPERTY)
        if not home:
            for env_var in MAVEN_HOME_ENV_VARS:
                home = self._get_env(env_var)
                if home:
                    break
        return Path(home) if home else None

    def get_maven_executable(self, debug: bool = False) -> Path:
        """Return the maven launcher path, ``mvnDebug`` when ``debug`` is set.

        Raises:
            ExecutableNotFound: If neither the maven home nor PATH candidate runs.
        """
        name = _MAVEN_DEBUG if debug else _MAVEN

        home = self.maven_home()
        if home is not None:
            # A relative home is relative to the project directory
            candidate = self._working_dir / home / "bin" / name
            if self._is_runnable(candidate):
                return candidate
            self._logger.debug(
                "%s is not runnable, falling back to %s on PATH", candidate, name
            )

        bare = Path(name)
        if self._is_runnable(bare):
            return bare

        raise ExecutableNotFound(
            f"Could not find a runnable '{name}' executable"
            + (f" in {home / 'bin'} or on PATH" if home is not None else " on PATH")
        )

    def _is_runnable(self, executable: Path) -> bool:
        try:
            self._command_runner.run(
                self._working_dir, None, str(executable), "--version"
            )
        except CommandRunFailure as exc:
            self._logger.debug("Probe of %s failed: %s", executable, exc)
            return False
        return True
