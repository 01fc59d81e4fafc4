"""Executable hook scripts on disk.

An ``ExecutableScript`` wraps one file path. Every mutation leaves the file
executable, and any content it writes ends with a newline. Content is re-read
from disk on each operation, so several handles on the same path stay
consistent.
"""

from __future__ import annotations

import logging
import stat
from pathlib import Path

from mvnhooks.errors import ScriptWriteFailure

__all__ = ["ExecutableManager", "ExecutableScript"]

_EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


class ExecutableScript:
    """A single executable script file."""

    def __init__(self, path: Path, logger: logging.Logger | None = None) -> None:
        if logger is None:
            logger = logging.getLogger("mvnhooks.hooks.executable")
        self._path = path
        self._logger = logger
        self._ensure_exists()

    @property
    def path(self) -> Path:
        return self._path

    def __repr__(self) -> str:
        return f"ExecutableScript({str(self._path)!r})"

    def __str__(self) -> str:
        return str(self._path)

    def truncate(self) -> None:
        """Remove all content from the script."""
        self._logger.debug("Truncating %s", self._path)
        self._write_text("")

    def write(self, text: str) -> None:
        """Replace the whole content of the script with ``text``."""
        self._logger.debug("Writing %d characters to %s", len(text), self._path)
        self._write_text(text)

    def append_command_call(self, line: str) -> None:
        """Append ``line`` unless the script already contains it."""
        content = self._read_text()
        needs_newline = bool(content) and not content.endswith("\n")
        if needs_newline:
            content += "\n"

        if line in _split_lines(content):
            self._logger.debug("%s already calls '%s'", self._path, line)
            if needs_newline:
                self._write_text(content)
            else:
                self._make_executable()
            return

        self._logger.debug("Appending '%s' to %s", line, self._path)
        self._write_text(f"{content}{line}\n")

    def remove_command_call(self, line: str) -> None:
        """Remove every line exactly equal to ``line``, keeping the rest in order."""
        lines = _split_lines(self._read_text())
        kept = [existing for existing in lines if existing != line]
        if len(kept) == len(lines):
            self._make_executable()
            return

        self._logger.debug(
            "Removing %d call(s) to '%s' from %s",
            len(lines) - len(kept),
            line,
            self._path,
        )
        self._write_text("".join(f"{existing}\n" for existing in kept))

    def read(self) -> str:
        """Return the current content of the script."""
        return self._read_text()

    def _ensure_exists(self) -> None:
        if self._path.exists():
            return
        self._logger.debug("Creating %s", self._path)
        try:
            self._path.touch()
        except OSError as exc:
            raise ScriptWriteFailure(
                f"Failed to create script {self._path}", self._path
            ) from exc
        self._make_executable()

    def _read_text(self) -> str:
        self._ensure_exists()
        try:
            return self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ScriptWriteFailure(
                f"Failed to read script {self._path}", self._path
            ) from exc

    def _write_text(self, text: str) -> None:
        try:
            # newline="" keeps "\n" on every platform; hooks run under sh
            with self._path.open("w", encoding="utf-8", newline="") as handle:
                handle.write(text)
        except OSError as exc:
            raise ScriptWriteFailure(
                f"Failed to write script {self._path}", self._path
            ) from exc
        self._make_executable()

    def _make_executable(self) -> None:
        try:
            mode = self._path.stat().st_mode
            self._path.chmod(mode | _EXECUTE_BITS)
        except OSError as exc:
            raise ScriptWriteFailure(
                f"Failed to make {self._path} executable", self._path
            ) from exc


def _split_lines(content: str) -> list[str]:
    """Split on "\\n" only, so lines compare byte for byte."""
    if not content:
        return []
    lines = content.split("\n")
    if content.endswith("\n"):
        lines.pop()
    return lines


class ExecutableManager:
    """Hands out ``ExecutableScript`` instances, creating files on demand."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        if logger is None:
            logger = logging.getLogger("mvnhooks.hooks.executable")
        self._logger = logger

    def get_or_create_executable_script(self, path: Path) -> ExecutableScript:
        """Return a script bound to ``path``; an empty executable file is created if absent."""
        return ExecutableScript(path, logger=self._logger)
