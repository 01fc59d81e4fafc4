"""Error types raised while installing git hooks."""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "LAUNCH_FAILURE_EXIT_CODE",
    "CommandRunFailure",
    "ConfigurationError",
    "ExecutableNotFound",
    "MavenGitHookError",
    "MetadataReadFailure",
    "ProjectDescriptorError",
    "RepositoryNotFound",
    "ScriptWriteFailure",
]

# Exit code reported when the probed command could not be started at all.
LAUNCH_FAILURE_EXIT_CODE = -1


class MavenGitHookError(Exception):
    """Base class for all hook installation errors."""


class RepositoryNotFound(MavenGitHookError):
    """No .git entry was found walking up from the project directory."""


class MetadataReadFailure(MavenGitHookError):
    """A worktree .git file could not be read."""


class ScriptWriteFailure(MavenGitHookError):
    """A hook script could not be created, read or written."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class CommandRunFailure(MavenGitHookError):
    """A probed command could not be launched or exited non-zero."""

    def __init__(self, exit_code: int, output: str = "") -> None:
        if exit_code == LAUNCH_FAILURE_EXIT_CODE:
            message = "Command could not be launched"
        else:
            message = f"Command exited with code {exit_code}"
        if output:
            message = f"{message}: {output.strip()}"
        super().__init__(message)
        self.exit_code = exit_code
        self.output = output


class ExecutableNotFound(MavenGitHookError):
    """No usable maven executable was found."""


class ConfigurationError(MavenGitHookError):
    """Settings file or property values are invalid."""


class ProjectDescriptorError(MavenGitHookError):
    """The pom.xml could not be read or lacks an artifactId."""
