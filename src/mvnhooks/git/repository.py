"""Locate the git metadata directory of a project."""

from __future__ import annotations

import os
from pathlib import Path

from mvnhooks.errors import MetadataReadFailure, RepositoryNotFound, ScriptWriteFailure
from mvnhooks.logging import get_logger

__all__ = [
    "GITDIR_MARKER",
    "HOOKS_DIR",
    "find_git_directory",
    "get_or_create_hooks_directory",
]

GITDIR_MARKER = "gitdir:"
HOOKS_DIR = "hooks"

_logger = get_logger("git.repository")


def _read_gitdir_file(dotgit: Path) -> Path | None:
    """Return the directory a worktree .git file points at, or None."""
    try:
        content = dotgit.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise MetadataReadFailure(f"Failed to read .git file: {dotgit}") from exc

    if not content.startswith(GITDIR_MARKER):
        return None

    target = Path(content[len(GITDIR_MARKER) :].strip())
    if not target.is_absolute():
        target = dotgit.parent / target
    return Path(os.path.normpath(target))


def find_git_directory(start: Path) -> Path:
    """Walk up from ``start`` until a .git directory or worktree file is found.

    Raises:
        RepositoryNotFound: If the filesystem root is reached first.
        MetadataReadFailure: If a worktree .git file cannot be read.
    """
    current: Path | None = Path(os.path.abspath(start))
    while current is not None:
        dotgit = current / ".git"
        if dotgit.is_dir():
            return dotgit
        if dotgit.is_file():
            target = _read_gitdir_file(dotgit)
            if target is not None:
                _logger.debug("Resolved worktree %s to %s", dotgit, target)
                return target
        parent = current.parent
        current = parent if parent != current else None

    raise RepositoryNotFound(f"Could not find .git directory from {start}")


def get_or_create_hooks_directory(start: Path) -> Path:
    """Return ``<git dir>/hooks``, creating it when missing."""
    hooks_dir = find_git_directory(start) / HOOKS_DIR
    try:
        hooks_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ScriptWriteFailure(
            f"Failed to create hooks directory: {hooks_dir}", hooks_dir
        ) from exc
    return hooks_dir
