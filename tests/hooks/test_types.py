"""Tests for hook types and settings."""

from __future__ import annotations

import dataclasses

import pytest

from mvnhooks.hooks.types import HookSettings, HookType, InstallSettings


class TestHookType:
    """Tests for HookType enumeration."""

    def test_installation_order(self) -> None:
        """Members iterate as pre-commit, pre-push, post-commit."""
        assert [hook_type.hook_name for hook_type in HookType] == [
            "pre-commit",
            "pre-push",
            "post-commit",
        ]

    def test_file_names(self) -> None:
        """Base script and plugin file names derive from the hook name."""
        assert HookType.PRE_COMMIT.base_script == "pre-commit"
        assert HookType.POST_COMMIT.plugin_hook_file_name("app") == "app.post-commit.sh"

    def test_from_name(self) -> None:
        """Canonical names map back to members."""
        assert HookType.from_name("pre-push") is HookType.PRE_PUSH

    def test_from_unknown_name(self) -> None:
        """Unsupported hook names are rejected."""
        with pytest.raises(ValueError, match="commit-msg"):
            HookType.from_name("commit-msg")


class TestInstallSettings:
    """Tests for InstallSettings."""

    def test_unconfigured_hook_is_blank(self) -> None:
        """Hooks missing from the table get empty settings."""
        assert InstallSettings().for_hook(HookType.PRE_PUSH).is_blank

    def test_whitespace_content_is_blank(self) -> None:
        """Content made of whitespace counts as blank."""
        assert HookSettings(content=" \t\n").is_blank
        assert not HookSettings(content="validate").is_blank

    def test_is_frozen(self) -> None:
        """Settings are immutable."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            InstallSettings().skip = True  # type: ignore[misc]
