"""Hook types and their per-hook installation settings."""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Mapping
from types import MappingProxyType


class HookType(enum.Enum):
    """The git hooks this package knows how to install.

    Each member carries its canonical git name and the stem used for its
    ``ghmp.*`` property keys. Member order is installation order.
    """

    PRE_COMMIT = ("pre-commit", "preCommit")
    PRE_PUSH = ("pre-push", "prePush")
    POST_COMMIT = ("post-commit", "postCommit")

    def __init__(self, hook_name: str, property_stem: str) -> None:
        self.hook_name = hook_name
        self.property_stem = property_stem

    @property
    def base_script(self) -> str:
        """File name git invokes for this hook."""
        return self.hook_name

    @property
    def plugin_hook_suffix(self) -> str:
        return f"{self.hook_name}.sh"

    def plugin_hook_file_name(self, artifact_id: str) -> str:
        return f"{artifact_id}.{self.plugin_hook_suffix}"

    @classmethod
    def from_name(cls, name: str) -> HookType:
        for hook_type in cls:
            if hook_type.hook_name == name:
                return hook_type
        raise ValueError(f"Unknown hook type: {name!r}")


@dataclasses.dataclass(frozen=True)
class HookSettings:
    """What a single generated hook script should run."""

    content: str = ""
    maven_prefix: bool = False
    env_vars_to_propagate: tuple[str, ...] = ()
    properties_to_propagate: tuple[str, ...] = ()

    @property
    def is_blank(self) -> bool:
        return not self.content.strip()


_NO_HOOK = HookSettings()


@dataclasses.dataclass(frozen=True)
class InstallSettings:
    """Settings for one installation run."""

    skip: bool = False
    truncate_hooks_base_scripts: bool = False
    debug: bool = False
    hooks: Mapping[HookType, HookSettings] = dataclasses.field(
        default_factory=lambda: MappingProxyType({})
    )

    def for_hook(self, hook_type: HookType) -> HookSettings:
        return self.hooks.get(hook_type, _NO_HOOK)
