"""Generation and installation of git hook scripts."""

from mvnhooks.hooks.content import HookContentGenerator
from mvnhooks.hooks.executable import ExecutableManager, ExecutableScript
from mvnhooks.hooks.installer import HookInstaller, hook_base_script_call
from mvnhooks.hooks.types import HookSettings, HookType, InstallSettings

__all__ = [
    "ExecutableManager",
    "ExecutableScript",
    "HookContentGenerator",
    "HookInstaller",
    "HookSettings",
    "HookType",
    "InstallSettings",
    "hook_base_script_call",
]
