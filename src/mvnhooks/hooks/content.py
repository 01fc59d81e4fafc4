"""Generate the body of plugin hook scripts."""

from __future__ import annotations

import os
from pathlib import Path

from mvnhooks.hooks.types import HookType, InstallSettings
from mvnhooks.maven.environment import Lookup, MavenEnvironment

__all__ = ["HookContentGenerator", "unixify_path"]

SHEBANG = "#!/bin/bash"
STRICT_MODE = "set -e"

_DOUBLE_QUOTE_ESCAPES = str.maketrans(
    {"\\": "\\\\", '"': '\\"', "$": "\\$", "`": "\\`"}
)


def unixify_path(path: Path) -> str:
    """Render ``path`` absolute, double-quoted and with forward slashes."""
    absolute = os.path.abspath(path)
    return '"' + absolute.replace("\\", "/") + '"'


def _render_executable(executable: Path) -> str:
    # A bare name stays bare so the shell resolves it through PATH
    if executable.parent == Path("."):
        return str(executable)
    return unixify_path(executable)


class HookContentGenerator:
    """Builds the script text for each hook type.

    Environment variables and properties are read through the given lookups
    only, so the same inputs always give the same script.
    """

    def __init__(
        self,
        settings: InstallSettings,
        pom_file: Path,
        maven_environment: MavenEnvironment,
        *,
        get_env: Lookup,
        get_property: Lookup,
    ) -> None:
        self._settings = settings
        self._pom_file = pom_file
        self._maven_environment = maven_environment
        self._get_env = get_env
        self._get_property = get_property

    def generate(self, hook_type: HookType) -> str:
        hook = self._settings.for_hook(hook_type)

        lines = [SHEBANG, STRICT_MODE]
        lines.extend(self._export_lines(hook.env_vars_to_propagate))
        lines.append("")

        if not hook.is_blank:
            if hook.maven_prefix:
                lines.append(self._maven_command(hook.content, hook.properties_to_propagate))
            else:
                lines.append(hook.content)

        return "\n".join(lines) + "\n"

    def _export_lines(self, env_vars: tuple[str, ...]) -> list[str]:
        exports = []
        for env_var in env_vars:
            name = env_var.strip()
            if not name:
                continue
            value = self._get_env(name)
            if value:
                escaped = value.translate(_DOUBLE_QUOTE_ESCAPES)
                exports.append(f'export {name}="{escaped}"')
        return exports

    def _maven_command(self, content: str, properties: tuple[str, ...]) -> str:
        executable = self._maven_environment.get_maven_executable(self._settings.debug)
        parts = [_render_executable(executable), "-f", unixify_path(self._pom_file)]
        parts.extend(self._property_flags(properties))
        parts.append(content)
        return " ".join(parts)

    def _property_flags(self, properties: tuple[str, ...]) -> list[str]:
        flags = []
        for prop in properties:
            value = self._get_property(prop)
            if value is not None:
                flags.append(f"-D{prop}={value}")
        return flags
