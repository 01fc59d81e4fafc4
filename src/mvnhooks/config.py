"""Load installation settings from a YAML file and ``ghmp.*`` properties.

Properties override the file. Example file::

    truncate_hooks_base_scripts: false
    hooks:
      pre-commit:
        content: validate
        maven_prefix: true
        env: [JAVA_HOME]
        properties: [skipTests]
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from mvnhooks.errors import ConfigurationError
from mvnhooks.hooks.types import HookSettings, HookType, InstallSettings

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "PROPERTY_PREFIX",
    "load_settings",
    "parse_bool",
    "settings_from_mapping",
]

DEFAULT_CONFIG_FILE = ".mvnhooks.yml"
PROPERTY_PREFIX = "ghmp."

_TRUE = frozenset({"true", "yes", "on", "1"})
_FALSE = frozenset({"false", "no", "off", "0"})

_GLOBAL_KEYS = ("skip", "truncate_hooks_base_scripts", "debug")
_HOOK_KEYS = frozenset({"content", "maven_prefix", "env", "properties"})


def parse_bool(value: Any, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigurationError(f"{key}: expected a boolean, got {value!r}")


def _parse_names(value: Any, *, key: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        items: list[Any] = value.split(",")
    elif isinstance(value, list):
        items = value
    else:
        raise ConfigurationError(f"{key}: expected a list or comma-separated string")
    return tuple(name for name in (str(item).strip() for item in items) if name)


def _parse_hook(name: str, raw: Any) -> HookSettings:
    if raw is None:
        return HookSettings()
    if not isinstance(raw, dict):
        raise ConfigurationError(f"hooks.{name}: expected a mapping")
    unknown = set(raw) - _HOOK_KEYS
    if unknown:
        raise ConfigurationError(f"hooks.{name}: unknown keys {sorted(unknown)}")

    content = raw.get("content")
    return HookSettings(
        content="" if content is None else str(content),
        maven_prefix=parse_bool(raw.get("maven_prefix", False), key=f"hooks.{name}.maven_prefix"),
        env_vars_to_propagate=_parse_names(raw.get("env"), key=f"hooks.{name}.env"),
        properties_to_propagate=_parse_names(
            raw.get("properties"), key=f"hooks.{name}.properties"
        ),
    )


def settings_from_mapping(data: Mapping[str, Any]) -> InstallSettings:
    """Build settings from the parsed YAML document."""
    unknown = set(data) - set(_GLOBAL_KEYS) - {"hooks"}
    if unknown:
        raise ConfigurationError(f"Unknown settings keys {sorted(unknown)}")

    raw_hooks = data.get("hooks") or {}
    if not isinstance(raw_hooks, dict):
        raise ConfigurationError("hooks: expected a mapping")

    hooks: dict[HookType, HookSettings] = {}
    for name, raw in raw_hooks.items():
        try:
            hook_type = HookType.from_name(str(name))
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc
        hooks[hook_type] = _parse_hook(str(name), raw)

    return InstallSettings(
        skip=parse_bool(data.get("skip", False), key="skip"),
        truncate_hooks_base_scripts=parse_bool(
            data.get("truncate_hooks_base_scripts", False),
            key="truncate_hooks_base_scripts",
        ),
        debug=parse_bool(data.get("debug", False), key="debug"),
        hooks=MappingProxyType(hooks),
    )


def _read_config_file(config_file: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(config_file.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"Failed to read {config_file}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {config_file}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{config_file} must contain a mapping")
    return data


def _apply_properties(data: dict[str, Any], properties: Mapping[str, str]) -> None:
    """Overlay ``ghmp.*`` properties onto the parsed file contents."""
    if f"{PROPERTY_PREFIX}skip" in properties:
        data["skip"] = properties[f"{PROPERTY_PREFIX}skip"]
    if f"{PROPERTY_PREFIX}truncateHooksBaseScripts" in properties:
        data["truncate_hooks_base_scripts"] = properties[
            f"{PROPERTY_PREFIX}truncateHooksBaseScripts"
        ]
    if f"{PROPERTY_PREFIX}debug" in properties:
        data["debug"] = properties[f"{PROPERTY_PREFIX}debug"]

    for hook_type in HookType:
        stem = f"{PROPERTY_PREFIX}{hook_type.property_stem}"
        overrides = {
            "content": properties.get(f"{stem}HookContent"),
            "maven_prefix": properties.get(f"{stem}CommandMavenPrefix"),
            "env": properties.get(f"{stem}EnvVarToPropagate"),
            "properties": properties.get(f"{stem}PropertiesToPropagate"),
        }
        overrides = {key: value for key, value in overrides.items() if value is not None}
        if not overrides:
            continue

        hooks = data.setdefault("hooks", {})
        if not isinstance(hooks, dict):
            raise ConfigurationError("hooks: expected a mapping")
        hook = hooks.get(hook_type.hook_name) or {}
        if not isinstance(hook, dict):
            raise ConfigurationError(f"hooks.{hook_type.hook_name}: expected a mapping")
        hooks[hook_type.hook_name] = {**hook, **overrides}


def load_settings(
    config_file: Path | None = None,
    properties: Mapping[str, str] | None = None,
) -> InstallSettings:
    """Load settings from ``config_file`` (if any) then apply property overrides."""
    data = _read_config_file(config_file) if config_file is not None else {}
    _apply_properties(data, properties or {})
    return settings_from_mapping(data)
