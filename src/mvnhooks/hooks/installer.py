"""Install plugin hook scripts and wire them into git's base hooks."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from mvnhooks.git.repository import HOOKS_DIR, get_or_create_hooks_directory
from mvnhooks.hooks.content import HookContentGenerator
from mvnhooks.hooks.executable import ExecutableManager
from mvnhooks.hooks.types import HookType, InstallSettings
from mvnhooks.maven.command_runner import CommandRunner
from mvnhooks.maven.environment import Lookup, MavenEnvironment
from mvnhooks.maven.project import MavenProject

__all__ = ["HookInstaller", "hook_base_script_call"]


def hook_base_script_call(hook_type: HookType, artifact_id: str) -> str:
    """Line added to the base hook to run the plugin hook.

    The git directory is looked up when the hook runs so that moving the
    repository does not break it.
    """
    return (
        f"$(git rev-parse --git-dir)/{HOOKS_DIR}/"
        f"{hook_type.plugin_hook_file_name(artifact_id)}"
    )


class HookInstaller:
    """Installs every configured hook type for one project."""

    def __init__(
        self,
        project: MavenProject,
        settings: InstallSettings,
        *,
        get_env: Lookup,
        get_property: Lookup,
        command_runner: CommandRunner | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        if logger is None:
            logger = logging.getLogger("mvnhooks.hooks.installer")
        self._project = project
        self._settings = settings
        self._logger = logger
        self._executable_manager = ExecutableManager(logger.getChild("executable"))
        maven_environment = MavenEnvironment(
            get_property,
            command_runner,
            get_env=get_env,
            working_dir=project.base_dir,
        )
        self._content_generator = HookContentGenerator(
            settings,
            project.pom_file,
            maven_environment,
            get_env=get_env,
            get_property=get_property,
        )

    def install(self) -> list[Path]:
        """Install hooks and return the plugin hook files written.

        Raises:
            MavenGitHookError: On the first failure. Files written before the
                failure are left in place.
        """
        if self._settings.skip:
            self._logger.info("Skipped install git hooks")
            return []

        self._logger.info("Installing git hooks")
        start_time = time.time()

        self._logger.debug("Preparing git hook directory")
        hooks_dir = get_or_create_hooks_directory(self._project.base_dir)
        self._logger.debug("Prepared git hook directory %s", hooks_dir)

        written = []
        for hook_type in HookType:
            if self._settings.for_hook(hook_type).is_blank:
                self._logger.debug("No content for %s, leaving it alone", hook_type.hook_name)
                continue
            written.append(self._write_plugin_hook(hooks_dir, hook_type))
            self._configure_hook_base_script(hooks_dir, hook_type)

        duration_ms = (time.time() - start_time) * 1000
        self._logger.info("Installed git hooks in %.2fms", duration_ms)
        return written

    def _write_plugin_hook(self, hooks_dir: Path, hook_type: HookType) -> Path:
        self._logger.debug("Writing plugin %s hook file", hook_type.hook_name)
        content = self._content_generator.generate(hook_type)

        hook_file = hooks_dir / hook_type.plugin_hook_file_name(self._project.artifact_id)
        script = self._executable_manager.get_or_create_executable_script(hook_file)
        script.truncate()
        script.write(content)
        self._logger.debug("Written plugin %s hook file", hook_type.hook_name)
        return hook_file

    def _configure_hook_base_script(self, hooks_dir: Path, hook_type: HookType) -> None:
        base_hook = self._executable_manager.get_or_create_executable_script(
            hooks_dir / hook_type.base_script
        )
        call = hook_base_script_call(hook_type, self._project.artifact_id)
        self._logger.debug("Configuring '%s' for %s", base_hook, hook_type.hook_name)
        if self._settings.truncate_hooks_base_scripts:
            base_hook.truncate()
        else:
            base_hook.remove_command_call(call)
        base_hook.append_command_call(call)
