"""Command-line interface for mvnhooks."""

from __future__ import annotations

import argparse
import dataclasses
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from mvnhooks.config import DEFAULT_CONFIG_FILE, load_settings
from mvnhooks.errors import MavenGitHookError
from mvnhooks.hooks.installer import HookInstaller
from mvnhooks.logging import LEVELS, configure_logging, get_logger
from mvnhooks.maven.project import load_project


@dataclasses.dataclass(frozen=True)
class CliArgs:
    """Parsed command-line arguments."""

    project_dir: Path
    pom_file: Path
    artifact_id: str | None
    config_file: Path | None
    properties: dict[str, str]
    log_level: str
    log_file: Path | None
    debug: bool


def _parse_property(text: str) -> tuple[str, str]:
    """Parse ``KEY=VALUE``; a bare ``KEY`` means ``KEY=true`` as with mvn -D."""
    key, sep, value = text.partition("=")
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError(f"invalid property definition: {text!r}")
    return key, value if sep else "true"


def parse_args(argv: Sequence[str] | None = None) -> CliArgs:
    """
    Parse command-line arguments.

    Args:
        argv: Command-line arguments. If None, uses sys.argv[1:].

    Returns:
        Parsed arguments as CliArgs dataclass.
    """
    parser = argparse.ArgumentParser(
        prog="mvnhooks",
        description="Install git hooks that run maven or shell commands",
    )

    parser.add_argument(
        "--project-dir",
        type=Path,
        default=Path("."),
        help="Project directory (default: current directory)",
    )

    parser.add_argument(
        "--pom",
        type=Path,
        default=None,
        help="Project descriptor (default: <project-dir>/pom.xml)",
    )

    parser.add_argument(
        "--artifact-id",
        default=None,
        help="Project identifier used in hook file names (default: read from the pom)",
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Settings file (default: <project-dir>/{DEFAULT_CONFIG_FILE} if present)",
    )

    parser.add_argument(
        "-D",
        dest="properties",
        metavar="KEY=VALUE",
        type=_parse_property,
        action="append",
        default=[],
        help="Define a property (repeatable), e.g. -D ghmp.preCommitHookContent=validate",
    )

    parser.add_argument(
        "--log-level",
        choices=LEVELS,
        default=None,
        help="Log level (default: INFO, or DEBUG if --debug is set)",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Log file path (default: stderr)",
    )

    parser.add_argument(
        "-v",
        "--debug",
        action="store_true",
        help="Enable debug logging (unless --log-level is specified)",
    )

    args = parser.parse_args(argv)

    # Explicit --log-level wins, otherwise --debug sets DEBUG
    if args.log_level is not None:
        log_level = args.log_level
    elif args.debug:
        log_level = "DEBUG"
    else:
        log_level = "INFO"

    config_file = args.config
    if config_file is None:
        default_config = args.project_dir / DEFAULT_CONFIG_FILE
        if default_config.is_file():
            config_file = default_config

    return CliArgs(
        project_dir=args.project_dir,
        pom_file=args.pom if args.pom is not None else args.project_dir / "pom.xml",
        artifact_id=args.artifact_id,
        config_file=config_file,
        properties=dict(args.properties),
        log_level=log_level,
        log_file=args.log_file,
        debug=args.debug,
    )


def run(argv: Sequence[str] | None = None) -> int:
    """
    Install the configured git hooks.

    Args:
        argv: Command-line arguments. If None, uses sys.argv[1:].

    Returns:
        Exit code (0 for success, 1 for error).
    """
    args = parse_args(argv)

    try:
        configure_logging(level=args.log_level, log_file=args.log_file)
    except MavenGitHookError as exc:
        # No logger to report through yet
        sys.stderr.write(f"mvnhooks: {exc}\n")
        return 1
    logger = get_logger("main")
    logger.debug("Configuration: %s", args)

    try:
        settings = load_settings(args.config_file, args.properties)
        project = load_project(args.pom_file, args.artifact_id)
        installer = HookInstaller(
            project,
            settings,
            get_env=os.environ.get,
            get_property=args.properties.get,
        )
        for hook_file in installer.install():
            logger.info("installed: %s", hook_file)
        return 0

    except MavenGitHookError as exc:
        logger.error("%s", exc)
        return 1

    except Exception:
        logger.critical("Fatal error while installing git hooks", exc_info=True)
        return 1
