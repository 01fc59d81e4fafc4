"""Tests for command-line interface."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from mvnhooks.cli import CliArgs, parse_args, run

POM = """<project xmlns="http://maven.apache.org/POM/4.0.0">
  <artifactId>cli-app</artifactId>
</project>
"""


class TestParseArgs:
    """Tests for parse_args function."""

    def test_default_args(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Defaults point at pom.xml in the current directory."""
        monkeypatch.chdir(tmp_path)
        args = parse_args([])
        assert args.project_dir == Path(".")
        assert args.pom_file == Path("pom.xml")
        assert args.artifact_id is None
        assert args.config_file is None
        assert args.properties == {}
        assert args.log_level == "INFO"
        assert args.log_file is None
        assert args.debug is False

    def test_default_config_file_is_picked_up(self, tmp_path: Path) -> None:
        """.mvnhooks.yml in the project directory is used when present."""
        (tmp_path / ".mvnhooks.yml").write_text("skip: true\n", encoding="utf-8")
        args = parse_args(["--project-dir", str(tmp_path)])
        assert args.config_file == tmp_path / ".mvnhooks.yml"

    def test_explicit_pom_and_config(self, tmp_path: Path) -> None:
        """--pom and --config override the defaults."""
        args = parse_args(
            ["--pom", str(tmp_path / "module.xml"), "--config", str(tmp_path / "c.yml")]
        )
        assert args.pom_file == tmp_path / "module.xml"
        assert args.config_file == tmp_path / "c.yml"

    def test_properties(self) -> None:
        """-D definitions are collected; a bare key means true."""
        args = parse_args(
            ["-D", "ghmp.preCommitHookContent=echo a=b", "-DskipTests", "-D", "x="]
        )
        assert args.properties == {
            "ghmp.preCommitHookContent": "echo a=b",
            "skipTests": "true",
            "x": "",
        }

    def test_invalid_property_exits(self) -> None:
        """A definition without a key causes exit."""
        with pytest.raises(SystemExit):
            parse_args(["-D", "=value"])

    def test_debug_flag_sets_debug_level(self) -> None:
        """--debug flag sets log level to DEBUG."""
        args = parse_args(["--debug"])
        assert args.debug is True
        assert args.log_level == "DEBUG"

    def test_debug_short_flag(self) -> None:
        """-v flag sets debug mode."""
        args = parse_args(["-v"])
        assert args.log_level == "DEBUG"

    def test_explicit_log_level_overrides_debug(self) -> None:
        """--log-level takes precedence over --debug."""
        args = parse_args(["--debug", "--log-level", "WARNING"])
        assert args.debug is True
        assert args.log_level == "WARNING"

    def test_invalid_log_level_exits(self) -> None:
        """Invalid log level causes exit."""
        with pytest.raises(SystemExit):
            parse_args(["--log-level", "INVALID"])


class TestCliArgs:
    """Tests for CliArgs dataclass."""

    def test_is_frozen(self) -> None:
        """CliArgs is immutable."""
        args = CliArgs(
            project_dir=Path("."),
            pom_file=Path("pom.xml"),
            artifact_id=None,
            config_file=None,
            properties={},
            log_level="INFO",
            log_file=None,
            debug=False,
        )
        with pytest.raises(dataclasses.FrozenInstanceError):
            args.debug = True  # type: ignore[misc]


class TestRun:
    """Tests for run function."""

    @pytest.fixture
    def project_dir(self, tmp_path: Path) -> Path:
        (tmp_path / ".git").mkdir()
        (tmp_path / "pom.xml").write_text(POM, encoding="utf-8")
        return tmp_path

    def test_installs_hooks(self, project_dir: Path) -> None:
        """A configured hook is installed and the run succeeds."""
        exit_code = run(
            [
                "--project-dir",
                str(project_dir),
                "--log-level",
                "ERROR",
                "-D",
                "ghmp.preCommitHookContent=echo 'Direct command test'",
            ]
        )

        assert exit_code == 0
        hooks_dir = project_dir / ".git" / "hooks"
        plugin_hook = (hooks_dir / "cli-app.pre-commit.sh").read_text(encoding="utf-8")
        assert "echo 'Direct command test'" in plugin_hook
        assert "cli-app.pre-commit.sh" in (hooks_dir / "pre-commit").read_text(
            encoding="utf-8"
        )

    def test_uses_config_file(self, project_dir: Path) -> None:
        """Hooks from .mvnhooks.yml are installed."""
        (project_dir / ".mvnhooks.yml").write_text(
            "hooks:\n  post-commit:\n    content: echo done\n", encoding="utf-8"
        )

        assert run(["--project-dir", str(project_dir), "--log-level", "ERROR"]) == 0
        assert (project_dir / ".git" / "hooks" / "cli-app.post-commit.sh").exists()

    def test_skip(self, project_dir: Path) -> None:
        """ghmp.skip succeeds without touching the repository."""
        exit_code = run(
            [
                "--project-dir",
                str(project_dir),
                "--log-level",
                "ERROR",
                "-D",
                "ghmp.skip=true",
                "-D",
                "ghmp.preCommitHookContent=validate",
            ]
        )
        assert exit_code == 0
        assert not (project_dir / ".git" / "hooks").exists()

    def test_errors_exit_with_one(self, tmp_path: Path) -> None:
        """Installation errors are reported with exit code 1."""
        log_file = tmp_path / "run.log"
        exit_code = run(
            [
                "--project-dir",
                str(tmp_path),
                "--log-file",
                str(log_file),
                "-D",
                "ghmp.preCommitHookContent=validate",
            ]
        )

        assert exit_code == 1
        assert "pom.xml" in log_file.read_text(encoding="utf-8")

    def test_unusable_log_file_exits_with_one(
        self, project_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A log file that cannot be opened is reported on stderr."""
        exit_code = run(
            ["--project-dir", str(project_dir), "--log-file", str(project_dir)]
        )

        assert exit_code == 1
        assert "Cannot open log file" in capsys.readouterr().err
        assert not (project_dir / ".git" / "hooks").exists()
