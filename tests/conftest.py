import json
from pathlib import Path
from shlex import split
from typing import Callable

import pytest
from click.testing import CliRunner, Result

from git_shorthand.cli import cli
from git_shorthand.operations import BranchConfig


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the state file out of the real home directory and pin the user."""
    monkeypatch.setenv("GIT_SHORTHAND_CONFIG", str(tmp_path / "config.json"))
    monkeypatch.setenv("USER", "person")
    monkeypatch.delenv("GIT_SHORTHAND_OS", raising=False)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    return tmp_path / "config.json"


@pytest.fixture
def write_config(config_file: Path) -> Callable[..., None]:
    """Seed the state file with BranchConfig fields."""

    def write(**fields) -> None:
        config_file.write_text(json.dumps(BranchConfig(**fields).to_dict()))

    return write


@pytest.fixture
def read_config(config_file: Path) -> Callable[[], BranchConfig]:
    def read() -> BranchConfig:
        return BranchConfig.from_dict(json.loads(config_file.read_text()))

    return read


@pytest.fixture
def runner():
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture
def invoke(runner: CliRunner) -> Callable[..., Result]:
    """Run `g` with the given arguments, by default as a linux dry run."""

    def run(args: str | list[str], os_name: str = "linux", dry_run: bool = True) -> Result:
        argv = split(args) if isinstance(args, str) else list(args)
        prefix = ["--os", os_name]
        if dry_run:
            prefix.append("-y")
        return runner.invoke(cli, prefix + argv)

    return run


def dry_run(*executable: str) -> str:
    """Expected dry run summary for the given shell strings."""
    lines = ["# Dry Run Summary", "# Shell executables:", *executable]
    return "\n".join(lines) + "\n"


def wcmd(step: str) -> str:
    """Expected windows form of one shell step."""
    normalized = step.replace('"', "'")
    return f'{step}\nif (!$?) {{ throw "Command failed: {normalized}" }}'


@pytest.fixture
def git(fake_process) -> Callable[..., None]:
    """Register a fake `git` query by its argument string."""

    def register(args: str, stdout: str = "", returncode: int = 0) -> None:
        fake_process.register_subprocess(
            ["git", *split(args)], stdout=stdout, returncode=returncode
        )

    return register
