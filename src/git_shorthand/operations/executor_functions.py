"""Pure functions for querying git."""

import logging
import subprocess

from git_shorthand.errors import GitCommandError

logger = logging.getLogger(__name__)


def run_git_command(
    args: list[str],
    *,
    check: bool = True,
    capture_output: bool = True,
) -> subprocess.CompletedProcess:
    """
    Execute a git command and return the result.

    Args:
        args: Git command arguments (without 'git' prefix)
        check: Raise exception on non-zero exit code
        capture_output: Capture stdout/stderr

    Returns:
        CompletedProcess with returncode, stdout, stderr

    Raises:
        GitCommandError: If git command fails and check=True
    """
    cmd = ["git"] + args
    result = subprocess.run(
        cmd,
        capture_output=capture_output,
        text=True,
    )
    logger.debug("%s exited with status %d", " ".join(cmd), result.returncode)

    if check and result.returncode != 0:
        stderr = (result.stderr or "").strip()
        detail = f"exit status {result.returncode}"
        if stderr:
            detail = f"{detail}: {stderr.splitlines()[-1]}"
        raise GitCommandError(detail)

    return result


def output_lines(result: subprocess.CompletedProcess) -> list[str]:
    """Split captured stdout into lines, dropping the trailing newline."""
    return (result.stdout or "").splitlines()


def get_current_branch() -> str:
    """Get the name of the currently checked out branch."""
    result = run_git_command(["rev-parse", "--abbrev-ref", "HEAD"])
    return result.stdout.strip()


def get_git_root() -> str:
    """Get the top-level directory of the current work tree."""
    result = run_git_command(["rev-parse", "--show-toplevel"])
    return result.stdout.strip()


def get_repo_url() -> str:
    """Get the URL of the origin remote."""
    result = run_git_command(["config", "--get", "remote.origin.url"])
    return result.stdout.strip()


def list_branches() -> list[str]:
    """List local branches as printed by `git branch --list`."""
    return output_lines(run_git_command(["branch", "--list"]))


def get_status_porcelain() -> list[str]:
    """Get `git status` in the machine-readable porcelain v2 format."""
    return output_lines(run_git_command(["status", "--porcelain=v2"]))


def get_diff_names() -> list[str]:
    """Get the paths, relative to the git root, of files with unstaged diffs."""
    return output_lines(run_git_command(["diff", "--name-only"]))


def push_upstream(branch: str) -> subprocess.CompletedProcess:
    """Push a branch and set origin as its upstream."""
    return run_git_command(["push", "--set-upstream", "origin", branch])
