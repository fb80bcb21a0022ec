"""Pure functions for building and running shell command strings."""

import logging
import subprocess
import sys

from git_shorthand.errors import UnknownOSError

logger = logging.getLogger(__name__)

LINUX = "linux"
WINDOWS = "windows"


def current_os() -> str:
    """Get the platform identity used to shape emitted commands."""
    return WINDOWS if sys.platform.startswith("win") else LINUX


def quote(value: str) -> str:
    """Wrap a value in double quotes for the target shell."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return '"' + escaped + '"'


def quote_all(values: list[str] | tuple[str, ...]) -> str:
    return " ".join(quote(v) for v in values)


def windows_step(step: str) -> str:
    """Append a PowerShell guard that stops the script if `step` failed."""
    normalized = step.replace('"', "'")
    return f'{step}\nif (!$?) {{ throw "Command failed: {normalized}" }}'


def join_steps(steps: list[str], os_name: str) -> list[str]:
    """
    Combine shell steps so that later steps only run if earlier ones succeed.

    Args:
        steps: Shell commands in execution order
        os_name: Platform identity, "linux" or "windows"

    Returns:
        A single `&&`-joined string on linux, or one guarded string per step
        on windows.

    Raises:
        UnknownOSError: If os_name is not a supported platform
    """
    if os_name == LINUX:
        return [" && ".join(steps)]
    if os_name == WINDOWS:
        return [windows_step(step) for step in steps]
    raise UnknownOSError(os_name)


def run_executables(executable: list[str], os_name: str) -> int:
    """Run emitted command strings in order, stopping at the first failure.

    Returns the exit status of the failing string, or 0.
    """
    if not executable:
        return 0

    if os_name == WINDOWS:
        script = "\n".join(executable)
        logger.debug("Running PowerShell script:\n%s", script)
        return subprocess.run(["powershell", "-NoProfile", "-Command", script]).returncode

    for command in executable:
        logger.debug("Running: %s", command)
        returncode = subprocess.run(command, shell=True).returncode
        if returncode != 0:
            return returncode
    return 0
