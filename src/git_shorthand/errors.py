"""Custom exceptions for git-shorthand."""


class ShorthandError(Exception):
    """Base exception for all git-shorthand errors."""

    exit_code: int = 1


class GitCommandError(ShorthandError):
    """Raised when a git query exits with a failure status."""

    def __init__(self, detail: str):
        super().__init__(f"failed to execute shell command: {detail}")
        self.detail = detail


class UnknownGitUrlError(ShorthandError):
    """Raised when the remote origin URL is not a recognized GitHub URL."""

    def __init__(self, url: str):
        super().__init__(f"Unknown git url format: {url}")
        self.url = url


class ParentBranchCycleError(ShorthandError):
    """Raised when the recorded parent branches form a loop."""

    def __init__(self) -> None:
        super().__init__("cycle detected in parent branches")


class UnknownParentBranchError(ShorthandError):
    """Raised when a branch has no usable parent or base branch."""

    pass


class NoPreviousBranchError(ShorthandError):
    """Raised when no previous branch was recorded for the work tree."""

    def __init__(self) -> None:
        super().__init__("no previous branch exists")


class UnknownOSError(ShorthandError):
    """Raised when commands are joined for an unsupported platform."""

    def __init__(self, os_name: str):
        super().__init__(f'Unknown OS ("{os_name}")')
        self.os_name = os_name


class CompletionError(ShorthandError):
    """Raised when completion suggestions cannot be computed."""

    pass
