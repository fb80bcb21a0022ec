"""Pure functions for reading and updating branch configuration."""

from git_shorthand.errors import (
    NoPreviousBranchError,
    ParentBranchCycleError,
    UnknownGitUrlError,
    UnknownParentBranchError,
)
from git_shorthand.operations.config import FALLBACK_DEFAULT_BRANCH, BranchConfig

GITHUB_URL_PREFIXES = (
    "git@github.com:",
    "https://github.com/",
)


def get_default_branch(config: BranchConfig, repo_url: str) -> str:
    """Resolve the default branch: per-repo entry, then global, then "main"."""
    branch = config.main_branches.get(repo_url)
    if branch:
        return branch
    return config.default_branch or FALLBACK_DEFAULT_BRANCH


def set_main_branch(config: BranchConfig, repo_url: str, branch: str) -> None:
    config.main_branches[repo_url] = branch


def unset_main_branch(config: BranchConfig, repo_url: str) -> bool:
    """Remove the per-repo default branch. Returns True if one was set."""
    return config.main_branches.pop(repo_url, None) is not None


def record_parent_branch(config: BranchConfig, branch: str, parent: str) -> None:
    config.parent_branches[branch] = parent


def forget_branches(config: BranchConfig, branches: list[str]) -> bool:
    """Drop parent entries for deleted branches. Returns True if any existed."""
    removed = False
    for branch in branches:
        if config.parent_branches.pop(branch, None) is not None:
            removed = True
    return removed


def swap_previous_branch(config: BranchConfig, git_root: str, current: str) -> str:
    """Return the previous branch of a work tree and record the current one."""
    previous = config.previous_branches.get(git_root)
    if not previous:
        raise NoPreviousBranchError()
    config.previous_branches[git_root] = current
    return previous


def branch_lineage(parents: dict[str, str], branch: str) -> list[str]:
    """
    Walk recorded parents upward from a branch.

    Returns:
        Branch names ordered oldest ancestor first, ending with `branch`.

    Raises:
        ParentBranchCycleError: If any branch is visited twice.
    """
    chain = [branch]
    visited = {branch}
    current = branch
    while current in parents:
        current = parents[current]
        if current in visited:
            raise ParentBranchCycleError()
        visited.add(current)
        chain.append(current)
    chain.reverse()
    return chain


def github_repo_path(repo_url: str) -> str:
    """Convert a GitHub remote URL into its `owner/repo` path."""
    for prefix in GITHUB_URL_PREFIXES:
        if repo_url.startswith(prefix):
            return repo_url[len(prefix) :].removesuffix(".git")
    raise UnknownGitUrlError(repo_url)


def pr_base_branch(config: BranchConfig, branch: str, repo_url: str) -> str:
    """Pick the branch a pull request for `branch` should be compared against."""
    base = (
        config.parent_branches.get(branch)
        or config.main_branches.get(repo_url)
        or config.default_branch
    )
    if not base:
        raise UnknownParentBranchError(
            f"Unknown parent branch for branch {branch}; and no default main branch set"
        )
    return base


def pr_link(config: BranchConfig, branch: str, repo_url: str) -> str:
    """Build the GitHub compare URL used to open a pull request."""
    repo_path = github_repo_path(repo_url)
    branch_lineage(config.parent_branches, branch)
    base = pr_base_branch(config, branch, repo_url)
    return f"https://github.com/{repo_path}/compare/{base}...{branch}?expand=1"


def end_branch_parent(config: BranchConfig, branch: str) -> str:
    """Get the recorded parent a finished branch returns to."""
    parent = config.parent_branches.get(branch)
    if not parent:
        raise UnknownParentBranchError(
            f"branch {branch} does not have a known parent branch"
        )
    return parent
