"""Pure functions for command implementations.

Each function turns already-validated inputs into the shell strings a leaf
emits. Functions that update the branch configuration say so through
`CommandResult.changed`.
"""

from dataclasses import dataclass, field

from git_shorthand.errors import ShorthandError
from git_shorthand.operations.config import FALLBACK_DEFAULT_BRANCH, BranchConfig
from git_shorthand.operations.config_functions import (
    branch_lineage,
    end_branch_parent,
    forget_branches,
    get_default_branch,
    record_parent_branch,
    set_main_branch,
    swap_previous_branch,
    unset_main_branch,
)
from git_shorthand.operations.shell_functions import join_steps, quote, quote_all

PREV_COMMIT_REF = '"$(git rev-parse @~1)"'
SSH_AGENT_STEPS = ["eval `ssh-agent`", "ssh-add"]

SIMPLE_COMMANDS = {
    "am": ("Git amend", "git commit --amend --no-edit"),
    "b": ("Branch", "git branch"),
    "f": ("Git fetch", "git fetch"),
    "l": ("Pull", "git pull"),
    "uco": ("Undo commit", "git reset HEAD~"),
}

SHELL_ALIASES = {
    "ch": ["g", "ch"],
    "cm": ["g", "m"],
    "ga": ["g", "a"],
    "gb": ["g", "b"],
    "gbd": ["g", "bd"],
    "gc": ["g", "c"],
    "gcnv": ["g", "c", "-n"],
    "gcp": ["g", "cp"],
    "gd": ["g", "d"],
    "gdm": ["g", "d", "-m"],
    "gmm": ["g", "mm"],
    "gp": ["g", "p"],
    "gpl": ["g", "pl"],
    "gs": ["g", "s"],
    "gsh": ["g", "sh"],
    "gua": ["g", "ua"],
    "guc": ["g", "uc"],
    "guco": ["g", "uco"],
    "mm": ["g", "mm"],
}


@dataclass
class CommandResult:
    """Shell strings for the host to run, and whether state must be saved."""

    executable: list[str] = field(default_factory=list)
    changed: bool = False


def _join_args(values: list[str] | tuple[str, ...]) -> str:
    return " ".join(values)


def cmd_commit(
    message: list[str] | tuple[str, ...],
    no_verify: bool,
    push: bool,
    os_name: str,
) -> CommandResult:
    """Commit with the joined message words, optionally pushing afterwards."""
    nv = " --no-verify" if no_verify else ""
    steps = [f"git commit{nv} -m {quote(_join_args(message))}"]
    if push:
        steps.append("git push")
    steps.append("echo Success!")
    return CommandResult(join_steps(steps, os_name))


def cmd_checkout(
    config: BranchConfig,
    branch: str,
    current: str,
    git_root: str,
    new_branch: bool,
) -> CommandResult:
    """Check out a branch, remembering where we came from."""
    config.previous_branches[git_root] = current
    if new_branch:
        record_parent_branch(config, branch, current)
        return CommandResult([f"git checkout -b {branch}"], changed=True)
    return CommandResult([f"git checkout {branch}"], changed=True)


def cmd_delete_branches(
    config: BranchConfig,
    branches: list[str] | tuple[str, ...],
    force: bool,
) -> CommandResult:
    flag = "-D" if force else "-d"
    changed = forget_branches(config, list(branches))
    return CommandResult([f"git branch {flag} {quote_all(branches)}"], changed=changed)


def cmd_diff(
    files: list[str] | tuple[str, ...],
    *,
    whitespace: bool = False,
    main_branch: str | None = None,
    prev_commit: bool = False,
    add: bool = False,
) -> CommandResult:
    """
    Diff local changes, or against the default branch or the previous commit.

    With `add`, the files are staged instead and every other flag is ignored.
    """
    if add:
        return cmd_add(files)

    target = "--"
    if main_branch:
        target = main_branch
    elif prev_commit:
        target = PREV_COMMIT_REF
    ws = "-w" if whitespace else ""
    return CommandResult([f"git diff {ws} {target} {_join_args(files)}"])


def cmd_log(n: int, diff: bool, whitespace: bool) -> CommandResult:
    if diff:
        ws = "-w" if whitespace else ""
        return CommandResult([f"git diff HEAD~{n} {ws}"])
    return CommandResult([f"git log -n {n}"])


def cmd_checkout_main(
    config: BranchConfig,
    repo_url: str,
    git_root: str,
    current: str,
) -> CommandResult:
    config.previous_branches[git_root] = current
    branch = get_default_branch(config, repo_url)
    return CommandResult([f"git checkout {branch}"], changed=True)


def cmd_merge_main(config: BranchConfig, repo_url: str) -> CommandResult:
    return CommandResult([f"git merge {get_default_branch(config, repo_url)}"])


def cmd_previous_branch(
    config: BranchConfig,
    git_root: str,
    current: str,
) -> CommandResult:
    previous = swap_previous_branch(config, git_root, current)
    return CommandResult([f"git checkout {previous}"], changed=True)


def cmd_push(upstream_branch: str | None = None) -> CommandResult:
    if upstream_branch:
        return CommandResult(
            [f"git push --set-upstream origin {quote(upstream_branch)}"]
        )
    return CommandResult(["git push"])


def cmd_pull_push(os_name: str) -> CommandResult:
    return CommandResult(join_steps(["git pull", "git push"], os_name))


def cmd_ssh_agent(os_name: str) -> CommandResult:
    return CommandResult(join_steps(SSH_AGENT_STEPS, os_name))


def cmd_stash(action: str, args: list[str] | tuple[str, ...]) -> CommandResult:
    """Forward quoted arguments to `git stash push` or `git stash pop`."""
    return CommandResult([f"git stash {action} {quote_all(args)}"])


def cmd_status(files: list[str] | tuple[str, ...]) -> CommandResult:
    return CommandResult([f"git status {_join_args(files)}"])


def cmd_add(files: list[str] | tuple[str, ...]) -> CommandResult:
    if not files:
        return CommandResult(["git add ."])
    return CommandResult([f"git add {_join_args(files)}"])


def cmd_undo_add(files: list[str] | tuple[str, ...]) -> CommandResult:
    return CommandResult([f"git reset -- {_join_args(files) or '.'}"])


def cmd_undo_change(files: list[str] | tuple[str, ...]) -> CommandResult:
    return CommandResult([f"git checkout -- {_join_args(files)}"])


def cmd_remove(files: list[str] | tuple[str, ...]) -> CommandResult:
    return CommandResult([f"rm {_join_args(files)}"])


def cmd_rebase(action: str) -> CommandResult:
    return CommandResult([f"git rebase --{action}"])


def cmd_end(config: BranchConfig, branch: str, os_name: str) -> CommandResult:
    """Return to the parent of a merged branch, update it, and delete the branch."""
    parent = end_branch_parent(config, branch)
    steps = [
        f"git checkout {parent}",
        "git pull",
        f"git branch -d {quote(branch)}",
    ]
    executable = join_steps(steps, os_name)
    forget_branches(config, [branch])
    return CommandResult(executable, changed=True)


def cmd_config_show(config: BranchConfig) -> list[str]:
    if config.default_branch:
        lines = [f"Global default branch: {config.default_branch}"]
    else:
        lines = [f"No global default branch set; using {FALLBACK_DEFAULT_BRANCH}"]
    for repo, branch in sorted(config.main_branches.items()):
        lines.append(f"{repo}: {branch}")
    return lines


def cmd_config_set(
    config: BranchConfig,
    branch: str,
    repo_url: str | None,
) -> tuple[str, bool]:
    """Set the default branch for a repo, or globally when repo_url is None."""
    if repo_url is None:
        config.default_branch = branch
        return f"Setting global default branch to {branch}", True
    set_main_branch(config, repo_url, branch)
    return f"Setting default branch for {repo_url} to {branch}", True


def cmd_config_unset(config: BranchConfig, repo_url: str | None) -> tuple[str, bool]:
    """Unset the default branch for a repo, or globally when repo_url is None."""
    if repo_url is None:
        config.default_branch = ""
        return "Deleting global default branch", True
    if unset_main_branch(config, repo_url):
        return f"Deleting default branch for {repo_url}", True
    return "No default branch set for this repo", False


FORMAT_ESCAPES = {"\\n": "\n", "\\t": "\t"}


def _apply_format(fmt: str, value: str) -> str:
    # Formats typed in a shell arrive with escapes such as \n left literal.
    for escape, char in FORMAT_ESCAPES.items():
        fmt = fmt.replace(escape, char)
    try:
        return fmt % (value,)
    except (TypeError, ValueError) as e:
        raise ShorthandError(f"invalid format {fmt!r}: {e}") from e


def format_current(
    config: BranchConfig,
    branch: str,
    fmt: str = "%s\n",
    parent_fmt: str = "",
    prefix: str = "",
    suffix: str = "",
) -> str:
    """Render the current branch, preceded by its ancestors when parent_fmt is set."""
    ancestors: list[str] = []
    if parent_fmt:
        ancestors = branch_lineage(config.parent_branches, branch)[:-1]
    parts = [_apply_format(parent_fmt, a) for a in ancestors]
    parts.append(_apply_format(fmt, branch))
    return prefix + "".join(parts) + suffix


def shell_alias_lines() -> list[str]:
    return [
        f"alias {name}='{' '.join(args)}'"
        for name, args in sorted(SHELL_ALIASES.items())
    ]
