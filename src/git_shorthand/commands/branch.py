import click

from ..commands_logic import (
    CommandResult,
    cmd_checkout,
    cmd_checkout_main,
    cmd_delete_branches,
    cmd_end,
    cmd_merge_main,
    cmd_previous_branch,
    format_current,
)
from ..errors import GitCommandError
from ..operations.completion_functions import resolve_branch
from ..operations.config_functions import pr_link
from ..operations.executor_functions import (
    get_current_branch,
    get_git_root,
    get_repo_url,
    list_branches,
)
from ._shared import (
    ShorthandState,
    complete_branches,
    current_user,
    handle_errors,
    pass_state,
)


@click.command("ch")
@click.argument("branch", shell_complete=complete_branches)
@click.option(
    "-n", "--new-branch", is_flag=True, help="Whether or not to checkout a new branch"
)
@pass_state
@handle_errors
def checkout(state: ShorthandState, branch: str, new_branch: bool) -> CommandResult:
    """Checkout new branch.

    BRANCH: Branch
    """
    git_root = get_git_root()
    current = get_current_branch()
    if not new_branch:
        branch = resolve_branch(branch, list_branches(), current_user())
    return cmd_checkout(state.config, branch, current, git_root, new_branch)


@click.command("bd")
@click.argument("branches", nargs=-1, required=True, shell_complete=complete_branches)
@click.option("-f", "--force-delete", is_flag=True, help="force delete the branch")
@pass_state
@handle_errors
def delete_branch(
    state: ShorthandState, branches: tuple[str, ...], force_delete: bool
) -> CommandResult:
    """Delete branch.

    BRANCHES: Branches to delete
    """
    return cmd_delete_branches(state.config, branches, force_delete)


@click.command("m")
@pass_state
@handle_errors
def checkout_main(state: ShorthandState) -> CommandResult:
    """Checkout main."""
    git_root = get_git_root()
    current = get_current_branch()
    return cmd_checkout_main(state.config, get_repo_url(), git_root, current)


@click.command("mm")
@pass_state
@handle_errors
def merge_main(state: ShorthandState) -> CommandResult:
    """Merge main."""
    return cmd_merge_main(state.config, get_repo_url())


@click.command("pb")
@pass_state
@handle_errors
def previous_branch(state: ShorthandState) -> CommandResult:
    """Checkout previous branch."""
    git_root = get_git_root()
    current = get_current_branch()
    return cmd_previous_branch(state.config, git_root, current)


@click.command("end")
@pass_state
@handle_errors
def end_branch(state: ShorthandState) -> CommandResult:
    """End a branch after it has been merged."""
    result = cmd_end(state.config, get_current_branch(), state.os_name)
    for line in result.executable:
        click.echo(line)
    return result


@click.command("pr-link")
@pass_state
@handle_errors
def pr_link_command(state: ShorthandState) -> CommandResult:
    """Get PR link."""
    branch = get_current_branch()
    click.echo(pr_link(state.config, branch, get_repo_url()))
    return CommandResult()


@click.command("current")
@click.option(
    "-f", "--format", "fmt", default="%s\n", show_default=True,
    help="printf-style format for the branch",
)
@click.option(
    "-F", "--parent-format", default="",
    help="printf-style format for the parent branches",
)
@click.option("-p", "--prefix", default="", help="Prefix to include if a branch is detected")
@click.option("-s", "--suffix", default="", help="Suffix to include if a branch is detected")
@click.option(
    "-i", "--ignore-no-branch", is_flag=True,
    help="Ignore any errors in the git branch command",
)
@pass_state
@handle_errors
def current(
    state: ShorthandState,
    fmt: str,
    parent_format: str,
    prefix: str,
    suffix: str,
    ignore_no_branch: bool,
) -> CommandResult:
    """Display current branch."""
    try:
        branch = get_current_branch()
    except GitCommandError:
        if ignore_no_branch:
            return CommandResult()
        raise
    click.echo(
        format_current(state.config, branch, fmt, parent_format, prefix, suffix),
        nl=False,
    )
    return CommandResult()
