import click

from ..commands_logic import (
    CommandResult,
    cmd_config_set,
    cmd_config_show,
    cmd_config_unset,
)
from ..operations.executor_functions import get_repo_url
from ._shared import ShorthandState, handle_errors, pass_state

global_option = click.option(
    "-g", "--global", "global_", is_flag=True,
    help="Whether or not to change the global setting",
)


@click.group("cfg")
def cfg() -> None:
    """Config settings."""


@cfg.group("main")
def main_branch() -> None:
    """Default branch settings."""


@main_branch.command("show")
@pass_state
def show(state: ShorthandState) -> CommandResult:
    """Show the global and per-repo default branches."""
    for line in cmd_config_show(state.config):
        click.echo(line)
    return CommandResult()


@main_branch.command("set")
@click.argument("default_branch")
@global_option
@pass_state
@handle_errors
def set_default(state: ShorthandState, default_branch: str, global_: bool) -> CommandResult:
    """Set the default branch for this repo, or globally.

    DEFAULT_BRANCH: Default branch for this git repo
    """
    repo_url = None if global_ else get_repo_url()
    message, changed = cmd_config_set(state.config, default_branch, repo_url)
    click.echo(message)
    return CommandResult(changed=changed)


@main_branch.command("unset")
@global_option
@pass_state
@handle_errors
def unset_default(state: ShorthandState, global_: bool) -> CommandResult:
    """Unset the default branch for this repo, or globally."""
    repo_url = None if global_ else get_repo_url()
    message, changed = cmd_config_unset(state.config, repo_url)
    click.echo(message)
    return CommandResult(changed=changed)
