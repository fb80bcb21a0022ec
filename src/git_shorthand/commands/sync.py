import click

from ..commands_logic import (
    SIMPLE_COMMANDS,
    CommandResult,
    cmd_pull_push,
    cmd_push,
    cmd_ssh_agent,
    shell_alias_lines,
)
from ..errors import ShorthandError
from ..operations.config_functions import pr_link
from ..operations.executor_functions import (
    get_current_branch,
    get_repo_url,
    push_upstream,
)
from ._shared import ShorthandState, handle_errors, pass_state


def simple_command(name: str) -> click.Command:
    """Build a leaf that always emits one fixed git command."""
    description, executable = SIMPLE_COMMANDS[name]

    def callback() -> CommandResult:
        return CommandResult([executable])

    return click.Command(name, callback=callback, help=description)


@click.command("p")
@click.option("-u", "--upstream", is_flag=True, help="If set, push branch to upstream")
@handle_errors
def push(upstream: bool) -> CommandResult:
    """Push."""
    if not upstream:
        return cmd_push()
    result = cmd_push(get_current_branch())
    click.echo(result.executable[0])
    return result


@click.command("pp")
@pass_state
@handle_errors
def pull_push(state: ShorthandState) -> CommandResult:
    """Pull and push."""
    return cmd_pull_push(state.os_name)


@click.command("up")
@pass_state
@handle_errors
def push_upstream_pr_link(state: ShorthandState) -> CommandResult:
    """Push upstream and output PR link."""
    branch = get_current_branch()
    repo_url = get_repo_url()
    if state.dry_run:
        click.echo(f"# Skipped: git push --set-upstream origin {branch}")
    else:
        try:
            push_upstream(branch)
        except ShorthandError as e:
            raise ShorthandError(f"failed to run git push: {e}") from e
    click.echo(pr_link(state.config, branch, repo_url))
    return CommandResult()


@click.command("sh")
@pass_state
@handle_errors
def ssh_agent(state: ShorthandState) -> CommandResult:
    """Create ssh-agent."""
    return cmd_ssh_agent(state.os_name)


@click.command("aliases")
def aliases() -> CommandResult:
    """Print shell aliases for the most used subcommands."""
    for line in shell_alias_lines():
        click.echo(line)
    return CommandResult()
