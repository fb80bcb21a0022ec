import click

from ..commands_logic import CommandResult, cmd_commit
from ._shared import ShorthandState, handle_errors, pass_state

no_verify_option = click.option(
    "-n", "--no-verify", is_flag=True, help="Whether or not to run pre-commit checks"
)
message_argument = click.argument("message", nargs=-1, required=True)


@click.command("c")
@no_verify_option
@click.option("-p", "--push", is_flag=True, help="Whether or not to push afterwards")
@message_argument
@pass_state
@handle_errors
def commit(
    state: ShorthandState, no_verify: bool, push: bool, message: tuple[str, ...]
) -> CommandResult:
    """Commit.

    MESSAGE: Commit message
    """
    return cmd_commit(message, no_verify, push, state.os_name)


@click.command("cp")
@no_verify_option
@message_argument
@pass_state
@handle_errors
def commit_push(
    state: ShorthandState, no_verify: bool, message: tuple[str, ...]
) -> CommandResult:
    """Commit and push.

    MESSAGE: Commit message
    """
    return cmd_commit(message, no_verify, True, state.os_name)
