import click

from ..commands_logic import CommandResult, cmd_rebase, cmd_stash

PASS_THROUGH = {"ignore_unknown_options": True}
stash_args_argument = click.argument("stash_args", nargs=-1, type=click.UNPROCESSED)


@click.command("ush", context_settings=PASS_THROUGH)
@stash_args_argument
def stash_push(stash_args: tuple[str, ...]) -> CommandResult:
    """Git stash push.

    STASH_ARGS: Args to pass to `git stash push`
    """
    return cmd_stash("push", stash_args)


@click.command("op", context_settings=PASS_THROUGH)
@stash_args_argument
def stash_pop(stash_args: tuple[str, ...]) -> CommandResult:
    """Git stash pop.

    STASH_ARGS: Args to pass to `git stash pop`
    """
    return cmd_stash("pop", stash_args)


@click.group("rb")
def rebase() -> None:
    """Rebase."""


@rebase.command("a")
def rebase_abort() -> CommandResult:
    """Abort."""
    result = cmd_rebase("abort")
    click.echo(result.executable[0])
    return result


@rebase.command("c")
def rebase_continue() -> CommandResult:
    """Continue."""
    result = cmd_rebase("continue")
    click.echo(result.executable[0])
    return result
