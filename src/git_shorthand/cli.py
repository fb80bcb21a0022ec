"""CLI entry point for git-shorthand."""

import logging
from pathlib import Path

import click

from .commands._shared import ShorthandState, handle_errors
from .commands_logic import CommandResult
from .operations import BranchConfigStore
from .operations.shell_functions import current_os, run_executables


@click.group()
@click.option("-y", "--dry-run", is_flag=True, help="Dry-run mode")
@click.option("-v", "--verbose", is_flag=True, help="Log git queries and executed commands")
@click.option(
    "--config-file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="GIT_SHORTHAND_CONFIG",
    help="State file for default and parent branches",
)
@click.option(
    "--os",
    "os_name",
    default=current_os,
    envvar="GIT_SHORTHAND_OS",
    help="Platform the emitted commands are shaped for (linux or windows)",
)
@click.pass_context
@handle_errors
def cli(
    ctx: click.Context,
    dry_run: bool,
    verbose: bool,
    config_file: Path | None,
    os_name: str,
) -> None:
    """Git shorthand: mnemonic subcommands for everyday git.

    Each subcommand expands into git shell commands, for example
    `g c did things -p` commits and pushes.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    store = BranchConfigStore(config_file)
    ctx.obj = ShorthandState(
        config=store.load(),
        store=store,
        os_name=os_name,
        dry_run=dry_run,
    )


@cli.result_callback()
@click.pass_context
def run_result(ctx: click.Context, result: CommandResult | None, **kwargs) -> None:
    """Persist changed state, then run or print the emitted shell commands."""
    state = ctx.find_object(ShorthandState)
    result = result or CommandResult()

    if state.dry_run:
        click.echo("# Dry Run Summary")
        click.echo("# Shell executables:")
        for line in result.executable:
            click.echo(line)
        return

    if result.changed:
        state.store.save(state.config)

    returncode = run_executables(result.executable, state.os_name)
    if returncode:
        ctx.exit(returncode)


# Import and register commands
from .commands.branch import (
    checkout,
    checkout_main,
    current,
    delete_branch,
    end_branch,
    merge_main,
    pr_link_command,
    previous_branch,
)
from .commands.commit import commit, commit_push
from .commands.config import cfg
from .commands.files import add, diff, log, remove, status, undo_add, undo_change
from .commands.stash import rebase, stash_pop, stash_push
from .commands.sync import (
    aliases,
    pull_push,
    push,
    push_upstream_pr_link,
    simple_command,
    ssh_agent,
)

for name in ("am", "b", "f", "l", "uco"):
    cli.add_command(simple_command(name))
cli.add_command(simple_command("l"), "pl")

cli.add_command(add)
cli.add_command(aliases)
cli.add_command(delete_branch)
cli.add_command(commit)
cli.add_command(cfg)
cli.add_command(checkout)
cli.add_command(commit_push)
cli.add_command(current)
cli.add_command(diff)
cli.add_command(end_branch)
cli.add_command(log)
cli.add_command(checkout_main)
cli.add_command(merge_main)
cli.add_command(stash_pop)
cli.add_command(push)
cli.add_command(previous_branch)
cli.add_command(pull_push)
cli.add_command(pr_link_command)
cli.add_command(rebase)
cli.add_command(remove)
cli.add_command(status)
cli.add_command(ssh_agent)
cli.add_command(undo_add)
cli.add_command(undo_change)
cli.add_command(push_upstream_pr_link)
cli.add_command(stash_push)


if __name__ == "__main__":
    cli()
