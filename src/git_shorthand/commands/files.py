import click

from ..commands_logic import (
    CommandResult,
    cmd_add,
    cmd_diff,
    cmd_log,
    cmd_remove,
    cmd_status,
    cmd_undo_add,
    cmd_undo_change,
)
from ..operations.config_functions import get_default_branch
from ..operations.executor_functions import get_repo_url
from ._shared import (
    ShorthandState,
    complete_diff_files,
    complete_status_files,
    handle_errors,
    pass_state,
)

PASS_THROUGH = {"ignore_unknown_options": True}


@click.command("a")
@click.argument("files", nargs=-1, shell_complete=complete_status_files("unstaged"))
@click.option(
    "-w", "--whitespace", is_flag=True,
    help="No-op so that diff flags can be kept when switching to add",
)
def add(files: tuple[str, ...], whitespace: bool) -> CommandResult:
    """Add.

    FILES: Files to add
    """
    return cmd_add(files)


@click.command("s")
@click.argument("files", nargs=-1, shell_complete=complete_status_files("any"))
def status(files: tuple[str, ...]) -> CommandResult:
    """Status.

    FILES: Files to show status for
    """
    return cmd_status(files)


@click.command("ua")
@click.argument("files", nargs=-1, shell_complete=complete_status_files("staged"))
def undo_add(files: tuple[str, ...]) -> CommandResult:
    """Undo add.

    FILES: Files to un-add
    """
    return cmd_undo_add(files)


@click.command("uc")
@click.argument(
    "files", nargs=-1, required=True, shell_complete=complete_status_files("unstaged")
)
def undo_change(files: tuple[str, ...]) -> CommandResult:
    """Undo change.

    FILES: Files to un-change
    """
    return cmd_undo_change(files)


@click.command("rm", context_settings=PASS_THROUGH)
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.UNPROCESSED,
    shell_complete=complete_status_files("unstaged"),
)
def remove(files: tuple[str, ...]) -> CommandResult:
    """Remove.

    FILES: Files to remove; flags such as -rf are passed to rm
    """
    return cmd_remove(files)


@click.command("d")
@click.argument("files", nargs=-1, shell_complete=complete_diff_files)
@click.option(
    "-m", "--main", "against_main", is_flag=True,
    help="Whether to diff against main branch or just local diffs",
)
@click.option(
    "-c", "--commit", "prev_commit", is_flag=True,
    help="Whether to diff against the previous commit",
)
@click.option(
    "-w", "--whitespace", is_flag=True,
    help="Whether or not to show whitespace in diffs",
)
@click.option("-a", "--add", "add_files", is_flag=True, help="If set, then files will be added")
@pass_state
@handle_errors
def diff(
    state: ShorthandState,
    files: tuple[str, ...],
    against_main: bool,
    prev_commit: bool,
    whitespace: bool,
    add_files: bool,
) -> CommandResult:
    """Diff.

    FILES: Files to diff
    """
    main_branch = None
    if against_main and not add_files:
        main_branch = get_default_branch(state.config, get_repo_url())
    return cmd_diff(
        files,
        whitespace=whitespace,
        main_branch=main_branch,
        prev_commit=prev_commit,
        add=add_files,
    )


@click.command("lg")
@click.argument("n", type=click.IntRange(min=0), default=1, required=False)
@click.option(
    "-d", "--diff", "show_diff", is_flag=True,
    help="Whether or not to diff the current changes against N commits prior",
)
@click.option(
    "-w", "--whitespace", is_flag=True,
    help="Whether or not to show whitespace in diffs",
)
def log(n: int, show_diff: bool, whitespace: bool) -> CommandResult:
    """Git log.

    N: Number of git logs to display
    """
    return cmd_log(n, show_diff, whitespace)
