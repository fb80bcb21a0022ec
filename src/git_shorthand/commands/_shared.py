"""Shared utilities for commands."""

import functools
import os
from dataclasses import dataclass

import click
from click.shell_completion import CompletionItem

from ..errors import ShorthandError
from ..operations import BranchConfig, BranchConfigStore
from ..operations.completion_functions import (
    StatusKind,
    fetch_branch_suggestions,
    fetch_diff_files,
    fetch_status_files,
    filter_prefix,
)


@dataclass
class ShorthandState:
    """Per-invocation state handed to every command through the click context."""

    config: BranchConfig
    store: BranchConfigStore
    os_name: str
    dry_run: bool = False


pass_state = click.make_pass_decorator(ShorthandState)


def current_user() -> str | None:
    """Get the user name that prefixes personal branches."""
    return os.environ.get("USER") or os.environ.get("USERNAME") or None


def handle_errors(f):
    """Report ShorthandError as a one-line click error."""

    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except ShorthandError as e:
            exc = click.ClickException(str(e))
            exc.exit_code = e.exit_code
            raise exc from e

    return wrapper


def _completions(
    ctx: click.Context,
    param: click.Parameter,
    incomplete: str,
    suggestions,
) -> list[CompletionItem]:
    try:
        values = suggestions()
    except ShorthandError as e:
        click.echo(f"Error: {e}", err=True)
        return []
    given = ctx.params.get(param.name) or ()
    if isinstance(given, str):
        given = (given,)
    return [
        CompletionItem(s)
        for s in filter_prefix(values, incomplete)
        if s not in given
    ]


def complete_status_files(kind: StatusKind):
    """Build a completion callback over `git status` files of one kind."""

    def complete(ctx: click.Context, param: click.Parameter, incomplete: str):
        return _completions(ctx, param, incomplete, lambda: fetch_status_files(kind))

    return complete


def complete_branches(ctx: click.Context, param: click.Parameter, incomplete: str):
    return _completions(
        ctx, param, incomplete, lambda: fetch_branch_suggestions(current_user())
    )


def complete_diff_files(ctx: click.Context, param: click.Parameter, incomplete: str):
    return _completions(ctx, param, incomplete, fetch_diff_files)
