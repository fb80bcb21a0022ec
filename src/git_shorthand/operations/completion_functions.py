"""Pure functions for computing completion suggestions from git output."""

import os
from dataclasses import dataclass
from typing import Callable, Literal

from git_shorthand.errors import CompletionError, ShorthandError
from git_shorthand.operations.executor_functions import (
    get_diff_names,
    get_git_root,
    get_status_porcelain,
    list_branches,
)

StatusKind = Literal["unstaged", "staged", "any"]

UNCHANGED = "."
UNTRACKED = "?"

# Number of space-separated fields before the path, per porcelain v2 entry type.
_PATH_FIELD = {
    "1": 8,
    "2": 9,
    "u": 10,
}


@dataclass(frozen=True, slots=True)
class StatusEntry:
    """One file from `git status --porcelain=v2`."""

    path: str
    index: str
    worktree: str

    @property
    def unstaged(self) -> bool:
        return self.worktree != UNCHANGED

    @property
    def staged(self) -> bool:
        return self.index not in (UNCHANGED, UNTRACKED)


def parse_porcelain_v2(lines: list[str]) -> list[StatusEntry]:
    """Parse porcelain v2 status lines, skipping headers and ignored files."""
    entries = []
    for line in lines:
        if not line:
            continue
        kind = line[0]
        if kind == UNTRACKED:
            entries.append(StatusEntry(line[2:], UNTRACKED, UNTRACKED))
            continue
        if kind not in _PATH_FIELD:
            continue
        fields = line.split(" ", _PATH_FIELD[kind])
        if len(fields) <= _PATH_FIELD[kind]:
            continue
        xy = fields[1]
        # Renames and copies are reported as "<path>\t<original path>".
        path = fields[-1].split("\t")[0]
        entries.append(StatusEntry(path, xy[0], xy[1]))
    return entries


def status_files(entries: list[StatusEntry], kind: StatusKind) -> list[str]:
    """Select distinct, sorted file names matching a status kind."""
    if kind == "unstaged":
        selected = [e for e in entries if e.unstaged]
    elif kind == "staged":
        selected = [e for e in entries if e.staged]
    else:
        selected = entries
    return sorted({e.path for e in selected})


def branch_name(line: str) -> str:
    """Strip `git branch --list` decoration from one line."""
    return line.strip().removeprefix("*").strip()


def branch_names(lines: list[str]) -> list[str]:
    return [name for name in (branch_name(line) for line in lines) if name]


def branch_suggestions(lines: list[str], user: str | None) -> list[str]:
    """
    Suggest branches other than the checked out one.

    Branches under the `<user>/` prefix are also offered without it, so that
    `ch` can resolve the short name back to the prefixed branch.
    """
    suggestions = set()
    prefix = f"{user}/" if user else None
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("*"):
            continue
        suggestions.add(stripped)
        if prefix and stripped.startswith(prefix):
            suggestions.add(stripped[len(prefix) :])
    return sorted(suggestions)


def resolve_branch(branch: str, lines: list[str], user: str | None) -> str:
    """Prefer an exact branch, else the user-prefixed one, else the input."""
    existing = set(branch_names(lines))
    if branch in existing or not user:
        return branch
    prefixed = f"{user}/{branch}"
    if prefixed in existing:
        return prefixed
    return branch


def relative_paths(root: str, names: list[str], cwd: str) -> list[str]:
    """Convert paths relative to the git root into paths relative to cwd."""
    if not os.path.isabs(root):
        raise CompletionError(
            f"failed to get relative path: can't make "
            f"{os.path.join(root, names[0]) if names else root} relative to {cwd}"
        )
    return [os.path.relpath(os.path.join(root, name), cwd) for name in names]


def filter_prefix(suggestions: list[str], incomplete: str) -> list[str]:
    """Keep suggestions starting with `incomplete`, ignoring case."""
    lowered = incomplete.lower()
    return [s for s in suggestions if s.lower().startswith(lowered)]


def _fetch(fetcher: Callable[[], list[str]], context: str) -> list[str]:
    try:
        return fetcher()
    except ShorthandError as e:
        raise CompletionError(f"{context}: {e}") from e


def _relative_to_cwd(names: list[str]) -> list[str]:
    try:
        cwd = os.getcwd()
    except OSError as e:
        raise CompletionError(f"failed to get current directory: {e}") from e
    root = _fetch(lambda: [get_git_root()], "failed to get git root")[0]
    return relative_paths(root, names, cwd)


def fetch_status_files(kind: StatusKind) -> list[str]:
    """Get files of one status kind, relative to the working directory."""
    lines = _fetch(get_status_porcelain, "failed to get git status")
    names = status_files(parse_porcelain_v2(lines), kind)
    return sorted(_relative_to_cwd(names))


def fetch_branch_suggestions(user: str | None) -> list[str]:
    lines = _fetch(
        list_branches, "failed to fetch autocomplete suggestions with shell command"
    )
    return branch_suggestions(lines, user)


def fetch_diff_files() -> list[str]:
    """Get files with unstaged diffs, relative to the working directory."""
    names = _fetch(get_diff_names, "failed to get diffable files")
    return _relative_to_cwd(names)
