"""Configuration management for git-shorthand."""

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path

import click

from git_shorthand.errors import ShorthandError

logger = logging.getLogger(__name__)

APP_NAME = "git-shorthand"
FALLBACK_DEFAULT_BRANCH = "main"


def default_config_path() -> Path:
    """Get the per-user location of the state file."""
    return Path(click.get_app_dir(APP_NAME)) / "config.json"


@dataclass(slots=True)
class BranchConfig:
    """Mutable per-user branch bookkeeping.

    Missing keys in any of the maps mean "fall back" or "unknown", never an
    error.
    """

    default_branch: str = ""
    main_branches: dict[str, str] = field(default_factory=dict)
    parent_branches: dict[str, str] = field(default_factory=dict)
    previous_branches: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "BranchConfig":
        return cls(
            default_branch=data.get("default_branch") or "",
            main_branches=dict(data.get("main_branches") or {}),
            parent_branches=dict(data.get("parent_branches") or {}),
            previous_branches=dict(data.get("previous_branches") or {}),
        )

    def to_dict(self) -> dict:
        return asdict(self)


class BranchConfigStore:
    """Load and save BranchConfig as a JSON document."""

    def __init__(self, path: Path | None = None):
        self.path = path or default_config_path()

    def load(self) -> BranchConfig:
        """Read the state file, treating a missing file as empty state."""
        if not self.path.exists():
            logger.debug("No state file at %s", self.path)
            return BranchConfig()

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ShorthandError(f"Invalid config file {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise ShorthandError(f"Invalid config file {self.path}: expected an object")

        logger.debug("Loaded state from %s", self.path)
        return BranchConfig.from_dict(data)

    def save(self, config: BranchConfig) -> None:
        """Write the state file, creating its directory when needed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(config.to_dict(), indent=2, sort_keys=True) + "\n",
            encoding="utf-8",
        )
        logger.debug("Saved state to %s", self.path)
