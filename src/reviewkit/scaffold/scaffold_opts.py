"""Options dataclass for the book command."""

from dataclasses import dataclass


@dataclass
class ScaffoldOpts:
    """All options for the book command."""

    slug: str | None = None
    base_branch: str = "master"
    repo_dir: str = "."
    hugo_bin: str = "hugo"
    dry_run: bool = False
