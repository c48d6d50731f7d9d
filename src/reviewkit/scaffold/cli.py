"""Click command for starting a new book review."""

import os
import sys

import click

from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from reviewkit.scaffold.content_kind import BOOK_REVIEW
from reviewkit.scaffold.content_scaffolder import (
    ContentScaffolder,
    MissingParameterError,
    require_slug,
)
from reviewkit.scaffold.git_repository import GitRepository, git_error_output
from reviewkit.scaffold.hugo_site import HugoCommandError, HugoSite
from reviewkit.scaffold.scaffold_opts import ScaffoldOpts


def _report_missing(error):
    click.echo(f"***{error}***", err=True)
    sys.exit(1)


def _report_failure(command, returncode, stderr):
    click.echo(f"Error: {command} failed", err=True)
    if stderr and stderr.strip():
        click.echo(stderr.rstrip(), err=True)
    sys.exit(returncode if isinstance(returncode, int) and returncode > 0 else 1)


def _open_repository(repo_dir):
    try:
        return Repo(repo_dir, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        click.echo(f"Error: {os.path.abspath(repo_dir)} is not a git repository", err=True)
        sys.exit(1)


def scaffold_book(opts: ScaffoldOpts, scaffolder: ContentScaffolder):
    """Run the scaffolder for opts.slug, mapping failures to exit codes."""
    try:
        scaffolder.scaffold(opts.slug, base_branch=opts.base_branch, dry_run=opts.dry_run)
    except MissingParameterError as e:
        _report_missing(e)
    except GitCommandError as e:
        command = e.command if isinstance(e.command, str) else " ".join(map(str, e.command))
        _report_failure(command, e.status, git_error_output(e))
    except HugoCommandError as e:
        _report_failure(" ".join(e.command), e.returncode, e.stderr)


@click.command("book")
@click.option("--slug", envvar=["REVIEWKIT_SLUG", "npm_config_slug"],
              help="Identifier of the book being reviewed (env: REVIEWKIT_SLUG, npm_config_slug)")
@click.option("--base-branch", envvar="REVIEWKIT_BASE_BRANCH", default="master", show_default=True,
              help="Branch to update and branch off from")
@click.option("--repo", "repo_dir", default=".", type=click.Path(file_okay=False),
              help="Directory inside the site's git repository (default: current directory)")
@click.option("--hugo-bin", envvar="REVIEWKIT_HUGO_BIN", default="hugo", show_default=True,
              help="Hugo executable to run")
@click.option("--dry-run", is_flag=True,
              help="Print the summary and the commands without running them")
def book_cmd(**kwargs):
    """Create a book/<slug> branch and a book-review/<slug>/ content skeleton."""
    opts = ScaffoldOpts(**kwargs)
    try:
        require_slug(opts.slug)
    except MissingParameterError as e:
        _report_missing(e)

    repo = _open_repository(opts.repo_dir)
    git_repo = GitRepository(repo)
    site = HugoSite(git_repo.working_tree_dir, hugo_bin=opts.hugo_bin)
    scaffold_book(opts, ContentScaffolder(git_repo, site, kind=BOOK_REVIEW))
