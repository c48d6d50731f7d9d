"""ContentScaffolder: start a new piece of content on its own branch.

The sequence is fixed: switch to the base branch, pull, branch off, then ask
Hugo for a content skeleton. Each step blocks until its process exits and a
failing step raises, so nothing after it runs. Completed steps are left as
they are.
"""

from reviewkit.scaffold.content_kind import BOOK_REVIEW
from reviewkit.templates.template_renderer import render_template

SUMMARY_HEADER = ("(index)", "Values")


class MissingParameterError(Exception):
    """Raised when the slug is absent or empty."""

    def __init__(self, name="slug"):
        self.name = name
        super().__init__(f"Missing {name}!")


def require_slug(slug):
    """Raise MissingParameterError unless *slug* is a non-empty string."""
    if not slug:
        raise MissingParameterError("slug")
    return slug


def render_summary(kind, slug):
    """Render the two-row confirmation table shown before anything runs."""
    rows = [("type", kind.label), ("slug", slug)]
    return render_template(
        "summary_table.j2",
        package=__package__,
        header=SUMMARY_HEADER,
        rows=rows,
        key_width=max(len(text) for text in [SUMMARY_HEADER[0]] + [r[0] for r in rows]),
        value_width=max(len(text) for text in [SUMMARY_HEADER[1]] + [r[1] for r in rows]),
    )


class ContentScaffolder:
    """Runs the branch-and-scaffold sequence for one content kind.

    Args:
        git_repo: GitRepository (or a fake) for the working tree.
        site: HugoSite (or a fake) for the same working tree.
        kind: The ContentKind to scaffold.
    """

    def __init__(self, git_repo, site, kind=BOOK_REVIEW):
        self._git_repo = git_repo
        self._site = site
        self._kind = kind

    def steps(self, slug, base_branch="master"):
        """Return the ordered (description, action) pairs for *slug*."""
        branch_name = self._kind.branch_name(slug)
        content_path = self._kind.content_path(slug)
        hugo_cmd = self._site.new_content_command(self._kind.kind, content_path)
        return [
            (f"git checkout {base_branch}",
             lambda: self._git_repo.checkout(base_branch)),
            ("git pull",
             self._git_repo.pull),
            (f"git checkout -b {branch_name}",
             lambda: self._git_repo.create_branch(branch_name)),
            (" ".join(hugo_cmd),
             lambda: self._site.new_content(self._kind.kind, content_path)),
        ]

    def scaffold(self, slug, base_branch="master", dry_run=False):
        """Validate *slug*, show the summary, then run every step in order.

        Raises:
            MissingParameterError: If slug is None or empty. No step runs.
        """
        require_slug(slug)

        print(render_summary(self._kind, slug))

        prefix = "[dry-run] " if dry_run else ""
        for description, action in self.steps(slug, base_branch):
            print(f"{prefix}Running: {description}")
            if not dry_run:
                action()
