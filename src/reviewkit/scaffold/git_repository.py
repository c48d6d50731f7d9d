"""GitRepository: wraps GitPython Repo for the branch operations of a scaffold.

Provides an injectable interface for Git operations, enabling
FakeGitRepository in tests without unittest.mock.patch.
"""

import re

# GitCommandError keeps stderr as "\n  stderr: '<git's text>'".
_WRAPPED_STDERR = re.compile(r"\s*stderr: '(?P<text>.*)'\s*\Z", re.DOTALL)


def git_error_output(error):
    """Return git's own stderr text from a GitCommandError."""
    stderr = error.stderr or ""
    match = _WRAPPED_STDERR.match(stderr)
    if match:
        return match.group("text")
    return stderr.strip()


class GitRepository:
    """Wraps a GitPython Repo with the checkout, pull and branch steps.

    Git's output is echoed on success. Failures propagate as
    git.exc.GitCommandError; use git_error_output() for git's stderr.

    Args:
        repo: A GitPython Repo instance.
    """

    def __init__(self, repo):
        self._repo = repo

    @property
    def working_tree_dir(self):
        return self._repo.working_tree_dir

    @property
    def active_branch(self):
        return self._repo.active_branch.name

    def _run(self, command, *args):
        _, stdout, stderr = getattr(self._repo.git, command)(
            *args, with_extended_output=True,
        )
        # git reports branch switches on stderr
        for text in (stdout, stderr):
            if text:
                print(text)

    def checkout(self, branch_name):
        """Check out the named branch."""
        self._run("checkout", branch_name)

    def pull(self):
        """Fetch and merge upstream changes into the current branch."""
        self._run("pull")

    def create_branch(self, branch_name):
        """Create the named branch from HEAD and check it out."""
        self._run("checkout", "-b", branch_name)
