"""HugoSite: runs Hugo's content scaffolding command against a site directory."""

import subprocess


class HugoCommandError(RuntimeError):
    """Raised when a hugo invocation exits with a non-zero status."""

    def __init__(self, command, returncode, stderr=""):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(
            f"{' '.join(self.command)} exited with status {returncode}"
        )


class HugoSite:
    """A Hugo site rooted at *site_dir*.

    Args:
        site_dir: Directory hugo runs in (the site root).
        hugo_bin: Name or path of the hugo executable.
    """

    def __init__(self, site_dir, hugo_bin="hugo"):
        self.site_dir = site_dir
        self.hugo_bin = hugo_bin

    def new_content_command(self, kind, path):
        return [self.hugo_bin, "new", "--kind", kind, path]

    def new_content(self, kind, path):
        """Create a new content skeleton at *path* from the *kind* archetype.

        Raises:
            HugoCommandError: If hugo is missing or exits non-zero.
        """
        cmd = self.new_content_command(kind, path)
        try:
            result = subprocess.run(
                cmd,
                cwd=self.site_dir,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as e:
            raise HugoCommandError(cmd, 127, str(e)) from e

        if result.returncode != 0:
            raise HugoCommandError(cmd, result.returncode, result.stderr)

        if result.stdout:
            print(result.stdout, end="")
