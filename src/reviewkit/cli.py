"""Top-level Click group for the reviewkit CLI."""

import click

from reviewkit.scaffold.cli import book_cmd


@click.group()
def main():
    """reviewkit - start new reviews on a Hugo blog kept in git."""
    pass


main.add_command(book_cmd)
