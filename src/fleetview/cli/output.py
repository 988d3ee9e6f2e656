"""Output utilities for CLI commands with clear intent.

user_output goes to stderr so it never mixes with data a caller may pipe
into another tool; machine_output goes to stdout.
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Write a message meant for the person at the terminal (stderr)."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Write command results: documents, tables, listings (stdout)."""
    click.echo(message, nl=nl)


def emit_text(text: str) -> None:
    """Write already-terminated text to stdout verbatim."""
    machine_output(text, nl=False)
