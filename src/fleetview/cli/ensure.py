"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in CLI commands
with consistent, user-friendly error messages. All errors use red "Error:" prefix
for visual consistency.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TypeVar

import click
import yaml

from fleetview.cli.output import user_output
from fleetview.core.errors import FleetError

T = TypeVar("T")


def _fail(error_message: str) -> None:
    user_output(click.style("Error: ", fg="red") + error_message)


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def truthy(value: T, error_message: str) -> T:
        """Ensure value is truthy, otherwise output styled error and exit.

        Args:
            value: Value to check for truthiness
            error_message: Error message to display if value is falsy.
                          "Error: " prefix will be added automatically in red.

        Returns:
            The value unchanged if truthy

        Raises:
            SystemExit: If value is falsy (with exit code 1)
        """
        if not value:
            _fail(error_message)
            raise SystemExit(1)
        return value

    @staticmethod
    def not_none(value: T | None, error_message: str) -> T:
        """Ensure value is not None, otherwise output styled error and exit.

        This method provides type narrowing: it takes `T | None` and returns `T`.

        Raises:
            SystemExit: If value is None (with exit code 1)
        """
        if value is None:
            _fail(error_message)
            raise SystemExit(1)
        return value

    @staticmethod
    @contextmanager
    def no_errors() -> Iterator[None]:
        """Turn fleetview and serialization failures into a styled exit.

        The first error aborts the command: its message is printed with the
        "Error: " prefix and the process exits with status 1.

        Example:
            >>> with Ensure.no_errors():
            ...     presenter.print_packs(name, as_yaml=True, with_queries=False)
        """
        try:
            yield
        except (FleetError, yaml.YAMLError) as e:
            _fail(str(e))
            raise SystemExit(1) from e
