"""Options shared by the get commands."""

from collections.abc import Callable
from pathlib import Path
from typing import ParamSpec, TypeVar

import click

from fleetview.core.config_store import DEFAULT_CONFIG_PATH, DEFAULT_CONTEXT

P = ParamSpec("P")
T = TypeVar("T")


def fleet_client_options(f: Callable[P, T]) -> Callable[P, T]:
    """Options selecting the client config file and server context."""
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=DEFAULT_CONFIG_PATH,
        envvar="CONFIG",
        show_default=True,
        help="Path to the fleetview config file",
    )(f)
    f = click.option(
        "--context",
        "context_name",
        default=DEFAULT_CONTEXT,
        envvar="CONTEXT",
        show_default=True,
        help="Name of fleetview config context to use",
    )(f)
    return f


def yaml_option(f: Callable[P, T]) -> Callable[P, T]:
    return click.option(
        "--yaml",
        "as_yaml",
        is_flag=True,
        help="Output in yaml format",
    )(f)
