"""Command aliases registered as hidden commands.

Click has no native aliases, so each alias is registered as a hidden copy
of the command under another name. Aliases work on the command line but do
not clutter help output.
"""

import copy
from collections.abc import Callable

import click

_ALIASES_ATTR = "_fleetview_aliases"


def alias(*names: str) -> Callable[[click.Command], click.Command]:
    """Attach alias names to a command for register_with_aliases().

    Example:
        >>> @alias("pack", "p")
        ... @click.command("packs")
        ... def packs_cmd() -> None: ...
    """

    def decorator(cmd: click.Command) -> click.Command:
        setattr(cmd, _ALIASES_ATTR, tuple(names))
        return cmd

    return decorator


def get_aliases(cmd: click.Command) -> tuple[str, ...]:
    return getattr(cmd, _ALIASES_ATTR, ())


def register_with_aliases(group: click.Group, cmd: click.Command, name: str | None = None) -> None:
    """Add a command to a group along with a hidden command per alias."""
    group.add_command(cmd, name=name)
    for alias_name in get_aliases(cmd):
        hidden = copy.copy(cmd)
        hidden.name = alias_name
        hidden.hidden = True
        group.add_command(hidden, name=alias_name)
