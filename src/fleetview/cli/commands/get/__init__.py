"""Read-only retrieval commands."""

import click

from fleetview.cli.alias import register_with_aliases
from fleetview.cli.commands.get.hosts_cmd import get_hosts
from fleetview.cli.commands.get.labels_cmd import get_labels
from fleetview.cli.commands.get.packs_cmd import get_packs
from fleetview.cli.commands.get.queries_cmd import get_queries
from fleetview.cli.commands.get.singletons import get_app_config, get_enroll_secret, get_options


@click.group("get")
def get_group() -> None:
    """Get/list resources."""
    pass


# Register subcommands
register_with_aliases(get_group, get_queries)  # Has @alias("query", "q")
register_with_aliases(get_group, get_packs)  # Has @alias("pack", "p")
register_with_aliases(get_group, get_labels)  # Has @alias("label", "l")
register_with_aliases(get_group, get_hosts)  # Has @alias("host", "h")
get_group.add_command(get_options)
register_with_aliases(get_group, get_enroll_secret)
get_group.add_command(get_app_config)
