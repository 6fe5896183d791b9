"""
Defines the main Click command group for chanvar.

This module provides:
- The root `cli` command group for the application.
- Integration with Rich-enhanced Click classes (`RichGroup`).
- Registration of the channel applications and the variable commands.

Usage:
Import `cli` to initialize and run the command-line interface.
"""

import click
from chanvar.commands.base import RichGroup
from chanvar.commands.array import set_raw, set_array, join_array, get_var_expanded
from chanvar.commands.var import var


@click.group(
    cls=RichGroup,
    help="""
    chanvar Command Palette

    Run channel applications and inspect channel variables.
    """,
)
def cli() -> None:
    """
    The root Click command group for chanvar.
    """
    pass


# Explicitly annotate `cli` as `click.Group` for static type checking
cli: click.Group = cli

# Register subcommands
cli.add_command(set_raw)
cli.add_command(set_array)
cli.add_command(join_array)
cli.add_command(get_var_expanded)
cli.add_command(var)

# Names whose whole argument string is passed through unparsed
APPLICATION_COMMANDS: frozenset[str] = frozenset(
    {"set_raw", "set_array", "join_array", "get_var_expanded"}
)
