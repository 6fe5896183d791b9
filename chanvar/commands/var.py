"""
Variable Management Commands

This module provides CLI commands for inspecting and removing the variables
of the active channel.

Commands:
- /var show <name>: Show a variable's raw value.
- /var items <name>: Show the items of an array variable.
- /var showall: List all variables.
- /var delete <name>: Delete a variable.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table
import click
from chanvar.commands.base import RichGroup, RichCommand, rich_help
from chanvar.lib.channel import Channel, channel_active
from chanvar.lib.log import LOG

console: Console = Console()


@click.group(
    cls=RichGroup,
    short_help="Manage variables",
    help="""
    Variable Management

    Commands to inspect the variables of the channel.
    """,
)
def var() -> None:
    """
    Root group for variable-related commands.
    """
    pass


var: click.Group = var


@var.command(
    cls=RichCommand,
    help=rich_help(
        command="var show",
        description="Show the raw value of a channel variable.",
        usage="<name>",
        args={
            "<name>": "The name of the variable to show.",
        },
    ),
)
@click.argument("name", type=str)
def show(name: str) -> None:
    """
    Show a variable's raw value.

    :param name: The name of the variable to show.
    """
    value: str | None = channel_active().value_get(name)
    if value is None:
        console.print(f"[bold red]Variable '{escape(name)}' not found[/bold red]")
        raise click.exceptions.Exit(1)
    console.print(f"[bold cyan]{escape(name)}:[/bold cyan] {escape(value)}")


@var.command(
    cls=RichCommand,
    help=rich_help(
        command="var items",
        description="Show the items of an array variable, one per line.",
        usage="<name>",
        args={
            "<name>": "The name of the array variable.",
        },
    ),
)
@click.argument("name", type=str)
def items(name: str) -> None:
    """
    Show the items of an array variable.

    :param name: The name of the variable.
    """
    values: list[str] = channel_active().array_get(name)
    if not values:
        console.print(f"[bold red]Variable '{escape(name)}' not found[/bold red]")
        raise click.exceptions.Exit(1)
    for index, value in enumerate(values):
        console.print(f"[cyan]{escape(name)}\\[{index}][/cyan] {escape(value)}")


@var.command(
    cls=RichCommand,
    help=rich_help(
        command="var showall",
        description="Show a list of all channel variables.",
        usage="",
        args={},
    ),
)
def showall() -> None:
    """
    Displays all variables of the channel.
    """
    channel: Channel = channel_active()
    table: Table = Table(title=f"{channel.name} ({channel.uuid})")
    table.add_column("Name", style="cyan")
    table.add_column("Value", style="white")
    for name, value in sorted(channel.variables.items()):
        table.add_row(escape(name), escape(value))
    console.print(table)


@var.command(
    cls=RichCommand,
    help=rich_help(
        command="var delete",
        description="Delete a channel variable.",
        usage="<name>",
        args={
            "<name>": "The name of the variable to delete.",
        },
    ),
)
@click.argument("name", type=str)
def delete(name: str) -> None:
    """
    Deletes a variable from the channel.

    :param name: The name of the variable to delete.
    """
    if channel_active().variable_delete(name):
        console.print(
            f"[bold green]Variable '{escape(name)}' deleted successfully.[/bold green]"
        )
    else:
        LOG(f"Delete of unset variable '{name}'")
        console.print(f"[bold red]Variable '{escape(name)}' not found[/bold red]")
        raise click.exceptions.Exit(1)
