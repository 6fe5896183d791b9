"""
Channel application and API commands.

This module exposes the registered applications as CLI commands. Each command
takes the raw argument string of the application as one argument, exactly as
a dialplan would pass it.

Commands:
- /set_raw <varname>=<value>: Set a variable without expansion.
- /set_array [opts]<varname>=<value>: Push every item of a split value.
- /join_array [opts],<value>: Split a value and join it with affixes.
- /get_var_expanded <varname>: Show a variable with references expanded.
"""

from rich.console import Console
from rich.markup import escape
import click
from chanvar.commands.base import RichCommand, rich_help
from chanvar.config.settings import appsettings
from chanvar.lib.channel import channel_active
from chanvar.lib.router import router
from chanvar.models.dataModel import ApplicationKind, ApplicationRoute, CommandResult

console: Console = Console()


def application_run(name: str, data: str) -> None:
    """
    Dispatch an application on the active channel and print its result.

    :param name: Registered application name.
    :param data: Raw argument string.
    :raises click.exceptions.Exit: With code 1 when the application failed.
    """
    route: ApplicationRoute | None = router.route_get(name)
    result: CommandResult = router.dispatch(name, data, channel_active())

    for warning in result.warnings:
        console.print(f"[bold yellow]Warning: {escape(warning)}[/bold yellow]")

    if not result.success:
        console.print(f"[bold red]Error: {escape(result.error or 'unknown')}[/bold red]")
        raise click.exceptions.Exit(1)

    if route and route.kind is ApplicationKind.API:
        console.print(result.text, markup=False, highlight=False, soft_wrap=True)
    elif appsettings.detailedOutput:
        console.print(f"[bold green]{name} done.[/bold green]")


@click.command(
    "set_raw",
    cls=RichCommand,
    short_help="Set a channel variable without expanding value",
    help=rich_help(
        command="set_raw",
        description="Set a channel variable without expanding the value.",
        usage="<varname>=<value>",
        args={
            "<varname>": "The name of the variable to set.",
            "<value>": "The value, stored as is. Omit it to unset the variable.",
        },
    ),
)
@click.argument("data", required=False, default="")
def set_raw(data: str) -> None:
    """
    Set a channel variable without expanding the value.

    :param data: "<varname>=<value>" or "<varname>,<value>".
    """
    application_run("set_raw", data)


@click.command(
    "set_array",
    cls=RichCommand,
    short_help="Set a channel variable to an array of values",
    help=rich_help(
        command="set_array",
        description="Split a value and push every item onto a variable.",
        usage="[delim=,expand,expand_each,max_split=]<varname>=<value>",
        args={
            "delim=": "Item delimiter, a space by default.",
            "expand": "Expand ${var} references before splitting.",
            "expand_each": "Expand ${var} references in every item.",
            "max_split=": "Maximum number of items.",
        },
    ),
)
@click.argument("data", required=False, default="")
def set_array(data: str) -> None:
    """
    Push the items of a split value onto a variable.

    :param data: "[options]<varname>=<value>".
    """
    application_run("set_array", data)


@click.command(
    "join_array",
    cls=RichCommand,
    short_help="Join an array split by split_by and join by joiner",
    help=rich_help(
        command="join_array",
        description="Split a value on split_by and join it back with joiner and affixes.",
        usage="[split_by=,joiner=,prefix_each=,suffix_each=,...],<value>",
        args={
            "split_by=": "Item delimiter, ':|' by default.",
            "joiner=": "Placed between items.",
            "prefix_first= / prefix_last= / prefix_each=": "Item prefixes.",
            "suffix_first= / suffix_last= / suffix_each=": "Item suffixes.",
            "max_split=": "Maximum number of items.",
            "strip_white_space": "Trim whitespace around the value and items.",
            "expand / expand_each": "Expand ${var} references before / after splitting.",
        },
    ),
)
@click.argument("data", required=False, default="")
def join_array(data: str) -> None:
    """
    Print a split value joined back according to the options.

    :param data: "[options],<value>".
    """
    application_run("join_array", data)


@click.command(
    "get_var_expanded",
    cls=RichCommand,
    short_help="Get a channel variable, and expand vars",
    help=rich_help(
        command="get_var_expanded",
        description="Print a channel variable with its ${var} references expanded.",
        usage="<varname>",
        args={"<varname>": "The name of the variable."},
    ),
)
@click.argument("data", required=False, default="")
def get_var_expanded(data: str) -> None:
    """
    Print a variable with its references expanded.

    :param data: The variable name.
    """
    application_run("get_var_expanded", data)
