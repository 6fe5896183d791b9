"""
Base classes for Rich-enhanced Click commands and groups.

This module defines:
- `rich_help`: Builds the Rich markup help text of a command.
- `RichGroup`: A custom Click group with Rich-enhanced help rendering.
- `RichCommand`: A custom Click command with Rich-enhanced help rendering.

Features:
- Displays usage information with colorized output.
- Differentiates between command groups and individual commands.
- Escapes usage strings, which are full of square brackets.
- Handles exceptions during help rendering gracefully with logging.
"""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
import click
from chanvar.lib.log import LOG

console: Console = Console()


def rich_help(command: str, description: str, usage: str, args: dict) -> str:
    """
    Generate Rich-enhanced help text for commands.

    :param command: The command name.
    :param description: Description of the command.
    :param usage: Usage syntax for the command.
    :param args: Dictionary of arguments and their descriptions.
    :return: Formatted Rich help string.
    """
    help_text = f"[bold cyan]{escape(description)}[/bold cyan]\n\n"
    help_text += (
        f"[bold yellow]Usage:[/bold yellow]\n    [green]/{command} {escape(usage)}[/green]\n\n"
    )
    if args:
        help_text += "[bold yellow]Arguments:[/bold yellow]\n"
        for arg, desc in args.items():
            help_text += f"    [green]{escape(arg)}[/green]: {escape(desc)}\n"
    return help_text


class RichGroup(click.Group):
    """
    A Click Group that renders its help as a Rich table of subcommands.
    """

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """
        Render the group usage, description and command table.

        :param ctx: The Click context for the command group.
        :param formatter: The Click help formatter (unused).
        """
        try:
            path: str = ctx.command_path.lstrip("/ ")
            console.print(
                f"[bold yellow]Usage:[/bold yellow] [cyan]/{escape(path)}[/cyan] "
                f"[magenta]COMMAND \\[ARGS]...[/magenta]\n"
            )
            if self.help:
                console.print(f"[bold cyan]{escape(self.help.strip())}[/bold cyan]\n")

            table: Table = Table(title="Available Commands", show_header=False, box=None)
            table.add_column("Command", style="cyan", no_wrap=True)
            table.add_column("Description", style="white")
            for name in self.list_commands(ctx):
                command: click.Command | None = self.get_command(ctx, name)
                if command is None or command.hidden:
                    continue
                table.add_row(name, escape(command.get_short_help_str(limit=80)))
            console.print(table)
        except Exception as e:
            LOG(f"Help rendering error: {e}", level="ERROR")
            console.print(f"[bold red]Help rendering error:[/bold red] {escape(str(e))}")


class RichCommand(click.Command):
    """
    A Click Command whose help text is Rich markup built by `rich_help`.
    """

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """
        Render the command help inside a panel sized to its longest line.

        :param ctx: The Click context for the command.
        :param formatter: The Click help formatter (unused).
        """
        try:
            help_text: str = self.help or "No help text available."
            widest: int = max(len(line) for line in help_text.splitlines())
            console.print(
                Panel(
                    help_text,
                    title=f"/{escape(ctx.command_path.lstrip('/ '))}",
                    expand=False,
                    width=min(widest + 10, 100),
                    border_style="cyan",
                )
            )
        except Exception as e:
            LOG(f"Help rendering error: {e}", level="ERROR")
            console.print(f"[bold red]Help rendering error:[/bold red] {escape(str(e))}")
