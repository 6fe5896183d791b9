"""
Command processing for chanvar.

Provides command handling functionality for both interactive and
non-interactive modes. Handles:
- Command parsing
- Command execution
- Help system integration
- Error handling

Channel applications receive everything after the command name verbatim,
since their arguments carry their own quoting and escaping. Other commands
are split shell style.
"""

import shlex
import click
from typing import Final, Any
from rich.console import Console
from rich.markup import escape
from chanvar.commands.app import cli, APPLICATION_COMMANDS
from chanvar.lib.log import LOG
from chanvar.models.dataModel import ProcessResult

console: Final[Console] = Console()


def command_argsBuild(command: str, data: str) -> list[str]:
    """Build the click argument list for one command line.

    Args:
        command: Command name
        data: Everything after the command name

    Returns:
        Arguments for the root click group

    Raises:
        ValueError: If a non-application command line cannot be split
    """
    if data == "--help":
        return [command, "--help"]
    if command in APPLICATION_COMMANDS:
        return [command, "--", data] if data else [command]
    return [command] + shlex.split(data)


def command_process(user_input: str) -> ProcessResult:
    """Handle commands starting with '/'.

    Args:
        user_input: The user's command input string starting with '/'

    Returns:
        ProcessResult with is_command set; should_exit for /exit, and
        success/exit_code reflecting the command's outcome

    Note:
        Handles special commands:
        - /exit: Terminates processing
        - /help: Shows command help
        Other commands are passed to Click CLI
    """
    body: str = user_input[1:].strip()
    if not body:
        console.print("[bold red]Error: No command provided.[/bold red]")
        return ProcessResult(
            text=user_input,
            is_command=True,
            should_exit=False,
            error="No command provided.",
            success=False,
            exit_code=1,
        )

    command, _, data = body.partition(" ")
    data = data.lstrip()

    if command == "exit":
        return ProcessResult(text=user_input, is_command=True, should_exit=True)

    try:
        args: list[str] = ["--help"] if command == "help" else command_argsBuild(command, data)
        rc: Any = cli.main(args=args, prog_name="/", standalone_mode=False)
    except ValueError as e:
        LOG(f"Error parsing command: {e}", level="ERROR")
        console.print(f"[bold red]Error parsing input: {escape(str(e))}[/bold red]")
        rc = 1
    except click.exceptions.UsageError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        rc = 2
    except click.exceptions.Abort:
        rc = 1
    except SystemExit as e:
        rc = e.code

    exit_code: int = rc if isinstance(rc, int) else 0
    return ProcessResult(
        text=user_input,
        is_command=True,
        should_exit=False,
        error=None if exit_code == 0 else f"/{command} failed",
        success=exit_code == 0,
        exit_code=exit_code,
    )
