"""
REPL implementation for chanvar.

This module provides the REPL (Read-Eval-Print Loop) interface, managing:
- User interaction loop
- Input processing
- Command execution
- Error handling
"""

from rich.console import Console
from typing import Final
from chanvar.lib.input import input_get, input_handle
from chanvar.lib.log import LOG
from chanvar.models.dataModel import InputResult, ProcessResult

console: Final[Console] = Console()


def repl_do() -> None:
    """Main REPL entry point.

    Flow:
    1. Print welcome banner
    2. Process inputs until exit condition
    3. Print exit message

    Exits on:
    - /exit command
    - Ctrl-C / Ctrl-D at the prompt
    - Critical errors
    """
    console.print(
        """
        [cyan]Welcome to the chanvar REPL!
        [green]Type [white]/exit[green] to quit.
        [green]Use [white]/help[green] for command list.
        """
    )

    continue_repl: bool = True
    while continue_repl:
        try:
            input_result: InputResult = input_get()

            if not input_result.continue_loop:
                break  # Handle termination signals

            if not input_result.text:
                continue  # Skip empty inputs

            process_result: ProcessResult = input_handle(input_result.text)
            continue_repl = not process_result.should_exit

        except KeyboardInterrupt:
            console.print("\n[bold yellow]Use '/exit' to quit properly[/bold yellow]")
        except Exception as e:
            LOG(f"REPL critical error: {e}", level="ERROR")
            console.print(f"[bold red]Fatal error: {e}[/bold red]")
            continue_repl = False

    console.print("[bold cyan]REPL session terminated[/bold cyan]")
