"""
chanvar Main Module.

This module serves as the main entry point for chanvar, a toolkit of channel
applications that split delimited values into arrays and join arrays back
into formatted strings.

Features:
- Sets up a channel, optionally seeded with variables from a JSON file
- Supports multiple input modes: stdin script, direct command, interactive REPL
- Exits non-zero when a command fails in non-interactive mode

Usage:
    Run this module as a standalone script to start the REPL.

Examples:
    Start interactive REPL:
        $ chanvar

    Single command mode:
        $ chanvar --exec "/join_array [joiner=', '],a:|b:|c"

    Script mode:
        $ printf '/set_array [delim=,]dest=1000,1001\\n/var items dest\\n' | chanvar

    Seed the channel:
        $ chanvar --vars ./vars.json --exec "/get_var_expanded greeting"

Note:
    Input priority order:
    1. stdin (if available)
    2. --exec argument (if provided)
    3. interactive REPL (default)
"""

from pathlib import Path
from argparse import Namespace, ArgumentParser, ArgumentDefaultsHelpFormatter
import signal
import sys
from typing import Final, Optional
from types import FrameType
from rich.console import Console
from rich.markup import escape
from chanvar.config.settings import VARIABLES_FILE, variables_load
from chanvar.lib.channel import Channel, channel_activate
from chanvar.lib.input import input_handle, input_readStdin, mode_detect
from chanvar.lib.log import LOG
from chanvar.lib.repl import repl_do
from chanvar.models.dataModel import InputMode, ProcessResult

__version__: Final[str] = "0.1.0"

DISPLAY_TITLE: Final[
    str
] = """
┏━╸╻ ╻┏━┓┏┓╻╻ ╻┏━┓┏━┓
┃  ┣━┫┣━┫┃┗┫┃┏┛┣━┫┣┳┛
┗━╸╹ ╹╹ ╹╹ ╹┗┛ ╹ ╹╹┗╸
"""

console: Final[Console] = Console()

# Define the argument parser
parser: Final[ArgumentParser] = ArgumentParser(
    description="Split delimited values into channel arrays and join them back.",
    formatter_class=ArgumentDefaultsHelpFormatter,
)
parser.add_argument("--exec", type=str, help="Run one command line and exit")
parser.add_argument(
    "--vars",
    type=Path,
    default=VARIABLES_FILE,
    help="JSON object of initial channel variables",
)
parser.add_argument(
    "--channel", type=str, default="chanvar/local", help="Name of the channel"
)
parser.add_argument(
    "-V", "--version", action="version", version=f"%(prog)s {__version__}"
)


def channel_setup(options: Namespace) -> Optional[Channel]:
    """Create the active channel.

    Args:
        options: Parsed command-line arguments

    Returns:
        The channel, or None if the variables file is unusable
    """
    try:
        variables: dict[str, str] = variables_load(options.vars)
    except (ValueError, OSError) as e:
        LOG(f"Channel setup failed: {e}", level="ERROR")
        console.print(f"[bold red]Cannot load variables: {escape(str(e))}[/bold red]")
        return None
    return channel_activate(Channel(name=options.channel, variables=variables))


def lines_run(lines: list[str]) -> int:
    """Run command lines in order, stopping at /exit.

    Returns:
        0 if every line succeeded, else the last failing exit code
    """
    exit_code: int = 0
    for line in lines:
        result: ProcessResult = input_handle(line)
        if not result.success:
            exit_code = result.exit_code or 1
        if result.should_exit:
            break
    return exit_code


def run(options: Namespace) -> int:
    """Main function handling all input modes.

    Args:
        options: Parsed command-line arguments

    Returns:
        Process exit code
    """
    if channel_setup(options) is None:
        return 1

    mode: InputMode = mode_detect(options.exec)

    if mode.has_stdin:
        try:
            return lines_run(input_readStdin())
        except IOError as e:
            console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
            return 1

    if mode.exec_string:
        return lines_run([mode.exec_string])

    console.print(DISPLAY_TITLE)
    repl_do()
    return 0


def signal_handle(sig: int, frame: Optional[FrameType]) -> None:
    """Signal handler for graceful interruption.

    Args:
        sig: Signal number
        frame: Current stack frame
    """
    console.print("\n[bold red]Interrupt received.[/bold red]")
    sys.exit(130)


def main(argv: Optional[list[str]] = None) -> None:
    """Console script entry point.

    Args:
        argv: Arguments, sys.argv[1:] when None
    """
    options: Namespace = parser.parse_args(argv)
    signal.signal(signal.SIGINT, signal_handle)
    sys.exit(run(options))


if __name__ == "__main__":
    main()
