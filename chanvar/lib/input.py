"""
Input handling and processing for chanvar.

This module provides functionality for collecting and processing user input:
command execution and variable expansion of plain text.

The module handles:
- Interactive (REPL) and non-interactive (stdin script, --exec) input
- Command dispatch for lines starting with '/'
- ${var} expansion of every other line against the active channel
- Input mode detection
- Error handling

Processing order:
1. Escaped lines (leading backslash) are echoed literally
2. Commands are dispatched
3. Anything else is expanded and echoed
"""

import sys
from typing import Final, Optional
from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory, InMemoryHistory
from rich.console import Console
from rich.markup import escape
from chanvar.config.settings import HISTORY_FILE
from chanvar.lib.channel import Channel, channel_active
from chanvar.lib.command import command_process
from chanvar.lib.errors import ExpansionError
from chanvar.lib.log import LOG
from chanvar.models.dataModel import InputMode, InputResult, ProcessResult

console: Final[Console] = Console()


class REPLSession:
    """Manages REPL input session with history support."""

    def __init__(self) -> None:
        self.session: PromptSession = PromptSession(
            history=self._history_build(),
            enable_history_search=True,
        )

    @staticmethod
    def _history_build() -> FileHistory | InMemoryHistory:
        """Use the persistent history file when its directory can be created."""
        try:
            HISTORY_FILE.parent.mkdir(parents=True, exist_ok=True)
            return FileHistory(str(HISTORY_FILE))
        except OSError as e:
            LOG(f"History file unavailable, keeping history in memory: {e}", level="WARNING")
            return InMemoryHistory()


# Global session instance
repl_session: Optional[REPLSession] = None


def input_get() -> InputResult:
    """Get user input with prompt.

    Returns:
        InputResult containing:
            - text: The user input text
            - continue_loop: Whether to continue processing
            - error: Any error message if input failed
    """
    global repl_session
    try:
        if not repl_session:
            repl_session = REPLSession()

        channel: Channel = channel_active()
        user_input: str = repl_session.session.prompt(f"{channel.name}> ")
        return InputResult(text=user_input.strip(), continue_loop=True)

    except (KeyboardInterrupt, EOFError):
        return InputResult(text="", continue_loop=False, error="Interrupt received")


def mode_detect(exec_string: str | None = None) -> InputMode:
    """Detect the appropriate input mode.

    Args:
        exec_string: Optional direct command string

    Returns:
        InputMode indicating how to handle input

    Note:
        Priority order:
        1. Stdin content
        2. Exec string
        3. REPL mode
    """
    if not sys.stdin.isatty():
        return InputMode(has_stdin=True, exec_string=None, use_repl=False)
    if exec_string:
        return InputMode(has_stdin=False, exec_string=exec_string, use_repl=False)
    return InputMode(has_stdin=False, exec_string=None, use_repl=True)


def input_readStdin() -> list[str]:
    """Read a script of commands from stdin.

    Returns:
        The non-empty, non-comment lines, stripped

    Raises:
        IOError: If stdin read fails or holds nothing to run
    """
    try:
        content: str = sys.stdin.read()
    except OSError as e:
        LOG(f"Error reading from stdin: {e}", level="ERROR")
        raise IOError(f"Failed to read from stdin: {e}")

    lines: list[str] = [
        line.strip()
        for line in content.splitlines()
        if line.strip() and not line.lstrip().startswith("#")
    ]
    if not lines:
        raise IOError("Empty input from stdin")
    return lines


def input_process(text: str) -> ProcessResult:
    """Process any type of input (commands or content).

    Args:
        text: Raw input text to process

    Returns:
        ProcessResult containing processed text or command status
    """
    if text.startswith("\\"):
        return ProcessResult(text=text[1:], is_command=False, should_exit=False)

    if text.startswith("/"):
        return command_process(text)

    try:
        expanded: str = channel_active().expand_one(text)
    except ExpansionError as e:
        LOG(f"Error expanding input: {e}", level="ERROR")
        return ProcessResult(
            text="",
            is_command=False,
            should_exit=False,
            error=str(e),
            success=False,
            exit_code=1,
        )
    return ProcessResult(text=expanded, is_command=False, should_exit=False)


def input_handle(text: str) -> ProcessResult:
    """Process one line of input and display its outcome.

    Command output is printed by the commands themselves; expanded text
    is echoed here.

    Returns:
        The ProcessResult, for the caller to decide on exiting
    """
    process_result: ProcessResult = input_process(text)
    if not process_result.success:
        if not process_result.is_command:
            console.print(f"[bold red]Error: {escape(process_result.error or '')}[/bold red]")
        return process_result

    if not process_result.is_command:
        console.print(process_result.text, markup=False, highlight=False, soft_wrap=True)

    return process_result
