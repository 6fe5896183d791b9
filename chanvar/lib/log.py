"""
Centralized application-specific logging using Loguru.

This module provides a function-based logging mechanism (`LOG`) that dynamically
respects the `beQuiet` flag from application settings.

Features:
- A custom `LOG` function for application-specific logging.
- Dynamic checking of the `beQuiet` flag to suppress logs when necessary.
- An optional `level` keyword so warnings and errors are tagged as such.

Usage:
- Use `LOG` for application-specific debug logging.
- Pass `level="WARNING"` or `level="ERROR"` for reportable conditions.

Example:
    from chanvar.lib.log import LOG
    LOG("Separating value by ','")
    LOG("Invalid option [foo] specified", level="WARNING")

Environment:
- Set `CHV_BEQUIET=True` to suppress logging output.
"""

from loguru import logger
from typing import Any
import sys

# Create a distinct logger instance for the app
app_logger = logger.bind(app="CHANVAR")

# Configure the app-specific logger
logger_format = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> │ "
    "<level>{level: <7}</level> │ "
    "<yellow>{name: >28}</yellow>::"
    "<cyan>{function: <24}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

app_logger.remove()  # Remove any default handlers
app_logger.add(sys.stderr, format=logger_format)


def LOG(*args: Any, level: str = "DEBUG", **kwargs: Any) -> None:
    """
    Application-specific logging function.

    This function checks the `beQuiet` flag in `appsettings` and logs the message
    only if logging is enabled.

    :param args: Positional arguments for the log message.
    :param level: Loguru level name for the record.
    :param kwargs: Keyword arguments for additional log metadata.
    """
    try:
        from chanvar.config.settings import appsettings  # Ensure up-to-date settings

        if not appsettings.beQuiet:
            app_logger.opt(depth=1).log(level, *args, **kwargs)
    except Exception as e:
        print(f"Logging error: {e}")  # Fallback to standard output on failure
