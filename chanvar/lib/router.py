"""
Application routing and dispatch for chanvar.

This module implements a central registry of the applications and APIs a
channel can run:
- Registration of application handlers by name
- Dispatch of "<name> <data>" requests to the handler
- Conversion of raised errors into a `CommandResult` for the caller

Example flow:
    router.dispatch("join_array", "[joiner=-],a:|b", channel)
        -> CommandResult(text="a-b", success=True)
    router.dispatch("join_array", "joiner=-,a", channel)
        -> CommandResult(error="Syntax error: missing '[' in first arg", success=False)
"""

from typing import Callable, Optional
from chanvar.lib import applications
from chanvar.lib.errors import ChanvarError
from chanvar.lib.log import LOG
from chanvar.models.dataModel import (
    ApplicationKind,
    ApplicationRoute,
    ChannelCollaborator,
    CommandResult,
)


class Router:
    def __init__(self) -> None:
        """Initialize empty route registry."""
        self._routes: dict[str, ApplicationRoute] = {}

    def register(
        self,
        name: str,
        handler: Callable[[str, Optional[ChannelCollaborator]], CommandResult],
        kind: ApplicationKind,
        summary: str = "",
        syntax: str = "",
    ) -> None:
        """Register a handler under name.

        Raises:
            ValueError: If name is already registered
        """
        if name in self._routes:
            raise ValueError(f"Handler already registered for {name}")
        self._routes[name] = ApplicationRoute(name, handler, kind, summary, syntax)

    def route_get(self, name: str) -> ApplicationRoute | None:
        return self._routes.get(name)

    def routes_list(self) -> list[ApplicationRoute]:
        return list(self._routes.values())

    def dispatch(
        self, name: str, data: str, channel: Optional[ChannelCollaborator]
    ) -> CommandResult:
        """Run the application registered as name.

        Args:
            name: Application name
            data: Raw argument string
            channel: Channel to operate on, None when there is no session

        Returns:
            The handler's result, or a failed result carrying the error

        Raises:
            ValueError: If no handler is registered for name
        """
        route: ApplicationRoute | None = self._routes.get(name)
        if route is None:
            raise ValueError(f"No handler for {name}")

        try:
            result: CommandResult = route.handler(data, channel)
        except ChanvarError as e:
            LOG(f"{name}: {e.kind}: {e}", level="ERROR")
            return CommandResult(error=str(e), success=False)

        for warning in result.warnings:
            LOG(f"{name}: {warning}", level="WARNING")
        return result


router: Router = Router()

router.register(
    "set_raw",
    applications.set_raw,
    ApplicationKind.APPLICATION,
    "Set a channel variable without expanding value",
    "<varname>=<value>",
)
router.register(
    "set_array",
    applications.set_array,
    ApplicationKind.APPLICATION,
    "Set a channel variable to an array of values",
    "[delim=,expand,expand_each,max_split=]<varname>=<value>[,value]",
)
router.register(
    "join_array",
    applications.join_array,
    ApplicationKind.API,
    "Join an array split by split_by and join by joiner",
    "[prefix_each=my-prefix,joiner='|',expand,expand_each,split_by=',',max_split=3],"
    "this-is-my-array,which-i-would-like-to-split,and-join",
)
router.register(
    "get_var_expanded",
    applications.get_var_expanded,
    ApplicationKind.API,
    "Get a channel variable, and expand vars",
    "<varname>",
)
