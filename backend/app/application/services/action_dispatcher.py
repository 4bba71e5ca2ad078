"""Action dispatch table — logical UI actions mapped to handlers.

Whatever front end drives the feed (a browser bridge, a TUI, a test) sends
named actions with keyword payloads instead of wiring callbacks to element
ids.
"""

import inspect
import logging
from collections.abc import Callable
from typing import Any

from app.domain.exceptions import UnknownActionError

logger = logging.getLogger(__name__)

Handler = Callable[..., Any]


class ActionDispatcher:
    def __init__(self) -> None:
        self._handlers: dict[str, Handler] = {}

    def register(self, action: str, handler: Handler) -> None:
        self._handlers[action] = handler

    def actions(self) -> list[str]:
        return sorted(self._handlers)

    def __contains__(self, action: str) -> bool:
        return action in self._handlers

    async def dispatch(self, action: str, **payload: Any) -> Any:
        """Run the handler for *action*, awaiting it when it returns a coroutine."""
        try:
            handler = self._handlers[action]
        except KeyError:
            raise UnknownActionError(action) from None

        logger.debug("Dispatching %s %s", action, sorted(payload))
        result = handler(**payload)
        # Scheduled tasks are handed back to the caller, not awaited.
        if inspect.iscoroutine(result):
            result = await result
        return result
