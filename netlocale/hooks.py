"""Process-local hooks fired while translations are resolved."""

from collections.abc import Callable

LOCALE_RESOLVED = "locale.resolved"
CACHE_WRITTEN = "cache.written"
FETCH_FAILED = "fetch.failed"

_handlers: dict[str, list[Callable]] = {}


def on(event: str, handler: Callable) -> None:
    """Subscribe ``handler`` to ``event``. Handlers receive keyword arguments only."""
    _handlers.setdefault(event, []).append(handler)


def off(event: str, handler: Callable) -> None:
    """Unsubscribe ``handler``; unknown events or handlers are ignored."""
    handlers = _handlers.get(event)
    if handlers and handler in handlers:
        handlers.remove(handler)
        if not handlers:
            del _handlers[event]


def emit(event: str, **payload) -> None:
    for handler in list(_handlers.get(event, ())):
        handler(**payload)


def subscribers(event: str) -> int:
    return len(_handlers.get(event, ()))


def clear() -> None:
    """Drop every subscription. Tests call this between cases."""
    _handlers.clear()
