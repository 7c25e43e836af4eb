"""Debounced keyword channel feeding the search dispatch."""
from __future__ import annotations

import asyncio
from typing import Callable, Generic, TypeVar

from loguru import logger

T = TypeVar("T")

DEFAULT_SEARCH_DELAY = 0.3

_UNSET = object()


class Debouncer(Generic[T]):
    """Single-slot buffer with a restartable countdown.

    Every :meth:`push` replaces the buffered value and restarts the timer, so
    ``callback`` only ever sees the value that survived a full quiet period.
    Must be used from inside a running event loop.
    """

    def __init__(self, delay: float, callback: Callable[[T], None]) -> None:
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self._delay = delay
        self._callback = callback
        self._handle: asyncio.TimerHandle | None = None
        self._pending: T | None = None

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> T | None:
        return self._pending

    @property
    def is_pending(self) -> bool:
        return self._handle is not None

    def push(self, value: T) -> None:
        if self._handle is not None:
            self._handle.cancel()
        self._pending = value
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self._delay, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
        self._handle = None
        self._pending = None

    def _fire(self) -> None:
        value = self._pending
        self._handle = None
        self._pending = None
        self._callback(value)  # type: ignore[arg-type]


class SearchPipeline:
    """Idle -> Debouncing -> Dispatched channel for keyword input.

    A settled keyword is handed to ``dispatch`` only when it differs from the
    previously dispatched one.
    """

    def __init__(self, dispatch: Callable[[str], None], *, delay: float = DEFAULT_SEARCH_DELAY) -> None:
        self._dispatch = dispatch
        self._debouncer: Debouncer[str] = Debouncer(delay, self._on_settled)
        self._last_dispatched: object = _UNSET

    @property
    def delay(self) -> float:
        return self._debouncer.delay

    @property
    def is_debouncing(self) -> bool:
        return self._debouncer.is_pending

    @property
    def last_dispatched(self) -> str | None:
        return None if self._last_dispatched is _UNSET else self._last_dispatched  # type: ignore[return-value]

    def push(self, keyword: str) -> None:
        self._debouncer.push(keyword)

    def cancel(self) -> None:
        self._debouncer.cancel()

    def _on_settled(self, keyword: str) -> None:
        if keyword == self._last_dispatched:
            logger.debug(f"Search for {keyword!r} suppressed, unchanged since last dispatch")
            return
        self._last_dispatched = keyword
        self._dispatch(keyword)
