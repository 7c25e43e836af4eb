"""Yes/no confirmation port used before destructive actions."""
from __future__ import annotations

import inspect
from typing import Awaitable, Callable

Confirm = Callable[[str], "bool | Awaitable[bool]"]


def decline(_message: str) -> bool:
    """Default answer when no interactive prompt is wired in."""

    return False


def accept(_message: str) -> bool:
    return True


async def ask(confirm: Confirm, message: str) -> bool:
    """Call ``confirm`` and await its answer when it is asynchronous."""

    answer = confirm(message)
    if inspect.isawaitable(answer):
        answer = await answer
    return bool(answer)
