"""Function helpers."""

from __future__ import annotations

from typing import Any, Callable


def partial(f: Callable[..., Any], arg1: Any) -> Callable[..., Any]:
    """Return a function that calls ``f`` with ``arg1`` bound as its first argument."""

    def bound(*args: Any) -> Any:
        return f(arg1, *args)

    return bound