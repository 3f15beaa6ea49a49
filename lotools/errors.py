"""Helpers for turning failures into values and values into failures."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


class MustError(Exception):
    """Raised by the ``must`` helpers when a check fails."""


def validate(ok: bool, fmt: str, *args: Any) -> ValueError | None:
    """Return a ``ValueError`` built from ``fmt % args`` when ``ok`` is false, else ``None``."""
    if ok:
        return None
    message = fmt % args if args else fmt
    return ValueError(message)


def _message_from_args(args: tuple[Any, ...]) -> str:
    if not args:
        return ""
    if len(args) == 1:
        return args[0] if isinstance(args[0], str) else str(args[0])
    return args[0] % tuple(args[1:])


def _check(err: Any, args: tuple[Any, ...]) -> None:
    if err is None:
        return
    if isinstance(err, bool):
        if not err:
            raise MustError(_message_from_args(args) or "not ok")
        return
    if isinstance(err, BaseException):
        message = _message_from_args(args)
        if message:
            raise MustError(f"{message}: {err}") from err
        raise MustError(str(err)) from err
    raise MustError(
        f"must: invalid err type '{type(err).__name__}', "
        "should either be a bool or an error"
    )


def must(value: T, err: Any, *args: Any) -> T:
    """Return ``value`` unless ``err`` is an exception or ``False``, in which case raise ``MustError``.

    Extra arguments form a message: a single string, or a format string followed by its arguments.
    """
    _check(err, args)
    return value


def must0(err: Any, *args: Any) -> None:
    """Raise ``MustError`` if ``err`` is an exception or ``False``."""
    _check(err, args)


def must_all(values: Any, err: Any, *args: Any) -> tuple[Any, ...]:
    """Like ``must``, for several values at once; returns them as a tuple."""
    _check(err, args)
    return tuple(values)


def try_call(callback: Callable[[], Any]) -> bool:
    """Call ``callback`` and report whether it completed without raising."""
    try:
        callback()
    except Exception:
        return False
    return True


def try_or(callback: Callable[[], Any], *fallbacks: Any) -> tuple[Any, ...]:
    """Call ``callback``; on failure return the fallbacks.

    With one fallback the result is ``(value, ok)``. With several, ``callback``
    must return as many values and the result is ``(*values, ok)``.
    """
    if not fallbacks:
        raise TypeError("try_or needs at least one fallback value")
    try:
        result = callback()
    except Exception:
        return (*fallbacks, False)
    if len(fallbacks) == 1:
        return result, True
    values = tuple(result)
    if len(values) != len(fallbacks):
        raise ValueError(
            f"callback returned {len(values)} values, expected {len(fallbacks)}"
        )
    return (*values, True)


def try_with_error_value(callback: Callable[[], Any]) -> tuple[Exception | None, bool]:
    """Call ``callback``; return ``(exception, False)`` if it raised, else ``(None, True)``."""
    try:
        callback()
    except Exception as exc:
        return exc, False
    return None, True


def try_catch(callback: Callable[[], Any], catch: Callable[[], Any]) -> None:
    """Call ``callback`` and run ``catch`` if it raised."""
    if not try_call(callback):
        catch()


def try_catch_with_error_value(
    callback: Callable[[], Any], catch: Callable[[Exception], Any]
) -> None:
    """Call ``callback`` and pass the raised exception to ``catch`` if it raised."""
    error, ok = try_with_error_value(callback)
    if not ok:
        catch(error)


def errors_as(err: BaseException | None, error_type: type[E]) -> tuple[E | None, bool]:
    """Find the first exception of ``error_type`` in ``err``'s cause/context chain."""
    seen: set[int] = set()
    current = err
    while current is not None and id(current) not in seen:
        if isinstance(current, error_type):
            return current, True
        seen.add(id(current))
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None
    return None, False