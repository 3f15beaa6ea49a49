"""Expression-style conditionals: ternaries, if/else chains and switch/case."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def ternary(condition: bool, if_output: T, else_output: T) -> T:
    """Return ``if_output`` when ``condition`` holds, otherwise ``else_output``."""
    return if_output if condition else else_output


def ternary_f(condition: bool, if_func: Callable[[], T], else_func: Callable[[], T]) -> T:
    """Like ``ternary``, but only the chosen branch function is called."""
    return if_func() if condition else else_func()


class IfElse(Generic[T]):
    """A chain of conditions where the first one that holds provides the result."""

    __slots__ = ("_result", "_done")

    def __init__(self, done: bool = False, result: Any = None) -> None:
        self._done = done
        self._result = result

    def else_if(self, condition: bool, result: T) -> IfElse[T]:
        if not self._done and condition:
            self._result = result
            self._done = True
        return self

    def else_if_f(self, condition: bool, result_f: Callable[[], T]) -> IfElse[T]:
        if not self._done and condition:
            self._result = result_f()
            self._done = True
        return self

    def else_(self, result: T) -> T:
        return self._result if self._done else result

    def else_f(self, result_f: Callable[[], T]) -> T:
        return self._result if self._done else result_f()


def if_(condition: bool, result: T) -> IfElse[T]:
    """Start an if/else chain."""
    return IfElse(True, result) if condition else IfElse()


def if_f(condition: bool, result_f: Callable[[], T]) -> IfElse[T]:
    """Start an if/else chain whose result is computed lazily."""
    return IfElse(True, result_f()) if condition else IfElse()


class SwitchCase(Generic[T, R]):
    """A switch on a value; the first matching case provides the result."""

    __slots__ = ("_predicate", "_result", "_done")

    def __init__(self, predicate: T) -> None:
        self._predicate = predicate
        self._result: Any = None
        self._done = False

    def case(self, value: T, result: R) -> SwitchCase[T, R]:
        if not self._done and self._predicate == value:
            self._result = result
            self._done = True
        return self

    def case_f(self, value: T, callback: Callable[[], R]) -> SwitchCase[T, R]:
        if not self._done and self._predicate == value:
            self._result = callback()
            self._done = True
        return self

    def default(self, result: R) -> R:
        if not self._done:
            self._result = result
        return self._result

    def default_f(self, callback: Callable[[], R]) -> R:
        if not self._done:
            self._result = callback()
        return self._result


def switch(predicate: T) -> SwitchCase[T, Any]:
    """Start a switch on ``predicate``."""
    return SwitchCase(predicate)