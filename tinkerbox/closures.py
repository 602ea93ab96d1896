"""Callables that carry explicit captures and a calling discipline.

An :class:`EmulatedFnOnce` can be called once, an :class:`EmulatedFnMut`
repeatedly with captures it may change, and an :class:`EmulatedFn`
repeatedly. Calling any of them through ``call_once`` consumes it.
The body receives the tuple of captures followed by the call's arguments.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


class ConsumedError(RuntimeError):
    """The callable was already consumed by ``call_once``."""


class EmulatedFnOnce:
    """A callable that can be called a single time."""

    def __init__(self, captures: Iterable[Any], body: Callable[..., Any]) -> None:
        self._captures = tuple(captures)
        self._body = body
        self._consumed = False

    @property
    def captures(self) -> tuple[Any, ...]:
        return self._captures

    def _check_alive(self) -> None:
        if self._consumed:
            raise ConsumedError(f"{type(self).__name__} was already consumed")

    def call_once(self, *args: Any) -> Any:
        """Call the body and consume this callable."""
        self._check_alive()
        self._consumed = True
        return self._body(self._captures, *args)

    def compose(self, first: EmulatedFnOnce) -> EmulatedFnOnce:
        """A callable that calls ``first`` and passes its result to this one.

        The result is as capable as the less capable of the two.
        """
        if isinstance(self, EmulatedFn) and isinstance(first, EmulatedFn):
            return EmulatedFn(
                (first, self), lambda caps, *args: caps[1].call(caps[0].call(*args))
            )
        if isinstance(self, EmulatedFnMut) and isinstance(first, EmulatedFnMut):
            return EmulatedFnMut(
                (first, self), lambda caps, *args: caps[1].call_mut(caps[0].call_mut(*args))
            )
        return EmulatedFnOnce(
            (first, self), lambda caps, *args: caps[1].call_once(caps[0].call_once(*args))
        )


class EmulatedFnMut(EmulatedFnOnce):
    """A callable that can be called many times and may change its captures."""

    def call_mut(self, *args: Any) -> Any:
        """Call the body without consuming this callable."""
        self._check_alive()
        return self._body(self._captures, *args)


class EmulatedFn(EmulatedFnMut):
    """A callable that can be called many times and only reads its captures."""

    def call(self, *args: Any) -> Any:
        """Call the body without consuming this callable."""
        self._check_alive()
        return self._body(self._captures, *args)