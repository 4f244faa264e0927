"""Result type for composing computations that can fail.

A ``Result[T, E]`` is either ``Success(value)`` or ``Error(error)``. Both
variants are immutable and every combinator returns a new instance. An
``Error`` passes unchanged through ``map``/``bind`` and their ``_async`` and
``_await`` forms; only ``ensure`` sees both variants.

Usage:
    def parse(raw: str) -> Result[int, str]:
        if raw.isdigit():
            return Success(int(raw))
        return Error(f"not a number: {raw}")

    doubled = parse("21").map(lambda n: n * 2)
    match doubled:
        case Success(n):
            print(n)
        case Error(reason):
            print(reason)

The ``_async`` combinators use continuation-passing style: they return a
function that takes the final continuation ``g`` and drive caller code that
must call its continuation once. The ``_await`` combinators are coroutine
methods taking async functions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar, final

from fallible.continuation import guard

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from fallible.continuation import Continuation, Deferred

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


@final
@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """A successful result holding a value."""

    value: T

    def is_success(self) -> bool:
        """Returns True if this is a Success result."""
        return True

    def is_error(self) -> bool:
        """Returns False for Success results."""
        return False

    def map(self, fn: Callable[[T], U]) -> Result[U, Any]:
        """Returns Success(fn(value))."""
        return Success(fn(self.value))

    def map_async(self, fn: Callable[[T, Continuation[U]], None]) -> Deferred[U, Any]:
        """Returns a function that runs fn on the value and passes Success(output) to its continuation."""

        def run(g: Continuation[Result[U, Any]]) -> None:
            def wrap(transformed: U) -> None:
                g(Success(transformed))

            fn(self.value, guard(wrap))

        return run

    def bind(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Returns fn(value) without wrapping it again."""
        return fn(self.value)

    def bind_async(self, fn: Callable[[T, Continuation[Result[U, E]]], None]) -> Deferred[U, E]:
        """Returns a function that hands the value and the final continuation to fn."""

        def run(g: Continuation[Result[U, E]]) -> None:
            fn(self.value, guard(g))

        return run

    def ensure(self, fn: Callable[[Result[T, Any]], Result[U, E]]) -> Result[U, E]:
        """Returns fn(self)."""
        return fn(self)

    def ensure_async(self, fn: Callable[[Result[T, Any], Continuation[Result[U, E]]], None]) -> Deferred[U, E]:
        """Returns a function that hands self and the final continuation to fn."""

        def run(g: Continuation[Result[U, E]]) -> None:
            fn(self, guard(g))

        return run

    async def map_await(self, fn: Callable[[T], Awaitable[U]]) -> Result[U, Any]:
        """Returns Success(await fn(value))."""
        return Success(await fn(self.value))

    async def bind_await(self, fn: Callable[[T], Awaitable[Result[U, E]]]) -> Result[U, E]:
        """Returns await fn(value) without wrapping it again."""
        return await fn(self.value)

    async def ensure_await(self, fn: Callable[[Result[T, Any]], Awaitable[Result[U, E]]]) -> Result[U, E]:
        """Returns await fn(self)."""
        return await fn(self)


@final
@dataclass(frozen=True, slots=True)
class Error(Generic[E]):
    """A failed result holding an error of any type."""

    error: E

    @property
    def value(self) -> None:
        """Always None; the error is only reachable through ``error`` or pattern matching."""
        return None

    def is_success(self) -> bool:
        """Returns False for Error results."""
        return False

    def is_error(self) -> bool:
        """Returns True if this is an Error result."""
        return True

    def map(self, fn: Callable[[Any], Any]) -> Result[Any, E]:
        """Returns an equal Error; fn is not called."""
        return Error(self.error)

    def map_async(self, fn: Callable[[Any, Continuation[Any]], None]) -> Deferred[Any, E]:
        """Returns a function that passes this error straight to its continuation."""

        def run(g: Continuation[Result[Any, E]]) -> None:
            g(Error(self.error))

        return run

    def bind(self, fn: Callable[[Any], Result[Any, E]]) -> Result[Any, E]:
        """Returns an equal Error; fn is not called."""
        return Error(self.error)

    def bind_async(self, fn: Callable[[Any, Continuation[Result[Any, E]]], None]) -> Deferred[Any, E]:
        """Returns a function that passes this error straight to its continuation."""

        def run(g: Continuation[Result[Any, E]]) -> None:
            g(Error(self.error))

        return run

    def ensure(self, fn: Callable[[Result[Any, E]], Result[U, Any]]) -> Result[U, Any]:
        """Returns fn(self)."""
        return fn(self)

    def ensure_async(self, fn: Callable[[Result[Any, E], Continuation[Result[U, Any]]], None]) -> Deferred[U, Any]:
        """Returns a function that hands self and the final continuation to fn."""

        def run(g: Continuation[Result[U, Any]]) -> None:
            fn(self, guard(g))

        return run

    async def map_await(self, fn: Callable[[Any], Awaitable[Any]]) -> Result[Any, E]:
        """Returns an equal Error; fn is not awaited."""
        return Error(self.error)

    async def bind_await(self, fn: Callable[[Any], Awaitable[Result[Any, E]]]) -> Result[Any, E]:
        """Returns an equal Error; fn is not awaited."""
        return Error(self.error)

    async def ensure_await(self, fn: Callable[[Result[Any, E]], Awaitable[Result[U, Any]]]) -> Result[U, Any]:
        """Returns await fn(self)."""
        return await fn(self)


# Type alias for Result
Result = Success[T] | Error[E]
