"""Continuation types and the exactly-once guard used by the ``*_async`` combinators.

A continuation is a plain callable that receives the outcome of a logically
asynchronous step. The combinators never schedule anything themselves; they
only hand continuations to caller code, wrapped by :func:`guard` so repeated
invocations are noticed.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, TypeAlias, TypeVar

from fallible.config import get_settings
from fallible.exceptions import ContinuationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from fallible.result import Result

X = TypeVar("X")
U = TypeVar("U")
E = TypeVar("E")

logger = logging.getLogger(__name__)

Continuation: TypeAlias = "Callable[[X], None]"
Deferred: TypeAlias = "Callable[[Continuation[Result[U, E]]], None]"


def guard(g: Callable[[X], None], *, strict: bool | None = None) -> Callable[[X], None]:
    """Wrap a continuation so calls after the first are detected.

    The first call is forwarded to ``g``. A repeat call raises
    ``ContinuationError`` in strict mode and is otherwise logged and forwarded.

    Args:
        g: The continuation to protect.
        strict: Enforce the exactly-once contract. ``None`` reads the
            ``continuations.strict`` setting at call time.
    """
    lock = threading.Lock()
    calls = 0

    def guarded(outcome: X) -> None:
        nonlocal calls
        with lock:
            calls += 1
            count = calls
        if count > 1:
            enforce = get_settings().strict_continuations if strict is None else strict
            if enforce:
                logger.debug("Rejecting continuation call %d for %r", count, g)
                raise ContinuationError(count)
            logger.warning("Continuation %r invoked %d times", g, count)
        g(outcome)

    return guarded
