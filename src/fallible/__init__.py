"""Success/Error result type with synchronous, continuation-passing and awaitable combinators."""

from fallible.aio import deferred, resolve
from fallible.config import Settings, create_config, get_settings, load_settings, set_settings
from fallible.continuation import Continuation, Deferred, guard
from fallible.exceptions import ConfigError, ContinuationError, FallibleException
from fallible.result import Error, Result, Success

__all__ = [
    "ConfigError",
    "Continuation",
    "ContinuationError",
    "Deferred",
    "Error",
    "FallibleException",
    "Result",
    "Settings",
    "Success",
    "create_config",
    "deferred",
    "get_settings",
    "guard",
    "load_settings",
    "resolve",
    "set_settings",
]
