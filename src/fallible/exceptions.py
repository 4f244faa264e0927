class FallibleException(Exception):
    """Base class for exceptions raised by fallible itself."""


class ContinuationError(FallibleException):
    def __init__(self, calls: int) -> None:
        self.calls = calls
        super().__init__(f"Continuation invoked {calls} times; it must be invoked exactly once")


class ConfigError(FallibleException):
    def __init__(self, key: str, raw: object) -> None:
        self.key = key
        self.raw = raw
        super().__init__(f"Invalid value for {key}: {raw!r}")
