from typing import Any


class CallCounter:
    """Records every call made to it and returns fn(*args), or None when no fn is given."""

    def __init__(self, fn: Any = None) -> None:
        self.fn = fn
        self.calls: list[tuple[Any, ...]] = []

    @property
    def count(self) -> int:
        return len(self.calls)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        if self.fn is None:
            return None
        return self.fn(*args)
