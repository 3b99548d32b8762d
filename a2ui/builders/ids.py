"""Component ID generation.

IDs are produced by an `IdGenerator` the caller owns. Two generators never
share state, so independent surfaces (or tests) get reproducible IDs.
"""

import threading
from uuid import uuid4


class IdGenerator:
    """Thread-safe sequential ID source.

    Example:
        >>> ids = IdGenerator()
        >>> ids.next("text"), ids.next("button")
        ('text_1', 'button_2')
        >>> ids.reset()
        >>> ids.next("card")
        'card_1'
    """

    def __init__(self, prefix_separator: str = "_", start: int = 0):
        self._separator = prefix_separator
        self._start = start
        self._counter = start
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        """Last number handed out (the start value before first use)."""
        return self._counter

    def next(self, prefix: str = "component") -> str:
        with self._lock:
            self._counter += 1
            number = self._counter
        return f"{prefix}{self._separator}{number}"

    def reset(self) -> None:
        with self._lock:
            self._counter = self._start


def random_id(prefix: str = "component") -> str:
    """Generate a collision-resistant ID when no generator is supplied."""
    return f"{prefix}_{uuid4().hex[:12]}"


def resolve_id(
    prefix: str, id: str | None = None, ids: IdGenerator | None = None
) -> str:
    """Pick the explicit ID, else the generator's next, else a random one."""
    if id:
        return id
    if ids is not None:
        return ids.next(prefix)
    return random_id(prefix)


__all__ = ["IdGenerator", "random_id", "resolve_id"]
