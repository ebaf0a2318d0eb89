"""Identifier generation for in-memory records."""

import secrets
import string
import time
from collections.abc import Callable
from dataclasses import dataclass, field

_BASE36 = string.digits + string.ascii_lowercase


def _now_millis() -> int:
    return time.time_ns() // 1_000_000


@dataclass
class IdGenerator:
    """Issue wall-clock based identifiers.

    Ids are millisecond timestamps rendered as decimal strings. Within one
    generator they never repeat: a call in the same millisecond as the
    previous one is bumped to the next free value.
    """

    clock: Callable[[], int] = _now_millis
    _last: int = field(default=0, init=False)

    def next_id(self) -> str:
        """Return a new record identifier."""
        value = max(self.clock(), self._last + 1)
        self._last = value
        return str(value)

    def next_file_id(self) -> str:
        """Return a file identifier with a random base-36 suffix."""
        suffix = "".join(secrets.choice(_BASE36) for _ in range(9))
        return f"{self.next_id()}{suffix}"
