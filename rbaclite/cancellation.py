"""
Cooperative cancellation for store operations.

Every store operation accepts an optional CancellationToken and checks it
once, on entry, before touching any state.
"""

import threading
import time
from typing import Optional

from .errors import OperationCancelledError


class CancellationToken:
    """
    Thread-safe cancellation signal with an optional deadline.

    Example:
        ```python
        token = CancellationToken(timeout=0.5)
        role = await store.create_role("admin", "Administrator", cancellation=token)

        token.cancel()
        await store.get_role(role.id, cancellation=token)  # OperationCancelledError
        ```
    """

    def __init__(self, timeout: Optional[float] = None) -> None:
        """
        Initialize the token.

        Args:
            timeout: Seconds from now after which the token counts as cancelled
        """
        if timeout is not None and timeout < 0:
            raise ValueError("timeout must not be negative")
        self._event = threading.Event()
        self._deadline = time.monotonic() + timeout if timeout is not None else None

    @classmethod
    def with_timeout(cls, seconds: float) -> "CancellationToken":
        """Create a token that expires after the given number of seconds."""
        return cls(timeout=seconds)

    @classmethod
    def cancelled(cls) -> "CancellationToken":
        """Create a token that is already cancelled."""
        token = cls()
        token.cancel()
        return token

    def cancel(self) -> None:
        """Request cancellation."""
        self._event.set()

    @property
    def is_expired(self) -> bool:
        """True once the deadline, if any, has passed."""
        return self._deadline is not None and time.monotonic() >= self._deadline

    @property
    def is_cancelled(self) -> bool:
        """True if cancel() was called or the deadline has passed."""
        return self._event.is_set() or self.is_expired

    def raise_if_cancelled(self) -> None:
        """
        Raise if the token was cancelled or has expired.

        Raises:
            OperationCancelledError: If cancellation was requested
        """
        if self._event.is_set():
            raise OperationCancelledError()
        if self.is_expired:
            raise OperationCancelledError("Operation timed out")


def check_cancelled(token: Optional[CancellationToken]) -> None:
    """Raise OperationCancelledError if the optional token is cancelled."""
    if token is not None:
        token.raise_if_cancelled()
