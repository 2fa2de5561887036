# timelogger/core/abort.py
import threading
from typing import Callable, Optional

class AbortSignal:
    """
    Cancellation flag for a pending create/update.

    ``check`` is an optional callable that reports whether the caller has gone
    away; it is consulted every time ``aborted`` is read, so ``save`` sees a
    disconnect that happens while the request is being validated.

    Aborting before the write is committed leaves the store unchanged.
    Aborting afterwards has no effect: the committed write stays.
    """

    def __init__(self, check: Optional[Callable[[], bool]] = None):
        self._event = threading.Event()
        self._check = check

    def abort(self) -> None:
        self._event.set()

    @property
    def aborted(self) -> bool:
        if not self._event.is_set() and self._check is not None and self._check():
            self._event.set()
        return self._event.is_set()
