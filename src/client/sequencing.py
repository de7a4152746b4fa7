"""Last-request-wins sequencing for overlapping client calls.

Search-as-you-type and page changes can leave several requests in flight;
only the response to the most recently issued one should reach the UI.
"""

import threading


class RequestSequencer:
    """Issue monotonically increasing tokens and recognise the latest one.

    Thread-safe: tokens may be issued and checked from different threads.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._latest = 0

    @property
    def latest(self) -> int:
        with self._lock:
            return self._latest

    def issue(self) -> int:
        """Return a new token that supersedes every earlier one."""
        with self._lock:
            self._latest += 1
            return self._latest

    def is_latest(self, token: int) -> bool:
        """True while no newer token has been issued."""
        with self._lock:
            return token == self._latest
