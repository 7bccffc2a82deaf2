"""Observer lists with snapshot-on-notify delivery.

Fields and forms both keep an ordered list of watcher callbacks. A
watcher may subscribe or unsubscribe (itself or others) while a
notification is being delivered, so ``notify()`` iterates over a copy
taken when the notification starts: a watcher added mid-delivery first
hears the *next* notification, a watcher removed mid-delivery still
hears the current one.

Thread safety:
    - The list is only mutated under a Lock
    - Delivery happens outside the lock, on a tuple snapshot
"""

import threading
from collections.abc import Callable


class Watchers[**P]:
    """Ordered callbacks sharing one signature."""

    __slots__ = ("_lock", "_watchers")

    def __init__(self) -> None:
        self._watchers: list[Callable[P, None]] = []
        self._lock = threading.Lock()

    def add(self, watcher: Callable[P, None]) -> Callable[[], None]:
        """Register *watcher*; return a function that unregisters it.

        Calling the returned function more than once is harmless.
        """
        with self._lock:
            self._watchers.append(watcher)

        def unwatch() -> None:
            self.remove(watcher)

        return unwatch

    def remove(self, watcher: Callable[P, None]) -> None:
        with self._lock:
            self._watchers = [w for w in self._watchers if w is not watcher]

    def notify(self, *args: P.args, **kwargs: P.kwargs) -> None:
        """Call every watcher registered at the time of the call, in order.

        Exceptions raised by a watcher propagate to the caller and stop
        delivery to the remaining watchers.
        """
        with self._lock:
            snapshot = tuple(self._watchers)
        for watcher in snapshot:
            watcher(*args, **kwargs)

    def __len__(self) -> int:
        return len(self._watchers)

    def __bool__(self) -> bool:
        return bool(self._watchers)
