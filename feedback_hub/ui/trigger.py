"""Refresh signalling between the form and the data views."""

from dataclasses import dataclass, field


@dataclass
class RefreshTrigger:
    """Counter bumped after each successful submission.

    Views remember the last value they refreshed for and refetch when
    the counter has moved on.
    """

    value: int = 0

    def fire(self) -> int:
        self.value += 1
        return self.value


@dataclass
class SequenceGuard:
    """Orders overlapping fetches so a stale response cannot win.

    Each fetch takes a ticket from ``issue()`` before it starts. When the
    response arrives, ``accept(ticket)`` says whether to apply it: a
    response older than the newest one already applied is dropped.

    Example:
        first, second = guard.issue(), guard.issue()
        guard.accept(second)  # True, applied
        guard.accept(first)   # False, stale
    """

    _issued: int = field(default=0, repr=False)
    _applied: int = field(default=0, repr=False)

    def issue(self) -> int:
        self._issued += 1
        return self._issued

    def accept(self, ticket: int) -> bool:
        if ticket < self._applied:
            return False
        self._applied = ticket
        return True

    @property
    def in_flight(self) -> bool:
        return self._applied < self._issued
