"""Monotonic id generators for customers and accounts."""


class Sequence:
    """Hands out strictly increasing integers, never reusing one.

    Parameters
    ----------
    start : int
        First value returned by ``next``.
    """

    __slots__ = ("_next",)

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def next(self) -> int:
        """Return the next value and advance."""
        val = self._next
        self._next += 1
        return val

    def peek(self) -> int:
        """Return the value ``next`` would hand out, without advancing."""
        return self._next
