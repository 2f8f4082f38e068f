"""The two stacks and the eleven push_swap operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TextIO


@dataclass
class Stacks:
    """Stack ``a`` and stack ``b`` with the bookkeeping the sorters use.

    Index 0 is the top of a stack. Every operation that is issued is appended
    to ``log``. If ``out`` is set, it is also written there, one per line.
    ``count`` follows the source's tally: each half-operation that changes a
    stack adds one, and a combined operation takes one back.
    """

    a: list[int]
    b: list[int] = field(default_factory=list)
    count: int = 0
    remain: int = 0
    sizes_a: list[int] = field(default_factory=list)
    sizes_b: list[int] = field(default_factory=list)
    ahead: int = 0
    log: list[str] = field(default_factory=list)
    out: TextIO | None = None

    def _emit(self, name: str) -> None:
        self.log.append(name)
        if self.out is not None:
            self.out.write(name + "\n")

    @staticmethod
    def _swap(stack: list[int]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _rotate(stack: list[int]) -> bool:
        if len(stack) < 2:
            return False
        stack.append(stack.pop(0))
        return True

    @staticmethod
    def _reverse_rotate(stack: list[int]) -> bool:
        if len(stack) < 2:
            return False
        stack.insert(0, stack.pop())
        return True

    def _single(self, changed: bool, name: str) -> None:
        if changed:
            self.count += 1
        self._emit(name)

    def _double(self, changed_a: bool, changed_b: bool, name: str) -> None:
        self.count += int(changed_a) + int(changed_b) - 1
        self._emit(name)

    def sa(self) -> None:
        """Swap the top two elements of ``a``."""
        self._single(self._swap(self.a), "sa")

    def sb(self) -> None:
        """Swap the top two elements of ``b``."""
        self._single(self._swap(self.b), "sb")

    def ss(self) -> None:
        """``sa`` and ``sb`` at once."""
        self._double(self._swap(self.a), self._swap(self.b), "ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``; nothing happens if ``b`` is empty."""
        if not self.b:
            return
        self.a.insert(0, self.b.pop(0))
        self.count += 1
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``; nothing happens if ``a`` is empty."""
        if not self.a:
            return
        self.b.insert(0, self.a.pop(0))
        self.count += 1
        self._emit("pb")

    def ra(self) -> None:
        """Rotate ``a`` up: the top goes to the bottom."""
        self._single(self._rotate(self.a), "ra")

    def rb(self) -> None:
        """Rotate ``b`` up: the top goes to the bottom."""
        self._single(self._rotate(self.b), "rb")

    def rr(self) -> None:
        """``ra`` and ``rb`` at once."""
        self._double(self._rotate(self.a), self._rotate(self.b), "rr")

    def rra(self) -> None:
        """Rotate ``a`` down: the bottom goes to the top."""
        self._single(self._reverse_rotate(self.a), "rra")

    def rrb(self) -> None:
        """Rotate ``b`` down: the bottom goes to the top."""
        self._single(self._reverse_rotate(self.b), "rrb")

    def rrr(self) -> None:
        """``rra`` and ``rrb`` at once."""
        self._double(self._reverse_rotate(self.a), self._reverse_rotate(self.b), "rrr")

    def is_sorted(self) -> bool:
        """True when ``b`` is empty and ``a`` ascends from top to bottom."""
        return not self.b and all(x < y for x, y in zip(self.a, self.a[1:]))