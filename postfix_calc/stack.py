# stack.py

"""Bounded LIFO stack shared by the converter and the evaluator."""

import logging
from typing import Generic, List, TypeVar

from .errors import StackOverflowError, StackUnderflowError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_CAPACITY = 100


class BoundedStack(Generic[T]):
    """
    LIFO stack with a fixed capacity.

    Pushing onto a full stack raises StackOverflowError, and popping or peeking
    an empty one raises StackUnderflowError. A stack belongs to a single
    conversion or evaluation call.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, name: str = "stack"):
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.name = name
        self._items: List[T] = []

    def push(self, item: T) -> None:
        if len(self._items) >= self.capacity:
            raise StackOverflowError(
                f"{self.name} overflow: capacity of {self.capacity} exceeded"
            )
        self._items.append(item)
        logger.debug("%s push %r (depth %d)", self.name, item, len(self._items))

    def pop(self) -> T:
        if not self._items:
            raise StackUnderflowError(f"{self.name} underflow: pop from empty stack")
        item = self._items.pop()
        logger.debug("%s pop %r (depth %d)", self.name, item, len(self._items))
        return item

    def peek(self) -> T:
        if not self._items:
            raise StackUnderflowError(f"{self.name} underflow: peek at empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack({self.name}, {self._items!r}, capacity={self.capacity})"
