"""Interfaces for arranging items, in order or in sequence, over many streams."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")
S = TypeVar("S")


class Arranging(ABC, Generic[T]):
    """Something that arranges items by an index."""

    @abstractmethod
    def arrange(self, incoming_index: int, item: T) -> Optional[T]:
        """Return the item if its index satisfies the algorithm, otherwise None."""


class ArrangingSystem(ABC, Generic[S]):
    """A set of independent streams on which items can be arranged."""

    @abstractmethod
    def stream_count(self) -> int:
        """Return the number of streams created so far."""

    @abstractmethod
    def get_or_create_stream(self, stream_id: int) -> S:
        """Return the stream with ``stream_id``, creating it when missing."""