"""Arranging items in order over many independent streams.

Items carry an index. An item whose index is the next one expected is handed
back at once; items that arrive early are held until every item before them
has arrived, and duplicates of items already passed on are dropped.
"""

from __future__ import annotations

from typing import Dict, Generic, Iterator, Optional, TypeVar

from .arranging import Arranging, ArrangingSystem

T = TypeVar("T")

_DEFAULT_STREAM_CAPACITY = 1024
_ITEM_IDENTIFIER_MASK = 0xFFFF


class OrderingStream(Arranging[T], Generic[T]):
    """A stream on which items are arranged in order.

    With every call to :meth:`arrange` an incoming index is compared with the
    expected index:

    1. equal: the item is next in line and is returned immediately;
    2. greater: the item is early and is stored until the gap is filled;
    3. smaller: the item is a duplicate and is discarded.
    """

    def __init__(self, stream_id: int, capacity: int = _DEFAULT_STREAM_CAPACITY) -> None:
        self._stream_id = stream_id
        self._capacity = capacity
        self._storage: Dict[int, T] = {}
        self._expected_index = 1
        self._unique_item_identifier = 0

    def stream_id(self) -> int:
        """Return the identifier of this stream."""
        return self._stream_id

    def expected_index(self) -> int:
        """Return the index of the next item this stream will pass on."""
        return self._expected_index

    def new_item_identifier(self) -> int:
        """Return the next 16-bit identifier for items sent on this stream."""
        self._unique_item_identifier = (
            self._unique_item_identifier + 1
        ) & _ITEM_IDENTIFIER_MASK
        return self._unique_item_identifier

    def arrange(self, incoming_index: int, item: T) -> Optional[T]:
        """Return ``item`` if it is next in line; otherwise hold or drop it."""
        if incoming_index == self._expected_index:
            self._expected_index += 1
            return item
        if incoming_index > self._expected_index:
            self._storage[incoming_index] = item
        return None

    def iter_ready(self) -> Iterator[T]:
        """Yield stored items, in order, for as long as they are next in line.

        Each yielded item advances the expected index; iteration stops at the
        first gap.
        """
        while self._expected_index in self._storage:
            item = self._storage.pop(self._expected_index)
            self._expected_index += 1
            yield item


class OrderingSystem(ArrangingSystem[OrderingStream[T]], Generic[T]):
    """A set of ordering streams, created on first use and keyed by id."""

    def __init__(self) -> None:
        self._streams: Dict[int, OrderingStream[T]] = {}

    def stream_count(self) -> int:
        """Return the number of ordering streams created so far."""
        return len(self._streams)

    def get_or_create_stream(self, stream_id: int) -> OrderingStream[T]:
        """Return the stream with ``stream_id``, creating it when missing."""
        stream = self._streams.get(stream_id)
        if stream is None:
            stream = OrderingStream(stream_id)
            self._streams[stream_id] = stream
        return stream