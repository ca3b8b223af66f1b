"""Arranging items in sequence over many independent streams.

Only the newest items matter: an item whose index is higher than any seen so
far on its stream is passed on, and every older item is discarded. The
sequence ``1, 3, 2, 5, 4`` therefore comes out as ``1, 3, 5``.
"""

from __future__ import annotations

from typing import Dict, Generic, Optional, TypeVar

from .arranging import Arranging, ArrangingSystem

T = TypeVar("T")

_ITEM_IDENTIFIER_MASK = 0xFFFF


class SequencingStream(Arranging[T], Generic[T]):
    """A stream on which items are arranged in sequence.

    An item whose index is above the highest index seen so far is returned
    and becomes the new top; any other item is discarded.
    """

    def __init__(self, stream_id: int) -> None:
        self._stream_id = stream_id
        self._top_index = 0
        self._unique_item_identifier = 0

    def stream_id(self) -> int:
        """Return the identifier of this stream."""
        return self._stream_id

    def new_item_identifier(self) -> int:
        """Return the next 16-bit identifier for items sent on this stream."""
        self._unique_item_identifier = (
            self._unique_item_identifier + 1
        ) & _ITEM_IDENTIFIER_MASK
        return self._unique_item_identifier

    def arrange(self, incoming_index: int, item: T) -> Optional[T]:
        """Return ``item`` if it is newer than every item seen; otherwise None."""
        if incoming_index > self._top_index:
            self._top_index = incoming_index
            return item
        return None


class SequencingSystem(ArrangingSystem[SequencingStream[T]], Generic[T]):
    """A set of sequencing streams, created on first use and keyed by id."""

    def __init__(self) -> None:
        self._streams: Dict[int, SequencingStream[T]] = {}

    def stream_count(self) -> int:
        """Return the number of sequencing streams created so far."""
        return len(self._streams)

    def get_or_create_stream(self, stream_id: int) -> SequencingStream[T]:
        """Return the stream with ``stream_id``, creating it when missing."""
        stream = self._streams.get(stream_id)
        if stream is None:
            stream = SequencingStream(stream_id)
            self._streams[stream_id] = stream
        return stream