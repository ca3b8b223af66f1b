"""Tracking which packets were acknowledged by the remote host."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

REDUNDANT_PACKET_ACKS_SIZE = 32
_SEQ_MOD = 1 << 16
_SEQ_MASK = _SEQ_MOD - 1
_HALF = _SEQ_MOD // 2

_T = TypeVar("_T")


def _sequence_greater_than(s1: int, s2: int) -> bool:
    return (s1 > s2 and s1 - s2 <= _HALF) or (s1 < s2 and s2 - s1 > _HALF)


def _sequence_less_than(s1: int, s2: int) -> bool:
    return _sequence_greater_than(s2, s1)


class _SequenceBuffer(Generic[_T]):
    """Fixed-size ring of entries keyed by wrapping 16-bit sequence numbers."""

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._sequence_num = 0
        self._slots: list[Optional[tuple[int, _T]]] = [None] * capacity

    @property
    def sequence_num(self) -> int:
        return self._sequence_num

    def _index(self, sequence: int) -> int:
        return sequence % self._capacity

    def exists(self, sequence: int) -> bool:
        slot = self._slots[self._index(sequence)]
        return slot is not None and slot[0] == sequence

    def get(self, sequence: int) -> Optional[_T]:
        slot = self._slots[self._index(sequence)]
        if slot is not None and slot[0] == sequence:
            return slot[1]
        return None

    def insert(self, sequence: int, item: _T) -> None:
        sequence &= _SEQ_MASK
        oldest = (self._sequence_num - self._capacity) & _SEQ_MASK
        if _sequence_less_than(sequence, oldest):
            return
        following = (sequence + 1) & _SEQ_MASK
        if _sequence_greater_than(following, self._sequence_num):
            self._clear_range(self._sequence_num, sequence)
            self._sequence_num = following
        self._slots[self._index(sequence)] = (sequence, item)

    def remove(self, sequence: int) -> None:
        if self.exists(sequence):
            self._slots[self._index(sequence)] = None

    def _clear_range(self, start: int, end: int) -> None:
        distance = (end - start) & _SEQ_MASK
        if distance >= self._capacity:
            self._slots = [None] * self._capacity
            return
        for offset in range(distance + 1):
            self._slots[self._index((start + offset) & _SEQ_MASK)] = None


@dataclass(frozen=True)
class SentPacket:
    """A packet sent to the remote host that still awaits acknowledgment."""

    payload: bytes = b""
    ordering_guarantee: Any = None
    item_identifier: Optional[int] = None


class AcknowledgmentHandler:
    """Keeps sequence numbers, builds ack bitfields and detects dropped packets."""

    def __init__(self) -> None:
        self._sequence_number = 0
        self._remote_ack_sequence_num = _SEQ_MASK
        self._sent_packets: dict[int, SentPacket] = {}
        self._received_packets: _SequenceBuffer[None] = _SequenceBuffer(
            REDUNDANT_PACKET_ACKS_SIZE + 1
        )

    def local_sequence_num(self) -> int:
        """Return the sequence number the next outgoing packet will carry."""
        return self._sequence_number

    def remote_sequence_num(self) -> int:
        """Return the most recent sequence number received from the remote host."""
        return (self._received_packets.sequence_num - 1) & _SEQ_MASK

    def ack_bitfield(self) -> int:
        """Return a 32-bit field telling which of the previous 32 packets arrived."""
        latest = self.remote_sequence_num()
        bitfield = 0
        for bit in range(REDUNDANT_PACKET_ACKS_SIZE):
            if self._received_packets.exists((latest - bit - 1) & _SEQ_MASK):
                bitfield |= 1 << bit
        return bitfield

    def process_incoming(
        self, remote_seq_num: int, remote_ack_seq: int, remote_ack_field: int
    ) -> None:
        """Record an incoming packet and forget every packet it acknowledges."""
        remote_ack_seq &= _SEQ_MASK
        self._remote_ack_sequence_num = remote_ack_seq
        self._received_packets.insert(remote_seq_num, None)
        self._sent_packets.pop(remote_ack_seq, None)
        for bit in range(REDUNDANT_PACKET_ACKS_SIZE):
            if (remote_ack_field >> bit) & 1:
                self._sent_packets.pop((remote_ack_seq - bit - 1) & _SEQ_MASK, None)

    def process_outgoing(
        self, payload: bytes, ordering_guarantee: Any, item_identifier: Optional[int]
    ) -> None:
        """Remember an outgoing packet until it is acknowledged."""
        self._sent_packets[self._sequence_number] = SentPacket(
            bytes(payload), ordering_guarantee, item_identifier
        )
        self._sequence_number = (self._sequence_number + 1) & _SEQ_MASK

    def dropped_packets(self) -> list[SentPacket]:
        """Remove and return the packets now considered lost, oldest first."""
        ack = self._remote_ack_sequence_num
        dropped = [
            seq
            for seq in sorted(self._sent_packets)
            if _sequence_less_than(seq, ack)
            and ((ack - seq) & _SEQ_MASK) > REDUNDANT_PACKET_ACKS_SIZE
        ]
        return [self._sent_packets.pop(seq) for seq in dropped]