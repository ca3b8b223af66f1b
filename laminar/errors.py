"""Exceptions raised by laminar."""

from __future__ import annotations

import enum
from typing import Any


class DecodingErrorKind(enum.Enum):
    """Parts of a packet that could not be decoded."""

    PACKET_TYPE = "The packet type could not be read."
    ORDERING_GUARANTEE = "The ordering guarantee could not be read."
    DELIVERY_GUARANTEE = "The delivery guarantee could not be read."

    def __str__(self) -> str:
        return self.value


class PacketErrorKind(enum.Enum):
    """Problems with a packet as a whole."""

    EXCEEDED_MAX_PACKET_SIZE = "The packet size was bigger than the max allowed size."

    def __str__(self) -> str:
        return self.value


class FragmentErrorKind(enum.Enum):
    """Problems constructing or parsing fragments."""

    PACKET_HEADER_NOT_FOUND = "Packet header was attached to fragment."
    EXCEEDED_MAX_FRAGMENTS = (
        "The total numbers of fragments are bigger than the allowed fragments."
    )
    ALREADY_PROCESSED_FRAGMENT = "The fragment received was already processed."
    FRAGMENT_WITH_UNEVEN_NUMBER_OF_FRAGMENTS = (
        "The fragment header does not contain the right fragment count."
    )
    COULD_NOT_FIND_FRAGMENT_BY_ID = (
        "The fragment supposed to be in a the cache but it was not found."
    )

    def __str__(self) -> str:
        return self.value


class LaminarError(Exception):
    """Base class of every error laminar raises."""


class DecodingError(LaminarError):
    """A packet header could not be decoded."""

    def __init__(self, kind: DecodingErrorKind) -> None:
        self.kind = kind
        super().__init__(
            f"Something went wrong with parsing the header. Reason: {kind.name}."
        )


class FragmentError(LaminarError):
    """A fragment could not be received or parsed."""

    def __init__(self, kind: FragmentErrorKind) -> None:
        self.kind = kind
        super().__init__(
            "Something went wrong with receiving/parsing fragments. "
            f"Reason: {kind.name}."
        )


class PacketError(LaminarError):
    """A packet could not be received or parsed."""

    def __init__(self, kind: PacketErrorKind) -> None:
        self.kind = kind
        super().__init__(
            "Something went wrong with receiving/parsing packets. "
            f"Reason: {kind.name}."
        )


class ReceivedDataTooShortError(LaminarError):
    """The received datagram was empty."""

    def __init__(self) -> None:
        super().__init__("The received data did not have any length.")


class ProtocolVersionMismatchError(LaminarError):
    """The peer speaks a different protocol version."""

    def __init__(self) -> None:
        super().__init__("The protocol versions do not match.")


class CouldNotReadHeaderError(LaminarError):
    """An expected header could not be read from the buffer."""

    def __init__(self, header: str) -> None:
        self.header = header
        super().__init__(f"Expected {header} header but could not be read from buffer.")


class ChannelSendError(LaminarError):
    """An event could not be delivered because its channel was closed."""

    def __init__(self, event: Any) -> None:
        self.event = event
        super().__init__(
            f"Could not sent on channel because it was closed. Reason: {event!r}"
        )