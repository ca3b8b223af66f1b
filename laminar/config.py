"""Configuration options for laminar sockets and connections."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional

FRAGMENT_SIZE_DEFAULT = 1450
MAX_FRAGMENTS_DEFAULT = 16
DEFAULT_MTU = 1450


@dataclass
class Config:
    """Options that tune laminar for special use-cases."""

    blocking_mode: bool = False
    """Make the underlying UDP socket block when true."""

    idle_connection_timeout: timedelta = field(
        default_factory=lambda: timedelta(seconds=5)
    )
    """Time without hearing from a peer before it is considered disconnected."""

    max_packet_size: int = MAX_FRAGMENTS_DEFAULT * FRAGMENT_SIZE_DEFAULT
    """Maximum packet size in bytes, summed over all of its fragments."""

    max_fragments: int = MAX_FRAGMENTS_DEFAULT
    """Maximum number of fragments a packet may be split into (at most 255)."""

    fragment_size: int = FRAGMENT_SIZE_DEFAULT
    """Maximum size of each fragment in bytes."""

    fragment_reassembly_buffer_size: int = 64
    """Number of packets whose fragments can await reassembly at once."""

    receive_buffer_max_size: int = DEFAULT_MTU
    """Size of the buffer UDP data is read into."""

    rtt_smoothing_factor: float = 0.10
    """Ratio (0 to 1) used to smooth out network jitter."""

    rtt_max_value: int = 250
    """Round trip time in milliseconds above which the link is a problem."""

    socket_event_buffer_size: int = 1024
    """Size of the buffer socket events are received into."""

    socket_polling_timeout: Optional[timedelta] = field(
        default_factory=lambda: timedelta(milliseconds=1)
    )
    """How long to block while polling for socket events; None blocks forever."""