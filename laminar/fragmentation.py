"""Splitting payloads into fragments."""

from __future__ import annotations

from .config import Config
from .errors import FragmentError, FragmentErrorKind


def fragments_needed(payload_length: int, fragment_size: int) -> int:
    """Return how many fragments of ``fragment_size`` hold ``payload_length`` bytes."""
    whole, remainder = divmod(payload_length, fragment_size)
    return whole + (1 if remainder else 0)


def split_into_fragments(payload: bytes, config: Config) -> list[bytes]:
    """Split ``payload`` into consecutive chunks of at most ``config.fragment_size``.

    Raises FragmentError when more than ``config.max_fragments`` would be needed.
    """
    size = config.fragment_size
    count = fragments_needed(len(payload), size)
    if count > config.max_fragments:
        raise FragmentError(FragmentErrorKind.EXCEEDED_MAX_FRAGMENTS)
    return [bytes(payload[start:start + size]) for start in range(0, len(payload), size)]