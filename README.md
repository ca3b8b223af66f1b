# laminar

Protocol-level building blocks for a semi-reliable, message-based protocol on
top of UDP, aimed at multiplayer games: packet acknowledgment, payload
fragmentation, and in-order or newest-only delivery over independent streams.
The package holds pure logic with no dependencies outside the standard library.

## What is inside

- `laminar.config.Config` – a dataclass of tunable options with defaults:
  `fragment_size` (1450), `max_fragments` (16), `max_packet_size`
  (16 × 1450), `fragment_reassembly_buffer_size` (64),
  `receive_buffer_max_size` (1450), `idle_connection_timeout` (5 s),
  `rtt_smoothing_factor` (0.10), `rtt_max_value` (250 ms),
  `socket_event_buffer_size` (1024), `socket_polling_timeout` (1 ms) and
  `blocking_mode` (`False`).
- `laminar.errors` – the exception hierarchy rooted at `LaminarError`:
  `DecodingError`, `FragmentError` and `PacketError` (each carrying a `kind`
  from `DecodingErrorKind`, `FragmentErrorKind` or `PacketErrorKind`),
  `ReceivedDataTooShortError`, `ProtocolVersionMismatchError`,
  `CouldNotReadHeaderError` (carrying `header`) and `ChannelSendError`
  (carrying `event`).
- `laminar.fragmentation` – `fragments_needed(payload_length, fragment_size)`
  rounds the division up; `split_into_fragments(payload, config)` cuts a
  payload into chunks of at most `config.fragment_size` bytes and raises
  `FragmentError` with `FragmentErrorKind.EXCEEDED_MAX_FRAGMENTS` when more
  than `config.max_fragments` would be needed.
- `laminar.acknowledgment` – `AcknowledgmentHandler` numbers outgoing packets
  with wrapping 16-bit sequence numbers, builds the 32-bit ack bitfield for
  the packets received, forgets packets the remote host acknowledges and
  returns, as `SentPacket`s, those it considers dropped (more than 32 behind
  the last acknowledged sequence number).
- `laminar.arranging` – the abstract `Arranging` and `ArrangingSystem`
  interfaces.
- `laminar.ordering` – `OrderingSystem` / `OrderingStream`: deliver items in
  order per stream, holding back ones that arrive early and dropping
  duplicates; `iter_ready()` yields held items once the gap before them is
  filled.
- `laminar.sequencing` – `SequencingSystem` / `SequencingStream`: deliver
  only items newer than anything seen so far on the stream.

Both stream kinds also hand out 16-bit item identifiers through
`new_item_identifier()`.

## Installation

```
pip install .
```

## Examples

Splitting a payload:

```python
from laminar.config import Config
from laminar.fragmentation import fragments_needed, split_into_fragments

config = Config()
assert fragments_needed(4000, 1024) == 4
parts = split_into_fragments(bytes(4000), config)
# three chunks: 1450, 1450 and 1100 bytes
```

Ordering items on a stream:

```python
from laminar.ordering import OrderingSystem

system = OrderingSystem()
stream = system.get_or_create_stream(1)

delivered = []
for index in [1, 3, 5, 4, 2]:
    item = stream.arrange(index, f"item {index}")
    if item is not None:
        delivered.append(item)
        delivered.extend(stream.iter_ready())
# delivered == ["item 1", "item 2", "item 3", "item 4", "item 5"]
```

Sequencing keeps only the newest:

```python
from laminar.sequencing import SequencingSystem

stream = SequencingSystem().get_or_create_stream(1)
kept = [i for i in [1, 3, 5, 4, 2] if stream.arrange(i, i) is not None]
# kept == [1, 3, 5]
```

Acknowledging packets:

```python
from laminar.acknowledgment import AcknowledgmentHandler

handler = AcknowledgmentHandler()
handler.process_outgoing(b"hello", None, None)
handler.process_incoming(0, 0, 0)
lost = handler.dropped_packets()
```

## What it does not do

This package is the protocol logic only. It opens no sockets and has no
socket type, event loop or command-line tool. It does not encode or decode
packet headers, reassemble received fragments, measure round trip times or
track connections. Several `Config` options (`blocking_mode`,
`idle_connection_timeout`, `socket_polling_timeout`, the RTT and buffer
settings) are carried for such code but are not read by anything in the
package; only `fragment_size` and `max_fragments` are used, by
`split_into_fragments`.

## Running the tests

```
pip install ".[test]"
pytest
```