from laminar.acknowledgment import AcknowledgmentHandler, SentPacket


def test_increment_local_seq_num_on_process_outgoing():
    handler = AcknowledgmentHandler()
    assert handler.local_sequence_num() == 0
    for i in range(10):
        handler.process_outgoing(b"", None, None)
        assert handler.local_sequence_num() == i + 1


def test_local_seq_num_wraps_on_overflow():
    handler = AcknowledgmentHandler()
    handler._sequence_number = 65535
    handler.process_outgoing(b"", None, None)
    assert handler.local_sequence_num() == 0


def test_ack_bitfield_with_empty_receive():
    assert AcknowledgmentHandler().ack_bitfield() == 0


def test_ack_bitfield_with_some_values():
    handler = AcknowledgmentHandler()
    for seq in (0, 1, 3):
        handler.process_incoming(seq, 0, 0)
    assert handler.remote_sequence_num() == 3
    assert handler.ack_bitfield() == 0b110


def test_packet_is_not_acked():
    handler = AcknowledgmentHandler()
    handler._sequence_number = 0
    handler.process_outgoing(bytes([1, 2, 3]), None, None)
    handler._sequence_number = 40
    handler.process_outgoing(bytes([1, 2, 4]), None, None)

    handler.process_incoming(23, 40, 0)

    assert handler.dropped_packets() == [
        SentPacket(payload=bytes([1, 2, 3]), ordering_guarantee=None, item_identifier=None)
    ]


def test_acking_500_packets_without_packet_drop():
    handler = AcknowledgmentHandler()
    other = AcknowledgmentHandler()
    for i in range(500):
        handler._sequence_number = i
        handler.process_outgoing(bytes([1, 2, 3]), None, None)
        other.process_incoming(i, handler.remote_sequence_num(), handler.ack_bitfield())
        handler.process_incoming(i, other.remote_sequence_num(), other.ack_bitfield())
    assert len(handler.dropped_packets()) == 0


def test_acking_many_packets_with_packet_drop():
    handler = AcknowledgmentHandler()
    other = AcknowledgmentHandler()
    drop_count = 0
    for i in range(100):
        handler.process_outgoing(bytes([1, 2, 3]), None, None)
        handler._sequence_number = i
        if i % 4 == 0:
            drop_count += 1
        else:
            other.process_incoming(i, handler.remote_sequence_num(), handler.ack_bitfield())
            handler.process_incoming(i, other.remote_sequence_num(), other.ack_bitfield())
    assert drop_count == 25
    assert handler.remote_sequence_num() == 99
    assert handler.ack_bitfield() == 0b10111011101110111011101110111011
    assert len(handler.dropped_packets()) == 17


def test_remote_seq_num_will_be_updated():
    handler = AcknowledgmentHandler()
    assert handler.remote_sequence_num() == 65535
    handler.process_incoming(0, 0, 0)
    assert handler.remote_sequence_num() == 0
    handler.process_incoming(1, 0, 0)
    assert handler.remote_sequence_num() == 1


def test_processing_a_full_set_of_packets():
    handler = AcknowledgmentHandler()
    for i in range(33):
        handler.process_incoming(i, 0, 0)
    assert handler.remote_sequence_num() == 32
    assert handler.ack_bitfield() == 0xFFFFFFFF


def test_process_outgoing():
    handler = AcknowledgmentHandler()
    handler.process_outgoing(bytes([1, 2, 3]), None, None)
    assert len(handler._sent_packets) == 1
    assert handler.local_sequence_num() == 1


def test_dropped_packets_are_removed_once_reported():
    handler = AcknowledgmentHandler()
    handler.process_outgoing(b"a", None, 7)
    handler._sequence_number = 40
    handler.process_incoming(0, 40, 0)
    first = handler.dropped_packets()
    assert [p.item_identifier for p in first] == [7]
    assert handler.dropped_packets() == []