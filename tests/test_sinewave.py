import struct

import pytest

from arcadedemos.sinewave import SineStream


def _frames(data):
    return list(struct.iter_unpack("<hh", data))


def test_first_frame_is_silent():
    assert SineStream().read(4) == b"\x00\x00\x00\x00"


def test_channels_are_identical():
    frames = _frames(SineStream().read(400))
    assert all(left == right for left, right in frames)


def test_split_reads_match_single_read():
    whole = SineStream().read(64)
    stream = SineStream()
    assert stream.read(24) + stream.read(40) == whole


def test_partial_frame_leaves_remainder():
    stream = SineStream()
    first = stream.read(6)
    assert len(first) == 6
    rest = stream.read(100)
    assert len(rest) == 2
    assert first + rest == SineStream().read(8)


def test_wave_repeats_every_period():
    stream = SineStream()
    assert stream.period == 48000 // 440
    size = stream.period * 4
    first = stream.read(size)
    second = stream.read(size)
    assert len(first) == size
    assert first[:4] == b"\x00\x00\x00\x00"
    assert second[:4] == b"\x00\x00\x00\x00"
    assert second == first


def test_samples_span_the_amplitude():
    stream = SineStream()
    samples = [left for left, _ in _frames(stream.read(stream.period * 4))]
    assert max(samples) > 30000
    assert min(samples) < -30000
    assert all(-32767 <= s <= 32767 for s in samples)


def test_zero_size_read():
    assert SineStream().read(0) == b""


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        SineStream().read(-1)


def test_closed_stream_rejects_reads():
    with SineStream() as stream:
        stream.read(4)
    assert stream.closed
    with pytest.raises(ValueError):
        stream.read(4)


def test_invalid_frequency():
    with pytest.raises(ValueError):
        SineStream(sample_rate=100, frequency=440)