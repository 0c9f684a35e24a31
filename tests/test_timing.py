import pytest

from sonicio.timing import (
    InputCallbackInfo,
    InputStreamTimestamp,
    OutputCallbackInfo,
    OutputStreamTimestamp,
    StreamInstant,
)

SEC = 1_000_000_000
I64_MIN = -(1 << 63)
I64_MAX = (1 << 63) - 1


def test_stream_instant_sub():
    a = StreamInstant(2, 0)
    assert a.sub(1 * SEC) == StreamInstant(1, 0)
    assert a.sub(2 * SEC) == StreamInstant(0, 0)
    assert a.sub(3 * SEC) == StreamInstant(-1, 0)


def test_stream_instant_add():
    b = StreamInstant(-2, 0)
    assert b.add(1 * SEC) == StreamInstant(-1, 0)
    assert b.add(2 * SEC) == StreamInstant(0, 0)
    assert b.add(3 * SEC) == StreamInstant(1, 0)


def test_stream_instant_bounds():
    minimum = StreamInstant(I64_MIN, 0)
    maximum = StreamInstant(I64_MAX, 0)
    assert minimum.sub(1 * SEC) is None
    assert maximum.add(1 * SEC) is None


def test_negative_duration_rejected():
    with pytest.raises(ValueError):
        StreamInstant(0, 0).add(-1)
    with pytest.raises(ValueError):
        StreamInstant(0, 0).sub(-1)


def test_nanos_round_trip():
    for value in (0, 1, SEC - 1, SEC, -1, -SEC - 7, 123 * SEC + 456):
        instant = StreamInstant.from_nanos(value)
        assert instant.as_nanos() == value
        assert 0 <= instant.nanos < SEC


def test_from_nanos_out_of_range():
    with pytest.raises(OverflowError):
        StreamInstant.from_nanos((I64_MAX + 1) * SEC)


def test_duration_since():
    later = StreamInstant(5, 250)
    earlier = StreamInstant(3, 100)
    assert later.duration_since(earlier) == later.as_nanos() - earlier.as_nanos()
    assert earlier.duration_since(later) is None
    assert later.duration_since(later) == 0


def test_add_then_duration_since():
    start = StreamInstant(10, 500)
    end = start.add(2 * SEC + 7)
    assert end.duration_since(start) == 2 * SEC + 7
    assert end.sub(2 * SEC + 7) == start


def test_from_secs_whole_and_negative():
    assert StreamInstant.from_secs(2.0) == StreamInstant(2, 0)
    neg = StreamInstant.from_secs(-1.5)
    assert neg.secs == -2
    assert neg.nanos == SEC // 2


def test_ordering():
    instants = [StreamInstant(1, 5), StreamInstant(-1, 0), StreamInstant(1, 2)]
    assert sorted(instants) == [StreamInstant(-1, 0), StreamInstant(1, 2), StreamInstant(1, 5)]


def test_invalid_fields():
    with pytest.raises(ValueError):
        StreamInstant(0, -1)
    with pytest.raises(OverflowError):
        StreamInstant(I64_MAX + 1, 0)


def test_callback_info_holds_timestamps():
    now = StreamInstant(4, 0)
    captured = StreamInstant(3, 0)
    playback = StreamInstant(5, 0)
    inp = InputCallbackInfo(InputStreamTimestamp(callback=now, capture=captured))
    out = OutputCallbackInfo(OutputStreamTimestamp(callback=now, playback=playback))
    assert inp.timestamp.capture == captured
    assert out.timestamp.playback.duration_since(out.timestamp.callback) == SEC
    assert inp == InputCallbackInfo(InputStreamTimestamp(now, captured))
    assert len({inp.timestamp, InputStreamTimestamp(now, captured)}) == 1