import array

import pytest

from sonicio.data import Data
from sonicio.sample_format import SampleFormat


def test_len_counts_samples():
    samples = array.array("h", [1, -2, 3])
    data = Data(samples, SampleFormat.I16)
    assert len(data) == len(samples)
    assert data.sample_format is SampleFormat.I16


def test_bytes_match_buffer():
    samples = array.array("f", [0.5, -0.25])
    data = Data(samples, SampleFormat.F32)
    assert data.bytes().tobytes() == samples.tobytes()
    assert data.bytes().nbytes == len(data) * SampleFormat.F32.sample_size()


def test_as_slice_matching_format_round_trips():
    values = [0, 1, -1, 32767, -32768]
    data = Data(array.array("h", values), SampleFormat.I16)
    assert data.as_slice(SampleFormat.I16).tolist() == values


def test_as_slice_other_format_is_none():
    data = Data(array.array("h", [1, 2]), SampleFormat.I16)
    assert data.as_slice(SampleFormat.U16) is None
    assert data.as_slice(SampleFormat.F32) is None


def test_writes_through_slice_reach_buffer():
    buffer = bytearray(SampleFormat.F64.sample_size() * 4)
    data = Data(buffer, SampleFormat.F64)
    view = data.as_slice(SampleFormat.F64)
    for index in range(len(view)):
        view[index] = 0.5
    assert array.array("d", bytes(buffer)).tolist() == [0.5] * 4


def test_writes_through_bytes_reach_buffer():
    buffer = bytearray(2)
    data = Data(buffer, SampleFormat.U8)
    data.bytes()[1] = 128
    assert buffer == bytearray([0, 128])


def test_read_only_buffer_gives_read_only_view():
    data = Data(bytes(4), SampleFormat.I32)
    view = data.as_slice(SampleFormat.I32)
    assert view.tolist() == [0]
    with pytest.raises(TypeError):
        view[0] = 1


def test_misaligned_buffer_rejected():
    with pytest.raises(ValueError):
        Data(bytearray(3), SampleFormat.I16)


@pytest.mark.parametrize("fmt", list(SampleFormat))
def test_every_format_views_its_samples(fmt):
    count = 3
    data = Data(bytearray(fmt.sample_size() * count), fmt)
    view = data.as_slice(fmt)
    assert len(data) == count
    assert len(view) == count
    assert view.itemsize == fmt.sample_size()