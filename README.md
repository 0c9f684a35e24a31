# sonicio

Building blocks for audio input and output: sample formats, stream
configurations, stream timing, typed sample buffers and the abstract
interfaces that an audio host, its devices and their streams implement.

## Installation

```
pip install sonicio
```

## Modules

- `sonicio.sample_format` — `SampleFormat`
- `sonicio.config` — `BufferSize`, `SupportedBufferSize`, `StreamConfig`,
  `SupportedStreamConfig`, `SupportedStreamConfigRange`
- `sonicio.timing` — `StreamInstant`, `InputStreamTimestamp`,
  `OutputStreamTimestamp`, `InputCallbackInfo`, `OutputCallbackInfo`
- `sonicio.data` — `Data`
- `sonicio.traits` — `HostTrait`, `DeviceTrait`, `StreamTrait`

## Sample formats

`SampleFormat` has the members `I8`, `I16`, `I24`, `I32`, `I64`, `U8`,
`U16`, `U32`, `U64`, `F32` and `F64`. Members compare and sort in that order.

```python
from sonicio.sample_format import SampleFormat

fmt = SampleFormat.I16
fmt.sample_size()              # 2
fmt.is_int()                   # True
fmt.typecode()                 # "h", the array module type code
str(fmt)                       # "i16"
SampleFormat.I24.sample_size() # 4: 24-bit samples occupy four bytes
```

## Choosing a configuration

A device describes what it supports as `SupportedStreamConfigRange` values.
Pick a concrete sample rate from a range and turn it into a `StreamConfig`:

```python
from sonicio.config import BufferSize, SupportedBufferSize, SupportedStreamConfigRange
from sonicio.sample_format import SampleFormat

rng = SupportedStreamConfigRange(
    channels=2,
    min_sample_rate=8_000,
    max_sample_rate=96_000,
    buffer_size=SupportedBufferSize.range(256, 512),
    sample_format=SampleFormat.F32,
)

supported = rng.with_sample_rate(48_000)   # ValueError if out of range
maybe = rng.try_with_sample_rate(200_000)  # None when out of range
top = rng.with_max_sample_rate()           # sample_rate == 96_000
config = supported.config()                # buffer_size is BufferSize.default()
config.buffer_size = BufferSize.fixed(256)
```

`BufferSize.default()` leaves the buffer size to the host;
`BufferSize.fixed(frames)` asks for a frame count. `SupportedBufferSize.unknown()`
stands for a host that cannot report buffer sizes before a stream starts.

When a device offers no default, the best range by the usual heuristics
(stereo, then mono, then more channels; f32, then i16, then u16; a range
covering 44100 Hz; then the highest maximum rate) is:

```python
best = max(ranges, key=SupportedStreamConfigRange.default_heuristic_key)
```

`cmp_default_heuristics(other)` gives the same comparison as -1, 0 or 1.

## Timing

`StreamInstant(secs, nanos)` is a monotonic point in time attached to stream
callbacks. Arithmetic works in nanoseconds and returns `None` where the result
would leave the representable range:

```python
from sonicio.timing import StreamInstant

a = StreamInstant(2, 0)
a.sub(1_000_000_000)                    # StreamInstant(secs=1, nanos=0)
a.add(500_000_000)                      # StreamInstant(secs=2, nanos=500000000)
a.duration_since(StreamInstant(1, 0))   # 1_000_000_000
StreamInstant(1, 0).duration_since(a)   # None
StreamInstant.from_nanos(1_500_000_000) # StreamInstant(secs=1, nanos=500000000)
```

Input callbacks receive an `InputCallbackInfo` carrying an
`InputStreamTimestamp` (callback and capture instants); output callbacks
receive an `OutputCallbackInfo` with an `OutputStreamTimestamp` (callback
and playback instants).

## Sample buffers

`Data(buffer, sample_format)` wraps any bytes-like buffer whose size is a whole
number of samples. `len()` gives the sample count, `bytes()` the raw memory,
and `as_slice(sample_format)` a typed `memoryview`, or `None` if the format
does not match. Writable buffers such as `bytearray` give writable views:

```python
from sonicio.data import Data
from sonicio.sample_format import SampleFormat

data = Data(bytearray(8), SampleFormat.I16)
len(data)                               # 4
view = data.as_slice(SampleFormat.I16)
view[0] = 1000
data.as_slice(SampleFormat.F32)         # None
```

## Hosts, devices and streams

- `HostTrait`: `is_available()`, `devices()`, `default_input_device()`,
  `default_output_device()`; `input_devices()` and `output_devices()` keep
  the devices that support input or output.
- `DeviceTrait`: `name()`, `supported_input_configs()`,
  `supported_output_configs()`, `default_input_config()`,
  `default_output_config()`, `build_input_stream_raw()` and
  `build_output_stream_raw()`. `supports_input()` and `supports_output()` are
  true when at least one configuration is offered (false if the query raises).
  `build_input_stream()` and `build_output_stream()` wrap the raw builders so
  the data callback receives a typed `memoryview`; a buffer in the wrong
  format raises `TypeError`.
- `StreamTrait`: `play()` and `pause()`.

## What this package does not do

It contains no concrete host: nothing here talks to a sound system, lists real
devices or opens real streams. To play or record audio, subclass `HostTrait`,
`DeviceTrait` and `StreamTrait` for an audio system of your choice.

## Running the tests

```
pip install -e .[test]
pytest
```