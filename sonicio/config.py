"""Stream configurations and the ranges of configurations a device supports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from sonicio.sample_format import SampleFormat

_U32_MAX = (1 << 32) - 1
_CD_RATE = 44_100


def _check_frames(frames: int) -> int:
    if not 0 <= frames <= _U32_MAX:
        raise ValueError(f"frame count out of range: {frames}")
    return frames


@dataclass(frozen=True)
class BufferSize:
    """Requested hardware buffer size: the host default, or a fixed frame count."""

    frames: Optional[int] = None

    def __post_init__(self) -> None:
        if self.frames is not None:
            _check_frames(self.frames)

    @classmethod
    def default(cls) -> BufferSize:
        """Let the host choose the buffer size."""
        return cls()

    @classmethod
    def fixed(cls, frames: int) -> BufferSize:
        """Request a buffer of exactly ``frames`` frames."""
        return cls(_check_frames(frames))

    def is_default(self) -> bool:
        """True when the host chooses the buffer size."""
        return self.frames is None


@dataclass(frozen=True)
class SupportedBufferSize:
    """The range of buffer sizes a device supports, or unknown."""

    min: Optional[int] = None
    max: Optional[int] = None

    def __post_init__(self) -> None:
        if (self.min is None) != (self.max is None):
            raise ValueError("a buffer size range needs both a minimum and a maximum")
        if self.min is not None and self.max is not None:
            _check_frames(self.min)
            _check_frames(self.max)

    @classmethod
    def range(cls, min: int, max: int) -> SupportedBufferSize:
        """A known range of buffer sizes, in frames."""
        return cls(min, max)

    @classmethod
    def unknown(cls) -> SupportedBufferSize:
        """The host cannot report buffer sizes before a stream starts."""
        return cls()

    def is_known(self) -> bool:
        """True when the range is known."""
        return self.min is not None


@dataclass
class StreamConfig:
    """Parameters used to open a stream."""

    channels: int
    sample_rate: int
    buffer_size: BufferSize = field(default_factory=BufferSize.default)


@dataclass(frozen=True)
class SupportedStreamConfig:
    """A single configuration that a device supports."""

    channels: int
    sample_rate: int
    buffer_size: SupportedBufferSize
    sample_format: SampleFormat

    def config(self) -> StreamConfig:
        """A stream configuration with these parameters and the default buffer size."""
        return StreamConfig(self.channels, self.sample_rate, BufferSize.default())


@dataclass(frozen=True)
class SupportedStreamConfigRange:
    """A range of sample rates supported for one channel count and sample format."""

    channels: int
    min_sample_rate: int
    max_sample_rate: int
    buffer_size: SupportedBufferSize
    sample_format: SampleFormat

    def try_with_sample_rate(self, sample_rate: int) -> Optional[SupportedStreamConfig]:
        """The configuration at ``sample_rate``, or None if it lies outside the range."""
        if not self.min_sample_rate <= sample_rate <= self.max_sample_rate:
            return None
        return SupportedStreamConfig(
            self.channels, sample_rate, self.buffer_size, self.sample_format
        )

    def with_sample_rate(self, sample_rate: int) -> SupportedStreamConfig:
        """The configuration at ``sample_rate``; raise ValueError if out of range."""
        chosen = self.try_with_sample_rate(sample_rate)
        if chosen is None:
            raise ValueError(
                f"sample rate {sample_rate} out of range "
                f"{self.min_sample_rate}..={self.max_sample_rate}"
            )
        return chosen

    def with_max_sample_rate(self) -> SupportedStreamConfig:
        """The configuration at the highest supported sample rate."""
        return SupportedStreamConfig(
            self.channels, self.max_sample_rate, self.buffer_size, self.sample_format
        )

    def default_heuristic_key(self) -> Tuple[bool, bool, int, bool, bool, bool, bool, int]:
        """Sort key ranking ranges by their suitability as a default; greater is better.

        Preference goes to stereo, then mono, then more channels; then f32, i16,
        u16; then ranges containing 44100 Hz; then the higher maximum rate.
        """
        fmt = self.sample_format
        return (
            self.channels == 2,
            self.channels == 1,
            self.channels,
            fmt is SampleFormat.F32,
            fmt is SampleFormat.I16,
            fmt is SampleFormat.U16,
            self.min_sample_rate <= _CD_RATE <= self.max_sample_rate,
            self.max_sample_rate,
        )

    def cmp_default_heuristics(self, other: SupportedStreamConfigRange) -> int:
        """Compare by default-format priority: -1, 0 or 1."""
        mine = self.default_heuristic_key()
        theirs = other.default_heuristic_key()
        return (mine > theirs) - (mine < theirs)