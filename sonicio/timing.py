"""Stream timestamps and per-callback information."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

NANOS_PER_SEC = 1_000_000_000
_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1
_U32_MAX = (1 << 32) - 1


@dataclass(frozen=True, order=True)
class StreamInstant:
    """A monotonic instant: seconds since an unspecified origin plus nanoseconds."""

    secs: int
    nanos: int

    def __post_init__(self) -> None:
        if not _I64_MIN <= self.secs <= _I64_MAX:
            raise OverflowError(f"seconds out of range: {self.secs}")
        if not 0 <= self.nanos <= _U32_MAX:
            raise ValueError(f"nanoseconds out of range: {self.nanos}")

    def as_nanos(self) -> int:
        """Total nanoseconds since the origin."""
        return self.secs * NANOS_PER_SEC + self.nanos

    @classmethod
    def from_nanos(cls, nanos: int) -> StreamInstant:
        """Build an instant from a nanosecond count; raise OverflowError if out of range."""
        secs, subsec = divmod(nanos, NANOS_PER_SEC)
        return cls(secs, subsec)

    @classmethod
    def from_secs(cls, secs: float) -> StreamInstant:
        """Build an instant from fractional seconds."""
        whole = math.floor(secs)
        return cls(whole, int((secs - whole) * NANOS_PER_SEC))

    def duration_since(self, earlier: StreamInstant) -> Optional[int]:
        """Nanoseconds elapsed since ``earlier``, or None if ``earlier`` is later."""
        if self < earlier:
            return None
        return self.as_nanos() - earlier.as_nanos()

    def add(self, nanos: int) -> Optional[StreamInstant]:
        """The instant ``nanos`` later, or None if it would be out of range."""
        return self._shifted(_check_duration(nanos))

    def sub(self, nanos: int) -> Optional[StreamInstant]:
        """The instant ``nanos`` earlier, or None if it would be out of range."""
        return self._shifted(-_check_duration(nanos))

    def _shifted(self, delta: int) -> Optional[StreamInstant]:
        try:
            return StreamInstant.from_nanos(self.as_nanos() + delta)
        except OverflowError:
            return None


def _check_duration(nanos: int) -> int:
    if nanos < 0:
        raise ValueError(f"duration must not be negative: {nanos}")
    return nanos


@dataclass(frozen=True)
class InputStreamTimestamp:
    """Timing of an input callback: when it ran and when the data was captured."""

    callback: StreamInstant
    capture: StreamInstant


@dataclass(frozen=True)
class OutputStreamTimestamp:
    """Timing of an output callback: when it ran and when the data will play."""

    callback: StreamInstant
    playback: StreamInstant


@dataclass(frozen=True)
class InputCallbackInfo:
    """Information passed to an input stream's data callback."""

    timestamp: InputStreamTimestamp


@dataclass(frozen=True)
class OutputCallbackInfo:
    """Information passed to an output stream's data callback."""

    timestamp: OutputStreamTimestamp