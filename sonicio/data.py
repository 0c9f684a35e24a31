"""A dynamically typed buffer of audio samples passed to raw stream callbacks."""

from __future__ import annotations

from typing import Optional

from sonicio.sample_format import SampleFormat


class Data:
    """Audio samples of one format held in a bytes-like buffer.

    Writable buffers (``bytearray``, ``array.array``) give writable views, so
    output callbacks can fill them in place.
    """

    __slots__ = ("_raw", "sample_format")

    def __init__(self, buffer, sample_format: SampleFormat) -> None:
        raw = memoryview(buffer).cast("B")
        if raw.nbytes % sample_format.sample_size():
            raise ValueError(
                f"buffer of {raw.nbytes} bytes is not a whole number of "
                f"{sample_format} samples"
            )
        self._raw = raw
        self.sample_format = sample_format

    def __len__(self) -> int:
        """Number of samples in the buffer."""
        return self._raw.nbytes // self.sample_format.sample_size()

    def __repr__(self) -> str:
        return f"Data(len={len(self)}, sample_format={self.sample_format})"

    def bytes(self) -> memoryview:
        """The raw bytes of the buffer."""
        return self._raw

    def as_slice(self, sample_format: SampleFormat) -> Optional[memoryview]:
        """The samples as a typed view, or None if ``sample_format`` does not match."""
        if sample_format is not self.sample_format:
            return None
        return self._raw.cast(sample_format.typecode())