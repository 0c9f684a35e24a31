"""Sample formats understood by audio devices and streams."""

from __future__ import annotations

import enum


class SampleFormat(enum.Enum):
    """Encoding of a single audio sample.

    Members are ordered by declaration, so formats can be compared and sorted.
    """

    I8 = "i8"
    I16 = "i16"
    I24 = "i24"
    I32 = "i32"
    I64 = "i64"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    F32 = "f32"
    F64 = "f64"

    def _rank(self) -> int:
        return _ORDER[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SampleFormat):
            return NotImplemented
        return self._rank() < other._rank()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SampleFormat):
            return NotImplemented
        return self._rank() <= other._rank()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SampleFormat):
            return NotImplemented
        return self._rank() > other._rank()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SampleFormat):
            return NotImplemented
        return self._rank() >= other._rank()

    def __hash__(self) -> int:
        return hash(self.value)

    def sample_size(self) -> int:
        """Size in bytes of one sample; 24-bit samples occupy four bytes."""
        return _SIZES[self]

    def is_int(self) -> bool:
        """True for the signed integer formats."""
        return self in _SIGNED

    def is_uint(self) -> bool:
        """True for the unsigned integer formats."""
        return self in _UNSIGNED

    def is_float(self) -> bool:
        """True for the floating point formats."""
        return self in _FLOATS

    def typecode(self) -> str:
        """The :mod:`array` type code whose items hold one sample of this format."""
        return _TYPECODES[self]

    def __str__(self) -> str:
        return self.value


_ORDER = {member: index for index, member in enumerate(SampleFormat)}

_SIZES = {
    SampleFormat.I8: 1,
    SampleFormat.U8: 1,
    SampleFormat.I16: 2,
    SampleFormat.U16: 2,
    SampleFormat.I24: 4,
    SampleFormat.I32: 4,
    SampleFormat.U32: 4,
    SampleFormat.I64: 8,
    SampleFormat.U64: 8,
    SampleFormat.F32: 4,
    SampleFormat.F64: 8,
}

_TYPECODES = {
    SampleFormat.I8: "b",
    SampleFormat.I16: "h",
    SampleFormat.I24: "i",
    SampleFormat.I32: "i",
    SampleFormat.I64: "q",
    SampleFormat.U8: "B",
    SampleFormat.U16: "H",
    SampleFormat.U32: "I",
    SampleFormat.U64: "Q",
    SampleFormat.F32: "f",
    SampleFormat.F64: "d",
}

_SIGNED = frozenset(
    {SampleFormat.I8, SampleFormat.I16, SampleFormat.I24, SampleFormat.I32, SampleFormat.I64}
)
_UNSIGNED = frozenset({SampleFormat.U8, SampleFormat.U16, SampleFormat.U32, SampleFormat.U64})
_FLOATS = frozenset({SampleFormat.F32, SampleFormat.F64})