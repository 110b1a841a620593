"""32-bit wrapping sequence numbers relative to an arbitrary zero point."""

from __future__ import annotations

_MASK = 0xFFFFFFFF
_SPAN = 1 << 32


class Wrap32:
    """A 32-bit unsigned value that wraps around at 2**32."""

    __slots__ = ("_raw",)

    def __init__(self, raw_value: int) -> None:
        self._raw = raw_value & _MASK

    @property
    def raw_value(self) -> int:
        """The stored 32-bit value."""
        return self._raw

    @staticmethod
    def wrap(n: int, zero_point: Wrap32) -> Wrap32:
        """Convert the absolute sequence number ``n`` given the zero point."""
        return Wrap32(n + zero_point._raw)

    def unwrap(self, zero_point: Wrap32, checkpoint: int) -> int:
        """Return the absolute sequence number closest to ``checkpoint`` that wraps to this value."""
        offset = (self._raw - zero_point._raw) & _MASK
        if offset >= checkpoint:
            return offset
        offset += checkpoint // _SPAN * _SPAN
        if offset < checkpoint:
            offset += _SPAN
        if offset - checkpoint < checkpoint + _SPAN - offset:
            return offset
        return offset - _SPAN

    def __add__(self, n: int) -> Wrap32:
        if not isinstance(n, int):
            return NotImplemented
        return Wrap32(self._raw + n)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Wrap32):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def __repr__(self) -> str:
        return f"Wrap32({self._raw})"