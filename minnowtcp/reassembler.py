"""Reassembly of indexed, possibly out-of-order substrings into a byte stream."""

from __future__ import annotations

from typing import Optional

from minnowtcp.byte_stream import ByteStream, Reader, Writer


class Reassembler:
    """Writes substrings into a ByteStream in order, buffering ones that arrive early."""

    def __init__(self, output: ByteStream) -> None:
        self._output = output
        self._next_index = 0
        # Window of bytes starting at _next_index, and which of them are known.
        self._buffer = bytearray()
        self._present = bytearray()
        self._end: Optional[int] = None

    def insert(self, first_index: int, data: bytes, is_last_substring: bool) -> None:
        """Insert ``data`` starting at stream index ``first_index``."""
        writer = self._output.writer()
        if writer.is_closed() or first_index + len(data) < self._next_index:
            return

        window = writer.available_capacity()
        window_end = self._next_index + window
        grow = window - len(self._buffer)
        if grow > 0:
            self._buffer += bytes(grow)
            self._present += bytes(grow)
        if first_index >= window_end:
            return

        if is_last_substring and first_index + len(data) <= window_end:
            self._end = first_index + len(data)

        start = max(first_index, self._next_index)
        stop = min(window_end, first_index + len(data))
        if start < stop:
            lo, hi = start - self._next_index, stop - self._next_index
            self._buffer[lo:hi] = data[start - first_index : stop - first_index]
            self._present[lo:hi] = b"\x01" * (hi - lo)

        run = self._present.find(0)
        if run == -1:
            run = len(self._present)
        ready_end = self._next_index + run
        if self._end is not None and self._next_index < self._end <= ready_end:
            ready_end = self._end
        count = ready_end - self._next_index

        writer.push(bytes(self._buffer[:count]))
        del self._buffer[:count]
        del self._present[:count]
        self._next_index = ready_end
        if ready_end == self._end:
            writer.close()

    def bytes_pending(self) -> int:
        """How many bytes are stored in the reassembler itself."""
        return self._present.count(1)

    def reader(self) -> Reader:
        """The reading end of the output stream."""
        return self._output.reader()

    def writer(self) -> Writer:
        """The writing end of the output stream."""
        return self._output.writer()