"""A bounded in-memory byte stream with separate writing and reading ends."""

from __future__ import annotations


class ByteStream:
    """Bytes written at one end and read at the other, limited by a capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._buffer = bytearray()
        self._pushed = 0
        self._popped = 0
        self._closed = False
        self._error = False
        self._reader = Reader(self)
        self._writer = Writer(self)

    def reader(self) -> Reader:
        """The reading end of the stream."""
        return self._reader

    def writer(self) -> Writer:
        """The writing end of the stream."""
        return self._writer

    def set_error(self) -> None:
        """Signal that the stream suffered an error."""
        self._error = True

    def has_error(self) -> bool:
        """Whether the stream has had an error."""
        return self._error


class Writer:
    """The writing end of a ByteStream."""

    __slots__ = ("_stream",)

    def __init__(self, stream: ByteStream) -> None:
        self._stream = stream

    def push(self, data: bytes) -> int:
        """Append as much of ``data`` as capacity allows; return the count accepted."""
        stream = self._stream
        accepted = bytes(data[: self.available_capacity()])
        stream._buffer += accepted
        stream._pushed += len(accepted)
        return len(accepted)

    def close(self) -> None:
        """Signal that nothing more will be written."""
        self._stream._closed = True

    def is_closed(self) -> bool:
        """Whether the stream has been closed."""
        return self._stream._closed

    def available_capacity(self) -> int:
        """How many bytes can be pushed right now."""
        stream = self._stream
        return stream.capacity - (stream._pushed - stream._popped)

    def bytes_pushed(self) -> int:
        """Total number of bytes pushed so far."""
        return self._stream._pushed

    def set_error(self) -> None:
        """Signal that the stream suffered an error."""
        self._stream.set_error()

    def has_error(self) -> bool:
        """Whether the stream has had an error."""
        return self._stream.has_error()


class Reader:
    """The reading end of a ByteStream."""

    __slots__ = ("_stream",)

    def __init__(self, stream: ByteStream) -> None:
        self._stream = stream

    def peek(self) -> bytes:
        """The bytes currently buffered, without removing them."""
        return bytes(self._stream._buffer)

    def pop(self, length: int) -> None:
        """Remove up to ``length`` bytes from the front of the buffer."""
        if length < 0:
            raise ValueError("length must not be negative")
        stream = self._stream
        count = min(length, len(stream._buffer))
        del stream._buffer[:count]
        stream._popped += count

    def is_finished(self) -> bool:
        """Whether the stream is closed and fully read."""
        stream = self._stream
        return stream._closed and stream._pushed == stream._popped

    def bytes_buffered(self) -> int:
        """Number of bytes pushed but not yet popped."""
        stream = self._stream
        return stream._pushed - stream._popped

    def bytes_popped(self) -> int:
        """Total number of bytes popped so far."""
        return self._stream._popped

    def set_error(self) -> None:
        """Signal that the stream suffered an error."""
        self._stream.set_error()

    def has_error(self) -> bool:
        """Whether the stream has had an error."""
        return self._stream.has_error()


def read(reader: Reader, length: int) -> bytes:
    """Peek and pop up to ``length`` bytes from ``reader``."""
    out = bytearray()
    while reader.bytes_buffered() and len(out) < length:
        view = reader.peek()
        if not view:
            raise RuntimeError("Reader.peek() returned no bytes")
        view = view[: length - len(out)]
        out += view
        reader.pop(len(view))
    return bytes(out)