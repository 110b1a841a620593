"""The receiving half of a TCP endpoint."""

from __future__ import annotations

from typing import Optional

from minnowtcp.byte_stream import Reader, Writer
from minnowtcp.messages import TCPReceiverMessage, TCPSenderMessage
from minnowtcp.reassembler import Reassembler
from minnowtcp.wrapping_integers import Wrap32

MAX_WINDOW = 65535


class TCPReceiver:
    """Turns incoming sender messages into stream bytes and produces acknowledgments."""

    def __init__(self, reassembler: Reassembler) -> None:
        self._reassembler = reassembler
        self._isn: Optional[Wrap32] = None

    def receive(self, message: TCPSenderMessage) -> None:
        """Insert the message's payload into the reassembler at the right stream index."""
        if message.RST:
            self.reader().set_error()
        if self._isn is None:
            if not message.SYN:
                return
            self._isn = message.seqno
        absolute = message.seqno.unwrap(self._isn, self.writer().bytes_pushed() + 1)
        first_index = absolute - (0 if message.SYN else 1)
        if first_index < 0:
            return
        self._reassembler.insert(first_index, message.payload, message.FIN)

    def send(self) -> TCPReceiverMessage:
        """The message to send back to the peer's sender."""
        writer = self.writer()
        ackno = None
        if self._isn is not None:
            ackno = Wrap32.wrap(writer.bytes_pushed() + 1 + int(writer.is_closed()), self._isn)
        return TCPReceiverMessage(
            ackno=ackno,
            window_size=min(MAX_WINDOW, writer.available_capacity()),
            RST=writer.has_error(),
        )

    def reassembler(self) -> Reassembler:
        """The reassembler this receiver writes through."""
        return self._reassembler

    def reader(self) -> Reader:
        """The reading end of the reassembled stream."""
        return self._reassembler.reader()

    def writer(self) -> Writer:
        """The writing end of the reassembled stream."""
        return self._reassembler.writer()