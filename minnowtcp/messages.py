"""Messages exchanged between a TCP sender and a TCP receiver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from minnowtcp.wrapping_integers import Wrap32


@dataclass
class TCPSenderMessage:
    """A segment sent by a TCPSender: sequence number, flags and payload."""

    seqno: Wrap32 = field(default_factory=lambda: Wrap32(0))
    SYN: bool = False
    payload: bytes = b""
    FIN: bool = False
    RST: bool = False

    def sequence_length(self) -> int:
        """How many sequence numbers this segment occupies."""
        return int(self.SYN) + len(self.payload) + int(self.FIN)


@dataclass
class TCPReceiverMessage:
    """An acknowledgment and window advertisement sent by a TCPReceiver."""

    ackno: Optional[Wrap32] = None
    window_size: int = 0
    RST: bool = False