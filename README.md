# minnowtcp

The receiving side of a TCP implementation, written in plain Python with no dependencies:

- `minnowtcp.wrapping_integers.Wrap32`: 32-bit wrapping sequence numbers, with conversion
  between them and 64-bit absolute sequence numbers (`Wrap32.wrap`, `Wrap32.unwrap`).
  `Wrap32` values can be compared with `==`, hashed, and advanced with `+`.
- `minnowtcp.byte_stream.ByteStream`: a bounded in-memory byte stream. Its `writer()` gives a
  `Writer` (`push`, `close`, `is_closed`, `available_capacity`, `bytes_pushed`) and its
  `reader()` gives a `Reader` (`peek`, `pop`, `is_finished`, `bytes_buffered`,
  `bytes_popped`). Both ends share `set_error` and `has_error`. `Writer.push` accepts only
  as many bytes as the capacity allows and returns how many it took. The helper
  `read(reader, length)` peeks and pops up to `length` bytes in one call.
- `minnowtcp.reassembler.Reassembler`: takes substrings that may arrive out of order or
  overlap, each tagged with the stream index of its first byte, and writes them into a
  `ByteStream` in order. Bytes beyond the stream's available capacity are thrown away, and
  the stream is closed once the last substring has been written. `bytes_pending()` tells
  how many bytes are held back waiting for a gap to be filled.
- `minnowtcp.messages`: the dataclasses `TCPSenderMessage` (`seqno`, `SYN`, `payload`,
  `FIN`, `RST`, and `sequence_length()`) and `TCPReceiverMessage` (`ackno`,
  `window_size`, `RST`).
- `minnowtcp.tcp_receiver.TCPReceiver`: takes `TCPSenderMessage`s, feeds their payloads
  into a reassembler, and produces `TCPReceiverMessage`s that carry the acknowledgment
  number and a window size of at most 65535.

## Installation

```
pip install .
```

## Example

```python
from minnowtcp.byte_stream import ByteStream, read
from minnowtcp.messages import TCPSenderMessage
from minnowtcp.reassembler import Reassembler
from minnowtcp.tcp_receiver import TCPReceiver
from minnowtcp.wrapping_integers import Wrap32

receiver = TCPReceiver(Reassembler(ByteStream(1000)))
receiver.receive(TCPSenderMessage(seqno=Wrap32(5), SYN=True, payload=b"abc"))
print(receiver.send().ackno)        # Wrap32(9)
print(read(receiver.reader(), 10))  # b'abc'
```

The reassembler can also be used on its own:

```python
from minnowtcp.byte_stream import ByteStream, read
from minnowtcp.reassembler import Reassembler

reassembler = Reassembler(ByteStream(100))
reassembler.insert(3, b"def", True)
print(reassembler.bytes_pending())  # 3
reassembler.insert(0, b"abc", False)
print(read(reassembler.reader(), 100))  # b'abcdef'
print(reassembler.writer().is_closed())  # True
```

## What this package does not do

There is no sending side: nothing here reads from an outbound stream, splits it into
segments, or retransmits them. There is also no network I/O, no command-line program and
no link or IP layer; the classes work only on in-memory messages that you pass to them.

## Running the tests

```
pip install .[test]
pytest
```