"""Wrapping sequence numbers, byte streams, segment reassembly and a TCP receiver."""

__version__ = "0.1.0"