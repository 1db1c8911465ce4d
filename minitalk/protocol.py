"""Bit framing of messages sent one signal at a time, and its receiving side.

A message travels as a 16-bit size (the byte length plus one for the
terminator), then every byte of the message, then a zero byte. All fields are
sent most significant bit first. A set bit travels as SIGUSR1 and a clear bit
as SIGUSR2.
"""

from __future__ import annotations

from typing import Optional, Union

SIZE_BITS = 16
CHAR_BITS = 8
MAX_SIZE = (1 << SIZE_BITS) - 1


class ProtocolError(Exception):
    """A transmission could not be received as framed.

    ``sender`` is the identifier of the client whose message was being read.
    """

    def __init__(self, sender: Optional[int], reason: str) -> None:
        super().__init__(reason)
        self.sender = sender
        self.reason = reason


def bits_of(value: int, width: int) -> tuple[int, ...]:
    """Return the lowest ``width`` bits of value, most significant first."""
    if width < 0:
        raise ValueError(f"width must not be negative, got {width}")
    return tuple((value >> shift) & 1 for shift in reversed(range(width)))


def _payload(message: Union[str, bytes]) -> bytes:
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    if b"\0" in data:
        raise ValueError("message must not contain a NUL byte")
    if len(data) + 1 > MAX_SIZE:
        raise ValueError(f"message longer than {MAX_SIZE - 1} bytes cannot be framed")
    return data


def frame_bits(message: Union[str, bytes]) -> tuple[int, ...]:
    """Return every bit sent for a message: size, bytes and terminator.

    Text is sent as UTF-8.
    """
    data = _payload(message)
    bits = list(bits_of(len(data) + 1, SIZE_BITS))
    for byte in data:
        bits.extend(bits_of(byte, CHAR_BITS))
    bits.extend(bits_of(0, CHAR_BITS))
    return tuple(bits)


class Receiver:
    """Rebuilds messages from the bits of one client at a time.

    The size field is accepted from whoever sends it; the client that sends
    its last bit then owns the transmission until the terminator arrives.
    """

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Drop any partly received message."""
        self._sender: Optional[int] = None
        self._size = 0
        self._size_bits = 0
        self._byte = 0
        self._byte_bits = 0
        self._capacity = 0
        self._buffer = bytearray()

    @property
    def sender(self) -> Optional[int]:
        """The client whose message body is being received, if any."""
        return self._sender

    @property
    def expected_size(self) -> Optional[int]:
        """The announced size, terminator included, once it is known."""
        return self._capacity if self._sender is not None else None

    @property
    def in_progress(self) -> bool:
        """True when some bits of a message have been received."""
        return self._sender is not None or self._size_bits > 0

    def feed(self, sender: int, bit: Union[int, bool]) -> Optional[bytes]:
        """Take one bit from a client.

        Returns the whole message, without its terminator, when the
        terminator completes it, and None otherwise. An empty message gives
        ``b""``. Raises ProtocolError when another client interrupts a
        message or when more bytes arrive than were announced.
        """
        value = 1 if bit else 0
        if self._sender is None:
            self._size = (self._size << 1) | value
            self._size_bits += 1
            if self._size_bits == SIZE_BITS:
                self._capacity = self._size
                self._sender = sender
                self._size = 0
                self._size_bits = 0
            return None

        if sender != self._sender:
            interrupted = self._sender
            self.reset()
            raise ProtocolError(
                interrupted, f"client {interrupted} was interrupted by client {sender}"
            )

        self._byte = (self._byte << 1) | value
        self._byte_bits += 1
        if self._byte_bits < CHAR_BITS:
            return None

        byte = self._byte
        self._byte = 0
        self._byte_bits = 0
        if len(self._buffer) >= self._capacity:
            owner = self._sender
            self.reset()
            raise ProtocolError(owner, "message is longer than its announced size")
        if byte == 0:
            message = bytes(self._buffer)
            self.reset()
            return message
        self._buffer.append(byte)
        return None