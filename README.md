# minitalk

A small message server for POSIX systems. It listens for signals and
rebuilds text messages that arrive one bit per signal: `SIGUSR1`
carries a 1 and `SIGUSR2` carries a 0.

## Installing

```
pip install .
```

## Running the server

The server takes no arguments. It clears the screen, draws a banner and
prints its process id:

```
minitalk-server
```

Each finished message is printed as `<pid> : <message>`, after which the
server goes back to listening. If it is started with arguments it prints
a notice and exits. Ctrl-C stops it.

The server waits for signals with `signal.sigwaitinfo`, so it needs a
platform that provides it, such as Linux.

## How a message travels

Each message is framed as:

1. a 16-bit size (the message length in bytes plus one for the
   terminator), most significant bit first;
2. every byte of the message, eight bits each, most significant bit first;
3. a zero byte that ends the message.

Text is sent as UTF-8. The server acknowledges every bit by sending
`SIGUSR1` back to the sender, and when a message is complete it signals
the sender once before printing it and once after.

The server handles one client at a time. Once a client has sent its
size, a signal from a different process before the terminator is taken
to mean the first client has gone away, and the server stops with an
error naming it. A message longer than its announced size also stops
the server with an error.

## Using the framing from Python

`minitalk.protocol` holds both sides of the framing:

```python
from minitalk.protocol import Receiver, frame_bits

receiver = Receiver()
for bit in frame_bits("hi"):
    result = receiver.feed(4242, bit)
assert result == b"hi"
```

- `frame_bits(message)` returns every bit of a framed message; it
  refuses messages that contain a NUL byte or are too long for the
  16-bit size.
- `bits_of(value, width)` returns the lowest `width` bits of a value,
  most significant first.
- `Receiver.feed(sender, bit)` returns the message, without its
  terminator, when the terminator arrives, and `None` before that. It
  raises `ProtocolError` when another sender interrupts a message or a
  message overruns its size. `Receiver.reset()` drops a partial message.

`minitalk.server.Server` wraps a `Receiver` with the acknowledgements
and printing; `Server.handle(signum, sender)` can be driven directly,
with the output streams and the signalling function passed to the
constructor.

The package also carries small text helpers in `minitalk.chars`
(ASCII classification, `atoi`, `itoa`) and `minitalk.strings`
(searching, comparing, splitting, trimming and slicing), and the
server's texts and colours in `minitalk.messages`.

## What is not included

There is no command for sending messages. To send one, deliver the bits
from `frame_bits` to the server's process id yourself, for example with
`os.kill(pid, signal.SIGUSR1 if bit else signal.SIGUSR2)`, pausing
between signals. The sending process must handle or ignore `SIGUSR1`,
since the server signals it back for every bit.

## Running the tests

```
pip install ".[test]"
pytest
```