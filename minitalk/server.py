"""Command that listens for messages sent one signal per bit and prints them."""

from __future__ import annotations

import os
import signal
import sys
from typing import Callable, Optional, Sequence, TextIO

from minitalk.messages import (
    BLUE,
    LIGHT_RED,
    LIGHT_WHITE,
    RESET,
    SERVER_CLOSE,
    SERVER_CLOSE_2,
    SERVER_CRASH,
    SERVER_HI,
    SERVER_KILL_ERROR,
    SERVER_LISTEN,
    SERVER_PARAMETER_ERROR,
    SERVER_SIGACTION_ERROR,
    banner,
    colored,
    write_colored,
)
from minitalk.protocol import ProtocolError, Receiver

_SIGNALS = frozenset({signal.SIGUSR1, signal.SIGUSR2})


class ServerError(Exception):
    """A failure that stops the server; the text is the message shown."""


class Server:
    """Receives messages bit by bit and acknowledges every signal.

    Each received bit is acknowledged to its sender with SIGUSR1. When a
    message is complete it is printed as ``<pid> : <message>`` and the
    sender is signalled twice: once before printing and once after.
    """

    def __init__(
        self,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        notify: Optional[Callable[[int, int], None]] = None,
        pid: Optional[int] = None,
    ) -> None:
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self._notify = notify if notify is not None else os.kill
        self.pid = pid if pid is not None else os.getpid()
        self._receiver = Receiver()

    def _acknowledge(self, sender: int) -> None:
        try:
            self._notify(sender, signal.SIGUSR1)
        except OSError as exc:
            self._receiver.reset()
            raise ServerError(SERVER_KILL_ERROR) from exc

    def _print_message(self, sender: int, message: bytes) -> None:
        self._acknowledge(sender)
        text = message.decode("utf-8", errors="replace")
        self.stdout.write(f"{sender} : {text}\n\n")
        self.stdout.flush()
        self._acknowledge(sender)
        write_colored(SERVER_LISTEN, self.stdout, BLUE)

    def handle(self, signum: int, sender: int) -> Optional[bytes]:
        """Take one signal from a client.

        SIGUSR1 carries a set bit and anything else a clear bit. Returns the
        message once it is complete, and None otherwise.
        """
        try:
            message = self._receiver.feed(sender, signum == signal.SIGUSR1)
        except ProtocolError as exc:
            if exc.sender is not None and exc.sender != sender:
                raise ServerError(
                    f"{SERVER_CLOSE}{exc.sender}{SERVER_CLOSE_2}"
                ) from exc
            raise ServerError(SERVER_CRASH) from exc
        if message is None:
            self._acknowledge(sender)
            return None
        self._print_message(sender, message)
        return message

    def _greeting(self) -> str:
        return (
            f"{SERVER_HI}{LIGHT_WHITE}{self.pid}{RESET}\n\n"
            f"{colored(SERVER_LISTEN, BLUE)}"
        )

    def run(self) -> None:
        """Show the banner and process incoming signals until stopped."""
        self.stdout.write(banner())
        self.stdout.flush()
        try:
            signal.pthread_sigmask(signal.SIG_BLOCK, _SIGNALS)
        except (OSError, ValueError, AttributeError) as exc:
            raise ServerError(SERVER_SIGACTION_ERROR) from exc
        try:
            self.stdout.write(self._greeting())
            self.stdout.flush()
            while True:
                info = signal.sigwaitinfo(_SIGNALS)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_UNBLOCK, _SIGNALS)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        write_colored(SERVER_PARAMETER_ERROR, sys.stderr, LIGHT_RED)
        return 0
    server = Server()
    try:
        server.run()
    except ServerError as exc:
        if str(exc) == SERVER_SIGACTION_ERROR:
            write_colored(str(exc), sys.stderr, LIGHT_RED)
            return 0
        write_colored(str(exc), sys.stderr, LIGHT_RED)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())