"""Receive text messages sent to a process one bit at a time over SIGUSR1 and SIGUSR2."""

__version__ = "0.1.0"