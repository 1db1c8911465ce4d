"""User-facing texts, terminal colours and the server banner."""

from __future__ import annotations

from typing import TextIO

BLUE = "\x1b[94m"
LIGHT_WHITE = "\x1b[97m"
LIGHT_RED = "\x1b[91m"
RESET = "\x1b[0m"

CLEAR_SCREEN = "\x1b[1;1H\x1b[2J"

# Client texts
CLIENT_EMPTY = "\nThe message is empty. Is there anything you want to say ?\n\n"
CLIENT_SIGACTION_ERROR = "\nSorry, we could not set up sigaction.\n\n"
CLIENT_SENT = "\nThe message has been successfully delivered to the server.\n\n"
CLIENT_KILL_ERROR = "\nWe could not reach the server, did you close it ?\n\n"
CLIENT_SERVER_ERROR = "\nAn incident has been notified by the server.\n\n"
CLIENT_PARAM_ERROR = "\nUsage : ./client [PID] [message to send]\n\n"

# Server texts
SERVER_HI = "You can send messages across the universe by using this PID : "
SERVER_LISTEN = "[Listening...]\n\n"
SERVER_SIGACTION_ERROR = "\nSorry, we could not set up sigaction.\n\n"
SERVER_KILL_ERROR = "\nWe could not to reach the server, did you close it ?\n\n"
SERVER_CRASH = "\nWhoops, the server has just crashed... \n\n"
SERVER_PARAMETER_ERROR = "\nTry again with no parameter.\n\n"
SERVER_MEMORY_ERROR = "\nA malloc error occurred and we had to stop the process.\n\n"
SERVER_CLOSE = "\nThe following client was closed during transmission : "
SERVER_CLOSE_2 = "\nDon't close client before the end of the delivery. \n\n"

BANNER_LINES = (
    " .              +   .                .   . .     .  .   .. . +  .",
    "                   .                    .       .    * .. .    + ",
    "  .       *                        . . . .  .   .  + . ..   .    ",
    "                                        .  .  +  . . ..  *       ",
    ".        WELCOME TO MINITALK     .  .   .    .    . . .   .      ",
    "                             .     .     . +.    +  . .          ",
    "                             .       .   . .                   . ",
    "        . .                .    * . . .  .  +   .    *           ",
    "           +      .           .   .      +                  .+   ",
    "                            .       . +  .+. .               .  ",
    "  .                      .     . + .  . .     .      .          ",
    "           .      .    .     . .   . . .        ! /             ",
    "      *             .    . .  +    .  .       - O -             ",
    "          .     .    .  +   . .  *  .       . / |         .     ",
    "               . + .  .  .  .. +  .                          .. ",
    ".      .  .  .  *   .  *  . +..  .            *          +      ",
    " .      .   . .   .   .   . .  +   .    .            +          ",
)


def colored(text: str, color: str) -> str:
    """Wrap text in a colour sequence followed by a reset."""
    return f"{color}{text}{RESET}"


def write_colored(text: str, stream: TextIO, color: str) -> None:
    """Write text to a stream in the given colour and flush it."""
    stream.write(colored(text, color))
    stream.flush()


def banner() -> str:
    """Return the screen-clearing welcome banner shown when the server starts."""
    body = "".join(f"{line}\n" for line in BANNER_LINES)
    return f"{CLEAR_SCREEN}{BLUE}{body}\n{RESET}"