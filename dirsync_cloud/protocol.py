"""Message exchange over a stream socket with throughput reporting."""

from __future__ import annotations

import math
import socket
import sys
import time
from typing import TextIO

END_CONNECTION = "::bye::"
READY = "READY"
READY_ACK = "READY ACK"
BUFFER_SIZE = 1024

_RULE = "+-------------------------------------------------------+"


def calc_throughput(elapsed: float, message: str | bytes) -> float:
    """Return bytes per second for a message transferred in ``elapsed`` seconds."""
    size = len(message.encode("utf-8") if isinstance(message, str) else message)
    if elapsed <= 0:
        return math.inf if size else math.nan
    return size / elapsed


def current_time() -> str:
    """Return the local time in ctime form, newline terminated."""
    return time.ctime() + "\n"


class MessageChannel:
    """One peer's side of a connection: each send or receive is one message."""

    def __init__(self, sock: socket.socket, peer_label: str, out: TextIO | None = None):
        self.sock = sock
        self.peer_label = peer_label
        self.out = sys.stdout if out is None else out

    def _report(self, heading: str, message: str, elapsed: float) -> None:
        print(_RULE, file=self.out)
        print(f"{heading}: {message}", file=self.out)
        print(f"Throughput: {calc_throughput(elapsed, message):g} B/s", file=self.out)
        print(_RULE + "\n", file=self.out)

    def send(self, message: str) -> None:
        """Send one message and report it."""
        start = time.perf_counter()
        self.sock.sendall(message.encode("utf-8"))
        elapsed = time.perf_counter() - start
        self._report(f"Mensagem enviada ao {self.peer_label}", message, elapsed)

    def receive(self) -> str:
        """Receive one message of at most 1024 bytes and report it.

        Raises ConnectionError when the peer has closed the connection.
        """
        start = time.perf_counter()
        data = self.sock.recv(BUFFER_SIZE)
        elapsed = time.perf_counter() - start
        if not data:
            raise ConnectionError(f"connection closed by {self.peer_label}")
        message = data.split(b"\0", 1)[0].decode("utf-8", errors="replace")
        self._report(f"Resposta do {self.peer_label}", message, elapsed)
        return message