"""Client that sends a directory listing to the cloud server."""

from __future__ import annotations

import argparse
import os
import socket
import sys
import time
from typing import TextIO

from .protocol import END_CONNECTION, READY, READY_ACK, MessageChannel, current_time

PORT = 4200

_WIDE_RULE = "+---------------------------------------------------------------+"

_BANNER = r"""

    [CLIENTE]
    +---------------------+
    |  Conectando...      |
    |  Porta: 4200        |
    +---------------------+
        ^_____^
         o   o
     ( ==  ^  == )
      )         (
     (           )
    ( (  )   (  ) )
   (__(__)___(__)__)
"""


def list_directory(directory: str) -> str:
    """Return the directory's entry paths, each followed by a comma, spaces removed.

    A directory that does not exist gives an empty string.
    """
    if not os.path.exists(directory):
        return ""
    with os.scandir(directory) as entries:
        paths = sorted(entry.path for entry in entries)
    return "".join(f"{path}," for path in paths).replace(" ", "")


def build_info_message(host: str, directory: str) -> str:
    """Return the message describing a directory: host, directory and listing."""
    return f"{host} {directory} {list_directory(directory)}"


def resolve_address(host: str, port: int) -> tuple[int, tuple]:
    """Return the address family and socket address for a literal IP address.

    A host containing ':' is taken as IPv6, any other as IPv4.
    Raises ValueError for an address that is not a valid literal.
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    try:
        socket.inet_pton(family, host)
    except OSError as exc:
        raise ValueError(f"invalid address: {host!r}") from exc
    if family == socket.AF_INET6:
        return family, (host, port, 0, 0)
    return family, (host, port)


def ready_handshake(channel: MessageChannel) -> None:
    """Send READY until the server answers READY ACK."""
    while True:
        channel.send(READY)
        if channel.receive() == READY_ACK:
            return


def send_info(channel: MessageChannel, host: str, directory: str) -> None:
    """Send the directory description followed by the end-of-connection marker."""
    channel.send(build_info_message(host, directory))
    channel.send(END_CONNECTION)


def run_client(host: str, port, directory: str, out: TextIO | None = None) -> float:
    """Connect, perform the handshake and send the listing; return elapsed seconds."""
    out = sys.stdout if out is None else out
    port_number = int(port)
    family, address = resolve_address(host, port_number)
    label = "IPv6" if family == socket.AF_INET6 else "IPv4"
    print(f"{label} {host}:{port_number}\n", file=out)
    with socket.socket(family, socket.SOCK_STREAM) as sock:
        sock.connect(address)
        channel = MessageChannel(sock, "servidor", out)
        start = time.perf_counter()
        ready_handshake(channel)
        send_info(channel, host, directory)
        elapsed = time.perf_counter() - start
        print(f"Tempo total de transmissão: {elapsed:g} s\n", file=out)
    return elapsed


def main(argv: list[str] | None = None) -> int:
    """Run the client; arguments are read from standard input when not given."""
    parser = argparse.ArgumentParser(description="Send a directory listing to the server.")
    parser.add_argument("fields", nargs="*", metavar="HOST PORT DIRECTORY")
    args = parser.parse_args(argv)
    out = sys.stdout

    print(_BANNER, file=out)
    try:
        with open("output.txt", "a", encoding="utf-8"):
            pass
    except OSError:
        print("Error opening file!", file=sys.stderr)
        return 1

    fields = args.fields
    if not fields:
        print("Insira as informações para se conectar ao servidor:", file=out)
        print("<host do servidor> <port do servidor> <nome do diretório>", file=out)
        print("", file=out)
        line = sys.stdin.readline()
        fields = line.split()
    host, port, directory = (list(fields[:3]) + ["", "", ""])[:3]

    print(_WIDE_RULE, file=out)
    print("|  INÍCIO", file=out)
    print(f"|  Data: {current_time()}", file=out)
    print(f"|  Host: {host}", file=out)
    print(f"|  Porta: {port}", file=out)
    print(f"|  Diretório: {directory}", file=out)
    print(_WIDE_RULE + "\n", file=out)

    try:
        run_client(host, port, directory, out)
    except (OSError, ValueError):
        print("Falha na conexão com o servidor.", file=sys.stderr)

    print(_WIDE_RULE, file=out)
    print("|  FIM", file=out)
    print(f"|  Data: {current_time()}", file=out)
    print(_WIDE_RULE, file=out)
    return 0