"""Server that stores directory listings received from clients."""

from __future__ import annotations

import argparse
import re
import socket
import sys
import time
from pathlib import Path
from typing import TextIO

from .protocol import END_CONNECTION, READY, READY_ACK, MessageChannel, current_time

PORT = 8080

_WIDE_RULE = "+---------------------------------------------------------------+"
_SPECIAL_CHARS = re.compile(r"[./:\\]")

_BANNER = r"""

    [SERVIDOR]
    +---------------------+
    |  Online             |
    |  Porta: 8080        |
    +---------------------+
    |                     |
    |     SERVER CLOUD    |
    |    #############    |
    |    #############    |
    |_____________________|
"""


def sanitize_filename(name: str) -> str:
    """Strip '.', '/', ':' and '\\' from a name and add the .txt suffix."""
    return _SPECIAL_CHARS.sub("", name) + ".txt"


def make_file(name: str, content: str, directory=".", out: TextIO | None = None) -> Path:
    """Write ``content`` plus a newline to the sanitized file name; return its path."""
    out = sys.stdout if out is None else out
    filename = sanitize_filename(name)
    print(f"Salvando arquivo {filename}\n", file=out)
    path = Path(directory) / filename
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(content + "\n")
    print("Arquivo salvo com sucesso.\n", file=out)
    return path


def await_ready(channel: MessageChannel) -> None:
    """Receive until READY arrives, then answer READY ACK."""
    while channel.receive() != READY:
        pass
    channel.send(READY_ACK)


def receive_files(channel: MessageChannel, directory=".", out: TextIO | None = None) -> list[Path]:
    """Store each listing received until the end-of-connection marker.

    A message carries host, directory and listing separated by whitespace; fields
    missing from a message keep their previous values.
    """
    out = sys.stdout if out is None else out
    fields = ["", "", ""]
    written = []
    while True:
        response = channel.receive()
        if response == END_CONNECTION:
            return written
        tokens = response.split()[:3]
        fields[: len(tokens)] = tokens
        host, dir_name, files = fields
        if files:
            try:
                written.append(make_file(host + dir_name, files, directory, out))
            except OSError:
                print("Error: Não foi possível criar ou alterar o arquivo.\n", file=sys.stderr)


def serve_once(port: int = PORT, directory=".", out: TextIO | None = None) -> float:
    """Accept one client on a dual-stack socket, store its listings; return elapsed seconds."""
    out = sys.stdout if out is None else out
    with socket.socket(socket.AF_INET6, socket.SOCK_STREAM) as server_sock:
        server_sock.setsockopt(socket.IPPROTO_IPV6, socket.IPV6_V6ONLY, 0)
        server_sock.bind(("::", port))
        server_sock.listen()
        print(f"Servidor aguardando conexão na porta {port}...", file=out)
        conn, _ = server_sock.accept()
        with conn:
            channel = MessageChannel(conn, "cliente", out)
            start = time.perf_counter()
            await_ready(channel)
            receive_files(channel, directory, out)
            elapsed = time.perf_counter() - start
            print(f"Tempo total de transmissão: {elapsed:g} s\n", file=out)
    print("Servidor desligado", file=out)
    return elapsed


def main(argv: list[str] | None = None) -> int:
    """Run the server for a single client connection."""
    parser = argparse.ArgumentParser(description="Receive directory listings from a client.")
    parser.add_argument("--port", type=int, default=PORT)
    parser.add_argument("--directory", default=".")
    args = parser.parse_args(argv)
    out = sys.stdout

    print(_BANNER, file=out)
    try:
        with open("output.txt", "a", encoding="utf-8"):
            pass
    except OSError:
        print("Error opening file!", file=sys.stderr)
        return 1

    print(_WIDE_RULE, file=out)
    print("|  INÍCIO", file=out)
    print(f"|  Data: {current_time()}", file=out)
    print(_WIDE_RULE, file=out)

    try:
        serve_once(args.port, args.directory, out)
    except OSError as exc:
        print(f"Erro no servidor: {exc}", file=sys.stderr)

    print(_WIDE_RULE, file=out)
    print("|  FIM", file=out)
    print(f"|  Data: {current_time()}", file=out)
    print(_WIDE_RULE, file=out)
    return 0