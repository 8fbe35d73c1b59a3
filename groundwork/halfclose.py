"""A TCP client and server that exercise half-closed connections."""

from __future__ import annotations

import socket
import sys
import threading
from collections.abc import Sequence

_USAGE = "Usage: half-close-test <client|server> <address>"
_BUFFER_SIZE = 1024


def _split_address(address: str) -> tuple[str, int]:
    host, sep, port = address.rpartition(":")
    if not sep:
        raise ValueError(f"missing port in address {address}")
    return host.strip("[]"), int(port)


def _text(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def server(address: str) -> None:
    """Accept connections forever, answering each with a half-close exchange."""
    with socket.create_server(_split_address(address)) as listener:
        while True:
            conn, _ = listener.accept()
            threading.Thread(target=_handle_server_conn, args=(conn,), daemon=True).start()


def _handle_server_conn(conn: socket.socket) -> None:
    with conn:
        while data := conn.recv(_BUFFER_SIZE):
            print(f"client said: '{_text(data)}'", flush=True)
        conn.sendall(b"goodbye")
        print("server sent: goodbye", flush=True)
        conn.shutdown(socket.SHUT_WR)


def client(address: str) -> None:
    """Send a greeting, close the write side, and print everything the server returns."""
    with socket.create_connection(_split_address(address)) as conn:
        conn.sendall(b"hello")
        print("client sent: 'hello'", flush=True)
        conn.shutdown(socket.SHUT_WR)
        while data := conn.recv(_BUFFER_SIZE):
            print(f"server responded: '{_text(data)}'", flush=True)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(f"invalid number of arguments count ({len(args) + 1}). {_USAGE}")
        if len(args) < 2:
            return 2
    mode, address = args[0], args[1]
    if mode == "client":
        client(address)
    elif mode == "server":
        server(address)
    else:
        print(f"invalid arguments. {_USAGE}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())