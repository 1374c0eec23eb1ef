"""Raw file transfer over a connected stream socket."""

from __future__ import annotations

import os
import socket
from functools import partial

__all__ = [
    "PORT",
    "BUFFER_SIZE",
    "FILENAME_MAX_LEN",
    "send_file",
    "receive_file",
]

PORT = 8080
BUFFER_SIZE = 1024
FILENAME_MAX_LEN = 256


def send_file(sock: socket.socket, path: str | os.PathLike) -> int:
    """Send the bytes of the file at ``path`` in chunks; return how many were sent.

    Raises OSError when the file cannot be opened or the socket fails.
    """
    sent = 0
    with open(path, "rb") as source:
        for chunk in iter(partial(source.read, BUFFER_SIZE), b""):
            sock.sendall(chunk)
            sent += len(chunk)
    return sent


def receive_file(sock: socket.socket, path: str | os.PathLike) -> int:
    """Write what arrives on ``sock`` to ``path``; return how many bytes were written.

    Reading stops when the peer closes the connection or when a chunk shorter
    than the buffer size arrives, which is taken as the end of the file.
    Raises OSError when the file cannot be created or the socket fails.
    """
    written = 0
    with open(path, "wb") as target:
        while chunk := sock.recv(BUFFER_SIZE):
            target.write(chunk)
            written += len(chunk)
            if len(chunk) < BUFFER_SIZE:
                break
    return written