"""A threaded file server that talks to its clients through a text menu.

Each client is sent a menu. The client answers with ``send`` to fetch a file
from the server, ``1\\n`` to upload a file to it, or ``exit`` to leave.
"""

from __future__ import annotations

import os
import socket
import sys
import threading

from scratchpad.transfer import BUFFER_SIZE, FILENAME_MAX_LEN, PORT

__all__ = [
    "MENU",
    "MAX_CONNECTIONS",
    "send_menu",
    "serve_file",
    "store_file",
    "handle_client",
    "main",
]

MAX_CONNECTIONS = 10
BACKLOG = 3

MENU = b"Choose an option:\n1. Send file\n2. Receive file\n3. Exit\n"
FILENAME_PROMPT = b"Enter the filename to send"
NOT_FOUND = b"File not found"
TRANSFER_DONE = b"File transfer complete."
EOF_MARKER = b"EOF"

SEND_OPTION = b"send"
RECEIVE_OPTION = b"1\n"
EXIT_OPTION = b"exit"


def _until_nul(data: bytes) -> bytes:
    return data.split(b"\0", 1)[0]


def _receive_filename(conn: socket.socket) -> str:
    raw = conn.recv(FILENAME_MAX_LEN)
    if not raw:
        raise ConnectionError("connection closed before a filename arrived")
    return os.fsdecode(_until_nul(raw))


def send_menu(conn: socket.socket) -> None:
    """Send the option menu to the client."""
    conn.sendall(MENU)


def serve_file(conn: socket.socket) -> bool:
    """Ask the client for a filename and send that file's bytes back.

    The client is told when the file does not exist. Returns whether the file
    was sent.
    """
    conn.sendall(FILENAME_PROMPT)
    filename = os.fsdecode(_until_nul(conn.recv(FILENAME_MAX_LEN)))
    try:
        source = open(filename, "rb")
    except OSError:
        conn.sendall(NOT_FOUND)
        return False
    with source:
        while chunk := source.read(BUFFER_SIZE):
            conn.sendall(chunk)
    conn.sendall(TRANSFER_DONE)
    return True


def store_file(conn: socket.socket) -> int:
    """Receive a filename, then the file's contents, and write them to disk.

    Receiving stops when the peer closes the connection or sends a chunk that
    is exactly ``EOF``. Returns the number of bytes written. Raises
    ConnectionError when no filename arrives and OSError when the file cannot
    be created.
    """
    filename = _receive_filename(conn)
    print(f"Receiving file: {filename}")
    written = 0
    with open(filename, "wb") as target:
        while chunk := conn.recv(BUFFER_SIZE):
            if chunk == EOF_MARKER:
                break
            target.write(chunk)
            written += len(chunk)
    print(f"File received successfully: {filename}")
    return written


def handle_client(conn: socket.socket, address=None) -> None:
    """Serve one client until it sends ``exit`` or disconnects, then close it."""
    try:
        send_menu(conn)
        while True:
            data = conn.recv(BUFFER_SIZE)
            if not data:
                break
            option = _until_nul(data)
            print(f"Client chose option: {option.decode('utf-8', 'replace')}", end="")
            if option == EXIT_OPTION:
                break
            try:
                if option == SEND_OPTION:
                    serve_file(conn)
                elif option == RECEIVE_OPTION:
                    store_file(conn)
            except OSError as error:
                print(f"Transfer failed: {error}", file=sys.stderr)
            send_menu(conn)
    finally:
        conn.close()
    print("Client disconnected")


def main(argv: list[str] | None = None) -> int:
    """Listen on the configured port and serve every client in its own thread."""
    clients: list[tuple[socket.socket, tuple]] = []
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    with server:
        try:
            server.bind(("", PORT))
        except OSError as error:
            print(f"Bind failed: {error}", file=sys.stderr)
            return 1
        try:
            server.listen(BACKLOG)
        except OSError as error:
            print(f"Listen failed: {error}", file=sys.stderr)
            return 1
        print(f"Server listening on port {PORT}...")
        try:
            while True:
                try:
                    conn, address = server.accept()
                except OSError as error:
                    print(f"Accept failed: {error}", file=sys.stderr)
                    return 1
                if len(clients) < MAX_CONNECTIONS:
                    clients.append((conn, address))
                print(f"Client connected: {address[0]}")
                threading.Thread(
                    target=handle_client, args=(conn, address), daemon=True
                ).start()
        except KeyboardInterrupt:
            return 0


if __name__ == "__main__":
    sys.exit(main())