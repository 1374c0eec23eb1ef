"""A single-client file server driven by a console menu."""

from __future__ import annotations

import re
import socket
import sys
from typing import TextIO

from scratchpad.transfer import PORT, send_file

__all__ = ["setup_server_socket", "accept_client", "run_server_menu", "main"]

MENU = (
    "\n--- Server Menu ---\n"
    "1. View connected client\n"
    "2. Send file to client\n"
    "3. Exit\n"
    "Enter your choice: "
)
OUTGOING_FILE = "example.txt"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _read_choice(infile: TextIO) -> int | None:
    """Read the next non-blank line and return its leading integer, if any."""
    while True:
        line = infile.readline()
        if not line:
            raise EOFError
        if line.strip():
            break
    match = _LEADING_INT.match(line)
    return int(match.group(1)) if match else None


def setup_server_socket(port: int = PORT, host: str = "") -> socket.socket:
    """Return a TCP socket bound to ``host``:``port`` and listening.

    An empty host means every interface. Raises OSError on failure.
    """
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        server.bind((host, port))
        server.listen(1)
    except OSError:
        server.close()
        raise
    print(f"Server listening on port {port}...")
    return server


def accept_client(server: socket.socket) -> socket.socket:
    """Wait for one client and return its connection."""
    conn, (ip, port) = server.accept()
    print(f"Client connected: {ip}:{port}")
    return conn


def run_server_menu(
    conn: socket.socket,
    infile: TextIO | None = None,
    outfile: TextIO | None = None,
) -> None:
    """Serve the menu until the user picks Exit or input runs out."""
    infile = infile if infile is not None else sys.stdin
    outfile = outfile if outfile is not None else sys.stdout
    while True:
        outfile.write(MENU)
        outfile.flush()
        try:
            choice = _read_choice(infile)
        except EOFError:
            return
        if choice is None:
            outfile.write("Invalid input.\n")
        elif choice == 1:
            outfile.write(f"Client is connected on socket {conn.fileno()}\n")
        elif choice == 2:
            outfile.write("Sending file to client...\n")
            try:
                send_file(conn, OUTGOING_FILE)
            except OSError as error:
                outfile.write(f"{error}\nFailed to send file.\n")
            else:
                outfile.write("File sent.\n")
        elif choice == 3:
            outfile.write("Exiting server...\n")
            return
        else:
            outfile.write("Invalid choice. Try again.\n")


def main(argv: list[str] | None = None) -> int:
    """Listen on the configured port, take one client and run the menu."""
    try:
        server = setup_server_socket(PORT)
    except OSError as error:
        print(f"Server setup failed: {error}", file=sys.stderr)
        return 1
    with server:
        try:
            conn = accept_client(server)
        except OSError as error:
            print(f"Accept failed: {error}", file=sys.stderr)
            return 1
        with conn:
            run_server_menu(conn)
    return 0


if __name__ == "__main__":
    sys.exit(main())