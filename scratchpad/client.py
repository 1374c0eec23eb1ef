"""A file transfer client driven by a console menu."""

from __future__ import annotations

import re
import socket
import sys
from typing import TextIO

from scratchpad.transfer import PORT, receive_file, send_file

__all__ = ["connect_to_server", "run_client_menu", "main"]

MENU = "1. Send file\n2. Wait to receive file\n3. Exit\nChoice: "
SEND_COMMAND = b"CMD:SEND_FILE"
RECEIVED_FILE = "received.txt"
SERVER_HOST = "127.0.0.1"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _read_line(infile: TextIO) -> str:
    line = infile.readline()
    if not line:
        raise EOFError
    return line.split("\n", 1)[0]


def _read_choice(infile: TextIO) -> int | None:
    """Read the next non-blank line and return its leading integer, if any."""
    while True:
        line = _read_line(infile)
        if line.strip():
            break
    match = _LEADING_INT.match(line)
    return int(match.group(1)) if match else None


def connect_to_server(host: str, port: int = PORT) -> socket.socket:
    """Open a TCP connection to ``host``:``port``. Raises OSError on failure."""
    sock = socket.create_connection((host, port))
    print(f"Connected to server at {host}:{port}")
    return sock


def run_client_menu(
    sock: socket.socket,
    infile: TextIO | None = None,
    outfile: TextIO | None = None,
) -> None:
    """Serve the menu until the user picks Exit or input runs out."""
    infile = infile if infile is not None else sys.stdin
    outfile = outfile if outfile is not None else sys.stdout
    try:
        while True:
            outfile.write(MENU)
            outfile.flush()
            choice = _read_choice(infile)
            if choice == 1:
                outfile.write("Enter filename: ")
                outfile.flush()
                filename = _read_line(infile)
                try:
                    sock.sendall(SEND_COMMAND)
                    send_file(sock, filename)
                except OSError as error:
                    outfile.write(f"{error}\nFailed to send.\n")
                else:
                    outfile.write("File sent.\n")
            elif choice == 2:
                outfile.write("Waiting to receive file...\n")
                outfile.flush()
                try:
                    receive_file(sock, RECEIVED_FILE)
                except OSError as error:
                    outfile.write(f"{error}\nFailed to receive file.\n")
                else:
                    outfile.write("File received.\n")
            elif choice == 3:
                return
            else:
                outfile.write("Invalid choice.\n")
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    """Connect to the local server and run the menu."""
    try:
        sock = connect_to_server(SERVER_HOST, PORT)
    except OSError as error:
        print(f"Connection failed. Error: {error}", file=sys.stderr)
        return 1
    with sock:
        run_client_menu(sock)
    return 0


if __name__ == "__main__":
    sys.exit(main())