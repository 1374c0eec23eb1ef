import io
import socket

import pytest

from scratchpad.client import connect_to_server, run_client_menu


@pytest.fixture
def pair():
    a, b = socket.socketpair()
    yield a, b
    a.close()
    b.close()


def _drain(sock):
    data = b""
    while chunk := sock.recv(4096):
        data += chunk
    return data


def _run(sock, text):
    out = io.StringIO()
    run_client_menu(sock, io.StringIO(text), out)
    return out.getvalue()


def test_connect_to_server(capsys):
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
        server.bind(("127.0.0.1", 0))
        server.listen(1)
        port = server.getsockname()[1]
        sock = connect_to_server("127.0.0.1", port)
        with sock:
            conn, _ = server.accept()
            with conn:
                assert conn.getpeername() == sock.getsockname()
        assert f"Connected to server at 127.0.0.1:{port}" in capsys.readouterr().out


def test_connect_refused_raises():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind(("127.0.0.1", 0))
        port = probe.getsockname()[1]
    with pytest.raises(OSError):
        connect_to_server("127.0.0.1", port)


def test_send_file_sends_command_then_content(tmp_path, pair):
    a, b = pair
    path = tmp_path / "note.txt"
    path.write_bytes(b"client payload")
    output = _run(a, f"1\n{path}\n3\n")
    assert "File sent.\n" in output
    a.shutdown(socket.SHUT_WR)
    assert _drain(b) == b"CMD:SEND_FILE" + b"client payload"


def test_send_missing_file_reports_failure(tmp_path, pair):
    a, b = pair
    output = _run(a, f"1\n{tmp_path / 'missing.txt'}\n3\n")
    assert "Failed to send.\n" in output
    a.shutdown(socket.SHUT_WR)
    assert _drain(b) == b"CMD:SEND_FILE"


def test_receive_file_option(tmp_path, monkeypatch, pair):
    a, b = pair
    monkeypatch.chdir(tmp_path)
    b.sendall(b"incoming data")
    output = _run(a, "2\n3\n")
    assert "Waiting to receive file...\nFile received.\n" in output
    assert (tmp_path / "received.txt").read_bytes() == b"incoming data"


def test_unknown_choice(pair):
    a, _ = pair
    output = _run(a, "7\n3\n")
    assert "Invalid choice.\n" in output
    assert output.count("Choice: ") == 2


def test_non_numeric_choice(pair):
    a, _ = pair
    output = _run(a, "x\n3\n")
    assert output.count("Invalid choice.\n") == 1


def test_end_of_input_stops_menu(pair):
    a, _ = pair
    output = _run(a, "")
    assert output == "1. Send file\n2. Wait to receive file\n3. Exit\nChoice: "