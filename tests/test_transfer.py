import socket

import pytest

from scratchpad.transfer import BUFFER_SIZE, receive_file, send_file


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


def test_send_file_sends_whole_content(tmp_path, pair):
    a, b = pair
    content = bytes(range(256)) * 10
    path = tmp_path / "data.bin"
    path.write_bytes(content)
    assert send_file(a, path) == len(content)
    a.shutdown(socket.SHUT_WR)
    assert _drain(b) == content


def test_send_empty_file_sends_nothing(tmp_path, pair):
    a, b = pair
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    assert send_file(a, path) == 0
    a.shutdown(socket.SHUT_WR)
    assert _drain(b) == b""


def test_send_missing_file_raises(tmp_path, pair):
    a, _ = pair
    with pytest.raises(FileNotFoundError):
        send_file(a, tmp_path / "missing.txt")


def test_round_trip_short_file(tmp_path, pair):
    a, b = pair
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_bytes(b"hello transfer\n")
    send_file(a, source)
    assert receive_file(b, target) == len(b"hello transfer\n")
    assert target.read_bytes() == source.read_bytes()


def test_round_trip_multi_chunk_file(tmp_path, pair):
    a, b = pair
    content = b"x" * (BUFFER_SIZE * 2 + 100)
    source = tmp_path / "in.bin"
    target = tmp_path / "out.bin"
    source.write_bytes(content)
    send_file(a, source)
    receive_file(b, target)
    assert target.read_bytes() == content


def test_receive_exact_chunk_stops_on_close(tmp_path, pair):
    a, b = pair
    content = b"z" * BUFFER_SIZE
    a.sendall(content)
    a.shutdown(socket.SHUT_WR)
    target = tmp_path / "out.bin"
    assert receive_file(b, target) == BUFFER_SIZE
    assert target.read_bytes() == content


def test_receive_stops_at_short_chunk(tmp_path, pair):
    a, b = pair
    a.sendall(b"first")
    target = tmp_path / "out.txt"
    receive_file(b, target)
    a.sendall(b"second")
    assert target.read_bytes() == b"first"
    assert b.recv(100) == b"second"


def test_receive_into_missing_directory_raises(tmp_path, pair):
    _, b = pair
    with pytest.raises(FileNotFoundError):
        receive_file(b, tmp_path / "nope" / "out.txt")