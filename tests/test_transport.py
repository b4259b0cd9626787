import socket
import threading

import pytest

from staticweb.transport import Listener, recv_request, send_body, send_head


def _read_all(sock):
    data = bytearray()
    while True:
        chunk = sock.recv(4096)
        if not chunk:
            return bytes(data)
        data += chunk


def test_listener_accepts_connections():
    with Listener(0) as listener:
        assert listener.port > 0
        client = socket.create_connection(("127.0.0.1", listener.port), timeout=5)
        conn = listener.accept()
        try:
            client.sendall(b"ping")
            assert conn.recv(16) == b"ping"
        finally:
            conn.close()
            client.close()


def test_listener_accept_fails_after_close():
    listener = Listener(0)
    listener.close()
    with pytest.raises(OSError):
        listener.accept()


def test_recv_request_stops_at_blank_line():
    left, right = socket.socketpair()
    with left, right:
        left.sendall(b"GET / HTTP/1.1\r\nHost: example.com\r\n\r\n")
        assert recv_request(right) == "GET / HTTP/1.1\r\nHost: example.com\r\n\r\n"


def test_recv_request_collects_large_head():
    head = "GET / HTTP/1.1\r\n" + "X-Fill: " + "a" * 5000 + "\r\n\r\n"
    left, right = socket.socketpair()
    with left, right:
        sender = threading.Thread(target=left.sendall, args=(head.encode(),))
        sender.start()
        received = recv_request(right)
        sender.join()
    assert received == head


def test_recv_request_returns_partial_data_on_close():
    left, right = socket.socketpair()
    with right:
        left.sendall(b"GET / HTTP/1.1\r\n")
        left.close()
        assert recv_request(right) == "GET / HTTP/1.1\r\n"


def test_recv_request_returns_none_when_nothing_sent():
    left, right = socket.socketpair()
    with right:
        left.close()
        assert recv_request(right) is None


def test_send_head_sends_exact_bytes():
    head = "HTTP/1.1 200 OK\r\nContent-Length: 0\r\n\r\n"
    left, right = socket.socketpair()
    with left, right:
        send_head(left, head)
        received = recv_request(right)
    assert received == head


def test_send_body_sends_whole_file(tmp_path):
    payload = bytes(range(256)) * 20
    target = tmp_path / "blob.bin"
    target.write_bytes(payload)
    left, right = socket.socketpair()
    with right:
        received = []
        reader = threading.Thread(target=lambda: received.append(_read_all(right)))
        reader.start()
        send_body(left, target)
        left.close()
        reader.join(timeout=5)
    assert received == [payload]


def test_send_body_missing_file(tmp_path):
    left, right = socket.socketpair()
    with left, right:
        with pytest.raises(FileNotFoundError):
            send_body(left, tmp_path / "missing.html")