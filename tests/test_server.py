import signal
import socket
import threading

import pytest

from staticweb.server import Server

INDEX = b"<html>welcome</html>"
MISSING = b"<html>gone</html>"


@pytest.fixture
def restore_signals():
    saved = {}
    for signum in signal.valid_signals():
        try:
            saved[signum] = signal.getsignal(signum)
        except (OSError, ValueError):
            continue
    yield
    for signum, handler in saved.items():
        try:
            signal.signal(signum, handler if handler is not None else signal.SIG_DFL)
        except (OSError, ValueError, TypeError):
            continue


@pytest.fixture
def home(tmp_path):
    (tmp_path / "index.html").write_bytes(INDEX)
    (tmp_path / "404.html").write_bytes(MISSING)
    return tmp_path


def _fetch(port, request):
    with socket.create_connection(("127.0.0.1", port), timeout=5) as sock:
        sock.sendall(request)
        data = bytearray()
        while True:
            chunk = sock.recv(4096)
            if not chunk:
                return bytes(data)
            data += chunk


def test_serves_files_and_stops_on_close(restore_signals, home):
    server = Server(0)
    runner = threading.Thread(target=server.run, args=(home,), daemon=True)
    runner.start()
    try:
        index = _fetch(server.port, b"GET / HTTP/1.0\r\n\r\n")
        missing = _fetch(server.port, b"GET /nope.html HTTP/1.0\r\n\r\n")
    finally:
        server.close()
    runner.join(timeout=5)
    assert not runner.is_alive()
    assert index.startswith(b"HTTP/1.1 200 OK\r\n")
    assert b"Connection: close\r\n" in index
    assert index.endswith(b"\r\n\r\n" + INDEX)
    assert missing.startswith(b"HTTP/1.1 404 NOT FOUND\r\n")
    assert missing.endswith(MISSING)


def test_context_manager_closes_listener(restore_signals):
    with Server(0) as server:
        port = server.port
        assert port > 0
    with pytest.raises(OSError):
        socket.create_connection(("127.0.0.1", port), timeout=2)


def test_init_ignores_hangup(restore_signals):
    with Server(0) as server:
        hangup = signal.getsignal(signal.SIGHUP)
        port = server.port
    assert hangup == signal.SIG_IGN
    assert port > 0