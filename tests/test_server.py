import threading
import time

import pytest

from udptictactoe.errors import NetworkError
from udptictactoe.netlayer import init_socket, udp_server_init
from udptictactoe.server import main, run_server, wait_for_join


@pytest.fixture
def server_sock():
    sock = udp_server_init("127.0.0.1", 0, 1)
    yield sock
    sock.close()


@pytest.fixture
def client_sock():
    sock = init_socket(1)
    sock.bind(("127.0.0.1", 0))
    yield sock
    sock.close()


def _free_port():
    probe = init_socket(0)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    return port


def test_wait_for_join_returns_sender(server_sock, client_sock):
    client_sock.sendto(b"join", server_sock.getsockname())
    assert wait_for_join(server_sock) == client_sock.getsockname()


def test_wait_for_join_accepts_nul_terminated(server_sock, client_sock):
    client_sock.sendto(b"join\0", server_sock.getsockname())
    assert wait_for_join(server_sock) == client_sock.getsockname()


def test_wait_for_join_skips_other_messages(server_sock, client_sock):
    other = init_socket(1)
    other.bind(("127.0.0.1", 0))
    try:
        other.sendto(b"hello", server_sock.getsockname())
        other.sendto(b"", server_sock.getsockname())
        other.sendto(b"joinx", server_sock.getsockname())
        client_sock.sendto(b"join", server_sock.getsockname())
        assert wait_for_join(server_sock) == client_sock.getsockname()
    finally:
        other.close()


def test_wait_for_join_raises_on_closed_socket():
    sock = udp_server_init("127.0.0.1", 0, 1)
    sock.close()
    with pytest.raises(NetworkError):
        wait_for_join(sock)


def test_run_server_rejects_bad_ip():
    with pytest.raises(NetworkError):
        run_server("not-an-ip", 1234, 1)


def test_main_reports_error():
    assert main(["--ip", "not-an-ip", "--timeout", "1"]) == 1


def test_run_server_assigns_players(capsys):
    port = _free_port()
    result = {}

    def serve():
        result["players"] = run_server("127.0.0.1", port, 1)

    thread = threading.Thread(target=serve, daemon=True)
    thread.start()

    first = init_socket(0.5)
    second = init_socket(2)
    try:
        first.bind(("127.0.0.1", 0))
        second.bind(("127.0.0.1", 0))
        reply = None
        deadline = time.monotonic() + 10
        while reply is None and time.monotonic() < deadline:
            first.sendto(b"join\0", ("127.0.0.1", port))
            try:
                reply, _ = first.recvfrom(508)
            except OSError:
                reply = None
        assert reply == b"1\0"

        second.sendto(b"join\0", ("127.0.0.1", port))
        reply2, _ = second.recvfrom(508)
        assert reply2 == b"2\0"

        thread.join(5)
        assert result["players"] == (first.getsockname(), second.getsockname())
    finally:
        first.close()
        second.close()

    out = capsys.readouterr().out
    assert "player one has joined" in out
    assert "player two has joined" in out
    assert out.rstrip().endswith("game start")