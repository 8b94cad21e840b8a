import threading

import pytest

from udptictactoe.client import join_game, main
from udptictactoe.errors import AddressError, NetworkError
from udptictactoe.netlayer import udp_server_init


@pytest.fixture
def fake_server():
    sock = udp_server_init("127.0.0.1", 0, 5)
    received = []

    def answer(reply):
        def run():
            data, address = sock.recvfrom(508)
            received.append(data)
            if reply is not None:
                sock.sendto(reply, address)

        thread = threading.Thread(target=run, daemon=True)
        thread.start()
        return thread

    yield sock, answer, received
    sock.close()


def test_join_game_returns_player_number(fake_server):
    sock, answer, received = fake_server
    thread = answer(b"1\0")
    port = sock.getsockname()[1]
    assert join_game("127.0.0.1", port, 5) == "1"
    thread.join(5)
    assert received == [b"join\0"]


def test_join_game_reply_without_terminator(fake_server):
    sock, answer, _ = fake_server
    answer(b"2")
    assert join_game("127.0.0.1", sock.getsockname()[1], 5) == "2"


def test_join_game_times_out_without_reply(fake_server):
    sock, answer, received = fake_server
    thread = answer(None)
    with pytest.raises(NetworkError):
        join_game("127.0.0.1", sock.getsockname()[1], 0.3)
    thread.join(5)
    assert received == [b"join\0"]


def test_join_game_rejects_bad_ip():
    with pytest.raises(AddressError):
        join_game("999.1.1.1", 1234, 1)


def test_main_prints_reply(fake_server, capsys):
    sock, answer, _ = fake_server
    answer(b"1\0")
    port = str(sock.getsockname()[1])
    assert main(["--ip", "127.0.0.1", "--port", port, "--timeout", "5"]) == 0
    assert capsys.readouterr().out == "1\n"


def test_main_reports_bad_address(capsys):
    assert main(["--ip", "bogus", "--timeout", "1"]) == 1
    assert "ERROR:" in capsys.readouterr().err