"""Game server: waits for two players to join over UDP and assigns their numbers."""

from __future__ import annotations

import argparse
import socket
import sys
from enum import Enum, auto

from .errors import GameNetError, NetworkError
from .netlayer import (
    DEFAULT_IP,
    DEFAULT_PORT,
    MAX_MSG_SIZE,
    Address,
    udp_read,
    udp_send,
    udp_server_init,
)

JOIN_MESSAGE = b"join"
DEFAULT_TIMEOUT = 10


class ServerState(Enum):
    """Phases of the server's lobby."""

    WAITING_FOR_TWO = auto()
    WAITING_FOR_ONE = auto()
    WAITING_TURN = auto()


def _is_join(data: bytes) -> bool:
    return data.split(b"\0", 1)[0] == JOIN_MESSAGE


def wait_for_join(sock: socket.socket) -> Address:
    """Read datagrams until one says ``join``; return the sender's address.

    Receive timeouts are waited out; any other network failure is raised.
    """
    while True:
        try:
            data, address = udp_read(sock, MAX_MSG_SIZE)
        except NetworkError as exc:
            if isinstance(exc.__cause__, TimeoutError):
                continue
            raise
        if data and _is_join(data):
            return address


def run_server(
    ip: str = DEFAULT_IP, port: int = DEFAULT_PORT, timeout: float = DEFAULT_TIMEOUT
) -> tuple[Address, Address]:
    """Accept two players, tell each its number and return both addresses."""
    state = ServerState.WAITING_FOR_TWO
    players: list[Address] = []
    with udp_server_init(ip, port, timeout) as sock:
        while state is not ServerState.WAITING_TURN:
            address = wait_for_join(sock)
            players.append(address)
            udp_send(sock, f"{len(players)}\0".encode(), address)
            if state is ServerState.WAITING_FOR_TWO:
                print("player one has joined")
                state = ServerState.WAITING_FOR_ONE
            else:
                print("player two has joined")
                state = ServerState.WAITING_TURN
    print("game start")
    return players[0], players[1]


def main(argv: list[str] | None = None) -> int:
    """Run the game server from the command line."""
    parser = argparse.ArgumentParser(description="Tic-tac-toe UDP game server.")
    parser.add_argument("--ip", default=DEFAULT_IP, help="IPv4 address to bind")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="UDP port")
    parser.add_argument(
        "--timeout", type=float, default=DEFAULT_TIMEOUT, help="receive timeout in seconds"
    )
    args = parser.parse_args(argv)
    try:
        run_server(args.ip, args.port, args.timeout)
    except GameNetError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())