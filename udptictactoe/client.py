"""Game client: asks the server to join and reports the player number it gets."""

from __future__ import annotations

import argparse
import sys

from .errors import GameNetError
from .netlayer import (
    DEFAULT_IP,
    DEFAULT_PORT,
    MAX_MSG_SIZE,
    init_socket,
    make_address,
    udp_read,
    udp_send,
)

JOIN_REQUEST = b"join\0"
DEFAULT_TIMEOUT = 10


def join_game(
    ip: str = DEFAULT_IP, port: int = DEFAULT_PORT, timeout: float = DEFAULT_TIMEOUT
) -> str:
    """Send a join request to the server and return its reply text."""
    address = make_address(ip, port)
    with init_socket(timeout) as sock:
        udp_send(sock, JOIN_REQUEST, address)
        data, _ = udp_read(sock, MAX_MSG_SIZE)
    return data.split(b"\0", 1)[0].decode(errors="replace")


def main(argv: list[str] | None = None) -> int:
    """Join a game from the command line and print the server's reply."""
    parser = argparse.ArgumentParser(description="Tic-tac-toe UDP game client.")
    parser.add_argument("--ip", default=DEFAULT_IP, help="server IPv4 address")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="server UDP port")
    parser.add_argument(
        "--timeout", type=float, default=DEFAULT_TIMEOUT, help="receive timeout in seconds"
    )
    args = parser.parse_args(argv)
    try:
        reply = join_game(args.ip, args.port, args.timeout)
    except GameNetError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    print(reply)
    return 0


if __name__ == "__main__":
    sys.exit(main())