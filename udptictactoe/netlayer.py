"""Thin UDP/IPv4 helpers: socket creation, binding, sending and receiving."""

from __future__ import annotations

import logging
import socket

from .errors import (
    AddressError,
    GameNetError,
    InvalidArgumentError,
    NetworkError,
    SocketInitError,
)

log = logging.getLogger(__name__)

DEFAULT_IP = "127.0.0.1"
DEFAULT_PORT = 1234
MAX_PORT_NUMBER = (1 << 16) - 1
MAX_MSG_SIZE = 508

Address = tuple[str, int]


def init_socket(timeout: float = 0) -> socket.socket:
    """Create a UDP IPv4 socket.

    A strictly positive timeout is the receive timeout in seconds; 0 means none.
    """
    if timeout < 0:
        raise SocketInitError(f"negative timeout {timeout}")
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as exc:
        raise SocketInitError(str(exc)) from exc
    if timeout > 0:
        try:
            sock.settimeout(timeout)
        except (OSError, ValueError) as exc:
            sock.close()
            raise SocketInitError(str(exc)) from exc
    return sock


def make_address(ip: str, port: int) -> Address:
    """Validate an IPv4 string and port and return them as a socket address."""
    if ip is None:
        raise InvalidArgumentError("ip is None")
    if not isinstance(port, int) or not 0 <= port <= MAX_PORT_NUMBER:
        raise InvalidArgumentError(f"port {port!r} out of range")
    try:
        socket.inet_pton(socket.AF_INET, ip)
    except (OSError, TypeError) as exc:
        raise AddressError(f"invalid IPv4 address {ip!r}") from exc
    return (ip, port)


def bind_server(sock: socket.socket, ip: str, port: int) -> None:
    """Bind a socket to an IPv4 address and port."""
    try:
        address = make_address(ip, port)
    except GameNetError as exc:
        raise AddressError(str(exc)) from exc
    try:
        sock.bind(address)
    except OSError as exc:
        raise NetworkError(str(exc)) from exc
    log.debug("successfully bound server to %s", format_address(address))


def udp_server_init(
    ip: str = DEFAULT_IP, port: int = DEFAULT_PORT, timeout: float = 0
) -> socket.socket:
    """Create a UDP socket bound to the given address."""
    if ip is None:
        raise InvalidArgumentError("ip is None")
    try:
        sock = init_socket(timeout)
    except SocketInitError as exc:
        raise NetworkError(str(exc)) from exc
    try:
        bind_server(sock, ip, port)
    except GameNetError as exc:
        sock.close()
        raise NetworkError(str(exc)) from exc
    return sock


def udp_read(sock: socket.socket, bufsize: int = MAX_MSG_SIZE) -> tuple[bytes, Address]:
    """Receive one datagram of at most ``bufsize`` bytes; return it and its sender."""
    try:
        data, address = sock.recvfrom(bufsize)
    except OSError as exc:
        raise NetworkError(str(exc)) from exc
    return data, address


def udp_send(sock: socket.socket, data: bytes | str, address: Address) -> int:
    """Send a datagram to ``address`` and return the number of bytes sent."""
    if data is None:
        raise InvalidArgumentError("data is None")
    if isinstance(data, str):
        data = data.encode()
    try:
        return sock.sendto(data, address)
    except OSError as exc:
        raise NetworkError(str(exc)) from exc


def format_address(address: Address) -> str:
    """Return an address as ``ip:port``."""
    ip, port = address[0], address[1]
    return f"{ip}:{port}"


def format_message(data: bytes | str | None, address: Address | None, sent: bool) -> str:
    """Describe a message that was sent or received, for diagnostics."""
    if data is None and address is None:
        raise InvalidArgumentError("both data and address are None")
    header = "Sent message to: " if sent else "Received message from: "
    where = format_address(address) if address is not None else "unknown"
    if isinstance(data, bytes):
        text = data.split(b"\0", 1)[0].decode(errors="replace")
        length = len(data)
    else:
        text = data or ""
        length = len(text)
    return (
        f"=======\n{header}{where}\n"
        f"message: {text}\n"
        f"message length = {length}\n"
    )