from __future__ import annotations

import socket
import sys
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from config import EchoConfig
from errors import AcceptError, BindError, EchoError, ListenError, SocketCreateError
from logger import make_logger
from protocol import recv_message, send_message

log = make_logger("server")


@dataclass
class ServeResult:
    peer_host: str
    peer_port: int
    received: str


def bind(config: EchoConfig) -> socket.socket:
    try:
        srv = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as e:
        raise SocketCreateError.from_os_error(e) from e
    log.info("Socket successfully created")

    try:
        if config.reuse_address:
            srv.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        srv.bind(config.bind_endpoint)
    except OSError as e:
        srv.close()
        raise BindError.from_os_error(e) from e

    host, port = srv.getsockname()[:2]
    log.info(f"Socket successfully bound to {host}:{port}")
    return srv


def listen(srv: socket.socket, backlog: int) -> None:
    try:
        srv.listen(backlog)
    except OSError as e:
        raise ListenError.from_os_error(e) from e
    log.info("Server listening")


def accept(srv: socket.socket) -> Tuple[socket.socket, Tuple[str, int]]:
    # Blocks until a client shows up; there is no timeout.
    try:
        conn, addr = srv.accept()
    except OSError as e:
        raise AcceptError.from_os_error(e) from e
    log.info("Server accepted the client")
    log.info(f"Client address: {addr[0]}")
    return conn, (addr[0], addr[1])


def exchange(conn: socket.socket, config: EchoConfig) -> str:
    msg = recv_message(conn, config)
    print(f"From Client: {msg.text}")
    send_message(conn, config.server_reply, config)
    return msg.text


def serve_once(
    config: EchoConfig,
    on_listening: Optional[Callable[[int], None]] = None,
) -> ServeResult:
    # on_listening gets the bound port, for callers that bind port 0
    srv = bind(config)
    try:
        listen(srv, config.backlog)
        if on_listening is not None:
            on_listening(srv.getsockname()[1])

        conn, (peer_host, peer_port) = accept(srv)
        try:
            received = exchange(conn, config)
        finally:
            conn.close()
    finally:
        log.info("Closing server socket")
        srv.close()

    return ServeResult(peer_host=peer_host, peer_port=peer_port, received=received)


def main(config: EchoConfig | None = None) -> int:
    config = config or EchoConfig()
    try:
        serve_once(config)
    except EchoError as e:
        log.error(f"{e.stage}: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
