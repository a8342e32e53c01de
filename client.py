from __future__ import annotations

import socket
import sys
from dataclasses import dataclass

from config import EchoConfig
from errors import ConnectError, EchoError, SocketCreateError
from logger import make_logger
from protocol import recv_message, send_message

log = make_logger("client")


@dataclass
class ClientResult:
    local_host: str
    local_port: int
    received: str


def connect(config: EchoConfig) -> socket.socket:
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as e:
        raise SocketCreateError.from_os_error(e) from e
    log.info("Socket successfully created")

    try:
        sock.connect(config.endpoint)
    except OSError as e:
        sock.close()
        raise ConnectError.from_os_error(e) from e

    log.info(f"Connected to the server at {config.host}:{config.port}")
    return sock


def exchange(sock: socket.socket, config: EchoConfig) -> str:
    send_message(sock, config.client_greeting, config)
    msg = recv_message(sock, config)
    print(f"From Server: {msg.text}")
    return msg.text


def run_once(config: EchoConfig) -> ClientResult:
    sock = connect(config)
    try:
        local_host, local_port = sock.getsockname()[:2]
        received = exchange(sock, config)
    finally:
        sock.close()
    return ClientResult(local_host=local_host, local_port=local_port, received=received)


def main(config: EchoConfig | None = None) -> int:
    config = config or EchoConfig()
    try:
        run_once(config)
    except EchoError as e:
        log.error(f"{e.stage}: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
