from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

HOST = "127.0.0.1"
BIND_HOST = "0.0.0.0"
PORT = 2000

MESSAGE_SIZE = 80  # fixed buffer, no length prefix
BACKLOG = 5
ENCODING = "utf-8"

CLIENT_GREETING = "Hello, this is Client"
SERVER_REPLY = "Hello, this is Server!"


@dataclass(frozen=True)
class EchoConfig:
    host: str = HOST
    bind_host: str = BIND_HOST
    port: int = PORT
    message_size: int = MESSAGE_SIZE
    backlog: int = BACKLOG
    encoding: str = ENCODING
    client_greeting: str = CLIENT_GREETING
    server_reply: str = SERVER_REPLY
    reuse_address: bool = True

    def __post_init__(self) -> None:
        if self.message_size <= 0:
            raise ValueError("message_size must be positive")
        if not (0 <= self.port <= 65535):
            raise ValueError(f"port out of range: {self.port}")
        if self.backlog < 0:
            raise ValueError("backlog must be >= 0")
        for text in (self.client_greeting, self.server_reply):
            if len(text.encode(self.encoding)) > self.message_size:
                raise ValueError(f"{text!r} does not fit in {self.message_size} bytes")

    @property
    def endpoint(self) -> Tuple[str, int]:
        return (self.host, self.port)

    @property
    def bind_endpoint(self) -> Tuple[str, int]:
        return (self.bind_host, self.port)

    def with_port(self, port: int) -> "EchoConfig":
        return replace(self, port=port)
