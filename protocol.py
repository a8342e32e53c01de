from __future__ import annotations

import socket
from dataclasses import dataclass

from config import EchoConfig
from errors import IoError

# Wire format: one fixed-size buffer per direction, UTF-8 text, NUL-padded.
# There is no length prefix, so anything longer than a single buffer would
# need real framing first.


@dataclass
class Message:
    text: str
    payload: bytes


def pack_message(text: str, size: int, encoding: str) -> bytes:
    data = text.encode(encoding)
    if len(data) > size:
        raise ValueError(f"Message too large: {len(data)} > {size}")
    return data.ljust(size, b"\x00")


def unpack_message(payload: bytes, encoding: str) -> str:
    """Decode the text in front of the first NUL byte."""
    text, _, _ = payload.partition(b"\x00")
    return text.decode(encoding, errors="replace")


def send_message(sock: socket.socket, text: str, config: EchoConfig) -> None:
    buf = pack_message(text, config.message_size, config.encoding)
    try:
        sock.sendall(buf)
    except OSError as e:
        raise IoError.from_os_error(e, "write failed") from e


def recv_message(sock: socket.socket, config: EchoConfig) -> Message:
    # Single read: the payload is small enough to arrive in one segment.
    try:
        payload = sock.recv(config.message_size)
    except OSError as e:
        raise IoError.from_os_error(e, "read failed") from e
    if not payload:
        raise IoError("connection closed by peer")
    return Message(text=unpack_message(payload, config.encoding), payload=payload)
