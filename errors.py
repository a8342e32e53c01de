from __future__ import annotations


class EchoError(Exception):
    stage = "echo"
    default_message = "echo exchange failed"

    def __init__(self, message: str | None = None, errno: int | None = None):
        self.message = message or self.default_message
        self.errno = errno
        super().__init__(self.message)

    @classmethod
    def from_os_error(cls, exc: OSError, message: str | None = None) -> "EchoError":
        msg = message or cls.default_message
        if exc.errno is not None:
            msg = f"{msg}: [errno {exc.errno}] {exc.strerror}"
        return cls(msg, errno=exc.errno)


class SocketCreateError(EchoError):
    stage = "socket"
    default_message = "socket creation failed"


class BindError(EchoError):
    stage = "bind"
    default_message = "socket bind failed"


class ListenError(EchoError):
    stage = "listen"
    default_message = "listen failed"


class AcceptError(EchoError):
    stage = "accept"
    default_message = "server accept failed"


class ConnectError(EchoError):
    stage = "connect"
    default_message = "connection with the server failed"


class IoError(EchoError):
    """Read or write on an established connection failed."""

    stage = "io"
    default_message = "read/write failed"
