import pytest

from config import CLIENT_GREETING, MESSAGE_SIZE, PORT, SERVER_REPLY, EchoConfig


def test_defaults_match_wire_convention() -> None:
    cfg = EchoConfig()
    assert cfg.endpoint == ("127.0.0.1", 2000)
    assert cfg.bind_endpoint == ("0.0.0.0", 2000)
    assert cfg.message_size == MESSAGE_SIZE == 80
    assert cfg.backlog == 5
    assert cfg.client_greeting == CLIENT_GREETING
    assert cfg.server_reply == SERVER_REPLY


def test_with_port_returns_copy() -> None:
    cfg = EchoConfig()
    other = cfg.with_port(0)
    assert other.port == 0
    assert cfg.port == PORT
    assert other.host == cfg.host


@pytest.mark.parametrize(
    "kwargs",
    [
        {"message_size": 0},
        {"port": 70000},
        {"port": -1},
        {"backlog": -1},
        {"message_size": 10},
    ],
)
def test_invalid_config_rejected(kwargs) -> None:
    with pytest.raises(ValueError):
        EchoConfig(**kwargs)
