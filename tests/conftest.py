import queue
import threading

import pytest

from config import EchoConfig
from server import serve_once


class ServerThread:
    def __init__(self, config: EchoConfig):
        self.config = config
        self.result = None
        self.error = None
        self._ports: "queue.Queue[int]" = queue.Queue()
        self._thread = threading.Thread(target=self._run, daemon=True)

    def _run(self) -> None:
        try:
            self.result = serve_once(self.config, on_listening=self._ports.put)
        except Exception as e:
            self.error = e
            self._ports.put(-1)

    def start(self) -> int:
        self._thread.start()
        port = self._ports.get(timeout=5)
        if port < 0:
            raise self.error
        return port

    def join(self):
        self._thread.join(timeout=5)
        assert not self._thread.is_alive(), "server did not finish"
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def config() -> EchoConfig:
    return EchoConfig(bind_host="127.0.0.1", port=0)


@pytest.fixture
def start_server():
    def _start(cfg: EchoConfig):
        srv = ServerThread(cfg)
        port = srv.start()
        return srv, port

    return _start
