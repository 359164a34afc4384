from __future__ import annotations

"""
Simple TCP REPL server for Ember.

Protocol: JSON per line over TCP.
- Request: {"cmd": "read", "code": "(1 2 . 3)"}
- Response: {"ok": true, "result": "<written datum>"}
         or {"ok": false, "error": <message>, "status": <reader status code>}

A multi-line string literal must arrive whole inside "code"; the server
never waits for continuation lines. One Repl (and so one SingletonRegistry)
is shared by every client.
"""

import json
import logging
import socket
import threading
from typing import Any, Dict, Tuple

from ember.errors import ReaderError
from ember.repl import Repl

logger = logging.getLogger(__name__)

HOST = "127.0.0.1"
PORT = 8765


class ReplServer:
    def __init__(self, host: str = HOST, port: int = PORT):
        self.host = host
        self.port = port
        self.repl = Repl(prompt="", on_error="continue")

    def handle_request(self, raw: bytes) -> Dict[str, Any]:
        try:
            req = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as ex:
            return {"ok": False, "error": f"Invalid request: {ex}"}
        if not isinstance(req, dict) or req.get("cmd") != "read":
            cmd = req.get("cmd") if isinstance(req, dict) else None
            return {"ok": False, "error": f"Unknown cmd: {cmd}"}
        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "error": "code must be a string"}
        try:
            result = self.repl.rep(code)
        except ReaderError as ex:
            return {"ok": False, "error": str(ex), "status": ex.status}
        return {"ok": True, "result": result}

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.debug("client connected: %s:%d", *addr)
        with conn:
            buf = b""
            while True:
                data = conn.recv(4096)
                if not data:
                    break
                buf += data
                while b"\n" in buf:
                    line, buf = buf.split(b"\n", 1)
                    line = line.strip()
                    if not line:
                        continue
                    resp = self.handle_request(line)
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))
        logger.debug("client disconnected: %s:%d", *addr)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    ReplServer().serve_forever()
