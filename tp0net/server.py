"""Server that accepts one client and logs the frames it receives."""

from __future__ import annotations

import argparse
import logging
import socket
import struct

from .logs import TRACE, create_logger
from .protocol import OpCode, decode_values

PORT = 4444
LOGGER_NAME = "Servidor"

_INT = struct.Struct("<i")
_log = logging.getLogger(LOGGER_NAME)


def _recv_exact(sock: socket.socket, count: int) -> bytes:
    data = bytearray()
    while len(data) < count:
        chunk = sock.recv(count - len(data))
        if not chunk:
            raise ConnectionError("connection closed by peer")
        data += chunk
    return bytes(data)


def start_server(port: int = PORT, host: str | None = None) -> socket.socket:
    """Create a listening IPv4 TCP socket on ``host``:``port``."""
    server_sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        server_sock.bind((host or "", int(port)))
        server_sock.listen(socket.SOMAXCONN)
    except OSError:
        server_sock.close()
        raise
    _log.log(TRACE, "Listo para escuchar a mi cliente")
    return server_sock


def wait_for_client(server_sock: socket.socket) -> socket.socket:
    """Accept one client connection."""
    client_sock, _ = server_sock.accept()
    _log.info("Se conecto un cliente!")
    return client_sock


def receive_operation(sock: socket.socket) -> int:
    """Read the next operation code; closes ``sock`` and raises on disconnect."""
    try:
        (op_code,) = _INT.unpack(_recv_exact(sock, _INT.size))
    except ConnectionError:
        sock.close()
        raise
    return op_code


def receive_buffer(sock: socket.socket) -> bytes:
    """Read a size-prefixed buffer."""
    (size,) = _INT.unpack(_recv_exact(sock, _INT.size))
    if size < 0:
        raise ValueError(f"negative buffer size: {size}")
    return _recv_exact(sock, size)


def receive_message(sock: socket.socket) -> str:
    """Read a message body and return its text."""
    return receive_buffer(sock).split(b"\0", 1)[0].decode("utf-8", errors="replace")


def receive_packet(sock: socket.socket) -> list[str]:
    """Read a packet body and return its values."""
    return decode_values(receive_buffer(sock))


def serve_client(sock: socket.socket, logger: logging.Logger) -> None:
    """Handle frames from ``sock`` until the client disconnects."""
    while True:
        try:
            op_code = receive_operation(sock)
        except ConnectionError:
            logger.error("el cliente se desconecto. Terminando servidor")
            return
        if op_code == OpCode.MESSAGE:
            logger.info("Me llego el mensaje %s", receive_message(sock))
        elif op_code == OpCode.PACKET:
            values = receive_packet(sock)
            logger.info("Me llegaron los siguientes valores:\n")
            for value in values:
                logger.info("%s", value)
        else:
            logger.warning("Operacion desconocida. No quieras meter la pata")


def main(argv=None) -> int:
    """Run the server for a single client."""
    parser = argparse.ArgumentParser(description="Receive messages and packets from one client.")
    parser.add_argument("--port", type=int, default=PORT)
    parser.add_argument("--log", default="log.log")
    args = parser.parse_args(argv)

    logger = create_logger(args.log, LOGGER_NAME, True, "DEBUG")
    with start_server(args.port) as server_sock:
        logger.info("Servidor listo para recibir al cliente")
        with wait_for_client(server_sock) as client_sock:
            serve_client(client_sock, logger)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())