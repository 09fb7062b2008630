"""Client that logs console input and sends a message and a packet."""

from __future__ import annotations

import argparse
import logging
import socket
import sys
from typing import Callable

from .config import ConfigError, load_config
from .logs import create_logger
from .protocol import Packet, encode_message


def _prompt() -> str:
    return input("> ")


def _lines(input_func: Callable[[], str]):
    """Yield lines until an empty one or end of input; the empty line is yielded."""
    while True:
        try:
            line = input_func()
        except EOFError:
            return
        yield line
        if line == "":
            return


def connect(ip: str, port) -> socket.socket:
    """Open an IPv4 TCP connection to ``ip``:``port``."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.connect((ip, int(port)))
    except OSError:
        sock.close()
        raise
    return sock


def send_message(sock: socket.socket, message: str) -> None:
    """Send ``message`` as a MESSAGE frame."""
    sock.sendall(encode_message(message))


def send_packet(sock: socket.socket, packet: Packet) -> None:
    """Send ``packet`` as one frame."""
    sock.sendall(packet.serialize())


def read_console(logger: logging.Logger, input_func: Callable[[], str] | None = None) -> list[str]:
    """Log each line read until an empty one; return the non-empty lines."""
    read = []
    for line in _lines(input_func or _prompt):
        logger.info(">> %s", line)
        if line:
            read.append(line)
    return read


def build_packet(input_func: Callable[[], str] | None = None) -> Packet:
    """Build a packet from lines read until an empty one."""
    packet = Packet()
    for line in _lines(input_func or _prompt):
        if line:
            packet.add(line)
    return packet


def main(argv=None) -> int:
    """Run the client: log, read config and console, then talk to the server."""
    parser = argparse.ArgumentParser(description="Send a message and a packet to the server.")
    parser.add_argument("--config", default="cliente.config")
    parser.add_argument("--log", default="tp0.log")
    args = parser.parse_args(argv)

    logger = create_logger(args.log, "logger_tp0", True, "INFO")
    logger.info("Soy un Log")

    try:
        config = load_config(args.config)
        ip, port, value = (config[key] for key in ("IP", "PUERTO", "CLAVE"))
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except KeyError as exc:
        print(f"error: missing config key {exc.args[0]}", file=sys.stderr)
        return 1

    logger.info("VALOR leido de la config: %s", value)
    read_console(logger)

    with connect(ip, port) as sock:
        send_message(sock, value)
        send_packet(sock, build_packet())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())