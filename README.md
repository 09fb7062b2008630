# tp0net

A small TCP client and server pair. The client reads a configuration
file and logs the lines you type at the console. It then connects to the
server, sends a single message and then a packet holding several values.
The server logs everything it receives.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

Start the server first:

```
tp0net-server
```

By default it listens on port 4444 on all IPv4 interfaces. It writes its
log to `log.log` at DEBUG level and echoes the log to the console. It has
two options:

- `--port PORT` sets the port to listen on.
- `--log FILE` sets the log file.

The server accepts one client. It logs each message, and each value in
each packet, that the client sends. A frame with an unknown operation
code is logged as a warning and the server carries on reading. When the
client disconnects, the server logs an error and exits with status 1.

Then start the client from a directory that holds a `cliente.config`
file:

```
tp0net-client
```

The client writes its log to `tp0.log` and echoes it to the console. It
has two options:

- `--config FILE` sets the configuration file (default `cliente.config`).
- `--log FILE` sets the log file (default `tp0.log`).

The client works through these steps:

1. It logs `Soy un Log` and the value of `CLAVE` from the configuration.
2. It logs each line you type, prompted by `> `. This stops at an empty
   line or at end of input.
3. It connects to `IP`:`PUERTO` and sends the value of `CLAVE` as a
   message.
4. It reads lines until an empty line or end of input. It puts the
   non-empty lines into a packet and sends it, then closes the
   connection.

If the configuration file cannot be read, is malformed, or lacks one of
`IP`, `PUERTO` or `CLAVE`, the client prints an error to stderr and exits
with status 1.

### Configuration

The configuration file has one `KEY=VALUE` pair per line. Blank lines and
lines that start with `#` are skipped. Any other line without `=` is an
error.

```
IP=127.0.0.1
PUERTO=4444
CLAVE=hello
```

## Library use

The wire format lives in `tp0net.protocol`:

```python
from tp0net.protocol import OpCode, Packet, encode_message, decode_values

packet = Packet()
packet.add("first")
packet.add("second")
frame = packet.serialize()        # bytes ready to send

message_frame = encode_message("hello")
values = decode_values(bytes(packet.payload))   # ["first", "second"]
```

Every frame has three parts:

- an operation code (`OpCode.MESSAGE` = 0, `OpCode.PACKET` = 1), a
  little-endian 32-bit integer;
- the payload size, also a little-endian 32-bit integer;
- the payload itself.

A message payload is a NUL-terminated UTF-8 string. In a packet payload,
each value has its length as a 32-bit integer in front of it. Strings
added with `Packet.add` are stored NUL-terminated; bytes are stored as
given. `serialize(op_code, payload)` frames any payload.
`decode_values` turns a packet payload back into its values. It raises
`ValueError` if the payload is truncated.

Other modules:

- `tp0net.client` provides `connect`, `send_message`, `send_packet`,
  `read_console` and `build_packet`. The last two take an optional
  function that returns one line at a time, which stands in for console
  input.
- `tp0net.server` provides `start_server`, `wait_for_client`,
  `receive_operation`, `receive_buffer`, `receive_message`,
  `receive_packet` and `serve_client`. `receive_operation` closes the
  socket and raises `ConnectionError` when the peer disconnects.
- `tp0net.config` provides `parse_config` and `load_config`. Both raise
  `ConfigError` when the configuration cannot be read or parsed.
- `tp0net.logs` provides `create_logger(path, name, echo, level)`. It
  accepts the levels `TRACE`, `DEBUG`, `INFO`, `WARNING` and `ERROR`, or a
  number.

## What it does not do

The server handles a single client and exits once that client is gone.
It does not serve clients one after another or at the same time. The
connection is plain TCP over IPv4, with no encryption or authentication.