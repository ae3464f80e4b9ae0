# dirsync_cloud

This package has a small TCP client and a matching server. The client sends the server the names of the entries in one of its local directories. The server writes that list of names to a text file.

## Install

```
pip install .
```

## Protocol

1. The client connects and sends `READY`. It repeats this until the server replies `READY ACK`. The server ignores every message it receives before `READY`.
2. The client sends one message with three fields separated by spaces: `<host> <directory> <path1>,<path2>,...`. The paths are the directory's entries, sorted, and each one is followed by a comma. All spaces are removed from the list. A directory that does not exist gives an empty list.
3. The client sends `::bye::` to end the session.

For each message that has a third field, the server builds a file name from the host and the directory joined together. It removes the characters `.`, `/`, `:` and `\` and adds `.txt` at the end. It then writes the list, followed by a newline, to that file. When a message is missing fields, the server uses the values from the previous message for them.

Both sides log every message they send or receive, together with its throughput in bytes per second. When the session ends, each side reports the total transmission time.

## Running

Start the server first. It listens on a dual-stack IPv6 socket that also accepts IPv4. It handles one client, prints `Servidor desligado` and exits:

```
dirsync-server [--port PORT] [--directory DIR]
```

`--port` defaults to 8080. `--directory` is where the received lists are written and defaults to the current directory.

Then run the client. You can give the host, the port and the directory as arguments:

```
dirsync-client 127.0.0.1 8080 docs
```

If you give no arguments, the client asks for them on one line from standard input:

```
<host do servidor> <port do servidor> <nome do diretório>
127.0.0.1 8080 docs
```

The host must be a literal IP address. Host names are not resolved. A host that contains `:` is treated as IPv6, and any other host as IPv4. If the address is invalid or the connection fails, the client prints `Falha na conexão com o servidor.` and still exits with status 0.

Both commands also create `output.txt` in the working directory if it does not exist yet. If they cannot open it, they stop with status 1. Nothing is written to it.

## Library use

You can call the building blocks directly:

- `dirsync_cloud.protocol`:
  - `MessageChannel(sock, peer_label, out)` has `send(message)` and `receive()`. `receive()` raises `ConnectionError` when the peer has closed the connection.
  - `calc_throughput(elapsed, message)`
  - `current_time()`
- `dirsync_cloud.client`:
  - `list_directory`
  - `build_info_message`
  - `resolve_address`, which raises `ValueError` for an invalid literal
  - `ready_handshake`
  - `send_info`
  - `run_client(host, port, directory, out)`, which returns the elapsed seconds
- `dirsync_cloud.server`:
  - `sanitize_filename`
  - `make_file(name, content, directory, out)`, which returns the written path
  - `await_ready`
  - `receive_files(channel, directory, out)`, which returns the written paths
  - `serve_once(port, directory, out)`, which returns the elapsed seconds

## What it does not do

- Only entry names are sent. File contents are never transferred.
- There is no message framing. Each receive is a single read of at most 1024 bytes, so messages that arrive together are read as one.
- The server handles a single connection and then exits. It does not keep running and it does not handle clients concurrently.

## Tests

```
pip install .[test]
pytest
```