# udptictactoe

A three-by-three tic-tac-toe board with win and tie detection, a line-driven
two-player game loop, and a small UDP layer that lets two clients join a
game server.

## Installing

```
pip install .
```

The tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Joining a game over the network

Start the server. It binds to `127.0.0.1:1234` by default, with a receive
timeout of 10 seconds that it simply waits out, and waits for two players
to join:

```
udptictactoe-server
```

In two other terminals, join as a player:

```
udptictactoe-client
```

Both commands take `--ip`, `--port` and `--timeout` (seconds) options.

Each client sends `join` and prints the player number the server sends
back: `1` for the first client to join, `2` for the second. The server
prints `player one has joined`, `player two has joined` and then
`game start`, and exits. A network failure is reported on standard error
as `ERROR: ...` and the command exits with status 1.

From code, `udptictactoe.server.run_server(ip, port, timeout)` returns the
two players' addresses, and `udptictactoe.client.join_game(ip, port,
timeout)` returns the server's reply text.

## Using the board in code

```python
from udptictactoe.tictactoe import Board, Cell

board = Board()
board.place(0, Cell.PLAYER_1)
board.place(4, Cell.PLAYER_1)
board.place(8, Cell.PLAYER_1)
print(board.render())
print(board.winner())   # Cell.PLAYER_1
```

`Board.place` raises `ValueError` for a cell off the board, a cell already
taken, or a value that is not a player. `Board.winner()` returns the
winning player, `Cell.TIE` once the board is full with no line, or
`Cell.EMPTY` while the game is still open.

`play_game(board, lines, out)` runs a full game between two players taking
turns, reading moves numbered 1 to 9 from any iterable of lines (standard
input by default) and writing prompts and the board to `out` (standard
output by default). It returns the outcome.

```python
import io
from udptictactoe.tictactoe import Board, play_game

out = io.StringIO()
result = play_game(Board(), ["1", "4", "2", "5", "3"], out)
# result is Cell.PLAYER_1; out ends with "player 1 wins\n"
```

## The network layer

`udptictactoe.netlayer` wraps plain IPv4 UDP sockets: `init_socket`,
`make_address`, `bind_server`, `udp_server_init`, `udp_read` and `udp_send`,
plus `format_address` and `format_message` for diagnostics. Failures raise
the exceptions in `udptictactoe.errors` (`SocketInitError`,
`InvalidArgumentError`, `AddressError`, `NetworkError`), all subclasses of
`GameNetError`; `error_message(code)` gives the text for an `ErrorCode`.

## What it does not do

The network commands only hand out player numbers: once both players have
joined, the server stops. No moves are sent over the network, so a game
cannot be played between the two clients. A full game can only be played
in code through `play_game`; there is no command that starts one.