# drills

A collection of small, self-contained programming drills. Each one is a
module with a function or class or two that you can import, and most have a
command that runs a short demonstration.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## What is inside

| Module | What it offers |
| --- | --- |
| `drills.collatz` | `collatz_length(n)`: length of the Collatz sequence starting at `n` |
| `drills.fibonacci` | `fib(n)`: the `n`-th Fibonacci number (`ValueError` for negative `n`) |
| `drills.matrix` | `transpose(matrix)`: transpose of a rectangular matrix as a new list of rows |
| `drills.vectors` | `magnitude(vector)` and in-place `normalize(vector)` |
| `drills.ordering` | `minimum(left, right)`: the smaller value, `left` on a tie |
| `drills.offsets` | `offset_differences(offset, values)`: differences at a wrapping offset |
| `drills.counter` | `Counter` with `count(value)` and `times_seen(value)` |
| `drills.elevator` | elevator events (`ButtonPressed`, `CarArrived`, `CarDoorOpened`, `CarDoorClosed`) and functions that build them |
| `drills.verbosity` | `Logger`, `StderrLogger` and `VerbosityFilter` |
| `drills.expressions` | `Op`/`Value` expression trees and `evaluate`, raising `DivideByZeroError` |
| `drills.packages` | `PackageBuilder` producing `Package` values, `Dependency`, `Language` |
| `drills.bintree` | `BinaryTree`: a set kept in an unbalanced binary search tree (`insert`, `in`, `len`) |
| `drills.rot` | `rotate(data, rot)` and the readable stream `RotDecoder` |
| `drills.widgets` | `Label`, `Button` and `Window` drawn as text |
| `drills.protobuf` | a small protobuf wire-format parser: `parse_varint`, `parse_field`, `parse_message`, `Person`, `PhoneNumber` |
| `drills.listdir` | `DirectoryIterator`: directory entry names, `.` and `..` first |
| `drills.philosophers` | `dine(names, rounds)`: dining philosophers with threads, yielding thoughts |
| `drills.async_philosophers` | `dine(names, rounds)`: the same with asyncio, as an async iterator |
| `drills.linkcheck` | `check_links(start_url, thread_count)`: a multi-threaded link checker |
| `drills.chat_server` | `Broadcast`, `handle_connection` and `run_server`: a WebSocket broadcast chat server |
| `drills.chat_client` | `run_client(uri, lines, output)`: a WebSocket chat client |

## Examples

    >>> from drills.collatz import collatz_length
    >>> collatz_length(11)
    15

    >>> from drills.offsets import offset_differences
    >>> offset_differences(1, [1, 3, 5, 7])
    [2, 2, 2, -6]

    >>> from drills.bintree import BinaryTree
    >>> tree = BinaryTree()
    >>> for value in (2, 1, 2):
    ...     tree.insert(value)
    >>> len(tree), 1 in tree, 3 in tree
    (2, True, False)

    >>> from drills.rot import rotate
    >>> rotate(b"Gb trg gb gur bgure fvqr!", 13)
    b'To get to the other side!'

    >>> from drills.protobuf import parse_message, Person
    >>> parse_message(b"\x0a\x04Evan\x10\x16", Person)
    Person(name='Evan', id=22, phone=[])

## Commands

Each of these runs a short demonstration:

    drills-collatz [N]
    drills-fibonacci [N]
    drills-matrix
    drills-vectors
    drills-ordering
    drills-counter
    drills-elevator
    drills-verbosity
    drills-expressions
    drills-packages
    drills-bintree
    drills-rot [TEXT] [--rot N]
    drills-widgets
    drills-protobuf
    drills-listdir [PATH]
    drills-philosophers [--rounds N]
    drills-async-philosophers [--rounds N]

The networking drills:

    drills-linkcheck START_URL [--threads N]
    drills-chat-server [--host HOST] [--port PORT]
    drills-chat-client [URI]

`drills-linkcheck` crawls from `START_URL`, follows links only on pages of
the same domain, and prints the URLs that failed. The chat server listens on
`127.0.0.1:2000` by default and relays every text message to all connected
clients; the client connects to `ws://127.0.0.1:2000` by default, sends each
line read from standard input and prints what the server sends.

## What it does not do

The chat keeps no history and has no accounts or rooms: a message reaches
only the clients connected when it is sent. The link checker does not read
`robots.txt`, limit its request rate or check anything but `<a href>` links.