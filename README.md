# scratchpad

A small collection of utilities:

- `scratchpad.cstr`: byte and string helpers that follow the classic C
  string routines (`atoi`, `memcmp`, `memcpy`, `memmove`, `memset`,
  `strcat`, `strlen`, `strspn`, `strstr`) and a delimiter tokenizer
  (`tokenize`). Strings end at their first NUL; the `mem*` functions
  change writable buffers in place and raise `ValueError` when a span
  runs past the end of a buffer.
- `scratchpad.books`: an ordered list of books (`Book`, `BookList`) with
  an interactive menu (`run_menu`) for adding, listing, updating,
  inserting and removing them.
- `scratchpad.house`: a frozen `House` record with a `price()` estimate
  of 1000 per square foot, 10000 per bedroom and 5000 per bathroom.
- `scratchpad.transfer`: `send_file` and `receive_file` for pushing a
  file's bytes over a connected socket, plus the `PORT` (8080),
  `BUFFER_SIZE` and `FILENAME_MAX_LEN` settings.
- `scratchpad.server`, `scratchpad.client`, `scratchpad.menu_server`:
  plain TCP file-transfer programs built on the above.

The package has no runtime dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from scratchpad import cstr

cstr.atoi("abc-42x")                       # -42
cstr.strspn("12345abcdef", "1234568790")   # 5
cstr.strstr("hello world", "world")        # 6, or None when absent
list(cstr.tokenize("one, two;three", " ,;"))
```

```python
from scratchpad.books import BookList

books = BookList()
books.add("Art Of War", "Sun Tzu")
books.add("The Republic", "Plato")
books.remove("Art Of War")       # True
books.insert(0, "Calculus", "Sullivan")
print(books.format())
```

`BookList.update` raises `KeyError` when no book has the given id.
Titles and authors keep at most 63 characters.

```python
from scratchpad.house import House

House(45, 2, 1).price()   # 75000
```

## Commands

Installing the package provides these commands:

- `scratchpad-books`: loads five sample books, removes one, asks for a new
  title and author for the book with id 3, then opens the book menu.
- `scratchpad-server`: listens on port 8080, accepts one client and offers
  a console menu for showing the connection and sending the file
  `example.txt` from the current directory to the client.
- `scratchpad-client`: connects to 127.0.0.1 port 8080 and offers a menu
  for sending a file (preceded by `CMD:SEND_FILE`) or waiting to receive
  one into `received.txt`.
- `scratchpad-menu-server`: listens on port 8080 and serves each client in
  its own thread. It sends a text menu and answers `send` by asking for a
  filename and returning that file, `1\n` by storing an uploaded file
  (ended by the peer closing or by a chunk that is exactly `EOF`), and
  `exit` by closing the connection.

Start a server in one terminal:

```
scratchpad-server
```

and a client in another:

```
scratchpad-client
```

## What it does not do

- There is no authentication and no encryption; files travel as raw bytes.
- Transfers carry no length header. `receive_file` treats the peer closing
  or a chunk shorter than `BUFFER_SIZE` as the end of the file.
- `scratchpad-server` only sends `example.txt`; it does not accept uploads.
- The client's upload command is not one that `scratchpad-menu-server`
  recognises, so those two do not work together for uploads.
- Host and port are fixed; none of the commands take options.