# wirefdf

`wirefdf` is a small set of helper modules for working with characters,
byte buffers, text streams, linked lists and X11 colour names. It has no
dependencies outside the standard library.

## Installation

```
pip install .
```

Running the tests needs the `test` extra:

```
pip install ".[test]"
pytest
```

## Modules

### `wirefdf.chars`

ASCII classification and case conversion. Each function takes either an
integer code or a one-character string.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print` return booleans.
- `to_upper` and `to_lower` convert ASCII letters and return the same kind
  of value they were given (int in, int out; str in, str out).

```python
from wirefdf.chars import is_digit, to_upper

is_digit("7")      # True
to_upper("q")      # "Q"
to_upper(97)       # 65
```

### `wirefdf.memory`

Operations on `bytearray` buffers: `bzero`, `calloc`, `memset`, `memcpy`,
`memccpy`, `memmove`, `memchr` and `memcmp`. Offsets are returned where a
pointer would be expected (`memchr`, `memccpy` return an offset or `None`),
and a request past the end of a buffer raises `ValueError`.

```python
from wirefdf.memory import memmove

buf = bytearray(b"abcdef")
memmove(buf, 2, 0, 4)   # bytearray(b"ababcd")
```

### `wirefdf.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to any text stream.
`put_str` and `put_endl` write nothing when given `None`.

### `wirefdf.linked`

`LinkedList` is a singly linked list with `push_front`, `push_back`,
`last`, `clear` (optionally calling a function on each removed value),
`for_each` and `map`. It supports `len()` and iteration.

```python
from wirefdf.linked import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
list(items.map(lambda v: v * 10))   # [0, 10, 20, 30]
```

### `wirefdf.lines`

`LineReader` reads a stream one line at a time through a fixed-size read
buffer (64 by default), keeping the unread remainder of each stream
separately. `read_line` returns the next line with its newline, or `None`
at the end. `iter_lines` yields every line of a stream. Text and binary
streams are both accepted.

```python
import io
from wirefdf.lines import iter_lines

list(iter_lines(io.StringIO("a\nb")))   # ["a\n", "b"]
```

### `wirefdf.colors`

- `lookup_color(name)` returns the RGB value of an X11 colour name,
  ignoring case, or `None` if the name is unknown. `none` gives `-1`.
- `parse_color(name, extra=None)` reads an XPM colour specification:
  `#rrggbb` is parsed as hexadecimal; otherwise `extra`, when given, is
  joined to `name` with a space and the result is looked up. An unknown
  name gives `0`.

```python
from wirefdf.colors import lookup_color, parse_color

lookup_color("Red")             # 0xFF0000
parse_color("#00ff00")          # 0x00FF00
parse_color("light", "green")   # 0x90EE90
```

## What this package does not do

The package does not read height-map files, draw wireframes, open a
window, or load XPM images, and it installs no command. It provides only
the helper modules listed above.