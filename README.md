# solong

Building blocks for a small tile-based puzzle game: an XPM image reader
with the X11 colour-name table, and a set of helpers for characters,
strings, byte buffers, output, linked lists and line-by-line reading.
Everything is plain Python with no third-party dependencies.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## What this package does not do

The package holds no game itself. There is no map loader or map checker,
no player movement, no window or drawing, and no command to start a
game. The modules below are the pieces such a game would be built on.

## Modules

### `solong.xpm` — XPM images

```python
from solong.xpm import parse_xpm, TRANSPARENT

image = parse_xpm('''/* XPM */
static char *tile[] = {
"2 2 2 1",
"a c #FF0000",
"b c None",
"ab",
"ba"
};''')

image.width, image.height   # (2, 2)
image.pixels[0]             # (0xFF0000, 0xFF000000)
image.pixels[0][1] == TRANSPARENT
```

- `load_xpm(path)` reads a file (as Latin-1) and decodes it.
- `parse_xpm(text)` decodes the text of an XPM file: C comments outside
  quoted strings are blanked out, then the quoted strings are used as lines.
- `xpm_from_lines(lines)` decodes the strings of an XPM array directly.
- `XpmImage` is a frozen dataclass with `width`, `height` and `pixels`,
  where `pixels[y][x]` is a `0xAARRGGBB` value. The alpha byte holds
  transparency: a colour given as `None` becomes `TRANSPARENT`
  (`0xFF000000`), every other colour has an alpha of 0.
- `XpmError` (a `ValueError`) is raised for a missing or invalid header,
  a missing colour definition or pixel row, a definition without a `c`
  colour, or a row shorter than the image width.
- `text_to_rgb(name, end=None)` turns a colour specification into a value:
  `#RRGGBB` is read as hexadecimal; otherwise the name (joined with `end`
  by a space when given) is looked up by colour name. An unknown name gives
  0, `None` gives -1.
- `split_words(text)` splits on runs of spaces and tabs.
- `strip_comments(text)` replaces `/* ... */` and `// ...` comments outside
  double quotes with spaces, keeping the length of the text.

Pixel keys may be any number of characters long. With one or two
characters per pixel a later colour definition for a key replaces an
earlier one; with more, the first is kept. Unknown keys give colour 0.

### `solong.colors` — colour names

`lookup_color(name)` returns the `0xRRGGBB` value of an X11 colour name,
ignoring ASCII case, for example `lookup_color("Dodger Blue") == 0x1E90FF`.
The name `none` gives -1. An unknown name raises `KeyError`.

### `solong.chars` — characters and integers

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print` take a
  one-character string or an integer code and test it against ASCII ranges.
- `to_lower`, `to_upper` change the case of ASCII letters only, returning a
  string for a string and an integer for an integer.
- `atoi(text)` skips leading whitespace, takes one optional sign and reads
  digits up to the first non-digit; text without digits gives 0, and the
  result wraps like a 32-bit signed integer.
- `itoa(n)` returns the decimal text of a 32-bit signed integer and raises
  `OverflowError` outside that range.

### `solong.textutil` — strings

`strlen`, `strchr`, `strrchr`, `strnstr`, `strncmp`, `substr`, `strjoin`,
`strtrim`, `split`, `strmapi`, `striteri`, `strlcpy` and `strlcat`.
Searches return an index or `None`. `strlen` stops at the first NUL *or
newline*, and `substr`, `strtrim`, `strlcpy` and `strlcat` inherit that:
they only look at text up to its first newline. `strlcpy(src, size)` and
`strlcat(dst, src, size)` return a tuple of the resulting text and the
length the full result would have had.

### `solong.membytes` — byte buffers

`memset`, `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy` and
`memmove(buf, dst, src, length)` work on `bytearray` and byte objects.
A span beyond the end of a buffer raises `IndexError`; negative lengths
raise `ValueError`; `calloc` raises `OverflowError` when the size would not
fit in 64 bits. `memchr` returns an index or `None`; `memcmp` returns the
difference of the first unequal bytes, or 0.

### `solong.output` — writing to a stream

`put_char(c)`, `put_str(text)`, `put_endl(text)` and `put_nbr(n)` write to
the given text stream, standard output by default. `None` text writes
nothing; `put_nbr` raises `OverflowError` outside the 32-bit range.

### `solong.linkedlist` — a singly linked list

`LinkedList(contents=())` is built from `Node` objects (`content`, `next`).
It has `push_front`, `push_back` (both return the new node), `last`,
`len()`, iteration over contents, `clear(delete=None)`, `for_each(func)`
and `map(func, delete=None)`, which returns a new list; if `func` raises,
the values already produced are passed to `delete` and the error propagates.

### `solong.linereader` — reading lines

`LineReader(stream).next_line()` returns the next line without its
newline, or `None` for an empty line or the end of the stream. Iterating a
`LineReader`, or calling `read_lines(stream)`, gives the lines up to the
first blank line or the end. Text and binary streams both work.