# basekit

A small toolbox of everyday helpers: string searching and editing, word
splitting with quote awareness, byte-buffer helpers, a singly linked
`Chain`, a buffered `LineReader` for file descriptors, and a compact
`printf`-style formatter. It has no dependencies beyond the standard library.

## Installation

```
pip install basekit
```

To run the test suite:

```
pip install "basekit[test]"
pytest
```

## Modules

- `basekit.strings` – searching and comparing: `find_char`, `rfind_char`,
  `compare`, `compare_n`, `find_within`, `strings_equal`, `is_integer_string`,
  `index_of`, `last_index_of`, `count_char`, `jump_to`, `safe_length`, and
  the ASCII code helpers `to_upper` and `to_lower`. Functions that take a
  single character raise `ValueError` for anything else.
- `basekit.edit` – building new strings: `substr`, `trim`, `join`,
  `join_many`, `map_indexed`, `each_indexed`, `insert`, `delete_char`,
  `delete_from`, `delete_n_from`, `truncate`, `resize`. Strings are never
  changed in place; each function returns a new one, and invalid input
  (a missing text, a span past the end) raises `ValueError`.
- `basekit.split` – `split` and `split_words` return the non-empty words
  between separators; `quote_split` keeps single-quoted sections together
  and drops their quotes.
- `basekit.numbers` – `itoa`, `maximum`, `minimum`, `sign`.
- `basekit.memory` – helpers on `bytes`/`bytearray`: `find_byte`,
  `compare_bytes`, `fill`, `copy_into`, and `move_within` for overlapping
  moves inside one buffer. Spans that run past a buffer raise `ValueError`.
- `basekit.chain` – `Chain`, a linked sequence with `append`, `prepend`,
  `last`, `clear`, `for_each`, `map`, `to_list`, `len()` and iteration.
- `basekit.reader` – `LineReader` (with `read_line` and iteration) and
  `read_lines`, which yield lines, newline included, from a file
  descriptor, reading `buffer_size` bytes at a time (1000 by default).
- `basekit.output` – `format_string` and `printf` supporting
  `%d %i %u %c %s %p %x %X %%`, plus `print_table`, `put_char`, `put_str`,
  `put_line`, `put_number`, `to_hex` and `pointer_repr`. Writers go to
  `sys.stdout` unless a `stream` is given.

## Example

```python
import io
import os

from basekit.chain import Chain
from basekit.output import format_string, printf
from basekit.reader import read_lines
from basekit.split import quote_split

words = quote_split("echo 'hello world' done", " ")
# ['echo', 'hello world', 'done']

text = format_string("%s has %d items (0x%x)\n", "list", 3, 255)
# 'list has 3 items (0xff)\n'

buffer = io.StringIO()
printf("%u%%\n", 42, stream=buffer)

chain = Chain([1, 2, 3]).map(lambda n: n * 10)
# chain.to_list() == [10, 20, 30]

fd = os.open("notes.txt", os.O_RDONLY)
try:
    for line in read_lines(fd, 64):
        print(line, end="")
finally:
    os.close(fd)
```

## What it does not do

basekit is a library only: it installs no command and does not open files
for you. `LineReader` works on a file descriptor you have already opened,
and the formatter handles only the conversions listed above, with no
widths, precision or flags.