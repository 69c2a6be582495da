# ftkit

A small toolkit of character, number, string, byte-buffer and linked-list
helpers, plus a B-tree that keeps lines ordered by their depth value `z`.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## What is inside

- `ftkit.chars`: ASCII character tests and conversions (`is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower`, `to_upper`),
  each taking a one-character string or an integer code; and the integer
  helpers `int_abs` and `int_pow` (powers of 0 or less give 1).
- `ftkit.numbers`: `atoi`, `atoi_base` and `itoa`. Parsing skips leading
  whitespace, accepts one `+` or `-`, and stops at the first character that is
  not a digit; text without digits gives 0. `atoi_base` uses letters (either
  case) for digits above 9.
- `ftkit.memory`: operations on `bytearray` buffers: `allocate`, `zero`,
  `fill`, `copy`, `copy_until`, `find_byte`, `compare` and the overlap-safe
  `move`. Lengths that run past the end of a buffer raise `ValueError`;
  searches return an index or `None`.
- `ftkit.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, writing to
  a given stream (standard output by default) and returning the number of
  characters written.
- `ftkit.search`: `str_length`, `find_char`, `rfind_char`, `find_sub`,
  `find_sub_n`, `compare`, `compare_n`, `equal` and `equal_n`. Positions are
  indices, `None` means not found, and comparisons return the code difference
  at the first mismatch.
- `ftkit.lists`: a singly linked `LinkedList` of `Node` objects with
  `push_front`, `append`, `for_each`, `map`, `clear`, iteration and `len()`.
- `ftkit.buffers`: `StringBuffer`, a fixed-capacity buffer with NUL-terminated
  string behaviour and the methods `copy`, `ncopy`, `cat`, `ncat`, `lcat` and
  `clear`; `duplicate` makes a buffer just large enough for a string. Writing
  more than fits raises `ValueError`.
- `ftkit.mapping`: `replace_char`, `iterate`, `iterate_indexed`, `map_chars`
  and `map_chars_indexed`.
- `ftkit.words`: `join`, `substring`, `trim`, `split` and `word_count`.
- `ftkit.btree`: `Point`, `Line` and `BTree`, a B-tree of order `ORDER` (4)
  keyed on each line's `z`. Lines with equal `z` keep their insertion order.
  `format_in_order` gives one line per key, indented with tabs by node depth.

## Example

```python
from ftkit.numbers import atoi, itoa
from ftkit.words import split
from ftkit.btree import BTree, Line

atoi("  -42abc")          # -42
itoa(-120)                # "-120"
split("**a*bc**d", "*")   # ["a", "bc", "d"]

tree = BTree()
for depth in (5, 1, 3):
    tree.insert(Line(z=depth))
[line.z for line in tree]  # [1, 3, 5]
print(tree.format_in_order())
```

## Interactive B-tree shell

    ftkit-btree

It reads choices from standard input: `1` inserts a key (an integer read on
the next line), `2` lists the tree in order, `3` quits, and `4` drops the
current tree and starts again with an empty one. Any other choice prints
`Wrong choice`. The shell also ends at the end of input.

## What it does not do

`Point` and `Line` only hold coordinates, colour and depth; the package does
not read map files, project points or draw lines, and it opens no window.