# libmx

A compact toolbox of everyday helpers. It covers string searching and splitting,
number formatting, byte-buffer operations and simple sorts. It also has a singly
linked list, small output writers and a buffered line reader. It has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `libmx.strings`

- `strtrim` removes leading and trailing whitespace. Whitespace here means tab,
  newline, vertical tab, form feed, carriage return and space. `is_space` tests
  for one of these characters.
- `del_extra_spaces` trims the text, then shrinks each run of whitespace to its
  first character.
- `split(text, delim)` splits the text and drops empty pieces.
  `count_words(text, delim)` counts those pieces.
- `count_substr` counts occurrences, overlapping ones included.
- `get_substr_index` returns the first occurrence, or -1 if there is none.
- `get_substr_nth_index` returns the n-th occurrence, counting from 0, or -1 if
  there is none.
- `find_substr` returns the tail of the haystack from the first match, or `None`.
- `get_char_index` returns the index of a character or -1. It raises `ValueError`
  for an empty string.
- `replace_substr` replaces every occurrence.
- `strcmp` returns the code point difference at the first position where the two
  strings differ, or 0. `greater(a, b)` is `strcmp(a, b) > 0`.
- `reverse` returns the string reversed.
- `join(a, b)` concatenates the two and skips a side that is `None`. If both are
  `None` it returns `None`.

### `libmx.numbers`

- `hex_to_nbr` parses unprefixed hexadecimal as a 64-bit unsigned value. An empty
  string gives 0. A non-hex character raises `ValueError`.
- `nbr_to_hex` formats a number as 64-bit unsigned lowercase hexadecimal.
- `itoa` returns the decimal string of a number. `nbrlen` returns its length,
  sign included.
- `power(n, exponent)` raises `n` to a non-negative integer exponent. A negative
  exponent raises `ValueError`.
- `exact_sqrt(x)` returns the integer root of a perfect square. Any other value
  gives 0.

### `libmx.memory`

These functions work on `bytes`, `bytearray` and `memoryview`.

- `memcpy`, `memmove` and `memset` write into the destination and return it.
- `memccpy` copies up to and including a given byte. It returns the index just
  past that byte, or `None` if the byte was not found.
- `memchr` and `memrchr` return the index of the first or last matching byte,
  or `None`.
- `memcmp` returns the difference at the first mismatching byte, or 0.
- `memmem(big, little)` returns the index of `little` inside `big`, or `None`.
- `realloc(data, size)` returns a new zero-padded `bytearray` of `size` bytes.
  It returns `None` when `data` is `None`.
- A length that is negative or longer than a buffer raises `ValueError`.

### `libmx.sorting`

- `binary_search(arr, target)` works on a sorted list of strings. It returns
  `(index, steps)`, or `(-1, 0)` when the target is absent.
- `bubble_sort(arr)` sorts strings in place and returns the number of swaps.
- `quicksort(arr, left, right)` sorts strings in place by length.
  `quicksort_int(arr, left, right)` sorts integers in place by value. Both sort
  the inclusive range and return the number of swaps.
- `foreach(arr, func)` calls `func` on every item in order.

### `libmx.linked_list`

`Node` and `LinkedList`. A list can be built from any iterable. It supports
`len()` and iteration.

- `push_front` and `push_back` add an item at either end.
- `pop_front` and `pop_back` remove an item and return it. On an empty list they
  return `None`.
- `sort(cmp)` bubble-sorts the items. It swaps two neighbours where `cmp(a, b)`
  is true.

### `libmx.output`

- `printchar`, `printint`, `printstr` and `print_strarr` write to a text stream,
  which is standard output by default. `print_strarr` joins the strings with a
  delimiter and ends with a newline.
- `encode_unicode` returns the UTF-8 bytes of a character or code point.
- `print_unicode` writes those bytes to a binary stream.

### `libmx.reading`

- `file_to_str(path)` returns a file's whole content as UTF-8 text.
- `LineReader(stream, buf_size=1024, delim="\n")` reads a text or binary stream in
  chunks and splits it on a single-character delimiter.
  - `read_line()` returns the next record without its delimiter, or `None` at the
    end of the stream.
  - Iterating a `LineReader` yields each record in turn.

## Examples

```python
from libmx.strings import del_extra_spaces, split, greater
from libmx.numbers import nbr_to_hex, hex_to_nbr
from libmx.linked_list import LinkedList

del_extra_spaces("  hello    world \t ")      # 'hello world'
split("**Good bye,**Mr.*Anderson.****", "*")  # ['Good bye,', 'Mr.', 'Anderson.']

nbr_to_hex(52)        # '34'
hex_to_nbr("FADE")    # 64222

items = LinkedList(["pear", "apple", "fig"])
items.sort(greater)
list(items)           # ['apple', 'fig', 'pear']
```

## Command line

Print each argument on its own line:

```
libmx-print-args one two three
```