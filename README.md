# klib

A pure-Python collection of low-level utilities with fixed-width integer
semantics: 64-bit division, printf-style formatting, ustar archive headers,
bitmaps, a doubly linked list and a chained hash table. It has no runtime
dependencies.

## Modules

- `klib.arithmetic`: integer limits (`INT_MAX`, `UINT64_MAX`, `SIZE_MAX`,
  and the rest), the wrapping helpers `to_unsigned` and `to_signed`, and
  division with fixed-width semantics:
  - `udiv64(n, d)` and `sdiv64(n, d)` divide unsigned and signed 64-bit
    values; `sdiv64` truncates toward zero and wraps `INT64_MIN / -1`.
  - `umod64(n, d)` and `smod64(n, d)` return remainders delivered in 32
    bits, truncating ones that do not fit.
  - `nlz(x)` counts the leading zero bits of a nonzero 32-bit value.
  - Out-of-range operands raise `ValueError`; a zero divisor raises
    `ZeroDivisionError`.
- `klib.ctype`: ASCII classification and case conversion (`isalpha`,
  `isdigit`, `isxdigit`, `isspace`, `ispunct`, `tolower`, `toupper`, and
  others). Each function takes an integer code or a one-character string.
- `klib.rounding`: `round_up`, `div_round_up` and `round_down` for
  non-negative values and steps of at least 1.
- `klib.rc4random`: an RC4-keystream pseudo-random generator keyed by a
  32-bit seed. It is not for cryptographic use. Use the `Rc4Random` class,
  or the shared generator through `random_init`, `random_bytes` and
  `random_ulong`. The shared generator is seeded with 0 on first use.
- `klib.algorithms`:
  - `atoi(s)` parses a leading signed decimal integer, wrapping to 32 bits.
  - `sort(array, compare)` is an in-place heap sort driven by a
    strcmp-style comparison function. It is not stable.
  - `binary_search(key, array, compare)` returns the index of a match, or
    `None`.
- `klib.printf`:
  - `kformat(fmt, *args)` formats `d i o u x X c s p` conversions. It
    accepts the flags `- + space # 0 '` (the last groups digits), width and
    precision (either may be `*`), and the length modifiers
    `hh h j l ll t z`. Floating-point conversions and `%n` come out as a
    notice instead of a value.
  - `snprintf(buf_size, fmt, *args)` returns a pair: the text that fits in
    a buffer of `buf_size` characters, terminator included, and the length
    of the full output.
  - `hex_dump(ofs, data, ascii)` returns 16 bytes per line with offsets,
    and can show the printable characters alongside.
  - `human_readable_size(size)` gives text such as `"256 kB"`.
  - The module also has the `PRId64`-style format-string constants.
- `klib.ustar`: `make_header` and `parse_header` for 512-byte ustar headers
  of regular files and directories, together with `UstarType`,
  `UstarEntry`, `UstarError` and `strip_antisocial_prefixes`. That last
  function removes leading `/`, `./` and `../` components. An all-zero
  header parses as an entry of kind `UstarType.EOF`.
- `klib.bitmap`: a fixed-size `Bitmap`.
  - Single bits: `set`, `mark`, `reset`, `flip` and `test`.
  - Ranges: `set_multiple`, `count`, `contains`, `any`, `none` and `all`.
  - Searches: `scan` and `scan_and_flip`, which return `None` when no run
    is found.
  - Serialisation as little-endian 32-bit words: `to_bytes`, `from_bytes`
    and `file_size`. `dump` returns a hex dump.
- `klib.linkedlist`: a doubly linked `LinkedList` of `ListElem` nodes. It
  has insertion, `splice`, push and pop at both ends, and `reverse`. There
  is also a stable natural merge `sort`, `insert_ordered`, `unique`, `min`
  and `max`, all driven by a `less` function.
- `klib.hashtable`: a chained `HashTable` that keys elements by a hash
  function and compares them with `less`. Its bucket count grows and
  shrinks in powers of two, never below 4. It also provides the 32-bit
  FNV-1 helpers `hash_bytes`, `hash_string` and `hash_int`.

## Examples

```python
from klib.printf import kformat, snprintf, human_readable_size
from klib.bitmap import Bitmap
from klib.rc4random import Rc4Random

kformat("%'d items, %#x", 1234567, 255)   # '1,234,567 items, 0xff'
snprintf(4, "%d", 12345)                   # ('123', 5)
human_readable_size(262144)                # '256 kB'

bm = Bitmap(16)
start = bm.scan_and_flip(0, 4, False)      # 0; bits 0..3 are now set

rng = Rc4Random(0)
rng.random_bytes(4)
```

```python
from klib.ustar import make_header, parse_header, UstarType

header = make_header("dir/file.txt", UstarType.REGULAR, 42)
entry = parse_header(header)
entry.name, entry.kind, entry.size         # ('dir/file.txt', UstarType.REGULAR, 42)
```

## What it does not do

- The library writes nothing to a console or to files.
  - `kformat`, `hex_dump` and `human_readable_size` return strings.
  - `Bitmap.to_bytes` and `Bitmap.from_bytes` work on bytes, and the caller
    does the reading and writing.
- `klib.ustar` builds and checks individual headers only. It does not
  read or write whole archives.
- There is no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```