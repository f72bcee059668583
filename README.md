# algokit

A collection of classic algorithms written as plain Python functions and
classes. It has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install algokit
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install "algokit[test]"
pytest
```

## Modules

### `algokit.hashing`

`sdbm`, `djb2`, `xor8` and `adler_32` take a `str` (encoded as UTF-8) or
`bytes`. The arithmetic follows fixed-width machine integers: each byte is
read as a signed 8-bit value, `sdbm` and `djb2` wrap to a signed 64-bit
result, `xor8` returns a signed 8-bit value and `adler_32` a signed 32-bit
value.

### `algokit.conversions`

- `decimal_to_hexadecimal(num)` and `decimal_to_octal(num)` return strings,
  upper-case for hexadecimal, with a leading `-` for negative numbers.
- `to_decimal(number, base)` reads a digit string in base 2 to 36; letters of
  either case count from ten. An invalid digit or base raises `ValueError`.
- `binary_to_decimal`, `binary_to_hexadecimal` and `binary_to_octal` take a
  number written with binary digits, as an `int` such as `1011` or a string.
  `binary_to_octal` returns an `int` whose decimal digits are the octal
  digits. Anything but 0s and 1s raises `ValueError`.
- `three_digits(n)` returns the last three decimal digits of `n`, keeping its
  sign.

### `algokit.numbers`

`collatz_sequence`, `factorial`, `fibonacci` (with `fibonacci(1) == 1`),
`gcd`, `is_prime`, `catalan`, `factorial_trailing_zeroes`, `is_armstrong`
(sum of the cubes of the digits), `is_palindrome`, `is_strong_number` (sum of
the factorials of the digits), `count_ways(amount, coins)` for the number of
coin combinations, and `hanoi_moves(disks, source="A", target="B",
spare="C")`, a generator of `(disk, from_peg, to_peg)` moves. Arguments
outside a function's domain raise `ValueError`.

### `algokit.searching`

`binary_search`, `iterative_binary_search`, `jump_search`,
`fibonacci_search` and `interpolation_search` return an index of the value,
or `None` when it is absent; all but `interpolation_search` (a first-match
scan) expect a sorted sequence. `linear_search` returns a `bool`.
`matrix_search(matrix, x)` returns a `(row, column)` pair or `None` for a
matrix sorted in row-major order. `random_select(values, k, rng=None)`
returns the value at index `k` of the sorted values, using random pivots; an
out-of-range `k` raises `IndexError`.

### `algokit.sequences`

`longest_subsequence(values)` returns a longest non-decreasing subsequence
as a list. `sorted_permutations(text)` yields every distinct permutation of
`text` in lexicographic order.

### `algokit.statistics`

`mean`, `variance` and `standard_deviation` (population forms),
`quartiles(values)` returning the sorted elements at `n // 4` and
`3 * n // 4`, and `interquartile_range`. Empty input raises `ValueError`.
`gauss_elimination(augmented)` solves an `n` by `n + 1` augmented matrix
with partial pivoting and returns the solution as a list of floats; a
malformed or singular system raises `ValueError`.

### `algokit.sorting`

`bogo_sort(values, rng=None)`, `bubble_sort`, `heap_sort`,
`insertion_sort`, `quick_sort`, `selection_sort`, `binary_insertion_sort`,
`counting_sort` (non-negative integers only), `merge_sort`, `shaker_sort`,
`shell_sort` and `exchange_sort`. Each takes any iterable and returns a new
list in ascending order; the argument is not changed. `is_sorted(values)`
tells whether a sequence is in non-decreasing order.

### `algokit.bucket_sort`

`bucket_sort(values, bucket_count=5, interval=10)` puts each integer into
bucket `bucket_index(value, interval)` (the quotient truncated toward zero),
keeps each bucket in order and reads them out in turn. A value whose bucket
is outside `0 .. bucket_count - 1` raises `ValueError`.

### `algokit.bst`

`BinarySearchTree(values=())` is an unbalanced tree of distinct keys with
`insert`, `delete` (both return whether the tree changed), `find`, `height`
and `in_order`. It also supports `in`, `len()` and iteration in key order.

### `algokit.graphs`

Vertices are numbered from 0 and edges are `Edge(src, dst, weight)` or plain
`(src, dst, weight)` tuples. `bellman_ford(vertex_count, edges, source)` and
`dijkstra(vertex_count, edges, source)` return a list of distances, with
`math.inf` for unreachable vertices; `bellman_ford` raises
`NegativeCycleError` (a `ValueError`) for a reachable negative cycle.
`floyd_warshall(vertex_count, edges)` returns the full distance matrix.

### `algokit.text`

`abbreviate`, `hello`, `is_isogram` (case-sensitive), `to_rna` (raises
`ValueError` for a character other than G, C, T or A) and
`word_count(input_text, word)`, which returns the number of space-separated
words and how often `word` occurs. It raises `ExcessiveWordLengthError` or
`TooManyWordsError`, both subclasses of `WordCountError`, when a word is
longer than 50 characters or there are too many words.

## Examples

```python
from algokit.hashing import djb2, adler_32
from algokit.sorting import merge_sort
from algokit.searching import binary_search
from algokit.bst import BinarySearchTree
from algokit.text import abbreviate

djb2("name")
adler_32("name")

merge_sort([12, 11, 13, 5, 6, 7])        # [5, 6, 7, 11, 12, 13]
binary_search([2, 3, 4, 10, 40], 10)     # 3
binary_search([2, 3, 4, 10, 40], 5)      # None

tree = BinarySearchTree()
for key in (50, 30, 70, 20, 40):
    tree.insert(key)
tree.delete(30)
tree.in_order()                          # [20, 40, 50, 70]

abbreviate("portable network graphics")  # "PNG"
```

## What it does not do

algokit is a library only. It has no command-line programs and no
interactive prompts, and its functions return results rather than printing
them.