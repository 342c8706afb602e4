# algodrills

Classic algorithm exercises as plain Python functions and a few small
classes. The package has no runtime dependencies.

## Installation

```
pip install algodrills
```

To run the test suite from a source checkout:

```
pip install "algodrills[test]"
pytest
```

## Modules

### `algodrills.numtheory`

- `gcd(a, b)`: greatest common divisor by Euclid's method.
- `extended_gcd(a, b)`: returns an `ExtendedGcd` with fields `g`, `x`, `y`
  such that `a*x + b*y == g`.
- `mod_of_decimal(modulus, digits)`: reduces a decimal number given as a
  digit string modulo `modulus`. Raises `ValueError` for a non-positive
  modulus or a string that is not all digits.
- `gcd_with_big(a, digits)`: gcd of `a` and a possibly huge number given as
  digits.
- `is_prime(x)`: trial division.
- `prime_sieve(n)`: list of flags for `0..n`, true at the primes.
- `primes_up_to(n)`: the primes not greater than `n`.
- `factorial_divisor_count(n, modulus=1_000_000_007)`: number of divisors
  of `n!`, reduced modulo `modulus`.
- `distinct_prime_factor_counts(limit=1_000_001)`: for each number below
  `limit`, how many distinct primes divide it.

### `algodrills.counting`

- `balanced_btree_count(height, modulus=1_000_000_007)`: height-balanced
  binary trees of a given height, modulo `modulus`.
- `best_coin_exchange(n)`: best value for a coin that may be split into
  `n//2`, `n//3` and `n//4`.
- `staircase_ways(n)`: ways to climb `n` stairs in steps of 1, 2 or 3
  (0 for negative `n`).
- `decoding_count(digits)`: decodings of a digit string where adjacent
  pairs up to 26 may be read together.
- `power(base, exponent)`: integer power for a non-negative exponent.
- `stair_fibonacci(n)`: Fibonacci numbers starting 1, 2 for `n` = 1, 2.

### `algodrills.sequences`

- `longest_common_subsequence(first, second)`: length of the LCS.
- `longest_increasing_subsequence(values)`: length of the longest
  non-decreasing subsequence.
- `knapsack(weights, values, capacity)`: best 0/1 knapsack value.
- `stock_span(prices)`: for each day, the number of consecutive days ending
  there whose earlier prices are strictly below that day's price.
- `rotate_left(values, times)`: a new list rotated left.
- `min_path_sum(grid)`: cheapest top-left to bottom-right path moving only
  right or down.

### `algodrills.backtracking`

- `has_subset_sum(values, target)`: whether some subset of non-negative
  values adds up to `target`.
- `subsequences(items)`: every subsequence as a tuple, those without the
  first item listed first; `string_subsequences(text)` gives the same as
  strings.
- `swap_permutations(text)`: permutations in swap order, repeats included.
- `place_rooks(n, fixed=())`: an `n` by `n` 0/1 board with non-attacking
  rooks, keeping the `fixed` `(row, col)` rooks and filling each remaining
  row with the leftmost free column. Raises `ValueError` for fixed rooks
  off the board or attacking each other.

### `algodrills.heap`

- `MinHeap`: `push(value)`, `pop()`, `top()` and `len()`. `pop` and `top`
  raise `IndexError` on an empty heap.
- `k_largest(values, k)`: the `k` largest values in ascending order.

### `algodrills.scheduling`

- `round_robin(burst_times, quantum)`: schedules processes that all arrive
  at time 0 and returns a `ScheduleReport`. Its `processes` are
  `ProcessTimes` entries (`process`, `burst`, `waiting`, `turnaround`);
  `average_waiting()`, `average_turnaround()` and `render()` (a text table
  followed by the averages) summarise it.

### `algodrills.graphs`

- `adjacency_matrix(n, edges)`: symmetric matrix from `Edge` objects,
  `(a, b)` or `(a, b, weight)` tuples.
- `depth_first(matrix, start)` and `breadth_first(matrix, start)`: visit
  orders, lower-numbered neighbours first.
- `has_path(matrix, start, end)`: reachability.
- `kruskal(n, edges)` and `prim(matrix, start=0)`: minimum spanning tree
  edges as `Edge` objects. Both raise `ValueError` for a disconnected graph.

### `algodrills.trees`

- `Node(data, left=None, right=None)` and `vertical_order(root)`: values
  grouped by column from left to right, each column listing children
  before their parents.

### `algodrills.segment_tree`

- `SegmentTree(values)`: `query(lo, hi)` sums the half-open range
  `[lo, hi)`, `update(index, value)` sets one value, `total()` sums all
  of them, and `len()` gives the number of values.

## Examples

```python
from algodrills.numtheory import extended_gcd, gcd_with_big
from algodrills.sequences import longest_common_subsequence, stock_span
from algodrills.heap import MinHeap
from algodrills.segment_tree import SegmentTree

result = extended_gcd(30, 20)
print(result.g, result.x, result.y)

print(gcd_with_big(12, "123456789012345678901234567890"))

print(longest_common_subsequence("abcde", "ace"))   # 3
print(stock_span([100, 80, 60, 70, 60, 75, 85]))    # [1, 1, 1, 2, 1, 4, 6]

heap = MinHeap()
for value in (5, 1, 3):
    heap.push(value)
print(heap.top(), len(heap))                        # 1 3

tree = SegmentTree([1, 2, 3, 4])
tree.update(2, 50)
print(tree.query(0, 3), tree.total())               # 53 57
```

## What it does not do

The package is a library only: it has no command-line program and reads
no input files. Each exercise is a function or class to be called from
Python code.