# lemkis

A small collection of mathematics and concurrency building blocks. It is meant
for teaching and experimenting. It depends only on the standard library.

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

- `lemkis.matrix`: `Matrix`, a dense row-major matrix.
  - Elements are read with `m[row, col]` and flat index; `m[start, size, stride]`
    reads a strided slice.
  - `row`, `column`, `diagonal` and `slice` return lists. `set_row`, `set_column`
    and `set_diagonal` assign a sequence or one scalar.
  - Arithmetic is element-wise in place (`+=`, `-=`, `*=`, `/=`) with a scalar or
    a matrix of the same shape. Integer division truncates toward zero. `+`
    returns a new matrix. A shape mismatch raises `ValueError`.
  - Helpers: `transpose`, `identity`, `eye` (diagonal entries as arguments or as
    one sequence), `column_widths` and `to_string`.
  - `format(m, spec)` takes a spec of up to three characters: column separator,
    row separator and a padding digit (at most 4).
- `lemkis.number_theory`: `are_coprime`, `modular_pow`, `sieve_of_eratosthenes`
  (primes below the bound), `decompose` (prime, exponent pairs), `euler_totient`
  and `largest_power_of_prime_dividing_factorial`. The last one returns the
  largest power of `prime` that divides the given value.
- `lemkis.polynomial`: `Polynomial`, with coefficients stored lowest power first
  and trailing zeros dropped.
  - It supports `+`, `-`, `*`, `/` (quotient), `%` (remainder), negation and
    evaluation by calling it.
  - `divide` returns quotient and remainder.
  - `root_rational_candidates` returns the positive `fractions.Fraction`
    candidates for rational roots.
  - `gcd` runs the Euclidean algorithm and returns the last divisor and the
    degree at each step.
  - Dividing by the zero polynomial, or by one of higher degree, raises
    `ValueError`.
- `lemkis.recursion`: classic exercises.
  - Puzzles: `n_queens`, `queens` (prints the boards), `format_solutions`,
    `is_safe`, `tower_of_hanoi` and `path_in_maze`.
  - Arithmetic: `chocolates`, `get_max_chocolates`, `is_prime`, `product`,
    `sum_of_digits`, `to_binary`, `iota_sum`, `fibonacci` and `tiles`.
  - Enumeration: `factorizations`, `sum_decomposition`,
    `non_increasing_decompositions`, `count_decompositions_as_sum_of_powers`,
    `subsets`, `sequences_from_a_set`, `more_ones`,
    `increasing_representations` and `alternating`.
  - Sorting: `bubble_sort` and `insertion_sort`.
- `lemkis.representation`: `expand` turns a non-negative fraction into an
  `Expansion` (whole part, non-repeating digits, period) in any base from 2 to
  36. It prints as `whole.fractional(period)`. `dexpand` turns an expansion back
  into a `fractions.Fraction`.
- `lemkis.queues`: two FIFO queues.
  - `ConcurrentQueue` has a blocking `pop`, a non-blocking `try_pop` and a
    `try_peek` that returns `None` when the queue is empty.
  - `LockedQueue` has a `pop` that raises `IndexError` when the queue is empty.
- `lemkis.synchronization`:
  - `BankAccount` has `withdraw`, `transfer` (locks source then destination, so
    two opposite transfers can deadlock) and `safe_transfer` (fixed lock order).
    A shortfall raises `InsufficientFundsError`.
  - `AtomicValue` offers `compare_exchange`, and `atomic_multiply` uses it.
  - `LockFreeStack` pushes with compare-and-exchange.
  - The condition-variable examples are `Worker` and `Factory`.

## Examples

```python
from lemkis.matrix import Matrix, transpose, eye

m = Matrix(3, 4, 0)
m[1, 2] = 3
m.shape()                 # (3, 4)
transpose(m).shape()      # (4, 3)
list(eye(1, 2, 3))        # [1, 0, 0, 0, 2, 0, 0, 0, 3]
```

```python
from lemkis.number_theory import sieve_of_eratosthenes, decompose, modular_pow

sieve_of_eratosthenes(20)   # [2, 3, 5, 7, 11, 13, 17, 19]
decompose(90)               # [(2, 1), (3, 2), (5, 1)]
modular_pow(2, 3, 10)       # 8
```

```python
from lemkis.polynomial import Polynomial, divide

p = Polynomial([3, 5, 4])   # 4x^2 + 5x + 3
q = Polynomial([1, 1])      # x + 1
str(p)                      # '4x^2 + 5x^1 + 3'
divide(p, q)                # (Polynomial([1, 4]), Polynomial([2]))
p(2)                        # 29
```

```python
from fractions import Fraction
from lemkis.representation import Expansion, expand, dexpand

str(expand(Fraction(64, 30), 10))         # '2.1(3)'
dexpand(Expansion("1", "0", "1"), 10)     # Fraction(91, 90)
```

```python
from lemkis.recursion import tower_of_hanoi

tower_of_hanoi(2)
# ['Move disk 1 from A to B', 'Move disk 2 from A to C', 'Move disk 1 from B to C']
```

```python
from lemkis.synchronization import AtomicValue, atomic_multiply, Worker

cell = AtomicValue(1.0)
atomic_multiply(cell, 2.0)   # 2.0
Worker().main_thread()       # 'Example data after processing'
```

## What it does not do

- There is no command-line program. Everything is used from Python.
- Matrices can be rendered as text with `to_string`. There is no function that
  saves them to files or reads them back.
- The package has no matrix views over existing lists and no row reduction.
  There is no determinant, inverse or Gaussian elimination.
- There is no simulation built on the synchronization primitives. The examples
  in `lemkis.synchronization` are the whole of the concurrency part.