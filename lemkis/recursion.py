"""Recursive solutions to classic combinatorial and arithmetic puzzles."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from typing import Any


def is_safe(board: Sequence[int], row: int, col: int) -> bool:
    """Return True if a queen at (row, col) is not attacked by earlier columns."""
    return all(
        placed != row and abs(placed - row) != abs(i - col)
        for i, placed in enumerate(board[:col])
    )


def _place_queens(n: int, col: int, board: list[int]) -> Iterator[list[int]]:
    if col == n:
        yield list(board)
        return
    for row in range(n):
        if is_safe(board, row, col):
            board[col] = row
            yield from _place_queens(n, col + 1, board)


def n_queens(n: int) -> list[list[int]]:
    """Return every placement of n queens on an n x n board.

    A solution lists, column by column, the row of that column's queen.
    """
    if n < 0:
        raise ValueError("board size must be non-negative")
    return list(_place_queens(n, 0, [-1] * n))


def format_solutions(solutions: Iterable[Sequence[int]], n: int) -> str:
    """Draw each solution as a grid of 'Q ' and '. ' followed by a blank line."""
    blocks = []
    for solution in solutions:
        lines = (
            "".join("Q " if solution[j] == i else ". " for j in range(n)) + "\n"
            for i in range(n)
        )
        blocks.append("".join(lines) + "\n")
    return "".join(blocks)


def queens(n: int) -> list[list[int]]:
    """Print every solution of the n-queens puzzle and return them."""
    if n in (2, 3):
        print(f"No solutions for n = {n}")
        return []
    solutions = n_queens(n)
    print(format_solutions(solutions, n), end="")
    return solutions


def get_max_chocolates(wrappers: int, wrap: int) -> int:
    """Return how many chocolates the wrappers can be traded for, repeatedly."""
    if wrap < 2:
        raise ValueError("trading needs at least two wrappers per chocolate")
    total = 0
    while wrappers >= wrap:
        new_chocolates, remaining = divmod(wrappers, wrap)
        total += new_chocolates
        wrappers = new_chocolates + remaining
    return total


def chocolates(your_money: int, price_of_chocolate: int, wrap: int) -> int:
    """Return the most chocolates money buys when wrappers can be traded in."""
    if price_of_chocolate <= 0:
        raise ValueError("price of a chocolate must be positive")
    initial = your_money // price_of_chocolate
    return initial + get_max_chocolates(initial, wrap)


def is_prime(number: int) -> bool:
    """Return True if number is prime."""
    if number <= 1:
        return False
    if number == 2:
        return True
    if number % 2 == 0:
        return False
    divisor = 3
    while divisor * divisor <= number:
        if number % divisor == 0:
            return False
        divisor += 2
    return True


def _find_factors(number: int, start: int, current: list[int]) -> Iterator[list[int]]:
    if number == 1:
        if current:
            yield list(current)
        return
    for i in range(start, number + 1):
        if number % i == 0:
            current.append(i)
            yield from _find_factors(number // i, i, current)
            current.pop()


def factorizations(number: int) -> list[list[int]]:
    """Return every way to write number as a non-decreasing product of factors >= 2."""
    return list(_find_factors(number, 2, []))


def product(a: int, b: int) -> int:
    """Return a * b computed by repeated addition only."""
    total = 0
    for _ in range(abs(b)):
        total += a
    return total if b >= 0 else -total


def _combinations(
    number: int, factors: int, start: int, current: list[int]
) -> Iterator[list[int]]:
    if factors == 0 and number == 0:
        yield list(current)
        return
    if factors == 0 or number == 0:
        return
    for i in range(start, number + 1):
        current.append(i)
        yield from _combinations(number - i, factors - 1, i, current)
        current.pop()


def sum_decomposition(number: int, number_of_factors: int) -> list[list[int]]:
    """Return all non-decreasing positive solutions of x_1 + ... + x_k = number."""
    return list(_combinations(number, number_of_factors, 1, []))


def sum_of_digits(number: int) -> int:
    """Return the sum of the decimal digits of a non-negative number."""
    if number < 0:
        raise ValueError("number must be non-negative")
    if number == 0:
        return 0
    return number % 10 + sum_of_digits(number // 10)


def to_binary(number: int) -> int:
    """Return an integer whose decimal digits spell number in binary."""
    if number < 0:
        raise ValueError("number must be non-negative")
    if number == 0:
        return 0
    return to_binary(number // 2) * 10 + number % 2


def iota_sum(up_to: int) -> int:
    """Return 1 + 2 + ... + up_to."""
    if up_to < 0:
        raise ValueError("up_to must be non-negative")
    return sum(range(1, up_to + 1))


def _largest_tile(size: int) -> int:
    tile = 1
    while tile * 2 <= size:
        tile *= 2
    return tile


def tiles(rows: int, columns: int) -> int:
    """Return the number of power-of-two square tiles used to cover a rows x columns area."""
    if rows < 0 or columns < 0:
        raise ValueError("dimensions must be non-negative")
    if rows == 0 or columns == 0:
        return 0
    largest = min(_largest_tile(rows), _largest_tile(columns))
    return (
        1
        + tiles(rows - largest, columns)
        + tiles(largest, columns - largest)
        + tiles(rows - largest, largest)
    )


def _hanoi(n: int, source: str, destination: str, auxiliary: str) -> Iterator[str]:
    if n == 1:
        yield f"Move disk 1 from {source} to {destination}"
        return
    yield from _hanoi(n - 1, source, auxiliary, destination)
    yield f"Move disk {n} from {source} to {destination}"
    yield from _hanoi(n - 1, auxiliary, destination, source)


def tower_of_hanoi(discs: int) -> list[str]:
    """Return the moves that carry the discs from peg A to peg C."""
    if discs < 0:
        raise ValueError("number of discs must be non-negative")
    if discs == 0:
        return []
    return list(_hanoi(discs, "A", "C", "B"))


def _sequences(letters: list[str], current: str, max_length: int) -> Iterator[str]:
    if current and len(current) <= max_length:
        yield current
    if len(current) >= max_length:
        return
    for letter in letters:
        yield from _sequences(letters, current + letter, max_length)


def sequences_from_a_set(letters: Iterable[str], maximal_length: int) -> list[str]:
    """Return all non-empty words over the letters no longer than maximal_length."""
    return list(_sequences(sorted(set(letters)), "", maximal_length))


def _bits(current: str, ones: int, zeros: int, remaining: int) -> Iterator[str]:
    if remaining == 0:
        yield current
        return
    if ones + 1 >= zeros:
        yield from _bits(current + "1", ones + 1, zeros, remaining - 1)
    if ones > zeros:
        yield from _bits(current + "0", ones, zeros + 1, remaining - 1)


def more_ones(number_of_bits: int) -> list[str]:
    """Return all bit strings of the given length whose prefixes never hold more zeros than ones."""
    return list(_bits("", 0, 0, number_of_bits))


def _power_decompositions(
    number: Any, power: int, base: int, current: list[int]
) -> Iterator[tuple[int, ...]]:
    if number == 0:
        yield tuple(current)
        return
    while base**power <= number:
        current.append(base)
        yield from _power_decompositions(number - base**power, power, base + 1, current)
        current.pop()
        base += 1


def count_decompositions_as_sum_of_powers(number: Any, power: int) -> int:
    """Count ways to write number as a sum of distinct positive integers raised to power."""
    if power < 1:
        raise ValueError("power must be at least 1")
    return len(set(_power_decompositions(number, power, 1, [])))


def _subsets(items: list[int], index: int, current: list[int]) -> Iterator[list[int]]:
    if current:
        yield list(current)
    for i in range(index, len(items)):
        current.append(items[i])
        yield from _subsets(items, i + 1, current)
        current.pop()


def subsets(numbers: Iterable[int]) -> list[list[int]]:
    """Return every non-empty subset of the numbers, each in ascending order."""
    return list(_subsets(sorted(set(numbers)), 0, []))


def _increasing(current: int, digits: int, last: int) -> Iterator[int]:
    if digits == 0:
        yield current
        return
    for digit in range(last + 1, 10):
        yield from _increasing(current * 10 + digit, digits - 1, digit)


def increasing_representations(number_of_digits: int) -> list[int]:
    """Return the numbers whose number_of_digits digits (leading zeros allowed) strictly increase."""
    if number_of_digits < 0:
        raise ValueError("number of digits must be non-negative")
    return list(_increasing(0, number_of_digits, -1))


def _non_increasing(number: int, max_value: int, current: list[int]) -> Iterator[list[int]]:
    if number == 0:
        yield list(current)
        return
    for i in range(min(max_value, number), 0, -1):
        current.append(i)
        yield from _non_increasing(number - i, i, current)
        current.pop()


def non_increasing_decompositions(number: int) -> list[list[int]]:
    """Return all non-increasing sequences of positive integers summing to number."""
    if number < 0:
        raise ValueError("number must be non-negative")
    return list(_non_increasing(number, number, []))


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of values, made with bubble sort."""
    result = list(values)
    for end in range(len(result), 1, -1):
        for i in range(end - 1):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
    return result


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of values, made with insertion sort."""
    result: list[int] = []
    for value in values:
        j = len(result)
        result.append(value)
        while j > 0 and result[j - 1] > value:
            result[j] = result[j - 1]
            j -= 1
        result[j] = value
    return result


def alternating(v0: Sequence[int], v1: Sequence[int]) -> list[list[int]]:
    """Return sequences of length len(v0) + len(v1) starting with v0[0].

    Even positions take values from v0 and odd positions from v1; a value is
    accepted only if it exceeds the value held in the last slot.
    """
    if not v0:
        raise ValueError("v0 must not be empty")
    size = len(v0) + len(v1)
    current = [0] * size
    current[0] = v0[0]
    sequences: list[list[int]] = []

    def fill(index: int) -> None:
        if index == size:
            sequences.append(list(current))
            return
        for num in v0 if index % 2 == 0 else v1:
            if num > current[-1]:
                current[index] = num
                fill(index + 1)

    fill(1)
    return sequences


def fibonacci(nth: int) -> int:
    """Return the nth Fibonacci number, with fibonacci(0) == 0."""
    if nth < 0:
        raise ValueError("index must be non-negative")
    a, b = 0, 1
    for _ in range(nth):
        a, b = b, a + b
    return a


def path_in_maze(
    maze: Sequence[bool],
    rows: int,
    columns: int,
    startx: int,
    starty: int,
    endx: int,
    endy: int,
) -> bool:
    """Return True if (endx, endy) is reachable from (startx, starty).

    The maze is a flat row-major sequence where a true value is a wall.
    """
    if len(maze) < rows * columns:
        raise ValueError("maze is smaller than rows x columns")

    def open_cell(x: int, y: int) -> bool:
        return 0 <= x < rows and 0 <= y < columns and not maze[x * columns + y]

    if (startx, starty) == (endx, endy):
        return True
    if not open_cell(startx, starty):
        return False
    visited = {(startx, starty)}
    queue = deque([(startx, starty)])
    while queue:
        x, y = queue.popleft()
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if (nx, ny) == (endx, endy):
                return True
            if (nx, ny) not in visited and open_cell(nx, ny):
                visited.add((nx, ny))
                queue.append((nx, ny))
    return False