"""Dense row-major matrices with slice access and element-wise arithmetic."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any


def _divide(a: Any, b: Any) -> Any:
    """Divide element-wise, truncating toward zero when both operands are ints."""
    if isinstance(a, int) and isinstance(b, int):
        quotient = abs(a) // abs(b)
        return quotient if (a >= 0) == (b >= 0) else -quotient
    return a / b


def _format_entry(value: Any) -> str:
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e16:
            return str(int(value))
        return repr(value)
    return str(value)


def _is_sequence(values: Any) -> bool:
    return isinstance(values, Iterable) and not isinstance(values, (str, bytes))


class Matrix:
    """A rows x cols matrix stored row by row in a flat list."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int, cols: int, initial_value: Any) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must be non-negative")
        self._rows = rows
        self._cols = cols
        self._data = [initial_value] * (rows * cols)

    def _copy(self) -> Matrix:
        copy = Matrix(self._rows, self._cols, None)
        copy._data = list(self._data)
        return copy

    def number_of_rows(self) -> int:
        return self._rows

    def number_of_columns(self) -> int:
        return self._cols

    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    def _flat_index(self, row: int, col: int) -> int:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(f"index ({row}, {col}) out of range for shape {self.shape()}")
        return row * self._cols + col

    def _slice_indices(self, start: int, size: int, stride: int) -> range:
        if size < 0:
            raise ValueError("slice size must be non-negative")
        indices = range(start, start + size * stride, stride) if stride else [start] * size
        if size and not all(0 <= i < len(self._data) for i in (indices[0], indices[-1])):
            raise IndexError("slice out of range")
        return indices  # type: ignore[return-value]

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, tuple):
            if len(key) == 2:
                return self._data[self._flat_index(*key)]
            if len(key) == 3:
                return self.slice(*key)
            raise TypeError("matrix index must be (row, col) or (start, size, stride)")
        if isinstance(key, int):
            return self._data[key]
        raise TypeError(f"invalid matrix index: {key!r}")

    def __setitem__(self, key: Any, value: Any) -> None:
        if isinstance(key, tuple):
            if len(key) == 2:
                self._data[self._flat_index(*key)] = value
                return
            if len(key) == 3:
                self._assign(self._slice_indices(*key), value)
                return
            raise TypeError("matrix index must be (row, col) or (start, size, stride)")
        if isinstance(key, int):
            self._data[key] = value
            return
        raise TypeError(f"invalid matrix index: {key!r}")

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Matrix):
            return self.shape() == other.shape() and self._data == other._data
        if _is_sequence(other):
            return self._data == list(other)  # type: ignore[arg-type]
        return NotImplemented

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, cols={self._cols}, data={self._data!r})"

    def slice(self, start: int, size: int, stride: int) -> list[Any]:
        """Return `size` elements starting at flat index `start`, `stride` apart."""
        return [self._data[i] for i in self._slice_indices(start, size, stride)]

    def _row_indices(self, index: int) -> range:
        if not 0 <= index < self._rows:
            raise IndexError(f"row {index} out of range")
        return self._slice_indices(index * self._cols, self._cols, 1)

    def _column_indices(self, index: int) -> range:
        if not 0 <= index < self._cols:
            raise IndexError(f"column {index} out of range")
        return self._slice_indices(index, self._rows, self._cols)

    def _diagonal_indices(self) -> range:
        return self._slice_indices(0, min(self._rows, self._cols), self._cols + 1)

    def row(self, index: int) -> list[Any]:
        return [self._data[i] for i in self._row_indices(index)]

    def column(self, index: int) -> list[Any]:
        return [self._data[i] for i in self._column_indices(index)]

    def diagonal(self) -> list[Any]:
        return [self._data[i] for i in self._diagonal_indices()]

    def _assign(self, indices: Iterable[int], values: Any) -> None:
        indices = list(indices)
        if _is_sequence(values):
            values = list(values)
            if len(values) != len(indices):
                raise ValueError(
                    f"cannot assign {len(values)} values to {len(indices)} positions"
                )
        else:
            values = [values] * len(indices)
        for index, value in zip(indices, values):
            self._data[index] = value

    def set_row(self, index: int, values: Any) -> None:
        """Assign a sequence of values, or one scalar, to a row."""
        self._assign(self._row_indices(index), values)

    def set_column(self, index: int, values: Any) -> None:
        """Assign a sequence of values, or one scalar, to a column."""
        self._assign(self._column_indices(index), values)

    def set_diagonal(self, values: Any) -> None:
        """Assign a sequence of values, or one scalar, to the main diagonal."""
        self._assign(self._diagonal_indices(), values)

    def _apply(self, other: Any, op: Callable[[Any, Any], Any]) -> Matrix:
        if isinstance(other, Matrix):
            if other.shape() != self.shape():
                raise ValueError(
                    f"shape mismatch: {self.shape()} and {other.shape()}"
                )
            self._data = [op(a, b) for a, b in zip(self._data, other._data)]
        else:
            self._data = [op(a, other) for a in self._data]
        return self

    def __iadd__(self, other: Any) -> Matrix:
        return self._apply(other, operator.add)

    def __isub__(self, other: Any) -> Matrix:
        return self._apply(other, operator.sub)

    def __imul__(self, other: Any) -> Matrix:
        return self._apply(other, operator.mul)

    def __itruediv__(self, other: Any) -> Matrix:
        return self._apply(other, _divide)

    def __add__(self, other: Any) -> Matrix:
        result = self._copy()
        result += other
        return result

    def __format__(self, spec: str) -> str:
        """Format as `<column separator><row separator><padding digit>`."""
        column_separator = spec[0] if len(spec) > 0 else ","
        row_separator = spec[1] if len(spec) > 1 else "\n"
        column_padding = 1
        if len(spec) > 2:
            digit = ord(spec[2]) - ord("0")
            column_padding = min(digit, 4) if digit >= 0 else 4
        return to_string(self, column_separator, row_separator, column_padding)

    def __str__(self) -> str:
        return format(self, "")


def transpose(m: Matrix) -> Matrix:
    """Return a new matrix with rows and columns swapped."""
    transposed = Matrix(m.number_of_columns(), m.number_of_rows(), 0)
    for index in range(m.number_of_rows()):
        transposed.set_column(index, m.row(index))
    return transposed


def identity(dimension: int) -> Matrix:
    """Return the dimension x dimension identity matrix of ints."""
    m = Matrix(dimension, dimension, 0)
    m.set_diagonal(1)
    return m


def eye(*args: Any) -> Matrix:
    """Return a square diagonal matrix.

    Accepts either the diagonal entries as arguments or one sequence of them.
    """
    if len(args) == 1 and _is_sequence(args[0]):
        diagonal = list(args[0])
    else:
        diagonal = list(args)
    if not diagonal:
        raise ValueError("eye needs at least one diagonal entry")
    m = Matrix(len(diagonal), len(diagonal), 0)
    m.set_diagonal(diagonal)
    return m


def column_widths(m: Matrix) -> list[int]:
    """Return the widest printed entry of each column."""
    return [
        max((len(_format_entry(value)) for value in m.column(j)), default=0)
        for j in range(m.number_of_columns())
    ]


def to_string(
    m: Matrix,
    column_separator: str = ",",
    row_separator: str = "\n",
    column_padding: int = 1,
) -> str:
    """Render a matrix as text.

    With column_padding == 0 entries are joined by the separators only;
    otherwise columns are centred and padded on both sides.
    """
    widths = column_widths(m)
    last_column = m.number_of_columns() - 1
    lines = []
    for i in range(m.number_of_rows()):
        cells = []
        for j, (value, width) in enumerate(zip(m.row(i), widths)):
            text = _format_entry(value)
            if column_padding > 0:
                text = format(text, f"^{width + 2 * column_padding}")
            if j < last_column:
                text += column_separator
            cells.append(text)
        lines.append("".join(cells))
    prefix = "\n" if column_padding > 0 else ""
    return prefix + row_separator.join(lines)