"""Dense 2-D matrices and the planar transforms used to move particle shapes."""

from __future__ import annotations

import math


class Matrix:
    """A fixed-size matrix of floats, initialised to zero."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"matrix dimensions must be non-negative, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._values = [[0.0] * cols for _ in range(rows)]

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def _check_key(self, key) -> tuple[int, int]:
        try:
            i, j = key
        except (TypeError, ValueError):
            raise TypeError("matrix index must be a (row, col) pair") from None
        if not (0 <= i < self._rows and 0 <= j < self._cols):
            raise IndexError(f"index ({i}, {j}) out of range for {self._rows}x{self._cols} matrix")
        return i, j

    def __getitem__(self, key) -> float:
        i, j = self._check_key(key)
        return self._values[i][j]

    def __setitem__(self, key, value) -> None:
        i, j = self._check_key(key)
        self._values[i][j] = float(value)

    def _from_values(self, values: list[list[float]], cols: int) -> Matrix:
        result = Matrix(len(values), cols)
        result._values = values
        return result

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._rows != other._rows or self._cols != other._cols:
            raise ValueError("Error: mismatched dimensions")
        values = [
            [a + b for a, b in zip(row_a, row_b)]
            for row_a, row_b in zip(self._values, other._values)
        ]
        return self._from_values(values, self._cols)

    def __mul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._cols != other._rows:
            raise ValueError("Error: mismatched inner dimensions")
        columns = list(zip(*other._values)) if other._rows else [()] * other._cols
        values = [
            [sum(a * b for a, b in zip(row, column)) for column in columns]
            for row in self._values
        ]
        return self._from_values(values, other._cols)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._rows == other._rows
            and self._cols == other._cols
            and self._values == other._values
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join(
            "".join(f"{value:>10g} " for value in row) + "\n" for row in self._values
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._rows}x{self._cols}, {self._values!r})"

    def copy(self) -> Matrix:
        """Return an independent copy of this matrix."""
        return self._from_values([list(row) for row in self._values], self._cols)


class RotationMatrix(Matrix):
    """2x2 counter-clockwise rotation by ``theta`` radians; apply as ``R * A``."""

    def __init__(self, theta: float) -> None:
        super().__init__(2, 2)
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)
        self._values = [[cos_t, -sin_t], [sin_t, cos_t]]


class ScalingMatrix(Matrix):
    """2x2 uniform scaling by ``scale``; apply as ``S * A``."""

    def __init__(self, scale: float) -> None:
        super().__init__(2, 2)
        self._values = [[float(scale), 0.0], [0.0, float(scale)]]


class TranslationMatrix(Matrix):
    """2xN matrix whose columns are all ``(x_shift, y_shift)``; apply as ``T + A``."""

    def __init__(self, x_shift: float, y_shift: float, n_cols: int) -> None:
        super().__init__(2, n_cols)
        self._values = [[float(x_shift)] * n_cols, [float(y_shift)] * n_cols]