"""Immutable integer matrix with row and column labels.

The Matrix is the backing representation for adjacency matrices of relations:
entry (i, j) is 1 when the i-th domain element is related to the j-th codomain
element. Labels record which element each row/column stands for; they are
presentation only and take no part in equality.

Representation:
    Entries live in a read-only numpy array (dtype int). Every "modifying"
    operation returns a new Matrix; the stored array is never written after
    construction, so a Matrix can be shared freely between readers.

Information encoded:
    - Shape (m × n) and entries
    - Labels for display

Information lost:
    - Element identity beyond the label string (use the canonical element
      lists from algebra.sets to map indices back to elements)
"""

from dataclasses import dataclass, replace
from typing import Any, Iterable, List, Sequence, Tuple, Union
import numpy as np
import scipy.sparse as sp

from discrete_toolkit.exceptions import InconsistentMatrixShapeError


MIN_ROW_LABEL_WIDTH = 5

MatrixLike = Union[np.ndarray, Sequence[Sequence[int]]]


def is_rectangular(rows: Sequence[Sequence[Any]]) -> bool:
    """Check that a nested sequence is non-empty and every row has equal length."""
    if len(rows) < 1:
        return False
    columns = len(rows[0])
    return all(len(row) == columns for row in rows[1:])


def _as_entries(entries: MatrixLike) -> np.ndarray:
    if isinstance(entries, np.ndarray):
        if entries.ndim != 2:
            raise InconsistentMatrixShapeError(
                f"Matrix entries must be two-dimensional, got ndim={entries.ndim}"
            )
        array = entries.astype(int, copy=True)
    else:
        rows = [list(row) for row in entries]
        if not is_rectangular(rows):
            raise InconsistentMatrixShapeError(
                "Inconsistent number of columns or empty array"
            )
        array = np.array(rows, dtype=int).reshape(len(rows), len(rows[0]))

    array.setflags(write=False)
    return array


def _as_labels(labels: Iterable[Any]) -> Tuple[str, ...]:
    return tuple(str(label) for label in labels)


@dataclass(frozen=True, eq=False)
class Matrix:
    """m × n integer matrix with optional labels.

    Attributes:
        entries: Read-only array of shape (m, n)
        row_labels: Up to m row labels (missing labels render empty)
        column_labels: Up to n column labels

    Invariants maintained:
        - entries is two-dimensional and rectangular
        - entries is never mutated after construction

    Equality is structural: same shape and same entries. Labels are ignored.
    """

    entries: np.ndarray
    row_labels: Tuple[str, ...] = ()
    column_labels: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "entries", _as_entries(self.entries))
        object.__setattr__(self, "row_labels", _as_labels(self.row_labels))
        object.__setattr__(self, "column_labels", _as_labels(self.column_labels))

    @classmethod
    def padded(
        cls,
        m: int,
        n: int,
        entries: Sequence[Sequence[int]] = (),
        row_labels: Iterable[Any] = (),
        column_labels: Iterable[Any] = (),
    ) -> "Matrix":
        """Build an m × n matrix, filling entries missing from `entries` with 0.

        Rows or columns of `entries` beyond m × n are ignored, so ragged input
        is accepted here.
        """
        if m < 0 or n < 0:
            raise InconsistentMatrixShapeError(
                f"Matrix dimensions must be non-negative, got {m} × {n}"
            )
        array = np.zeros((m, n), dtype=int)
        for i, row in enumerate(list(entries)[:m]):
            for j, value in enumerate(list(row)[:n]):
                array[i, j] = value
        return cls(array, tuple(row_labels), tuple(column_labels))

    @classmethod
    def zeros(cls, m: int, n: int) -> "Matrix":
        return cls.padded(m, n)

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        return cls(np.eye(n, dtype=int))

    @property
    def rows(self) -> int:
        return self.entries.shape[0]

    @property
    def columns(self) -> int:
        return self.entries.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.columns)

    def is_square(self) -> bool:
        return self.rows == self.columns

    def is_boolean(self) -> bool:
        """True if every entry is 0 or 1 (usable as an adjacency matrix)."""
        return bool(np.isin(self.entries, (0, 1)).all())

    def to_list(self) -> List[List[int]]:
        return self.entries.tolist()

    def to_sparse(self) -> sp.csr_matrix:
        """Compressed sparse row copy, for scipy.sparse.csgraph routines."""
        return sp.csr_matrix(self.entries)

    def with_labels(
        self, row_labels: Iterable[Any] = (), column_labels: Iterable[Any] = ()
    ) -> "Matrix":
        return replace(
            self, row_labels=tuple(row_labels), column_labels=tuple(column_labels)
        )

    def __getitem__(self, index: Tuple[int, int]) -> int:
        i, j = index
        return int(self.entries[i, j])

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self.entries, other.entries)
        )

    def __hash__(self) -> int:
        return hash((self.shape, self.entries.tobytes()))

    def __str__(self) -> str:
        """Aligned table for human inspection.

        Layout:
            - Header: blank row-label cell, then the column labels
            - One line per row: left-aligned row label, then the entries
            - Column width = max(label width, widest entry), right-aligned
            - Row-label column at least MIN_ROW_LABEL_WIDTH wide
            - Cells separated by two spaces
        """
        m, n = self.shape
        strings = [[str(int(v)) for v in row] for row in self.entries]

        def column_label(j: int) -> str:
            return self.column_labels[j] if j < len(self.column_labels) else ""

        def row_label(i: int) -> str:
            return self.row_labels[i] if i < len(self.row_labels) else ""

        widths = [
            max([len(column_label(j))] + [len(strings[i][j]) for i in range(m)])
            for j in range(n)
        ]
        label_width = max(
            [len(label) for label in self.row_labels] + [MIN_ROW_LABEL_WIDTH]
        )

        lines = [
            f"{'':>{label_width}}  "
            + "".join(f"{column_label(j):>{widths[j]}}  " for j in range(n))
        ]
        for i in range(m):
            lines.append(
                f"{row_label(i):<{label_width}}  "
                + "".join(f"{strings[i][j]:>{widths[j]}}  " for j in range(n))
            )
        return "\n".join(lines) + "\n"
