# Gauss-Jordan row reduction and inversion on NumPy arrays (in place)

import operator

import numpy as np

from echelon.errors import (
    DimensionError,
    DimensionMismatch,
    IndexOutOfBounds,
    SingularMatrixError,
)


def _check_matrix(mat):
    if not isinstance(mat, np.ndarray):
        raise TypeError(f"Expected a numpy.ndarray, got {type(mat).__name__}")
    if mat.ndim != 2:
        raise DimensionError(f"Expected a 2-D matrix, got {mat.ndim} dimension(s)")


def _check_inexact(mat):
    # Quotients do not fit in an integer array
    if mat.dtype != object and not np.issubdtype(mat.dtype, np.inexact):
        raise TypeError(f"Cannot reduce a matrix of dtype {mat.dtype} in place; use a float dtype")


def check_tol(tol):
    # A negative threshold would let a zero entry become the pivot
    if not tol >= 0:
        raise ValueError(f"Pivot tolerance must be non-negative, got {tol}")


def check_row_index(row, nrows):
    """Validate a row index and return it as a plain int."""
    if isinstance(row, bool):
        raise TypeError("Row index must be an integer, got bool")
    row = operator.index(row)
    if not 0 <= row < nrows:
        raise IndexOutOfBounds(f"Row index {row} out of bounds for a matrix with {nrows} rows")
    return row


def swap_rows(mat0, mat1, row0, row1):
    """
    Exchange row `row0` of `mat0` with row `row1` of `mat1`.

    Both arguments may be the same matrix, in which case this is an ordinary
    in-place row swap. Indices and column counts are validated before anything
    is written.

    Raises:
        TypeError: a row index is not an integer
        IndexOutOfBounds: a row index is negative or not below the row count
        DimensionMismatch: the two matrices have different column counts
    """
    _check_matrix(mat0)
    _check_matrix(mat1)
    row0 = check_row_index(row0, mat0.shape[0])
    row1 = check_row_index(row1, mat1.shape[0])

    if mat0.shape[1] != mat1.shape[1]:
        raise DimensionMismatch(
            f"Cannot swap a row of length {mat0.shape[1]} with a row of length {mat1.shape[1]}"
        )

    tmp = mat0[row0].copy()
    mat0[row0] = mat1[row1]
    mat1[row1] = tmp


def _find_pivot(mat, col, start, tol):
    for row in range(start, mat.shape[0]):
        if abs(mat[row, col]) > tol:
            return row
    return None


def _reduce(mat, tol):
    """Reduce in place and return the list of pivot columns."""
    nrows, ncols = mat.shape
    pivot_cols = []
    lead = 0

    for col in range(ncols):
        if lead == nrows:
            break

        pivot_row = _find_pivot(mat, col, lead, tol)
        if pivot_row is None:
            continue

        # Zero rows cascade down below the pivot rows
        if pivot_row != lead:
            swap_rows(mat, mat, pivot_row, lead)

        # Normalize row
        mat[lead] /= mat[lead, col]

        # Eliminate column above and below, only in rows that have an entry there
        factors = mat[:, col].copy()
        factors[lead] = 0
        rows = np.flatnonzero(factors != 0)
        mat[rows] -= factors[rows, np.newaxis] * mat[lead]

        pivot_cols.append(col)
        lead += 1

    return pivot_cols


def reduce_echelon(mat, tol=0.0):
    """
    Reduce `mat` in place to reduced row-echelon form.

    Columns are swept left to right. The first row (at or below the next pivot
    position) whose entry has magnitude above `tol` becomes the pivot row; it
    is swapped into place, scaled so the pivot is 1, and the column is cleared
    in every other row. Columns with no such entry are skipped.

    `tol` defaults to 0.0, i.e. exact comparison with zero, which is fragile
    for nearly singular float matrices. Pass a small positive value to treat
    tiny entries as zero.

    Args:
        mat: 2-D float (or object) array, any shape
        tol: magnitude at or below which an entry cannot be a pivot

    Returns:
        mat, for chaining

    Raises:
        ValueError: `tol` is negative
    """
    _check_matrix(mat)
    _check_inexact(mat)
    check_tol(tol)
    _reduce(mat, tol)
    return mat


def invert(mat, tol=0.0):
    """
    Invert a square matrix in place using the Gauss-Jordan method.

    The augmented matrix [A | I] is reduced to echelon form; its right half is
    then A^(-1). If some column of the left half gets no pivot the matrix is
    singular and `mat` is left untouched.

    Raises:
        ValueError: `tol` is negative
        DimensionError: `mat` is not square
        SingularMatrixError: `mat` has no inverse
    """
    _check_matrix(mat)
    _check_inexact(mat)
    check_tol(tol)

    nrows, ncols = mat.shape
    if nrows != ncols:
        raise DimensionError(f"Cannot invert a non-square matrix of shape {nrows}x{ncols}")
    n = nrows

    aug = np.zeros((n, 2 * n), dtype=mat.dtype)
    aug[:, :n] = mat
    aug[:, n:] = np.eye(n, dtype=mat.dtype)

    pivot_cols = _reduce(aug, tol)
    if pivot_cols != list(range(n)):
        missing = next(c for c in range(n) if c not in pivot_cols)
        raise SingularMatrixError(f"Singular matrix: no pivot in column {missing}")

    # Extract inverse
    mat[...] = aug[:, n:]
    return mat
