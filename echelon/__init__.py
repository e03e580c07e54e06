from echelon.errors import (
    DimensionError,
    DimensionMismatch,
    EchelonError,
    IndexOutOfBounds,
    SingularMatrixError,
)
from echelon.gauss_jordan import invert, reduce_echelon, swap_rows
from echelon.samples import (
    ECHELON_EXAMPLE,
    TEST_MATRICES,
    echelon_example,
    random_matrix,
    random_square_matrix,
    sample_matrices,
)

__all__ = [
    "DimensionError",
    "DimensionMismatch",
    "EchelonError",
    "IndexOutOfBounds",
    "SingularMatrixError",
    "invert",
    "reduce_echelon",
    "swap_rows",
    "ECHELON_EXAMPLE",
    "TEST_MATRICES",
    "echelon_example",
    "random_matrix",
    "random_square_matrix",
    "sample_matrices",
]
