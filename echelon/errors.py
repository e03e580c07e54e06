class EchelonError(Exception):
    """Base class for every error raised by the row-reduction routines."""


class DimensionMismatch(EchelonError, ValueError):
    """Two rows that should be exchanged have different lengths."""


class IndexOutOfBounds(EchelonError, IndexError):
    """A row index lies outside the matrix."""


class DimensionError(EchelonError, ValueError):
    """The matrix does not have the shape the operation requires."""


class SingularMatrixError(EchelonError, ValueError):
    """The matrix has no inverse."""
