import torch
from typing import List

from echelon.errors import (
    DimensionError,
    DimensionMismatch,
    SingularMatrixError,
)
from echelon.gauss_jordan import check_row_index, check_tol


class TorchGaussJordan:
    """
    Gauss-Jordan row reduction and inversion on PyTorch tensors.

    Same algorithm as echelon.gauss_jordan, but each elimination step clears
    the whole pivot column with one vectorized tensor update, so the work per
    column runs on the selected device.
    """

    def __init__(self, device: str = 'cuda'):
        """
        Args:
            device: 'cuda' for GPU, 'cpu' for CPU comparison
        """
        self.device = torch.device(device if torch.cuda.is_available() else 'cpu')
        if str(device).startswith('cuda') and not torch.cuda.is_available():
            print("WARNING: CUDA not available, falling back to CPU")

    def _prepare(self, T: torch.Tensor) -> torch.Tensor:
        if not isinstance(T, torch.Tensor):
            raise TypeError(f"Expected a torch.Tensor, got {type(T).__name__}")
        if T.dim() != 2:
            raise DimensionError(f"Expected a 2-D matrix, got {T.dim()} dimension(s)")
        if not (torch.is_floating_point(T) or torch.is_complex(T)):
            raise TypeError(f"Cannot reduce a tensor of dtype {T.dtype} in place; use a float dtype")
        # No copy when the tensor already lives on self.device
        return T.to(self.device)

    def swap_rows(self, T0: torch.Tensor, T1: torch.Tensor, row0: int, row1: int) -> None:
        """
        Exchange row `row0` of `T0` with row `row1` of `T1` (may be the same tensor).

        Raises:
            TypeError: a tensor or row index has the wrong type
            IndexOutOfBounds: a row index is outside the tensor
            DimensionMismatch: the rows have different lengths
        """
        for T in (T0, T1):
            if not isinstance(T, torch.Tensor):
                raise TypeError(f"Expected a torch.Tensor, got {type(T).__name__}")
            if T.dim() != 2:
                raise DimensionError(f"Expected a 2-D matrix, got {T.dim()} dimension(s)")
        row0 = check_row_index(row0, T0.shape[0])
        row1 = check_row_index(row1, T1.shape[0])

        if T0.shape[1] != T1.shape[1]:
            raise DimensionMismatch(
                f"Cannot swap a row of length {T0.shape[1]} with a row of length {T1.shape[1]}"
            )

        tmp = T0[row0].clone()
        T0[row0] = T1[row1]
        T1[row1] = tmp

    def _reduce(self, T: torch.Tensor, tol: float) -> List[int]:
        nrows, ncols = T.shape
        pivot_cols = []
        lead = 0

        for col in range(ncols):
            if lead == nrows:
                break

            # First row at or below `lead` with a usable pivot
            candidates = torch.nonzero(T[lead:, col].abs() > tol)
            if candidates.numel() == 0:
                continue
            pivot_row = lead + candidates[0, 0].item()

            if pivot_row != lead:
                self.swap_rows(T, T, pivot_row, lead)

            T[lead] = T[lead] / T[lead, col]

            # Clear the column, touching only rows that have an entry there
            factors = T[:, col].clone()
            factors[lead] = 0
            mask = factors != 0
            T[mask] -= factors[mask].unsqueeze(1) * T[lead]

            pivot_cols.append(col)
            lead += 1

        return pivot_cols

    def reduce_echelon(self, T: torch.Tensor, tol: float = 0.0) -> torch.Tensor:
        """
        Reduce a matrix to reduced row-echelon form.

        Args:
            T: 2-D floating point tensor, any shape
            tol: magnitude at or below which an entry cannot be a pivot

        Returns:
            The reduced tensor on self.device. When T already lives on
            self.device this is T itself, reduced in place.

        Raises:
            ValueError: tol is negative
        """
        T = self._prepare(T)
        check_tol(tol)
        self._reduce(T, tol)
        return T

    def invert(self, A: torch.Tensor, tol: float = 0.0) -> torch.Tensor:
        """
        Invert a square matrix by reducing [A | I] to [I | A^(-1)].

        Args:
            A: Input matrix [n, n]
            tol: pivot threshold, see reduce_echelon

        Returns:
            A_inv: Inverse of A [n, n] on self.device

        Raises:
            ValueError: tol is negative
            DimensionError: A is not square
            SingularMatrixError: A has no inverse
        """
        A = self._prepare(A)
        check_tol(tol)
        nrows, ncols = A.shape
        if nrows != ncols:
            raise DimensionError(f"Cannot invert a non-square matrix of shape {nrows}x{ncols}")
        n = nrows

        I = torch.eye(n, dtype=A.dtype, device=self.device)
        aug = torch.cat([A, I], dim=1)

        pivot_cols = self._reduce(aug, tol)
        if pivot_cols != list(range(n)):
            missing = next(c for c in range(n) if c not in pivot_cols)
            raise SingularMatrixError(f"Singular matrix: no pivot in column {missing}")

        return aug[:, n:].clone()

    def invert_direct(self, A: torch.Tensor) -> torch.Tensor:
        """
        Direct inversion using PyTorch's built-in (for comparison).

        torch.linalg.inv factors A with LU (cuSOLVER getrf on GPU) and then
        solves against the identity.
        """
        A = A.to(self.device)
        return torch.linalg.inv(A)
