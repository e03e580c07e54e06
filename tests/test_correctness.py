import numpy as np
import torch

from echelon import invert, sample_matrices
from echelon.gauss_jordan_torch import TorchGaussJordan


def well_conditioned(n, seed=0):
    rng = np.random.default_rng(seed)
    return rng.random((n, n)) + 5 * np.eye(n)


def test_matches_numpy_inv():
    A = well_conditioned(5)
    A_inv_np = np.linalg.inv(A)

    A_inv_gj = invert(A.copy())

    print("Gauss-Jordan error:", np.max(np.abs(A_inv_np - A_inv_gj)))
    assert np.max(np.abs(A_inv_np - A_inv_gj)) < 1e-10


def test_inverse_of_inverse():
    for n in (1, 2, 3, 6, 10):
        A = well_conditioned(n, seed=n)
        twice = invert(invert(A.copy()))
        np.testing.assert_allclose(twice, A, rtol=1e-9, atol=1e-12)


def test_product_is_identity():
    for n in (2, 4, 8):
        A = well_conditioned(n, seed=10 + n)
        A_inv = invert(A.copy())
        np.testing.assert_allclose(A @ A_inv, np.eye(n), atol=1e-10)
        np.testing.assert_allclose(A_inv @ A, np.eye(n), atol=1e-10)


def test_first_sample_matrix():
    A = sample_matrices()[0]
    A_inv = invert(A.copy())

    np.testing.assert_allclose(A @ A_inv, np.eye(2), atol=1e-12)
    np.testing.assert_allclose(A_inv, np.linalg.inv(A), rtol=1e-9)
    assert abs(A_inv[0, 0] - 0.3385) < 1e-3
    assert abs(A_inv[0, 1] + 0.1840) < 1e-3


def test_torch_matches_numpy():
    A = well_conditioned(6, seed=3)
    gj = TorchGaussJordan(device='cpu')

    A_inv_torch = gj.invert(torch.from_numpy(A)).numpy()
    A_inv_np = invert(A.copy())

    print("Torch vs NumPy difference:", np.max(np.abs(A_inv_torch - A_inv_np)))
    assert np.max(np.abs(A_inv_torch - A_inv_np)) < 1e-10
