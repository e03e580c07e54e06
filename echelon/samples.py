import numpy as np

# Hardcoded matrices for testing. The third one is 5x4 and cannot be inverted.
TEST_MATRICES = (
    (
        (4, 7.5),
        (3.0, 13.799),
    ),
    (
        (4, 7.5, 13.244),
        (3.0, 13.799, 1.009),
        (4.7398, 140.1, 37.0001),
    ),
    (
        (4, 7.5, 13.244, 5),
        (3.0, 13.799, 1.009, 42),
        (4.7398, 140.1, 37.0001, 399),
        (4, 7.5, 13.244, 24),
        (16, 29.1, 44, 7),
    ),
    (
        (2, 11, 3, 9, 4),
        (5, 10, 12, 13, 14),
        (6, 8, 15, 16, 7),
        (17, 18, 19, 20, 21),
        (22, 23, 24, 25, 26),
    ),
)

ECHELON_EXAMPLE = (
    (0, 0, 0),
    (1, 0, 0),
    (0, 0, 3),
)


def sample_matrices():
    """Fresh float copies of TEST_MATRICES, safe to mutate."""
    return [np.array(m, dtype=np.float64) for m in TEST_MATRICES]


def echelon_example():
    return np.array(ECHELON_EXAMPLE, dtype=np.float64)


def random_matrix(shape, low, high, rng):
    """
    Uniform random matrix with entries in [low, high).

    Args:
        shape: (rows, cols), both at least 1
        low, high: bounds; swapped if given in descending order
        rng: numpy.random.Generator owned by the caller

    Returns:
        float64 array of the given shape
    """
    shape = tuple(shape)
    if len(shape) != 2:
        raise ValueError(f"Expected a 2-D shape, got {shape}")
    if min(shape) < 1:
        raise ValueError(f"Matrix dimensions must be positive, got {shape}")
    if low > high:
        low, high = high, low
    return rng.uniform(low, high, size=shape)


def random_square_matrix(rng, max_size=5, low=-1e10, high=1e10):
    # Dimension picked from the same generator, 1..max_size
    n = int(rng.integers(1, max_size + 1))
    return random_matrix((n, n), low, high, rng)
