import argparse
import time

import numpy as np

from echelon.errors import EchelonError
from echelon.gauss_jordan import invert, reduce_echelon
from echelon.samples import echelon_example, random_square_matrix, sample_matrices


def output_section(name):
    return f"\t\t---- {name} ----\n"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="echelon-demo",
        description="Echelon reduction and Gauss-Jordan inversion samples.",
    )
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the random matrix (default: fresh entropy)")
    parser.add_argument("--max-size", type=int, default=5,
                        help="largest dimension of the random matrix")
    parser.add_argument("--tol", type=float, default=0.0,
                        help="entries with magnitude <= tol are treated as zero pivots")
    args = parser.parse_args(argv)
    if args.max_size < 1:
        parser.error("--max-size must be at least 1")
    if not args.tol >= 0:
        parser.error("--tol must be non-negative")
    return args


def show_inverse(mat, tol=0.0):
    print("Matrix:")
    print(mat)

    mat_inv = mat.copy()
    try:
        invert(mat_inv, tol=tol)
    except EchelonError as e:
        print(f"[-] {e}")
        return None

    print("Inverse:")
    print(mat_inv)
    return mat_inv


def main(argv=None):
    args = parse_args(argv)
    start = time.perf_counter()
    rng = np.random.default_rng(args.seed)

    # Echelon reduction
    print(output_section("ECHELON REDUCTION"), end="")
    print(reduce_echelon(echelon_example(), tol=args.tol))

    # Hardcoded matrices
    print(output_section("TEST MATRICES"), end="")
    for mat in sample_matrices():
        show_inverse(mat, tol=args.tol)

    # Random-generated matrix
    rnd_mat = random_square_matrix(rng, max_size=args.max_size)
    n = rnd_mat.shape[0]
    print(output_section("RANDOM MATRICES"), end="")
    print(f"[+] Testing with a {n}x{n} random-generated matrix.")
    print(rnd_mat)

    rnd_mat_inv = rnd_mat.copy()
    print(output_section("INVERSE"), end="")
    try:
        print(invert(rnd_mat_inv, tol=args.tol))
    except EchelonError as e:
        print(f"[-] {e}")

    elapsed_ms = (time.perf_counter() - start) * 1000
    print(f"[+] Program terminated in {elapsed_ms:.0f} ms")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
