import argparse
import os
import time

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import torch

from echelon.gauss_jordan import invert
from echelon.gauss_jordan_torch import TorchGaussJordan


def time_fn(fn, A, trials):
    t0 = time.perf_counter()
    for _ in range(trials):
        fn(A)
    return (time.perf_counter() - t0) / trials


def benchmark(n=100, trials=3, gj_torch=None, rng=None):
    """
    Time Gauss-Jordan inversion (NumPy and PyTorch) against numpy.linalg.inv.

    Returns:
        dict with per-call seconds for each method and the max absolute
        difference of each Gauss-Jordan result from numpy.linalg.inv
    """
    rng = rng if rng is not None else np.random.default_rng(0)
    gj_torch = gj_torch if gj_torch is not None else TorchGaussJordan(device='cpu')

    A = rng.random((n, n))
    A += n * np.eye(n)  # improve conditioning
    A_torch = torch.from_numpy(A).to(gj_torch.device)

    def sync():
        if gj_torch.device.type == 'cuda':
            torch.cuda.synchronize()

    # Warmup
    gj_torch.invert(A_torch)
    sync()

    t_numpy_gj = time_fn(lambda M: invert(M.copy()), A, trials)

    def torch_gj(M):
        gj_torch.invert(M)
        sync()

    t_torch_gj = time_fn(torch_gj, A_torch, trials)
    t_np_inv = time_fn(np.linalg.inv, A, trials)

    expected = np.linalg.inv(A)
    err_numpy = np.max(np.abs(invert(A.copy()) - expected))
    err_torch = np.max(np.abs(gj_torch.invert(A_torch).cpu().numpy() - expected))

    print(f"Matrix size: {n}x{n}")
    print(f"NumPy Gauss-Jordan: {t_numpy_gj:.6f} s (error: {err_numpy:.2e})")
    print(f"Torch Gauss-Jordan: {t_torch_gj:.6f} s (error: {err_torch:.2e})")
    print(f"NumPy inv:          {t_np_inv:.6f} s")
    print(f"Speedup (Torch GJ vs NumPy GJ): {t_numpy_gj/t_torch_gj:.1f}x")

    return {
        "n": n,
        "numpy_gj": t_numpy_gj,
        "torch_gj": t_torch_gj,
        "numpy_inv": t_np_inv,
        "numpy_gj_error": err_numpy,
        "torch_gj_error": err_torch,
    }


def plot_results(results, path):
    sizes = [r["n"] for r in results]

    plt.figure()
    plt.plot(sizes, [r["numpy_gj"] * 1000 for r in results], label="NumPy Gauss-Jordan")
    plt.plot(sizes, [r["torch_gj"] * 1000 for r in results], label="Torch Gauss-Jordan")
    plt.plot(sizes, [r["numpy_inv"] * 1000 for r in results], label="numpy.linalg.inv")
    plt.xlabel("Matrix size (N x N)")
    plt.ylabel("Time per inversion (ms)")
    plt.title("Gauss-Jordan Inversion Benchmark")
    plt.legend()
    plt.grid(True)
    plt.tight_layout()

    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    plt.savefig(path)
    plt.close()


def main(argv=None):
    parser = argparse.ArgumentParser(prog="echelon-benchmark",
                                     description="Benchmark Gauss-Jordan matrix inversion.")
    parser.add_argument("--sizes", type=int, nargs="+", default=[50, 100, 200, 500])
    parser.add_argument("--trials", type=int, default=3)
    parser.add_argument("--device", default="cuda", help="device for the Torch variant")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--output", default=os.path.join("plots", "benchmark.png"))
    args = parser.parse_args(argv)

    rng = np.random.default_rng(args.seed)
    gj_torch = TorchGaussJordan(device=args.device)
    if gj_torch.device.type == 'cuda':
        print(f"\nDetected GPU: {torch.cuda.get_device_name(0)}")

    results = []
    for n in args.sizes:
        results.append(benchmark(n, args.trials, gj_torch=gj_torch, rng=rng))
        print("-" * 40)

    plot_results(results, args.output)
    print(f"\nBenchmark plot saved to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
