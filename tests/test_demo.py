import os

import pytest

from echelon.benchmark import benchmark
from echelon.benchmark import main as benchmark_main
from echelon.demo import main, output_section


def test_output_section():
    assert output_section("INVERSE") == "\t\t---- INVERSE ----\n"


def test_demo_runs(capsys):
    assert main(["--seed", "3"]) == 0
    out = capsys.readouterr().out

    for name in ("ECHELON REDUCTION", "TEST MATRICES", "RANDOM MATRICES", "INVERSE"):
        assert output_section(name) in out
    assert out.count("Matrix:") == 4
    assert out.count("Inverse:") == 3
    assert "non-square matrix of shape 5x4" in out
    assert "[+] Program terminated in" in out


def test_benchmark_single_size(capsys):
    result = benchmark(n=8, trials=1)

    assert result["n"] == 8
    assert result["numpy_gj_error"] < 1e-9
    assert result["torch_gj_error"] < 1e-9
    assert "Matrix size: 8x8" in capsys.readouterr().out


def test_benchmark_writes_plot(tmp_path):
    path = os.path.join(str(tmp_path), "plots", "benchmark.png")
    assert benchmark_main(["--sizes", "4", "8", "--trials", "1", "--device", "cpu", "--output", path]) == 0
    assert os.path.exists(path)


def test_demo_rejects_negative_tol(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--tol", "-1"])
    assert exc.value.code == 2
    assert "--tol must be non-negative" in capsys.readouterr().err
