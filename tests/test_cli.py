"""Tests for the command line entry point."""

import numpy as np
import pytest

from percolation.__main__ import main, parse_args


def test_defaults():
    args = parse_args([])
    assert (args.rows, args.cols) == (50, 50)
    assert args.trials == 100
    assert tuple(args.densities) == (1, 99)
    assert args.empty_grid == "zero"
    assert not args.strict


def test_run_writes_outputs(tmp_path):
    code = main(
        [
            "--rows", "6",
            "--cols", "6",
            "--trials", "3",
            "--densities", "40", "42",
            "--seed", "8",
            "--output", str(tmp_path),
            "--plot",
            "--log-level", "WARNING",
        ]
    )
    assert code == 0
    assert (tmp_path / "sweep.npz").exists()
    assert (tmp_path / "sweep.png").exists()

    table = np.loadtxt(tmp_path / "summary.csv", delimiter=",", skiprows=1, ndmin=2)
    assert table[:, 0].tolist() == [40.0, 41.0, 42.0]


@pytest.mark.parametrize("densities", [["50", "10"], ["-5", "10"], ["90", "101"]])
def test_bad_density_range_is_a_usage_error(densities, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["--densities", *densities])
    assert excinfo.value.code == 2
    assert "--densities" in capsys.readouterr().err
