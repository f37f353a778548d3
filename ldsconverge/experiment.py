"""Convergence experiment: integrate test functions with different point sets.

For every integrand the running Monte Carlo estimate from each point set is
compared with the known integral. Errors are averaged over many independent
trials, written to CSV files and handed to an external graphing script.
"""

from __future__ import annotations

import argparse
import enum
import math
import struct
import subprocess
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path

from ldsconverge.points import (
    Ordering,
    PointOffset,
    SequenceOffset,
    golden_ratio,
    regular,
    white_noise,
)

MakePointsFn = Callable[[int, int], Sequence[float]]
IntegrandFn = Callable[[float], float]

GRAPH_SCRIPT = "csvlogloggraph.py"

_STEP_EDGE = 0.4


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _lerp(a: float, b: float, t: float) -> float:
    return _f32(_f32(a * _f32(1.0 - t)) + _f32(b * t))


def triangle(x: float) -> float:
    """y = x; integrates to 1/2 over [0, 1)."""
    return _f32(x)


def step(x: float) -> float:
    """y = 1 below 0.4, else 0; integrates to 0.4 over [0, 1)."""
    return float(x < _STEP_EDGE)


def sine(x: float) -> float:
    """y = sin(4x); integrates to sin(2)^2 / 2 over [0, 1)."""
    return _f32(math.sin(_f32(4.0 * x)))


def gauss(x: float) -> float:
    """y = exp(-32 (x - 0.5)^2)."""
    x = _f32(x - 0.5)
    return _f32(math.exp(_f32(_f32(-32.0 * x) * x)))


@dataclass(frozen=True)
class Integrand:
    """A test function together with its exact integral over [0, 1)."""

    name: str
    function: IntegrandFn
    equation: str
    actual_value: float


INTEGRANDS: tuple[Integrand, ...] = (
    Integrand("Triangle", triangle, "y = x\nx in [0,1)", 0.5),
    Integrand("Step", step, "y = (x < 0.4) ? 1.0 : 0.0\nx in [0,1)", _f32(0.4)),
    Integrand(
        "Sine",
        sine,
        "y = sin(4x)\nx in [0,1)",
        _f32(_f32(_f32(math.sin(2.0)) * _f32(math.sin(2.0))) / 2.0),
    ),
    Integrand("Gauss", gauss, "y = e^(-32(x-0.5)^2)\nx in [0,1)", _f32(0.313309)),
)


def point_set_generators() -> list[tuple[str, MakePointsFn]]:
    """Return the named point set generators compared by the experiment."""
    return [
        ("WhiteNoise", white_noise),
        ("GoldenRatio", partial(golden_ratio, random_offset=True)),
        (
            "Stratified",
            partial(
                regular,
                sequence_offset=SequenceOffset.RANDOM,
                ordering=Ordering.SEQUENTIAL,
                point_offset=PointOffset.STRATIFY,
            ),
        ),
        (
            "StratifiedGR",
            partial(
                regular,
                sequence_offset=SequenceOffset.RANDOM,
                ordering=Ordering.SHUFFLE_GOLDEN_RATIO,
                point_offset=PointOffset.STRATIFY,
            ),
        ),
    ]


@dataclass
class TestResults:
    """Per-sample-count errors of one point set, averaged over all trials."""

    __test__ = False  # not a pytest test class

    name: str
    mean_abs_error: list[float] = field(default_factory=list)
    mean_square_error: list[float] = field(default_factory=list)


class DataSource(enum.Enum):
    """Which averaged error a CSV file holds."""

    MEAN_ABS_ERROR = "mean_abs_error"
    MEAN_SQUARED_ERROR = "mean_squared_error"


class _Progress:
    def __init__(self, total: int) -> None:
        self.total = total
        self.done = 0
        self.last_percent = 0

    def tick(self) -> None:
        self.done += 1
        percent = int(100.0 * self.done / self.total)
        if percent != self.last_percent:
            print(f"\r{percent}%", end="", flush=True)
            self.last_percent = percent

    def finish(self) -> int:
        """Mark the work complete and return how many steps were counted."""
        counted = self.done
        self.done = self.total
        self.last_percent = 100
        print("\r100%")
        return counted


def _trial_errors(
    points: Sequence[float], function: IntegrandFn, actual_value: float
) -> tuple[list[float], list[float]]:
    abs_errors: list[float] = []
    square_errors: list[float] = []
    estimate = 0.0
    for count, x in enumerate(points, start=1):
        estimate = _lerp(estimate, function(x), _f32(1.0 / count))
        error = _f32(estimate - actual_value)
        abs_errors.append(abs(error))
        square_errors.append(_f32(error * error))
    return abs_errors, square_errors


def run_test(
    name: str,
    make_points: MakePointsFn,
    function: IntegrandFn,
    actual_value: float,
    num_points: int,
    num_tests: int,
) -> TestResults:
    """Integrate ``function`` with ``num_tests`` point sets and average the errors.

    Trial ``i`` uses the points ``make_points(num_points, i)``. Entry ``k`` of
    the results is the error after ``k + 1`` samples.
    """
    if num_points < 1:
        raise ValueError(f"num_points must be positive, got {num_points}")
    if num_tests < 1:
        raise ValueError(f"num_tests must be positive, got {num_tests}")

    print(name)
    abs_trials: list[list[float]] = []
    square_trials: list[list[float]] = []
    progress = _Progress(num_tests)
    for test_index in range(num_tests):
        points = list(make_points(num_points, test_index))
        if len(points) < num_points:
            raise ValueError(
                f"{name}: expected {num_points} points, got {len(points)}"
            )
        abs_errors, square_errors = _trial_errors(
            points[:num_points], function, actual_value
        )
        abs_trials.append(abs_errors)
        square_trials.append(square_errors)
        progress.tick()
    progress.finish()

    results = TestResults(name)
    for abs_column, square_column in zip(zip(*abs_trials), zip(*square_trials)):
        mean_abs = 0.0
        mean_square = 0.0
        for count, (abs_error, square_error) in enumerate(
            zip(abs_column, square_column), start=1
        ):
            t = _f32(1.0 / count)
            mean_abs = _lerp(mean_abs, abs_error, t)
            mean_square = _lerp(mean_square, square_error, t)
        results.mean_abs_error.append(mean_abs)
        results.mean_square_error.append(mean_square)
    print("\r100%")
    return results


def save_csv(
    path: str | Path,
    results: Sequence[TestResults],
    write_one_over_root_n: bool,
    data_source: DataSource,
) -> None:
    """Write one column per result set, one row per sample count."""
    if not results:
        raise ValueError("at least one result set is required")

    header = ['"Index"']
    if write_one_over_root_n:
        header.append('"OneOverRootN"')
    header.extend(f'"{result.name}"' for result in results)
    lines = [",".join(header)]

    for row in range(len(results[0].mean_abs_error)):
        cells = [f'"{row + 1}"']
        if write_one_over_root_n:
            cells.append(f'"{_f32(1.0 / math.sqrt(row + 1)):f}"')
        for result in results:
            series = (
                result.mean_abs_error
                if data_source is DataSource.MEAN_ABS_ERROR
                else result.mean_square_error
            )
            cells.append(f'"{series[row]:f}"')
        lines.append(",".join(cells))

    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write("".join(line + "\r\n" for line in lines))


def make_graph(csv_path: str | Path, title: str) -> bool:
    """Start the graphing script on ``csv_path`` without waiting for it.

    Returns False if the process could not be started.
    """
    try:
        subprocess.Popen(
            [sys.executable, GRAPH_SCRIPT, str(csv_path), title],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError:
        return False
    return True


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compare integration error convergence of 1D point sets."
    )
    parser.add_argument("--num-points", type=int, default=100)
    parser.add_argument("--num-tests", type=int, default=10000)
    parser.add_argument("--output-dir", type=Path, default=Path("out"))
    parser.add_argument(
        "--mean-abs-error",
        action="store_true",
        help="also write mean absolute error CSVs",
    )
    parser.add_argument(
        "--no-mean-squared-error",
        action="store_true",
        help="skip the mean squared error CSVs",
    )
    parser.add_argument(
        "--no-graphs", action="store_true", help="do not start the graphing script"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run every point set against every integrand and save the results."""
    args = _parse_args(argv)
    if args.num_points < 1 or args.num_tests < 1:
        print("num-points and num-tests must be positive", file=sys.stderr)
        return 2
    args.output_dir.mkdir(parents=True, exist_ok=True)

    outputs: list[tuple[DataSource, str, str]] = []
    if args.mean_abs_error:
        outputs.append((DataSource.MEAN_ABS_ERROR, "meanAbsError", "Mean Abs Error"))
    if not args.no_mean_squared_error:
        outputs.append(
            (DataSource.MEAN_SQUARED_ERROR, "meanSquaredError", "Mean Squared Error")
        )

    for integrand in INTEGRANDS:
        print(
            f"[{integrand.name}]\nDoing {args.num_tests} tests for "
            f"{args.num_points} points:\n"
        )
        results = [
            run_test(
                name,
                make_points,
                integrand.function,
                integrand.actual_value,
                args.num_points,
                args.num_tests,
            )
            for name, make_points in point_set_generators()
        ]

        print("\nSaving csvs and making graphs")
        for data_source, suffix, label in outputs:
            csv_path = args.output_dir / f"{args.num_points}_{integrand.name}.{suffix}.csv"
            save_csv(csv_path, results, False, data_source)
            if not args.no_graphs:
                print("Making Graph\n")
                title = (
                    f"{integrand.name}: {label} Over {args.num_tests} Tests \n"
                    f"{integrand.equation}"
                )
                make_graph(csv_path, title)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())