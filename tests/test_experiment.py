from unittest import mock

import pytest

from ldsconverge.experiment import (
    INTEGRANDS,
    DataSource,
    TestResults,
    gauss,
    main,
    make_graph,
    run_test,
    save_csv,
    sine,
    step,
    triangle,
)
from ldsconverge.points import (
    Ordering,
    PointOffset,
    SequenceOffset,
    regular,
    white_noise,
)


def test_triangle_is_identity():
    assert triangle(0.25) == 0.25
    assert triangle(0.0) == 0.0


def test_step_threshold():
    assert step(0.39) == 1.0
    assert step(0.4) == 0.0
    assert step(0.9) == 0.0


def test_sine_and_gauss_shapes():
    assert sine(0.0) == 0.0
    assert gauss(0.5) == 1.0
    assert gauss(0.2) == pytest.approx(gauss(0.8), rel=1e-6)
    assert gauss(0.0) < gauss(0.25) < gauss(0.5)


def _midpoints(num_points, sequence):
    return regular(
        num_points,
        sequence,
        SequenceOffset.HALF_BUCKET,
        Ordering.SEQUENTIAL,
        PointOffset.NONE,
    )


@pytest.mark.parametrize("integrand", INTEGRANDS, ids=lambda i: i.name)
def test_actual_values_match_numeric_integral(integrand):
    n = 2000
    results = run_test(
        integrand.name, _midpoints, integrand.function, integrand.actual_value, n, 1
    )
    assert results.mean_abs_error[-1] == pytest.approx(0.0, abs=1e-4)


def test_run_test_constant_points():
    results = run_test("Const", lambda n, seq: [0.25] * n, triangle, 0.5, 5, 3)
    assert results.name == "Const"
    assert results.mean_abs_error == pytest.approx([0.25] * 5)
    for abs_err, sq_err in zip(results.mean_abs_error, results.mean_square_error):
        assert sq_err == pytest.approx(abs_err * abs_err)


def test_run_test_passes_trial_index_as_sequence():
    seen = []

    def make_points(n, seq):
        seen.append((n, seq))
        return [0.5] * n

    results = run_test("Seq", make_points, triangle, 0.5, 4, 3)
    assert seen == [(4, 0), (4, 1), (4, 2)]
    assert results.mean_abs_error == [0.0] * 4
    assert results.mean_square_error == [0.0] * 4


def test_run_test_white_noise_invariants():
    results = run_test("WhiteNoise", white_noise, triangle, 0.5, 20, 10)
    assert len(results.mean_abs_error) == 20
    assert len(results.mean_square_error) == 20
    assert all(v >= 0.0 for v in results.mean_square_error)
    assert all(0.0 <= v <= 0.5 for v in results.mean_abs_error)


def test_run_test_rejects_bad_counts():
    with pytest.raises(ValueError):
        run_test("X", white_noise, triangle, 0.5, 0, 1)
    with pytest.raises(ValueError):
        run_test("X", white_noise, triangle, 0.5, 3, 0)


def test_run_test_rejects_short_point_set():
    with pytest.raises(ValueError):
        run_test("Short", lambda n, seq: [0.5], triangle, 0.5, 3, 1)


def test_save_csv_format(tmp_path):
    path = tmp_path / "out.csv"
    results = [
        TestResults("A", [0.25, 0.5], [1.0, 2.0]),
        TestResults("B", [0.75, 1.0], [3.0, 4.0]),
    ]
    save_csv(path, results, False, DataSource.MEAN_ABS_ERROR)
    data = path.read_bytes()
    lines = data.split(b"\r\n")
    assert lines[0] == b'"Index","A","B"'
    assert lines[1] == b'"1","0.250000","0.750000"'
    assert lines[2] == b'"2","0.500000","1.000000"'
    assert lines[3] == b""


def test_save_csv_squared_with_root_n(tmp_path):
    path = tmp_path / "sq.csv"
    results = [TestResults("A", [0.25], [1.0])]
    save_csv(path, results, True, DataSource.MEAN_SQUARED_ERROR)
    lines = path.read_bytes().split(b"\r\n")
    assert lines[0] == b'"Index","OneOverRootN","A"'
    assert lines[1] == b'"1","1.000000","1.000000"'


def test_save_csv_requires_results(tmp_path):
    with pytest.raises(ValueError):
        save_csv(tmp_path / "x.csv", [], False, DataSource.MEAN_ABS_ERROR)


def test_make_graph_starts_script():
    with mock.patch("ldsconverge.experiment.subprocess.Popen") as popen:
        assert make_graph("out/data.csv", "Title") is True
    command = popen.call_args.args[0]
    assert command[1:] == ["csvlogloggraph.py", "out/data.csv", "Title"]


def test_make_graph_reports_failure():
    with mock.patch(
        "ldsconverge.experiment.subprocess.Popen", side_effect=OSError("missing")
    ):
        assert make_graph("data.csv", "Title") is False


def test_main_writes_csvs(tmp_path):
    out = tmp_path / "results"
    code = main(
        ["--num-points", "4", "--num-tests", "2", "--output-dir", str(out), "--no-graphs"]
    )
    assert code == 0
    files = sorted(p.name for p in out.iterdir())
    assert files == sorted(f"4_{i.name}.meanSquaredError.csv" for i in INTEGRANDS)
    header = (out / "4_Triangle.meanSquaredError.csv").read_bytes().split(b"\r\n")[0]
    assert header == b'"Index","WhiteNoise","GoldenRatio","Stratified","StratifiedGR"'


def test_main_starts_graphs(tmp_path):
    with mock.patch("ldsconverge.experiment.subprocess.Popen") as popen:
        code = main(
            [
                "--num-points", "3",
                "--num-tests", "1",
                "--output-dir", str(tmp_path),
                "--mean-abs-error",
            ]
        )
    assert code == 0
    assert popen.call_count == 2 * len(INTEGRANDS)
    assert len(list(tmp_path.iterdir())) == 2 * len(INTEGRANDS)


def test_main_rejects_bad_counts(tmp_path):
    assert main(["--num-points", "0", "--output-dir", str(tmp_path)]) == 2