# ldsconverge

Measures how quickly different 1D sample sequences converge when used for
Monte Carlo integration over `[0, 1)`.

Each sequence integrates four test functions (triangle, step, sine and a
Gaussian bump) over many independent trials. After every sample the running
estimate is compared with the exact integral, and the absolute and squared
errors are averaged across trials and written to CSV files. All arithmetic
is carried out in single precision and all randomness comes from a seeded
PCG32 generator, so runs are reproducible.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the experiment

```
ldsconverge
```

For each test function this compares four point sets, `WhiteNoise`,
`GoldenRatio` (randomly offset), `Stratified` (random offset, jittered
cells in order) and `StratifiedGR` (random offset, jittered cells visited
with a golden-ratio stride), and writes
`out/<num-points>_<Function>.meanSquaredError.csv`. Progress is printed to
standard output.

Options:

- `--num-points N` — samples per trial (default 100).
- `--num-tests N` — number of trials (default 10000).
- `--output-dir DIR` — where the CSV files go (default `out`, created if
  missing).
- `--mean-abs-error` — also write `<num-points>_<Function>.meanAbsError.csv`.
- `--no-mean-squared-error` — skip the mean squared error files.
- `--no-graphs` — do not start the graphing script.

Non-positive `--num-points` or `--num-tests` make the command exit with
status 2.

Each CSV has a quoted header row `"Index"` followed by one column per point
set, then one row per sample count; every value is quoted and lines end in
`\r\n`.

### What is not included

After writing each CSV the command tries to start
`python csvlogloggraph.py <csv> <title>` in the current directory, without
waiting for it. That plotting script is not part of this package; if it is
not present nothing is drawn, and the CSV files are the only output. Pass
`--no-graphs` to skip the attempt.

## Using the pieces

The generators in `ldsconverge.points` take the number of points and a
sequence number that selects an independent random stream, and return a
list of floats in `[0, 1)`:

```python
from ldsconverge.points import (
    Ordering, PointOffset, SequenceOffset,
    golden_ratio, regular, vdc_points, white_noise,
)

noise = white_noise(16, 0)
gr = golden_ratio(16, 0, True)
stratified_gr = regular(
    16, 0, SequenceOffset.RANDOM, Ordering.SHUFFLE_GOLDEN_RATIO, PointOffset.STRATIFY
)
vdc2 = vdc_points(16, 0, 2, False)
```

Also in `ldsconverge.points`:

- `regular_repeat(...)` — several `regular` sets, each on its own stream,
  whose sizes add up to `num_points`.
- `van_der_corput(index, base, permute)` — the radical inverse of one index,
  with an optional digit permutation.
- `ostromoukhov60` and `ostromoukhov84` — permuted van der Corput sequences
  in bases 60 and 84.
- `vdc_thue_morse(num_points, sequence, base, random_offset)` — van der
  Corput with each group of `base` indices reordered by Thue–Morse.
- `kritzinger(num_points, sequence, random_offset)` — the Kritzinger
  sequence, cached per size.
- `make_rng(sequence)` and `random_float01(rng)` — the generator and the
  uniform draw used throughout.

Other modules:

- `ldsconverge.pcg.Pcg32(initstate, initseq)` — the PCG32 generator, with
  `next_uint32()` and `bounded(bound)`; it is also an infinite iterator.
- `ldsconverge.thue_morse.thue_morse(index, base)` — the Thue–Morse
  sequence in any base.
- `ldsconverge.coprime.irrational_coprime(n, irrational=GOLDEN_RATIO)` — the
  number below `n` and coprime to it that lies closest to
  `frac(irrational) * n`, used as a stride that visits all `n` items.
- `ldsconverge.kritzinger.KritzingerSequence` (grown with `add_point()`)
  and `kritzinger_points(count)` — the greedy Kritzinger low-discrepancy
  sequence.
- `ldsconverge.experiment` — the integrands `triangle`, `step`, `sine` and
  `gauss`; `run_test(name, make_points, function, actual_value, num_points,
  num_tests)`, which returns a `TestResults` with `mean_abs_error` and
  `mean_square_error` lists; `save_csv(path, results, write_one_over_root_n,
  data_source)` with `DataSource.MEAN_ABS_ERROR` or
  `DataSource.MEAN_SQUARED_ERROR`; and `make_graph(csv_path, title)`.