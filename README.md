# gcanalyzer

Tools for working with gas chromatograph (GC) data from refrigerant
samples:

- read detector series exported as JSON,
- smooth signals,
- describe refrigerants, mixtures and GC readings,
- estimate how much of a known mixture a reading contains,
- solve a linear program for the share of each candidate mixture in a
  reading,
- plot every series in a directory to PNG images.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

```
gc-analyzer [DATA_DIR] [OUT_DIR]
```

`DATA_DIR` defaults to `gc-data` and `OUT_DIR` to `gc-data-img`; the
output directory is created if it does not exist. Every entry of the data
directory, in sorted order, is read with `read_series` and plotted as a
480×320 pixel red line chart, written as `OUT_DIR/<name>.png`, where a
trailing `.fusion-data` is removed from the file name. For each image the
command prints the output path and how many seconds drawing it took.

If the data directory cannot be listed, or a file cannot be read or holds
an empty series, the command prints an error to standard error and exits
with status 1 at that point; otherwise it exits with 0.

The same steps are available from Python through `gcanalyzer.cli`:
`read_data(path)`, `graph_data(data, name, out_dir="gc-data-img")`,
which returns the path of the written image, and `main(argv=None)`.

## Library

### Reading and smoothing signals

`gcanalyzer.signal_io.read_series(path)` opens a JSON file whose
`detectors` object holds exactly one detector with a `values` array of
numbers, and returns those values as a NumPy float array. A missing file,
malformed JSON, no detector, more than one detector, a missing or
non-array `values`, or a value that is not a number raises `ReadError`.

`gcanalyzer.preprocess` provides the `Smoother` interface, whose
`smooth(signal)` works in place on a mutable sequence, with two
implementations:

- `NoSmoothing` leaves the signal as it is;
- `MovingAverage(k)` replaces each sample with the mean of the samples
  from `k // 2` before it to `k // 2` after it (clipped at the ends).
  Samples are replaced in order, so later windows see already smoothed
  values. A `k` of zero or less raises `ValueError`.

`nearly_equal(a, b)` tells whether paired elements of two signals agree
to within floating-point rounding.

### Refrigerants and readings

`gcanalyzer.refrigerants` defines:

- `RefrigerantName`: a name normalised by `RefrigerantName.parse` to
  upper case with spaces removed, so `"r 32"` and `"R32"` are the same
  refrigerant;
- `GCReading`: the measured proportion of each component.
  `GCReading.parse("R32 0.5, R125 0.5")` builds one from text and raises
  `ValueError` on an entry without a valid number;
  `GCReading.from_dict({"components": {...}})` builds one from a mapping;
- `RefrigerantMixture`: a named mixture with its component proportions
  and a `ClassificationList`, buildable with `RefrigerantMixture.from_dict`
  from a mapping with `identifier`, `components` and optional
  `classifications`;
- `RefrigerantClassification`: a purity threshold with optional
  `max_lows` and `mixed_with` limits;
- `ClassificationResult`: a label, origin, purity and components, whose
  string form reads like
  `Origin: R32, Classified Label: Mixed, Purity: 99.500%, 1 total components.`

### Comparing and optimising

`gcanalyzer.optimization` offers:

- `valid_comparison(observed, target)`: whether a reading contains every
  component of a mixture;
- `find_concentration(observed, target)`: the largest share of the
  mixture the reading can hold, limited by its scarcest component and
  capped at 1, or `None` when the comparison is not valid;
- `find_max_low(observed, target)`: the smallest trace component
  (at most 0.05) in the reading that is not part of the mixture, or 0;
- `MixtureOptimization(reading, mixtures)`: a linear program over
  `(mixture, minimum share)` pairs. Each share lies between its minimum
  and 1, and the combined amount of every component may not exceed what
  the reading shows. `optimize_usage()` maximises how much of the reading
  is explained; `optimize_max_refrigerant(name)` additionally favours one
  named mixture. Both return a list of `(share, mixture)` pairs together
  with the objective value, and raise `OptimizationError` when the problem
  cannot be solved, no mixtures are given, or the named mixture is not
  among the candidates.

## What it does not do

The classification records describe thresholds and results, but the
package has no routine that classifies a reading against a mixture's
classification list, and the command does not load a configuration of
mixtures or analyse readings: it only plots detector series.