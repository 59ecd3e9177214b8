import json

import numpy as np
import pytest

from gcanalyzer.signal_io import ReadError, read_series


def _write(tmp_path, document, name="sample.fusion-data"):
    path = tmp_path / name
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


def test_fail():
    with pytest.raises(ReadError):
        read_series("NOTAFILE")


def test_reads_values(tmp_path):
    path = _write(tmp_path, {"detectors": {"tcd": {"values": [1, 2.5, -3]}}})
    result = read_series(path)
    assert result.dtype == np.float64
    assert result.tolist() == [1.0, 2.5, -3.0]


def test_accepts_str_path(tmp_path):
    path = _write(tmp_path, {"detectors": {"a": {"values": []}}})
    assert read_series(str(path)).size == 0


def test_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ReadError, match="Could not parse"):
        read_series(path)


@pytest.mark.parametrize(
    "document, message",
    [
        ({}, "No detectors."),
        ({"detectors": []}, "Invalid data format."),
        ({"detectors": {}}, "No detectors."),
        ({"detectors": {"a": {"values": []}, "b": {"values": []}}}, "More than one detector."),
        ({"detectors": {"a": {}}}, "No values read."),
        ({"detectors": {"a": 5}}, "No values read."),
        ({"detectors": {"a": {"values": 3}}}, "values property is not an array."),
        ({"detectors": {"a": {"values": [1, "x"]}}}, "Failed to read all datapoints."),
        ({"detectors": {"a": {"values": [True]}}}, "Failed to read all datapoints."),
        ({"detectors": {"a": {"values": [None]}}}, "Failed to read all datapoints."),
    ],
)
def test_format_errors(tmp_path, document, message):
    path = _write(tmp_path, document)
    with pytest.raises(ReadError) as info:
        read_series(path)
    assert str(info.value) == message