"""Reading detector series from GC data files."""

from __future__ import annotations

import json
import os
from typing import Any, Union

import numpy as np


class ReadError(Exception):
    """Raised when a series file cannot be opened, parsed or understood."""


def _as_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ReadError("Failed to read all datapoints.")
    return float(value)


def read_series(path: Union[str, os.PathLike]) -> np.ndarray:
    """Return the values of the single detector in a JSON data file."""
    try:
        with open(path, encoding="utf-8") as handle:
            document = json.load(handle)
    except OSError as exc:
        raise ReadError(f"Could not open {os.fspath(path)!r}: {exc}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ReadError(f"Could not parse {os.fspath(path)!r}: {exc}") from exc

    if not isinstance(document, dict) or "detectors" not in document:
        raise ReadError("No detectors.")
    detectors = document["detectors"]
    if not isinstance(detectors, dict):
        raise ReadError("Invalid data format.")
    if len(detectors) > 1:
        raise ReadError("More than one detector.")
    if not detectors:
        raise ReadError("No detectors.")

    (detector,) = detectors.values()
    if not isinstance(detector, dict) or "values" not in detector:
        raise ReadError("No values read.")
    values = detector["values"]
    if not isinstance(values, list):
        raise ReadError("values property is not an array.")

    return np.array([_as_float(v) for v in values], dtype=float)