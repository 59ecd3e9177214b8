"""Render every GC data file in a directory as a line chart."""

from __future__ import annotations

import argparse
import os
import sys
import time
from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np
from matplotlib.figure import Figure

from gcanalyzer.signal_io import ReadError, read_series

DATA_SUFFIX = ".fusion-data"
DEFAULT_DATA_DIR = "gc-data"
DEFAULT_IMAGE_DIR = "gc-data-img"
WIDTH_PX, HEIGHT_PX = 480, 320
_DPI = 100


def read_data(path: Union[str, os.PathLike]) -> np.ndarray:
    """Read the detector series stored at ``path``."""
    return read_series(path)


def _strip_suffix(name: str) -> str:
    while name.endswith(DATA_SUFFIX):
        name = name[: -len(DATA_SUFFIX)]
    return name


def graph_data(
    data: Sequence[float],
    name: str,
    out_dir: Union[str, os.PathLike] = DEFAULT_IMAGE_DIR,
) -> Path:
    """Plot ``data`` to ``<out_dir>/<name>.png`` and return the image path."""
    values = np.asarray(data, dtype=float)
    if values.size == 0:
        raise ValueError("cannot plot an empty series")
    start = time.perf_counter()
    target = Path(out_dir) / f"{_strip_suffix(name)}.png"

    figure = Figure(figsize=(WIDTH_PX / _DPI, HEIGHT_PX / _DPI), dpi=_DPI)
    figure.patch.set_facecolor("white")
    axes = figure.add_subplot()
    axes.set_title("diggity")
    axes.plot(np.arange(values.size), values, color="red", label="y = DATYAAAA")
    axes.set_xlim(0, values.size)
    axes.set_ylim(-50.0, float(values.max()))
    axes.grid(True)
    figure.savefig(target, dpi=_DPI)

    print(f"{target}: {time.perf_counter() - start:.6f}s")
    return target


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Plot GC detector series.")
    parser.add_argument("data_dir", nargs="?", default=DEFAULT_DATA_DIR)
    parser.add_argument("out_dir", nargs="?", default=DEFAULT_IMAGE_DIR)
    args = parser.parse_args(argv)

    os.makedirs(args.out_dir, exist_ok=True)
    try:
        entries = sorted(Path(args.data_dir).iterdir())
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for entry in entries:
        try:
            graph_data(read_data(entry), entry.name, args.out_dir)
        except (ReadError, ValueError) as exc:
            print(f"error: {entry}: {exc}", file=sys.stderr)
            return 1
    return 0