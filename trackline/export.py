# -*- coding: utf-8 -*-
# Trackline/trackline/export.py

"""
Project: Trackline
Author: Erfan Vaezi
Date: 10/19/2026

Purpose:
--------
Plain-text coordinate dumps of lines and polygons for spreadsheets and external
plotting tools: tab-separated columns x, y (and z for 3D lines), one point per row,
no header.

Main Tasks:
-----------
    1. `to_tsv(shape)`: the dump as a string.
    2. `write_tsv(shape, path)`: the same rows written with the csv module.
"""

import csv
import logging
import os

import numpy as np

from .errors import InvalidInputError

logger = logging.getLogger(__name__)

__all__ = ["to_tsv", "write_tsv"]


def _rows(shape):
    points = getattr(shape, "points", None)
    if not isinstance(points, np.ndarray) or points.ndim != 2:
        raise InvalidInputError(
            "Expected a line or polygon with a points array, got {}".format(type(shape).__name__)
        )
    for row in points:
        yield [repr(float(v)) for v in row]


def to_tsv(shape) -> str:
    """Tab-separated coordinates, one point per line."""
    return "".join("\t".join(row) + "\n" for row in _rows(shape))


def write_tsv(shape, path: str) -> str:
    """
    Write the tab-separated dump of `shape` to `path`.

    Parameters
    ----------
    shape : PolyLine2d, PolyLine3d or ConvexPolygon
        Anything exposing an (N, d) `points` array.
    path : str
        Output file path; missing folders are created.

    Returns
    -------
    str
        Written file path.
    """
    rows = list(_rows(shape))

    folder = os.path.dirname(os.path.abspath(path))
    if folder and not os.path.exists(folder):
        os.makedirs(folder, exist_ok=True)

    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f, delimiter="\t", lineterminator="\n")
        w.writerows(rows)
    logger.info("[export] %d points written to: %s", len(rows), path)
    return path
