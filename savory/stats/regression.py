"""Provide the straight-line least-squares fit used by shelf-life kinetics.

This module supports:
- the Arrhenius fit of ``ln(rate)`` against ``1 / T``, and
- goodness-of-fit diagnostics reported alongside the fitted parameters.
"""

from __future__ import annotations

import math
from typing import Dict

import numpy as np


def linear_regression(
    x: np.ndarray, y: np.ndarray, min_points: int = 2
) -> Dict[str, float]:
    """Fit an ordinary least-squares straight line from closed-form sums.

    Args:
        x (numpy.ndarray): Independent variable array.
        y (numpy.ndarray): Dependent variable array, same length as ``x``.
        min_points (int, optional): Minimum number of finite paired
            observations required. Defaults to ``2``.

    Returns:
        dict[str, float]: Regression diagnostics with keys ``m`` (slope),
        ``b`` (intercept), ``r2`` (coefficient of determination, ``0`` when
        ``y`` has no variance), ``sse``, ``sst``, ``se_m`` (NaN with fewer than
        three points) and ``n``.

    Raises:
        ValueError: If there are fewer than ``min_points`` finite pairs or all
            ``x`` values coincide.

    Note:
        ``m = (n Σxy - Σx Σy) / (n Σx² - (Σx)²)`` and
        ``b = (Σy - m Σx) / n``.

    References:
        Ordinary least squares linear regression.
    """
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    mask = np.isfinite(x_arr) & np.isfinite(y_arr)
    x_arr = x_arr[mask]
    y_arr = y_arr[mask]
    n = int(len(x_arr))
    if n < min_points:
        raise ValueError("Insufficient valid data for regression.")

    sum_x = float(np.sum(x_arr))
    sum_y = float(np.sum(y_arr))
    sum_xy = float(np.sum(x_arr * y_arr))
    sum_x2 = float(np.sum(x_arr**2))

    denom = n * sum_x2 - sum_x**2
    if np.ptp(x_arr) == 0 or denom == 0:
        raise ValueError("Insufficient x variance for regression.")

    m = (n * sum_xy - sum_x * sum_y) / denom
    b = (sum_y - m * sum_x) / n

    resid = y_arr - (b + m * x_arr)
    sse = float(np.sum(resid**2))
    sst = float(np.sum((y_arr - sum_y / n) ** 2))
    r2 = 1.0 - sse / sst if sst > 0 else 0.0

    se_m = math.nan
    dof = n - 2
    ssxx = float(np.sum((x_arr - sum_x / n) ** 2))
    if dof > 0 and ssxx > 0:
        se_m = math.sqrt((sse / dof) / ssxx)

    return {
        "m": float(m),
        "b": float(b),
        "r2": float(r2),
        "sse": sse,
        "sst": sst,
        "se_m": se_m,
        "n": n,
    }
