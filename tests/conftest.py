# tests/conftest.py

from __future__ import annotations

import numpy as np
import pytest
from scipy import signal

from power2lms.base import OptimizationResult


def _last_coefficients(obj):
    """
    Extract 'final' coefficients from the supported containers.

    Supported:
      - OptimizationResult: uses result.coefficients (last snapshot)
      - np.ndarray/list: 2D is treated as a history (last row), 1D as final coefficients
    """
    if isinstance(obj, OptimizationResult):
        obj = obj.coefficients

    coeffs = np.asarray(obj)
    if coeffs.ndim >= 2:
        return coeffs[-1]
    return coeffs


@pytest.fixture
def calculate_msd():
    """
    Mean-square deviation (MSD) between true coefficients and an estimate.

    Accepts w_est as a final coefficient vector, a coefficient history or an
    OptimizationResult.
    """
    def _calc(w_true, w_est):
        w_true_flat = np.asarray(w_true).reshape(-1)
        w_hat_flat = np.asarray(_last_coefficients(w_est)).reshape(-1)

        if w_true_flat.shape != w_hat_flat.shape:
            raise ValueError(
                f"MSD shape mismatch: w_true has {w_true_flat.shape}, w_est has {w_hat_flat.shape}"
            )

        return float(np.mean(np.abs(w_true_flat - w_hat_flat) ** 2))

    return _calc


@pytest.fixture
def system_data():
    rng = np.random.default_rng(42)
    n_samples = 5000

    w_optimal = np.array([0.4, -0.2, 0.1], dtype=np.float64)
    order = int(len(w_optimal) - 1)

    x = rng.standard_normal(n_samples).astype(np.float64, copy=False)
    d_ideal = signal.lfilter(w_optimal, 1, x).astype(np.float64, copy=False)

    return {
        "x": x,
        "d_ideal": d_ideal,
        "w_optimal": w_optimal,
        "order": order,
        "n_samples": n_samples,
    }


@pytest.fixture
def correlated_data():
    rng = np.random.default_rng(42)
    n_samples = 2000

    h_unknown = np.array([0.6, -0.3, 0.1, 0.05], dtype=np.float64)
    order = int(len(h_unknown) - 1)

    white_noise = rng.standard_normal(n_samples).astype(np.float64, copy=False)
    x = np.convolve(white_noise, np.array([1.0, 0.8, 0.5], dtype=np.float64), mode="full")[:n_samples]

    d = np.convolve(x, h_unknown, mode="full")[:n_samples].astype(np.float64, copy=False)

    return x, d, h_unknown, order


@pytest.fixture
def short_random_run():
    """Sinais curtos e aleatórios para checar invariantes de formato."""
    rng = np.random.default_rng(7)
    n_samples = 64
    x = rng.standard_normal(n_samples)
    d = 0.5 * rng.standard_normal(n_samples)
    return x, d
