import numpy as np
from typing import Any, Optional

from .typing import ArrayLike


def db10(x: ArrayLike, *, eps: float = 1e-20) -> np.ndarray:
    """10*log10(x) with numerical guard."""
    x = np.asarray(x, dtype=float)
    return 10.0 * np.log10(np.maximum(x, eps))


def mse_db(errors: ArrayLike, *, tail_window: Optional[int] = None, eps: float = 1e-20) -> float:
    """
    Mean squared error in dB.

    If ``tail_window`` is a positive int, only the last ``tail_window`` samples
    are averaged (all of them when the signal is shorter). NaN/inf errors give NaN.
    """
    e = np.asarray(errors, dtype=float).ravel()
    if e.size == 0:
        return float("nan")
    if tail_window is not None and int(tail_window) > 0:
        e = e[-min(e.size, int(tail_window)):]
    mse = float(np.mean(e ** 2))
    if not np.isfinite(mse):
        return float("nan")
    return float(db10(np.array([mse]), eps=eps)[0])


def msd(w_true: ArrayLike, w_est: Any) -> float:
    """
    Mean-square deviation between true coefficients and an estimate.

    ``w_est`` may be a final coefficient vector, a coefficient history
    (last row is used) or any object exposing ``coefficients`` such as
    :class:`~power2lms.base.OptimizationResult`.
    """
    coeffs = getattr(w_est, "coefficients", w_est)
    w_hat = np.asarray(coeffs, dtype=float)
    if w_hat.ndim >= 2:
        w_hat = w_hat[-1]

    w_true_flat = np.asarray(w_true, dtype=float).reshape(-1)
    w_hat_flat = w_hat.reshape(-1)
    if w_true_flat.shape != w_hat_flat.shape:
        raise ValueError(
            f"MSD shape mismatch: w_true has {w_true_flat.shape}, w_est has {w_hat_flat.shape}"
        )
    return float(np.mean((w_true_flat - w_hat_flat) ** 2))
