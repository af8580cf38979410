# ._utils.validation.py

from __future__ import annotations

from functools import wraps
from numbers import Integral, Real
from typing import Any, Callable, Optional

import numpy as np

from .errors import InvalidConfiguration
from .typing import RealArrayLike


def ensure_real_signals(func: Callable[..., Any]) -> Callable[..., Any]:
    """Reject complex-valued signals.

    Meant to sit under ``validate_input``, which always forwards the
    normalized ``(x, d)`` pair positionally.

    Raises
    ------
    TypeError:
        If complex data is detected.
    """
    @wraps(func)
    def wrapper(self, x, d, *args, **kwargs):
        if np.iscomplexobj(x) or np.iscomplexobj(d):
            raise TypeError(
                f"{self.__class__.__name__} does not support complex-valued signals."
            )
        return func(self, x, d, *args, **kwargs)

    return wrapper


def check_filter_order(filter_order: Any) -> int:
    """Return ``filter_order`` as int, rejecting negative or non-integral values."""
    if isinstance(filter_order, bool) or not isinstance(filter_order, Integral):
        raise InvalidConfiguration(
            f"filter_order must be a non-negative integer. Got {filter_order!r}."
        )
    order = int(filter_order)
    if order < 0:
        raise InvalidConfiguration(f"filter_order must be >= 0. Got filter_order={order}.")
    return order


def check_wordlength(bd: Any) -> int:
    """Return the data wordlength ``bd`` (bits, sign excluded) as a positive int."""
    if isinstance(bd, bool) or not isinstance(bd, Integral):
        raise InvalidConfiguration(f"bd must be a positive integer. Got bd={bd!r}.")
    if int(bd) <= 0:
        raise InvalidConfiguration(f"bd must be a positive integer. Got bd={int(bd)}.")
    return int(bd)


def check_finite_scalar(name: str, value: Any) -> float:
    """Return ``value`` as float, rejecting non-real or non-finite scalars."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidConfiguration(f"{name} must be a finite real number. Got {name}={value!r}.")
    value = float(value)
    if not np.isfinite(value):
        raise InvalidConfiguration(f"{name} must be a finite real number. Got {name}={value}.")
    return value


def check_initial_coefficients(w_init: Optional[RealArrayLike], n_coeffs: int) -> np.ndarray:
    """Return a fresh float64 copy of ``w_init`` with exactly ``n_coeffs`` taps.

    ``None`` gives the all-zeros vector.
    """
    if w_init is None:
        return np.zeros(n_coeffs, dtype=np.float64)

    w = np.asarray(w_init)
    if np.iscomplexobj(w):
        raise InvalidConfiguration("w_init must be real-valued for a real-valued filter.")

    w = np.array(w, dtype=np.float64).ravel()
    if w.size != n_coeffs:
        raise InvalidConfiguration(
            f"w_init must have filter_order + 1 = {n_coeffs} coefficients. Got {w.size}."
        )
    return w
#EOF
