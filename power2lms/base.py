# base.py

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional

import numpy as np

from power2lms._utils.errors import InvalidInput
from power2lms._utils.typing import ArrayLike, RealArrayLike
from power2lms._utils.validation import check_filter_order, check_initial_coefficients


@dataclass
class OptimizationResult:
    """Standard output container for adaptation runs.

    Attributes
    ----------
    outputs:
        Estimated output signal y[k] produced by the adaptive filter.
    errors:
        A priori error signal e[k] = d[k] - y[k].
    coefficients:
        Coefficient history of the run, shape (N + 1, n_coeffs). Row 0 holds the
        coefficients the run started from.
    algorithm:
        Algorithm name (usually class name).
    runtime_ms:
        Runtime in milliseconds.
    error_type:
        Error semantics tag.
    extra:
        Optional container for internal states / debug info.

    Notes
    -----
    The result unpacks as ``outputs, errors, coefficients = result`` and also
    accepts key access (``result["errors"]``) for code written against the
    older dictionary outputs.
    """

    outputs: np.ndarray
    errors: np.ndarray
    coefficients: np.ndarray
    algorithm: str
    runtime_ms: float
    error_type: str = "a_priori"
    extra: Optional[Dict[str, Any]] = None

    _KEYS = ("outputs", "errors", "coefficients", "algorithm", "runtime_ms", "error_type", "extra")

    def mse(self) -> np.ndarray:
        """Instantaneous squared error."""
        return np.abs(self.errors) ** 2

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter((self.outputs, self.errors, self.coefficients))

    def __getitem__(self, key: str) -> Any:
        if key in self._KEYS:
            return getattr(self, key)
        raise KeyError(key)

    def __repr__(self) -> str:
        return f"<OptimizationResult algo={self.algorithm} samples={len(self.outputs)}>"


def validate_input(method: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to validate and normalize `optimize` inputs.

    Accepts all of the following calling styles:

    1) Standard, preferred:
        optimize(input_signal=..., desired_signal=..., **kwargs)
        optimize(input_signal, desired_signal, **kwargs)

    2) Legacy aliases:
        optimize(x=..., d=..., **kwargs)
        optimize(x, d, **kwargs)

    Notes
    -----
    - Signals are converted with `np.asarray` and flattened to 1D (ravel).
    - Complex signals are passed through untouched so that the dtype guard of
      the filter can reject them; everything else is cast to float.
    - Missing desired signal or length mismatch raises InvalidInput.
    """
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        input_signal = None
        desired_signal = None

        if len(args) >= 1:
            input_signal = args[0]
        if len(args) >= 2:
            desired_signal = args[1]
        args = args[2:]

        if "input_signal" in kwargs:
            input_signal = kwargs.pop("input_signal")
        if "desired_signal" in kwargs:
            desired_signal = kwargs.pop("desired_signal")

        if "x" in kwargs:
            input_signal = kwargs.pop("x")
        if "d" in kwargs:
            desired_signal = kwargs.pop("d")

        if input_signal is None:
            raise TypeError("Missing input signal: pass input_signal (or alias x).")
        if desired_signal is None:
            raise InvalidInput("Missing desired signal: pass desired_signal (or alias d).")

        x = np.ravel(np.asarray(input_signal))
        d = np.ravel(np.asarray(desired_signal))
        if x.shape[0] != d.shape[0]:
            raise InvalidInput(
                f"Inconsistent lengths: input({x.shape[0]}) != desired({d.shape[0]})"
            )

        dtype = complex if np.iscomplexobj(x) or np.iscomplexobj(d) else float
        x = x.astype(dtype, copy=False)
        d = d.astype(dtype, copy=False)

        return method(self, x, d, *args, **kwargs)

    return wrapper


class AdaptiveFilter(ABC):
    """Abstract base class for transversal (FIR) adaptive filters.

    Parameters
    ----------
    filter_order:
        Order in the FIR sense (number of taps - 1).
    w_init:
        Initial coefficient vector with ``filter_order + 1`` entries. If None,
        initialized to zeros.

    Notes
    -----
    - Subclasses are expected to call `_record_history()` every iteration.
    - Invalid order or coefficient length raises InvalidConfiguration.
    """

    supports_complex: bool = False

    def __init__(self, filter_order: int, w_init: Optional[RealArrayLike] = None) -> None:
        self.filter_order: int = check_filter_order(filter_order)
        self.n_coeffs: int = self.filter_order + 1

        self.w: np.ndarray = check_initial_coefficients(w_init, self.n_coeffs)

        self.w_history: List[np.ndarray] = []
        self._record_history()

    def _record_history(self) -> None:
        """Store a snapshot of current coefficients."""
        self.w_history.append(np.asarray(self.w).copy())

    def _pack_results(
        self,
        outputs: np.ndarray,
        errors: np.ndarray,
        runtime_s: float,
        history_start: int = 0,
        error_type: str = "a_priori",
        extra: Optional[Dict[str, Any]] = None,
    ) -> OptimizationResult:
        """Centralized output packaging to standardize results.

        ``history_start`` is the index in ``w_history`` of the snapshot the run
        started from, so repeated ``optimize`` calls each report their own
        N + 1 snapshots.
        """
        coefficients = np.asarray(self.w_history[history_start:], dtype=np.float64)
        return OptimizationResult(
            outputs=np.asarray(outputs),
            errors=np.asarray(errors),
            coefficients=coefficients.reshape(-1, self.n_coeffs),
            algorithm=self.__class__.__name__,
            runtime_ms=float(runtime_s) * 1000.0,
            error_type=str(error_type),
            extra=extra,
        )

    def filter_signal(self, input_signal: ArrayLike) -> np.ndarray:
        """Filter an input signal using current coefficients (no adaptation).

        Regressor convention:
            x_k = [x[k], x[k-1], ..., x[k-m]]
        and output:
            y[k] = w^T x_k
        """
        x = np.asarray(input_signal, dtype=np.float64).ravel()
        n_samples = x.size
        y = np.zeros(n_samples, dtype=np.float64)

        x_padded = np.zeros(n_samples + self.filter_order, dtype=np.float64)
        x_padded[self.filter_order:] = x

        for k in range(n_samples):
            x_k = x_padded[k : k + self.filter_order + 1][::-1]
            y[k] = np.dot(self.w, x_k)

        return y

    @abstractmethod
    def optimize(
        self,
        input_signal: ArrayLike,
        desired_signal: ArrayLike,
        **kwargs: Any,
    ) -> OptimizationResult:
        """Run the adaptation procedure."""
        raise NotImplementedError

    def reset_filter(self, w_new: Optional[RealArrayLike] = None) -> None:
        """Reset coefficients and history."""
        self.w = check_initial_coefficients(w_new, self.n_coeffs)
        self.w_history = []
        self._record_history()
#EOF
