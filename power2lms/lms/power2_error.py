#  lms.power2_error.py
#
#       Implements the Power-of-Two Error LMS algorithm for REAL valued data.
#       (Modified version of Algorithm 4.1 - book: Adaptive Filtering: Algorithms and Practical
#                                                              Implementation, Diniz)

from __future__ import annotations

from dataclasses import dataclass
from time import perf_counter
from typing import Any, Dict, Optional

import numpy as np

from power2lms.base import AdaptiveFilter, OptimizationResult, validate_input
from power2lms._utils.typing import ArrayLike, RealArrayLike
from power2lms._utils.validation import (
    check_finite_scalar,
    check_wordlength,
    ensure_real_signals,
)

__all__ = [
    "quantize_power2_error",
    "Power2ErrorConfig",
    "Power2ErrorLMS",
    "power2_error",
]


def quantize_power2_error(error: float, bd: int, tau: float) -> float:
    """
    Quantize an error sample to a signed power of two.

    Parameters
    ----------
    error : float
        A priori error ``e``.
    bd : int
        Data wordlength in bits, excluding the sign bit.
    tau : float
        Gain applied to ``sign(e)`` below the small-error threshold ``2^{-bd+1}``.

    Returns
    -------
    float
        ``0`` if ``e == 0``; ``sign(e)`` if ``|e| >= 1``; ``tau * sign(e)`` if
        ``|e| < 2^{-bd+1}``; otherwise ``2^{floor(log2|e|)} * sign(e)``.
        A NaN error is returned unchanged.
    """
    e = float(error)
    if e == 0.0:
        return 0.0
    if np.isnan(e):
        return e

    abs_error = abs(e)
    sign = 1.0 if e > 0.0 else -1.0

    if abs_error >= 1.0:
        return sign
    if abs_error < 2.0 ** (-int(bd) + 1):
        return float(tau) * sign

    # |e| = m * 2**exp with 0.5 <= m < 1, hence floor(log2|e|) = exp - 1 exactly
    _, exponent = np.frexp(abs_error)
    return float(np.ldexp(1.0, int(exponent) - 1)) * sign


@dataclass(frozen=True)
class Power2ErrorConfig:
    """
    Run parameters of the Power-of-Two Error LMS filter.

    Attributes
    ----------
    filter_order_no : int
        FIR filter order ``M`` (``M + 1`` coefficients).
    bd : int
        Data wordlength, excluding the sign bit (in bits).
    tau : float
        Gain factor for very small errors.
    step : float
        Convergence (relaxation) factor, factor 2 included by the caller.
    initial_coefficients : array_like of float, optional
        Initial coefficients ``w(0)``; zeros when omitted.
    """

    filter_order_no: int
    bd: int
    tau: float
    step: float = 1e-2
    initial_coefficients: Optional[RealArrayLike] = None


class Power2ErrorLMS(AdaptiveFilter):
    """
    Stateful Power-of-Two Error LMS filter (real-valued).

    Holds the coefficient vector between calls: each :meth:`optimize` resumes
    from ``self.w`` and appends to ``w_history``. Per sample it forms the
    newest-first regressor ``x_k`` (zeros before the first sample), computes
    ``y[k] = w^T x_k`` and ``e[k] = d[k] - y[k]``, and applies
    ``w += 2 * step_size * quantize_power2_error(e[k], bd, tau) * x_k``.

    Parameters
    ----------
    filter_order : int
        FIR order ``M`` (``M + 1`` taps).
    bd, tau :
        Quantizer parameters, see :func:`quantize_power2_error`.
    step_size : float, optional
        ``step`` of :class:`Power2ErrorConfig`, used as ``2 * step_size`` in the
        update. Default is 1e-2.
    w_init : array_like of float, optional
        Initial taps; zeros if None.

    Use :meth:`from_config` to build it from a :class:`Power2ErrorConfig`, or
    :func:`power2_error` for a one-shot run with a fresh filter.

    Notes
    -----
    Every parameter is checked at construction and raises
    :class:`~power2lms.InvalidConfiguration`. Non-finite values reached by a
    diverging run are not clamped; they propagate into later outputs and taps.
    """

    supports_complex: bool = False

    def __init__(
        self,
        filter_order: int,
        bd: int,
        tau: float,
        step_size: float = 1e-2,
        w_init: Optional[RealArrayLike] = None,
    ) -> None:
        super().__init__(filter_order=filter_order, w_init=w_init)
        self.bd = check_wordlength(bd)
        self.tau = check_finite_scalar("tau", tau)
        self.step_size = check_finite_scalar("step_size", step_size)

    @classmethod
    def from_config(cls, config: Power2ErrorConfig) -> "Power2ErrorLMS":
        """Build a filter from a :class:`Power2ErrorConfig`."""
        return cls(
            filter_order=config.filter_order_no,
            bd=config.bd,
            tau=config.tau,
            step_size=config.step,
            w_init=config.initial_coefficients,
        )

    @property
    def small_threshold(self) -> float:
        """Error magnitude ``2^{-bd+1}`` below which ``tau * sign(e)`` is used."""
        return 2.0 ** (-self.bd + 1)

    @validate_input
    @ensure_real_signals
    def optimize(
        self,
        input_signal: np.ndarray,
        desired_signal: np.ndarray,
        verbose: bool = False,
        return_internal_states: bool = False,
    ) -> OptimizationResult:
        """
        Executes the Power-of-Two Error LMS adaptation loop over paired sequences.

        Adaptation starts from the current coefficients ``self.w``.

        Parameters
        ----------
        input_signal : array_like of float
            Input sequence ``x[k]`` with shape ``(N,)`` (will be flattened).
        desired_signal : array_like of float
            Desired sequence ``d[k]`` with shape ``(N,)`` (will be flattened).
        verbose : bool, optional
            If True, prints the total runtime after completion.
        return_internal_states : bool, optional
            If True, includes in ``result.extra``: ``"quantized_errors"``
            (``q(e[k])`` for every k), ``"last_quantized_error"`` and
            ``"small_threshold"`` (``2^{-bd+1}``).

        Returns
        -------
        OptimizationResult
            - outputs : ndarray of float, shape ``(N,)``
            - errors : ndarray of float, shape ``(N,)``, ``e[k] = d[k] - y[k]``
            - coefficients : ndarray of float, shape ``(N + 1, M + 1)``;
              row 0 holds the coefficients the run started from.
            - error_type : ``"a_priori"``
            - extra : dict, present only if ``return_internal_states=True``.
        """
        t0 = perf_counter()

        x = np.asarray(input_signal, dtype=np.float64).ravel()
        d = np.asarray(desired_signal, dtype=np.float64).ravel()

        n_samples = int(x.size)
        m = int(self.filter_order)
        history_start = len(self.w_history) - 1

        outputs = np.zeros(n_samples, dtype=np.float64)
        errors = np.zeros(n_samples, dtype=np.float64)
        quantized = np.zeros(n_samples, dtype=np.float64)

        x_padded = np.zeros(n_samples + m, dtype=np.float64)
        x_padded[m:] = x

        two_mu = 2.0 * self.step_size

        with np.errstate(over="ignore", invalid="ignore"):
            for k in range(n_samples):
                x_k = x_padded[k : k + m + 1][::-1]

                y_k = float(np.dot(self.w, x_k))
                outputs[k] = y_k

                e_k = float(d[k] - y_k)
                errors[k] = e_k

                qe = quantize_power2_error(e_k, self.bd, self.tau)
                quantized[k] = qe

                self.w = self.w + two_mu * qe * x_k
                self._record_history()

        runtime_s = float(perf_counter() - t0)
        if verbose:
            print(f"[Power2ErrorLMS] Completed in {runtime_s * 1000:.03f} ms")

        extra: Optional[Dict[str, Any]] = None
        if return_internal_states:
            extra = {
                "quantized_errors": quantized,
                "last_quantized_error": float(quantized[-1]) if n_samples else None,
                "small_threshold": self.small_threshold,
            }

        return self._pack_results(
            outputs=outputs,
            errors=errors,
            runtime_s=runtime_s,
            history_start=history_start,
            error_type="a_priori",
            extra=extra,
        )


def power2_error(
    desired: ArrayLike,
    input_signal: ArrayLike,
    config: Power2ErrorConfig,
    verbose: bool = False,
) -> OptimizationResult:
    """
    Run the Power-of-Two Error LMS algorithm once over ``(desired, input_signal)``.

    Functional form of :class:`Power2ErrorLMS`: a fresh filter is built from
    ``config`` for every call, so calls share no state. The result unpacks as
    ``outputs, errors, coefficients``, where ``coefficients[0]`` equals
    ``config.initial_coefficients``.

    Raises
    ------
    InvalidConfiguration
        Bad order, coefficient count, wordlength, step or tau.
    InvalidInput
        ``desired`` and ``input_signal`` lengths differ.
    """
    filt = Power2ErrorLMS.from_config(config)
    return filt.optimize(input_signal=input_signal, desired_signal=desired, verbose=verbose)
# EOF
