# power2lms/__init__.py

from .base import AdaptiveFilter, OptimizationResult
from .lms import *
from ._utils.errors import InvalidConfiguration, InvalidInput
from ._utils.metrics import db10, mse_db, msd

__version__ = "0.1.0"

__all__ = ["AdaptiveFilter", "OptimizationResult",
    "Power2ErrorLMS", "Power2ErrorConfig", "power2_error", "quantize_power2_error",
    "InvalidConfiguration", "InvalidInput",
    "db10", "mse_db", "msd",
    "info"]


def info():
    """Prints an overview of the package."""
    print("\n" + "="*70)
    print("      power2lms - Power-of-Two Error LMS adaptive filtering")
    print("      Reference: 'Adaptive Filtering' by Paulo S. R. Diniz, Alg. 4.1")
    print("="*70)
    sections = {
        "Filter": "Power2ErrorLMS (real-valued FIR, quantized-error update)",
        "Functional": "power2_error(desired, input_signal, config)",
        "Quantizer": "quantize_power2_error(error, bd, tau)",
        "Metrics": "db10, mse_db, msd",
    }
    for name, desc in sections.items():
        print(f"\n{name:12}: {desc}")

    print("\n" + "-"*70)
    print("Usage example: from power2lms import Power2ErrorLMS")
    print("Documentation: help(power2lms.Power2ErrorLMS)")
    print("="*70 + "\n")
