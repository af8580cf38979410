# power2lms/lms/__init__.py

from .power2_error import Power2ErrorConfig, Power2ErrorLMS, power2_error, quantize_power2_error

__all__ = [
    "Power2ErrorLMS",
    "Power2ErrorConfig",
    "power2_error",
    "quantize_power2_error",
]
