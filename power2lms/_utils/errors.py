# ._utils.errors.py

from __future__ import annotations


class InvalidConfiguration(ValueError):
    """Filter parameters are inconsistent (order, coefficient length, wordlength, step, tau)."""


class InvalidInput(ValueError):
    """Signals handed to ``optimize`` cannot be paired sample by sample."""


__all__ = ["InvalidConfiguration", "InvalidInput"]
