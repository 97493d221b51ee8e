from __future__ import annotations


class AxisTicsError(ValueError):
    """Raised when axis endpoints or tic parameters cannot produce tics."""
