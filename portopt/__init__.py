"""Portfolio statistics, weight sampling, grid resolution choice and demonstration reports."""

__version__ = "0.1.0"
__all__ = ["analytics", "sampling", "optimizer", "reports", "demo"]