"""Diagnostics package.

Consumers of the fixed-point core: sample printer, full-domain error
statistics and (with numpy + matplotlib) an error plot.
"""

__all__ = ["demo", "stats", "error_plot"]
