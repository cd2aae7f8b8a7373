"""Diagnostics package: on by default, switched off via env (INGEST_DIAG=0)."""

from .metrics import log_aggregate_coverage, log_column_analysis

__all__ = [
    "log_aggregate_coverage",
    "log_column_analysis",
]
