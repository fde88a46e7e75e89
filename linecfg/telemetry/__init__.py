"""Telemetry and observability helpers.

This package emits operation events for deterministic auditing of settings
file changes.
"""

from .logger import OperationLogger

__all__ = ["OperationLogger"]
