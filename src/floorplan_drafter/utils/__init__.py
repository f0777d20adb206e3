"""Shared utilities (logging setup)."""

from .logging_config import FloorPlanLogger, get_logger

__all__ = ["FloorPlanLogger", "get_logger"]
