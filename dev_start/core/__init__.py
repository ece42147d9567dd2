"""Core reporting for dev-start."""

from .reporter import EnvironmentReporter

__all__ = ["EnvironmentReporter"]
