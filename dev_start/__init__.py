"""
dev-start - A read-only development environment status reporter
"""

from .__version__ import __version__
from .core import EnvironmentReporter
from .cli.main import main

__all__ = ["EnvironmentReporter", "main", "__version__"]
