"""Data models for dev-start."""

from .environment import Marker, VenvState, VenvDiscovery, BusyPort

__all__ = ["Marker", "VenvState", "VenvDiscovery", "BusyPort"]
