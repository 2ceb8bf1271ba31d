"""Core lookup logic shared by commands."""

from .resolver import EnvironmentResolver

__all__ = ["EnvironmentResolver"]
