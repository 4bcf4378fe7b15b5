"""Utility functions."""

from .objects import project_objects

__all__ = ["project_objects"]
