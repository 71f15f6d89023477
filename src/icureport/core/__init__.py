"""Core utilities shared across syntax, runtime and localization layers.

By isolating these utilities here, we maintain a clean dependency graph:

    core <- syntax <- runtime <- localization

Exports:
    DepthGuard: Context manager for recursion depth limiting
    DepthLimitExceededError: Exception raised when depth limit exceeded

Python 3.13+.
"""

from .depth_guard import DepthGuard, DepthLimitExceededError

__all__ = ["DepthGuard", "DepthLimitExceededError"]
