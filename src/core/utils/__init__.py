"""
Utility modules for core functionality.

Modules:
- decorators: timing helpers
"""

from .decorators import timer

__all__ = ["timer"]
