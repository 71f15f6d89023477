"""Validation utilities for locale data.

Python 3.13+.
"""

from icureport.validation.locale_data import validate_locale_data

__all__ = [
    "validate_locale_data",
]
