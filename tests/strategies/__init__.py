"""Hypothesis strategies for icureport property-based testing.

Strategies are organized by domain:

- icu: placeholder names, template text, locales, measurements and
  report documents

Usage:
    from tests.strategies.icu import placeholder_names, report_documents

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - raw_measurements, report_documents
"""

from .icu import (
    literal_text,
    placeholder_names,
    raw_measurements,
    report_documents,
    requested_locales,
)

__all__ = [
    "literal_text",
    "placeholder_names",
    "raw_measurements",
    "report_documents",
    "requested_locales",
]
