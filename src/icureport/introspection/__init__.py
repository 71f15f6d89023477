"""Template introspection: which placeholders does a message use?

Python 3.13+.
"""

from .placeholders import collect_argument_elements, extract_placeholders

__all__ = ["collect_argument_elements", "extract_placeholders"]
