"""
Formatting Module

Size-bounded template rendering and the message template catalog.
"""

from errtrace.core.formatting.resources import CommonResources, get_string
from errtrace.core.formatting.template import render, truncate_argument

__all__ = [
    "CommonResources",
    "get_string",
    "render",
    "truncate_argument",
]
