"""
Resource Templates

Raw message templates consumed by the tracer's convenience constructors.
"""

from enum import Enum
from typing import Any

from errtrace.core.formatting.template import render


class CommonResources(str, Enum):
    """Message templates keyed by a stable identifier."""

    ARGUMENT_NULL_OR_EMPTY = "The argument {0} is null or empty."
    ARGUMENT_NULL_OR_WHITE_SPACE = "The argument {0} is null or white space."


def get_string(resource: CommonResources | str, *args: Any) -> str:
    """
    Resolve a resource to its template and render it.

    Args:
        resource: A CommonResources member or raw template text
        *args: Positional template arguments

    Returns:
        The rendered message
    """
    template = resource.value if isinstance(resource, CommonResources) else resource
    return render(template, *args)
