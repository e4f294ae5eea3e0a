"""
Bounded Template Rendering

Renders resource templates with positional arguments while capping the size
any single string argument can contribute to the output.

Usage:
    render("The argument {0} is null or empty.", "address")
"""

from typing import Any

from errtrace.core.config.constants import (
    ELLIPSIS,
    MAX_FORMAT_ARGUMENT_LENGTH,
    TRUNCATED_ARGUMENT_LENGTH,
)
from errtrace.core.logging import get_logger

logger = get_logger(__name__)


def truncate_argument(value: Any) -> Any:
    """
    Cut an oversized string argument down to MAX_FORMAT_ARGUMENT_LENGTH.

    Strings of up to 1024 characters and all non-string values are returned
    unchanged. Longer strings keep their first 1021 characters plus "...".
    """
    if isinstance(value, str) and len(value) > MAX_FORMAT_ARGUMENT_LENGTH:
        return value[:TRUNCATED_ARGUMENT_LENGTH] + ELLIPSIS
    return value


def render(template: str, *args: Any) -> str:
    """
    Render a template with positional ``{0}``-style placeholders.

    With no arguments the template is returned as is, so literal braces in
    argument-free templates are never interpreted. A template that does not
    match its arguments (stray braces, missing indexes) is also returned as
    is; rendering never raises.

    Args:
        template: Raw template text
        *args: Positional arguments; the caller's objects are not modified

    Returns:
        The rendered string
    """
    if not args:
        return template

    try:
        return template.format(*[truncate_argument(arg) for arg in args])
    except Exception as e:  # noqa: BLE001
        logger.debug(
            "template_render_failed",
            error_type=type(e).__name__,
            argument_count=len(args),
        )
        return template
