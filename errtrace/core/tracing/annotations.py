"""
Annotation Bag Helpers

Every exception instance carries a private ``_errtrace_data`` dict used to
record which tracers have already seen it. Marker presence is what matters,
not the value.
"""

from typing import Any

from errtrace.core.config.constants import TRACE_DATA_ATTRIBUTE


def annotation_bag(exception: BaseException) -> dict[str, Any]:
    """
    Return the exception's annotation bag, creating it on first access.

    Args:
        exception: Any exception instance

    Returns:
        The mutable bag stored on the instance
    """
    bag = getattr(exception, TRACE_DATA_ATTRIBUTE, None)
    if not isinstance(bag, dict):
        bag = {}
        setattr(exception, TRACE_DATA_ATTRIBUTE, bag)
    return bag


def is_traced_by(exception: BaseException, event_source_name: str) -> bool:
    """Check whether a tracer with this identity already traced the exception."""
    bag = getattr(exception, TRACE_DATA_ATTRIBUTE, None)
    return isinstance(bag, dict) and event_source_name in bag


def mark_traced(exception: BaseException, event_source_name: str) -> None:
    annotation_bag(exception)[event_source_name] = event_source_name
