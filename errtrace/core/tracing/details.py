"""
Exception Detail Rendering

Turns an exception into the text written to the trace sink: the message
line(s) followed by the exception's own traceback, or by the current call
stack when the exception was never raised.
"""

import traceback

from errtrace.core.config.constants import ELLIPSIS, MAX_STACK_TRACE_LENGTH


def format_exception_slim(exception: BaseException) -> str:
    """
    Render ``Type: message`` for the exception and the exceptions it wraps.

    Chained causes are appended as `` ---> Type: message`` segments,
    without any traceback.

    Args:
        exception: The exception to render

    Returns:
        str: One line per exception in the chain
    """
    lines = []
    seen = set()
    current: BaseException | None = exception

    while current is not None and id(current) not in seen:
        seen.add(id(current))
        text = "".join(traceback.format_exception_only(type(current), current)).rstrip("\n")
        lines.append(text if not lines else f" ---> {text}")

        if current.__cause__ is not None:
            current = current.__cause__
        elif current.__context__ is not None and not current.__suppress_context__:
            current = current.__context__
        else:
            current = None

    return "\n".join(lines)


def current_stack_trace(max_length: int = MAX_STACK_TRACE_LENGTH) -> str:
    """
    Capture the caller's call stack, innermost frame first.

    Args:
        max_length: Characters kept before the stack is cut

    Returns:
        str: The stack, ending in "..." if it was longer than max_length
    """
    # Drop this function's own frame
    frames = traceback.extract_stack()[:-1]
    frames.reverse()
    stack = "".join(traceback.format_list(frames))

    if len(stack) > max_length:
        stack = stack[:max_length] + ELLIPSIS

    return stack


def format_details(exception: BaseException) -> str:
    """
    Build the detail text logged for a traced exception.

    An exception that has been raised carries its own traceback, which is
    used as is. One that was only constructed gets the current call stack
    instead, so every record has some locality information.

    Args:
        exception: The exception to describe

    Returns:
        str: Message followed by a traceback or the current call stack
    """
    details = format_exception_slim(exception)

    if exception.__traceback__ is not None:
        stack = "".join(traceback.format_tb(exception.__traceback__))
        return f"{details}\nTraceback (most recent call last):\n{stack}"

    return f"{details}\n{current_stack_trace()}"
