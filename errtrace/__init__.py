"""
errtrace: exception tracing and bounded message formatting for client libraries.
"""

__version__ = "1.0.0"
