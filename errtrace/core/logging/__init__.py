from .logger import (
    clear_activity_id,
    get_activity_id,
    get_logger,
    set_activity_id,
    setup_logging,
)

__all__ = [
    "clear_activity_id",
    "get_activity_id",
    "get_logger",
    "set_activity_id",
    "setup_logging",
]
