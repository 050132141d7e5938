"""
Context manager for type checking configuration (e.g., default depth bound).
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Context variable for the default max depth; None means unbounded
_max_depth: ContextVar[int | None] = ContextVar("max_depth", default=None)


def default_max_depth() -> int | None:
    """Depth bound used when a check does not pass max_depth."""
    return _max_depth.get()


@contextmanager
def checking_context(*, max_depth: int | None = None):
    """
    Context manager for type checking configuration.

    Args:
        max_depth: Default bound on table-content descent for checks run
                   inside the block. Calls passing max_depth explicitly
                   are unaffected.

    Example:
        from typespec import checking_context, check_value, struct

        config_type = struct({"servers": array(struct({"host": "string"}))})

        # Only verify the top-level shape of large payloads
        with checking_context(max_depth=1):
            check_value(payload, config_type)
    """
    token = _max_depth.set(max_depth)
    try:
        yield
    finally:
        _max_depth.reset(token)
