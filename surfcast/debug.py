# ABOUTME: Debug output helpers gated on the DEBUG environment flag
# ABOUTME: Tracing lives in a decorator so the scoring math stays free of logging

import functools
import logging

from surfcast.config import Config

log = logging.getLogger(__name__)


def debug_log(message: str, category: str = "APP") -> None:
    """Print a tagged debug line when DEBUG=true."""
    if Config.DEBUG:
        print(f"[{category}] {message}", flush=True)


def traced(category: str):
    """
    Wrap a pure function so its inputs and result are logged in debug mode.

    The wrapped function is called exactly once with the same arguments,
    so tracing never changes what it returns.

    Args:
        category: Tag used as the debug_log prefix, e.g. "SCORING"
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            result = func(*args, **kwargs)
            if Config.DEBUG:
                debug_log(f"{func.__name__} args={args} kwargs={kwargs} -> {result}", category)
                log.debug("%s(%s, %s) -> %s", func.__name__, args, kwargs, result)
            return result
        return wrapper
    return decorator
