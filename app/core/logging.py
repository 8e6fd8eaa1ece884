import functools
import logging
import time

from app.core.config import settings

logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))

method_logger = logging.getLogger("app.method")
exception_logger = logging.getLogger("app.exception")


def log_service_call(func):
    """
    Log entry, exit and failures of a service method.

    Entry logs the call arguments (without ``self``), exit logs elapsed time and
    the return type. Exceptions are logged with their traceback on the
    ``app.exception`` logger and re-raised unchanged.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        name = func.__qualname__
        method_logger.info(f">>> Entering {name}")
        method_logger.debug(f"    Arguments: args={args[1:]!r} kwargs={kwargs!r}")

        start = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            elapsed_ms = (time.perf_counter() - start) * 1000
            method_logger.error(f"!!! Exception in {name} after {elapsed_ms:.1f} ms")
            exception_logger.error(
                f"{name} raised {type(e).__name__}: {e}", exc_info=True
            )
            raise

        elapsed_ms = (time.perf_counter() - start) * 1000
        method_logger.info(
            f"<<< Exiting {name} ({elapsed_ms:.1f} ms) -> {type(result).__name__}"
        )
        return result

    return wrapper
