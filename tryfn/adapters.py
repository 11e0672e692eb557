"""Adapters turning raised failures into Result values.

Both adapters capture ``Exception`` only. Interpreter control-flow signals
(KeyboardInterrupt, SystemExit, asyncio.CancelledError) still propagate,
so cancelling a task awaiting ``try_async_fn`` cancels it as usual.
"""

from collections.abc import Awaitable, Callable

from tryfn.errors import normalize_error
from tryfn.logging_config import get_logger
from tryfn.result import Err, Ok, Result

logger = get_logger("tryfn.adapters")


def _capture(adapter: str, signal: object) -> Err[Exception]:
    error = normalize_error(signal)
    logger.debug(
        "failure captured",
        adapter=adapter,
        error_type=type(error).__name__,
        normalized=error is not signal,
    )
    return Err(error)


def try_sync_fn[T](fn: Callable[[], T]) -> Result[T, Exception]:
    """Call ``fn`` once and wrap its outcome.

    Args:
        fn: Zero-argument callable to run in the caller's context.

    Returns:
        Ok(value) if it returned, Err(error) if it raised.
    """
    try:
        return Ok(fn())
    except Exception as e:
        return _capture("sync", e)


async def try_async_fn[T](operation: Awaitable[T]) -> Result[T, Exception]:
    """Await an already created operation and wrap its outcome.

    The operation is awaited, never started or retried here. Passing the
    same Task or Future twice yields the same result both times.

    Args:
        operation: Task, Future or other awaitable owned by the caller.

    Returns:
        Ok(value) if it completed, Err(error) if it failed.
    """
    try:
        value = await operation
    except Exception as e:
        return _capture("async", e)
    return Ok(value)
