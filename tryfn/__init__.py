from .adapters import try_async_fn, try_sync_fn
from .config import Settings
from .errors import UnknownError, is_error_like, normalize_error
from .logging_config import get_logger, setup_logging
from .result import Err, Ok, Result, err, is_err, is_ok, ok

__all__ = [
    "Err",
    "Ok",
    "Result",
    "Settings",
    "UnknownError",
    "err",
    "get_logger",
    "is_err",
    "is_error_like",
    "is_ok",
    "normalize_error",
    "ok",
    "setup_logging",
    "try_async_fn",
    "try_sync_fn",
]
