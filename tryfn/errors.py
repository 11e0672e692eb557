"""Normalization of failure signals into exceptions."""

from typing import Any

from typing_extensions import TypeIs

UNKNOWN_ERROR_PREFIX = "Unknown error: "


class UnknownError(Exception):
    """A failure signal that was not an exception."""

    def __init__(self, message: str, signal: Any = None):
        super().__init__(message)
        self.message = message
        self.signal = signal


def is_error_like(obj: object) -> TypeIs[Exception]:
    """Whether ``obj`` already carries a message the way errors do."""
    return isinstance(obj, Exception)


def _display(signal: object) -> str:
    # str() runs arbitrary __str__ code and may itself fail
    try:
        return str(signal)
    except Exception:
        try:
            return repr(signal)
        except Exception:
            return object.__repr__(signal)


def normalize_error(signal: object) -> Exception:
    """Return ``signal`` unchanged if it is an exception, else wrap it.

    Args:
        signal: Whatever a computation failed with.

    Returns:
        The signal itself, or an UnknownError whose message is
        ``"Unknown error: "`` followed by the signal's string form.
    """
    if is_error_like(signal):
        return signal
    return UnknownError(f"{UNKNOWN_ERROR_PREFIX}{_display(signal)}", signal=signal)
