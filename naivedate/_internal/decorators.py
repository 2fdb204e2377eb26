"""Custom decorators for naivedate.

This module provides decorator utilities for the library:
    - @deprecated(message): Mark functions as deprecated with warnings
    - @failsafe(default): Turn expected naivedate errors into a default result

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import logging
import warnings
from typing import Callable, ParamSpec, TypeVar

from naivedate.errors import NaiveDateError

P = ParamSpec("P")
T = TypeVar("T")
D = TypeVar("D")

logger = logging.getLogger(__name__)


def deprecated(message: str) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Mark a function as deprecated with a warning message.

    This is a parameterized decorator that emits a DeprecationWarning
    when the decorated function is called.

    Args:
        message: The deprecation message explaining what to use instead.

    Returns:
        A decorator function.

    Examples:
        >>> @deprecated("Use complete() instead")
        ... def get(prefix):
        ...     return complete(prefix)

        >>> get("2024")  # Emits DeprecationWarning
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            warnings.warn(
                f"{func.__name__} is deprecated: {message}",
                DeprecationWarning,
                stacklevel=2,
            )
            return func(*args, **kwargs)

        # Mark the wrapper as deprecated for introspection
        wrapper._deprecated = True  # type: ignore[attr-defined]
        wrapper._deprecation_message = message  # type: ignore[attr-defined]
        return wrapper

    return decorator


def failsafe(default: D) -> Callable[[Callable[P, T]], Callable[P, T | D]]:
    """Return ``default`` instead of raising expected naivedate errors.

    Only NaiveDateError and its subclasses are caught; anything else is
    a bug in naivedate and propagates.

    Args:
        default: The value returned when the wrapped call fails.

    Returns:
        A decorator function.

    Examples:
        >>> @failsafe(None)
        ... def weekday(s):
        ...     return CalendarDate.parse(s).weekday_name

        >>> weekday("2024-02-30") is None
        True
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T | D]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T | D:
            try:
                return func(*args, **kwargs)
            except NaiveDateError as exc:
                logger.debug("%s%r failed: %s", func.__name__, args, exc)
                return default

        return wrapper

    return decorator


__all__ = [
    "deprecated",
    "failsafe",
]
