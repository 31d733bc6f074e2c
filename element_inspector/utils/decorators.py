import logging
from functools import wraps
from typing import Callable, TypeVar

from selenium.common.exceptions import WebDriverException

logger = logging.getLogger(__name__)


T = TypeVar('T')

def error_handler(default: T = None) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Decorator for best-effort WebDriver helpers.

    A WebDriver failure (closed window, stale element, script error) is
    logged and the helper returns `default` instead.
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except WebDriverException as e:
                logger.warning(f"Error in {func.__name__}: {e.msg or e}")
                return default
        return wrapper
    return decorator
