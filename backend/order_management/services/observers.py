"""
Service observers

Service methods are wrapped with @observed(...) instead of logging inline.
The interceptor notifies every observer attached to the service before the
call, after it succeeds and when it raises; the exception is always re-raised.
"""
import functools
import logging
from typing import Any, Callable, Dict, List
from uuid import UUID

from order_management.core.exceptions import ApplicationError

logger = logging.getLogger(__name__)


class ServiceObserver:
    """Base observer; every hook is a no-op"""

    def before(self, operation: str, context: Dict[str, Any]) -> None:
        pass

    def succeeded(self, operation: str, result: Any) -> None:
        pass

    def failed(self, operation: str, error: Exception) -> None:
        pass


class LoggingObserver(ServiceObserver):
    """
    Logs service calls

    Only identifiers are logged; request bodies may carry passwords.
    """

    def __init__(self, log: logging.Logger = None):
        self.log = log or logger

    def before(self, operation: str, context: Dict[str, Any]) -> None:
        ids = context.get("ids")
        if ids:
            self.log.info(f"{operation} started for {', '.join(ids)}")
        else:
            self.log.info(f"{operation} started")

    def succeeded(self, operation: str, result: Any) -> None:
        if isinstance(result, list):
            self.log.info(f"{operation} succeeded ({len(result)} records)")
        elif getattr(result, "id", None) is not None:
            self.log.info(f"{operation} succeeded: {result.id}")
        else:
            self.log.info(f"{operation} succeeded")

    def failed(self, operation: str, error: Exception) -> None:
        if isinstance(error, ApplicationError):
            self.log.warning(f"{operation} rejected: {error.message}")
        else:
            self.log.error(f"{operation} failed: {error}", exc_info=error)


def observed(operation: str) -> Callable:
    """
    Decorator for service methods

    The decorated method's instance must expose an `observers` list.
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            observers: List[ServiceObserver] = getattr(self, "observers", [])
            context = {
                "ids": [str(value) for value in (*args, *kwargs.values()) if isinstance(value, UUID)],
            }

            for observer in observers:
                observer.before(operation, context)

            try:
                result = func(self, *args, **kwargs)
            except Exception as e:
                for observer in observers:
                    observer.failed(operation, e)
                raise

            for observer in observers:
                observer.succeeded(operation, result)
            return result

        return wrapper
    return decorator
