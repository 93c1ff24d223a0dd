"""
Client operation decorator for invocation ids and logging.
"""
import functools
import time
import uuid
from contextvars import ContextVar
from typing import Callable, Any, Optional
from logger_config import get_logger

logger = get_logger(__name__)

# Invocation id of the operation running in the current thread
current_invocation_id: ContextVar[Optional[str]] = ContextVar(
    "current_invocation_id", default=None
)


def service_operation(func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator for service client operation methods.

    Provides:
    - An invocation id per call, readable through current_invocation_id
      and sent as the amz-sdk-invocation-id header
    - Invocation, completion and failure logging

    Errors are logged and re-raised unchanged.

    Args:
        func: The client method to decorate, called as func(client, request)

    Returns:
        Decorated client method
    """
    @functools.wraps(func)
    def wrapper(client: Any, request: Any, *args: Any, **kwargs: Any) -> Any:
        invocation_id = str(uuid.uuid4())
        token = current_invocation_id.set(invocation_id)
        operation = request.get_service_request_name()
        service = getattr(client, "SERVICE_NAME", type(client).__name__)
        started = time.monotonic()

        logger.info(
            f"Operation {service}.{operation} invoked",
            extra={"invocation_id": invocation_id, "operation": operation}
        )

        try:
            result = func(client, request, *args, **kwargs)
        except Exception as e:
            logger.error(
                f"Operation {service}.{operation} failed: {str(e)}",
                extra={"invocation_id": invocation_id, "operation": operation},
                exc_info=True
            )
            raise
        finally:
            current_invocation_id.reset(token)

        elapsed_ms = (time.monotonic() - started) * 1000
        logger.info(
            f"Operation {service}.{operation} completed in {elapsed_ms:.1f} ms",
            extra={"invocation_id": invocation_id, "operation": operation}
        )
        return result

    return wrapper
