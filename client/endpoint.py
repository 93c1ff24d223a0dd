"""
Endpoint resolution for service clients.
"""
import re
from typing import Any, Optional

from config import ClientConfig
from logger_config import get_logger
from utils.exceptions import EndpointResolutionError

logger = get_logger(__name__)

HOST_LABEL = re.compile(r"^[A-Za-z0-9-]{1,63}$")
PLACEHOLDER = re.compile(r"\{(\w+)\}")


class EndpointProvider:
    """
    Builds the base URL of every request a client sends.

    Without an override the URL is derived from the endpoint prefix and the
    configured region; operations with a host prefix get it expanded from
    the request's endpoint context parameters.
    """

    def __init__(self, endpoint_prefix: str, config: ClientConfig):
        self.endpoint_prefix = endpoint_prefix
        self.config = config
        self._override: Optional[str] = config.endpoint_override

    def override_endpoint(self, url: str) -> None:
        """Send every later request to `url` instead of the regional endpoint."""
        if "://" not in url:
            url = f"{self.config.scheme}://{url}"
        self._override = url.rstrip("/")
        logger.info(f"Endpoint for {self.endpoint_prefix} overridden to {self._override}")

    @property
    def base_endpoint(self) -> str:
        if self._override:
            return self._override.rstrip("/")
        region = self.config.region
        suffix = "amazonaws.com.cn" if region.startswith("cn-") else "amazonaws.com"
        return f"{self.config.scheme}://{self.endpoint_prefix}.{region}.{suffix}"

    def resolve_endpoint(self, request: Any) -> str:
        endpoint = self.base_endpoint
        host_prefix = request.HTTP.host_prefix
        if not host_prefix:
            return endpoint
        prefix = self.expand_host_prefix(request, host_prefix)
        scheme, _, host = endpoint.partition("://")
        return f"{scheme}://{prefix}{host}"

    def expand_host_prefix(self, request: Any, host_prefix: str) -> str:
        params = request.get_endpoint_context_params()
        operation = request.get_service_request_name()

        def substitute(match):
            name = match.group(1)
            value = params.get(name)
            if not value:
                raise EndpointResolutionError(
                    f"Host label {name} is required by {operation}",
                    operation=operation,
                )
            if not HOST_LABEL.match(value):
                raise EndpointResolutionError(
                    f"Host label {name} is not a valid DNS label: {value}",
                    operation=operation,
                )
            return value

        return PLACEHOLDER.sub(substitute, host_prefix)
