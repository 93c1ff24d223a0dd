"""
Base class shared by every service client.

A client owns an endpoint provider, a signer, an HTTP transport and a lazily
created thread pool for asynchronous submission. Operation methods on the
service clients only pick the result class; make_request does the rest.
"""
import uuid
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, Optional, Type, Union

from botocore.credentials import Credentials
from botocore.exceptions import BotoCoreError

from client.endpoint import EndpointProvider
from client.signer import RequestSigner
from client.transport import HttpTransport
from config import ClientConfig, get_config
from logger_config import get_logger
from utils.decorators import current_invocation_id
from utils.exceptions import MissingParameterError, SdkError, ServiceError

logger = get_logger(__name__)


@dataclass(frozen=True)
class ServiceMetadata:
    """Static identity of a service: its names on the wire and for signing."""

    service_name: str
    endpoint_prefix: str
    signing_name: str
    api_version: str


@dataclass
class Outcome:
    """Either the result of an operation or the error it failed with."""

    result: Any = None
    error: Optional[Exception] = None

    @property
    def is_success(self) -> bool:
        return self.error is None


OperationRef = Union[str, Callable[[Any], Any]]
AsyncHandler = Callable[[Any, Any, Outcome, Any], None]


class ServiceClient:
    """Generic request pipeline for one service."""

    METADATA: ClassVar[ServiceMetadata]
    ERRORS: ClassVar[Dict[str, Type[ServiceError]]] = {}

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        credentials: Optional[Credentials] = None,
    ):
        """
        Initialize the client.

        Args:
            config: Client settings, defaults to the environment configuration
            credentials: Fixed credentials; the boto3 chain is used when omitted
        """
        self.config = config or get_config()
        self.endpoint_provider = EndpointProvider(self.METADATA.endpoint_prefix, self.config)
        self.signer = RequestSigner(
            self.METADATA.signing_name,
            self.config.region,
            credentials=credentials,
            profile_name=self.config.profile_name,
        )
        self.transport = HttpTransport(self.config)
        self._executor: Optional[ThreadPoolExecutor] = None

    @property
    def SERVICE_NAME(self) -> str:
        return self.METADATA.service_name

    @property
    def executor(self) -> ThreadPoolExecutor:
        """Lazy initialization of the shared thread pool."""
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self.config.max_connections,
                thread_name_prefix=self.METADATA.service_name,
            )
        return self._executor

    def override_endpoint(self, url: str) -> None:
        self.endpoint_provider.override_endpoint(url)

    def make_request(self, request: Any, result_cls: type) -> Any:
        """
        Send one request and parse its response.

        Raises:
            MissingParameterError: If a required URI, header or host field is unset
            EndpointResolutionError: If the endpoint cannot be built
            NetworkError: If the HTTP call fails
            ServiceError: If the service answers with an error
        """
        operation = request.get_service_request_name()
        missing = request.missing_required_fields()
        if missing:
            raise MissingParameterError(
                f"Missing required field [{missing[0]}] for {operation}",
                field=missing[0],
                operation=operation,
            )

        endpoint = self.endpoint_provider.resolve_endpoint(request)
        http_request = request.PROTOCOL.build_http_request(request, endpoint)
        http_request.headers.setdefault("User-Agent", self.config.user_agent)
        http_request.headers["amz-sdk-invocation-id"] = current_invocation_id.get() or str(uuid.uuid4())
        http_request.headers["amz-sdk-request"] = "attempt=1; max=1"

        self.signer.sign(http_request)
        response = self.transport.send(http_request)

        if response.status_code >= 300:
            error = request.PROTOCOL.parse_error(response, self.ERRORS)
            logger.warning(
                f"{self.SERVICE_NAME}.{operation} returned HTTP {response.status_code}: {str(error)}"
            )
            raise error
        return request.PROTOCOL.parse_result(result_cls, response)

    def _resolve_operation(self, operation: OperationRef) -> Callable[[Any], Any]:
        if isinstance(operation, str):
            return getattr(self, operation)
        return operation

    def submit_callable(self, operation: OperationRef, request: Any) -> Future:
        """
        Run an operation on the client's thread pool.

        Args:
            operation: Client method or its name, e.g. "get_deployment_config"
            request: Request to send; a clone is dispatched

        Returns:
            Future resolving to the result or raising the operation's error
        """
        method = self._resolve_operation(operation)
        return self.executor.submit(method, request.clone())

    def submit_async(
        self,
        operation: OperationRef,
        request: Any,
        handler: AsyncHandler,
        context: Any = None,
    ) -> Future:
        """
        Run an operation on the thread pool and report its Outcome to handler.

        The handler is called as handler(client, request, outcome, context)
        on the worker thread once the operation finishes.
        """
        method = self._resolve_operation(operation)
        dispatched = request.clone()

        def run() -> None:
            try:
                outcome = Outcome(result=method(dispatched))
            except (SdkError, BotoCoreError) as e:
                outcome = Outcome(error=e)
            handler(self, dispatched, outcome, context)

        return self.executor.submit(run)

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
        self.transport.close()

    def __enter__(self) -> "ServiceClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
