"""
AWS App Mesh virtual routers (REST-JSON protocol).
"""
from enum import Enum

from client.base import ServiceClient, ServiceMetadata
from model import (
    EnumField,
    HttpBinding,
    Integer,
    List,
    ServiceRequest,
    ServiceResult,
    Shape,
    String,
    Structure,
    Timestamp,
)
from model.fields import QUERYSTRING, URI
from protocols.rest_json import RestJsonProtocol
from utils.decorators import service_operation
from utils.exceptions import ServiceError

METADATA = ServiceMetadata(
    service_name="App Mesh",
    endpoint_prefix="appmesh",
    signing_name="appmesh",
    api_version="2019-01-25",
)


class PortProtocol(str, Enum):
    HTTP = "http"
    TCP = "tcp"
    HTTP2 = "http2"
    GRPC = "grpc"


class DurationUnit(str, Enum):
    S = "s"
    MS = "ms"


class TcpRetryPolicyEvent(str, Enum):
    CONNECTION_ERROR = "connection-error"


class VirtualRouterStatusCode(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    DELETED = "DELETED"


class Duration(Shape):
    unit = EnumField("unit", DurationUnit)
    value = Integer("value")


class HttpRetryPolicy(Shape):
    """
    Retry policy for HTTP routes.

    http_retry_events takes server-error, gateway-error, client-error or
    stream-error; tcp_retry_events only takes connection-error. At least
    one event is needed for the policy to have any effect.
    """

    http_retry_events = List("httpRetryEvents", String())
    max_retries = Integer("maxRetries")
    per_retry_timeout = Structure("perRetryTimeout", Duration)
    tcp_retry_events = List("tcpRetryEvents", EnumField(enum_cls=TcpRetryPolicyEvent))


class WeightedTarget(Shape):
    virtual_node = String("virtualNode")
    weight = Integer("weight")
    port = Integer("port")


class TcpRouteAction(Shape):
    weighted_targets = List("weightedTargets", Structure(shape_cls=WeightedTarget))


class PortMapping(Shape):
    port = Integer("port")
    protocol = EnumField("protocol", PortProtocol)


class VirtualRouterListener(Shape):
    port_mapping = Structure("portMapping", PortMapping)


class VirtualRouterSpec(Shape):
    listeners = List("listeners", Structure(shape_cls=VirtualRouterListener))


class TagRef(Shape):
    key = String("key")
    value = String("value")


class ResourceMetadata(Shape):
    arn = String("arn")
    created_at = Timestamp("createdAt")
    last_updated_at = Timestamp("lastUpdatedAt")
    mesh_owner = String("meshOwner")
    resource_owner = String("resourceOwner")
    uid = String("uid")
    version = Integer("version")


class VirtualRouterStatus(Shape):
    status = EnumField("status", VirtualRouterStatusCode)


class VirtualRouterData(Shape):
    mesh_name = String("meshName")
    metadata = Structure("metadata", ResourceMetadata)
    spec = Structure("spec", VirtualRouterSpec)
    status = Structure("status", VirtualRouterStatus)
    virtual_router_name = String("virtualRouterName")


class AppMeshRequest(ServiceRequest):
    PROTOCOL = RestJsonProtocol()


class CreateVirtualRouterRequest(AppMeshRequest):
    """
    Create a virtual router in a mesh.

    client_token is filled with a fresh UUID on construction so retries of
    the same request instance stay idempotent.
    """

    OPERATION_NAME = "CreateVirtualRouter"
    HTTP = HttpBinding("PUT", "/v20190125/meshes/{meshName}/virtualRouters")

    client_token = String("clientToken", idempotency_token=True)
    mesh_name = String("meshName", location=URI, required=True)
    mesh_owner = String("meshOwner", location=QUERYSTRING)
    spec = Structure("spec", VirtualRouterSpec, required=True)
    tags = List("tags", Structure(shape_cls=TagRef))
    virtual_router_name = String("virtualRouterName", required=True)


class CreateVirtualRouterResult(ServiceResult):
    virtual_router = Structure("virtualRouter", VirtualRouterData, payload=True)


class BadRequestException(ServiceError):
    pass


class ConflictException(ServiceError):
    pass


class ForbiddenException(ServiceError):
    pass


class InternalServerErrorException(ServiceError):
    pass


class LimitExceededException(ServiceError):
    pass


class NotFoundException(ServiceError):
    pass


class ServiceUnavailableException(ServiceError):
    pass


class TooManyRequestsException(ServiceError):
    pass


class AppMeshClient(ServiceClient):
    METADATA = METADATA
    ERRORS = {
        error.__name__: error
        for error in (
            BadRequestException,
            ConflictException,
            ForbiddenException,
            InternalServerErrorException,
            LimitExceededException,
            NotFoundException,
            ServiceUnavailableException,
            TooManyRequestsException,
        )
    }

    @service_operation
    def create_virtual_router(self, request: CreateVirtualRouterRequest) -> CreateVirtualRouterResult:
        return self.make_request(request, CreateVirtualRouterResult)
