"""
AWS Lambda layer and function configuration reads (REST-JSON protocol).

The module is named lambda_ because lambda is a Python keyword.
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
    service_name="Lambda",
    endpoint_prefix="lambda",
    signing_name="lambda",
    api_version="2015-03-31",
)


class Runtime(str, Enum):
    """Runtime identifiers; retired runtimes not listed come back as strings."""

    NODEJS18_X = "nodejs18.x"
    NODEJS16_X = "nodejs16.x"
    NODEJS14_X = "nodejs14.x"
    PYTHON3_7 = "python3.7"
    PYTHON3_8 = "python3.8"
    PYTHON3_9 = "python3.9"
    JAVA8 = "java8"
    JAVA8_AL2 = "java8.al2"
    JAVA11 = "java11"
    DOTNET6 = "dotnet6"
    GO1_X = "go1.x"
    RUBY2_7 = "ruby2.7"
    PROVIDED = "provided"
    PROVIDED_AL2 = "provided.al2"


class Architecture(str, Enum):
    X86_64 = "x86_64"
    ARM64 = "arm64"


class ProvisionedConcurrencyStatus(str, Enum):
    IN_PROGRESS = "IN_PROGRESS"
    READY = "READY"
    FAILED = "FAILED"


class LayerVersionContentOutput(Shape):
    location = String("Location")
    code_sha256 = String("CodeSha256")
    code_size = Integer("CodeSize")
    signing_profile_version_arn = String("SigningProfileVersionArn")
    signing_job_arn = String("SigningJobArn")


class LayerVersionsListItem(Shape):
    layer_version_arn = String("LayerVersionArn")
    version = Integer("Version")
    description = String("Description")
    created_date = String("CreatedDate")
    compatible_runtimes = List("CompatibleRuntimes", EnumField(enum_cls=Runtime))
    license_info = String("LicenseInfo")
    compatible_architectures = List("CompatibleArchitectures", EnumField(enum_cls=Architecture))


class LayersListItem(Shape):
    layer_name = String("LayerName")
    layer_arn = String("LayerArn")
    latest_matching_version = Structure("LatestMatchingVersion", LayerVersionsListItem)


class OnSuccess(Shape):
    destination = String("Destination")


class OnFailure(Shape):
    destination = String("Destination")


class DestinationConfig(Shape):
    """Where asynchronous invocation records are sent."""

    on_success = Structure("OnSuccess", OnSuccess)
    on_failure = Structure("OnFailure", OnFailure)


class LambdaRequest(ServiceRequest):
    PROTOCOL = RestJsonProtocol()


class GetLayerVersionRequest(LambdaRequest):
    OPERATION_NAME = "GetLayerVersion"
    HTTP = HttpBinding("GET", "/2018-10-31/layers/{LayerName}/versions/{VersionNumber}")

    layer_name = String("LayerName", location=URI, required=True)
    version_number = Integer("VersionNumber", location=URI, required=True)


class GetLayerVersionResult(ServiceResult):
    content = Structure("Content", LayerVersionContentOutput)
    layer_arn = String("LayerArn")
    layer_version_arn = String("LayerVersionArn")
    description = String("Description")
    created_date = String("CreatedDate")
    version = Integer("Version")
    compatible_runtimes = List("CompatibleRuntimes", EnumField(enum_cls=Runtime))
    license_info = String("LicenseInfo")
    compatible_architectures = List("CompatibleArchitectures", EnumField(enum_cls=Architecture))


class ListLayersRequest(LambdaRequest):
    """List layers, optionally only those compatible with a runtime or architecture."""

    OPERATION_NAME = "ListLayers"
    HTTP = HttpBinding("GET", "/2018-10-31/layers")

    compatible_runtime = EnumField("CompatibleRuntime", Runtime, location=QUERYSTRING)
    marker = String("Marker", location=QUERYSTRING)
    max_items = Integer("MaxItems", location=QUERYSTRING)
    compatible_architecture = EnumField("CompatibleArchitecture", Architecture, location=QUERYSTRING)


class ListLayersResult(ServiceResult):
    next_marker = String("NextMarker")
    layers = List("Layers", Structure(shape_cls=LayersListItem))


class GetProvisionedConcurrencyConfigRequest(LambdaRequest):
    OPERATION_NAME = "GetProvisionedConcurrencyConfig"
    HTTP = HttpBinding("GET", "/2019-09-30/functions/{FunctionName}/provisioned-concurrency")

    function_name = String("FunctionName", location=URI, required=True)
    qualifier = String("Qualifier", location=QUERYSTRING, required=True)


class GetProvisionedConcurrencyConfigResult(ServiceResult):
    requested_provisioned_concurrent_executions = Integer("RequestedProvisionedConcurrentExecutions")
    available_provisioned_concurrent_executions = Integer("AvailableProvisionedConcurrentExecutions")
    allocated_provisioned_concurrent_executions = Integer("AllocatedProvisionedConcurrentExecutions")
    status = EnumField("Status", ProvisionedConcurrencyStatus)
    status_reason = String("StatusReason")
    last_modified = String("LastModified")


class GetFunctionEventInvokeConfigRequest(LambdaRequest):
    OPERATION_NAME = "GetFunctionEventInvokeConfig"
    HTTP = HttpBinding("GET", "/2019-09-25/functions/{FunctionName}/event-invoke-config")

    function_name = String("FunctionName", location=URI, required=True)
    qualifier = String("Qualifier", location=QUERYSTRING)


class GetFunctionEventInvokeConfigResult(ServiceResult):
    last_modified = Timestamp("LastModified")
    function_arn = String("FunctionArn")
    maximum_retry_attempts = Integer("MaximumRetryAttempts")
    maximum_event_age_in_seconds = Integer("MaximumEventAgeInSeconds")
    destination_config = Structure("DestinationConfig", DestinationConfig)


class InvalidParameterValueException(ServiceError):
    pass


class ResourceNotFoundException(ServiceError):
    pass


class ServiceException(ServiceError):
    pass


class TooManyRequestsException(ServiceError):
    pass


class ProvisionedConcurrencyConfigNotFoundException(ServiceError):
    pass


class LambdaClient(ServiceClient):
    METADATA = METADATA
    ERRORS = {
        error.__name__: error
        for error in (
            InvalidParameterValueException,
            ResourceNotFoundException,
            ServiceException,
            TooManyRequestsException,
            ProvisionedConcurrencyConfigNotFoundException,
        )
    }

    @service_operation
    def get_layer_version(self, request: GetLayerVersionRequest) -> GetLayerVersionResult:
        return self.make_request(request, GetLayerVersionResult)

    @service_operation
    def list_layers(self, request: ListLayersRequest) -> ListLayersResult:
        return self.make_request(request, ListLayersResult)

    @service_operation
    def get_provisioned_concurrency_config(
        self, request: GetProvisionedConcurrencyConfigRequest
    ) -> GetProvisionedConcurrencyConfigResult:
        return self.make_request(request, GetProvisionedConcurrencyConfigResult)

    @service_operation
    def get_function_event_invoke_config(
        self, request: GetFunctionEventInvokeConfigRequest
    ) -> GetFunctionEventInvokeConfigResult:
        return self.make_request(request, GetFunctionEventInvokeConfigResult)
