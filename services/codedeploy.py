"""
AWS CodeDeploy (JSON 1.1 protocol).
"""
from enum import Enum

from client.base import ServiceClient, ServiceMetadata
from model import (
    EnumField,
    Integer,
    List,
    ServiceRequest,
    ServiceResult,
    Shape,
    String,
    Structure,
    Timestamp,
)
from protocols.json_rpc import JsonProtocol
from utils.decorators import service_operation
from utils.exceptions import ServiceError

METADATA = ServiceMetadata(
    service_name="CodeDeploy",
    endpoint_prefix="codedeploy",
    signing_name="codedeploy",
    api_version="2014-10-06",
)


class ComputePlatform(str, Enum):
    SERVER = "Server"
    LAMBDA = "Lambda"
    ECS = "ECS"


class MinimumHealthyHostsType(str, Enum):
    HOST_COUNT = "HOST_COUNT"
    FLEET_PERCENT = "FLEET_PERCENT"


class TrafficRoutingType(str, Enum):
    TIME_BASED_CANARY = "TimeBasedCanary"
    TIME_BASED_LINEAR = "TimeBasedLinear"
    ALL_AT_ONCE = "AllAtOnce"


class MinimumHealthyHosts(Shape):
    type = EnumField("type", MinimumHealthyHostsType)
    value = Integer("value")


class TimeBasedCanary(Shape):
    canary_percentage = Integer("canaryPercentage")
    canary_interval = Integer("canaryInterval")


class TimeBasedLinear(Shape):
    linear_percentage = Integer("linearPercentage")
    linear_interval = Integer("linearInterval")


class TrafficRoutingConfig(Shape):
    type = EnumField("type", TrafficRoutingType)
    time_based_canary = Structure("timeBasedCanary", TimeBasedCanary)
    time_based_linear = Structure("timeBasedLinear", TimeBasedLinear)


class DeploymentConfigInfo(Shape):
    """Properties of one deployment configuration."""

    deployment_config_id = String("deploymentConfigId")
    deployment_config_name = String("deploymentConfigName")
    minimum_healthy_hosts = Structure("minimumHealthyHosts", MinimumHealthyHosts)
    create_time = Timestamp("createTime")
    compute_platform = EnumField("computePlatform", ComputePlatform)
    traffic_routing_config = Structure("trafficRoutingConfig", TrafficRoutingConfig)


class DeploymentGroupInfo(Shape):
    application_name = String("applicationName")
    deployment_group_id = String("deploymentGroupId")
    deployment_group_name = String("deploymentGroupName")
    deployment_config_name = String("deploymentConfigName")
    service_role_arn = String("serviceRoleArn")
    compute_platform = EnumField("computePlatform", ComputePlatform)


class CodeDeployRequest(ServiceRequest):
    PROTOCOL = JsonProtocol("CodeDeploy_20141006", json_version="1.1")


class GetDeploymentConfigRequest(CodeDeployRequest):
    """Represents the input of a GetDeploymentConfig operation."""

    OPERATION_NAME = "GetDeploymentConfig"

    deployment_config_name = String("deploymentConfigName", required=True)


class GetDeploymentConfigResult(ServiceResult):
    deployment_config_info = Structure("deploymentConfigInfo", DeploymentConfigInfo)


class BatchGetDeploymentGroupsRequest(CodeDeployRequest):
    """Represents the input of a BatchGetDeploymentGroups operation."""

    OPERATION_NAME = "BatchGetDeploymentGroups"

    application_name = String("applicationName", required=True)
    deployment_group_names = List("deploymentGroupNames", String(), required=True)


class BatchGetDeploymentGroupsResult(ServiceResult):
    deployment_groups_info = List("deploymentGroupsInfo", Structure(shape_cls=DeploymentGroupInfo))
    error_message = String("errorMessage")


class ApplicationNameRequiredException(ServiceError):
    pass


class ApplicationDoesNotExistException(ServiceError):
    pass


class DeploymentConfigDoesNotExistException(ServiceError):
    pass


class DeploymentConfigNameRequiredException(ServiceError):
    pass


class InvalidDeploymentConfigNameException(ServiceError):
    pass


class BatchLimitExceededException(ServiceError):
    pass


class CodeDeployClient(ServiceClient):
    """Client for the CodeDeploy operations modeled here."""

    METADATA = METADATA
    ERRORS = {
        error.__name__: error
        for error in (
            ApplicationNameRequiredException,
            ApplicationDoesNotExistException,
            DeploymentConfigDoesNotExistException,
            DeploymentConfigNameRequiredException,
            InvalidDeploymentConfigNameException,
            BatchLimitExceededException,
        )
    }

    @service_operation
    def get_deployment_config(self, request: GetDeploymentConfigRequest) -> GetDeploymentConfigResult:
        return self.make_request(request, GetDeploymentConfigResult)

    @service_operation
    def batch_get_deployment_groups(self, request: BatchGetDeploymentGroupsRequest) -> BatchGetDeploymentGroupsResult:
        return self.make_request(request, BatchGetDeploymentGroupsResult)
