"""
Amazon RDS (query protocol, API version 2014-10-31).
"""
from enum import Enum

from client.base import ServiceClient, ServiceMetadata
from model import (
    Boolean,
    EmptyResult,
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
from protocols.query import QueryProtocol
from utils.decorators import service_operation
from utils.exceptions import ServiceError

METADATA = ServiceMetadata(
    service_name="RDS",
    endpoint_prefix="rds",
    signing_name="rds",
    api_version="2014-10-31",
)


class ApplyMethod(str, Enum):
    IMMEDIATE = "immediate"
    PENDING_REBOOT = "pending-reboot"


class Parameter(Shape):
    """A DB cluster or instance parameter and how a change to it is applied."""

    parameter_name = String("ParameterName")
    parameter_value = String("ParameterValue")
    description = String("Description")
    source = String("Source")
    apply_type = String("ApplyType")
    data_type = String("DataType")
    allowed_values = String("AllowedValues")
    is_modifiable = Boolean("IsModifiable")
    minimum_engine_version = String("MinimumEngineVersion")
    apply_method = EnumField("ApplyMethod", ApplyMethod)
    supported_engine_modes = List("SupportedEngineModes", String())


class GlobalClusterMember(Shape):
    db_cluster_arn = String("DBClusterArn")
    readers = List("Readers", String())
    is_writer = Boolean("IsWriter")
    global_write_forwarding_status = String("GlobalWriteForwardingStatus")


class GlobalCluster(Shape):
    global_cluster_identifier = String("GlobalClusterIdentifier")
    global_cluster_resource_id = String("GlobalClusterResourceId")
    global_cluster_arn = String("GlobalClusterArn")
    status = String("Status")
    engine = String("Engine")
    engine_version = String("EngineVersion")
    database_name = String("DatabaseName")
    storage_encrypted = Boolean("StorageEncrypted")
    deletion_protection = Boolean("DeletionProtection")
    global_cluster_members = List(
        "GlobalClusterMembers",
        Structure(shape_cls=GlobalClusterMember),
        member_name="GlobalClusterMember",
    )


class EventSubscription(Shape):
    customer_aws_id = String("CustomerAwsId")
    cust_subscription_id = String("CustSubscriptionId")
    sns_topic_arn = String("SnsTopicArn")
    status = String("Status")
    subscription_creation_time = String("SubscriptionCreationTime")
    source_type = String("SourceType")
    source_ids_list = List("SourceIdsList", String(), member_name="SourceId")
    event_categories_list = List("EventCategoriesList", String(), member_name="EventCategory")
    enabled = Boolean("Enabled")
    event_subscription_arn = String("EventSubscriptionArn")


class Endpoint(Shape):
    address = String("Address")
    port = Integer("Port")
    hosted_zone_id = String("HostedZoneId")


class DBInstance(Shape):
    """The subset of DB instance attributes returned by instance operations."""

    db_instance_identifier = String("DBInstanceIdentifier")
    db_instance_class = String("DBInstanceClass")
    engine = String("Engine")
    db_instance_status = String("DBInstanceStatus")
    master_username = String("MasterUsername")
    endpoint = Structure("Endpoint", Endpoint)
    instance_create_time = Timestamp("InstanceCreateTime")
    multi_az = Boolean("MultiAZ")
    db_instance_arn = String("DBInstanceArn")


class RDSRequest(ServiceRequest):
    PROTOCOL = QueryProtocol(api_version=METADATA.api_version)


class AddRoleToDBInstanceRequest(RDSRequest):
    """Associate an IAM role with a DB instance for one feature."""

    OPERATION_NAME = "AddRoleToDBInstance"

    db_instance_identifier = String("DBInstanceIdentifier", required=True)
    role_arn = String("RoleArn", required=True)
    feature_name = String("FeatureName", required=True)


class RemoveFromGlobalClusterRequest(RDSRequest):
    OPERATION_NAME = "RemoveFromGlobalCluster"

    global_cluster_identifier = String("GlobalClusterIdentifier")
    db_cluster_identifier = String("DbClusterIdentifier")


class RemoveFromGlobalClusterResult(ServiceResult):
    global_cluster = Structure("GlobalCluster", GlobalCluster)


class ModifyDBClusterParameterGroupRequest(RDSRequest):
    OPERATION_NAME = "ModifyDBClusterParameterGroup"

    db_cluster_parameter_group_name = String("DBClusterParameterGroupName", required=True)
    parameters = List("Parameters", Structure(shape_cls=Parameter), member_name="Parameter", required=True)


class ModifyDBClusterParameterGroupResult(ServiceResult):
    db_cluster_parameter_group_name = String("DBClusterParameterGroupName")


class AddSourceIdentifierToSubscriptionRequest(RDSRequest):
    OPERATION_NAME = "AddSourceIdentifierToSubscription"

    subscription_name = String("SubscriptionName", required=True)
    source_identifier = String("SourceIdentifier", required=True)


class AddSourceIdentifierToSubscriptionResult(ServiceResult):
    event_subscription = Structure("EventSubscription", EventSubscription)


class RebootDBInstanceRequest(RDSRequest):
    OPERATION_NAME = "RebootDBInstance"

    db_instance_identifier = String("DBInstanceIdentifier", required=True)
    force_failover = Boolean("ForceFailover")


class RebootDBInstanceResult(ServiceResult):
    db_instance = Structure("DBInstance", DBInstance)


class DBInstanceNotFoundFault(ServiceError):
    pass


class DBInstanceRoleAlreadyExistsFault(ServiceError):
    pass


class DBInstanceRoleQuotaExceededFault(ServiceError):
    pass


class InvalidDBInstanceStateFault(ServiceError):
    pass


class GlobalClusterNotFoundFault(ServiceError):
    pass


class DBClusterNotFoundFault(ServiceError):
    pass


class InvalidGlobalClusterStateFault(ServiceError):
    pass


class DBParameterGroupNotFoundFault(ServiceError):
    pass


class InvalidDBParameterGroupStateFault(ServiceError):
    pass


class SubscriptionNotFoundFault(ServiceError):
    pass


class SourceNotFoundFault(ServiceError):
    pass


class RDSClient(ServiceClient):
    """RDS client; error codes on the wire differ from the fault class names."""

    METADATA = METADATA
    ERRORS = {
        "DBInstanceNotFound": DBInstanceNotFoundFault,
        "DBInstanceRoleAlreadyExists": DBInstanceRoleAlreadyExistsFault,
        "DBInstanceRoleQuotaExceeded": DBInstanceRoleQuotaExceededFault,
        "InvalidDBInstanceState": InvalidDBInstanceStateFault,
        "GlobalClusterNotFoundFault": GlobalClusterNotFoundFault,
        "DBClusterNotFoundFault": DBClusterNotFoundFault,
        "InvalidGlobalClusterStateFault": InvalidGlobalClusterStateFault,
        "DBParameterGroupNotFound": DBParameterGroupNotFoundFault,
        "InvalidDBParameterGroupState": InvalidDBParameterGroupStateFault,
        "SubscriptionNotFound": SubscriptionNotFoundFault,
        "SourceNotFound": SourceNotFoundFault,
    }

    @service_operation
    def add_role_to_db_instance(self, request: AddRoleToDBInstanceRequest) -> EmptyResult:
        return self.make_request(request, EmptyResult)

    @service_operation
    def remove_from_global_cluster(self, request: RemoveFromGlobalClusterRequest) -> RemoveFromGlobalClusterResult:
        return self.make_request(request, RemoveFromGlobalClusterResult)

    @service_operation
    def modify_db_cluster_parameter_group(
        self, request: ModifyDBClusterParameterGroupRequest
    ) -> ModifyDBClusterParameterGroupResult:
        return self.make_request(request, ModifyDBClusterParameterGroupResult)

    @service_operation
    def add_source_identifier_to_subscription(
        self, request: AddSourceIdentifierToSubscriptionRequest
    ) -> AddSourceIdentifierToSubscriptionResult:
        return self.make_request(request, AddSourceIdentifierToSubscriptionResult)

    @service_operation
    def reboot_db_instance(self, request: RebootDBInstanceRequest) -> RebootDBInstanceResult:
        return self.make_request(request, RebootDBInstanceResult)
