"""
Amazon EC2 internet gateway operations (EC2 protocol, API version 2016-11-15).

Request members carry the capitalized names EC2 expects on the query
string; response members use the camel-case element names of the XML.
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
)
from protocols.query import Ec2Protocol
from utils.decorators import service_operation
from utils.exceptions import ServiceError

METADATA = ServiceMetadata(
    service_name="EC2",
    endpoint_prefix="ec2",
    signing_name="ec2",
    api_version="2016-11-15",
)


class AttachmentStatus(str, Enum):
    ATTACHING = "attaching"
    ATTACHED = "attached"
    DETACHING = "detaching"
    DETACHED = "detached"
    AVAILABLE = "available"


class Filter(Shape):
    """Name and values of one Describe* filter, e.g. attachment.vpc-id."""

    name = String("Name")
    values = List("Values", String(), ec2_name="Value")


class Tag(Shape):
    key = String("key")
    value = String("value")


class InternetGatewayAttachment(Shape):
    state = EnumField("state", AttachmentStatus)
    vpc_id = String("vpcId")


class InternetGateway(Shape):
    attachments = List("attachmentSet", Structure(shape_cls=InternetGatewayAttachment))
    internet_gateway_id = String("internetGatewayId")
    owner_id = String("ownerId")
    tags = List("tagSet", Structure(shape_cls=Tag))


class EC2Request(ServiceRequest):
    PROTOCOL = Ec2Protocol(api_version=METADATA.api_version)


class DetachInternetGatewayRequest(EC2Request):
    OPERATION_NAME = "DetachInternetGateway"

    dry_run = Boolean("dryRun", ec2_name="DryRun")
    internet_gateway_id = String("internetGatewayId", ec2_name="InternetGatewayId", required=True)
    vpc_id = String("vpcId", ec2_name="VpcId", required=True)


class DescribeInternetGatewaysRequest(EC2Request):
    OPERATION_NAME = "DescribeInternetGateways"

    filters = List("Filters", Structure(shape_cls=Filter), ec2_name="Filter")
    dry_run = Boolean("dryRun", ec2_name="DryRun")
    internet_gateway_ids = List("internetGatewayId", String(), ec2_name="InternetGatewayId")
    next_token = String("NextToken")
    max_results = Integer("MaxResults")


class DescribeInternetGatewaysResult(ServiceResult):
    internet_gateways = List("internetGatewaySet", Structure(shape_cls=InternetGateway))
    next_token = String("nextToken")


class DependencyViolation(ServiceError):
    pass


class GatewayNotAttached(ServiceError):
    pass


class InvalidInternetGatewayIDNotFound(ServiceError):
    pass


class DryRunOperation(ServiceError):
    """Returned for dry runs that would have succeeded."""


class EC2Client(ServiceClient):
    METADATA = METADATA
    ERRORS = {
        "DependencyViolation": DependencyViolation,
        "Gateway.NotAttached": GatewayNotAttached,
        "InvalidInternetGatewayID.NotFound": InvalidInternetGatewayIDNotFound,
        "DryRunOperation": DryRunOperation,
    }

    @service_operation
    def detach_internet_gateway(self, request: DetachInternetGatewayRequest) -> EmptyResult:
        return self.make_request(request, EmptyResult)

    @service_operation
    def describe_internet_gateways(self, request: DescribeInternetGatewaysRequest) -> DescribeInternetGatewaysResult:
        return self.make_request(request, DescribeInternetGatewaysResult)
