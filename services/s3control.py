"""
Amazon S3 Control Object Lambda access point policies (REST-XML protocol).

Every operation is addressed to the account's own control endpoint:
the AccountId member is sent as the x-amz-account-id header and also
becomes the leading label of the host name.
"""
from client.base import ServiceClient, ServiceMetadata
from model import EmptyResult, HttpBinding, ServiceRequest, ServiceResult, String
from model.fields import HEADER, URI
from protocols.rest_xml import RestXmlProtocol
from utils.decorators import service_operation

METADATA = ServiceMetadata(
    service_name="S3 Control",
    endpoint_prefix="s3-control",
    signing_name="s3",
    api_version="2018-08-20",
)

XML_NAMESPACE = "http://awss3control.amazonaws.com/doc/2018-08-20/"

POLICY_URI = "/v20180820/accesspointforobjectlambda/{name}/policy"


class S3ControlRequest(ServiceRequest):
    PROTOCOL = RestXmlProtocol(XML_NAMESPACE)

    account_id = String(
        "x-amz-account-id",
        location=HEADER,
        required=True,
        context_param="AccountId",
    )


class GetAccessPointPolicyForObjectLambdaRequest(S3ControlRequest):
    OPERATION_NAME = "GetAccessPointPolicyForObjectLambda"
    HTTP = HttpBinding("GET", POLICY_URI, host_prefix="{AccountId}.")

    name = String("name", location=URI, required=True)


class GetAccessPointPolicyForObjectLambdaResult(ServiceResult):
    policy = String("Policy")


class PutAccessPointPolicyForObjectLambdaRequest(S3ControlRequest):
    OPERATION_NAME = "PutAccessPointPolicyForObjectLambda"
    HTTP = HttpBinding("PUT", POLICY_URI, host_prefix="{AccountId}.")
    XML_ROOT = "PutAccessPointPolicyForObjectLambdaRequest"

    name = String("name", location=URI, required=True)
    policy = String("Policy", required=True)


class DeleteAccessPointPolicyForObjectLambdaRequest(S3ControlRequest):
    OPERATION_NAME = "DeleteAccessPointPolicyForObjectLambda"
    HTTP = HttpBinding("DELETE", POLICY_URI, host_prefix="{AccountId}.")

    name = String("name", location=URI, required=True)


class S3ControlClient(ServiceClient):
    """Errors from S3 Control are not modeled and surface as ServiceError."""

    METADATA = METADATA

    @service_operation
    def get_access_point_policy_for_object_lambda(
        self, request: GetAccessPointPolicyForObjectLambdaRequest
    ) -> GetAccessPointPolicyForObjectLambdaResult:
        return self.make_request(request, GetAccessPointPolicyForObjectLambdaResult)

    @service_operation
    def put_access_point_policy_for_object_lambda(
        self, request: PutAccessPointPolicyForObjectLambdaRequest
    ) -> EmptyResult:
        return self.make_request(request, EmptyResult)

    @service_operation
    def delete_access_point_policy_for_object_lambda(
        self, request: DeleteAccessPointPolicyForObjectLambdaRequest
    ) -> EmptyResult:
        return self.make_request(request, EmptyResult)
