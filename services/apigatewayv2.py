"""
Amazon API Gateway V2 API mappings (REST-JSON protocol).
"""
from client.base import ServiceClient, ServiceMetadata
from model import HttpBinding, List, ServiceRequest, ServiceResult, Shape, String, Structure
from model.fields import QUERYSTRING, URI
from protocols.rest_json import RestJsonProtocol
from utils.decorators import service_operation
from utils.exceptions import ServiceError

METADATA = ServiceMetadata(
    service_name="ApiGatewayV2",
    endpoint_prefix="apigateway",
    signing_name="apigateway",
    api_version="2018-11-29",
)


class ApiMapping(Shape):
    api_id = String("apiId")
    api_mapping_id = String("apiMappingId")
    api_mapping_key = String("apiMappingKey")
    stage = String("stage")


class ApiGatewayV2Request(ServiceRequest):
    PROTOCOL = RestJsonProtocol()


class GetApiMappingsRequest(ApiGatewayV2Request):
    """
    List the API mappings of a custom domain name.

    maxResults is modeled as a string by the service, so it is sent as
    given rather than as a number.
    """

    OPERATION_NAME = "GetApiMappings"
    HTTP = HttpBinding("GET", "/v2/domainnames/{domainName}/apimappings")

    domain_name = String("domainName", location=URI, required=True)
    max_results = String("maxResults", location=QUERYSTRING)
    next_token = String("nextToken", location=QUERYSTRING)


class GetApiMappingsResult(ServiceResult):
    items = List("items", Structure(shape_cls=ApiMapping))
    next_token = String("nextToken")


class BadRequestException(ServiceError):
    pass


class NotFoundException(ServiceError):
    pass


class TooManyRequestsException(ServiceError):
    pass


class ApiGatewayV2Client(ServiceClient):
    METADATA = METADATA
    ERRORS = {
        error.__name__: error
        for error in (BadRequestException, NotFoundException, TooManyRequestsException)
    }

    @service_operation
    def get_api_mappings(self, request: GetApiMappingsRequest) -> GetApiMappingsResult:
        return self.make_request(request, GetApiMappingsResult)
