"""
Unit tests for the REST-JSON protocol.
"""
import json

from protocols.base import HttpResponse
from services.apigatewayv2 import GetApiMappingsRequest, GetApiMappingsResult
from services.appmesh import (
    CreateVirtualRouterRequest,
    CreateVirtualRouterResult,
    PortMapping,
    PortProtocol,
    VirtualRouterListener,
    VirtualRouterSpec,
    VirtualRouterStatusCode,
)
from services.lambda_ import (
    Architecture,
    GetFunctionEventInvokeConfigRequest,
    GetFunctionEventInvokeConfigResult,
    GetLayerVersionRequest,
    GetLayerVersionResult,
    GetProvisionedConcurrencyConfigRequest,
    ListLayersRequest,
    LambdaClient,
    ProvisionedConcurrencyConfigNotFoundException,
    Runtime,
)

ENDPOINT = 'https://lambda.us-east-1.amazonaws.com'


class TestRestJsonRequests:
    """Tests for URI, query-string and body binding."""

    def test_uri_labels_substituted(self):
        """Test path labels are filled in and the body stays empty."""
        request = GetLayerVersionRequest(layer_name='my-layer', version_number=3)
        http_request = request.PROTOCOL.build_http_request(request, ENDPOINT)

        assert http_request.method == 'GET'
        assert http_request.url == ENDPOINT + '/2018-10-31/layers/my-layer/versions/3'
        assert http_request.body == b''
        assert 'Content-Type' not in http_request.headers

    def test_uri_labels_percent_encoded(self):
        """Test reserved characters in labels are encoded, including slashes."""
        request = GetProvisionedConcurrencyConfigRequest(
            function_name='arn:aws:lambda:us-east-1:123456789012:function:my fn',
            qualifier='live',
        )
        assert request.resolve_request_uri() == (
            '/2019-09-30/functions/arn%3Aaws%3Alambda%3Aus-east-1%3A123456789012%3Afunction%3Amy%20fn'
            '/provisioned-concurrency'
        )
        assert request.get_query_string_parameters() == [('Qualifier', 'live')]

    def test_unset_query_parameters_omitted(self):
        """Test only present query members reach the URI."""
        request = ListLayersRequest()
        assert request.add_query_string_parameters('/2018-10-31/layers') == '/2018-10-31/layers'

        request.compatible_runtime = Runtime.PYTHON3_9
        request.max_items = 10
        request.compatible_architecture = 'arm64'
        assert request.compatible_architecture is Architecture.ARM64
        assert request.add_query_string_parameters('/2018-10-31/layers') == (
            '/2018-10-31/layers?CompatibleRuntime=python3.9&MaxItems=10&CompatibleArchitecture=arm64'
        )

    def test_optional_query_parameter(self):
        """Test the qualifier is only sent when set."""
        request = GetFunctionEventInvokeConfigRequest(function_name='my-function')
        http_request = request.PROTOCOL.build_http_request(request, ENDPOINT)
        assert http_request.url == ENDPOINT + '/2019-09-25/functions/my-function/event-invoke-config'

        request.qualifier = '$LATEST'
        http_request = request.PROTOCOL.build_http_request(request, ENDPOINT)
        assert http_request.url.endswith('/event-invoke-config?Qualifier=%24LATEST')

    def test_lower_camel_query_names(self):
        """Test query members keep their modeled casing."""
        request = GetApiMappingsRequest(domain_name='api.example.com', max_results='25', next_token='abc')
        http_request = request.PROTOCOL.build_http_request(request, 'https://apigateway.us-east-1.amazonaws.com')
        assert http_request.url == (
            'https://apigateway.us-east-1.amazonaws.com/v2/domainnames/api.example.com/apimappings'
            '?maxResults=25&nextToken=abc'
        )

    def test_body_excludes_uri_and_query_members(self):
        """Test the JSON body carries only body members, with the idempotency token."""
        spec = VirtualRouterSpec().add_listeners(
            VirtualRouterListener(port_mapping=PortMapping(port=8080, protocol=PortProtocol.HTTP))
        )
        request = CreateVirtualRouterRequest(
            client_token='token-1',
            mesh_name='apps',
            mesh_owner='123456789012',
            spec=spec,
            virtual_router_name='router-a',
        )
        http_request = request.PROTOCOL.build_http_request(request, 'https://appmesh.us-east-1.amazonaws.com')

        assert http_request.method == 'PUT'
        assert http_request.url == (
            'https://appmesh.us-east-1.amazonaws.com/v20190125/meshes/apps/virtualRouters?meshOwner=123456789012'
        )
        assert http_request.headers['Content-Type'] == 'application/json'
        assert json.loads(http_request.body) == {
            'clientToken': 'token-1',
            'spec': {'listeners': [{'portMapping': {'port': 8080, 'protocol': 'http'}}]},
            'virtualRouterName': 'router-a',
        }


class TestRestJsonResponses:
    """Tests for REST-JSON result and error parsing."""

    def test_parse_layer_version(self):
        """Test top-level body members and enum lists are parsed."""
        body = json.dumps({
            'Content': {'Location': 'https://example.com/layer.zip', 'CodeSize': 2048},
            'LayerArn': 'arn:aws:lambda:us-east-1:123456789012:layer:my-layer',
            'Version': 3,
            'CompatibleRuntimes': ['python3.9', 'python3.12'],
            'CompatibleArchitectures': ['x86_64'],
        }).encode('utf-8')
        result = GetLayerVersionRequest.PROTOCOL.parse_result(
            GetLayerVersionResult,
            HttpResponse(status_code=200, headers={'x-amzn-RequestId': 'lambda-1'}, body=body),
        )
        assert result.content.code_size == 2048
        assert result.version == 3
        assert result.compatible_runtimes == [Runtime.PYTHON3_9, 'python3.12']
        assert result.compatible_architectures == [Architecture.X86_64]
        assert result.response_metadata.request_id == 'lambda-1'

    def test_parse_epoch_timestamp(self):
        """Test epoch-second timestamps in the body become datetimes."""
        body = b'{"LastModified":1690000000.0,"FunctionArn":"arn:f","MaximumRetryAttempts":2,' \
               b'"DestinationConfig":{"OnFailure":{"Destination":"arn:sqs"}}}'
        result = GetFunctionEventInvokeConfigRequest.PROTOCOL.parse_result(
            GetFunctionEventInvokeConfigResult, HttpResponse(status_code=200, body=body)
        )
        assert result.last_modified.timestamp() == 1690000000.0
        assert result.destination_config.on_failure.destination == 'arn:sqs'
        assert result.destination_config.is_set('on_success') is False

    def test_parse_payload_structure(self):
        """Test a payload member receives the whole body document."""
        body = json.dumps({
            'meshName': 'apps',
            'virtualRouterName': 'router-a',
            'status': {'status': 'ACTIVE'},
            'metadata': {'arn': 'arn:router', 'version': 1, 'createdAt': 1690000000},
        }).encode('utf-8')
        result = CreateVirtualRouterRequest.PROTOCOL.parse_result(
            CreateVirtualRouterResult, HttpResponse(status_code=200, body=body)
        )
        router = result.virtual_router
        assert router.virtual_router_name == 'router-a'
        assert router.status.status is VirtualRouterStatusCode.ACTIVE
        assert router.metadata.version == 1

    def test_parse_mapping_items(self):
        """Test list results are parsed element by element."""
        body = b'{"items":[{"apiId":"a1","apiMappingId":"m1","stage":"prod"}],"nextToken":"n2"}'
        result = GetApiMappingsRequest.PROTOCOL.parse_result(
            GetApiMappingsResult, HttpResponse(status_code=200, body=body)
        )
        assert result.items[0].stage == 'prod'
        assert result.items[0].is_set('api_mapping_key') is False
        assert result.next_token == 'n2'

    def test_parse_error_from_header(self):
        """Test the error type header selects the modeled exception."""
        response = HttpResponse(
            status_code=404,
            headers={
                'x-amzn-ErrorType': 'ProvisionedConcurrencyConfigNotFoundException',
                'x-amzn-RequestId': 'lambda-2',
            },
            body=b'{"Type":"User","message":"No Provisioned Concurrency Config found for this function"}',
        )
        error = GetLayerVersionRequest.PROTOCOL.parse_error(response, LambdaClient.ERRORS)
        assert isinstance(error, ProvisionedConcurrencyConfigNotFoundException)
        assert error.status_code == 404
        assert error.request_id == 'lambda-2'
        assert error.response_data['Type'] == 'User'
