"""
Unit tests for the AWS JSON protocol.
"""
import json

import pytest

from protocols.base import HttpResponse
from services.codedeploy import (
    CodeDeployClient,
    ComputePlatform,
    DeploymentConfigDoesNotExistException,
    GetDeploymentConfigRequest,
    GetDeploymentConfigResult,
)
from services.athena import (
    CreateNotebookRequest,
    DeleteNotebookRequest,
    ListApplicationDPUSizesResult,
    ListExecutorsResult,
    ExecutorType,
)
from utils.exceptions import ResponseParseError, ServiceError


class TestJsonRequests:
    """Tests for JSON request rendering."""

    def test_get_deployment_config_payload(self):
        """Test the payload and operation name of GetDeploymentConfig."""
        request = GetDeploymentConfigRequest().with_deployment_config_name('prod-config')
        assert request.serialize_payload() == '{"deploymentConfigName":"prod-config"}'
        assert request.get_service_request_name() == 'GetDeploymentConfig'

    def test_unset_request_serializes_empty_object(self):
        """Test a request with nothing set renders an empty JSON object."""
        assert GetDeploymentConfigRequest().serialize_payload() == '{}'

    def test_target_and_content_type_headers(self):
        """Test X-Amz-Target and Content-Type carry prefix, operation and version."""
        headers = GetDeploymentConfigRequest().get_request_specific_headers()
        assert headers == {
            'X-Amz-Target': 'CodeDeploy_20141006.GetDeploymentConfig',
            'Content-Type': 'application/x-amz-json-1.1',
        }

    def test_json_protocol_has_no_query_string(self):
        """Test JSON requests add nothing to the URI."""
        request = DeleteNotebookRequest(notebook_id='nb-1')
        assert request.get_query_string_parameters() == []
        assert request.add_query_string_parameters('/') == '/'
        assert request.dump_body_to_url('/') == '/'

    def test_build_http_request(self):
        """Test the rendered HTTP request posts to the endpoint root."""
        request = CreateNotebookRequest(work_group='primary', name='analysis')
        http_request = request.PROTOCOL.build_http_request(request, 'https://athena.us-east-1.amazonaws.com/')

        assert http_request.method == 'POST'
        assert http_request.url == 'https://athena.us-east-1.amazonaws.com/'
        assert http_request.headers['X-Amz-Target'] == 'AmazonAthena.CreateNotebook'
        assert json.loads(http_request.body) == {'WorkGroup': 'primary', 'Name': 'analysis'}


class TestJsonResponses:
    """Tests for JSON result and error parsing."""

    def test_parse_result(self):
        """Test a result document is parsed into nested shapes."""
        response = HttpResponse(
            status_code=200,
            headers={'x-amzn-RequestId': 'req-1'},
            body=json.dumps({
                'deploymentConfigInfo': {
                    'deploymentConfigName': 'prod-config',
                    'computePlatform': 'Lambda',
                    'trafficRoutingConfig': {
                        'type': 'TimeBasedCanary',
                        'timeBasedCanary': {'canaryPercentage': 10, 'canaryInterval': 5},
                    },
                },
            }).encode('utf-8'),
        )
        protocol = GetDeploymentConfigRequest.PROTOCOL
        result = protocol.parse_result(GetDeploymentConfigResult, response)

        info = result.deployment_config_info
        assert info.deployment_config_name == 'prod-config'
        assert info.compute_platform is ComputePlatform.LAMBDA
        assert info.traffic_routing_config.time_based_canary.canary_percentage == 10
        assert info.is_set('minimum_healthy_hosts') is False
        assert result.response_metadata.request_id == 'req-1'
        assert result.response_metadata.http_status_code == 200

    def test_parse_list_results(self):
        """Test lists of structures and of integers are decoded."""
        protocol = CreateNotebookRequest.PROTOCOL
        executors = protocol.parse_result(ListExecutorsResult, HttpResponse(
            status_code=200,
            body=b'{"SessionId":"s-1","ExecutorsSummary":[{"ExecutorId":"e-1","ExecutorType":"WORKER","ExecutorSize":4}]}',
        ))
        assert executors.session_id == 's-1'
        assert executors.executors_summary[0].executor_type is ExecutorType.WORKER
        assert executors.is_set('next_token') is False

        sizes = protocol.parse_result(ListApplicationDPUSizesResult, HttpResponse(
            status_code=200,
            body=b'{"ApplicationDPUSizes":[{"ApplicationRuntimeId":"Athena notebook version 1","SupportedDPUSizes":[1,2,4]}]}',
        ))
        assert sizes.application_dpu_sizes[0].supported_dpu_sizes == [1, 2, 4]

    def test_empty_body_is_empty_result(self):
        """Test an empty 200 body yields a result with nothing set."""
        protocol = GetDeploymentConfigRequest.PROTOCOL
        result = protocol.parse_result(GetDeploymentConfigResult, HttpResponse(status_code=200))
        assert result.set_fields() == []

    def test_invalid_json_raises(self):
        """Test a malformed body raises ResponseParseError."""
        protocol = GetDeploymentConfigRequest.PROTOCOL
        with pytest.raises(ResponseParseError):
            protocol.parse_result(GetDeploymentConfigResult, HttpResponse(status_code=200, body=b'{not json'))

    def test_modeled_error_from_body_type(self):
        """Test __type selects the modeled error class and strips the namespace."""
        response = HttpResponse(
            status_code=400,
            headers={'x-amzn-RequestId': 'req-2'},
            body=b'{"__type":"com.amazonaws.codedeploy#DeploymentConfigDoesNotExistException","message":"no such config"}',
        )
        error = GetDeploymentConfigRequest.PROTOCOL.parse_error(response, CodeDeployClient.ERRORS)

        assert isinstance(error, DeploymentConfigDoesNotExistException)
        assert error.error_code == 'DeploymentConfigDoesNotExistException'
        assert error.message == 'no such config'
        assert error.status_code == 400
        assert error.request_id == 'req-2'
        assert str(error) == 'DeploymentConfigDoesNotExistException: no such config'

    def test_error_type_header_wins(self):
        """Test the x-amzn-ErrorType header is preferred and its suffix dropped."""
        response = HttpResponse(
            status_code=400,
            headers={'X-Amzn-ErrorType': 'ThrottlingException:http://internal.amazon.com/coral/'},
            body=b'{"Message":"Rate exceeded"}',
        )
        error = GetDeploymentConfigRequest.PROTOCOL.parse_error(response, CodeDeployClient.ERRORS)

        assert type(error) is ServiceError
        assert error.error_code == 'ThrottlingException'
        assert error.message == 'Rate exceeded'

    def test_error_without_body(self):
        """Test an error with no body still produces a ServiceError."""
        error = GetDeploymentConfigRequest.PROTOCOL.parse_error(HttpResponse(status_code=503))
        assert error.error_code is None
        assert error.message == 'Service returned HTTP 503'
