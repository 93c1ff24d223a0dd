"""
Unit tests for endpoint resolution.
"""
import pytest

from client.endpoint import EndpointProvider
from config import ClientConfig
from services.codedeploy import GetDeploymentConfigRequest
from services.s3control import GetAccessPointPolicyForObjectLambdaRequest
from utils.exceptions import EndpointResolutionError


class TestEndpointProvider:
    """Tests for EndpointProvider."""

    def test_regional_endpoint(self):
        """Test the endpoint is derived from prefix, region and scheme."""
        provider = EndpointProvider('codedeploy', ClientConfig(region='eu-central-1'))
        assert provider.resolve_endpoint(GetDeploymentConfigRequest()) == (
            'https://codedeploy.eu-central-1.amazonaws.com'
        )

    def test_china_partition(self):
        """Test China regions use the .com.cn suffix."""
        provider = EndpointProvider('codedeploy', ClientConfig(region='cn-north-1', scheme='http'))
        assert provider.base_endpoint == 'http://codedeploy.cn-north-1.amazonaws.com.cn'

    def test_config_override(self):
        """Test an endpoint override from config replaces the regional host."""
        provider = EndpointProvider('codedeploy', ClientConfig(endpoint_override='http://localhost:4566/'))
        assert provider.resolve_endpoint(GetDeploymentConfigRequest()) == 'http://localhost:4566'

    def test_override_endpoint_adds_scheme(self):
        """Test override_endpoint accepts a bare host and applies the scheme."""
        provider = EndpointProvider('codedeploy', ClientConfig())
        provider.override_endpoint('vpce-1.codedeploy.us-east-1.vpce.amazonaws.com')
        assert provider.base_endpoint == 'https://vpce-1.codedeploy.us-east-1.vpce.amazonaws.com'

    def test_host_prefix_expanded(self):
        """Test the account id becomes the leading host label."""
        provider = EndpointProvider('s3-control', ClientConfig(region='us-west-2'))
        request = GetAccessPointPolicyForObjectLambdaRequest(account_id='123456789012', name='olap-1')
        assert provider.resolve_endpoint(request) == 'https://123456789012.s3-control.us-west-2.amazonaws.com'

    def test_host_prefix_applies_to_override(self):
        """Test host prefixes are also applied in front of an overridden host."""
        provider = EndpointProvider('s3-control', ClientConfig(endpoint_override='http://localhost:4566'))
        request = GetAccessPointPolicyForObjectLambdaRequest(account_id='123456789012', name='olap-1')
        assert provider.resolve_endpoint(request) == 'http://123456789012.localhost:4566'

    def test_missing_host_label(self):
        """Test an unset host label fails resolution."""
        provider = EndpointProvider('s3-control', ClientConfig())
        request = GetAccessPointPolicyForObjectLambdaRequest(name='olap-1')
        with pytest.raises(EndpointResolutionError, match="AccountId") as exc_info:
            provider.resolve_endpoint(request)
        assert exc_info.value.operation == 'GetAccessPointPolicyForObjectLambda'

    def test_invalid_host_label(self):
        """Test a host label that is not a DNS label fails resolution."""
        provider = EndpointProvider('s3-control', ClientConfig())
        request = GetAccessPointPolicyForObjectLambdaRequest(account_id='evil.example.com/', name='olap-1')
        with pytest.raises(EndpointResolutionError, match="not a valid DNS label"):
            provider.resolve_endpoint(request)
