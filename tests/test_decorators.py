"""
Unit tests for the service operation decorator.
"""
import pytest
from unittest.mock import patch

from services.codedeploy import GetDeploymentConfigRequest
from utils.decorators import current_invocation_id, service_operation


class FakeClient:
    SERVICE_NAME = "CodeDeploy"

    @service_operation
    def get_deployment_config(self, request):
        return current_invocation_id.get()

    @service_operation
    def failing(self, request):
        raise RuntimeError("boom")


class TestServiceOperation:
    """Tests for service_operation decorator."""

    def test_invocation_id_set_during_call(self):
        """Test the wrapped method sees a fresh invocation id."""
        client = FakeClient()
        first = client.get_deployment_config(GetDeploymentConfigRequest())
        second = client.get_deployment_config(GetDeploymentConfigRequest())

        assert first and second
        assert first != second
        assert current_invocation_id.get() is None

    @patch('utils.decorators.logger')
    def test_logs_invocation_and_completion(self, mock_logger):
        """Test invocation and completion are logged with the operation name."""
        FakeClient().get_deployment_config(GetDeploymentConfigRequest())

        messages = [call.args[0] for call in mock_logger.info.call_args_list]
        assert messages[0] == "Operation CodeDeploy.GetDeploymentConfig invoked"
        assert messages[1].startswith("Operation CodeDeploy.GetDeploymentConfig completed in ")
        assert mock_logger.info.call_args_list[0].kwargs['extra']['operation'] == 'GetDeploymentConfig'

    @patch('utils.decorators.logger')
    def test_failure_logged_and_reraised(self, mock_logger):
        """Test errors are logged with traceback and propagate unchanged."""
        with pytest.raises(RuntimeError, match="boom"):
            FakeClient().failing(GetDeploymentConfigRequest())

        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.kwargs['exc_info'] is True
        assert current_invocation_id.get() is None

    def test_wraps_metadata(self):
        """Test functools.wraps keeps the method name."""
        assert FakeClient.get_deployment_config.__name__ == 'get_deployment_config'
