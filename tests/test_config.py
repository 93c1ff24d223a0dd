"""
Unit tests for configuration module.
"""
import pytest
import os
from unittest.mock import patch
from config import ClientConfig, get_config


class TestClientConfig:
    """Tests for ClientConfig class."""

    @patch.dict(os.environ, {}, clear=True)
    def test_from_env_defaults(self):
        """Test ClientConfig.from_env with no variables set."""
        config = ClientConfig.from_env()
        assert config.region == 'us-east-1'
        assert config.endpoint_override is None
        assert config.scheme == 'https'
        assert config.connect_timeout == 1.0
        assert config.request_timeout == 3.0
        assert config.max_connections == 25
        assert config.verify_ssl is True
        assert config.profile_name is None
        assert config.log_level == 'INFO'

    @patch.dict(os.environ, {
        'AWS_REGION': 'eu-west-1',
        'AWS_ENDPOINT_URL': 'http://localhost:4566',
        'AWS_SDK_SCHEME': 'HTTP',
        'AWS_SDK_CONNECT_TIMEOUT': '2.5',
        'AWS_SDK_REQUEST_TIMEOUT': '10',
        'AWS_SDK_MAX_CONNECTIONS': '4',
        'AWS_SDK_VERIFY_SSL': 'false',
        'AWS_PROFILE': 'ci',
        'LOG_LEVEL': 'debug',
    }, clear=True)
    def test_from_env_all_variables(self):
        """Test ClientConfig.from_env with all variables set."""
        config = ClientConfig.from_env()
        assert config.region == 'eu-west-1'
        assert config.endpoint_override == 'http://localhost:4566'
        assert config.scheme == 'http'
        assert config.connect_timeout == 2.5
        assert config.request_timeout == 10.0
        assert config.max_connections == 4
        assert config.verify_ssl is False
        assert config.profile_name == 'ci'
        assert config.log_level == 'DEBUG'

    @patch.dict(os.environ, {'AWS_DEFAULT_REGION': 'ap-south-1'}, clear=True)
    def test_from_env_default_region_fallback(self):
        """Test AWS_DEFAULT_REGION is used when AWS_REGION is unset."""
        assert ClientConfig.from_env().region == 'ap-south-1'

    @patch.dict(os.environ, {'LOG_LEVEL': 'INVALID'}, clear=True)
    def test_from_env_invalid_log_level(self):
        """Test ClientConfig.from_env raises error for invalid log level."""
        with pytest.raises(ValueError, match="LOG_LEVEL"):
            ClientConfig.from_env()

    @patch.dict(os.environ, {'AWS_SDK_SCHEME': 'ftp'}, clear=True)
    def test_from_env_invalid_scheme(self):
        """Test ClientConfig.from_env raises error for unsupported scheme."""
        with pytest.raises(ValueError, match="AWS_SDK_SCHEME"):
            ClientConfig.from_env()

    @patch.dict(os.environ, {'AWS_SDK_CONNECT_TIMEOUT': 'soon'}, clear=True)
    def test_from_env_invalid_timeout(self):
        """Test ClientConfig.from_env raises error for non-numeric timeout."""
        with pytest.raises(ValueError, match="AWS_SDK_CONNECT_TIMEOUT"):
            ClientConfig.from_env()

    @patch.dict(os.environ, {'AWS_SDK_REQUEST_TIMEOUT': '-1'}, clear=True)
    def test_from_env_negative_timeout(self):
        """Test ClientConfig.from_env rejects non-positive timeouts."""
        with pytest.raises(ValueError, match="AWS_SDK_REQUEST_TIMEOUT"):
            ClientConfig.from_env()

    @patch.dict(os.environ, {'AWS_SDK_MAX_CONNECTIONS': '0'}, clear=True)
    def test_from_env_invalid_max_connections(self):
        """Test ClientConfig.from_env rejects a pool size below one."""
        with pytest.raises(ValueError, match="AWS_SDK_MAX_CONNECTIONS"):
            ClientConfig.from_env()

    @patch.dict(os.environ, {'AWS_SDK_VERIFY_SSL': 'maybe'}, clear=True)
    def test_from_env_invalid_verify_ssl(self):
        """Test ClientConfig.from_env raises error for non-boolean flag."""
        with pytest.raises(ValueError, match="AWS_SDK_VERIFY_SSL"):
            ClientConfig.from_env()

    @patch.dict(os.environ, {}, clear=True)
    def test_get_config_singleton(self):
        """Test get_config returns singleton instance."""
        # Reset global config
        import config
        config._config = None

        config1 = get_config()
        config2 = get_config()

        assert config1 is config2
        config._config = None
